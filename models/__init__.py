"""Data models and utility functions.

This package contains:
- address: MAC and IPv4 parsing and validation
- devices: Gateway and peripheral bulbs
- colors: HSBK colour values and parsing
- types: TypedDicts for config structures
- utils: Fuzzy matching and formatting helpers
"""
