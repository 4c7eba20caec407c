"""Core functionality for LIFX control.

This package contains:
- config: Configuration file loading and settings
- errors: Exception hierarchy
- directory: Device discovery seam and the inventory-backed directory
- resolver: Target resolution (all / gateway / MAC / name)
- interrupt: Cancellation token and ENTER/timer watchers
- dispatcher: Gateway override, resolution, invocation and release
- transport: Gateway transports and import-path loading
"""
