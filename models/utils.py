"""Utility functions for LIFX control.

This module contains helper functions used across the application:
- similarity_score: Fuzzy string matching used for typo suggestions
- find_similar_strings: Rank candidate names against a typed name
- pluralise: Simple count-aware noun formatting for CLI output
"""


def similarity_score(s1: str, s2: str) -> int:
    """Calculate similarity score between two strings.

    Used for both command typo suggestions and unknown bulb names.

    Returns:
        Similarity score:
        - 100: Exact match (case-insensitive)
        - 80: Prefix match
        - 60: Substring match
        - 0-50: Character sequence match (proportional to matching characters)
        - 0: No match
    """
    a = s1.lower()
    b = s2.lower()

    if a == b:
        return 100
    if a.startswith(b) or b.startswith(a):
        return 80
    if a in b or b in a:
        return 60

    # Count characters of a that appear in order in b
    matches = 0
    j = 0
    for char in a:
        while j < len(b):
            j += 1
            if b[j - 1] == char:
                matches += 1
                break

    if matches:
        score = int(matches / max(len(a), len(b)) * 50)
        return score if score > 20 else 0
    return 0


def find_similar_strings(target: str, candidates: list[str], limit: int = 5) -> list[str]:
    """Return up to `limit` candidates resembling target, best first."""
    scored = [(c, similarity_score(target, c)) for c in candidates]
    ranked = sorted((pair for pair in scored if pair[1] > 0), key=lambda pair: pair[1], reverse=True)
    return [c for c, _ in ranked[:limit]]


def pluralise(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
