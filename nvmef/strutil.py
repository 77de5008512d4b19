"""Small string helpers."""

from __future__ import annotations


def strcount(haystack: str, needle: str) -> int:
    """Count the non-overlapping occurrences of *needle* in *haystack*."""
    if not needle:
        raise ValueError("needle must not be empty")
    return haystack.count(needle)


def strends(s: str, postfix: str) -> bool:
    """Tell whether *s* ends with *postfix*."""
    return s.endswith(postfix)


def strchomp(s: str) -> str:
    """Strip trailing spaces and NUL characters from a fixed-width field.

    The first character is always kept, as in the field it came from.
    """
    if not s:
        return s
    stripped = s.rstrip(" \0")
    return stripped if stripped else s[0]