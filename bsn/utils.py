"""Small string helpers."""

from __future__ import annotations


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [part for part in text.split(separator) if part]