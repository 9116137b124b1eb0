"""
auteur.utils - Shared utility functions.

Contains helpers used by both the CLI and the reports.
"""

from __future__ import annotations

from auteur.exceptions import InvalidVectorError


def parse_vector_arg(text: str) -> dict[str, float]:
    """Parse ``"scale=8,spectacle=7.5,..."`` into an axis mapping.

    Args:
        text: Comma-separated axis=value pairs

    Returns:
        Dict of axis -> float (not yet validated as a StyleVector)
    """
    values: dict[str, float] = {}
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        axis, sep, raw = part.partition("=")
        if not sep:
            raise InvalidVectorError(f"Expected axis=value, got '{part}'")
        try:
            values[axis.strip()] = float(raw)
        except ValueError:
            raise InvalidVectorError(f"Axis '{axis.strip()}' must be a number, got '{raw}'") from None
    return values


def parse_genres(values: list[str] | None) -> list[str]:
    """Flatten repeated and comma-separated genre options."""
    genres: list[str] = []
    for value in values or []:
        genres.extend(g.strip() for g in value.split(",") if g.strip())
    return genres


def get_distance_class(distance: float) -> str:
    """Get CSS class for a match distance badge.

    Returns:
        "close" (< 3), "near" (< 6) or "far"
    """
    if distance < 3:
        return "close"
    elif distance < 6:
        return "near"
    return "far"


def format_distance(distance: float) -> str:
    return f"{distance:.3f}"
