"""
auteur.distance - Style distance and genre-aware scoring.

Euclidean distance over the comparison axes, plus a bounded multiplicative
discount for genres shared between a film and a director.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import numpy as np

from auteur.exceptions import IncompatibleAxisSetError
from auteur.vector import COMPARISON_AXES

if TYPE_CHECKING:
    from auteur.catalog import DirectorProfile

# Each shared genre discounts the distance by 15%, never below 40% of it.
GENRE_BONUS = 0.15
GENRE_FLOOR = 0.4


def _axis_values(
    a: Mapping[str, float],
    b: Mapping[str, float],
    axes: tuple[str, ...],
) -> tuple[np.ndarray, np.ndarray]:
    missing_a = [axis for axis in axes if axis not in a]
    missing_b = [axis for axis in axes if axis not in b]
    if missing_a or missing_b:
        raise IncompatibleAxisSetError(
            [axis for axis in axes if axis in a],
            [axis for axis in axes if axis in b],
        )
    left = np.array([a[axis] for axis in axes], dtype=float)
    right = np.array([b[axis] for axis in axes], dtype=float)
    return left, right


def style_distance(
    a: Mapping[str, float],
    b: Mapping[str, float],
    axes: tuple[str, ...] = COMPARISON_AXES,
) -> float:
    """Euclidean distance between two style vectors.

    Display-only axes are excluded unless passed explicitly in ``axes``.

    Args:
        a: First style vector
        b: Second style vector
        axes: Axes to compare (default: comparison axes)

    Returns:
        Non-negative distance

    Raises:
        IncompatibleAxisSetError: If either vector lacks one of ``axes``
    """
    left, right = _axis_values(a, b, axes)
    return float(np.sqrt(np.sum((left - right) ** 2)))


def genre_overlap(film_genres: Iterable[str], known_for: Iterable[str]) -> int:
    """Count film genres a director is known for (case-insensitive, exact).

    Film genres are de-duplicated case-insensitively before counting.
    """
    known = {g.casefold() for g in known_for}
    film = {g.casefold() for g in film_genres}
    return len(film & known)


def genre_multiplier(overlap: int) -> float:
    """Distance multiplier for a given genre overlap count."""
    return max(GENRE_FLOOR, 1 - overlap * GENRE_BONUS)


def genre_aware_distance(
    target: Mapping[str, float],
    director: DirectorProfile,
    film_genres: Iterable[str] | None,
) -> float:
    """Style distance discounted by genres shared with the director.

    Args:
        target: The film's style vector
        director: Catalog entry to score against
        film_genres: The film's genres; empty or None means no adjustment

    Returns:
        ``base * max(0.4, 1 - 0.15 * overlap)``, or ``base`` without genres
    """
    base = style_distance(target, director.vector)
    genres = list(film_genres or [])
    if not genres:
        return base
    return base * genre_multiplier(genre_overlap(genres, director.known_for))
