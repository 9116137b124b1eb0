"""
auteur.ranking - Nearest-director search over the catalog.

Genre-aware distance is the single ranking strategy: without genre context
it reduces to plain style distance, so one code path serves both uses.
Ties keep catalog declaration order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np

from auteur.catalog import Catalog, DirectorProfile
from auteur.distance import genre_multiplier, genre_overlap
from auteur.exceptions import IncompatibleAxisSetError
from auteur.logging import logger
from auteur.vector import COMPARISON_AXES


@dataclass(frozen=True)
class Match:
    """A director paired with its distance to a target vector."""

    director: DirectorProfile
    distance: float

    def to_dict(self, digits: int = 3) -> dict:
        d = self.director
        return {
            "director_id": d.id,
            "director_name": d.name,
            "distance": round(self.distance, digits),
            "cluster": d.cluster.value,
            "quadrant": d.quadrant.value,
            "emotional_depth": d.emotional_depth.value,
            "vector": d.vector.to_dict(),
            "visual_mandate": d.visual_mandate.model_dump(),
        }


def score_catalog(
    target: Mapping[str, float],
    catalog: Catalog,
    film_genres: Iterable[str] | None = None,
) -> np.ndarray:
    """Distance from ``target`` to every catalog entry, in declaration order.

    Args:
        target: Style vector to score
        catalog: Director catalog
        film_genres: Optional film genres for the genre discount

    Returns:
        Float array of length ``len(catalog)``
    """
    missing = [axis for axis in COMPARISON_AXES if axis not in target]
    if missing:
        raise IncompatibleAxisSetError(
            [axis for axis in COMPARISON_AXES if axis in target], list(COMPARISON_AXES)
        )

    point = np.array([target[axis] for axis in COMPARISON_AXES], dtype=float)
    distances = np.sqrt(np.sum((catalog.comparison_matrix - point) ** 2, axis=1))

    genres = list(film_genres or [])
    if genres:
        multipliers = np.array(
            [genre_multiplier(genre_overlap(genres, d.known_for)) for d in catalog],
            dtype=float,
        )
        distances = distances * multipliers

    return distances


def nearest_directors(
    target: Mapping[str, float],
    catalog: Catalog,
    n: int = 3,
    film_genres: Iterable[str] | None = None,
) -> list[Match]:
    """Find the ``n`` directors closest to a target vector.

    Pure: identical arguments always yield the identical ordered list.

    Args:
        target: Style vector to match
        catalog: Director catalog
        n: Number of matches to return
        film_genres: Optional film genres; each shared genre discounts a
            director's distance by 15%, floored at 40%

    Returns:
        Matches sorted by ascending distance, ties in catalog order
    """
    if n <= 0 or len(catalog) == 0:
        return []

    distances = score_catalog(target, catalog, film_genres)
    order = np.argsort(distances, kind="stable")[:n]

    matches = [Match(director=catalog[int(i)], distance=float(distances[i])) for i in order]
    logger.debug(
        "Ranked %d directors, best: %s",
        len(catalog),
        ", ".join(f"{m.director.id}={m.distance:.3f}" for m in matches[:3]),
    )
    return matches
