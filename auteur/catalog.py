"""
auteur.catalog - Director profiles and the static catalog.

The catalog is read-only configuration: an ordered list of director
profiles sharing one axis set. It is passed explicitly to every consumer
so tests can substitute fixture catalogs. The bundled catalog lives in
``auteur/data/directors.yaml``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any

import numpy as np
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from auteur.classify import Cluster, EmotionTier, Quadrant, emotion_tier, vector_to_quadrant
from auteur.exceptions import CatalogError, InvalidVectorError, UnknownDirectorError
from auteur.logging import logger
from auteur.vector import COMPARISON_AXES, StyleVector, composite_xy

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "directors.yaml"


class VisualMandate(BaseModel):
    """Free-form visual directives shown alongside a director."""

    model_config = ConfigDict(frozen=True)

    lighting: str = ""
    lens: str = ""
    texture: str = ""
    color: str = ""
    negative_hints: str = ""


class DirectorProfile(BaseModel):
    """Immutable catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    cluster: Cluster
    known_for: tuple[str, ...] = ()
    vector: StyleVector
    visual_mandate: VisualMandate = Field(default_factory=VisualMandate)

    @property
    def quadrant(self) -> Quadrant:
        return vector_to_quadrant(self.vector)

    @property
    def emotional_depth(self) -> EmotionTier:
        return emotion_tier(self.vector.emotion)

    @property
    def position(self) -> tuple[float, float]:
        return composite_xy(self.vector)

    @property
    def short_name(self) -> str:
        return self.name.split()[-1]


class Catalog(Sequence[DirectorProfile]):
    """Ordered, immutable collection of director profiles."""

    def __init__(self, directors: Iterable[DirectorProfile]) -> None:
        self._directors: tuple[DirectorProfile, ...] = tuple(directors)
        self._by_id: dict[str, DirectorProfile] = {}

        axes = None
        for director in self._directors:
            if director.id in self._by_id:
                raise CatalogError(f"Duplicate director id: {director.id}")
            if axes is None:
                axes = director.vector.axes
            elif director.vector.axes != axes:
                raise CatalogError(
                    f"Director '{director.id}' axes {director.vector.axes} differ from {axes}"
                )
            self._by_id[director.id] = director

        if self._directors:
            matrix = np.vstack([d.vector.as_array(COMPARISON_AXES) for d in self._directors])
        else:
            matrix = np.empty((0, len(COMPARISON_AXES)), dtype=float)
        matrix.setflags(write=False)
        self._matrix = matrix

    def __getitem__(self, index):  # type: ignore[override]
        return self._directors[index]

    def __len__(self) -> int:
        return len(self._directors)

    def __iter__(self) -> Iterator[DirectorProfile]:
        return iter(self._directors)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_id
        return item in self._directors

    def __repr__(self) -> str:
        return f"Catalog({len(self)} directors)"

    @property
    def ids(self) -> list[str]:
        return [d.id for d in self._directors]

    @property
    def comparison_matrix(self) -> np.ndarray:
        """Read-only (directors x comparison axes) array in declaration order."""
        return self._matrix

    def get(self, director_id: str) -> DirectorProfile:
        """Look up a director by id.

        Raises:
            UnknownDirectorError: If the id is not in the catalog
        """
        try:
            return self._by_id[director_id]
        except KeyError:
            raise UnknownDirectorError(director_id) from None

    def find(self, director_id: str | None) -> DirectorProfile | None:
        if director_id is None:
            return None
        return self._by_id.get(director_id)

    def by_cluster(self, cluster: Cluster | str) -> list[DirectorProfile]:
        cluster = Cluster(cluster)
        return [d for d in self._directors if d.cluster is cluster]

    def by_quadrant(self, quadrant: Quadrant | str) -> list[DirectorProfile]:
        quadrant = Quadrant(quadrant)
        return [d for d in self._directors if d.quadrant is quadrant]


def parse_catalog(raw: Any, source: str = "<catalog>") -> Catalog:
    """Build a catalog from parsed YAML/JSON data.

    Accepts either a list of director entries or a mapping with a
    ``directors`` list.
    """
    if isinstance(raw, dict):
        raw = raw.get("directors")
    if not isinstance(raw, list) or not raw:
        raise CatalogError(f"{source}: expected a non-empty list of directors")

    directors = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise CatalogError(f"{source}: entry {index} is not a mapping")
        try:
            directors.append(DirectorProfile(**entry))
        except (ValidationError, InvalidVectorError) as e:
            raise CatalogError(f"{source}: invalid director '{entry.get('id', index)}': {e}") from e

    return Catalog(directors)


def load_catalog(path: Path) -> Catalog:
    """Load a director catalog from a YAML file."""
    if not path.exists():
        raise CatalogError(f"Catalog not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    catalog = parse_catalog(raw, source=str(path))
    logger.debug("Loaded %d directors from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """Return the bundled director catalog."""
    return load_catalog(DEFAULT_CATALOG_PATH)
