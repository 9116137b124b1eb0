"""
auteur.selection - Director selections and script fit analysis.

Builds the plain-data records handed to persistence: the chosen primary and
secondary directors, blend weight, resulting vector, quadrant, emotional
tier, cluster and match distance. A selection always inherits the primary
director's cluster and visual mandate.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import BaseModel

from auteur.blend import blend_vectors
from auteur.catalog import Catalog, DirectorProfile, VisualMandate
from auteur.classify import Cluster, EmotionTier, Quadrant, emotion_tier, vector_to_quadrant
from auteur.distance import style_distance
from auteur.logging import logger
from auteur.ranking import Match, nearest_directors
from auteur.vector import StyleVector, round_vector

DISTANCE_DIGITS = 3


@dataclass(frozen=True)
class SelectionState:
    """Primary/secondary picks on the constellation map."""

    primary_id: str | None = None
    secondary_id: str | None = None

    def click(self, director_id: str) -> SelectionState:
        """Apply a click on a director node.

        The first click (or a click on the current primary) sets the primary.
        Otherwise the click sets the secondary, toggles it off when it is
        already the secondary, or replaces it when both are set.
        """
        if self.primary_id is None or self.primary_id == director_id:
            return replace(self, primary_id=director_id)
        if self.secondary_id == director_id:
            return replace(self, secondary_id=None)
        return replace(self, secondary_id=director_id)

    def pick_match(self, rank: int, director_id: str) -> SelectionState:
        """Apply a click on a top-match card: rank 0 sets primary, others secondary."""
        if rank == 0:
            return replace(self, primary_id=director_id)
        return replace(self, secondary_id=director_id)


class DirectorSelection(BaseModel):
    """Persistable director vision for a film."""

    primary_director_id: str
    primary_director_name: str
    secondary_director_id: str | None = None
    secondary_director_name: str | None = None
    blend_weight: float
    computed_vector: StyleVector
    quadrant: Quadrant
    cluster: Cluster
    emotional_depth: EmotionTier
    auto_matched: bool = False
    match_distance: float | None = None
    visual_mandate: VisualMandate


def selection_vector(
    primary: DirectorProfile,
    secondary: DirectorProfile | None,
    weight: float,
) -> StyleVector:
    """Vector for a selection: the rounded blend, or the primary's own vector."""
    if secondary is None:
        return primary.vector
    return round_vector(blend_vectors(primary.vector, secondary.vector, weight), 1)


def build_selection(
    catalog: Catalog,
    primary_id: str,
    secondary_id: str | None = None,
    weight: float = 0.7,
    script_vector: Mapping[str, float] | None = None,
) -> DirectorSelection:
    """Build a manual director selection.

    Args:
        catalog: Director catalog
        primary_id: Primary director id
        secondary_id: Optional secondary director id
        weight: Primary influence, used only with a secondary
        script_vector: The film's computed vector, if known

    Returns:
        DirectorSelection record

    Raises:
        UnknownDirectorError: If either id is not in the catalog
    """
    primary = catalog.get(primary_id)
    secondary = catalog.get(secondary_id) if secondary_id else None
    vec = selection_vector(primary, secondary, weight)

    script = StyleVector.from_mapping(script_vector) if script_vector is not None else None
    distance = round(style_distance(script, vec), DISTANCE_DIGITS) if script is not None else None

    logger.debug(
        "Selection %s/%s weight=%.2f distance=%s",
        primary.id,
        secondary.id if secondary else "-",
        weight,
        distance,
    )

    return DirectorSelection(
        primary_director_id=primary.id,
        primary_director_name=primary.name,
        secondary_director_id=secondary.id if secondary else None,
        secondary_director_name=secondary.name if secondary else None,
        blend_weight=weight if secondary else 1.0,
        computed_vector=script if script is not None else vec,
        quadrant=vector_to_quadrant(vec),
        cluster=primary.cluster,
        emotional_depth=emotion_tier(vec.emotion),
        auto_matched=False,
        match_distance=distance,
        visual_mandate=primary.visual_mandate,
    )


@dataclass(frozen=True)
class RecommendedBlend:
    primary: DirectorProfile
    secondary: DirectorProfile
    weight: float
    vector: StyleVector

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary": {"id": self.primary.id, "name": self.primary.name, "weight": self.weight},
            "secondary": {
                "id": self.secondary.id,
                "name": self.secondary.name,
                "weight": round(1 - self.weight, 2),
            },
            "blended_vector": self.vector.to_dict(),
        }


@dataclass(frozen=True)
class FitReport:
    """How a script's style vector sits against the catalog."""

    script_vector: StyleVector
    quadrant: Quadrant
    emotional_tier: EmotionTier
    matches: tuple[Match, ...]
    film_genres: tuple[str, ...] = ()
    shortlist: int = 3
    recommended_blend: RecommendedBlend | None = None
    top_ids: frozenset[str] = field(default_factory=frozenset)

    @property
    def best_match(self) -> Match | None:
        return self.matches[0] if self.matches else None

    def auto_selection(self) -> DirectorSelection | None:
        """Selection persisted when the best match is accepted automatically."""
        best = self.best_match
        if best is None:
            return None
        top = self.matches[: self.shortlist]
        runner_up = top[1].director if len(top) > 1 else None
        return DirectorSelection(
            primary_director_id=best.director.id,
            primary_director_name=best.director.name,
            secondary_director_id=runner_up.id if runner_up else None,
            secondary_director_name=runner_up.name if runner_up else None,
            blend_weight=1.0,
            computed_vector=self.script_vector,
            quadrant=self.quadrant,
            cluster=best.director.cluster,
            emotional_depth=self.emotional_tier,
            auto_matched=True,
            match_distance=round(best.distance, DISTANCE_DIGITS),
            visual_mandate=best.director.visual_mandate,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "script_vector": self.script_vector.to_dict(),
            "film_genres": list(self.film_genres),
            "quadrant": self.quadrant.value,
            "emotional_tier": self.emotional_tier.value,
            "matches": [m.to_dict(DISTANCE_DIGITS) for m in self.matches],
            "recommended_blend": self.recommended_blend.to_dict() if self.recommended_blend else None,
        }


def analyze_fit(
    script_vector: Mapping[str, float],
    catalog: Catalog,
    film_genres: Iterable[str] | None = None,
    top_n: int = 5,
    shortlist: int = 3,
    recommended_weight: float = 0.7,
) -> FitReport:
    """Rank the catalog against a script vector and recommend a blend.

    Args:
        script_vector: Vector produced by script analysis
        catalog: Director catalog
        film_genres: Optional film genres for genre-aware ranking
        top_n: Number of matches to keep
        shortlist: Matches considered for the auto selection and blend
        recommended_weight: Primary weight of the recommended blend

    Returns:
        FitReport
    """
    script = StyleVector.from_mapping(script_vector)
    genres = tuple(film_genres or ())
    matches = tuple(nearest_directors(script, catalog, max(top_n, shortlist), genres))

    top = matches[:shortlist]
    recommended = None
    if len(top) >= 2:
        recommended = RecommendedBlend(
            primary=top[0].director,
            secondary=top[1].director,
            weight=recommended_weight,
            vector=round_vector(
                blend_vectors(top[0].director.vector, top[1].director.vector, recommended_weight),
                1,
            ),
        )

    return FitReport(
        script_vector=script,
        quadrant=vector_to_quadrant(script),
        emotional_tier=emotion_tier(script.emotion),
        matches=matches[:top_n],
        film_genres=genres,
        shortlist=shortlist,
        recommended_blend=recommended,
        top_ids=frozenset(m.director.id for m in top),
    )
