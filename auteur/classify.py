"""
auteur.classify - Quadrant, emotional tier and cluster taxonomy.

Quadrants come from the two composite map axes split at the midpoint;
values exactly on the midpoint fall on the Epic / Experimental side.
Emotional tiers bucket the emotion axis with fixed thresholds. Clusters
are static archetype tags carried by director profiles, never computed.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from auteur.vector import MIDPOINT, composite_xy


class Quadrant(str, Enum):
    EPIC_CLASSICAL = "epic-classical"
    EPIC_EXPERIMENTAL = "epic-experimental"
    INTIMATE_EXPERIMENTAL = "intimate-experimental"
    INTIMATE_CLASSICAL = "intimate-classical"

    @property
    def label(self) -> str:
        return QUADRANT_LABELS[self]


QUADRANT_LABELS: dict[Quadrant, str] = {
    Quadrant.EPIC_CLASSICAL: "Epic + Classical",
    Quadrant.EPIC_EXPERIMENTAL: "Epic + Experimental",
    Quadrant.INTIMATE_EXPERIMENTAL: "Intimate + Experimental",
    Quadrant.INTIMATE_CLASSICAL: "Intimate + Classical",
}


class EmotionTier(str, Enum):
    COOL = "cool"
    WARM = "warm"
    OPERATIC = "operatic"

    @property
    def rank(self) -> int:
        return list(EmotionTier).index(self)


# Upper bounds (inclusive) on the emotion axis. Stored as labels, so fixed.
COOL_MAX = 4.0
WARM_MAX = 7.0


class Cluster(str, Enum):
    OPERATIC_MYTHMAKERS = "operatic-mythmakers"
    EPIC_FORMALISTS = "epic-formalists"
    STYLIZED_AUTEURS = "stylized-auteurs"
    GRITTY_REALISTS = "gritty-realists"
    TONAL_ALCHEMISTS = "tonal-alchemists"
    INTIMATE_HUMANISTS = "intimate-humanists"
    WORLD_ARCHITECTS = "world-architects"
    GENRE_PROVOCATEURS = "genre-provocateurs"
    NEW_WAVE_ARCHITECTS = "new-wave-architects"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()


def is_epic(x: float) -> bool:
    return x >= MIDPOINT


def is_experimental(y: float) -> bool:
    return y >= MIDPOINT


def quadrant_for_point(x: float, y: float) -> Quadrant:
    """Classify a point on the composite plane."""
    if is_epic(x):
        return Quadrant.EPIC_EXPERIMENTAL if is_experimental(y) else Quadrant.EPIC_CLASSICAL
    return Quadrant.INTIMATE_EXPERIMENTAL if is_experimental(y) else Quadrant.INTIMATE_CLASSICAL


def vector_to_quadrant(vector: Mapping[str, float]) -> Quadrant:
    """Determine the quadrant of a style vector.

    Args:
        vector: Style vector with scale, spectacle, structure, genre_fluidity

    Returns:
        One of the four Quadrant members
    """
    x, y = composite_xy(vector)
    return quadrant_for_point(x, y)


def emotion_tier(value: float) -> EmotionTier:
    """Bucket an emotion score into cool (<= 4), warm (<= 7) or operatic."""
    if value <= COOL_MAX:
        return EmotionTier.COOL
    if value <= WARM_MAX:
        return EmotionTier.WARM
    return EmotionTier.OPERATIC
