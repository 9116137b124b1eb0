"""Tests for quadrant, emotional tier and cluster classification."""

from __future__ import annotations

import pytest

from auteur.classify import (
    Cluster,
    EmotionTier,
    Quadrant,
    emotion_tier,
    quadrant_for_point,
    vector_to_quadrant,
)
from auteur.vector import StyleVector


class TestQuadrant:
    @pytest.mark.parametrize(
        "x,y,expected",
        [
            (8, 2, Quadrant.EPIC_CLASSICAL),
            (8, 8, Quadrant.EPIC_EXPERIMENTAL),
            (2, 8, Quadrant.INTIMATE_EXPERIMENTAL),
            (2, 2, Quadrant.INTIMATE_CLASSICAL),
            (5, 5, Quadrant.EPIC_EXPERIMENTAL),
            (4.999, 5, Quadrant.INTIMATE_EXPERIMENTAL),
            (5, 4.999, Quadrant.EPIC_CLASSICAL),
        ],
    )
    def test_quadrant_for_point(self, x: float, y: float, expected: Quadrant) -> None:
        assert quadrant_for_point(x, y) is expected

    def test_vector_to_quadrant(self, epic_vector: StyleVector, intimate_vector: StyleVector) -> None:
        assert vector_to_quadrant(epic_vector) is Quadrant.EPIC_CLASSICAL
        assert vector_to_quadrant(intimate_vector) is Quadrant.INTIMATE_EXPERIMENTAL

    @pytest.mark.parametrize(
        "axes,expected",
        [
            ({"scale": 4, "spectacle": 6, "structure": 3, "genre_fluidity": 7}, Quadrant.EPIC_EXPERIMENTAL),
            ({"scale": 3, "spectacle": 7, "structure": 2, "genre_fluidity": 7}, Quadrant.EPIC_CLASSICAL),
            ({"scale": 6, "spectacle": 3.9, "structure": 9, "genre_fluidity": 1}, Quadrant.INTIMATE_EXPERIMENTAL),
        ],
    )
    def test_composite_on_midpoint_from_unequal_axes(self, axes: dict, expected: Quadrant) -> None:
        assert vector_to_quadrant(StyleVector({**axes, "emotion": 5})) is expected

    def test_display_axes_do_not_affect_quadrant(self, full_vector: StyleVector) -> None:
        changed = full_vector.replace(visual=0, darkness=0, dialogue=0)
        assert vector_to_quadrant(changed) is vector_to_quadrant(full_vector)

    def test_labels(self) -> None:
        assert Quadrant.EPIC_CLASSICAL.label == "Epic + Classical"
        assert Quadrant("intimate-experimental").label == "Intimate + Experimental"


class TestEmotionTier:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, EmotionTier.COOL),
            (4, EmotionTier.COOL),
            (4.01, EmotionTier.WARM),
            (7, EmotionTier.WARM),
            (7.5, EmotionTier.OPERATIC),
            (10, EmotionTier.OPERATIC),
        ],
    )
    def test_thresholds(self, value: float, expected: EmotionTier) -> None:
        assert emotion_tier(value) is expected

    def test_monotonic(self) -> None:
        ranks = [emotion_tier(v / 2).rank for v in range(21)]
        assert ranks == sorted(ranks)


class TestCluster:
    def test_nine_archetypes(self) -> None:
        assert len(Cluster) == 9

    def test_label(self) -> None:
        assert Cluster.NEW_WAVE_ARCHITECTS.label == "New Wave Architects"
