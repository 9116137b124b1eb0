"""
auteur.blend - Weighted interpolation between two style vectors.
"""

from __future__ import annotations

from collections.abc import Mapping

from auteur.exceptions import IncompatibleAxisSetError
from auteur.vector import ALL_AXES, COMPARISON_AXES, StyleVector

# Slider range for the primary director's influence
UI_WEIGHT_MIN = 0.10
UI_WEIGHT_MAX = 0.90
UI_WEIGHT_STEP = 0.05


def blend_vectors(
    primary: Mapping[str, float],
    secondary: Mapping[str, float],
    weight: float,
) -> StyleVector:
    """Blend two style vectors axis by axis.

    ``result[axis] = primary[axis] * weight + secondary[axis] * (1 - weight)``.
    Only axes carried by both inputs are blended, so a display axis present
    on one side is dropped. The weight is not range-checked; 1 reproduces
    ``primary`` and 0 reproduces ``secondary`` on the shared axes.

    Args:
        primary: Primary director's vector
        secondary: Secondary director's vector
        weight: Primary influence, nominally 0-1

    Returns:
        New blended StyleVector

    Raises:
        IncompatibleAxisSetError: If either input lacks a comparison axis
    """
    if any(axis not in primary or axis not in secondary for axis in COMPARISON_AXES):
        raise IncompatibleAxisSetError(
            [axis for axis in ALL_AXES if axis in primary],
            [axis for axis in ALL_AXES if axis in secondary],
        )

    shared = [axis for axis in ALL_AXES if axis in primary and axis in secondary]

    remainder = 1 - weight
    return StyleVector(
        {axis: primary[axis] * weight + secondary[axis] * remainder for axis in shared}
    )


def snap_blend_weight(
    weight: float,
    low: float = UI_WEIGHT_MIN,
    high: float = UI_WEIGHT_MAX,
    step: float = UI_WEIGHT_STEP,
) -> float:
    """Clamp and snap a slider value to the blend control's range and step."""
    snapped = round(round(weight / step) * step, 2)
    return min(high, max(low, snapped))
