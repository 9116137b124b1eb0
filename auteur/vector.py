"""
auteur.vector - Style vector model.

A StyleVector maps a closed set of named style axes to numbers. The
comparison axes drive distance, ranking and quadrant math; the display axes
are carried for radar and detail views only and may be absent.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator, Mapping
from typing import Any

import numpy as np
from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from auteur.exceptions import InvalidVectorError

ALL_AXES: tuple[str, ...] = (
    "scale",
    "structure",
    "visual",
    "darkness",
    "dialogue",
    "spectacle",
    "genre_fluidity",
    "emotion",
)

COMPARISON_AXES: tuple[str, ...] = (
    "scale",
    "spectacle",
    "structure",
    "genre_fluidity",
    "emotion",
)

DISPLAY_AXES: tuple[str, ...] = tuple(a for a in ALL_AXES if a not in COMPARISON_AXES)

AXIS_LABELS: dict[str, str] = {
    "scale": "Scale",
    "structure": "Structure Complexity",
    "visual": "Visual Control",
    "darkness": "Darkness",
    "dialogue": "Dialogue Density",
    "spectacle": "Spectacle Dependency",
    "genre_fluidity": "Genre Fluidity",
    "emotion": "Emotional Temperature",
}

# camelCase keys accepted from JSON records
AXIS_ALIASES: dict[str, str] = {
    "genreFluidity": "genre_fluidity",
}

AXIS_MIN = 0.0
AXIS_MAX = 10.0
MIDPOINT = 5.0


def _normalize_key(key: str) -> str:
    return AXIS_ALIASES.get(key, key)


def _coerce_value(axis: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidVectorError(f"Axis '{axis}' must be a number, got {value!r}", [axis])
    result = float(value)
    if not math.isfinite(result):
        raise InvalidVectorError(f"Axis '{axis}' must be finite, got {value!r}", [axis])
    return result


class StyleVector(Mapping[str, float]):
    """Immutable axis -> value mapping with the comparison axes guaranteed present.

    Values are not clamped: producers are expected to stay within 0-10, but an
    out-of-range value is legitimate input and is kept as given.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any]) -> None:
        if not isinstance(values, Mapping):
            raise InvalidVectorError(f"Style vector must be a mapping, got {type(values).__name__}")

        normalized: dict[str, Any] = {}
        for key, value in values.items():
            axis = _normalize_key(str(key))
            if axis not in ALL_AXES:
                raise InvalidVectorError(f"Unknown style axis: {key}", [str(key)])
            normalized[axis] = value

        missing = [axis for axis in COMPARISON_AXES if axis not in normalized]
        if missing:
            raise InvalidVectorError(f"Style vector missing axes: {', '.join(missing)}", missing)

        self._values = {
            axis: _coerce_value(axis, normalized[axis]) for axis in ALL_AXES if axis in normalized
        }

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | StyleVector) -> StyleVector:
        """Validate a mapping into a StyleVector (returns StyleVector inputs unchanged)."""
        if isinstance(mapping, StyleVector):
            return mapping
        return cls(mapping)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_mapping,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda v: v.to_dict()),
        )

    def __getitem__(self, axis: str) -> float:
        return self._values[_normalize_key(axis)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v:g}" for k, v in self._values.items())
        return f"StyleVector({inner})"

    @property
    def axes(self) -> tuple[str, ...]:
        return tuple(self._values)

    @property
    def scale(self) -> float:
        return self._values["scale"]

    @property
    def spectacle(self) -> float:
        return self._values["spectacle"]

    @property
    def structure(self) -> float:
        return self._values["structure"]

    @property
    def genre_fluidity(self) -> float:
        return self._values["genre_fluidity"]

    @property
    def emotion(self) -> float:
        return self._values["emotion"]

    def to_dict(self) -> dict[str, float]:
        return dict(self._values)

    def as_array(self, axes: tuple[str, ...] = COMPARISON_AXES) -> np.ndarray:
        """Return the values of ``axes`` as a float array, in the given order."""
        return np.array([self._values[a] for a in axes], dtype=float)

    def replace(self, **changes: float) -> StyleVector:
        merged = dict(self._values)
        merged.update(changes)
        return StyleVector(merged)


def composite_xy(vector: Mapping[str, float]) -> tuple[float, float]:
    """Project a vector onto the two composite map axes.

    x is intimacy <-> spectacle, y is classical <-> experimental.

    Args:
        vector: Style vector (or mapping carrying the comparison axes)

    Returns:
        Tuple of (x, y), each nominally 0-10
    """
    x = (vector["scale"] + vector["spectacle"]) / 2
    y = (vector["structure"] + vector["genre_fluidity"]) / 2
    return x, y


def round_vector(vector: StyleVector, digits: int = 1) -> StyleVector:
    """Round every axis, for persisted and displayed records."""
    return StyleVector({axis: round(value, digits) for axis, value in vector.items()})
