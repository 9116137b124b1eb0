"""
auteur.viewport - Pan/zoom transform engine for the constellation map.

The map is a fixed logical plane of ``width x height`` units. Style
coordinates in [0, 10] are mapped into the plane inset by ``pad``, with the
Y axis inverted. A ViewportState describes the visible window over the
plane; it only changes through ``apply_gesture``, which clamps every input
instead of rejecting it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import NamedTuple, Union

from auteur.config import MapGeometry, ViewportSettings
from auteur.vector import AXIS_MAX, AXIS_MIN


class ScreenPoint(NamedTuple):
    sx: float
    sy: float


class ViewBox(NamedTuple):
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class DragAnchor:
    """Pointer position and pan at the start of a drag."""

    pointer_x: float
    pointer_y: float
    pan_x: float
    pan_y: float


@dataclass(frozen=True)
class ViewportState:
    zoom: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0
    drag: DragAnchor | None = None

    @property
    def dragging(self) -> bool:
        return self.drag is not None


@dataclass(frozen=True)
class Wheel:
    """Wheel or pinch gesture; negative delta zooms in."""

    delta_y: float


@dataclass(frozen=True)
class ZoomStep:
    """Zoom button press: +1 zooms in, -1 zooms out."""

    direction: int


@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float
    on_node: bool = False


@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float
    rendered_width: float
    rendered_height: float


@dataclass(frozen=True)
class PointerUp:
    pass


@dataclass(frozen=True)
class Reset:
    pass


GestureEvent = Union[Wheel, ZoomStep, PointerDown, PointerMove, PointerUp, Reset]


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def to_screen(axis_x: float, axis_y: float, geometry: MapGeometry) -> ScreenPoint:
    """Map a style-space point to logical plane coordinates.

    Args:
        axis_x: Composite x (intimacy <-> spectacle), nominally 0-10
        axis_y: Composite y (classical <-> experimental), nominally 0-10
        geometry: Plane size and inset

    Returns:
        ScreenPoint with y=0 at the bottom inset and y=10 at the top inset
    """
    span = AXIS_MAX - AXIS_MIN
    inner_w = geometry.width - geometry.pad * 2
    inner_h = geometry.height - geometry.pad * 2
    sx = geometry.pad + ((axis_x - AXIS_MIN) / span) * inner_w
    sy = geometry.height - geometry.pad - ((axis_y - AXIS_MIN) / span) * inner_h
    return ScreenPoint(sx, sy)


def from_screen(sx: float, sy: float, geometry: MapGeometry) -> tuple[float, float]:
    """Inverse of ``to_screen``."""
    span = AXIS_MAX - AXIS_MIN
    inner_w = geometry.width - geometry.pad * 2
    inner_h = geometry.height - geometry.pad * 2
    axis_x = AXIS_MIN + (sx - geometry.pad) / inner_w * span
    axis_y = AXIS_MIN + (geometry.height - geometry.pad - sy) / inner_h * span
    return axis_x, axis_y


def clamp_zoom(zoom: float, settings: ViewportSettings) -> float:
    return clamp(zoom, settings.min_zoom, settings.max_zoom)


def window_size(zoom: float, geometry: MapGeometry) -> tuple[float, float]:
    """Visible window size at a zoom level."""
    return geometry.width / zoom, geometry.height / zoom


def clamp_pan(pan_x: float, pan_y: float, zoom: float, geometry: MapGeometry) -> tuple[float, float]:
    """Keep the visible window inside the logical plane."""
    vb_w, vb_h = window_size(zoom, geometry)
    return (
        clamp(pan_x, 0.0, geometry.width - vb_w),
        clamp(pan_y, 0.0, geometry.height - vb_h),
    )


def view_box(state: ViewportState, geometry: MapGeometry) -> ViewBox:
    """Visible window for a state, as an SVG-style view box."""
    vb_w, vb_h = window_size(state.zoom, geometry)
    vb_x, vb_y = clamp_pan(state.pan_x, state.pan_y, state.zoom, geometry)
    return ViewBox(vb_x, vb_y, vb_w, vb_h)


def initial_state(geometry: MapGeometry, settings: ViewportSettings) -> ViewportState:
    """Default view: configured zoom, centered on the plane."""
    zoom = clamp_zoom(settings.default_zoom, settings)
    vb_w, vb_h = window_size(zoom, geometry)
    pan_x, pan_y = clamp_pan((geometry.width - vb_w) / 2, (geometry.height - vb_h) / 2, zoom, geometry)
    return ViewportState(zoom=zoom, pan_x=pan_x, pan_y=pan_y)


def _with_zoom(
    state: ViewportState,
    zoom: float,
    geometry: MapGeometry,
    settings: ViewportSettings,
) -> ViewportState:
    # A zoom change ends any drag in progress; its anchor pan is stale.
    zoom = clamp_zoom(zoom, settings)
    pan_x, pan_y = clamp_pan(state.pan_x, state.pan_y, zoom, geometry)
    return ViewportState(zoom=zoom, pan_x=pan_x, pan_y=pan_y)


def apply_gesture(
    state: ViewportState,
    event: GestureEvent,
    geometry: MapGeometry,
    settings: ViewportSettings,
) -> ViewportState:
    """Apply one input event to a viewport state.

    Args:
        state: Current state
        event: Wheel, ZoomStep, PointerDown, PointerMove, PointerUp or Reset
        geometry: Logical plane
        settings: Zoom limits and step sizes

    Returns:
        New state; the input state is never mutated
    """
    if isinstance(event, Reset):
        return ViewportState(zoom=1.0, pan_x=0.0, pan_y=0.0)

    if isinstance(event, Wheel):
        factor = math.exp(-event.delta_y * settings.wheel_sensitivity)
        return _with_zoom(state, state.zoom * factor, geometry, settings)

    if isinstance(event, ZoomStep):
        direction = (event.direction > 0) - (event.direction < 0)
        return _with_zoom(state, state.zoom + direction * settings.zoom_step, geometry, settings)

    if isinstance(event, PointerDown):
        if event.on_node:
            return state
        anchor = DragAnchor(event.x, event.y, state.pan_x, state.pan_y)
        return replace(state, drag=anchor)

    if isinstance(event, PointerMove):
        anchor = state.drag
        if anchor is None or event.rendered_width <= 0 or event.rendered_height <= 0:
            return state
        vb_w, vb_h = window_size(state.zoom, geometry)
        scale_x = vb_w / event.rendered_width
        scale_y = vb_h / event.rendered_height
        pan_x = anchor.pan_x - (event.x - anchor.pointer_x) * scale_x
        pan_y = anchor.pan_y - (event.y - anchor.pointer_y) * scale_y
        pan_x, pan_y = clamp_pan(pan_x, pan_y, state.zoom, geometry)
        return replace(state, pan_x=pan_x, pan_y=pan_y)

    if isinstance(event, PointerUp):
        return replace(state, drag=None)

    raise TypeError(f"Unsupported gesture: {event!r}")


def replay(
    events: list[GestureEvent],
    geometry: MapGeometry,
    settings: ViewportSettings,
    state: ViewportState | None = None,
) -> ViewportState:
    """Fold a sequence of events into a final state."""
    current = state or ViewportState()
    for event in events:
        current = apply_gesture(current, event, geometry, settings)
    return current
