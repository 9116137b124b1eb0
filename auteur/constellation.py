"""
auteur.constellation - Render model for the director constellation map.

Turns the catalog, the script vector, the current selection and a viewport
state into plain data (positions in logical plane units, colours, radii,
labels) that any renderer can draw. All positions go through
``viewport.to_screen``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from auteur.blend import blend_vectors
from auteur.catalog import Catalog, DirectorProfile
from auteur.classify import Cluster, Quadrant
from auteur.config import MapGeometry
from auteur.ranking import Match
from auteur.selection import SelectionState
from auteur.vector import composite_xy
from auteur.viewport import ViewportState, to_screen, view_box

CLUSTER_COLORS: dict[Cluster, str] = {
    Cluster.OPERATIC_MYTHMAKERS: "hsl(40, 90%, 55%)",
    Cluster.EPIC_FORMALISTS: "hsl(210, 70%, 55%)",
    Cluster.STYLIZED_AUTEURS: "hsl(280, 60%, 60%)",
    Cluster.GRITTY_REALISTS: "hsl(15, 70%, 50%)",
    Cluster.TONAL_ALCHEMISTS: "hsl(160, 60%, 45%)",
    Cluster.INTIMATE_HUMANISTS: "hsl(340, 60%, 55%)",
    Cluster.WORLD_ARCHITECTS: "hsl(120, 50%, 45%)",
    Cluster.GENRE_PROVOCATEURS: "hsl(0, 70%, 55%)",
    Cluster.NEW_WAVE_ARCHITECTS: "hsl(190, 70%, 50%)",
}

GRID_STEPS = (2.5, 5.0, 7.5)

NODE_RADIUS = {
    "primary": 10.0,
    "secondary": 8.0,
    "top": 7.0,
    "default": 4.5,
}

DIMMED_OPACITY = 0.45


def node_role(director_id: str, selection: SelectionState, top_ids: set[str]) -> str:
    """Role of a node: primary, secondary, top (shortlisted match) or default."""
    if director_id == selection.primary_id:
        return "primary"
    if director_id == selection.secondary_id:
        return "secondary"
    if director_id in top_ids:
        return "top"
    return "default"


def _point(vector: Mapping[str, float], geometry: MapGeometry) -> dict[str, float]:
    x, y = composite_xy(vector)
    sx, sy = to_screen(x, y, geometry)
    return {"x": x, "y": y, "sx": round(sx, 2), "sy": round(sy, 2)}


def _quadrant_labels(geometry: MapGeometry) -> list[dict[str, Any]]:
    left = geometry.pad + 8
    right = geometry.width - geometry.pad - 8
    top = geometry.pad + 16
    bottom = geometry.height - geometry.pad - 8
    return [
        {"text": Quadrant.INTIMATE_EXPERIMENTAL.label.upper(), "x": left, "y": top, "anchor": "start"},
        {"text": Quadrant.EPIC_EXPERIMENTAL.label.upper(), "x": right, "y": top, "anchor": "end"},
        {"text": Quadrant.INTIMATE_CLASSICAL.label.upper(), "x": left, "y": bottom, "anchor": "start"},
        {"text": Quadrant.EPIC_CLASSICAL.label.upper(), "x": right, "y": bottom, "anchor": "end"},
    ]


def _node(
    director: DirectorProfile,
    geometry: MapGeometry,
    role: str,
    rank: int | None,
) -> dict[str, Any]:
    point = _point(director.vector, geometry)
    highlighted = role != "default"
    return {
        "id": director.id,
        "name": director.name,
        "label": director.short_name if highlighted else None,
        "cluster": director.cluster.value,
        "color": CLUSTER_COLORS[director.cluster],
        "role": role,
        "radius": NODE_RADIUS[role],
        "opacity": 1.0 if highlighted else DIMMED_OPACITY,
        "rank": rank,
        **point,
    }


def build_constellation(
    catalog: Catalog,
    geometry: MapGeometry,
    state: ViewportState,
    script_vector: Mapping[str, float] | None = None,
    selection: SelectionState | None = None,
    weight: float = 0.7,
    matches: Sequence[Match] = (),
    shortlist: int = 3,
) -> dict[str, Any]:
    """Build the render model for one frame of the constellation map.

    Args:
        catalog: Director catalog (every entry becomes a node)
        geometry: Logical plane
        state: Current viewport state
        script_vector: Optional script vector, drawn as a marker
        selection: Current primary/secondary picks
        weight: Primary blend weight
        matches: Ranked matches; the first ``shortlist`` get rank badges
        shortlist: Number of matches highlighted

    Returns:
        Dict of plain data for a renderer
    """
    selection = selection or SelectionState()
    top = list(matches[:shortlist])
    top_ids = {m.director.id for m in top}
    ranks = {m.director.id: i + 1 for i, m in enumerate(top)}

    nodes = []
    for director in catalog:
        role = node_role(director.id, selection, top_ids)
        rank = ranks.get(director.id) if role == "top" else None
        nodes.append(_node(director, geometry, role, rank))

    grid = []
    for value in GRID_STEPS:
        sx, _ = to_screen(value, 0, geometry)
        _, sy = to_screen(0, value, geometry)
        grid.append({"value": value, "sx": sx, "sy": sy})

    script_marker = _point(script_vector, geometry) if script_vector is not None else None

    primary = catalog.find(selection.primary_id)
    secondary = catalog.find(selection.secondary_id)
    blend_marker = None
    blend_line = None
    if primary is not None and secondary is not None:
        blended = blend_vectors(primary.vector, secondary.vector, weight)
        blend_marker = _point(blended, geometry)
        blend_line = {
            "start": _point(primary.vector, geometry),
            "end": _point(secondary.vector, geometry),
        }

    vb = view_box(state, geometry)
    return {
        "geometry": {"width": geometry.width, "height": geometry.height, "pad": geometry.pad},
        "view_box": vb._asdict(),
        "viewport": {"zoom": state.zoom, "pan_x": vb.x, "pan_y": vb.y},
        "grid": grid,
        "quadrant_labels": _quadrant_labels(geometry),
        "axis_labels": {
            "x": "Intimacy ← → Spectacle",
            "y": "Classical ← → Experimental",
        },
        "nodes": nodes,
        "script_marker": script_marker,
        "blend_marker": blend_marker,
        "blend_line": blend_line,
        "legend": [
            {"cluster": c.value, "label": c.label, "color": CLUSTER_COLORS[c]} for c in Cluster
        ],
    }
