"""
auteur.reports.constellation - Director constellation report.

Renders the constellation map as inline SVG, with the ranked matches and
the current director selection, into a single HTML file.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from auteur.catalog import Catalog
from auteur.config import AuteurConfig
from auteur.constellation import build_constellation
from auteur.reports.generator import ReportGenerator
from auteur.selection import SelectionState, analyze_fit, build_selection
from auteur.viewport import ViewportState, initial_state


def build_match_rows(matches: list[Any]) -> list[dict[str, Any]]:
    """Flatten ranked matches into table rows."""
    rows = []
    for rank, match in enumerate(matches, start=1):
        d = match.director
        rows.append(
            {
                "rank": rank,
                "id": d.id,
                "name": d.name,
                "cluster": d.cluster.label,
                "quadrant": d.quadrant.label,
                "distance": match.distance,
            }
        )
    return rows


def generate_constellation_report(
    catalog: Catalog,
    config: AuteurConfig,
    output_path: Path,
    script_vector: Mapping[str, float] | None = None,
    film_genres: list[str] | None = None,
    selection: SelectionState | None = None,
    weight: float | None = None,
    state: ViewportState | None = None,
    open_browser: bool = False,
) -> Path:
    """Generate the constellation HTML report.

    Args:
        catalog: Director catalog
        config: Resolved AuteurConfig
        output_path: Where to write the HTML file
        script_vector: Optional script vector to match and mark
        film_genres: Optional film genres for genre-aware ranking
        selection: Primary/secondary picks; defaults to the recommended pair
        weight: Primary blend weight (default from config)
        state: Viewport state (default: initial centered view)
        open_browser: Whether to open in browser

    Returns:
        Path to generated report
    """
    geometry = config.geometry
    state = state or initial_state(geometry, config.viewport)
    weight = config.blend.default_weight if weight is None else weight

    fit = None
    matches: list[Any] = []
    if script_vector is not None:
        genres = film_genres if config.matching.use_genres else None
        fit = analyze_fit(
            script_vector,
            catalog,
            genres,
            top_n=config.matching.top_n,
            shortlist=config.matching.shortlist,
            recommended_weight=weight,
        )
        matches = list(fit.matches)
        if selection is None and fit.recommended_blend is not None:
            selection = SelectionState(
                primary_id=fit.recommended_blend.primary.id,
                secondary_id=fit.recommended_blend.secondary.id,
            )

    selection = selection or SelectionState()

    record = None
    if selection.primary_id is not None:
        record = build_selection(
            catalog,
            selection.primary_id,
            selection.secondary_id,
            weight,
            script_vector,
        ).model_dump(mode="json")

    data = {
        "project_name": config.project_name,
        "map": build_constellation(
            catalog,
            geometry,
            state,
            script_vector=script_vector,
            selection=selection,
            weight=weight,
            matches=matches,
            shortlist=config.matching.shortlist,
        ),
        "matches": build_match_rows(matches),
        "fit": fit.to_dict() if fit else None,
        "selection": record,
        "weight": weight,
    }

    generator = ReportGenerator()
    result_path = generator.render("constellation.html", data, output_path)

    if open_browser:
        generator.open_in_browser(result_path)

    return result_path
