"""
auteur.reports.generator - Jinja2 environment for auteur reports.

Reports are single HTML files with inline SVG. Templates get a few
formatting filters so distances, blend weights and axis names read the
same in every report as they do in the CLI.
"""

from __future__ import annotations

import webbrowser
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from auteur.utils import format_distance, get_distance_class
from auteur.vector import AXIS_LABELS

TEMPLATE_DIR = Path(__file__).parent / "templates"


def format_percent(weight: float) -> str:
    """Blend weight (0-1) as a whole percentage, e.g. ``0.7 -> "70%"``."""
    return f"{round(weight * 100)}%"


def axis_label(axis: str) -> str:
    return AXIS_LABELS.get(axis, axis.replace("_", " ").title())


class ReportGenerator:
    """Renders auteur report templates to files."""

    def __init__(self, template_dir: Path | None = None):
        self.env = Environment(
            loader=FileSystemLoader(template_dir or TEMPLATE_DIR),
            autoescape=select_autoescape(["html", "xml", "svg"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["distance"] = format_distance
        self.env.filters["distance_class"] = get_distance_class
        self.env.filters["percent"] = format_percent
        self.env.filters["axis_label"] = axis_label

    def render(
        self,
        template_name: str,
        data: dict[str, Any],
        output_path: Path,
    ) -> Path:
        """Render a report template to a file.

        Args:
            template_name: Name of the template file
            data: Template variables
            output_path: Path to write the rendered file

        Returns:
            Path to the generated file
        """
        html = self.env.get_template(template_name).render(**data)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")

        return output_path

    def open_in_browser(self, path: Path) -> None:
        webbrowser.open(f"file://{path.resolve()}")
