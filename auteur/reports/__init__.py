"""
auteur.reports - HTML report generation.

Generates self-contained HTML reports:
- Director constellation map with match table
"""

from __future__ import annotations

from auteur.reports.constellation import generate_constellation_report
from auteur.reports.generator import ReportGenerator

__all__ = ["ReportGenerator", "generate_constellation_report"]
