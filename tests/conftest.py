"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml

# Keep Rich from wrapping CLI output at 80 columns (long tmp paths split messages).
os.environ.setdefault("COLUMNS", "200")

from auteur.catalog import Catalog, DirectorProfile, VisualMandate
from auteur.classify import Cluster
from auteur.config import MapGeometry, ViewportSettings
from auteur.vector import StyleVector


@pytest.fixture
def epic_vector() -> StyleVector:
    """Big, classical, warm: identical to the D1 fixture director."""
    return StyleVector({"scale": 8, "spectacle": 8, "structure": 2, "genreFluidity": 2, "emotion": 5})


@pytest.fixture
def intimate_vector() -> StyleVector:
    return StyleVector({"scale": 2, "spectacle": 2, "structure": 8, "genreFluidity": 8, "emotion": 5})


@pytest.fixture
def full_vector() -> StyleVector:
    """A vector carrying all eight axes, display axes included."""
    return StyleVector(
        {
            "scale": 9,
            "structure": 2,
            "visual": 7,
            "darkness": 4,
            "dialogue": 6,
            "spectacle": 9,
            "genre_fluidity": 4,
            "emotion": 9,
        }
    )


@pytest.fixture
def d1(epic_vector: StyleVector) -> DirectorProfile:
    return DirectorProfile(
        id="d1",
        name="Dana One",
        cluster=Cluster.EPIC_FORMALISTS,
        known_for=("Adventure",),
        vector=epic_vector,
        visual_mandate=VisualMandate(
            lighting="Bright high-key daylight",
            lens="Anamorphic 40-75mm on a crane",
            texture="35mm film grain",
            color="Warm amber",
        ),
    )


@pytest.fixture
def d2(intimate_vector: StyleVector) -> DirectorProfile:
    return DirectorProfile(
        id="d2",
        name="Dev Two",
        cluster=Cluster.INTIMATE_HUMANISTS,
        known_for=("Drama", "Thriller"),
        vector=intimate_vector,
        visual_mandate=VisualMandate(
            lighting="Low-key practicals",
            lens="Handheld 28mm with diffusion",
            texture="Digital, clean",
            color="Cool steel blues",
        ),
    )


@pytest.fixture
def two_director_catalog(d1: DirectorProfile, d2: DirectorProfile) -> Catalog:
    return Catalog([d1, d2])


@pytest.fixture
def sample_catalog_entries() -> list[dict]:
    """Raw catalog entries as they appear in a YAML catalog file."""
    return [
        {
            "id": "alpha",
            "name": "Alpha Director",
            "cluster": "epic-formalists",
            "known_for": ["Sci-Fi", "Drama"],
            "vector": {
                "scale": 9,
                "structure": 3,
                "visual": 8,
                "darkness": 5,
                "dialogue": 4,
                "spectacle": 9,
                "genre_fluidity": 3,
                "emotion": 6,
            },
            "visual_mandate": {"lighting": "Hard sun", "lens": "Wide 24mm"},
        },
        {
            "id": "beta",
            "name": "Beta Director",
            "cluster": "intimate-humanists",
            "known_for": ["Drama"],
            "vector": {
                "scale": 3,
                "structure": 6,
                "visual": 6,
                "darkness": 6,
                "dialogue": 8,
                "spectacle": 2,
                "genre_fluidity": 6,
                "emotion": 8,
            },
        },
        {
            "id": "gamma",
            "name": "Gamma Director",
            "cluster": "genre-provocateurs",
            "known_for": ["Horror", "Comedy"],
            "vector": {
                "scale": 5,
                "structure": 7,
                "visual": 7,
                "darkness": 8,
                "dialogue": 6,
                "spectacle": 5,
                "genre_fluidity": 9,
                "emotion": 6,
            },
        },
    ]


@pytest.fixture
def catalog_file(tmp_path: Path, sample_catalog_entries: list[dict]) -> Path:
    path = tmp_path / "directors.yaml"
    with open(path, "w") as f:
        yaml.dump({"directors": sample_catalog_entries}, f)
    return path


@pytest.fixture
def geometry() -> MapGeometry:
    return MapGeometry()


@pytest.fixture
def viewport_settings() -> ViewportSettings:
    return ViewportSettings()


@pytest.fixture
def tmp_project(tmp_path: Path, catalog_file: Path) -> Path:
    """Create a temporary project directory with auteur.yaml and a custom catalog."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()
    config = {
        "project_name": "test_project",
        "map_profile": "panel",
        "catalog_path": str(catalog_file),
    }
    with open(project_dir / "auteur.yaml", "w") as f:
        yaml.dump(config, f)
    return project_dir
