"""Tests for auteur configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from auteur.config import (
    AuteurConfig,
    create_default_config,
    find_config,
    load_config,
    load_profile,
    merge_config,
    write_config,
)
from auteur.exceptions import ConfigError


class TestDefaults:
    def test_default_config(self) -> None:
        config = AuteurConfig()
        assert config.map_profile == "panel"
        assert (config.geometry.width, config.geometry.height, config.geometry.pad) == (600, 380, 40)
        assert config.viewport.min_zoom == 1.0
        assert config.viewport.max_zoom == 5.0
        assert config.blend.default_weight == 0.7
        assert config.matching.top_n == 5

    def test_invalid_profile(self) -> None:
        with pytest.raises(ValueError):
            AuteurConfig(map_profile="cinemascope")


class TestProfiles:
    def test_load_profile_returns_copy(self) -> None:
        profile = load_profile("wide")
        profile["geometry"]["width"] = 1
        assert load_profile("wide")["geometry"]["width"] == 720.0

    def test_unknown_profile(self) -> None:
        with pytest.raises(ConfigError):
            load_profile("cinemascope")

    def test_merge_nested_sections(self) -> None:
        merged = merge_config({"geometry": {"pad": 30.0}, "project_name": "x"}, load_profile("wide"))
        assert merged["geometry"] == {"width": 720.0, "height": 420.0, "pad": 30.0}
        assert merged["project_name"] == "x"


class TestLoadConfig:
    def test_load_from_directory(self, tmp_project: Path) -> None:
        config = load_config(tmp_project)
        assert config.project_name == "test_project"
        assert config.config_path == tmp_project / "auteur.yaml"

    def test_wide_profile(self, tmp_path: Path) -> None:
        (tmp_path / "auteur.yaml").write_text(yaml.dump({"map_profile": "wide"}))
        config = load_config(tmp_path)
        assert config.geometry.width == 720.0

    def test_project_overrides(self, tmp_path: Path) -> None:
        data = {"viewport": {"max_zoom": 3.0}, "matching": {"use_genres": False}}
        (tmp_path / "auteur.yaml").write_text(yaml.dump(data))
        config = load_config(tmp_path / "auteur.yaml")
        assert config.viewport.max_zoom == 3.0
        assert config.viewport.min_zoom == 1.0
        assert config.matching.use_genres is False

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        (tmp_path / "auteur.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_pad_too_large(self, tmp_path: Path) -> None:
        (tmp_path / "auteur.yaml").write_text(yaml.dump({"geometry": {"pad": 200}}))
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_zoom_range(self, tmp_path: Path) -> None:
        (tmp_path / "auteur.yaml").write_text(yaml.dump({"viewport": {"min_zoom": 4, "max_zoom": 2}}))
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestCatalogPath:
    def test_relative_to_config(self, tmp_path: Path) -> None:
        (tmp_path / "auteur.yaml").write_text(yaml.dump({"catalog_path": "data/directors.yaml"}))
        config = load_config(tmp_path)
        assert config.resolve_catalog_path() == tmp_path / "data" / "directors.yaml"

    def test_unset(self) -> None:
        assert AuteurConfig().resolve_catalog_path() is None


class TestFindConfig:
    def test_finds_in_parent(self, tmp_project: Path) -> None:
        nested = tmp_project / "scripts" / "act1"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_project / "auteur.yaml").resolve()

    def test_write_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "proj" / "auteur.yaml"
        write_config(create_default_config("proj", "wide"), path)
        config = load_config(path)
        assert config.project_name == "proj"
        assert config.map_profile == "wide"
        assert config.geometry.height == 420.0
