"""Tests for auteur CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from auteur import __version__
from auteur.cli import app

runner = CliRunner()

ALPHA = "scale=9,spectacle=9,structure=3,genre_fluidity=3,emotion=6"


@pytest.fixture
def in_project(tmp_project: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_project)
    return tmp_project


@pytest.fixture
def outside_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    workdir = tmp_path / "empty"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


class TestGlobalOptions:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"auteur {__version__}" in result.output

    def test_verbose_accepted(self, outside_project: Path) -> None:
        result = runner.invoke(app, ["--verbose", "classify", "--vector", ALPHA])
        assert result.exit_code == 0


class TestInitCommand:
    def test_init_creates_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["init", "film", "-d", str(tmp_path)])
        assert result.exit_code == 0
        assert (tmp_path / "film" / "auteur.yaml").exists()

    def test_init_with_profile(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["init", "wide-film", "-p", "wide", "-d", str(tmp_path)])
        assert result.exit_code == 0
        assert "wide" in (tmp_path / "wide-film" / "auteur.yaml").read_text()

    def test_init_fails_if_directory_exists(self, tmp_path: Path) -> None:
        (tmp_path / "existing").mkdir()
        result = runner.invoke(app, ["init", "existing", "-d", str(tmp_path)])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_init_unknown_profile(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["init", "film", "-p", "imax", "-d", str(tmp_path)])
        assert result.exit_code == 1
        assert "Unknown map profile" in result.output
        assert not (tmp_path / "film").exists()


class TestDirectorsCommand:
    def test_bundled_catalog(self, outside_project: Path) -> None:
        result = runner.invoke(app, ["directors"])
        assert result.exit_code == 0
        assert "Directors (35)" in result.output

    def test_project_catalog(self, in_project: Path) -> None:
        result = runner.invoke(app, ["directors"])
        assert result.exit_code == 0
        assert "Directors (3)" in result.output

    def test_cluster_filter(self, in_project: Path) -> None:
        result = runner.invoke(app, ["directors", "--cluster", "genre-provocateurs"])
        assert result.exit_code == 0
        assert "Directors (1)" in result.output

    def test_unknown_cluster(self, in_project: Path) -> None:
        result = runner.invoke(app, ["directors", "-c", "mumblecore"])
        assert result.exit_code == 1
        assert "Unknown cluster" in result.output


class TestMatchCommand:
    def test_match_vector(self, in_project: Path) -> None:
        result = runner.invoke(app, ["match", "--vector", ALPHA])
        assert result.exit_code == 0
        assert "Director Matches" in result.output
        assert "Recommended blend" in result.output
        assert "Epic + Classical" in result.output

    def test_match_writes_json(self, in_project: Path) -> None:
        output = in_project / "fit.json"
        result = runner.invoke(app, ["match", "--vector", ALPHA, "-g", "Drama", "-n", "2", "-o", str(output)])
        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert [m["director_id"] for m in data["matches"]] == ["alpha", "beta"]
        assert data["film_genres"] == ["Drama"]

    def test_match_from_file(self, in_project: Path) -> None:
        script = in_project / "script.json"
        script.write_text(json.dumps({"script_vector": {"scale": 5, "spectacle": 5, "structure": 7, "genreFluidity": 9, "emotion": 6}}))
        result = runner.invoke(app, ["match", "--file", str(script), "-o", str(in_project / "fit.json")])
        assert result.exit_code == 0
        data = json.loads((in_project / "fit.json").read_text())
        assert data["matches"][0]["director_id"] == "gamma"
        assert data["matches"][0]["distance"] == 0.0

    def test_match_requires_vector(self, in_project: Path) -> None:
        result = runner.invoke(app, ["match"])
        assert result.exit_code == 2

    def test_match_bad_vector(self, in_project: Path) -> None:
        result = runner.invoke(app, ["match", "--vector", "scale=9,spectacle=9"])
        assert result.exit_code == 1
        assert "missing axes" in result.output


class TestBlendCommand:
    def test_blend(self, in_project: Path) -> None:
        result = runner.invoke(app, ["blend", "alpha", "beta", "--weight", "0.5"])
        assert result.exit_code == 0
        assert "50%" in result.output
        assert "Quadrant:" in result.output

    def test_blend_weight_snapped(self, in_project: Path) -> None:
        result = runner.invoke(app, ["blend", "alpha", "beta", "-w", "0.97"])
        assert result.exit_code == 0
        assert "90%" in result.output

    def test_blend_unknown_director(self, in_project: Path) -> None:
        result = runner.invoke(app, ["blend", "alpha", "nobody"])
        assert result.exit_code == 1
        assert "Unknown director: nobody" in result.output

    def test_blend_weight_range(self, in_project: Path) -> None:
        result = runner.invoke(app, ["blend", "alpha", "beta", "--weight", "1.5"])
        assert result.exit_code == 2


class TestClassifyCommand:
    def test_classify(self, outside_project: Path) -> None:
        result = runner.invoke(app, ["classify", "--vector", "scale=2,spectacle=2,structure=8,genre_fluidity=8,emotion=9"])
        assert result.exit_code == 0
        assert "Intimate + Experimental" in result.output
        assert "operatic" in result.output


class TestSelectCommand:
    def test_select_writes_record(self, in_project: Path) -> None:
        output = in_project / "selection.json"
        result = runner.invoke(app, ["select", "alpha", "beta", "-o", str(output)])
        assert result.exit_code == 0
        record = json.loads(output.read_text())
        assert record["primary_director_id"] == "alpha"
        assert record["secondary_director_id"] == "beta"
        assert record["blend_weight"] == 0.7
        assert record["match_distance"] is None

    def test_select_with_script(self, in_project: Path) -> None:
        script = in_project / "script.json"
        script.write_text(json.dumps({"scale": 9, "spectacle": 9, "structure": 3, "genre_fluidity": 3, "emotion": 6}))
        output = in_project / "selection.json"
        result = runner.invoke(app, ["select", "alpha", "--script", str(script), "-o", str(output)])
        assert result.exit_code == 0
        record = json.loads(output.read_text())
        assert record["blend_weight"] == 1.0
        assert record["match_distance"] == 0.0

    def test_select_prints_json(self, in_project: Path) -> None:
        result = runner.invoke(app, ["select", "gamma"])
        assert result.exit_code == 0
        assert "genre-provocateurs" in result.output


class TestOpticsCommand:
    def test_optics(self, outside_project: Path) -> None:
        result = runner.invoke(app, ["optics", "spielberg"])
        assert result.exit_code == 0
        assert "spherical-prime" in result.output

    def test_optics_unknown(self, outside_project: Path) -> None:
        result = runner.invoke(app, ["optics", "nobody"])
        assert result.exit_code == 1


class TestMapCommand:
    def test_map_report(self, in_project: Path) -> None:
        script = in_project / "script.json"
        script.write_text(json.dumps({"scale": 9, "spectacle": 9, "structure": 3, "genre_fluidity": 3, "emotion": 6}))
        output = in_project / "reports" / "map.html"
        result = runner.invoke(app, ["map", "--script", str(script), "--zoom", "2", "-o", str(output)])
        assert result.exit_code == 0
        assert output.exists()
        assert "zoom 2" in result.output
        assert "YOUR SCRIPT" in output.read_text(encoding="utf-8")

    def test_map_zoom_clamped(self, in_project: Path) -> None:
        output = in_project / "map.html"
        result = runner.invoke(app, ["map", "--zoom", "12", "-o", str(output)])
        assert result.exit_code == 0
        assert "zoom 5" in result.output

    def test_map_unknown_primary(self, in_project: Path) -> None:
        result = runner.invoke(app, ["map", "--primary", "nobody", "-o", str(in_project / "m.html")])
        assert result.exit_code == 1
