"""Tests for configuration loading and the resolve pipeline."""

import json
import os

import pytest
import yaml

from chartopt_lab.config import THEME_ENV_KEY, load_config
from chartopt_lab.core.registry import ClassRegistry
from chartopt_lab.model.theme import load_theme
from chartopt_lab.pipeline import load_option, run_pipeline


def _write_yaml(path, data) -> str:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


@pytest.fixture
def run_dir(tmp_path, monkeypatch):
    monkeypatch.delenv(THEME_ENV_KEY, raising=False)
    _write_yaml(tmp_path / "theme.yaml", {"grid": {"left": 42}, "title": {"text": "From theme"}})
    _write_yaml(tmp_path / "chart.yaml", {"title": {}, "grid": {"right": 5}, "series": {"type": "line"}})
    return tmp_path


class TestConfig:
    """Test YAML configuration loading."""

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_sections_and_relative_paths(self, run_dir) -> None:
        config_path = _write_yaml(run_dir / "config.yaml", {
            "theme": {"path": "theme.yaml"},
            "input": {"option_path": "chart.yaml"},
            "output": {"output_dir": str(run_dir / "out"), "indent": 4},
            "logging": {"level": "DEBUG"},
        })
        config = load_config(config_path)

        assert config.theme.path == os.path.join(str(run_dir), "theme.yaml")
        assert config.input.option_path == os.path.join(str(run_dir), "chart.yaml")
        assert config.output.indent == 4
        assert config.logging.level == "DEBUG"
        assert os.path.isdir(run_dir / "out")

    def test_env_vars_resolved(self, run_dir, monkeypatch) -> None:
        monkeypatch.setenv("CHARTOPT_TEST_OUT", str(run_dir / "env_out"))
        config_path = _write_yaml(run_dir / "config.yaml", {
            "output": {"output_dir": "${CHARTOPT_TEST_OUT}"},
        })
        config = load_config(config_path)
        assert config.output.output_dir == str(run_dir / "env_out")
        assert config.output_path == os.path.join(str(run_dir / "env_out"), "resolved_option.json")

    def test_theme_env_override(self, run_dir, monkeypatch) -> None:
        other = _write_yaml(run_dir / "other.yaml", {})
        monkeypatch.setenv(THEME_ENV_KEY, other)
        config_path = _write_yaml(run_dir / "config.yaml", {
            "theme": {"path": "theme.yaml"},
            "output": {"output_dir": str(run_dir / "out")},
        })
        assert load_config(config_path).theme.path == other

    def test_relative_output_dir_follows_config_file(self, run_dir, tmp_path_factory, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path_factory.mktemp("elsewhere"))
        config_path = _write_yaml(run_dir / "config.yaml", {"output": {"output_dir": "results"}})
        config = load_config(config_path)
        assert config.output.output_dir == os.path.join(str(run_dir), "results")
        assert os.path.isdir(run_dir / "results")

    def test_bad_section(self, run_dir) -> None:
        config_path = _write_yaml(run_dir / "config.yaml", {"theme": ["not", "a", "mapping"]})
        with pytest.raises(ValueError):
            load_config(config_path)


class TestTheme:
    """Test theme loading."""

    def test_load_theme(self, run_dir) -> None:
        theme = load_theme(str(run_dir / "theme.yaml"))
        assert theme.name == "theme"
        assert theme.get("grid") == {"left": 42}
        assert theme.get("legend") is None

    def test_empty_theme(self) -> None:
        assert load_theme(None).get("grid") is None

    def test_missing_theme(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_theme(str(tmp_path / "missing.yaml"))


class TestPipeline:
    """Test the end-to-end resolve pipeline."""

    def test_run_pipeline_writes_resolved_option(self, run_dir) -> None:
        config_path = _write_yaml(run_dir / "config.yaml", {
            "theme": {"path": "theme.yaml"},
            "input": {"option_path": "chart.yaml"},
            "output": {"output_dir": str(run_dir / "out")},
        })
        config = load_config(config_path)
        registry = ClassRegistry("PIPELINE")

        model = run_pipeline(config, registry=registry)

        assert registry.has_class("series")
        with open(config.output_path, "r", encoding="utf-8") as f:
            resolved = json.load(f)
        assert resolved == model.get_option()
        assert resolved["title"][0]["text"] == "From theme"
        assert resolved["grid"][0]["right"] == 5
        assert resolved["grid"][0]["left"] == 42
        assert resolved["series"][0]["symbol"] == "emptyCircle"

    def test_explicit_option_skips_input_file(self, run_dir) -> None:
        config_path = _write_yaml(run_dir / "config.yaml", {"output": {"output_dir": str(run_dir / "out")}})
        model = run_pipeline(load_config(config_path), {"grid": {}}, registry=ClassRegistry("PIPELINE"))
        assert model.get_component("grid").option["left"] == "10%"

    def test_no_option_configured(self, run_dir) -> None:
        config_path = _write_yaml(run_dir / "config.yaml", {"output": {"output_dir": str(run_dir / "out")}})
        with pytest.raises(ValueError):
            run_pipeline(load_config(config_path), registry=ClassRegistry("PIPELINE"))

    def test_load_option_json(self, tmp_path) -> None:
        path = tmp_path / "chart.json"
        path.write_text(json.dumps({"grid": {"left": 1}}), encoding="utf-8")
        assert load_option(str(path)) == {"grid": {"left": 1}}
