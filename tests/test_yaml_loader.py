"""Tests for YAML loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from giftplan.io.yaml_loader import load_package_yaml, load_yaml
from giftplan.utils.exceptions import ConfigError


class TestYamlLoader:
    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "data.yaml"
        path.write_text("a: 1\nb: [2, 3]\n")
        assert load_yaml(path) == {"a": 1, "b": [2, 3]}

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("a: [1, 2\n")
        with pytest.raises(ConfigError):
            load_yaml(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_yaml(tmp_path / "missing.yaml")

    def test_package_presets(self) -> None:
        data = load_package_yaml("config/presets.yaml")
        assert data["steady"]["monthly_contribution"] == 100_000
