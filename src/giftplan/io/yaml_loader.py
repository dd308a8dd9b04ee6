"""YAML data file loader for scenario presets."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from giftplan.utils.exceptions import ConfigError


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Args:
        path: Absolute or relative path to the YAML file.

    Returns:
        Parsed YAML content (typically a dict or list).

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file is not valid YAML.
    """
    with open(path, encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc


def load_package_yaml(relative_path: str) -> Any:
    """Load a YAML file relative to the giftplan package root.

    Args:
        relative_path: Path relative to ``src/giftplan/``,
            e.g. ``"config/presets.yaml"``.
    """
    package_root = Path(__file__).resolve().parent.parent
    return load_yaml(package_root / relative_path)
