"""Define utility functions for reading and writing YAML configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def export_yaml_data(data: dict[str, Any], filepath: Path) -> None:
    """Write the given mapping to a YAML file, preserving its key order."""
    with filepath.open("w") as file:
        yaml.safe_dump(data, file, sort_keys=False, default_flow_style=False)

    if not filepath.exists():
        raise FileNotFoundError(f"Exported to YAML file '{filepath}' yet it doesn't exist")


def load_yaml_data(yaml_path: Path, required_keys: set[str] | None = None) -> dict[str, Any]:
    """Load a mapping from a YAML file.

    :param yaml_path: Path to the YAML file to be imported
    :param required_keys: Set of keys required to exist in the loaded data (if None, ignored)
    :return: Dictionary mapping strings to the loaded values
    :raises KeyError: If a required key is missing in the loaded data
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load data from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            yaml_data = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to load from YAML file: {yaml_path}") from error

    if not isinstance(yaml_data, dict):
        raise RuntimeError(f"Expected a mapping at the top level of YAML file: {yaml_path}")

    for key in sorted(required_keys or set()):
        if key not in yaml_data:
            raise KeyError(f"Required key '{key}' was missing in data loaded from {yaml_path}")

    return yaml_data
