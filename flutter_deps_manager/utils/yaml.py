"""Contains utility functions for working with YAML files."""

from typing import Any

from ruamel.yaml import YAML

yaml = YAML(typ="safe")


def load_yaml_string(content: str) -> dict[str, Any]:
    """Parse YAML text and return a dictionary. Empty documents give an empty dictionary."""
    data = yaml.load(content)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping at the top level, got {type(data).__name__}")
    return data
