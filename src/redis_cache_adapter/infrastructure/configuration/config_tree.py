"""Host configuration tree access.

ONLY configuration lookup - resolves a dotted section path such as
``cache.redis1`` in a host configuration tree given as nested mappings,
dotted flat keys, or a YAML file.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from ...core.exceptions.configuration_error import ConfigurationError


def flatten_config(node: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Flatten nested mappings into dotted keys.

    ``{"timeout": {"read": "3s"}}`` becomes ``{"timeout.read": "3s"}``.
    """
    flat: Dict[str, Any] = {}
    for key, value in node.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_config(value, f"{full_key}."))
        else:
            flat[full_key] = value
    return flat


def get_config_section(tree: Mapping[str, Any], path: str) -> Dict[str, Any]:
    """Get a configuration section as a flat mapping of dotted keys.

    Args:
        tree: Host configuration tree
        path: Dotted section path, e.g. ``cache.redis1``

    Returns:
        Section values keyed relative to ``path``; empty when absent
    """
    flat = flatten_config(tree)
    prefix = f"{path}."
    return {key[len(prefix):]: value for key, value in flat.items() if key.startswith(prefix)}


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML configuration tree.

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping
    """
    config_path = Path(path)
    try:
        with config_path.open(encoding="utf-8") as fp:
            data = yaml.safe_load(fp)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"unable to load configuration file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"configuration file {config_path} must contain a mapping")
    return dict(data)
