"""
Configuration module for birdwalk.

A config file has two sections:

    walker: depth, draws, chained and seed of the GraphWalker
    data:   where the interaction tables come from (a JSON path, or the
            parameters of a synthetic graph)

``load_settings`` reads a file, applies command line overrides and
validates the walker section, so scripts receive ready-to-use values.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from birdwalk.errors import InvalidConfigError
from birdwalk.walks import WalkerConfig

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"

SECTIONS = ('walker', 'data')


@dataclass(frozen=True)
class Settings:
    """
    Validated content of a config file.

    Attributes:
        walker: Configuration of the GraphWalker
        data: The ``data`` section, passed to interactions_from_config
    """
    walker: WalkerConfig
    data: Dict[str, Any] = field(default_factory=dict)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read the raw sections of a YAML config file.

    Args:
        config_path: Path to config file. If None, loads default.yaml

    Returns:
        Dictionary with a ``walker`` and a ``data`` section (possibly empty)

    Raises:
        InvalidConfigError: If the file holds something else than a
            mapping, or an unknown section
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    with open(path, 'r') as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise InvalidConfigError(f"{path} must contain a mapping of sections")

    unknown = set(raw) - set(SECTIONS)
    if unknown:
        raise InvalidConfigError(
            f"unknown config sections in {path}: {', '.join(sorted(unknown))}"
        )

    return {section: dict(raw.get(section) or {}) for section in SECTIONS}


def load_settings(
    config_path: Optional[str] = None,
    walker_overrides: Optional[Dict[str, Any]] = None,
    data_path: Optional[str] = None
) -> Settings:
    """
    Load a config file and turn it into validated settings.

    Args:
        config_path: Path to config file. If None, loads default.yaml
        walker_overrides: Walker values replacing the file's; None values
            are ignored so that unset command line flags keep the file's
        data_path: JSON tables to load instead of the configured source

    Returns:
        Settings with a validated WalkerConfig

    Raises:
        InvalidConfigError: If the walker section is invalid
    """
    config = load_config(config_path)

    walker_section = config['walker']
    for key, value in (walker_overrides or {}).items():
        if value is not None:
            walker_section[key] = value

    walker = WalkerConfig.from_dict(walker_section)
    walker.validate()

    data_section = config['data']
    if data_path:
        data_section['path'] = data_path

    return Settings(walker=walker, data=data_section)


__all__ = ['Settings', 'load_config', 'load_settings', 'DEFAULT_CONFIG_PATH']
