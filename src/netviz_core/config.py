# src/netviz_core/config.py
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import cerberus
import yaml

logger = logging.getLogger(__name__)


class ConfigParsingError(ValueError):
    """Custom exception for errors during layout configuration parsing."""
    pass


@dataclass(frozen=True)
class LayoutConfig:
    """
    Parameters of the schematic canvas and of the force-directed node layout.
    The defaults match the canvas the schematic viewer draws on.
    """
    width: float = 1200.0
    height: float = 800.0
    link_distance: float = 300.0
    margin: float = 80.0
    iterations: int = 50
    seed: int = 42


_number_rule = {"type": "number", "min": 0}

_layout_config_schema = {
    "width": {**_number_rule, "min": 1},
    "height": {**_number_rule, "min": 1},
    "link_distance": {**_number_rule, "min": 1},
    "margin": _number_rule,
    "iterations": {"type": "integer", "min": 1},
    "seed": {"type": "integer", "nullable": True},
}


def load_layout_config(source: Union[str, Path, Mapping[str, Any], None] = None) -> LayoutConfig:
    """
    Builds a LayoutConfig from a YAML file path or an already-loaded mapping.
    Keys may appear at the top level or under a `layout:` section; missing keys keep
    their defaults. Passing None returns the defaults.
    """
    if source is None:
        return LayoutConfig()

    if isinstance(source, Mapping):
        raw = dict(source)
    else:
        path = Path(source)
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigParsingError(f"Could not read layout configuration '{path}': {e}") from e
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Invalid YAML in layout configuration '{path}': {e}") from e

    if not isinstance(raw, dict):
        raise ConfigParsingError("Layout configuration must be a mapping.")
    section: Dict[str, Any] = raw.get("layout", raw)
    if not isinstance(section, dict):
        raise ConfigParsingError("The 'layout' section must be a mapping.")

    validator = cerberus.Validator(_layout_config_schema)
    if not validator.validate(section):
        raise ConfigParsingError(f"Failed to parse layout configuration: {validator.errors}")

    known = {f.name for f in fields(LayoutConfig)}
    config = LayoutConfig(**{k: v for k, v in validator.document.items() if k in known})
    if min(config.width, config.height) / 2 <= config.margin:
        raise ConfigParsingError(
            f"Margin {config.margin} leaves no drawable area on a {config.width}x{config.height} canvas."
        )
    logger.debug(f"Loaded layout configuration: {config}")
    return config
