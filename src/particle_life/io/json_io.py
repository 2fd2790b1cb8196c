# MIT License (see LICENSE)
"""
JSON input/output for configuration and parameter inspection.

Configuration files are read at startup:

{
  "family_count": int,             # Default: 16
  "particle_count": int,           # Per family, default: 256
  "interaction_radius": float,     # Default: 100.0
  "time_step": float,              # Seconds, default: 1/60
  "fast_mode": bool,               # Activation curves only, default: false
  "batch_size": int,               # Default: 128
  "max_workers": int | null,       # Default: CPU count
  "position_range": [low, high],   # Default: [-1000, 1000]
  "particle_scale": float,         # Default: 20.0
  "spatial_index": "kdtree" | "grid",
  "seed": int | null,
  "log_level": string,
  "log_file": string | null,
  "log_interval": int
}

Unknown keys are ignored. Simulation parameters can be dumped for
inspection with parameters_to_json(); there is deliberately no loader,
since runs do not resume from saved state.
"""
from __future__ import annotations
import json
import logging
from dataclasses import fields
from typing import Any

from ..config import SimulationConfig
from ..model.curves import ActivationCurve, CosCurve, Curve, SinCurve
from ..model.family import FamilyProperties
from ..model.parameters import SimulationParameters

logger = logging.getLogger(__name__)


def load_config_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a config file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    logger.info("Loading configuration from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error("Configuration file not found at %s", path)
        raise
    except json.JSONDecodeError:
        logger.error("Error decoding JSON from %s", path)
        raise


def config_from_json(data: dict[str, Any]) -> SimulationConfig:
    """
    Build a SimulationConfig from a dict, falling back to defaults.

    Raises:
        ValueError: If the resulting config fails validation.
    """
    known = {f.name for f in fields(SimulationConfig)}
    ignored = sorted(set(data) - known)
    if ignored:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(ignored))
    kwargs = {k: v for k, v in data.items() if k in known}
    if "position_range" in kwargs:
        lo, hi = kwargs["position_range"]
        kwargs["position_range"] = (lo, hi)
    return SimulationConfig(**kwargs).clamp().check()


def load_config(path: str) -> SimulationConfig:
    """Load, validate and return a SimulationConfig from a JSON file."""
    config = config_from_json(load_config_raw(path))
    logger.info("Configuration loaded successfully")
    return config


def config_to_json(config: SimulationConfig) -> dict[str, Any]:
    """Serialize a config to a JSON-compatible dict (all fields)."""
    return config.as_dict()


def save_config(config: SimulationConfig, path: str, indent: int = 2) -> None:
    """Write a config to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=indent)


def curve_to_json(curve: Curve) -> dict[str, Any]:
    """
    Serialize a curve as {"type": ..., <params>}.

    Raises:
        TypeError: If curve is not one of the known variants.
    """
    if isinstance(curve, SinCurve):
        p = curve.props
        return {"type": "sin", "x_mul": p.x_mul, "y_mul": p.y_mul, "x_offset": p.x_offset}
    if isinstance(curve, CosCurve):
        p = curve.props
        return {"type": "cos", "x_mul": p.x_mul, "y_mul": p.y_mul, "x_offset": p.x_offset}
    if isinstance(curve, ActivationCurve):
        p = curve.props
        return {"type": "activation", "start": p.start, "slope": p.slope, "end": p.end}
    raise TypeError(f"Cannot serialize unknown curve type: {type(curve)}")


def family_to_json(family: FamilyProperties) -> dict[str, Any]:
    return {
        "ancestry": list(family.ancestry),
        "curves": [[curve_to_json(c) for c in curves] for curves in family.curves],
    }


def parameters_to_json(parameters: SimulationParameters) -> dict[str, Any]:
    """Dump colors and families of a parameter set for inspection."""
    return {
        "colors": [list(c) for c in parameters.colors],
        "families": [family_to_json(f) for f in parameters.families],
    }
