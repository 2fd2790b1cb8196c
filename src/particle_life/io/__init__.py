# MIT License (see LICENSE)
"""
Input/Output utilities.

This subpackage provides:
    - Config loading/saving as JSON.
    - A read-only JSON dump of simulation parameters for inspection.

Typical usage:
    from particle_life.io import load_config, parameters_to_json

    config = load_config("config.json")
    data = parameters_to_json(sim.parameters)
"""
from .json_io import (
    load_config,
    load_config_raw,
    save_config,
    config_from_json,
    config_to_json,
    curve_to_json,
    family_to_json,
    parameters_to_json,
)

__all__ = [
    # Config
    "load_config",
    "load_config_raw",
    "save_config",
    "config_from_json",
    "config_to_json",
    # Inspection
    "curve_to_json",
    "family_to_json",
    "parameters_to_json",
]
