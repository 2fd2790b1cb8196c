# MIT License (see LICENSE)
"""
Family force model.

This subpackage provides:
    - Force curves: Sin, Cos and Activation variants with sample/scale.
    - FamilyProperties: ancestry vector and per-family curve lists.
    - SimulationParameters: colors and properties of all families.

Typical usage:
    import numpy as np
    from particle_life.model import SimulationParameters

    params = SimulationParameters.random(16, np.random.default_rng(1))
    force = params.families[0].attraction(params.families[3], 0.25)
"""
from .curves import (
    CurveProps,
    ActivationProps,
    SinCurve,
    CosCurve,
    ActivationCurve,
    Curve,
    sample_curve,
    scale_curve,
    random_curve,
)
from .family import FamilyProperties
from .parameters import SimulationParameters

__all__ = [
    # Curves
    "CurveProps",
    "ActivationProps",
    "SinCurve",
    "CosCurve",
    "ActivationCurve",
    "Curve",
    "sample_curve",
    "scale_curve",
    "random_curve",
    # Families
    "FamilyProperties",
    "SimulationParameters",
]
