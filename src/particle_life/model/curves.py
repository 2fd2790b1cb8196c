# MIT License (see LICENSE)
"""
Force curves: parametric scalar functions of normalized distance.

A curve maps a normalized distance t (raw distance divided by the
interaction radius, meaningfully in [0, 1]) to a signed force magnitude.
Positive values pull a particle toward its neighbour, negative values
push it away.

Three variants form a closed union:
  - SinCurve:        sin((lerp(0, 2π, t) + x_offset) * x_mul) * y_mul
  - CosCurve:        cos((lerp(0, 2π, t) + x_offset) * x_mul) * y_mul
  - ActivationCurve: 0 for t <= start, else (t - start) * slope

The trigonometric variants interpolate with t clamped to [0, 1].
ActivationProps.end bounds random generation but is not applied when
sampling.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from ..constants import TWO_PI, MAX_INTERACTION_DIST
from ..util import lerp_bounded


# =============================================================================
# Curve Parameters
# =============================================================================

@dataclass(frozen=True)
class CurveProps:
    """
    Parameters shared by the Sin and Cos variants.

    Attributes:
        x_mul: Frequency multiplier applied after the phase offset.
        y_mul: Amplitude. Samples are bounded by |y_mul|.
        x_offset: Phase offset in radians.
    """
    x_mul: float
    y_mul: float
    x_offset: float

    def scale(self, mul: float) -> CurveProps:
        """Return a copy with every field multiplied by mul."""
        return CurveProps(
            x_mul=self.x_mul * mul,
            y_mul=self.y_mul * mul,
            x_offset=self.x_offset * mul,
        )

    @classmethod
    def random(cls, rng: np.random.Generator) -> CurveProps:
        """Draw x_mul in [-2, 2), y_mul in [-10, 10), x_offset in [0, 2π)."""
        return cls(
            x_mul=float(rng.uniform(-2.0, 2.0)),
            y_mul=float(rng.uniform(-10.0, 10.0)),
            x_offset=float(rng.uniform(0.0, TWO_PI)),
        )


@dataclass(frozen=True)
class ActivationProps:
    """
    Parameters of the Activation (ramp) variant.

    Attributes:
        start: Normalized distance below which the curve is zero.
        slope: Gradient of the ramp past start.
        end: Upper end of the ramp. Generated in [R/2, R) but not enforced
             by sample_curve.
    """
    start: float
    slope: float
    end: float

    def scale(self, mul: float) -> ActivationProps:
        """Return a copy with every field multiplied by mul."""
        return ActivationProps(
            start=self.start * mul,
            slope=self.slope * mul,
            end=self.end * mul,
        )

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        interaction_radius: float = MAX_INTERACTION_DIST,
    ) -> ActivationProps:
        """Draw start in [0, 2), slope in [-10, 10), end in [R/2, R)."""
        return cls(
            start=float(rng.uniform(0.0, 2.0)),
            slope=float(rng.uniform(-10.0, 10.0)),
            end=float(rng.uniform(interaction_radius / 2.0, interaction_radius)),
        )


# =============================================================================
# Curve Variants
# =============================================================================

@dataclass(frozen=True)
class SinCurve:
    props: CurveProps


@dataclass(frozen=True)
class CosCurve:
    props: CurveProps


@dataclass(frozen=True)
class ActivationCurve:
    props: ActivationProps


# Closed union; every operation below dispatches over exactly these three.
Curve = SinCurve | CosCurve | ActivationCurve


def sample_curve(curve: Curve, t: float) -> float:
    """
    Evaluate a curve at normalized distance t.

    Pure function, safe to call from any number of threads.

    Args:
        curve: The curve to evaluate.
        t: Normalized distance. No bounds checking is done here.

    Returns:
        Signed force magnitude.

    Raises:
        TypeError: If curve is not one of the known variants.
    """
    if isinstance(curve, SinCurve):
        p = curve.props
        return math.sin((lerp_bounded(0.0, TWO_PI, t) + p.x_offset) * p.x_mul) * p.y_mul
    if isinstance(curve, CosCurve):
        p = curve.props
        return math.cos((lerp_bounded(0.0, TWO_PI, t) + p.x_offset) * p.x_mul) * p.y_mul
    if isinstance(curve, ActivationCurve):
        p = curve.props
        if t > p.start:
            return (t - p.start) * p.slope
        return 0.0
    raise TypeError(f"Unknown curve type: {type(curve)}")


def scale_curve(curve: Curve, mul: float) -> Curve:
    """
    Return a copy of curve with every numeric parameter multiplied by mul.

    Used when blending the curves of two families.

    Raises:
        TypeError: If curve is not one of the known variants.
    """
    if isinstance(curve, SinCurve):
        return SinCurve(curve.props.scale(mul))
    if isinstance(curve, CosCurve):
        return CosCurve(curve.props.scale(mul))
    if isinstance(curve, ActivationCurve):
        return ActivationCurve(curve.props.scale(mul))
    raise TypeError(f"Unknown curve type: {type(curve)}")


def random_curve(
    rng: np.random.Generator,
    *,
    fast_mode: bool = False,
    interaction_radius: float = MAX_INTERACTION_DIST,
) -> Curve:
    """
    Draw a random curve.

    In fast mode the result is always an ActivationCurve. Otherwise Sin and
    Cos are chosen with equal probability.
    """
    if fast_mode:
        return ActivationCurve(ActivationProps.random(rng, interaction_radius))
    if rng.random() < 0.5:
        return CosCurve(CurveProps.random(rng))
    return SinCurve(CurveProps.random(rng))
