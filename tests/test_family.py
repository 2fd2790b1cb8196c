import numpy as np
import pytest

from particle_life.model.curves import (
    ActivationCurve,
    ActivationProps,
    CurveProps,
    SinCurve,
    sample_curve,
)
from particle_life.model.family import FamilyProperties
from particle_life.model.parameters import SimulationParameters


def ramp(slope: float = 1.0, start: float = 0.0) -> ActivationCurve:
    return ActivationCurve(ActivationProps(start=start, slope=slope, end=100.0))


def test_random_family_is_one_hot_with_single_curves():
    rng = np.random.default_rng(0)
    fam = FamilyProperties.random(2, 5, rng)
    assert fam.ancestry == [0.0, 0.0, 1.0, 0.0, 0.0]
    assert len(fam.curves) == 5
    assert all(len(cs) == 1 for cs in fam.curves)


def test_attraction_zero_for_zero_ancestry():
    rng = np.random.default_rng(1)
    fam = FamilyProperties.random(0, 3, rng)
    other = FamilyProperties(ancestry=[0.0, 0.0, 0.0], curves=[[ramp()] for _ in range(3)])
    for d in (0.0, 0.2, 0.7, 1.0):
        assert fam.attraction(other, d) == 0.0


def test_attraction_weights_by_neighbour_ancestry():
    me = FamilyProperties(
        ancestry=[1.0, 0.0],
        curves=[[ramp(slope=2.0)], [ramp(slope=-3.0), ramp(slope=1.0)]],
    )
    blended = FamilyProperties(ancestry=[0.25, 0.75], curves=[[ramp()], [ramp()]])
    d = 0.4
    expected = 0.25 * (2.0 * d) + 0.75 * ((-3.0 * d) + (1.0 * d))
    assert me.attraction(blended, d) == pytest.approx(expected)


def test_attraction_is_asymmetric():
    a = FamilyProperties(ancestry=[1.0, 0.0], curves=[[ramp(1.0)], [ramp(5.0)]])
    b = FamilyProperties(ancestry=[0.0, 1.0], curves=[[ramp(-2.0)], [ramp(1.0)]])
    assert a.attraction(b, 0.5) == pytest.approx(2.5)
    assert b.attraction(a, 0.5) == pytest.approx(-1.0)


def test_combine_with_self_keeps_ancestry():
    rng = np.random.default_rng(2)
    fam = FamilyProperties.random(1, 4, rng)
    blend = fam.combine(fam, (0.5, 0.5))
    assert blend.ancestry == fam.ancestry


def test_combine_concatenates_scaled_curves():
    a = FamilyProperties(
        ancestry=[1.0, 0.0],
        curves=[[SinCurve(CurveProps(1.0, 2.0, 0.0))], [ramp(4.0)]],
    )
    b = FamilyProperties(ancestry=[0.0, 1.0], curves=[[ramp(2.0)], [ramp(-2.0)]])
    child = a.combine(b, (0.25, 0.75))

    assert child.ancestry == pytest.approx([0.25, 0.75])
    assert sum(child.ancestry) == pytest.approx(1.0)
    assert [len(cs) for cs in child.curves] == [2, 2]
    assert child.curves[0][0] == SinCurve(CurveProps(0.25, 0.5, 0.0))
    assert child.curves[1][1] == ActivationCurve(ActivationProps(0.0, -1.5, 75.0))
    # A parent perceives the child as a mix of both parents.
    d = 0.3
    assert a.attraction(child, d) == pytest.approx(
        0.25 * sample_curve(a.curves[0][0], d) + 0.75 * sample_curve(a.curves[1][0], d)
    )


def test_combine_rejects_mismatched_family_counts():
    rng = np.random.default_rng(4)
    with pytest.raises(ValueError):
        FamilyProperties.random(0, 2, rng).combine(FamilyProperties.random(0, 3, rng), (0.5, 0.5))


def test_parameters_random_is_deterministic():
    p1 = SimulationParameters.random(6, np.random.default_rng(42))
    p2 = SimulationParameters.random(6, np.random.default_rng(42))
    assert p1 == p2
    assert len(p1.colors) == len(p1.families) == 6
    for color in p1.colors:
        assert all(0.0 <= ch < 1.0 for ch in color)
    for idx, fam in enumerate(p1.families):
        assert fam.ancestry[idx] == 1.0
        assert sum(fam.ancestry) == 1.0


def test_parameters_reject_color_family_mismatch():
    fam = FamilyProperties(ancestry=[1.0], curves=[[ramp()]])
    with pytest.raises(ValueError):
        SimulationParameters(colors=[(0.1, 0.2, 0.3), (0.4, 0.5, 0.6)], families=[fam])
