import itertools

import numpy as np
import pytest

from helicity_lab.core.derived import (
    CLAIM_DEADBAND,
    claim_looks_true,
    evaluate,
    helicity_sign,
    spin_dot,
)
from helicity_lab.core.model import Mode

ANGLES = np.linspace(0.0, 2.0 * np.pi, 13)


def unit(angle):
    return np.array([np.cos(angle), np.sin(angle)])


def test_helicity_sign_is_plus_or_minus_one_and_symmetric():
    for a, b in itertools.product(ANGLES, ANGLES):
        s, m = unit(a), unit(b)
        h = helicity_sign(s, m)
        assert h in (1, -1)
        assert h == helicity_sign(-s, -m)


def test_helicity_aligned_and_opposite():
    assert helicity_sign(np.array([1.0, 0.0]), np.array([5.0, 0.0])) == 1
    assert helicity_sign(np.array([-1.0, 0.0]), np.array([5.0, 0.0])) == -1


def test_helicity_zero_velocity_is_positive():
    assert helicity_sign(np.array([0.0, -1.0]), np.zeros(2)) == 1


def test_claim_deadband_value():
    assert CLAIM_DEADBAND == -0.2


def test_claim_true_for_opposite_spins(make_event):
    event = make_event((1.0, 0.0), (-1.0, 0.0))
    assert spin_dot(event) == pytest.approx(-1.0)
    assert claim_looks_true(event)


def test_claim_false_for_near_orthogonal_spins(make_event):
    # dot = -0.1, inside the deadband
    angle = np.arccos(-0.1)
    event = make_event((1.0, 0.0), tuple(unit(angle)))
    assert spin_dot(event) == pytest.approx(-0.1)
    assert not claim_looks_true(event)


def test_claim_false_for_aligned_spins(make_event):
    event = make_event((1.0, 0.0), (2.0, 0.0))
    assert not claim_looks_true(event)


def test_evaluate_right_handed_pair(make_event):
    # electron moves +x with spin +x, anti-neutrino moves -x with spin -x
    event = make_event((1.0, 0.0), (-1.0, 0.0))
    event.orbital_remainder = 2
    readout = evaluate(event)
    assert readout.electron_helicity == 1
    assert readout.antineutrino_helicity == 1
    assert readout.claim_looks_true
    assert readout.orbital_remainder == 2
    assert not readout.spins_balance


def test_evaluate_left_handed_electron(make_event):
    event = make_event((-1.0, 0.0), (-1.0, 0.0))
    readout = evaluate(event)
    assert readout.electron_helicity == -1
    assert readout.antineutrino_helicity == 1
    assert not readout.claim_looks_true
    assert readout.spins_balance


def test_spin_only_events_always_look_true(generator):
    for _ in range(50):
        assert claim_looks_true(generator.generate(0.5, Mode.SPIN_ONLY))


def test_evaluate_does_not_mutate_event(generator):
    event = generator.generate(0.5, Mode.FULL_CONSERVATION)
    before = (event.electron.position.copy(), event.electron.spin_direction.copy(), event.orbital_remainder)
    evaluate(event)
    np.testing.assert_array_equal(event.electron.position, before[0])
    np.testing.assert_array_equal(event.electron.spin_direction, before[1])
    assert event.orbital_remainder == before[2]
