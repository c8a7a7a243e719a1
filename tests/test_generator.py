import random

import numpy as np
import pytest

from helicity_lab.core.config import SIM_CFG
from helicity_lab.core.derived import particle_helicity
from helicity_lab.core.generator import DecayGenerator, orbital_remainder
from helicity_lab.core.model import Mode
from helicity_lab.core.vectors import dot, length, normalize


@pytest.mark.parametrize("mode", list(Mode))
def test_momenta_are_back_to_back(generator, mode):
    for _ in range(50):
        event = generator.generate(0.5, mode)
        d = dot(normalize(event.electron.velocity), normalize(event.antineutrino.velocity))
        assert d == pytest.approx(-1.0, abs=1e-9)


@pytest.mark.parametrize("bias", [0.01, 0.5, 0.99])
def test_spin_only_forces_opposite_spins(generator, bias):
    for _ in range(50):
        event = generator.generate(bias, Mode.SPIN_ONLY)
        np.testing.assert_allclose(
            event.antineutrino.spin_direction,
            -event.electron.spin_direction,
            atol=1e-5,
        )


def test_electron_direction_is_within_angle_spread(generator):
    for _ in range(100):
        event = generator.generate(0.5, Mode.SPIN_AND_MOTION)
        direction = normalize(event.electron.velocity)
        assert direction[0] >= np.cos(SIM_CFG.angle_spread) - 1e-9
        assert abs(np.arctan2(direction[1], direction[0])) <= SIM_CFG.angle_spread + 1e-9


def test_particles_start_at_origin_with_fixed_speed(generator):
    event = generator.generate(0.85, Mode.FULL_CONSERVATION)
    for particle in event.particles:
        np.testing.assert_allclose(particle.position, SIM_CFG.origin)
        assert length(particle.velocity) == pytest.approx(260.0)
        assert len(particle.trail) == 0
        assert particle.trail_timer == 0.0
        assert length(particle.spin_direction) == pytest.approx(1.0)
    assert event.electron.radius == 8.0
    assert event.antineutrino.radius == 6.0
    assert event.time_alive == 0.0
    assert event.duration == 3.0
    assert event.neutron_spin_sign == 1


@pytest.mark.parametrize("mode", [Mode.SPIN_AND_MOTION, Mode.FULL_CONSERVATION])
def test_antineutrino_is_right_handed_outside_spin_only(generator, mode):
    for _ in range(50):
        event = generator.generate(0.5, mode)
        assert particle_helicity(event.antineutrino) == 1
        assert particle_helicity(event.electron) in (1, -1)


def test_high_bias_makes_electron_mostly_left_handed():
    gen = DecayGenerator(random.Random(99))
    left = sum(
        particle_helicity(gen.generate(0.99, Mode.SPIN_AND_MOTION).electron) == -1
        for _ in range(400)
    )
    assert left > 360


def test_low_bias_makes_electron_mostly_right_handed():
    gen = DecayGenerator(random.Random(99))
    left = sum(
        particle_helicity(gen.generate(0.01, Mode.SPIN_AND_MOTION).electron) == -1
        for _ in range(400)
    )
    assert left < 40


def test_proton_sign_takes_both_values(generator):
    signs = {generator.generate(0.5, Mode.SPIN_ONLY).proton_spin_sign for _ in range(100)}
    assert signs == {1, -1}


@pytest.mark.parametrize("mode", list(Mode))
def test_orbital_remainder_matches_spins(generator, mode):
    seen = set()
    for _ in range(300):
        event = generator.generate(0.5, mode)
        expected = orbital_remainder(
            event.neutron_spin_sign,
            event.proton_spin_sign,
            event.electron.spin_direction,
            event.antineutrino.spin_direction,
        )
        assert event.orbital_remainder == expected
        assert event.orbital_remainder in {-2, 0, 2, 4}
        seen.add(event.orbital_remainder)
    assert seen <= {-2, 0, 2, 4}


def test_orbital_remainder_worked_example():
    # proton -1, electron spin y >= 0 (+1), anti-neutrino spin y < 0 (-1)
    value = orbital_remainder(1, -1, np.array([0.3, 0.2]), np.array([-0.3, -0.2]))
    assert value == 2


def test_orbital_remainder_zero_y_counts_as_positive():
    assert orbital_remainder(1, 1, np.array([1.0, 0.0]), np.array([-1.0, 0.0])) == -2


def test_same_seed_gives_same_event():
    a = DecayGenerator(random.Random(5)).generate(0.7, Mode.FULL_CONSERVATION)
    b = DecayGenerator(random.Random(5)).generate(0.7, Mode.FULL_CONSERVATION)
    np.testing.assert_array_equal(a.electron.velocity, b.electron.velocity)
    np.testing.assert_array_equal(a.electron.spin_direction, b.electron.spin_direction)
    assert a.proton_spin_sign == b.proton_spin_sign
    assert a.orbital_remainder == b.orbital_remainder


def test_generate_accepts_integer_mode(generator):
    event = generator.generate(0.5, 1)
    np.testing.assert_allclose(
        event.antineutrino.spin_direction, -event.electron.spin_direction, atol=1e-5
    )
