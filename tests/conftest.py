import random

import numpy as np
import pytest

from helicity_lab.core.generator import DecayGenerator
from helicity_lab.core.model import DecayEvent, Particle
from helicity_lab.core.session import Session


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def generator(rng):
    return DecayGenerator(rng)


@pytest.fixture
def session(generator):
    return Session(generator)


@pytest.fixture
def make_event():
    def factory(electron_spin, antinu_spin, electron_velocity=(260.0, 0.0), proton_sign=1):
        electron = Particle(
            name="e-",
            position=np.array([300.0, 300.0]),
            velocity=np.array(electron_velocity, dtype=float),
            spin_direction=np.array(electron_spin, dtype=float),
        )
        antinu = Particle(
            name="anti-nu",
            position=np.array([300.0, 300.0]),
            velocity=-np.array(electron_velocity, dtype=float),
            spin_direction=np.array(antinu_spin, dtype=float),
        )
        return DecayEvent(electron=electron, antineutrino=antinu, proton_spin_sign=proton_sign)

    return factory
