"""Read-only quantities shown to the learner each frame."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .config import SIM_CFG
from .model import DecayEvent, Particle
from .vectors import dot, normalize, sign

# Spins closer to orthogonal than this are not called "opposite".
CLAIM_DEADBAND = SIM_CFG.claim_deadband


@dataclass(frozen=True)
class Readout:
    electron_helicity: int
    antineutrino_helicity: int
    spin_dot: float
    claim_looks_true: bool
    orbital_remainder: int

    @property
    def spins_balance(self) -> bool:
        return self.orbital_remainder == 0


def helicity_sign(spin: np.ndarray, momentum: np.ndarray) -> int:
    """Sign of spin projected on momentum; ``+1`` when the projection is zero."""

    return sign(dot(normalize(spin), normalize(momentum)))


def particle_helicity(particle: Particle) -> int:
    return helicity_sign(particle.spin_direction, particle.velocity)


def spin_dot(event: DecayEvent) -> float:
    return dot(
        normalize(event.electron.spin_direction),
        normalize(event.antineutrino.spin_direction),
    )


def claim_looks_true(event: DecayEvent, deadband: float = CLAIM_DEADBAND) -> bool:
    """Whether "the neutrino spins opposite the electron" appears to hold."""

    return spin_dot(event) < deadband


def evaluate(event: DecayEvent, deadband: float = CLAIM_DEADBAND) -> Readout:
    value = spin_dot(event)
    return Readout(
        electron_helicity=particle_helicity(event.electron),
        antineutrino_helicity=particle_helicity(event.antineutrino),
        spin_dot=value,
        claim_looks_true=value < deadband,
        orbital_remainder=event.orbital_remainder,
    )


__all__ = [
    "CLAIM_DEADBAND",
    "Readout",
    "claim_looks_true",
    "evaluate",
    "helicity_sign",
    "particle_helicity",
    "spin_dot",
]
