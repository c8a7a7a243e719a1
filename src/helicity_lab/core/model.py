"""Data models for the decay simulation state."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np

from .config import SIM_CFG
from .vectors import normalize


class Mode(IntEnum):
    """Teaching stages, in the order they are presented."""

    SPIN_ONLY = 1
    SPIN_AND_MOTION = 2
    FULL_CONSERVATION = 3


def _make_trail() -> deque[np.ndarray]:
    return deque(maxlen=SIM_CFG.trail_max_length)


@dataclass
class Particle:
    """A single moving point with spin and a bounded trail."""

    name: str
    position: np.ndarray = field(
        default_factory=lambda: np.zeros(2, dtype=float)
    )
    velocity: np.ndarray = field(
        default_factory=lambda: np.zeros(2, dtype=float)
    )
    spin_direction: np.ndarray = field(
        default_factory=lambda: np.array([1.0, 0.0], dtype=float)
    )
    radius: float = 8.0
    color: tuple[int, int, int] = (255, 255, 255)
    trail: deque[np.ndarray] = field(default_factory=_make_trail)
    trail_timer: float = 0.0

    @property
    def momentum_direction(self) -> np.ndarray:
        return normalize(self.velocity)


@dataclass
class DecayEvent:
    """One sampled electron/anti-neutrino pair plus its spin bookkeeping."""

    electron: Particle
    antineutrino: Particle
    proton_spin_sign: int
    neutron_spin_sign: int = 1
    orbital_remainder: int = 0
    time_alive: float = 0.0
    duration: float = 3.0

    @property
    def particles(self) -> tuple[Particle, Particle]:
        return self.electron, self.antineutrino

    @property
    def expired(self) -> bool:
        return self.time_alive >= self.duration


__all__ = ["DecayEvent", "Mode", "Particle"]
