"""Sampling of fresh decay events."""
from __future__ import annotations

import random
from collections import deque

import numpy as np

from .config import SIM_CFG, SimCfg
from .model import DecayEvent, Mode, Particle
from .vectors import normalize, sign, unit_from_angle


def orbital_remainder(
    neutron_spin_sign: int,
    proton_spin_sign: int,
    electron_spin: np.ndarray,
    antineutrino_spin: np.ndarray,
) -> int:
    """Angular momentum the three spins fail to account for.

    Spins are projected on the screen y axis, so each contributes +1 or -1.
    """

    s_e = sign(float(electron_spin[1]))
    s_nu = sign(float(antineutrino_spin[1]))
    return neutron_spin_sign - (proton_spin_sign + s_e + s_nu)


class DecayGenerator:
    """Produces decay events from a private random source.

    Pass a seeded :class:`random.Random` for reproducible sequences; the
    default instance is seeded from OS entropy.
    """

    def __init__(self, rng: random.Random | None = None, cfg: SimCfg = SIM_CFG) -> None:
        self.rng = rng or random.Random()
        self.cfg = cfg

    def generate(self, bias: float, mode: Mode) -> DecayEvent:
        cfg = self.cfg
        rng = self.rng
        mode = Mode(mode)

        angle = rng.uniform(-cfg.angle_spread, cfg.angle_spread)
        dir_e = normalize(unit_from_angle(angle))
        dir_nu = normalize(-dir_e)

        # Stage 2 and 3 physics: electron mostly left-handed
        left_handed = rng.random() < bias
        spin_e = normalize(-dir_e) if left_handed else normalize(dir_e)
        # Anti-neutrino is always right-handed
        spin_nu = normalize(dir_nu)

        proton_sign = 1 if rng.randint(0, 1) else -1

        if mode is Mode.SPIN_ONLY:
            # Stage 1 shortcut: spins drawn exactly opposite regardless of motion
            spin_nu = normalize(-spin_e)

        origin = cfg.origin
        electron = Particle(
            name="e-",
            position=origin.copy(),
            velocity=dir_e * cfg.particle_speed,
            spin_direction=spin_e,
            radius=cfg.electron_radius,
            color=cfg.electron_color,
            trail=deque(maxlen=cfg.trail_max_length),
        )
        antineutrino = Particle(
            name="anti-nu",
            position=origin.copy(),
            velocity=dir_nu * cfg.particle_speed,
            spin_direction=spin_nu,
            radius=cfg.antineutrino_radius,
            color=cfg.antineutrino_color,
            trail=deque(maxlen=cfg.trail_max_length),
        )
        return DecayEvent(
            electron=electron,
            antineutrino=antineutrino,
            proton_spin_sign=proton_sign,
            neutron_spin_sign=cfg.neutron_spin_sign,
            orbital_remainder=orbital_remainder(
                cfg.neutron_spin_sign, proton_sign, spin_e, spin_nu
            ),
            duration=cfg.event_duration,
        )


__all__ = ["DecayGenerator", "orbital_remainder"]
