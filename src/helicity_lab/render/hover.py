"""Hit-testing of the scene for hover tooltips."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from helicity_lab.core.config import RENDER_CFG, RenderCfg
from helicity_lab.core.model import DecayEvent, Mode, Particle
from helicity_lab.core.vectors import length, normalize, perp, point_segment_distance
from helicity_lab.data.tooltips import TOOLTIPS, Tooltip

MOMENTUM = "momentum"
SPIN = "spin"


@dataclass(frozen=True)
class ArrowSegment:
    start: np.ndarray
    direction: np.ndarray
    length: float
    kind: str

    @property
    def end(self) -> np.ndarray:
        return self.start + self.direction * self.length


def particle_arrows(
    particle: Particle,
    mode: Mode,
    render_cfg: RenderCfg = RENDER_CFG,
) -> list[ArrowSegment]:
    """Arrows drawn for ``particle``: spin only in mode 1, momentum and spin otherwise."""

    mom_dir = particle.momentum_direction
    spin_dir = normalize(particle.spin_direction)
    origin = particle.position.copy()
    if mode is Mode.SPIN_ONLY:
        return [ArrowSegment(origin, spin_dir, render_cfg.spin_only_arrow_length, SPIN)]
    offset = perp(mom_dir) * render_cfg.spin_arrow_offset
    return [
        ArrowSegment(origin, mom_dir, render_cfg.momentum_arrow_length, MOMENTUM),
        ArrowSegment(origin + offset, spin_dir, render_cfg.spin_arrow_length, SPIN),
    ]


def event_arrows(
    event: DecayEvent,
    mode: Mode,
    render_cfg: RenderCfg = RENDER_CFG,
) -> list[ArrowSegment]:
    arrows: list[ArrowSegment] = []
    for particle in event.particles:
        arrows.extend(particle_arrows(particle, mode, render_cfg))
    return arrows


def proton_position(origin: np.ndarray, render_cfg: RenderCfg = RENDER_CFG) -> np.ndarray:
    return origin + np.array([render_cfg.proton_offset_x, 0.0], dtype=float)


def swirl_radius(orbital_remainder: int, render_cfg: RenderCfg = RENDER_CFG) -> float:
    return render_cfg.swirl_base_radius + abs(orbital_remainder) * render_cfg.swirl_radius_per_unit


def _hit_circle(mouse: np.ndarray, center: np.ndarray, radius: float) -> bool:
    return length(mouse - center) <= radius


def find_tooltip(
    mouse: Sequence[float],
    event: DecayEvent,
    mode: Mode,
    origin: np.ndarray,
    arrows: Sequence[ArrowSegment],
    render_cfg: RenderCfg = RENDER_CFG,
) -> Tooltip | None:
    """Return the tooltip under ``mouse``.

    Bodies take priority over the swirl ring, and the ring over arrows.
    """

    mouse = np.asarray(mouse, dtype=float)
    circles = (
        (origin, render_cfg.neutron_hover_radius, "neutron"),
        (proton_position(origin, render_cfg), render_cfg.proton_hover_radius, "proton"),
        (event.electron.position, render_cfg.electron_hover_radius, "electron"),
        (event.antineutrino.position, render_cfg.antineutrino_hover_radius, "antineutrino"),
    )
    for center, radius, key in circles:
        if _hit_circle(mouse, center, radius):
            return TOOLTIPS[key]

    if mode is Mode.FULL_CONSERVATION:
        distance = length(mouse - origin)
        target = swirl_radius(event.orbital_remainder, render_cfg)
        if abs(distance - target) < render_cfg.swirl_ring_tolerance:
            return TOOLTIPS["swirl"]

    for arrow in arrows:
        if point_segment_distance(mouse, arrow.start, arrow.end) < render_cfg.arrow_hover_distance:
            return TOOLTIPS[arrow.kind]
    return None


__all__ = [
    "ArrowSegment",
    "MOMENTUM",
    "SPIN",
    "event_arrows",
    "find_tooltip",
    "particle_arrows",
    "proton_position",
    "swirl_radius",
]
