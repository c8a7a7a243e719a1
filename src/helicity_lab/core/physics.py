"""Time stepping for particles inside the arena."""
from __future__ import annotations

from dataclasses import dataclass

from .config import SIM_CFG, SimCfg
from .model import DecayEvent, Particle
from .vectors import normalize


@dataclass(frozen=True)
class Bounds:
    """Axis aligned arena edges in screen units (``top < bottom``)."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_cfg(cls, cfg: SimCfg = SIM_CFG) -> "Bounds":
        left, top, width, height = cfg.arena
        return cls(left=left, top=top, right=left + width, bottom=top + height)


def step_particle(
    particle: Particle,
    dt: float,
    bounds: Bounds,
    cfg: SimCfg = SIM_CFG,
) -> Particle:
    """Advance ``particle`` in place by ``dt`` seconds."""

    if dt <= 0.0:
        return particle

    particle.position += particle.velocity * dt

    particle.trail_timer += dt
    if particle.trail_timer >= cfg.trail_interval:
        particle.trail_timer = 0.0
        # deque(maxlen=...) drops the oldest sample
        particle.trail.append(particle.position.copy())

    pos = particle.position
    vel = particle.velocity
    r = particle.radius
    if pos[0] < bounds.left + r:
        pos[0] = bounds.left + r
        vel[0] = -vel[0]
    if pos[0] > bounds.right - r:
        pos[0] = bounds.right - r
        vel[0] = -vel[0]
    if pos[1] < bounds.top + r:
        pos[1] = bounds.top + r
        vel[1] = -vel[1]
    if pos[1] > bounds.bottom - r:
        pos[1] = bounds.bottom - r
        vel[1] = -vel[1]

    particle.spin_direction = normalize(particle.spin_direction)
    return particle


def step_event(
    event: DecayEvent,
    dt: float,
    bounds: Bounds,
    cfg: SimCfg = SIM_CFG,
) -> None:
    for particle in event.particles:
        step_particle(particle, dt, bounds, cfg)


__all__ = ["Bounds", "step_event", "step_particle"]
