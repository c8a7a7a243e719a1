from __future__ import annotations

import math
from typing import Sequence, TYPE_CHECKING

import numpy as np
import pygame

from helicity_lab.core.vectors import perp

from .assets import Color, get_text_surface
from .hover import ArrowSegment, MOMENTUM, swirl_radius

if TYPE_CHECKING:  # pragma: no cover
    from helicity_lab.core.config import RenderCfg, SimCfg
    from helicity_lab.core.model import Particle


def _point(v: np.ndarray) -> tuple[float, float]:
    return float(v[0]), float(v[1])


def draw_arena(surface: pygame.Surface, *, sim_cfg: SimCfg, render_cfg: RenderCfg) -> None:
    rect = pygame.Rect(*(int(value) for value in sim_cfg.arena))
    pygame.draw.rect(surface, render_cfg.arena_fill_color, rect)
    pygame.draw.rect(
        surface,
        render_cfg.arena_border_color,
        rect,
        render_cfg.arena_border_width,
    )


def draw_glow_circle(
    surface: pygame.Surface,
    center: np.ndarray,
    radius: float,
    color: tuple[int, int, int],
    *,
    render_cfg: RenderCfg,
) -> None:
    if radius <= 0:
        return
    layers = render_cfg.glow_layers
    spacing = render_cfg.glow_layer_spacing
    outer = int(math.ceil(radius + layers * spacing))
    glow_surface = pygame.Surface((outer * 2, outer * 2), pygame.SRCALPHA)
    for i in range(layers, 0, -1):
        alpha = min(255, render_cfg.glow_layer_alpha * i)
        pygame.draw.circle(
            glow_surface,
            (*color, alpha),
            (outer, outer),
            int(radius + i * spacing),
        )
    pygame.draw.circle(glow_surface, (*color, 255), (outer, outer), int(radius))
    glow_rect = glow_surface.get_rect(center=(int(center[0]), int(center[1])))
    surface.blit(glow_surface, glow_rect)


def draw_trail(
    surface: pygame.Surface,
    particle: Particle,
    *,
    render_cfg: RenderCfg,
) -> None:
    """Polyline through the trail, fading towards the oldest sample."""

    points = list(particle.trail)
    if len(points) < 2:
        return
    last = len(points) - 1
    for idx in range(last):
        t = (idx + 1) / last
        alpha = int(render_cfg.trail_alpha_min + render_cfg.trail_alpha_span * t)
        pygame.draw.line(
            surface,
            (*particle.color, alpha),
            _point(points[idx]),
            _point(points[idx + 1]),
            2,
        )


def draw_arrow(
    surface: pygame.Surface,
    arrow: ArrowSegment,
    color: Color,
    *,
    head_length: float,
) -> None:
    end = arrow.end
    pygame.draw.line(surface, color, _point(arrow.start), _point(end), 2)
    side = perp(arrow.direction) * (head_length * 0.55)
    back = end - arrow.direction * head_length
    pygame.draw.line(surface, color, _point(end), _point(back + side), 2)
    pygame.draw.line(surface, color, _point(end), _point(back - side), 2)


def draw_arrows(
    surface: pygame.Surface,
    arrows: Sequence[ArrowSegment],
    *,
    spin_only: bool,
    render_cfg: RenderCfg,
) -> None:
    for arrow in arrows:
        if arrow.kind == MOMENTUM:
            color = render_cfg.momentum_arrow_color
        elif spin_only:
            color = render_cfg.spin_only_arrow_color
        else:
            color = render_cfg.spin_arrow_color
        draw_arrow(surface, arrow, color, head_length=render_cfg.arrow_head_length)


def swirl_points(
    center: np.ndarray,
    orbital_remainder: int,
    time: float,
    *,
    render_cfg: RenderCfg,
) -> list[tuple[float, float]]:
    magnitude = abs(orbital_remainder)
    if magnitude == 0:
        return []
    radius = swirl_radius(orbital_remainder, render_cfg)
    turns = 2.0 + 0.5 * magnitude
    direction = 1.0 if orbital_remainder > 0 else -1.0
    phase = time * render_cfg.swirl_phase_speed * direction
    count = render_cfg.swirl_points
    points: list[tuple[float, float]] = []
    for i in range(count + 1):
        a = (i / count) * 2.0 * math.pi * turns + phase
        rr = radius + math.sin(a * 1.2) * render_cfg.swirl_wobble
        points.append((float(center[0]) + math.cos(a) * rr, float(center[1]) + math.sin(a) * rr))
    return points


def draw_swirl(
    surface: pygame.Surface,
    center: np.ndarray,
    orbital_remainder: int,
    time: float,
    *,
    render_cfg: RenderCfg,
) -> None:
    points = swirl_points(center, orbital_remainder, time, render_cfg=render_cfg)
    if len(points) < 2:
        return
    alpha = min(255, 40 + abs(orbital_remainder) * 20)
    pygame.draw.lines(surface, (*render_cfg.swirl_color, alpha), False, points, 2)


def draw_label(
    surface: pygame.Surface,
    font: pygame.font.Font | None,
    center: tuple[float, float],
    text: str,
    *,
    render_cfg: RenderCfg,
) -> None:
    """Centered label with a dark outline; skipped when no font is loaded."""

    if font is None:
        return
    outline = get_text_surface(font, text, render_cfg.label_outline_color)
    label = get_text_surface(font, text, render_cfg.label_color)
    rect = label.get_rect(center=(int(center[0]), int(center[1])))
    for dx, dy in ((-2, 0), (2, 0), (0, -2), (0, 2)):
        surface.blit(outline, rect.move(dx, dy))
    surface.blit(label, rect)
