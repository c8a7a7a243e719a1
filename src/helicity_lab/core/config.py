"""Configuration dataclasses for the beta decay visualization."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SimCfg:
    particle_speed: float = 260.0
    electron_radius: float = 8.0
    antineutrino_radius: float = 6.0
    electron_color: tuple[int, int, int] = (240, 210, 80)
    antineutrino_color: tuple[int, int, int] = (120, 190, 255)
    trail_interval: float = 0.02
    trail_max_length: int = 70
    event_duration: float = 3.0
    angle_spread: float = 0.35
    neutron_spin_sign: int = 1
    bias_initial: float = 0.85
    bias_min: float = 0.01
    bias_max: float = 0.99
    bias_step: float = 0.02
    nominal_step: float = 1.0 / 60.0
    claim_deadband: float = -0.2
    # left, top, width, height in screen units (y grows downwards)
    arena: tuple[float, float, float, float] = (60.0, 60.0, 980.0, 580.0)
    origin_offset_x: float = 140.0

    @property
    def origin(self) -> np.ndarray:
        left, top, _, height = self.arena
        return np.array([left + self.origin_offset_x, top + height * 0.5], dtype=float)


@dataclass(frozen=True)
class RenderCfg:
    width: int = 1100
    height: int = 700
    title: str = "Beta Decay Viz (Learning Tool)"
    target_fps: int = 0
    font_names: tuple[str, ...] = ("arial", "dejavusans", "consolas")
    label_font_size: int = 14
    hud_font_size: int = 16
    tooltip_title_size: int = 16
    tooltip_body_size: int = 15
    background_color: tuple[int, int, int] = (12, 14, 18)
    arena_fill_color: tuple[int, int, int] = (16, 18, 24)
    arena_border_color: tuple[int, int, int] = (70, 80, 95)
    arena_border_width: int = 2
    neutron_color: tuple[int, int, int] = (160, 210, 255)
    neutron_radius: int = 18
    proton_color: tuple[int, int, int] = (255, 120, 150)
    proton_radius: int = 14
    proton_offset_x: int = 40
    glow_layers: int = 5
    glow_layer_spacing: int = 6
    glow_layer_alpha: int = 18
    trail_alpha_min: int = 40
    trail_alpha_span: int = 140
    label_color: tuple[int, int, int, int] = (245, 245, 245, 220)
    label_outline_color: tuple[int, int, int, int] = (0, 0, 0, 180)
    label_offset: int = 22
    spin_only_arrow_length: float = 55.0
    momentum_arrow_length: float = 60.0
    spin_arrow_length: float = 48.0
    spin_arrow_offset: float = 10.0
    arrow_head_length: float = 10.0
    spin_only_arrow_color: tuple[int, int, int, int] = (230, 230, 230, 220)
    momentum_arrow_color: tuple[int, int, int, int] = (150, 150, 150, 220)
    spin_arrow_color: tuple[int, int, int, int] = (235, 235, 235, 220)
    swirl_base_radius: float = 22.0
    swirl_radius_per_unit: float = 10.0
    swirl_points: int = 140
    swirl_phase_speed: float = 2.2
    swirl_wobble: float = 5.0
    swirl_color: tuple[int, int, int] = (230, 120, 120)
    swirl_ring_tolerance: float = 14.0
    hud_panel_color: tuple[int, int, int, int] = (10, 12, 16, 200)
    hud_panel_border_color: tuple[int, int, int, int] = (80, 90, 110, 180)
    hud_text_color: tuple[int, int, int] = (230, 230, 230)
    hud_top_height: int = 140
    hud_bottom_height: int = 110
    tooltip_background_color: tuple[int, int, int, int] = (10, 12, 16, 230)
    tooltip_border_color: tuple[int, int, int, int] = (90, 100, 125, 200)
    tooltip_title_color: tuple[int, int, int] = (240, 240, 240)
    tooltip_body_color: tuple[int, int, int] = (220, 220, 220)
    tooltip_padding: int = 10
    tooltip_cursor_offset: int = 16
    tooltip_margin: int = 10
    neutron_hover_radius: float = 24.0
    proton_hover_radius: float = 20.0
    electron_hover_radius: float = 18.0
    antineutrino_hover_radius: float = 16.0
    arrow_hover_distance: float = 8.0


SIM_CFG = SimCfg()
RENDER_CFG = RenderCfg()


__all__ = ["RENDER_CFG", "SIM_CFG", "RenderCfg", "SimCfg"]
