"""Rendering helpers for the beta decay visualization."""

from .assets import (
    FontSet,
    get_text_surface,
    load_font,
)
from .draw import (
    draw_arena,
    draw_arrow,
    draw_arrows,
    draw_glow_circle,
    draw_label,
    draw_swirl,
    draw_trail,
    swirl_points,
)
from .hover import (
    ArrowSegment,
    event_arrows,
    find_tooltip,
    proton_position,
    swirl_radius,
)
from .ui import (
    draw_panel,
    draw_tooltip_box,
    help_panel_lines,
    top_panel_lines,
)

__all__ = [
    "ArrowSegment",
    "FontSet",
    "draw_arena",
    "draw_arrow",
    "draw_arrows",
    "draw_glow_circle",
    "draw_label",
    "draw_panel",
    "draw_swirl",
    "draw_trail",
    "draw_tooltip_box",
    "event_arrows",
    "find_tooltip",
    "get_text_surface",
    "help_panel_lines",
    "load_font",
    "proton_position",
    "swirl_points",
    "swirl_radius",
    "top_panel_lines",
]
