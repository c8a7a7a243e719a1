from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

import pygame

from helicity_lab.core.derived import Readout
from helicity_lab.core.model import Mode
from helicity_lab.data.modes import CLAIM_TEXT, KEY_HELP, MODES
from helicity_lab.data.tooltips import Tooltip

from .assets import get_text_surface

if TYPE_CHECKING:  # pragma: no cover
    from helicity_lab.core.config import RenderCfg
    from helicity_lab.core.session import Session


def _signed(value: int) -> str:
    return "+1" if value > 0 else "-1"


def top_panel_lines(session: Session, readout: Readout) -> list[str]:
    info = MODES[session.mode]
    lines = [
        info.title + ("   [PAUSED]" if session.paused else ""),
        KEY_HELP,
        "",
        CLAIM_TEXT,
    ]
    if session.mode is Mode.SPIN_ONLY:
        lines.append("Result: ALWAYS looks true here (by design). This mode is the oversimplified story.")
    else:
        verdict = "looks true" if readout.claim_looks_true else "does NOT look true"
        lines.append(f"Result in this frame: {verdict} (spin dot = {readout.spin_dot:.2f})")
    lines.append(info.showing)
    return lines


def help_panel_lines(session: Session, readout: Readout) -> list[str]:
    event = session.event
    lines = [
        f"left bias: {session.bias:.2f}   proton spin sign: {_signed(event.proton_spin_sign)}",
    ]
    if session.mode is Mode.SPIN_ONLY:
        lines.append(MODES[Mode.SPIN_ONLY].note)
    else:
        lines.append(
            f"electron helicity: {_signed(readout.electron_helicity)}"
            f"   anti nu helicity: {_signed(readout.antineutrino_helicity)}"
        )
        lines.append(MODES[session.mode].note)

    if session.mode is Mode.FULL_CONSERVATION:
        if readout.spins_balance:
            lines.append("Conservation: spins alone balance (L_needed = 0).")
        else:
            lines.append(
                "Conservation: spins do NOT balance. Extra angular momentum must come "
                f"from motion (L_needed = {readout.orbital_remainder})."
            )
    else:
        lines.append("Tip: switch to Mode 3 to see why spin-only balancing is not generally sufficient.")
    return lines


def draw_panel(
    surface: pygame.Surface,
    rect: pygame.Rect,
    font: pygame.font.Font,
    lines: Sequence[str],
    *,
    render_cfg: RenderCfg,
) -> None:
    panel = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(panel, render_cfg.hud_panel_color, panel.get_rect())
    pygame.draw.rect(panel, render_cfg.hud_panel_border_color, panel.get_rect(), 1)
    line_height = font.get_linesize()
    for idx, text in enumerate(lines):
        if not text:
            continue
        text_surf = get_text_surface(font, text, render_cfg.hud_text_color)
        panel.blit(text_surf, (10, 8 + idx * line_height))
    surface.blit(panel, rect.topleft)


def draw_tooltip_box(
    surface: pygame.Surface,
    title_font: pygame.font.Font,
    body_font: pygame.font.Font,
    mouse_pos: tuple[int, int],
    tooltip: Tooltip,
    *,
    render_cfg: RenderCfg,
) -> None:
    pad = render_cfg.tooltip_padding
    body_lines = tooltip.body.split("\n")
    title_height = title_font.get_linesize()
    body_height = body_font.get_linesize() * len(body_lines)
    width = max(
        title_font.size(tooltip.title)[0],
        max(body_font.size(line)[0] for line in body_lines),
    ) + pad * 2
    height = title_height + body_height + pad * 3

    margin = render_cfg.tooltip_margin
    max_x = surface.get_width() - margin * 2
    max_y = surface.get_height() - margin * 2
    x = mouse_pos[0] + render_cfg.tooltip_cursor_offset
    y = mouse_pos[1] + render_cfg.tooltip_cursor_offset
    if x + width > max_x:
        x = max_x - width
    if y + height > max_y:
        y = max_y - height
    x = max(margin, x)
    y = max(margin, y)

    box = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.rect(box, render_cfg.tooltip_background_color, box.get_rect())
    pygame.draw.rect(box, render_cfg.tooltip_border_color, box.get_rect(), 1)
    box.blit(get_text_surface(title_font, tooltip.title, render_cfg.tooltip_title_color), (pad, pad))
    body_top = pad * 2 + title_height
    for idx, line in enumerate(body_lines):
        if not line:
            continue
        text_surf = get_text_surface(body_font, line, render_cfg.tooltip_body_color)
        box.blit(text_surf, (pad, body_top + idx * body_font.get_linesize()))
    surface.blit(box, (x, y))
