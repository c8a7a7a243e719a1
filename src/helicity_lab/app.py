# src/helicity_lab/app.py
"""
Helicity Lab - Beta Decay Spin Visualizer
=========================================

A learning tool that animates n -> p + e- + anti-nu and shows when the
"spins simply cancel" shortcut for angular momentum stops working.

Keys: 1 2 3 modes, Space new decay, Up/Down bias, P pause, N step, H help.
"""
from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Optional, Sequence

import pygame
from pygame.locals import DOUBLEBUF

from helicity_lab import __version__
from helicity_lab.core.config import RENDER_CFG, SIM_CFG, RenderCfg, SimCfg
from helicity_lab.core.generator import DecayGenerator
from helicity_lab.core.logging_utils import DecayLogger
from helicity_lab.core.model import Mode
from helicity_lab.core.session import Session
from helicity_lab.core.timekeeping import FrameTimer
from helicity_lab.render import (
    FontSet,
    draw_arena,
    draw_arrows,
    draw_glow_circle,
    draw_label,
    draw_panel,
    draw_swirl,
    draw_trail,
    draw_tooltip_box,
    event_arrows,
    find_tooltip,
    help_panel_lines,
    proton_position,
    top_panel_lines,
)

# =======================
#   KEY BINDINGS
# =======================
KEY_COMMANDS: dict[int, Callable[[Session], None]] = {
    pygame.K_1: lambda s: s.select_mode(Mode.SPIN_ONLY),
    pygame.K_2: lambda s: s.select_mode(Mode.SPIN_AND_MOTION),
    pygame.K_3: lambda s: s.select_mode(Mode.FULL_CONSERVATION),
    pygame.K_SPACE: lambda s: s.new_decay(),
    pygame.K_UP: lambda s: s.adjust_bias(1),
    pygame.K_DOWN: lambda s: s.adjust_bias(-1),
    pygame.K_p: lambda s: s.toggle_pause(),
    pygame.K_n: lambda s: s.single_step(),
    pygame.K_h: lambda s: s.toggle_help(),
}


def handle_key(session: Session, key: int) -> bool:
    """Apply the command bound to ``key``; returns ``False`` for unbound keys."""

    command = KEY_COMMANDS.get(key)
    if command is None:
        return False
    command(session)
    return True


# =======================
#   COMMAND LINE
# =======================
def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive beta decay spin visualizer.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the decay generator")
    parser.add_argument("--mode", type=int, choices=[1, 2, 3], default=1, help="Starting mode")
    parser.add_argument("--bias", type=float, default=SIM_CFG.bias_initial, help="Left-handed electron bias")
    parser.add_argument("--log", action="store_true", help="Record every generated decay to CSV")
    parser.add_argument("--runs-dir", default="data/runs", help="Directory for recorded runs")
    return parser.parse_args(argv)


def build_session(
    args: argparse.Namespace,
    cfg: SimCfg = SIM_CFG,
    logger: Optional[DecayLogger] = None,
) -> Session:
    rng = random.Random(args.seed) if args.seed is not None else None
    return Session(
        DecayGenerator(rng, cfg),
        cfg,
        mode=Mode(args.mode),
        bias=args.bias,
        listener=logger.log_decay if logger is not None else None,
    )


# =======================
#   DISPLAY SETUP
# =======================
def _set_display_mode_with_vsync(size: tuple[int, int], flags: int = 0) -> pygame.Surface:
    """Create the display surface with double buffering and vsync when available."""
    flags |= DOUBLEBUF
    try:
        return pygame.display.set_mode(size, flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode(size, flags)
    except pygame.error as err:
        try:
            return pygame.display.set_mode(size, flags)
        except pygame.error:
            raise err


# =======================
#   FRAME DRAWING
# =======================
def draw_frame(
    screen: pygame.Surface,
    overlay: pygame.Surface,
    session: Session,
    fonts: FontSet,
    mouse: tuple[int, int],
    *,
    sim_cfg: SimCfg = SIM_CFG,
    render_cfg: RenderCfg = RENDER_CFG,
) -> None:
    event = session.event
    readout = session.readout()
    origin = sim_cfg.origin
    proton = proton_position(origin, render_cfg)
    arrows = event_arrows(event, session.mode, render_cfg)

    screen.fill(render_cfg.background_color)
    overlay.fill((0, 0, 0, 0))
    draw_arena(screen, sim_cfg=sim_cfg, render_cfg=render_cfg)

    draw_glow_circle(screen, origin, render_cfg.neutron_radius, render_cfg.neutron_color, render_cfg=render_cfg)
    draw_glow_circle(screen, proton, render_cfg.proton_radius, render_cfg.proton_color, render_cfg=render_cfg)
    draw_label(screen, fonts.label, (origin[0], origin[1] - 30), "Neutron", render_cfg=render_cfg)
    draw_label(screen, fonts.label, (proton[0], proton[1] - 26), "Proton", render_cfg=render_cfg)

    # Orbital placeholder only in the last stage
    if session.mode is Mode.FULL_CONSERVATION:
        draw_swirl(overlay, origin, event.orbital_remainder, session.sim_time, render_cfg=render_cfg)

    for particle in event.particles:
        draw_trail(overlay, particle, render_cfg=render_cfg)
    screen.blit(overlay, (0, 0))

    labels = {"e-": "Electron", "anti-nu": "Anti-neutrino"}
    for particle in event.particles:
        draw_glow_circle(screen, particle.position, particle.radius, particle.color, render_cfg=render_cfg)
        pos = particle.position
        draw_label(
            screen,
            fonts.label,
            (pos[0], pos[1] - render_cfg.label_offset),
            labels.get(particle.name, particle.name),
            render_cfg=render_cfg,
        )

    overlay.fill((0, 0, 0, 0))
    draw_arrows(overlay, arrows, spin_only=session.mode is Mode.SPIN_ONLY, render_cfg=render_cfg)
    screen.blit(overlay, (0, 0))

    if fonts.hud is not None:
        left, top, width, height = (int(v) for v in sim_cfg.arena)
        top_rect = pygame.Rect(left + 10, top + 10, width - 20, render_cfg.hud_top_height)
        draw_panel(screen, top_rect, fonts.hud, top_panel_lines(session, readout), render_cfg=render_cfg)
        if session.show_help:
            bottom_rect = pygame.Rect(
                left + 10,
                top + height - render_cfg.hud_bottom_height - 10,
                width - 20,
                render_cfg.hud_bottom_height,
            )
            draw_panel(screen, bottom_rect, fonts.hud, help_panel_lines(session, readout), render_cfg=render_cfg)

    tooltip = find_tooltip(mouse, event, session.mode, origin, arrows, render_cfg)
    if tooltip is not None and fonts.tooltip_title is not None and fonts.tooltip_body is not None:
        draw_tooltip_box(screen, fonts.tooltip_title, fonts.tooltip_body, mouse, tooltip, render_cfg=render_cfg)


# =======================
#   MAIN FUNCTION
# =======================
def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    sim_cfg = SIM_CFG
    render_cfg = RENDER_CFG

    logger: Optional[DecayLogger] = None
    if args.log:
        logger = DecayLogger(args.runs_dir)
        logger.write_meta(
            {
                "seed": args.seed,
                "start_mode": args.mode,
                "start_bias": args.bias,
                "particle_speed": sim_cfg.particle_speed,
                "event_duration": sim_cfg.event_duration,
                "angle_spread": sim_cfg.angle_spread,
                "claim_deadband": sim_cfg.claim_deadband,
                "code_version": f"Helicity Lab v{__version__}",
            }
        )
        print(f"Recording decays to {logger.run_dir}")

    try:
        session = build_session(args, sim_cfg, logger)

        pygame.init()
        pygame.display.set_caption(render_cfg.title)
        screen = _set_display_mode_with_vsync((render_cfg.width, render_cfg.height))
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        fonts = FontSet.load(
            render_cfg.font_names,
            label_size=render_cfg.label_font_size,
            hud_size=render_cfg.hud_font_size,
            title_size=render_cfg.tooltip_title_size,
            body_size=render_cfg.tooltip_body_size,
        )
        if not fonts.available:
            print("No usable font found - text labels are disabled.")

        clock = pygame.time.Clock()
        timer = FrameTimer()
        running = True
        while running:
            dt_real = timer.tick()

            # --- Input ---
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    handle_key(session, event.key)

            # --- Simulation ---
            session.advance(dt_real)

            # --- Render ---
            draw_frame(
                screen,
                overlay,
                session,
                fonts,
                pygame.mouse.get_pos(),
                sim_cfg=sim_cfg,
                render_cfg=render_cfg,
            )
            pygame.display.flip()
            clock.tick(render_cfg.target_fps)
    finally:
        if logger is not None:
            logger.close()
        pygame.quit()


def run() -> None:
    try:
        main()
    except KeyboardInterrupt:
        pygame.quit()
        sys.exit()


if __name__ == "__main__":
    run()
