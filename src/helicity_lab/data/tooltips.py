"""Hover tooltip texts."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tooltip:
    key: str
    title: str
    body: str


TOOLTIP_DEFINITIONS: tuple[Tooltip, ...] = (
    Tooltip(
        key="neutron",
        title="Neutron",
        body=(
            "This is the neutron before it breaks.\n\n"
            "Think of it like:\n"
            "  - One heavy ball\n"
            "  - Sitting still\n"
            "  - About to split\n\n"
            "It does nothing else here except exist as the starting point.\n"
            "It does not move because we are not teaching neutron motion,\n"
            "only what comes out of it."
        ),
    ),
    Tooltip(
        key="proton",
        title="Proton",
        body=(
            "This is the proton after the break.\n\n"
            "Think:\n"
            "  - Neutron turns into a proton\n"
            "  - Proton is heavy\n"
            "  - So it barely moves\n\n"
            "In real life it can move, but we keep it still so it doesn't distract you.\n"
            "Red means: the heavy leftover."
        ),
    ),
    Tooltip(
        key="electron",
        title="Electron (e-)",
        body=(
            "This is the electron.\n\n"
            "Think:\n"
            "  - A tiny piece that shoots out fast\n"
            "  - Light\n"
            "  - Easy to move\n\n"
            "The yellow glow just helps your eyes track it."
        ),
    ),
    Tooltip(
        key="antineutrino",
        title="Anti-neutrino",
        body=(
            "This is the anti-neutrino.\n\n"
            "Think:\n"
            "  - Even tinier than the electron\n"
            "  - Almost invisible in real life\n"
            "  - Flies off very fast\n\n"
            "It usually goes roughly the opposite way from the electron."
        ),
    ),
    Tooltip(
        key="momentum",
        title="Momentum arrow",
        body='This arrow means:\n"Which way is this thing moving?"',
    ),
    Tooltip(
        key="spin",
        title="Spin arrow",
        body=(
            'This arrow means:\n"Which way is this thing spinning?"\n\n'
            "This is the important one for the misconception."
        ),
    ),
    Tooltip(
        key="swirl",
        title="Swirl (extra angular momentum)",
        body=(
            'This swirl means:\n"Something is missing if you only count spins."\n\n'
            "When the spins do not add up, motion must carry the extra turning.\n"
            "No swirl: spins alone work.\n"
            "Swirl: spins alone do not work."
        ),
    ),
)

TOOLTIPS: dict[str, Tooltip] = {tip.key: tip for tip in TOOLTIP_DEFINITIONS}


__all__ = ["TOOLTIPS", "TOOLTIP_DEFINITIONS", "Tooltip"]
