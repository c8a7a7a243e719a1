"""Titles and captions for each teaching stage."""
from __future__ import annotations

from dataclasses import dataclass

from helicity_lab.core.model import Mode


@dataclass(frozen=True)
class ModeInfo:
    mode: Mode
    title: str
    showing: str
    note: str


MODE_DEFINITIONS: tuple[ModeInfo, ...] = (
    ModeInfo(
        mode=Mode.SPIN_ONLY,
        title="MODE 1: Spin only (textbook shortcut)",
        showing="What you are seeing: ONLY spin arrows. Motion is hidden, so the shortcut seems valid.",
        note="Mode 1 note: this forces opposite spins, so it cannot teach helicity or why the shortcut fails.",
    ),
    ModeInfo(
        mode=Mode.SPIN_AND_MOTION,
        title="MODE 2: Add motion (helicity appears)",
        showing="What you are seeing: momentum (gray) and spin (white). Helicity depends on BOTH.",
        note="Helicity = sign(spin dot momentum). Flip motion and helicity can change.",
    ),
    ModeInfo(
        mode=Mode.FULL_CONSERVATION,
        title="MODE 3: Full conservation (orbital placeholder shown)",
        showing=(
            "What you are seeing: when spins do not balance, the swirl indicates "
            "extra angular momentum from motion."
        ),
        note="Helicity = sign(spin dot momentum). Flip motion and helicity can change.",
    ),
)

MODES: dict[Mode, ModeInfo] = {info.mode: info for info in MODE_DEFINITIONS}

KEY_HELP = "Keys: 1 2 3 modes   Space new decay   Up Down bias   P pause   N step   H help"
CLAIM_TEXT = 'Claim being tested: "the neutrino spins opposite the electron"'


__all__ = ["CLAIM_TEXT", "KEY_HELP", "MODES", "MODE_DEFINITIONS", "ModeInfo"]
