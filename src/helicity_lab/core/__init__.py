"""Simulation core: decay events, stepping and the interactive session."""

from .config import RENDER_CFG, SIM_CFG, RenderCfg, SimCfg
from .derived import Readout, claim_looks_true, evaluate, helicity_sign
from .generator import DecayGenerator, orbital_remainder
from .model import DecayEvent, Mode, Particle
from .physics import Bounds, step_event, step_particle
from .session import Session

__all__ = [
    "Bounds",
    "DecayEvent",
    "DecayGenerator",
    "Mode",
    "Particle",
    "RENDER_CFG",
    "Readout",
    "RenderCfg",
    "SIM_CFG",
    "Session",
    "SimCfg",
    "claim_looks_true",
    "evaluate",
    "helicity_sign",
    "orbital_remainder",
    "step_event",
    "step_particle",
]
