"""Interactive session state: mode, pause/step flags, bias and the live event."""
from __future__ import annotations

from typing import Callable, Optional

from .config import SIM_CFG, SimCfg
from .derived import Readout, evaluate
from .generator import DecayGenerator
from .model import DecayEvent, Mode
from .physics import Bounds, step_event

# Reasons passed to listeners when the live event is replaced
REASON_START = "start"
REASON_MODE = "mode"
REASON_RESPAWN = "respawn"
REASON_BIAS = "bias"
REASON_EXPIRED = "expired"

EventListener = Callable[[DecayEvent, str, "Session"], None]


class Session:
    """Owns the single live decay event and applies external commands.

    The renderer reads ``event``, ``mode``, ``paused``, ``show_help``,
    ``bias`` and :meth:`readout`; the input layer calls the command
    methods, and the frame loop calls :meth:`advance` once per frame.
    """

    def __init__(
        self,
        generator: Optional[DecayGenerator] = None,
        cfg: SimCfg = SIM_CFG,
        *,
        mode: Mode = Mode.SPIN_ONLY,
        bias: Optional[float] = None,
        listener: Optional[EventListener] = None,
    ) -> None:
        self.cfg = cfg
        self.generator = generator or DecayGenerator(cfg=cfg)
        self.bounds = Bounds.from_cfg(cfg)
        self.mode = Mode(mode)
        initial_bias = cfg.bias_initial if bias is None else bias
        self.bias = min(cfg.bias_max, max(cfg.bias_min, initial_bias))
        self.paused = False
        self.step_requested = False
        self.show_help = True
        self.sim_time = 0.0
        self.listener = listener
        self.event: DecayEvent = self._spawn(REASON_START)

    def _spawn(self, reason: str) -> DecayEvent:
        event = self.generator.generate(self.bias, self.mode)
        self.event = event
        if self.listener is not None:
            self.listener(event, reason, self)
        return event

    # --- Commands ---
    def select_mode(self, mode: Mode | int) -> None:
        self.mode = Mode(mode)
        self._spawn(REASON_MODE)

    def new_decay(self) -> None:
        self._spawn(REASON_RESPAWN)

    def adjust_bias(self, direction: int) -> None:
        if direction == 1:
            self.bias = min(self.cfg.bias_max, self.bias + self.cfg.bias_step)
        elif direction == -1:
            self.bias = max(self.cfg.bias_min, self.bias - self.cfg.bias_step)
        else:
            raise ValueError(f"bias direction must be +1 or -1, got {direction!r}")
        self._spawn(REASON_BIAS)

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def single_step(self) -> None:
        if self.paused:
            self.step_requested = True

    def toggle_help(self) -> None:
        self.show_help = not self.show_help

    # --- Frame update ---
    def effective_dt(self, dt_real: float) -> float:
        """Simulation step for this frame; consumes a pending single step."""

        if not self.paused:
            return max(0.0, dt_real)
        if self.step_requested:
            self.step_requested = False
            return self.cfg.nominal_step
        return 0.0

    def advance(self, dt_real: float) -> None:
        dt = self.effective_dt(dt_real)
        if dt <= 0.0:
            return
        self.sim_time += dt
        self.event.time_alive += dt
        if self.event.expired:
            self._spawn(REASON_EXPIRED)
        step_event(self.event, dt, self.bounds, self.cfg)

    def readout(self) -> Readout:
        return evaluate(self.event, self.cfg.claim_deadband)


__all__ = [
    "EventListener",
    "REASON_BIAS",
    "REASON_EXPIRED",
    "REASON_MODE",
    "REASON_RESPAWN",
    "REASON_START",
    "Session",
]
