"""Recording of generated decay events for offline analysis."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

from .derived import evaluate
from .model import DecayEvent
from .vectors import sign

if TYPE_CHECKING:  # pragma: no cover
    from .session import Session


def unique_run_id(root_dir: Path, run_id: Optional[str] = None) -> str:
    """First unused directory name under *root_dir*.

    Explicit ids get a plain numeric suffix on collision (``demo_1``),
    timestamped ids a zero padded one (``20260101_120000_run_01``).
    """

    base = run_id or datetime.now().strftime("%Y%m%d_%H%M%S") + "_run"
    pattern = "{base}_{n}" if run_id else "{base}_{n:02d}"
    candidate = base
    n = 0
    while (root_dir / candidate).exists():
        n += 1
        candidate = pattern.format(base=base, n=n)
    return candidate


class DecayLogger:
    """Buffered logger that stores one CSV row per generated decay."""

    DECAYS_HEADER = [
        "t",
        "reason",
        "mode",
        "bias",
        "proton_sign",
        "electron_spin_y",
        "antinu_spin_y",
        "electron_helicity",
        "antinu_helicity",
        "spin_dot",
        "claim_true",
        "orbital_remainder",
    ]
    DECAYS_FILENAME = "decays.csv"
    META_FILENAME = "meta.json"
    LAST_RUN_FILENAME = "last_run.txt"

    def __init__(
        self,
        root_dir: str | Path = "data/runs",
        run_id: Optional[str] = None,
        *,
        flush_threshold: int = 50,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        self.run_id = unique_run_id(self.root_dir, run_id)
        self.run_dir = self.root_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=False)

        self.decays_path = self.run_dir / self.DECAYS_FILENAME
        self.meta_path = self.run_dir / self.META_FILENAME

        self._file = self.decays_path.open("w", newline="")
        self._file.write(",".join(self.DECAYS_HEADER) + "\n")
        self._file.flush()
        self._buffer: list[str] = []
        self._threshold = max(1, flush_threshold)
        self.rows_written = 0

        (self.root_dir / self.LAST_RUN_FILENAME).write_text(self.run_id, encoding="utf-8")

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def log_row(self, values: Sequence[object]) -> None:
        self._buffer.append(",".join(self._format_value(v) for v in values))
        self.rows_written += 1
        if len(self._buffer) >= self._threshold:
            self.flush()

    def log_decay(self, event: DecayEvent, reason: str, session: "Session") -> None:
        """Session listener: record a freshly generated event."""

        readout = evaluate(event, session.cfg.claim_deadband)
        self.log_row(
            [
                session.sim_time,
                reason,
                int(session.mode),
                session.bias,
                event.proton_spin_sign,
                sign(float(event.electron.spin_direction[1])),
                sign(float(event.antineutrino.spin_direction[1])),
                readout.electron_helicity,
                readout.antineutrino_helicity,
                readout.spin_dot,
                int(readout.claim_looks_true),
                event.orbital_remainder,
            ]
        )

    def flush(self) -> None:
        if self._buffer:
            self._file.write("\n".join(self._buffer) + "\n")
            self._file.flush()
            self._buffer.clear()

    def close(self) -> None:
        if self._file.closed:
            return
        self.flush()
        self._file.close()

    @staticmethod
    def _format_value(value: object) -> str:
        if isinstance(value, bool):
            return str(int(value))
        if isinstance(value, (int, float)):
            return f"{value:.10g}"
        return str(value)

    def __enter__(self) -> "DecayLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["DecayLogger", "unique_run_id"]
