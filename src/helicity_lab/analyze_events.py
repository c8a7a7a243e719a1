"""Analyze a recorded decay log and generate summary figures."""
from __future__ import annotations

import argparse
import csv
import json
from collections import Counter
from pathlib import Path
from typing import Dict, List

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


DECAYS_FILENAME = "decays.csv"
META_FILENAME = "meta.json"
FIGS_SUBDIR = "figs"
ORBITAL_REMAINDER_VALUES = (-2, 0, 2, 4)

_INT_COLUMNS = (
    "mode",
    "proton_sign",
    "electron_spin_y",
    "antinu_spin_y",
    "electron_helicity",
    "antinu_helicity",
    "claim_true",
    "orbital_remainder",
)
_FLOAT_COLUMNS = ("t", "bias", "spin_dot")


def load_decays(path: Path) -> Dict[str, np.ndarray]:
    """Read ``decays.csv`` into one numpy array per column."""

    with path.open("r", newline="") as fh:
        reader = csv.DictReader(fh)
        columns: Dict[str, List[object]] = {name: [] for name in reader.fieldnames or []}
        for row in reader:
            if not row:
                continue
            for key, value in row.items():
                if key is None:
                    continue
                if key in _INT_COLUMNS:
                    columns[key].append(int(float(value)))
                elif key in _FLOAT_COLUMNS:
                    columns[key].append(float(value))
                else:
                    columns[key].append(value)
    return {key: np.asarray(values) for key, values in columns.items()}


def summarize_decays(decays: Dict[str, np.ndarray]) -> dict:
    count = int(len(decays.get("mode", [])))
    if count == 0:
        return {"count": 0}

    modes = Counter(int(m) for m in decays["mode"])
    reasons = Counter(str(r) for r in decays["reason"])
    remainders = Counter(int(value) for value in decays["orbital_remainder"])

    # Electron handedness is only physical outside the spin-only stage
    physical = decays["mode"] != 1
    left_fraction = None
    if np.any(physical):
        left_fraction = float(np.mean(decays["electron_helicity"][physical] < 0))

    return {
        "count": count,
        "modes": dict(sorted(modes.items())),
        "reasons": dict(sorted(reasons.items())),
        "orbital_remainder": {value: remainders.get(value, 0) for value in ORBITAL_REMAINDER_VALUES},
        "balanced_fraction": remainders.get(0, 0) / count,
        "claim_true_fraction": float(np.mean(decays["claim_true"])),
        "left_handed_fraction": left_fraction,
    }


def ensure_fig_dir(run_dir: Path) -> Path:
    fig_dir = run_dir / FIGS_SUBDIR
    fig_dir.mkdir(parents=True, exist_ok=True)
    return fig_dir


def plot_orbital_remainder(fig_dir: Path, summary: dict) -> None:
    values = summary["orbital_remainder"]
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar([str(v) for v in values], list(values.values()), color="#e67878")
    ax.set_xlabel("Saknat rörelsemängdsmoment L_needed (enheter)")
    ax.set_ylabel("Antal decays")
    ax.set_title("Saknat rörelsemängdsmoment per decay")
    fig.tight_layout()
    fig.savefig(fig_dir / "orbital_remainder.png", dpi=150)
    plt.close(fig)


def plot_helicity_by_bias(fig_dir: Path, decays: Dict[str, np.ndarray]) -> None:
    physical = decays["mode"] != 1
    fig, ax = plt.subplots(figsize=(6, 4))
    if np.any(physical):
        bias = np.round(decays["bias"][physical], 2)
        left = decays["electron_helicity"][physical] < 0
        levels = np.unique(bias)
        fractions = [float(np.mean(left[bias == level])) for level in levels]
        ax.plot(levels, fractions, "o", label="Observerad andel")
        ax.plot([0.0, 1.0], [0.0, 1.0], "--", color="gray", label="Förväntad (= bias)")
        ax.legend()
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(0.0, 1.0)
    ax.set_xlabel("Vänsterbias")
    ax.set_ylabel("Andel vänsterhänta elektroner")
    ax.set_title("Elektronens helicitet mot bias")
    fig.tight_layout()
    fig.savefig(fig_dir / "helicity_by_bias.png", dpi=150)
    plt.close(fig)


def print_summary(run_dir: Path, meta: dict, summary: dict) -> None:
    print(f"Run: {run_dir}")
    if meta:
        print(f" Seed: {meta.get('seed')}  version: {meta.get('code_version', 'okänd')}")
    print(f" Decays: {summary['count']}")
    if summary["count"] == 0:
        return
    print(" Per läge: " + ", ".join(f"{mode}: {n}" for mode, n in summary["modes"].items()))
    print(" Orsaker: " + ", ".join(f"{reason}: {n}" for reason, n in summary["reasons"].items()))
    print(
        " L_needed: "
        + ", ".join(f"{value}: {n}" for value, n in summary["orbital_remainder"].items())
    )
    print(f" Andel balanserade spinn: {summary['balanced_fraction']:.3f}")
    print(f" Andel där påståendet ser sant ut: {summary['claim_true_fraction']:.3f}")
    if summary["left_handed_fraction"] is not None:
        print(f" Andel vänsterhänta elektroner (läge 2-3): {summary['left_handed_fraction']:.3f}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Analysera en loggad körning och skapa figurer.")
    parser.add_argument("run_dir", nargs="?", help="Sökväg till en specifik run-mapp")
    parser.add_argument("--runs-dir", default="data/runs", help="Mapp med sparade körningar")
    args = parser.parse_args()

    base_runs_dir = Path(args.runs_dir)
    if args.run_dir:
        run_path = Path(args.run_dir)
        if not run_path.is_dir():
            run_path = base_runs_dir / args.run_dir
    else:
        last_run_file = base_runs_dir / "last_run.txt"
        if not last_run_file.exists():
            parser.error("Ingen run angiven och last_run.txt saknas.")
        run_id = last_run_file.read_text(encoding="utf-8").strip()
        run_path = base_runs_dir / run_id

    if not run_path.is_dir():
        parser.error(f"Kunde inte hitta körningsmapp: {run_path}")

    decays_path = run_path / DECAYS_FILENAME
    if not decays_path.exists():
        parser.error("Körningsmappen saknar decays.csv.")

    meta: dict = {}
    meta_path = run_path / META_FILENAME
    if meta_path.exists():
        with meta_path.open("r", encoding="utf-8") as fh:
            meta = json.load(fh)

    decays = load_decays(decays_path)
    summary = summarize_decays(decays)
    if summary["count"] == 0:
        parser.error("decays.csv är tom – kan inte analysera.")

    fig_dir = ensure_fig_dir(run_path)
    plot_orbital_remainder(fig_dir, summary)
    plot_helicity_by_bias(fig_dir, decays)

    print_summary(run_path, meta, summary)


if __name__ == "__main__":
    main()
