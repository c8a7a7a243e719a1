import random
import sys

import pytest

from helicity_lab import analyze_events
from helicity_lab.core.generator import DecayGenerator
from helicity_lab.core.logging_utils import DecayLogger
from helicity_lab.core.session import Session


@pytest.fixture
def recorded_run(tmp_path):
    root = tmp_path / "runs"
    logger = DecayLogger(root, run_id="sample")
    logger.write_meta({"seed": 11, "code_version": "test"})
    session = Session(DecayGenerator(random.Random(11)), listener=logger.log_decay)
    for _ in range(40):
        session.new_decay()
    session.select_mode(2)
    for _ in range(60):
        session.new_decay()
    logger.close()
    return root, logger.run_dir


def test_load_and_summarize(recorded_run):
    _, run_dir = recorded_run
    decays = analyze_events.load_decays(run_dir / analyze_events.DECAYS_FILENAME)
    summary = analyze_events.summarize_decays(decays)
    assert summary["count"] == 102
    assert summary["modes"] == {1: 41, 2: 61}
    assert summary["reasons"] == {"mode": 1, "respawn": 100, "start": 1}
    assert sum(summary["orbital_remainder"].values()) == 102
    assert 0.0 <= summary["claim_true_fraction"] <= 1.0
    assert 0.0 <= summary["left_handed_fraction"] <= 1.0


def test_empty_log_summary(tmp_path):
    logger = DecayLogger(tmp_path, run_id="empty")
    logger.close()
    decays = analyze_events.load_decays(logger.decays_path)
    assert analyze_events.summarize_decays(decays) == {"count": 0}


def test_main_uses_last_run_and_writes_figures(recorded_run, monkeypatch, capsys):
    root, run_dir = recorded_run
    monkeypatch.setattr(sys, "argv", ["helicity-lab-analyze", "--runs-dir", str(root)])
    analyze_events.main()
    assert (run_dir / "figs" / "orbital_remainder.png").exists()
    assert (run_dir / "figs" / "helicity_by_bias.png").exists()
    assert "Decays: 102" in capsys.readouterr().out


def test_main_rejects_missing_run(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["helicity-lab-analyze", "--runs-dir", str(tmp_path)])
    with pytest.raises(SystemExit):
        analyze_events.main()


def test_figure_labels_are_swedish(recorded_run, monkeypatch):
    _, run_dir = recorded_run
    closed = []
    real_close = analyze_events.plt.close

    def keep_labels(fig):
        ax = fig.axes[0]
        closed.append((ax.get_title(), ax.get_xlabel(), ax.get_ylabel()))
        real_close(fig)

    monkeypatch.setattr(analyze_events.plt, "close", keep_labels)
    decays = analyze_events.load_decays(run_dir / analyze_events.DECAYS_FILENAME)
    fig_dir = analyze_events.ensure_fig_dir(run_dir)
    analyze_events.plot_orbital_remainder(fig_dir, analyze_events.summarize_decays(decays))
    analyze_events.plot_helicity_by_bias(fig_dir, decays)

    assert closed == [
        (
            "Saknat rörelsemängdsmoment per decay",
            "Saknat rörelsemängdsmoment L_needed (enheter)",
            "Antal decays",
        ),
        ("Elektronens helicitet mot bias", "Vänsterbias", "Andel vänsterhänta elektroner"),
    ]
