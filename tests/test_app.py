import numpy as np
import pytest
import pygame

from helicity_lab import app
from helicity_lab.app import build_session, handle_key, parse_args
from helicity_lab.core.model import Mode


def test_parse_args_defaults():
    args = parse_args([])
    assert args.seed is None
    assert args.mode == 1
    assert args.bias == 0.85
    assert args.log is False


def test_seeded_sessions_match():
    args = parse_args(["--seed", "42", "--mode", "3"])
    a = build_session(args)
    b = build_session(args)
    assert a.mode is Mode.FULL_CONSERVATION
    np.testing.assert_array_equal(a.event.electron.velocity, b.event.electron.velocity)


def test_key_bindings_drive_session():
    session = build_session(parse_args(["--seed", "1"]))
    assert handle_key(session, pygame.K_2)
    assert session.mode is Mode.SPIN_AND_MOTION
    assert handle_key(session, pygame.K_UP)
    assert session.bias == pytest.approx(0.87)
    assert handle_key(session, pygame.K_p)
    assert session.paused
    assert handle_key(session, pygame.K_n)
    assert session.step_requested
    assert handle_key(session, pygame.K_h)
    assert not session.show_help
    old = session.event
    assert handle_key(session, pygame.K_SPACE)
    assert session.event is not old
    assert not handle_key(session, pygame.K_z)


def test_log_is_closed_when_display_setup_fails(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")

    def no_display(*_args, **_kwargs):
        raise pygame.error("no display")

    monkeypatch.setattr(app, "_set_display_mode_with_vsync", no_display)
    with pytest.raises(pygame.error):
        app.main(["--log", "--runs-dir", str(tmp_path), "--seed", "1"])

    run_id = (tmp_path / "last_run.txt").read_text(encoding="utf-8").strip()
    lines = (tmp_path / run_id / "decays.csv").read_text().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("t,reason,")
    assert lines[1].split(",")[1] == "start"
