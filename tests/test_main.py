# tests/test_main.py

from __future__ import annotations

import json

import pytest

import main


def test_list_sources(capsys):
    assert main.main(["--list-sources"]) == 0
    out = capsys.readouterr().out.split()
    assert "xoshiro256**" in out
    assert "pcg64" in out


def test_scenario_mode(capsys):
    assert main.main(["--mode", "scenario", "--seed", "12345"]) == 0
    out = capsys.readouterr().out
    assert "Root seed: 12345" in out
    assert "child  get_u64()" in out


def test_scenario_mode_is_reproducible(capsys):
    main.main(["--mode", "scenario", "--seed", "7", "--source", "sfc64"])
    first = capsys.readouterr().out
    main.main(["--mode", "scenario", "--seed", "7", "--source", "sfc64"])
    assert capsys.readouterr().out == first


def test_audit_mode(capsys):
    code = main.main([
        "--mode", "audit",
        "--seed", "3",
        "--n-samples", "1200",
        "--sides", "2", "6",
        "--shuffle-length", "3",
        "--shuffle-trials", "600",
        "--z", "3.719",
    ])
    out = capsys.readouterr().out
    assert "fair_roll(6)" in out
    assert "shuffle(3)" in out
    assert code == 0


def test_audit_mode_save_report(tmp_path, monkeypatch, capsys):
    import audit.pipeline

    monkeypatch.setattr(audit.pipeline, "REPORTS_DIR", tmp_path)
    main.main([
        "--mode", "audit",
        "--seed", "3",
        "--n-samples", "600",
        "--sides", "6",
        "--shuffle-length", "0",
        "--z", "3.719",
        "--save-report",
    ])
    rows = json.loads((tmp_path / "audit_3.json").read_text(encoding="utf-8"))
    assert [r["label"] for r in rows] == ["fair_roll(6)", "biased_roll(6)"]


def test_unknown_source_exits():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--source", "nope"])
    assert "nope" in str(excinfo.value)


def test_bad_audit_settings_exit():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--mode", "audit", "--n-samples", "10", "--sides", "100"])
    assert "Invalid audit settings" in str(excinfo.value)
