from __future__ import annotations

"""
Unit tests for the Main Entry Point supervisor and in-process CLI routing.
"""

import sys

import pytest

from compositree.main import global_exception_handler, main


def test_global_exception_handler_exits_with_trace(capsys):
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        exc_type, exc_value, tb = sys.exc_info()

    with pytest.raises(SystemExit) as excinfo:
        global_exception_handler(exc_type, exc_value, tb)

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "CRITICAL ERROR (COMPOSITREE CLI)" in err
    assert "RuntimeError: boom" in err


def test_main_installs_hook_and_runs_cli(sample_directory, capsys, monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)

    code = main(["-i", str(sample_directory), "--use-defaults", "--style", "ascii"])

    assert code == 0
    assert sys.excepthook is global_exception_handler
    assert capsys.readouterr().out.splitlines()[0] == "Root"
