"""Shared test fixtures and utilities for ckconv tests."""

import io

import pytest

from ckconv.cli import main
from ckconv.config import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's real settings file and color env vars out of every test."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("CKCONV_CONFIG", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    return tmp_path


@pytest.fixture
def plain_settings():
    """Default settings with color disabled."""
    return Settings(color=False)


@pytest.fixture
def run_cli():
    """Run the CLI in-process and capture what it prints.

    Returns a callable taking ``argv`` and optional piped ``stdin`` text, and
    returning ``(exit_code, stdout, stderr)``.

    Example:
        def test_mile(run_cli):
            code, out, err = run_cli(["1", "mi", "ft"])
            assert out == "1 mi = 5280 '\\n"
    """
    def _run(argv, stdin=""):
        out, err = io.StringIO(), io.StringIO()
        code = main(argv, stdin=io.StringIO(stdin), stdout=out, stderr=err)
        return code, out.getvalue(), err.getvalue()
    return _run
