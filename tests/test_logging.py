from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

import ishango.logging_setup as logging_setup
from ishango import store
from ishango.cli import app


@pytest.fixture
def fresh_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[logging.Logger]:
    """Let ``configure_logging`` run again and restore the package logger afterwards."""

    pkg_logger = logging.getLogger("ishango")
    saved = (list(pkg_logger.handlers), pkg_logger.level, pkg_logger.propagate)
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    pkg_logger.handlers.clear()
    yield pkg_logger
    pkg_logger.handlers[:] = saved[0]
    pkg_logger.setLevel(saved[1])
    pkg_logger.propagate = saved[2]


def test_events_go_to_configured_stream_not_stdout(
    fresh_logging: logging.Logger, data_dir: Path, capsys: pytest.CaptureFixture[str]
):
    buf = io.StringIO()
    logging_setup.configure_logging("DEBUG", stream=buf)

    store.init(data_dir, "cash")
    store.append(data_dir, "cash", 2.5, now=1_700_000_000)

    logged = buf.getvalue()
    assert "bucket:created name=cash" in logged
    assert "transaction:appended bucket=cash time=1700000000 value=2.5" in logged
    out, _ = capsys.readouterr()
    assert out == ""
    assert fresh_logging.propagate is False
    assert len(fresh_logging.handlers) == 1


def test_configure_logging_runs_once(fresh_logging: logging.Logger):
    first, second = io.StringIO(), io.StringIO()
    logging_setup.configure_logging("INFO", stream=first)
    logging_setup.configure_logging("DEBUG", stream=second)

    assert len(fresh_logging.handlers) == 1
    assert fresh_logging.level == logging.INFO


def test_default_level_hides_info_events(fresh_logging: logging.Logger, data_dir: Path):
    buf = io.StringIO()
    logging_setup.configure_logging(stream=buf)

    store.init(data_dir, "cash")

    assert buf.getvalue() == ""


def test_log_level_option_keeps_stdout_clean(fresh_logging: logging.Logger):
    runner = CliRunner()
    assert runner.invoke(app, ["--log-level", "DEBUG", "init", "cash"]).exit_code == 0

    result = runner.invoke(app, ["--log-level", "DEBUG", "balance", "cash"])

    assert result.exit_code == 0
    assert result.stdout == "0.00\n"
    assert fresh_logging.level == logging.DEBUG
    assert fresh_logging.propagate is False
