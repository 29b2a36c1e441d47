"""Tests for packguard.reporting.signal."""

import io

from packguard.reporting.signal import ActionsSignal, LogSignal, default_signal, escape_command_data


def test_actions_signal_writes_error_command() -> None:
    out = io.StringIO()
    signal = ActionsSignal(stream=out)
    signal.set_failed("Images should be under 4MB:")
    assert out.getvalue() == "::error::Images should be under 4MB:\n"
    assert signal.failures == ["Images should be under 4MB:"]


def test_escape_command_data() -> None:
    assert escape_command_data("50%\nnext\r") == "50%25%0Anext%0D"


def test_log_signal_records_failures() -> None:
    signal = LogSignal()
    signal.set_failed("one")
    signal.set_failed("two")
    assert signal.failures == ["one", "two"]


def test_default_signal_follows_github_actions_env(monkeypatch) -> None:
    assert isinstance(default_signal(), LogSignal)
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    assert isinstance(default_signal(), ActionsSignal)
