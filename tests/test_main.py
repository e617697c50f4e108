"""Tests for the console entry point's exit codes."""

import pytest

from twilio_recordings import __main__ as entry
from twilio_recordings.exceptions import ConfigurationError


def _raise(exc: BaseException):
    def app() -> None:
        raise exc

    return app


def test_library_error_exits_with_status_1(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(entry, "app", _raise(ConfigurationError("bad tmp_dir")))

    with pytest.raises(SystemExit) as excinfo:
        entry.main()

    assert excinfo.value.code == 1
    assert "bad tmp_dir" in capsys.readouterr().out


def test_unexpected_error_exits_with_status_1(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(entry, "app", _raise(RuntimeError("boom")))

    with pytest.raises(SystemExit) as excinfo:
        entry.main()

    assert excinfo.value.code == 1


def test_interrupt_exits_quietly(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(entry, "app", _raise(KeyboardInterrupt()))

    with pytest.raises(SystemExit) as excinfo:
        entry.main()

    assert excinfo.value.code == 0
