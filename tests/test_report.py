"""Tests for the console and CSV reports of a multi-end call."""

from pathlib import Path

from convspeech.config import Config
from convspeech.domain import Turn
from convspeech.multiend_call import MultiEndCall
from convspeech.utils.report import print_multiend_call, save_multiend_call_to_csv


def test_save_multiend_call_to_csv_writes_headers_and_rows(
    tmp_path: Path, monkeypatch, reader_factory
) -> None:
    monkeypatch.setitem(Config.REPORT_CONFIG, "csv_file_name", "turns.csv")
    call = MultiEndCall(
        [Turn("A", "t500", 0), Turn("B", "t300", 100)], "/tracks", reader_factory
    )

    csv_path = save_multiend_call_to_csv(call, tmp_path / "report")

    assert csv_path == tmp_path / "report" / "turns.csv"
    rows = csv_path.read_text(encoding="utf-8").splitlines()
    assert rows[0] == "Speaker,Audio track,Begin (samples),End (samples)"
    assert rows[1:] == ["A,t500,0,24000", "B,t300,28800,43200"]


def test_print_multiend_call_shows_turns_and_verdict(capsys, reader_factory) -> None:
    call = MultiEndCall(
        [Turn("A", "t500", 0), Turn("B", "t500", -100)], "/tracks", reader_factory
    )

    print_multiend_call(call)

    output = capsys.readouterr().out
    assert "0.40s" in output
    assert "0.90s" in output
    assert "Valid: 2 speakers, 0.90s" in output


def test_print_multiend_call_flags_invalid_setup(capsys, reader_factory) -> None:
    call = MultiEndCall([Turn("A", "t500", -100)], "/tracks", reader_factory)

    print_multiend_call(call)

    assert "Invalid conversational speech setup" in capsys.readouterr().out
