from __future__ import annotations

import json
import logging
from pathlib import Path

from cephmon.core.recording.command import CommandTraceLogger
from cephmon.interfaces.command_sink import CommandEvent


def _event(kind="ok", **kw) -> CommandEvent:
    return CommandEvent(name="osd_out", kind=kind, payload={"command": {"prefix": "osd out"}}, **kw)


def test_writes_one_json_line_per_event(tmp_path: Path):
    path = tmp_path / "trace" / "commands.jsonl"
    sink = CommandTraceLogger(logger=logging.getLogger("test.trace"), file_path=path)

    sink.on_command(_event(request_id="abc"))
    sink.on_command(_event(kind="simulated"))

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["name"] == "osd_out"
    assert first["request_id"] == "abc"
    assert first["payload"] == {"command": {"prefix": "osd out"}}
    assert "ts_utc" in first
    assert "request_id" not in json.loads(lines[1])


def test_keeps_given_timestamp(tmp_path: Path):
    path = tmp_path / "t.jsonl"
    sink = CommandTraceLogger(logger=logging.getLogger("test.trace"), file_path=path)
    sink.on_command(_event(ts_utc="2017-06-01T10:00:00+00:00"))
    assert json.loads(path.read_text(encoding="utf-8"))["ts_utc"] == "2017-06-01T10:00:00+00:00"


def test_no_writes_after_close(tmp_path: Path):
    path = tmp_path / "t.jsonl"
    sink = CommandTraceLogger(logger=logging.getLogger("test.trace"), file_path=path)

    sink.on_command(_event())
    sink.close()
    sink.on_command(_event())

    assert len(path.read_text(encoding="utf-8").splitlines()) == 1


def test_logger_only_mode(caplog):
    sink = CommandTraceLogger(logger=logging.getLogger("test.trace"))
    with caplog.at_level(logging.DEBUG, logger="test.trace"):
        sink.on_command(_event())
    assert "CMD_TRACE" in caplog.text
