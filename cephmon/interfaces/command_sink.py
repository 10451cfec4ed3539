# cephmon/interfaces/command_sink.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol


@dataclass(frozen=True, slots=True)
class CommandEvent:
    """
    One outcome of one monitor command, as seen by CommandEngine.

    payload["command"] is the descriptor as sent (or as it would have been
    sent, for "simulated"); failures add payload["error"] with the error text.
    request_id is unique per execute() call.
    """
    name: str                   # catalog name, e.g. "osd_set"
    kind: str                   # "simulated" | "ok" | "no_response" | "failed" | "malformed" | "exception"
    payload: Optional[Mapping[str, Any]] = None
    request_id: Optional[str] = None
    ts_utc: Optional[str] = None    # filled in by the sink when absent


class CommandSink(Protocol):
    """Receives CommandEvents synchronously; the engine logs and drops errors it raises."""

    def on_command(self, event: CommandEvent) -> None: ...
    def close(self) -> None: ...
