# cephmon/core/recording/command.py
from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from cephmon.interfaces.command_sink import CommandEvent, CommandSink


@dataclass
class CommandTraceLogger(CommandSink):
    """
    Appends one JSON line per command event to `file_path`.

    Writes happen on the caller's thread under a lock; with no file_path the
    events only go to `logger` at DEBUG.
    """
    logger: logging.Logger
    file_path: Optional[Path] = None

    def __post_init__(self) -> None:
        self._lock = threading.Lock()
        self._closed = False
        if self.file_path is not None:
            self.file_path = Path(self.file_path)
            self.file_path.parent.mkdir(parents=True, exist_ok=True)

    def close(self) -> None:
        with self._lock:
            self._closed = True

    def on_command(self, event: CommandEvent) -> None:
        ts_utc = event.ts_utc or datetime.now(timezone.utc).isoformat()

        out = {
            "name": event.name,
            "kind": event.kind,
            "request_id": event.request_id,
            "payload": event.payload,
            "ts_utc": ts_utc,
        }

        out = {k: v for k, v in out.items() if v is not None}
        line = json.dumps(out, ensure_ascii=False, default=str)

        self.logger.debug("CMD_TRACE %s", line)

        if self.file_path is None:
            return

        with self._lock:
            if self._closed:
                return
            with open(self.file_path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
