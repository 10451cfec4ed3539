# cephmon/app/runner.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cephmon.app.config import MonClientConfig
from cephmon.core.recording.command import CommandTraceLogger
from cephmon.interfaces.command_sink import CommandSink
from cephmon.protocol import CommandCatalog, CommandEngine, MonClient
from cephmon.transport.base import Transport
from cephmon.transport.rados import RadosTransport


@dataclass(frozen=True)
class ClientRun:
    client: MonClient
    catalog: CommandCatalog
    transport: Transport
    cmd_sink: CommandSink

    def close(self) -> None:
        self.cmd_sink.close()


def build_client(
    cfg: Optional[MonClientConfig] = None,
    *,
    transport: Optional[Transport] = None,
    logger: Optional[logging.Logger] = None,
) -> ClientRun:
    """Wire catalog, transport and trace sink into a MonClient."""
    cfg = cfg or MonClientConfig()
    log = logger or logging.getLogger(__name__)

    catalog = CommandCatalog.load(cfg.catalog_dir)
    transport = transport or RadosTransport(timeout_s=cfg.timeout_s)

    cmd_sink = CommandTraceLogger(
        logger=logging.getLogger("cephmon.commands"),
        file_path=Path(cfg.trace_path) if cfg.trace_path else None,
    )

    engine = CommandEngine(catalog, transport, cmd_sink=cmd_sink, logger=log)
    log.info(
        "CLIENT_READY commands=%d catalog_version=%d transport=%s",
        len(catalog.commands),
        catalog.catalog_version,
        type(transport).__name__,
    )

    return ClientRun(
        client=MonClient(engine),
        catalog=catalog,
        transport=transport,
        cmd_sink=cmd_sink,
    )
