# cephmon/protocol/engine.py
from __future__ import annotations

import logging
import uuid
from typing import Any, Mapping, Optional

from cephmon.core.errors import InvalidArgument
from cephmon.interfaces.command_sink import CommandEvent, CommandSink
from cephmon.transport.base import Reply, ReplyKind, Transport

from .core import CommandCatalog, CommandDef, CommandDescriptor, build_command
from .core.catalog import RESPONSE_NONE
from .core.decoder import DECODERS, ModelDecodeError, first_line
from .errors import CommandError, CommandFailed, MalformedResponse, NoResponse


class CommandEngine:
    """
    Runs one catalog command end to end.

    Built -> (simulated) | dispatched -> parsed -> result or CommandError.
    Transport errors are not caught here; no retries.
    """

    def __init__(
        self,
        catalog: CommandCatalog,
        transport: Transport,
        *,
        cmd_sink: Optional[CommandSink] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.catalog = catalog
        self.transport = transport

        self._log = logger or logging.getLogger(__name__)
        self._cmd_sink = cmd_sink

    # ---------------- Build ----------------
    def build(self, name: str, **params: Any) -> CommandDescriptor:
        return build_command(self.catalog.get(name), **params)

    # ---------------- Execute ----------------
    def execute(self, handle: Any, name: str, *, simulate: bool = False, **params: Any) -> Any:
        cmd_def = self.catalog.get(name)
        command = build_command(cmd_def, **params)
        request_id = uuid.uuid4().hex

        if simulate:
            if not cmd_def.mutating:
                raise InvalidArgument(
                    f"{name} is a read-only query and cannot be simulated",
                    details={"command": name},
                )
            self._log.info("CMD_SIMULATED name=%s cmd=%s", name, command.to_json())
            self._emit(name, "simulated", request_id, command)
            return cmd_def.placeholder

        self._log.debug("CMD_DISPATCH name=%s cmd=%s", name, command.to_json())

        try:
            reply = self.transport.mon_command(handle, command)
        except Exception as e:
            self._log.warning("CMD_TRANSPORT_FAILED name=%s error=%s", name, e)
            self._emit(name, "exception", request_id, command, {"error": str(e)})
            raise

        try:
            result = self.interpret(cmd_def, reply)
        except CommandError as e:
            self._log.warning("CMD_%s name=%s error=%s", e.code.upper(), name, e)
            self._emit(name, e.code, request_id, command, {"error": str(e)})
            raise

        self._emit(name, "ok", request_id, command)
        return result

    # ---------------- Parse ----------------
    @staticmethod
    def interpret(cmd_def: CommandDef, reply: Reply) -> Any:
        """Classify a reply and decode its first line per the command's response kind."""
        if cmd_def.response == RESPONSE_NONE:
            return None

        op = cmd_def.prefix
        kind = reply.kind

        if kind is ReplyKind.NO_DATA:
            raise NoResponse(op)
        if kind is ReplyKind.DIAGNOSTIC_ONLY:
            raise CommandFailed(op, reply.diagnostic)

        raw = reply.primary
        line = first_line(raw)
        if line is None:
            raise MalformedResponse(op, raw, "empty response")

        decode = DECODERS[cmd_def.response]
        try:
            return decode(line, cmd_def.model)
        except (ValueError, ModelDecodeError) as e:
            raise MalformedResponse(op, raw, str(e)) from e

    # ---------------- Events ----------------
    def _emit(
        self,
        name: str,
        kind: str,
        request_id: str,
        command: CommandDescriptor,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        if self._cmd_sink is None:
            return
        payload = {"command": command.to_wire(), **(extra or {})}
        try:
            self._cmd_sink.on_command(
                CommandEvent(name=name, kind=kind, payload=payload, request_id=request_id)
            )
        except Exception:
            self._log.exception("CMD_SINK_ERROR name=%s kind=%s", name, kind)
