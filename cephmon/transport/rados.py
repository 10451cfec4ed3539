# cephmon/transport/rados.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from .base import Reply, Transport
from .errors import TransportCommandError, TransportError, TransportIOError

if TYPE_CHECKING:
    from cephmon.protocol.core.descriptor import CommandDescriptor


def _text(buf: Union[bytes, str, None], errors: str = "strict") -> Optional[str]:
    """librados hands back b"" / "" for an empty channel; treat that as absent."""
    if buf is None:
        return None
    if isinstance(buf, bytes):
        buf = buf.decode("utf-8", errors=errors)
    return buf if buf else None


class RadosTransport(Transport):
    """
    Monitor transport over a librados cluster handle.

    The handle is anything with the `rados.Rados.mon_command` signature:
        mon_command(cmd: str, inbuf: bytes, timeout: int = 0) -> (ret, outbuf, outs)
    It must already be connected; this class never connects or shuts it down.
    """

    def __init__(self, *, timeout_s: int = 0, logger: Optional[logging.Logger] = None):
        if int(timeout_s) < 0:
            raise ValueError(f"timeout_s must be >= 0, got {timeout_s!r}")
        self.timeout_s = int(timeout_s)
        self._log = logger or logging.getLogger(__name__)

    def mon_command(self, handle: Any, command: "CommandDescriptor") -> Reply:
        cmd_json = command.to_json()
        self._log.debug("MON_COMMAND cmd=%s timeout=%d", cmd_json, self.timeout_s)

        try:
            ret, outbuf, outs = handle.mon_command(cmd_json, b"", timeout=self.timeout_s)
        except TransportError:
            raise
        except Exception as e:
            raise TransportIOError(
                f"{command.prefix}: mon_command raised {type(e).__name__}: {e}",
                hint="Check that the cluster handle is connected.",
                details={"prefix": command.prefix},
            ) from e

        if ret < 0:
            raise TransportCommandError(command.prefix, ret, _text(outs, errors="backslashreplace"))

        try:
            return Reply(primary=_text(outbuf), diagnostic=_text(outs))
        except UnicodeDecodeError as e:
            raise TransportIOError(
                f"{command.prefix}: reply is not valid UTF-8 ({e.reason} at byte {e.start})",
                details={"prefix": command.prefix},
            ) from e
