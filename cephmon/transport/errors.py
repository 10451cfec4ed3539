# cephmon/transport/errors.py
from __future__ import annotations

from cephmon.core.errors import CephMonError


class TransportError(CephMonError):
    """Base class for transport-layer failures."""
    code = "transport_error"


class TransportIOError(TransportError):
    """The handle could not deliver the command (raised, timed out, not connected)."""
    code = "transport_io_error"


class TransportCommandError(TransportError):
    """The monitor rejected the command with a negative return code."""
    code = "transport_command_error"

    def __init__(self, prefix: str, errno: int, outs: str | None = None):
        super().__init__(
            f"{prefix} failed with error {errno}" + (f": {outs}" if outs else ""),
            details={"prefix": prefix, "errno": int(errno), "outs": outs},
        )
        self.prefix = prefix
        self.errno = int(errno)
        self.outs = outs
