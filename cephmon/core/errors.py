# cephmon/core/errors.py
from __future__ import annotations


class CephMonError(Exception):
    """
    Base class for all expected operational errors in cephmon.
    """

    #: Stable machine-readable identifier (for exit mapping, trace events, etc.)
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Caller errors (raised before anything is sent)
# ---------------------------------------------------------------------------

class InvalidArgument(CephMonError):
    """
    A caller-supplied value cannot form a valid command.

    Examples:
      - negative or non-integer OSD id
      - empty pool / module / daemon name
      - unknown wire token for a flag or pool option
      - simulate requested on a read-only query
    """
    code = "invalid_argument"
