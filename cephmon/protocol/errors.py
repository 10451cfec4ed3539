# cephmon/protocol/errors.py
from __future__ import annotations

from cephmon.core.errors import CephMonError


class CommandError(CephMonError):
    """Base for reply interpretation failures of one monitor command."""
    code = "command_error"

    def __init__(self, operation: str, message: str, *, details: dict | None = None):
        super().__init__(message, details={"operation": operation, **(details or {})})
        self.operation = operation


class NoResponse(CommandError):
    """Neither output nor status text came back."""
    code = "no_response"

    def __init__(self, operation: str):
        super().__init__(operation, f"No response from cluster for {operation}")


class CommandFailed(CommandError):
    """No output, but the cluster said why. The status text is the message, verbatim."""
    code = "failed"

    def __init__(self, operation: str, diagnostic: str):
        super().__init__(operation, diagnostic)
        self.diagnostic = diagnostic


class MalformedResponse(CommandError):
    code = "malformed"

    def __init__(self, operation: str, raw: str, reason: str):
        super().__init__(
            operation,
            f"Unable to parse {operation} output ({reason}): {raw!r}",
            details={"raw": raw, "reason": reason},
        )
        self.raw = raw
        self.reason = reason
