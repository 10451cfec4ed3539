# cephmon/transport/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from cephmon.protocol.core.descriptor import CommandDescriptor


class ReplyKind(Enum):
    NO_DATA = "no_data"
    DIAGNOSTIC_ONLY = "diagnostic_only"
    DATA = "data"


@dataclass(frozen=True)
class Reply:
    """
    Dual text channel returned by a transport.

    primary:    command output ("outbuf"); None when the cluster sent nothing
    diagnostic: status/error text ("outs"); None when absent

    An empty-but-present primary is still DATA; the engine reports it as
    malformed rather than as a missing reply.
    """
    primary: Optional[str] = None
    diagnostic: Optional[str] = None

    @property
    def kind(self) -> ReplyKind:
        if self.primary is not None:
            return ReplyKind.DATA
        if self.diagnostic is not None:
            return ReplyKind.DIAGNOSTIC_ONLY
        return ReplyKind.NO_DATA


class Transport(ABC):
    """
    Abstract monitor command transport.

    Contract:
      - mon_command(handle, command) delivers one command descriptor through
        the caller-owned cluster handle and returns the raw reply.
      - Failures to deliver (or a rejected command) raise TransportError.
      - The handle's lifecycle (connect, shutdown) is never touched here.
    """

    @abstractmethod
    def mon_command(self, handle: Any, command: "CommandDescriptor") -> Reply: ...
