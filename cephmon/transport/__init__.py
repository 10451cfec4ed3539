from .base import Reply, ReplyKind, Transport
from .errors import TransportCommandError, TransportError, TransportIOError
from .rados import RadosTransport

__all__ = [
    "Reply", "ReplyKind", "Transport",
    "TransportError", "TransportIOError", "TransportCommandError",
    "RadosTransport",
]
