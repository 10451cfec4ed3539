# cephmon/__init__.py

from .app.config import MonClientConfig, load_config
from .app.runner import ClientRun, build_client
from .core.errors import CephMonError, InvalidArgument
from .protocol import (
    CommandCatalog,
    CommandDescriptor,
    CommandEngine,
    CommandError,
    CommandFailed,
    MalformedResponse,
    MonClient,
    NoResponse,
)
from .transport import RadosTransport, Reply, Transport, TransportError

__all__ = [
    "MonClientConfig", "load_config", "ClientRun", "build_client",
    "CephMonError", "InvalidArgument",
    "CommandCatalog", "CommandDescriptor", "CommandEngine", "MonClient",
    "CommandError", "CommandFailed", "MalformedResponse", "NoResponse",
    "RadosTransport", "Reply", "Transport", "TransportError",
]
