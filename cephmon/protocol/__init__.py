# cephmon/protocol/__init__.py

from .core import CommandCatalog, CommandDef, CommandDescriptor
from .engine import CommandEngine
from .errors import CommandError, CommandFailed, MalformedResponse, NoResponse
from .mon_client import MonClient

__all__ = [
    "CommandCatalog", "CommandDef", "CommandDescriptor",
    "CommandEngine", "MonClient",
    "CommandError", "CommandFailed", "MalformedResponse", "NoResponse",
]
