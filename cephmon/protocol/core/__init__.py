# cephmon/protocol/core/__init__.py

from .catalog import CommandCatalog, CommandDef
from .descriptor import CommandDescriptor
from .builders import build_command, entity_name
from .decoder import ModelDecodeError, decode_value, first_line

__all__ = [
    "CommandCatalog", "CommandDef",
    "CommandDescriptor",
    "build_command", "entity_name",
    "ModelDecodeError", "decode_value", "first_line",
]
