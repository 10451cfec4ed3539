# cephmon/protocol/core/descriptor.py
from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Optional


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _wire(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return [_wire(v) for v in value]
    return value


class CommandDescriptor(Mapping):
    """
    Immutable, ordered monitor command: a `prefix` plus operation fields.

    Values are str / int / float / bool, wire tokens, or sequences of those
    (stored as tuples, serialized as JSON arrays).
    """

    __slots__ = ("_fields",)

    def __init__(self, prefix: str, fields: Optional[Mapping[str, Any]] = None):
        fields = dict(fields or {})
        if "prefix" in fields:
            raise ValueError("'prefix' must be passed positionally, not as a field")
        if not isinstance(prefix, str) or not prefix:
            raise ValueError(f"Invalid command prefix: {prefix!r}")

        ordered = {"prefix": prefix}
        ordered.update((k, _freeze(v)) for k, v in fields.items())
        self._fields = MappingProxyType(ordered)

    @property
    def prefix(self) -> str:
        return self._fields["prefix"]

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"CommandDescriptor({self.to_wire()!r})"

    # ---------------- Serialization ----------------
    def to_wire(self) -> dict:
        """Plain JSON-ready dict; wire tokens become their token strings."""
        return {k: _wire(v) for k, v in self._fields.items()}

    def to_json(self) -> str:
        return json.dumps(self.to_wire())

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> "CommandDescriptor":
        data = dict(data)
        prefix = data.pop("prefix", None)
        return cls(prefix, data)

    @classmethod
    def from_json(cls, text: str) -> "CommandDescriptor":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"Command JSON must be an object, got {type(data).__name__}")
        return cls.from_wire(data)
