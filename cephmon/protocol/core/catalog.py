# cephmon/protocol/core/catalog.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from cephmon.model import MODELS

from .decoder import DECODERS
from ..loader import CatalogLoader

RESPONSE_NONE = "none"
RESPONSE_KINDS = (RESPONSE_NONE,) + tuple(DECODERS)

_KNOWN_KEYS = {"prefix", "fields", "response", "model", "mutating", "placeholder"}


@dataclass(frozen=True)
class CommandDef:
    """
    Static half of one monitor operation.

    name:        catalog key, also the MonClient method name
    prefix:      remote operation selector
    fields:      constant fields merged into every descriptor (e.g. format=json)
    response:    "json" | "int" | "raw" | "none"
    model:       decode target for "json" replies
    mutating:    changes cluster state (accepts simulate)
    placeholder: value returned when simulated
    """
    name: str
    prefix: str
    fields: Mapping[str, Any] = field(default_factory=dict)
    response: str = RESPONSE_NONE
    model: Any = None
    mutating: bool = False
    placeholder: Any = None


class CommandCatalog:
    """Runtime access to the command catalog."""

    def __init__(self, loader):
        self.catalog_version: int = loader.catalog_version
        self.commands: Dict[str, CommandDef] = {}

        for name, entry in loader.commands.items():
            self.commands[str(name)] = self._build_def(str(name), entry)

    @staticmethod
    def _build_def(name: str, entry: Mapping[str, Any]) -> CommandDef:
        unknown = set(entry) - _KNOWN_KEYS
        if unknown:
            raise ValueError(f"Command '{name}' has unknown keys: {sorted(unknown)}")

        prefix = entry.get("prefix")
        if not isinstance(prefix, str) or not prefix.strip():
            raise ValueError(f"Command '{name}' is missing 'prefix'")

        fields = entry.get("fields") or {}
        if not isinstance(fields, dict):
            raise ValueError(f"Command '{name}' 'fields' must be a mapping")
        if "prefix" in fields:
            raise ValueError(f"Command '{name}' must not set 'prefix' inside 'fields'")

        mutating = entry.get("mutating", False)
        if not isinstance(mutating, bool):
            raise ValueError(f"Command '{name}' 'mutating' must be true/false")

        response = entry.get("response", RESPONSE_NONE)
        if response not in RESPONSE_KINDS:
            raise ValueError(
                f"Command '{name}' has unknown response kind {response!r} "
                f"(expected one of {list(RESPONSE_KINDS)})"
            )
        if response == RESPONSE_NONE and not mutating:
            raise ValueError(f"Query command '{name}' must declare a response kind")

        model = None
        model_name = entry.get("model")
        if response == "json":
            if model_name not in MODELS:
                raise ValueError(f"Command '{name}' references unknown model {model_name!r}")
            model = MODELS[model_name]
        elif model_name is not None:
            raise ValueError(f"Command '{name}' sets 'model' but response is {response!r}")

        if "placeholder" in entry and not mutating:
            raise ValueError(f"Query command '{name}' cannot declare a simulate placeholder")

        return CommandDef(
            name=name,
            prefix=prefix,
            fields=dict(fields),
            response=response,
            model=model,
            mutating=mutating,
            placeholder=entry.get("placeholder"),
        )

    # ---------------- Lookup ----------------
    def get(self, name: str) -> CommandDef:
        if name not in self.commands:
            raise KeyError(f"Unknown command: {name}")
        return self.commands[name]

    def names(self) -> List[str]:
        return list(self.commands)

    def mutating(self) -> List[CommandDef]:
        return [c for c in self.commands.values() if c.mutating]

    def queries(self) -> List[CommandDef]:
        return [c for c in self.commands.values() if not c.mutating]

    # ---------------- Factory ----------------
    @classmethod
    def load(cls, config_dir: Optional[Path | str] = None) -> "CommandCatalog":
        loader = CatalogLoader(config_dir)
        loader.load_all()
        return cls(loader)
