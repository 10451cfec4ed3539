# cephmon/protocol/loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CATALOG_DIR = Path(__file__).resolve().parents[1] / "metadata"


class CatalogLoader:
    """Load the command catalog YAML into plain dicts."""

    REQUIRED_FILES = ("commands.yml",)

    def __init__(self, config_dir: Path | str | None = None):
        self.config_dir = Path(config_dir) if config_dir is not None else DEFAULT_CATALOG_DIR

        # Full document
        self.commands_doc: Dict[str, Any] = {}

        # Extracted structures used by CommandCatalog(...)
        self.catalog_version: int = 0
        self.commands: Dict[str, Dict[str, Any]] = {}

    def load_all(self) -> None:
        for fn in self.REQUIRED_FILES:
            path = self.config_dir / fn
            if not path.exists():
                raise FileNotFoundError(f"Catalog file not found: {path}")

        self.commands_doc = self._load_yaml("commands.yml")

        if not isinstance(self.commands_doc, dict):
            raise ValueError("commands.yml must be a mapping")

        self.commands = self.commands_doc.get("commands", {}) or {}
        if not isinstance(self.commands, dict):
            raise ValueError("commands.yml must contain 'commands' mapping")

        for name, entry in self.commands.items():
            if not isinstance(entry, dict):
                raise ValueError(f"Command '{name}' entry must be a mapping")

        v = self.commands_doc.get("catalog_version", 0)
        try:
            self.catalog_version = int(v)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid catalog_version in commands.yml: {v!r}") from None

    def _load_yaml(self, filename: str) -> Any:
        path = self.config_dir / filename
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
