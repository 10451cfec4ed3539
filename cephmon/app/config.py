# cephmon/app/config.py
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


@dataclass(frozen=True)
class MonClientConfig:
    catalog_dir: Optional[str] = None     # None = bundled catalog
    timeout_s: int = 0                    # librados mon_command timeout; 0 = none
    trace_path: Optional[str] = None      # JSON-lines command trace; None = off


def load_config(path: Path | str) -> MonClientConfig:
    """Read a MonClientConfig from YAML. Missing keys keep their defaults."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        doc = yaml.safe_load(f) or {}

    if not isinstance(doc, dict):
        raise ValueError(f"{path.name} must be a mapping")

    known = {f.name for f in fields(MonClientConfig)}
    unknown = set(doc) - known
    if unknown:
        raise ValueError(f"{path.name} has unknown keys: {sorted(unknown)}")

    timeout = doc.get("timeout_s", 0)
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout < 0:
        raise ValueError(f"timeout_s must be a non-negative integer, got {timeout!r}")

    catalog_dir = doc.get("catalog_dir")
    trace_path = doc.get("trace_path")

    return MonClientConfig(
        catalog_dir=str(catalog_dir) if catalog_dir is not None else None,
        timeout_s=timeout,
        trace_path=str(trace_path) if trace_path is not None else None,
    )
