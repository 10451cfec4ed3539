# cephmon/model/osd.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .types import I64


@dataclass(frozen=True)
class CrushNode:
    """
    One bucket or device of the CRUSH hierarchy.

    Buckets carry `children`; devices (OSDs) carry weight/status fields.
    The reply key `type` is exposed as `crush_type`.
    """
    id: I64
    name: str
    crush_type: str = field(metadata={"key": "type"})
    type_id: I64
    children: Optional[List[I64]] = None
    crush_weight: Optional[float] = None
    depth: Optional[I64] = None
    exists: Optional[I64] = None
    status: Optional[str] = None
    reweight: Optional[float] = None
    primary_affinity: Optional[float] = None

    @property
    def is_osd(self) -> bool:
        return self.crush_type == "osd"


@dataclass(frozen=True)
class CrushTree:
    """Reply of `osd tree`."""
    nodes: List[CrushNode]
    stray: List[CrushNode]

    def find(self, name: str) -> Optional[CrushNode]:
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def osds(self) -> List[CrushNode]:
        return [n for n in self.nodes if n.is_osd]
