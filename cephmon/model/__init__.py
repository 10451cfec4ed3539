from typing import Dict, List

from .health import (
    ClusterHealth,
    Health,
    MonHealth,
    MonTimeChecks,
    ServiceHealth,
    StoreStats,
    TimeChecks,
)
from .mgr import MgrDump, MgrMetadata, MgrStandby
from .mon import CephMon, Mon, MonDump, MonMap, MonStatus, QuorumStatus
from .osd import CrushNode, CrushTree
from .types import I64, U8, U64
from .vocab import (
    EntityType,
    HealthStatus,
    MonState,
    OsdFlag,
    PoolOption,
    RoundStatus,
    WireToken,
    to_token,
)

# Reply shapes addressable by name from the command catalog.
MODELS: Dict[str, object] = {
    "ClusterHealth": ClusterHealth,
    "CrushTree": CrushTree,
    "MonDump": MonDump,
    "MonStatus": MonStatus,
    "QuorumStatus": QuorumStatus,
    "MgrDump": MgrDump,
    "MgrMetadata": MgrMetadata,
    "StringList": List[str],
    "CountMap": Dict[str, U64],
}

__all__ = [
    "ClusterHealth", "Health", "MonHealth", "MonTimeChecks",
    "ServiceHealth", "StoreStats", "TimeChecks",
    "MgrDump", "MgrMetadata", "MgrStandby",
    "CephMon", "Mon", "MonDump", "MonMap", "MonStatus", "QuorumStatus",
    "CrushNode", "CrushTree",
    "I64", "U8", "U64",
    "EntityType", "HealthStatus", "MonState", "OsdFlag", "PoolOption",
    "RoundStatus", "WireToken", "to_token",
    "MODELS",
]
