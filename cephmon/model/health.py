# cephmon/model/health.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .types import U8, U64
from .vocab import HealthStatus, RoundStatus


@dataclass(frozen=True)
class StoreStats:
    bytes_total: U64
    bytes_sst: U64
    bytes_log: U64
    bytes_misc: U64
    last_updated: str


@dataclass(frozen=True)
class MonHealth:
    """Per-monitor store/disk health."""
    name: str
    kb_total: U64
    kb_used: U64
    kb_avail: U64
    avail_percent: U8
    last_updated: str
    store_stats: StoreStats
    health: HealthStatus


@dataclass(frozen=True)
class ServiceHealth:
    mons: List[MonHealth]


@dataclass(frozen=True)
class Health:
    health_services: List[ServiceHealth]


@dataclass(frozen=True)
class MonTimeChecks:
    name: str
    skew: float
    latency: float
    health: HealthStatus


@dataclass(frozen=True)
class TimeChecks:
    epoch: U64
    round: U64
    round_status: RoundStatus
    mons: List[MonTimeChecks]


@dataclass(frozen=True)
class ClusterHealth:
    """Reply of `health`."""
    health: Health
    timechecks: TimeChecks
    summary: List[str]
    overall_status: HealthStatus
    detail: List[str]

    @property
    def ok(self) -> bool:
        return self.overall_status is HealthStatus.OK
