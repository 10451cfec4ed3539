# cephmon/model/mgr.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .types import U64


@dataclass(frozen=True)
class MgrStandby:
    gid: U64
    name: str
    available_modules: List[str]


@dataclass(frozen=True)
class MgrDump:
    """Reply of `mgr dump` (the latest MgrMap)."""
    epoch: U64
    active_gid: U64
    active_name: str
    active_addr: str
    available: bool
    standbys: List[MgrStandby]
    modules: List[str]
    available_modules: List[str]


@dataclass(frozen=True)
class MgrMetadata:
    id: str
    arch: str
    ceph_version: str
    cpu: str
    distro: str
    distro_description: str
    distro_version: str
    hostname: str
    kernel_description: str
    kernel_version: str
    mem_swap_kb: U64
    mem_total_kb: U64
    os: str
