# cephmon/model/mon.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List
from uuid import UUID

from .types import I64, U64
from .vocab import MonState


@dataclass(frozen=True)
class CephMon:
    rank: I64
    name: str
    addr: str


@dataclass(frozen=True)
class MonDump:
    """
    Reply of `mon dump`.

    `quorum` lists the ranks in quorum, in the order the monitor reports them.
    """
    epoch: I64
    fsid: str
    modified: str
    created: str
    mons: List[CephMon]
    quorum: List[I64]

    def in_quorum(self) -> List[CephMon]:
        ranks = set(self.quorum)
        return [m for m in self.mons if m.rank in ranks]


@dataclass(frozen=True)
class Mon:
    rank: U64
    name: str
    addr: str


@dataclass(frozen=True)
class MonMap:
    epoch: U64
    fsid: UUID
    modified: str
    created: str
    mons: List[Mon]


@dataclass(frozen=True)
class MonStatus:
    """Reply of `mon_status` (the answering monitor's view)."""
    name: str
    rank: U64
    state: MonState
    election_epoch: U64
    quorum: List[U64]
    outside_quorum: List[U64]
    extra_probe_peers: List[U64]
    sync_provider: List[U64]
    monmap: MonMap


@dataclass(frozen=True)
class QuorumStatus:
    """Reply of `quorum_status`."""
    election_epoch: U64
    quorum: List[U64]
    quorum_names: List[str]
    quorum_leader_name: str
    monmap: MonMap
