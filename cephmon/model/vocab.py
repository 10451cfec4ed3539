# cephmon/model/vocab.py
"""
Wire vocabulary.

Each enumeration's values *are* its wire tokens. The same table is used to
build command descriptors and to decode replies.
Tokens are matched exactly (case and hyphens included).
"""
from __future__ import annotations

from enum import Enum, unique
from typing import Type, TypeVar

T = TypeVar("T", bound="WireToken")


class WireToken(str, Enum):
    """Closed enumeration whose values are canonical wire tokens."""

    def __str__(self) -> str:
        return self.value

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls: Type[T], token: str) -> T:
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Unknown {cls.__name__} token: {token!r}") from None

    @classmethod
    def tokens(cls) -> list[str]:
        return [m.value for m in cls]


def to_token(value: WireToken) -> str:
    return value.value


@unique
class OsdFlag(WireToken):
    """Cluster-wide OSD map flags (`osd set` / `osd unset`)."""
    FULL = "full"
    PAUSE = "pause"
    NOUP = "noup"
    NODOWN = "nodown"
    NOOUT = "noout"
    NOIN = "noin"
    NOBACKFILL = "nobackfill"
    NOREBALANCE = "norebalance"
    NORECOVER = "norecover"
    NOSCRUB = "noscrub"
    NODEEP_SCRUB = "nodeep-scrub"
    NOTIERAGENT = "notieragent"
    SORTBITWISE = "sortbitwise"
    RECOVERY_DELETES = "recovery_deletes"
    REQUIRE_JEWEL_OSDS = "require_jewel_osds"
    REQUIRE_KRAKEN_OSDS = "require_kraken_osds"


@unique
class PoolOption(WireToken):
    """Pool tunables (`osd pool get` / `osd pool set`)."""
    SIZE = "size"
    MIN_SIZE = "min_size"
    CRASH_REPLAY_INTERVAL = "crash_replay_interval"
    PG_NUM = "pg_num"
    PGP_NUM = "pgp_num"
    CRUSH_RULE = "crush_rule"
    HASHPSPOOL = "hashpspool"
    NODELETE = "nodelete"
    NOPGCHANGE = "nopgchange"
    NOSIZECHANGE = "nosizechange"
    WRITE_FADVICE_DONTNEED = "write_fadvice_dontneed"
    NOSCRUB = "noscrub"
    NODEEP_SCRUB = "nodeep-scrub"
    HIT_SET_TYPE = "hit_set_type"
    HIT_SET_PERIOD = "hit_set_period"
    HIT_SET_COUNT = "hit_set_count"
    HIT_SET_FPP = "hit_set_fpp"
    USE_GMT_HITSET = "use_gmt_hitset"
    TARGET_MAX_BYTES = "target_max_bytes"
    TARGET_MAX_OBJECTS = "target_max_objects"
    CACHE_TARGET_DIRTY_RATIO = "cache_target_dirty_ratio"
    CACHE_TARGET_DIRTY_HIGH_RATIO = "cache_target_dirty_high_ratio"
    CACHE_TARGET_FULL_RATIO = "cache_target_full_ratio"
    CACHE_MIN_FLUSH_AGE = "cache_min_flush_age"
    CACHE_MIN_EVICT_AGE = "cache_min_evict_age"
    AUID = "auid"
    MIN_READ_RECENCY_FOR_PROMOTE = "min_read_recency_for_promote"
    MIN_WRITE_RECENCY_FOR_PROMOTE = "min_write_recency_for_promote"
    FAST_READ = "fast_read"
    HIT_SET_GRADE_DECAY_RATE = "hit_set_grade_decay_rate"
    HIT_SET_SEARCH_LAST_N = "hit_set_search_last_n"
    SCRUB_MIN_INTERVAL = "scrub_min_interval"
    SCRUB_MAX_INTERVAL = "scrub_max_interval"
    DEEP_SCRUB_INTERVAL = "deep_scrub_interval"
    RECOVERY_PRIORITY = "recovery_priority"
    RECOVERY_OP_PRIORITY = "recovery_op_priority"
    SCRUB_PRIORITY = "scrub_priority"
    COMPRESSION_MODE = "compression_mode"
    COMPRESSION_ALGORITHM = "compression_algorithm"
    COMPRESSION_REQUIRED_RATIO = "compression_required_ratio"
    COMPRESSION_MAX_BLOB_SIZE = "compression_max_blob_size"
    COMPRESSION_MIN_BLOB_SIZE = "compression_min_blob_size"
    CSUM_TYPE = "csum_type"
    CSUM_MIN_BLOCK = "csum_min_block"
    CSUM_MAX_BLOCK = "csum_max_block"
    ALLOW_EC_OVERWRITES = "allow_ec_overwrites"


@unique
class HealthStatus(WireToken):
    OK = "HEALTH_OK"
    WARN = "HEALTH_WARN"
    ERR = "HEALTH_ERR"


@unique
class RoundStatus(WireToken):
    """Monitor time-check round state."""
    FINISHED = "finished"
    ON_GOING = "on-going"


@unique
class MonState(WireToken):
    PROBING = "probing"
    SYNCHRONIZING = "synchronizing"
    ELECTING = "electing"
    LEADER = "leader"
    PEON = "peon"
    SHUTDOWN = "shutdown"


@unique
class EntityType(WireToken):
    """Daemon/client role prefix of a `<type>.<id>` entity name."""
    OSD = "osd"
    MON = "mon"
    MDS = "mds"
    MGR = "mgr"
    CLIENT = "client"


WIRE_ENUMS: tuple[type[WireToken], ...] = (
    OsdFlag,
    PoolOption,
    HealthStatus,
    RoundStatus,
    MonState,
    EntityType,
)
