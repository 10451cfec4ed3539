# cephmon/protocol/mon_client.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from cephmon.model import (
    ClusterHealth,
    CrushTree,
    EntityType,
    MgrDump,
    MgrMetadata,
    MonDump,
    MonStatus,
    OsdFlag,
    PoolOption,
    QuorumStatus,
)

from .engine import CommandEngine


class MonClient:
    """
    User-facing API over CommandEngine: one method per monitor command.

    Every call takes the caller's cluster handle first; the client never stores
    it. Mutating calls accept `simulate=True` to build and validate the command
    without sending it.
    """

    def __init__(self, engine: CommandEngine):
        self._engine = engine

    @property
    def engine(self) -> CommandEngine:
        return self._engine

    def run(self, handle: Any, name: str, *, simulate: bool = False, **params: Any) -> Any:
        """Execute any catalog command by name."""
        return self._engine.execute(handle, name, simulate=simulate, **params)

    # ---------------- cluster ----------------
    def cluster_health(self, handle: Any) -> ClusterHealth:
        return self.run(handle, "cluster_health")

    def status(self, handle: Any) -> str:
        """Cluster status, as the raw JSON line."""
        return self.run(handle, "status")

    def version(self, handle: Any) -> str:
        """Version string of the answering monitor."""
        return self.run(handle, "version")

    # ---------------- mon ----------------
    def mon_dump(self, handle: Any) -> MonDump:
        """List all the monitors in the cluster and their current rank."""
        return self.run(handle, "mon_dump")

    def mon_quorum(self, handle: Any) -> QuorumStatus:
        return self.run(handle, "mon_quorum")

    def mon_status(self, handle: Any) -> MonStatus:
        return self.run(handle, "mon_status")

    # ---------------- osd ----------------
    def osd_tree(self, handle: Any) -> CrushTree:
        return self.run(handle, "osd_tree")

    def osd_create(self, handle: Any, osd_id: Optional[int] = None, simulate: bool = False) -> int:
        """
        Allocate an OSD id (optionally a specific one) and return it.
        Simulated calls return 0, which is not a real allocation.
        """
        return self.run(handle, "osd_create", simulate=simulate, osd_id=osd_id)

    def osd_out(self, handle: Any, osd_id: int, simulate: bool = False) -> None:
        self.run(handle, "osd_out", simulate=simulate, osd_id=osd_id)

    def osd_rm(self, handle: Any, osd_id: int, simulate: bool = False) -> None:
        self.run(handle, "osd_rm", simulate=simulate, osd_id=osd_id)

    def osd_set(
        self,
        handle: Any,
        key: Union[OsdFlag, str],
        force: bool = False,
        simulate: bool = False,
    ) -> None:
        self.run(handle, "osd_set", simulate=simulate, key=key, force=force)

    def osd_unset(self, handle: Any, key: Union[OsdFlag, str], simulate: bool = False) -> None:
        self.run(handle, "osd_unset", simulate=simulate, key=key)

    def osd_crush_add(
        self,
        handle: Any,
        osd_id: int,
        weight: float,
        host: str,
        simulate: bool = False,
    ) -> None:
        """Add or update the CRUSH position and weight of an OSD under `host`."""
        self.run(handle, "osd_crush_add", simulate=simulate, osd_id=osd_id, weight=weight, host=host)

    def osd_crush_remove(self, handle: Any, osd_id: int, simulate: bool = False) -> None:
        self.run(handle, "osd_crush_remove", simulate=simulate, osd_id=osd_id)

    # ---------------- pools ----------------
    def osd_pool_get(self, handle: Any, pool: str, choice: Union[PoolOption, str]) -> str:
        """Query a pool tunable; returns the monitor's first output line as-is."""
        return self.run(handle, "osd_pool_get", pool=pool, choice=choice)

    def osd_pool_set(
        self,
        handle: Any,
        pool: str,
        key: Union[PoolOption, str],
        value: Union[str, int, float, bool],
        simulate: bool = False,
    ) -> None:
        self.run(handle, "osd_pool_set", simulate=simulate, pool=pool, key=key, value=value)

    def osd_pool_quota_get(self, handle: Any, pool: str) -> int:
        return self.run(handle, "osd_pool_quota_get", pool=pool)

    # ---------------- auth ----------------
    def auth_get_key(self, handle: Any, client_type: Union[EntityType, str], ident: Union[int, str]) -> str:
        """Get a cephx key for `<client_type>.<ident>`."""
        return self.run(handle, "auth_get_key", client_type=client_type, ident=ident)

    def auth_del(self, handle: Any, osd_id: int, simulate: bool = False) -> None:
        self.run(handle, "auth_del", simulate=simulate, osd_id=osd_id)

    def osd_auth_add(self, handle: Any, osd_id: int, simulate: bool = False) -> None:
        self.run(handle, "osd_auth_add", simulate=simulate, osd_id=osd_id)

    def mgr_auth_add(self, handle: Any, mgr_id: str, simulate: bool = False) -> None:
        self.run(handle, "mgr_auth_add", simulate=simulate, mgr_id=mgr_id)

    # ---------------- mgr ----------------
    def mgr_dump(self, handle: Any) -> MgrDump:
        return self.run(handle, "mgr_dump")

    def mgr_fail(self, handle: Any, mgr_id: str, simulate: bool = False) -> None:
        """Treat the named manager daemon as failed."""
        self.run(handle, "mgr_fail", simulate=simulate, mgr_id=mgr_id)

    def mgr_list_modules(self, handle: Any) -> List[str]:
        return self.run(handle, "mgr_list_modules")

    def mgr_list_services(self, handle: Any) -> List[str]:
        return self.run(handle, "mgr_list_services")

    def mgr_enable_module(self, handle: Any, module: str, force: bool = False, simulate: bool = False) -> None:
        self.run(handle, "mgr_enable_module", simulate=simulate, module=module, force=force)

    def mgr_disable_module(self, handle: Any, module: str, simulate: bool = False) -> None:
        self.run(handle, "mgr_disable_module", simulate=simulate, module=module)

    def mgr_metadata(self, handle: Any) -> MgrMetadata:
        return self.run(handle, "mgr_metadata")

    def mgr_count_metadata(self, handle: Any, property_name: str) -> Dict[str, int]:
        """Count mgr daemons by a metadata property, e.g. "ceph_version"."""
        return self.run(handle, "mgr_count_metadata", property_name=property_name)

    def mgr_versions(self, handle: Any) -> Dict[str, int]:
        return self.run(handle, "mgr_versions")
