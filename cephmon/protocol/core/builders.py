# cephmon/protocol/core/builders.py
"""
Dynamic halves of monitor commands.

Each builder turns typed arguments into the operation-specific fields of a
descriptor; the catalog supplies the prefix and any constant fields.
Arguments are validated first and rejected with InvalidArgument, so an
invalid descriptor is never built.

Wire details:
  - OSD id lists are lists of decimal *strings* (`"ids": ["3"]`).
  - `osd crush add` sends the id as a bare integer.
  - optional modifiers (`sure`, `force`, `id`) are left out entirely when not
    requested; the monitor keys off their presence.
"""
from __future__ import annotations

import inspect
import math
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union

from cephmon.core.errors import InvalidArgument
from cephmon.model.vocab import EntityType, OsdFlag, PoolOption, WireToken

from .catalog import CommandDef
from .descriptor import CommandDescriptor

T = TypeVar("T", bound=WireToken)

Builder = Callable[..., Dict[str, Any]]

BUILDERS: Dict[str, Builder] = {}

YES_I_REALLY_MEAN_IT = "--yes-i-really-mean-it"
FORCE = "--force"

MGR_CAPS = ("mon", "allow profile mgr", "osd", "allow *", "mds", "allow *")
OSD_CAPS = ("mon", "allow rwx", "osd", "allow *")


def builder(name: str) -> Callable[[Builder], Builder]:
    def register(fn: Builder) -> Builder:
        if name in BUILDERS:
            raise ValueError(f"Duplicate builder for '{name}'")
        BUILDERS[name] = fn
        return fn
    return register


def build_command(cmd_def: CommandDef, **params: Any) -> CommandDescriptor:
    fields: Dict[str, Any] = dict(cmd_def.fields)

    fn = BUILDERS.get(cmd_def.name)
    if fn is None:
        if params:
            raise InvalidArgument(
                f"{cmd_def.name} takes no arguments, got {sorted(params)}",
                details={"command": cmd_def.name},
            )
    else:
        try:
            inspect.signature(fn).bind(**params)
        except TypeError as e:
            raise InvalidArgument(f"{cmd_def.name}: {e}", details={"command": cmd_def.name}) from None
        fields.update(fn(**params))

    return CommandDescriptor(cmd_def.prefix, fields)


# ---------------------------------------------------------------------------
# Argument checks
# ---------------------------------------------------------------------------

def require_osd_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgument(
            f"OSD id must be a non-negative integer, got {value!r}",
            details={"value": value},
        )
    return value


def require_name(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value or any(c.isspace() for c in value):
        raise InvalidArgument(
            f"{what} must be a non-empty string without whitespace, got {value!r}",
            details={"value": value},
        )
    return value


def require_token(value: Any, enum: Type[T]) -> T:
    if isinstance(value, enum):
        return value
    if isinstance(value, str):
        try:
            return enum.from_token(value)
        except ValueError as e:
            raise InvalidArgument(str(e), details={"value": value}) from None
    raise InvalidArgument(
        f"Expected {enum.__name__}, got {type(value).__name__}",
        details={"value": value},
    )


def require_weight(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"CRUSH weight must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidArgument(f"CRUSH weight must be finite and >= 0, got {value!r}")
    return float(value)


def entity_name(kind: Union[EntityType, str], ident: Union[int, str]) -> str:
    """`<type>.<id>`, e.g. `osd.3`, `mgr.node1`, `client.admin`."""
    etype = require_token(kind, EntityType)
    if etype is EntityType.OSD:
        if isinstance(ident, str) and ident.isascii() and ident.isdigit():
            ident = int(ident)
        ident = require_osd_id(ident)
    elif isinstance(ident, int) and not isinstance(ident, bool):
        ident = str(ident)
    else:
        ident = require_name(ident, f"{etype.value} id")
    return f"{etype.value}.{ident}"


def osd_id_list(osd_id: Any) -> List[str]:
    return [str(require_osd_id(osd_id))]


def _pool_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidArgument(f"Pool value must be finite, got {value!r}")
        return str(value)
    if isinstance(value, str) and value:
        return value
    raise InvalidArgument(f"Pool value must be a non-empty string or number, got {value!r}")


# ---------------------------------------------------------------------------
# OSD
# ---------------------------------------------------------------------------

@builder("osd_out")
def build_osd_out(osd_id: int) -> Dict[str, Any]:
    return {"ids": osd_id_list(osd_id)}


@builder("osd_rm")
def build_osd_rm(osd_id: int) -> Dict[str, Any]:
    return {"ids": osd_id_list(osd_id)}


@builder("osd_create")
def build_osd_create(osd_id: Optional[int] = None) -> Dict[str, Any]:
    if osd_id is None:
        return {}
    return {"id": entity_name(EntityType.OSD, osd_id)}


@builder("osd_set")
def build_osd_set(key: Union[OsdFlag, str], force: bool = False) -> Dict[str, Any]:
    fields: Dict[str, Any] = {"key": require_token(key, OsdFlag)}
    if force:
        fields["sure"] = YES_I_REALLY_MEAN_IT
    return fields


@builder("osd_unset")
def build_osd_unset(key: Union[OsdFlag, str]) -> Dict[str, Any]:
    return {"key": require_token(key, OsdFlag)}


@builder("osd_crush_add")
def build_osd_crush_add(osd_id: int, weight: float, host: str) -> Dict[str, Any]:
    host = require_name(host, "host")
    if "=" in host:
        raise InvalidArgument(f"host must not contain '=', got {host!r}")
    return {
        "id": require_osd_id(osd_id),
        "weight": require_weight(weight),
        "args": [f"host={host}"],
    }


@builder("osd_crush_remove")
def build_osd_crush_remove(osd_id: int) -> Dict[str, Any]:
    return {"name": entity_name(EntityType.OSD, osd_id)}


# ---------------------------------------------------------------------------
# Pools
# ---------------------------------------------------------------------------

@builder("osd_pool_get")
def build_osd_pool_get(pool: str, choice: Union[PoolOption, str]) -> Dict[str, Any]:
    return {"pool": require_name(pool, "pool"), "var": require_token(choice, PoolOption)}


@builder("osd_pool_set")
def build_osd_pool_set(pool: str, key: Union[PoolOption, str], value: Any) -> Dict[str, Any]:
    return {
        "pool": require_name(pool, "pool"),
        "var": require_token(key, PoolOption),
        "val": _pool_value(value),
    }


@builder("osd_pool_quota_get")
def build_osd_pool_quota_get(pool: str) -> Dict[str, Any]:
    return {"pool": require_name(pool, "pool")}


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

@builder("auth_del")
def build_auth_del(osd_id: int) -> Dict[str, Any]:
    return {"entity": entity_name(EntityType.OSD, osd_id)}


@builder("osd_auth_add")
def build_osd_auth_add(osd_id: int) -> Dict[str, Any]:
    return {"entity": entity_name(EntityType.OSD, osd_id), "caps": list(OSD_CAPS)}


@builder("mgr_auth_add")
def build_mgr_auth_add(mgr_id: str) -> Dict[str, Any]:
    return {"entity": entity_name(EntityType.MGR, mgr_id), "caps": list(MGR_CAPS)}


@builder("auth_get_key")
def build_auth_get_key(client_type: Union[EntityType, str], ident: Union[int, str]) -> Dict[str, Any]:
    return {"entity": entity_name(client_type, ident)}


# ---------------------------------------------------------------------------
# Mgr
# ---------------------------------------------------------------------------

@builder("mgr_fail")
def build_mgr_fail(mgr_id: str) -> Dict[str, Any]:
    return {"name": require_name(mgr_id, "mgr id")}


@builder("mgr_enable_module")
def build_mgr_enable_module(module: str, force: bool = False) -> Dict[str, Any]:
    fields: Dict[str, Any] = {"module": require_name(module, "module")}
    if force:
        fields["force"] = FORCE
    return fields


@builder("mgr_disable_module")
def build_mgr_disable_module(module: str) -> Dict[str, Any]:
    return {"module": require_name(module, "module")}


@builder("mgr_count_metadata")
def build_mgr_count_metadata(property_name: str) -> Dict[str, Any]:
    return {"name": require_name(property_name, "metadata property")}
