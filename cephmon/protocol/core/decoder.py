# cephmon/protocol/core/decoder.py
from __future__ import annotations

import dataclasses
import json
import re
import typing
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Optional, Union
from uuid import UUID

from cephmon.model.types import INT_BOUNDS

NoneType = type(None)

_UINT_RE = re.compile(r"[0-9]+")

U64_MAX = 2**64 - 1


class ModelDecodeError(ValueError):
    """Structured reply did not match the expected model; `path` locates the bad value."""

    def __init__(self, path: str, problem: str):
        super().__init__(f"{path or '<root>'}: {problem}")
        self.path = path
        self.problem = problem


def first_line(text: str) -> Optional[str]:
    """
    First line of a reply, or None when the text is empty.

    Lines end at LF only and one trailing CR is dropped. Other Unicode line
    separators may appear unescaped inside JSON strings and raw values.
    """
    if not text:
        return None
    line = text.split("\n", 1)[0]
    return line[:-1] if line.endswith("\r") else line


# ---------------- Scalar / raw ----------------
def decode_raw(line: str, target: Any = None) -> str:
    return line


def decode_uint(line: str, target: Any = None) -> int:
    s = line.strip()
    if not _UINT_RE.fullmatch(s):
        raise ValueError(f"expected an unsigned integer, got {line!r}")
    value = int(s)
    if value > U64_MAX:
        raise ValueError(f"integer out of range (max {U64_MAX}): {s}")
    return value


def decode_json(line: str, target: Any) -> Any:
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON: {e}") from e
    return decode_value(target, data)


DECODERS = {
    "json": decode_json,
    "int": decode_uint,
    "raw": decode_raw,
}


# ---------------- Structured ----------------
@lru_cache(maxsize=None)
def _hints(cls: type) -> Dict[str, Any]:
    return typing.get_type_hints(cls)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or str(tp)


def decode_value(tp: Any, value: Any, path: str = "") -> Any:
    """
    Decode plain JSON data into `tp`.

    Supports dataclasses (recursively), List[X], Dict[str, X], Optional[X],
    wire-token enums, UUID, str, int, the range-checked U8/U64/I64, float
    and bool. Unknown JSON keys are ignored; missing keys fall back to the
    field default or fail.
    """
    origin = typing.get_origin(tp)

    if origin is Union:
        args = [a for a in typing.get_args(tp) if a is not NoneType]
        if value is None:
            return None
        if len(args) != 1:
            raise TypeError(f"Unsupported union type {tp!r}")
        return decode_value(args[0], value, path)

    if origin is list:
        (item_tp,) = typing.get_args(tp)
        if not isinstance(value, list):
            raise ModelDecodeError(path, f"expected list, got {type(value).__name__}")
        return [decode_value(item_tp, v, f"{path}[{i}]") for i, v in enumerate(value)]

    if origin is dict:
        key_tp, val_tp = typing.get_args(tp)
        if key_tp is not str:
            raise TypeError(f"Only str-keyed dicts are supported, got {tp!r}")
        if not isinstance(value, dict):
            raise ModelDecodeError(path, f"expected object, got {type(value).__name__}")
        return {k: decode_value(val_tp, v, f"{path}.{k}" if path else k) for k, v in value.items()}

    if dataclasses.is_dataclass(tp):
        return _decode_dataclass(tp, value, path)

    if isinstance(tp, type) and issubclass(tp, Enum):
        try:
            return tp(value)
        except ValueError:
            raise ModelDecodeError(path, f"unknown {tp.__name__} value {value!r}") from None

    if tp is UUID:
        if not isinstance(value, str):
            raise ModelDecodeError(path, f"expected UUID string, got {type(value).__name__}")
        try:
            return UUID(value)
        except ValueError:
            raise ModelDecodeError(path, f"invalid UUID {value!r}") from None

    if tp is bool:
        if not isinstance(value, bool):
            raise ModelDecodeError(path, f"expected bool, got {type(value).__name__}")
        return value

    bounds = INT_BOUNDS.get(tp)
    if bounds is not None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ModelDecodeError(path, f"expected int, got {type(value).__name__}")
        lo, hi = bounds
        if not lo <= value <= hi:
            raise ModelDecodeError(path, f"{value} out of range for {tp.__name__} [{lo}, {hi}]")
        return value

    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ModelDecodeError(path, f"expected int, got {type(value).__name__}")
        return value

    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ModelDecodeError(path, f"expected number, got {type(value).__name__}")
        return float(value)

    if tp is str:
        if not isinstance(value, str):
            raise ModelDecodeError(path, f"expected str, got {type(value).__name__}")
        return value

    raise TypeError(f"Unsupported model type {_type_name(tp)}")


def _decode_dataclass(cls: type, value: Any, path: str) -> Any:
    if not isinstance(value, dict):
        raise ModelDecodeError(path, f"expected object for {cls.__name__}, got {type(value).__name__}")

    hints = _hints(cls)
    kwargs: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        key = f.metadata.get("key", f.name)
        sub = f"{path}.{key}" if path else key
        if key in value:
            kwargs[f.name] = decode_value(hints[f.name], value[key], sub)
        elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
            raise ModelDecodeError(sub, "missing required field")
    return cls(**kwargs)
