# cephmon/model/types.py
"""Sized integer types for reply fields; the decoder enforces their ranges."""
from __future__ import annotations

from typing import Dict, NewType, Tuple

U8 = NewType("U8", int)
U64 = NewType("U64", int)
I64 = NewType("I64", int)

INT_BOUNDS: Dict[object, Tuple[int, int]] = {
    U8: (0, 2**8 - 1),
    U64: (0, 2**64 - 1),
    I64: (-(2**63), 2**63 - 1),
}
