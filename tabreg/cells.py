# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Cell classification
===================

Rows coming out of a CSV reader hold a mix of numbers, strings and holes.
Every component that needs to know "is this a number?" goes through
``to_number`` so extraction, summaries and type inference agree.
"""

import enum
import math
import numbers
from typing import Any, Optional


class CellKind(enum.Enum):
    NUMBER = "number"
    TEXT = "text"
    MISSING = "missing"


def is_real(value: Any) -> bool:
    """True for real scalars (python or numpy), excluding bools."""
    if isinstance(value, bool):
        return False
    return isinstance(value, numbers.Real)


def cell_kind(value: Any) -> CellKind:
    if is_real(value):
        return CellKind.MISSING if math.isnan(value) else CellKind.NUMBER
    if isinstance(value, str):
        return CellKind.TEXT if value.strip() else CellKind.MISSING
    return CellKind.MISSING


def is_missing(value: Any) -> bool:
    """Absent, None, NaN or blank string."""
    return cell_kind(value) is CellKind.MISSING


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a cell to a finite float, or None when it is not numeric.

    Numbers pass through, strings are stripped and parsed with float().
    """
    kind = cell_kind(value)
    if kind is CellKind.MISSING:
        return None
    if kind is CellKind.NUMBER:
        x = float(value)
    else:
        try:
            x = float(value.strip())
        except ValueError:
            return None
    return x if math.isfinite(x) else None


def cell_text(value: Any) -> str:
    """
    String form of a cell, used as the bucket key for counts and
    replacement maps. Integral floats print without a trailing ``.0`` so
    that ``3`` and ``3.0`` read back from a CSV share the key ``"3"``.
    """
    if is_real(value):
        x = float(value)
        if math.isfinite(x) and x.is_integer() and abs(x) < 1e21:
            return str(int(x))
        return str(x)
    return str(value)
