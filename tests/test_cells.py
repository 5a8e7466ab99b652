# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np
import pytest

from tabreg.cells import CellKind, cell_kind, cell_text, is_missing, to_number


@pytest.mark.parametrize(
    "value,kind",
    [
        (1, CellKind.NUMBER),
        (2.5, CellKind.NUMBER),
        (np.float64(3.0), CellKind.NUMBER),
        (np.int64(4), CellKind.NUMBER),
        ("abc", CellKind.TEXT),
        ("12", CellKind.TEXT),
        ("", CellKind.MISSING),
        ("   ", CellKind.MISSING),
        (None, CellKind.MISSING),
        (math.nan, CellKind.MISSING),
        (True, CellKind.MISSING),
        ([1, 2], CellKind.MISSING),
    ],
)
def test_cell_kind(value, kind):
    assert cell_kind(value) is kind


@pytest.mark.parametrize(
    "value,expected",
    [
        (3, 3.0),
        ("3", 3.0),
        (" -1.5 ", -1.5),
        ("1e3", 1000.0),
        ("abc", None),
        ("12kg", None),
        ("", None),
        (None, None),
        (math.nan, None),
        ("inf", None),
        (False, None),
    ],
)
def test_to_number(value, expected):
    assert to_number(value) == expected


def test_is_missing():
    assert is_missing(None)
    assert is_missing("")
    assert not is_missing(0)
    assert not is_missing("0")


@pytest.mark.parametrize(
    "value,text",
    [(1, "1"), (1.0, "1"), (2.5, "2.5"), ("a", "a"), (None, "None"), (np.int64(7), "7")],
)
def test_cell_text(value, text):
    assert cell_text(value) == text
