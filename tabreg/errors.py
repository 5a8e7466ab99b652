# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by the modelling core.

Everything derives from ``TabregError`` which is itself a ``ValueError``,
so callers can catch the whole family or a single kind.
"""

from typing import Iterable, Optional


class TabregError(ValueError):
    """Base class for all modelling-core failures."""

    default_message = "tabreg error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class InvalidColumn(TabregError):
    """A requested feature or target column is not in the dataset."""

    def __init__(self, columns: Iterable[str], message: Optional[str] = None):
        self.columns = list(columns)
        if message is None:
            message = f"Invalid columns: {', '.join(self.columns)}"
        super().__init__(message)


class InsufficientData(TabregError):
    default_message = "No valid data points found for training"


class SingularSystem(TabregError):
    default_message = (
        "Unable to train model. Check for multicollinearity or insufficient data."
    )


class LengthMismatch(TabregError):
    def __init__(self, left: int, right: int, message: Optional[str] = None):
        self.left = left
        self.right = right
        if message is None:
            message = f"length mismatch: {left} != {right}"
        super().__init__(message)


class EmptyInput(TabregError):
    default_message = "cannot evaluate an empty sequence"
