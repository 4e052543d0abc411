"""Interfaces for binding values to relational database scalars."""

from __future__ import annotations

import abc
from datetime import date, datetime
from typing import Self

# pylint: disable=too-few-public-methods

#: Python types a database driver may hand to a ``scan`` hook for a DATE column.
SCAN_SOURCE_TYPES: tuple[type, ...] = (datetime, date)


class Scannable(abc.ABC):
    """Contract for a value that can be built from a driver-supplied scalar."""

    @classmethod
    @abc.abstractmethod
    def scan(cls, src: object) -> Self:
        """Build an instance from ``src``.

        Raises:
            ScanError: If ``src`` is not one of the supported source shapes.
        """


class Valuable(abc.ABC):
    """Contract for a value that can be handed to a database driver."""

    @abc.abstractmethod
    def value(self) -> str | None:
        """Return the driver-level scalar, or ``None`` for SQL NULL."""
