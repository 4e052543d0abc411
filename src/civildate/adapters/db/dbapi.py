"""DB-API bindings for the standard-library ``sqlite3`` driver.

``register_sqlite_adapters`` lets ``Date`` and ``NullableDate`` be passed
directly as query parameters (they bind via their ``value`` hooks) and
registers a ``CIVILDATE`` converter so columns declared with that type come
back as ``Date`` when the connection uses ``detect_types``.
"""

from __future__ import annotations

import logging
import sqlite3

from civildate.domain.date import Date
from civildate.domain.nullable import NullableDate

logger = logging.getLogger(__name__)

#: Declared column type picked up by ``sqlite3.PARSE_DECLTYPES``.
SQLITE_DECLTYPE = "CIVILDATE"


def _convert(raw: bytes) -> Date:
    return Date.from_string(raw.decode("ascii"))


def register_sqlite_adapters() -> None:
    """Register adapters and the ``CIVILDATE`` converter with ``sqlite3``.

    Registration is process-wide and idempotent.
    """
    sqlite3.register_adapter(Date, Date.value)
    sqlite3.register_adapter(NullableDate, NullableDate.value)
    sqlite3.register_converter(SQLITE_DECLTYPE, _convert)
    logger.debug("Registered sqlite3 adapters for Date and NullableDate")


__all__ = ["SQLITE_DECLTYPE", "register_sqlite_adapters"]
