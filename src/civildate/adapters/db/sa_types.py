"""Custom SQLAlchemy types for civildate.

These types store the date value types in a native ``DATE`` column while
preserving clear Python-side types for tooling and auto-generated API docs.
Values read back from the driver pass through the types' ``scan`` hooks.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from sqlalchemy.types import Date as SADate
from sqlalchemy.types import TypeDecorator

from civildate.domain.date import Date
from civildate.domain.nullable import NullableDate

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect

__all__ = ["CivilDate", "NullableCivilDate"]


class CivilDate(TypeDecorator[Date]):  # pylint: disable=too-many-ancestors
    """A ``DATE`` column holding ``Date`` values.

    SQL NULL maps to ``None``; use ``NullableCivilDate`` to get
    ``NullableDate()`` instead.
    """

    impl = SADate()
    cache_ok = True

    def process_bind_param(self, value: Date | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        return value.to_pydate()

    def process_result_value(self, value: Any, dialect: Dialect) -> Date | None:
        if value is None:
            return None
        return Date.scan(value)

    def process_literal_param(self, value: Date | None, dialect: Dialect) -> Any:
        return self.process_bind_param(value, dialect)

    @property
    def python_type(self) -> type[Date]:
        return Date


class NullableCivilDate(TypeDecorator[NullableDate]):  # pylint: disable=too-many-ancestors
    """A nullable ``DATE`` column holding ``NullableDate`` values.

    Absent values (and plain ``None``) bind as SQL NULL; SQL NULL reads back
    as ``NullableDate()``.
    """

    impl = SADate()
    cache_ok = True

    def process_bind_param(
        self, value: NullableDate | None, dialect: Dialect
    ) -> date | None:
        if value is None or value.date is None:
            return None
        return value.date.to_pydate()

    def process_result_value(self, value: Any, dialect: Dialect) -> NullableDate:
        return NullableDate.scan(value)

    def process_literal_param(
        self, value: NullableDate | None, dialect: Dialect
    ) -> Any:
        return self.process_bind_param(value, dialect)

    @property
    def python_type(self) -> type[NullableDate]:
        return NullableDate
