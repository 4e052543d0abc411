"""An optional ``Date``: a date, or an explicit absence of one."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Self

from civildate.domain.date import Date
from civildate.domain.errors import DateParseError, ScanError
from civildate.interfaces.sql import SCAN_SOURCE_TYPES, Scannable, Valuable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NullableDate(Scannable, Valuable):
    """A ``Date`` that may be absent.

    ``NullableDate()`` is the absent value. Absent values serialize as JSON
    ``null`` and bind as SQL NULL.

    Attributes:
        date: The wrapped date, or None when absent.
    """

    date: Date | None = None

    def __post_init__(self) -> None:
        if self.date is not None and not isinstance(self.date, Date):
            raise TypeError(
                f"NullableDate wraps a Date or None, not '{type(self.date).__name__}'."
            )

    @property
    def valid(self) -> bool:
        """True when a date is present."""
        return self.date is not None

    def date_or(self, default: Date) -> Date:
        """Return the wrapped date, or ``default`` when absent."""
        return self.date if self.date is not None else default

    def __str__(self) -> str:
        return str(self.date) if self.date is not None else ""

    # ------------------------------------------------------------------
    # JSON hooks
    # ------------------------------------------------------------------

    def to_json_value(self) -> str | None:
        """Return the canonical text, or None when absent."""
        return self.date.to_json_value() if self.date is not None else None

    @classmethod
    def from_json_value(cls, obj: object) -> Self:
        """Build from a decoded JSON value: ``None`` or a date string."""
        if obj is None:
            return cls()
        return cls(Date.from_json_value(obj))

    def marshal_json(self) -> str:
        """Encode as a JSON string literal or ``null``."""
        return json.dumps(self.to_json_value())

    @classmethod
    def unmarshal_json(cls, data: str | bytes) -> Self:
        """Decode ``null`` or a JSON date string.

        Raises:
            DateParseError: If ``data`` is neither.
        """
        try:
            obj = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DateParseError(data, "not valid JSON") from e
        return cls.from_json_value(obj)

    # ------------------------------------------------------------------
    # Database hooks
    # ------------------------------------------------------------------

    @classmethod
    def scan(cls, src: object) -> Self:
        """Build from a driver value: ``None``, ``datetime`` or ``date``.

        Raises:
            ScanError: For any other source type.
        """
        if src is None:
            return cls()
        if isinstance(src, SCAN_SOURCE_TYPES):
            return cls(Date.scan(src))
        logger.debug("Rejected scan source of type %s", type(src).__name__)
        raise ScanError(cls.__name__, type(src))

    def value(self) -> str | None:
        """Return the canonical text, or None for SQL NULL."""
        return self.date.value() if self.date is not None else None


__all__ = ["NullableDate"]
