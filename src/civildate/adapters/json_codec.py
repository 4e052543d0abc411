"""JSON encoding for the date value types.

``json`` only knows how to encode builtin types; ``DateJSONEncoder`` teaches
it about ``Date`` (a string in ``YYYY-MM-DD`` form) and ``NullableDate`` (that
string, or ``null`` when absent). Decoding stays with the value types
themselves (``Date.from_json_value`` / ``NullableDate.from_json_value``),
since a decoded string carries no hint of which type it should become.
"""

from __future__ import annotations

import json
from typing import Any

from civildate.domain.date import Date
from civildate.domain.nullable import NullableDate

COMPACT_SEPARATORS = (",", ":")


class DateJSONEncoder(json.JSONEncoder):
    """JSON encoder aware of ``Date`` and ``NullableDate``."""

    def default(self, o: Any) -> Any:
        if isinstance(o, (Date, NullableDate)):
            return o.to_json_value()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize ``obj`` to compact JSON using ``DateJSONEncoder``.

    Example:
        >>> dumps({"d": NullableDate()})
        '{"d":null}'
    """
    kwargs.setdefault("separators", COMPACT_SEPARATORS)
    return json.dumps(obj, cls=DateJSONEncoder, **kwargs)


__all__ = ["DateJSONEncoder", "dumps"]
