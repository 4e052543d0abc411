"""Domain-layer error definitions."""

# ============================================================================
#                           General date errors
# ============================================================================


class DateError(Exception):
    """Base class for civildate errors."""


class DateRangeError(DateError, OverflowError):
    """Raised when a date falls outside the supported years 1..9999."""

    def __init__(self, year: int, month: int, day: int) -> None:
        super().__init__(
            f"Date ({year}, {month}, {day}) is outside the supported range "
            "0001-01-01..9999-12-31."
        )
        self.year = year
        self.month = month
        self.day = day


class TimezoneNotFoundError(DateError, LookupError):
    """Raised when a timezone name cannot be resolved."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown timezone '{name}'.")
        self.name = name


# ============================================================================
#                   Parsing and serialization errors
# ============================================================================


class DateParseError(DateError, ValueError):
    """Raised when text is not a valid ``YYYY-MM-DD`` date."""

    def __init__(self, text: object, reason: str) -> None:
        super().__init__(f"Cannot parse {text!r} as a date: {reason}.")
        self.text = text
        self.reason = reason


class InvalidDateLiteralError(DateError, RuntimeError):
    """Raised by ``must_*`` constructors when a literal date is invalid."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid date literal {text!r}.")
        self.text = text


class ScanError(DateError, TypeError):
    """Raised when a database value has a shape that cannot become a date."""

    def __init__(self, target: str, source_type: type) -> None:
        super().__init__(
            f"Cannot scan value of type '{source_type.__name__}' into {target}."
        )
        self.target = target
        self.source_type = source_type
