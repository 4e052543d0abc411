"""Interfaces (application boundary) for civildate.

Defines framework-free contracts (ABCs) implemented by the value types and
consumed by adapters, such as the database scan/value capabilities.

Dependency rule: this package is independent. Do not import from any
`civildate.*` modules.
"""

from .sql import SCAN_SOURCE_TYPES, Scannable, Valuable

__all__ = ["SCAN_SOURCE_TYPES", "Scannable", "Valuable"]
