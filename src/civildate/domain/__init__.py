"""Domain layer for civildate.

Contains the date value types and the calendar rules they follow. This package
is deliberately technology-agnostic: no JSON encoders, SQL types or CLI code.

Dependency rule: do not import from `civildate.adapters` or
`civildate.entrypoints`.
"""
