"""Adapters (infrastructure) for civildate.

Bind the domain value types to serialization formats and database drivers:
JSON encoding, SQLAlchemy column types and DB-API adapters.

Dependency rule: may import `civildate.domain`; the domain must not import
this package.
"""
