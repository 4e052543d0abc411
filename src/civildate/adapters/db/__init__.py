"""Database bindings for the date value types."""
