"""Manage a named SQLite connection, its tables and its database file."""

__version__ = "0.1.0"
__all__ = ["manager", "demo"]