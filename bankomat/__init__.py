"""A model cash machine on the console, backed by an SQLite user database."""

__version__ = "1.0.0"

__all__ = ["auth", "cli", "database", "teller"]