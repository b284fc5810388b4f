"""Employee directory: a reactive in-memory record store with validation,
pagination, localisation and snapshot persistence."""

__version__ = "0.1.0"
