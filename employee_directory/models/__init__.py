"""SQLAlchemy models used for snapshot persistence."""
from .base import Base
from .snapshot import SnapshotEntry

__all__ = ["Base", "SnapshotEntry"]
