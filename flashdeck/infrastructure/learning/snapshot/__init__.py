"""Local persistence of the library state."""

from .json_snapshot_repository import JsonSnapshotRepository

__all__ = ["JsonSnapshotRepository"]
