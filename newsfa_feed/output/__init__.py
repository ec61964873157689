"""Snapshot output."""

from .snapshot import write_snapshot

__all__ = ["write_snapshot"]
