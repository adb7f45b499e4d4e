"""Outbound sync to the external record store."""

from .sync_outbox import StoreOperation, SyncOutbox

__all__ = ["StoreOperation", "SyncOutbox"]
