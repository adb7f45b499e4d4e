"""
Background outbox draining writes to the external record store.

Local state is the source of truth. Use cases enqueue an operation after
they mutate state and return immediately; a single asyncio worker applies
the operations in order, retrying failures a bounded number of times.
A failure that exhausts its retries is logged and recorded on the sync
status, and local state is never rolled back.

Use cases run in the request threadpool, so enqueueing is thread-safe:
operations coming from another thread are handed to the worker's loop.
"""

import asyncio
import threading
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

import structlog

from flashdeck.application.learning.protocols.record_store import RecordStoreProtocol
from flashdeck.application.learning.use_cases.dtos import SyncStatus
from flashdeck.domain.common.clock import Clock, utc_now
from flashdeck.domain.learning.entities import Deck, Flashcard
from flashdeck.exceptions import FlashdeckError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StoreOperation:
    """One pending store call with its arguments captured at enqueue time."""

    name: str
    args: tuple[Any, ...]
    # ("deck" | "card", id) for every record the operation writes
    keys: tuple[tuple[str, str], ...] = ()


class SyncOutbox:
    """
    Queue of pending record store writes.

    Operations enqueued before ``start`` are buffered and handed to the
    worker when it starts. ``stop`` drains what is queued, then stops.
    Ids touched by an operation stay "unsynced" until the store confirms
    a write for them.
    """

    def __init__(
        self,
        record_store: RecordStoreProtocol,
        owner_id: str,
        status: SyncStatus,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        enabled: bool = True,
        clock: Clock = utc_now,
    ) -> None:
        self.record_store = record_store
        self.owner_id = owner_id
        self.status = status
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.enabled = enabled
        self.clock = clock
        self._lock = threading.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._queue: asyncio.Queue[StoreOperation] | None = None
        self._backlog: list[StoreOperation] = []
        self._worker: asyncio.Task[None] | None = None
        self._in_flight: Counter[tuple[str, str]] = Counter()
        self._failed: set[tuple[str, str]] = set()

    @property
    def running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    # Enqueueing

    def _enqueue(self, operation: StoreOperation) -> None:
        if not self.enabled:
            return
        with self._lock:
            self._in_flight.update(operation.keys)
            self.status.pending += 1
            if self._queue is None:
                self._backlog.append(operation)
            else:
                self._put(operation)
        logger.debug("sync_enqueued", operation=operation.name, pending=self.status.pending)

    def _put(self, operation: StoreOperation) -> None:
        assert self._queue is not None and self._loop is not None
        try:
            on_loop = asyncio.get_running_loop() is self._loop
        except RuntimeError:
            on_loop = False
        if on_loop:
            self._queue.put_nowait(operation)
        else:
            self._loop.call_soon_threadsafe(self._queue.put_nowait, operation)

    def upsert_deck(self, deck: Deck) -> None:
        self._enqueue(StoreOperation("upsert_deck", (replace(deck),), (("deck", deck.id.value),)))

    def upsert_card(self, card: Flashcard) -> None:
        self._enqueue(StoreOperation("upsert_card", (replace(card),), (("card", card.id.value),)))

    def delete_deck(self, deck_id: str) -> None:
        self._enqueue(StoreOperation("delete_deck", (deck_id,), (("deck", deck_id),)))

    def delete_card(self, card_id: str) -> None:
        self._enqueue(StoreOperation("delete_card", (card_id,), (("card", card_id),)))

    def sync_all(self, decks: Sequence[Deck], cards: Sequence[Flashcard]) -> None:
        snapshot = ([replace(d) for d in decks], [replace(c) for c in cards])
        keys = tuple(("deck", d.id.value) for d in decks) + tuple(
            ("card", c.id.value) for c in cards
        )
        self._enqueue(StoreOperation("sync_all", snapshot, keys))

    def unsynced_ids(self) -> tuple[set[str], set[str]]:
        """Ids still queued, or whose last write was dropped after its retries."""
        with self._lock:
            keys = set(self._in_flight) | self._failed
        return (
            {record_id for kind, record_id in keys if kind == "deck"},
            {record_id for kind, record_id in keys if kind == "card"},
        )

    # Worker lifecycle

    async def start(self) -> None:
        """Start the worker on the running loop and flush the backlog."""
        if self.running:
            return
        with self._lock:
            self._loop = asyncio.get_running_loop()
            self._queue = asyncio.Queue()
            for operation in self._backlog:
                self._queue.put_nowait(operation)
            self._backlog.clear()
        self._worker = asyncio.create_task(self._run(), name="flashdeck-sync-outbox")
        logger.info("sync_outbox_started", owner_id=self.owner_id, enabled=self.enabled)

    async def drain(self) -> None:
        """Wait until every queued operation has been attempted."""
        if self._queue is not None and self.running:
            # Let hand-offs from other threads land in the queue first
            await asyncio.sleep(0)
            await self._queue.join()

    async def stop(self) -> None:
        """Drain the queue and stop the worker."""
        if self._worker is None:
            return
        await self.drain()
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None
        logger.info("sync_outbox_stopped", pending=self.status.pending)

    async def _run(self) -> None:
        assert self._queue is not None
        while True:
            operation = await self._queue.get()
            applied = False
            try:
                applied = await self._execute(operation)
            except Exception as e:
                # Unexpected store failures must not kill the worker
                self.status.mark_failed(str(e))
                logger.exception("sync_worker_error", operation=operation.name)
            finally:
                self._settle(operation, applied)
                self._queue.task_done()

    def _settle(self, operation: StoreOperation, applied: bool) -> None:
        with self._lock:
            self._in_flight.subtract(operation.keys)
            self._in_flight = +self._in_flight
            if applied:
                self._failed.difference_update(operation.keys)
            else:
                self._failed.update(operation.keys)
            self.status.pending = max(0, self.status.pending - 1)

    async def _execute(self, operation: StoreOperation) -> bool:
        call = getattr(self.record_store, operation.name)
        self.status.mark_syncing()

        for attempt in range(self.max_retries + 1):
            try:
                await call(self.owner_id, *operation.args)
            except FlashdeckError as e:
                if attempt < self.max_retries:
                    logger.warning(
                        "sync_retrying",
                        operation=operation.name,
                        attempt=attempt + 1,
                        error=e.message,
                    )
                    await asyncio.sleep(self.retry_delay * (attempt + 1))
                    continue
                self.status.mark_failed(e.message)
                logger.error(
                    "sync_dropped",
                    operation=operation.name,
                    attempts=attempt + 1,
                    error=e.message,
                )
                return False
            else:
                self.status.mark_synced(self.clock())
                logger.debug("sync_applied", operation=operation.name)
                return True
        return False
