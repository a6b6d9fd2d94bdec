"""Transient holding area for uploads awaiting a CDN pull."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from threading import Lock

logger = logging.getLogger(__name__)

__all__ = ["UploadStaging"]


def _new_upload_id() -> str:
    return uuid.uuid4().hex


class UploadStaging:
    """Keyed in-memory store of raw upload bytes.

    One instance is shared by every request. Each operation holds the lock for
    a single dict access, so inserts and removals are atomic even if handlers
    run on worker threads.
    """

    def __init__(self, id_factory: Callable[[], str] = _new_upload_id) -> None:
        self._entries: dict[str, bytes] = {}
        self._lock = Lock()
        self._id_factory = id_factory

    def stage(self, payload: bytes) -> str:
        """Store ``payload`` under a fresh identifier and return it."""
        with self._lock:
            upload_id = self._id_factory()
            while upload_id in self._entries:
                upload_id = self._id_factory()
            self._entries[upload_id] = payload
        return upload_id

    def take(self, upload_id: str) -> bytes | None:
        """Return the staged bytes without removing them."""
        with self._lock:
            return self._entries.get(upload_id)

    def release(self, upload_id: str) -> bool:
        """Remove an entry; return False if it was already gone."""
        with self._lock:
            return self._entries.pop(upload_id, None) is not None

    def consume(self, upload_id: str) -> bytes | None:
        """Return and remove the staged bytes in one step."""
        with self._lock:
            return self._entries.pop(upload_id, None)

    @contextmanager
    def staged(self, payload: bytes) -> Iterator[str]:
        """Stage ``payload`` for the duration of a block.

        The entry is released on every exit path, so a pull that never arrives
        or an upload that fails cannot leave bytes behind.
        """
        upload_id = self.stage(payload)
        try:
            yield upload_id
        finally:
            if self.release(upload_id):
                logger.debug("Released unclaimed upload %s", upload_id)

    def __contains__(self, upload_id: object) -> bool:
        with self._lock:
            return upload_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
