"""
Snapshot management for the API.

Each application owns one SnapshotStore (``app.state.store``) created by
create_app() from the APP_DATA_PATH setting or an explicit override.  Full
page loads call refresh() to re-read the data source; API requests compute
over whatever snapshot is current.

Usage in a route::

    from api.datastore import get_snapshot
    from fastapi import Depends

    @router.get("/example")
    def example(snapshot=Depends(get_snapshot)):
        ...
"""

import threading
from typing import Any, Callable

from fastapi import Depends, Request

from medialog.loader import Snapshot, load_snapshot
from utils.strings import collation_key_for


class DataUnavailableError(Exception):
    """Raised by request dependencies while the snapshot is degraded."""

    def __init__(self, snapshot: Snapshot) -> None:
        super().__init__(snapshot.error or "data unavailable")
        self.snapshot = snapshot


class SnapshotStore:
    """Holds the current snapshot; replacing it is a single reference swap."""

    def __init__(self, source: str, timeout: float = 10.0,
                 collation_locale: str | None = None) -> None:
        self.source = source
        self.timeout = timeout
        self.collation_locale = collation_locale
        self._snapshot: Snapshot | None = None
        self._lock = threading.Lock()

    def refresh(self) -> Snapshot:
        """Re-read the source and replace the current snapshot."""
        snapshot = load_snapshot(self.source, self.timeout)
        with self._lock:
            self._snapshot = snapshot
        return snapshot

    def current(self) -> Snapshot:
        """Return the current snapshot, loading it on first use."""
        snapshot = self._snapshot
        if snapshot is None:
            return self.refresh()
        return snapshot

    @property
    def collation_key(self) -> Callable[[str], Any]:
        """Sort key for tag and status option lists."""
        return collation_key_for(self.collation_locale)


def get_store(request: Request) -> SnapshotStore:
    """FastAPI dependency: the application's snapshot store."""
    return request.app.state.store


def get_snapshot(store: SnapshotStore = Depends(get_store)) -> Snapshot:
    """FastAPI dependency: the current snapshot, or 503 when degraded.

    The DataUnavailableError handler registered in create_app() turns the
    exception into a JSON 503 response carrying the user-facing message.
    """
    snapshot = store.current()
    if not snapshot.available:
        raise DataUnavailableError(snapshot)
    return snapshot
