"""Change-notification sources feeding the watch loop.

The orchestrator only depends on :class:`ChangeSource`; the polling adapter
below is the default implementation.
"""

from __future__ import annotations

import enum
import os
import time
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Protocol, Sequence, Tuple

from ..logging import get_logger


class ChangeKind(str, enum.Enum):
    """What happened to a path between two observations."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


ChangeBatch = Dict[str, ChangeKind]
BatchCallback = Callable[[ChangeBatch], None]

_Stamp = Tuple[int, int]


class ChangeSource(Protocol):
    """Delivers coalesced change batches for a set of watched roots."""

    def subscribe(self, roots: Sequence[str], callback: BatchCallback) -> None:
        """Block, calling ``callback`` once per batch until :meth:`stop` is called."""

    def stop(self) -> None:
        """End the subscription after the current batch."""


def coalesce(pending: ChangeBatch, changes: Mapping[str, ChangeKind]) -> ChangeBatch:
    """Fold ``changes`` into ``pending`` keyed by the final state of each path."""
    merged = dict(pending)
    for path, kind in changes.items():
        previous = merged.get(path)
        if previous is None:
            merged[path] = kind
        elif previous is ChangeKind.CREATED and kind is ChangeKind.DELETED:
            del merged[path]
        elif previous is ChangeKind.CREATED:
            continue
        elif previous is ChangeKind.DELETED and kind is ChangeKind.CREATED:
            merged[path] = ChangeKind.UPDATED
        else:
            merged[path] = kind
    return merged


class PollingChangeSource:
    """Detects changes by diffing mtime snapshots of the watched roots.

    Changes keep accumulating while consecutive polls see activity; a batch is
    delivered after one quiet interval.
    """

    def __init__(
        self,
        interval: float = 0.5,
        *,
        root: Path | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interval = interval
        self.root = (root or Path.cwd()).resolve()
        self._sleep = sleep
        self._roots: list[Path] = []
        self._previous: Dict[str, _Stamp] = {}
        self._stopped = False
        self.logger = get_logger("watch")

    def prime(self, roots: Sequence[str]) -> None:
        """Record the baseline snapshot that later polls are compared against."""
        self._roots = [(self.root / watched).resolve() for watched in roots]
        self._previous = self._snapshot()

    def poll(self) -> ChangeBatch:
        """Return the changes since the previous poll (or :meth:`prime`)."""
        current = self._snapshot()
        changes: ChangeBatch = {}
        for path, stamp in current.items():
            before = self._previous.get(path)
            if before is None:
                changes[path] = ChangeKind.CREATED
            elif before != stamp:
                changes[path] = ChangeKind.UPDATED
        for path in self._previous.keys() - current.keys():
            changes[path] = ChangeKind.DELETED
        self._previous = current
        return changes

    def subscribe(self, roots: Sequence[str], callback: BatchCallback) -> None:
        self._stopped = False
        self.prime(roots)
        pending: ChangeBatch = {}
        while not self._stopped:
            self._sleep(self.interval)
            changes = self.poll()
            if changes:
                pending = coalesce(pending, changes)
                continue
            if not pending:
                continue
            batch, pending = pending, {}
            try:
                callback(batch)
            except Exception:
                self.logger.exception("Change handler failed for %d path(s)", len(batch))

    def stop(self) -> None:
        self._stopped = True

    def _snapshot(self) -> Dict[str, _Stamp]:
        stamps: Dict[str, _Stamp] = {}
        for watched in self._roots:
            if not watched.is_dir():
                continue
            for dirpath, _dirnames, filenames in os.walk(watched):
                for filename in filenames:
                    path = os.path.join(dirpath, filename)
                    stamp = _stat(path)
                    if stamp is not None:
                        stamps[path] = stamp
        return stamps


def _stat(path: str) -> Optional[_Stamp]:
    try:
        result = os.stat(path)
    except OSError:
        # Removed between the directory listing and the stat call.
        return None
    return result.st_mtime_ns, result.st_size


__all__ = [
    "BatchCallback",
    "ChangeBatch",
    "ChangeKind",
    "ChangeSource",
    "PollingChangeSource",
    "coalesce",
]
