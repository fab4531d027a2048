"""Change detection and routing for the watch loop."""

from __future__ import annotations

from .router import ChangeRouter
from .source import ChangeBatch, ChangeKind, ChangeSource, PollingChangeSource, coalesce

__all__ = [
    "ChangeBatch",
    "ChangeKind",
    "ChangeRouter",
    "ChangeSource",
    "PollingChangeSource",
    "coalesce",
]
