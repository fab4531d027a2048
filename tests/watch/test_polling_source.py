"""Tests for theme_builder.watch.source."""

from __future__ import annotations

import os

from theme_builder.watch.source import ChangeKind, PollingChangeSource, coalesce
from tests._fixtures.component_tree import ComponentTree


def _bump_mtime(path) -> None:
    stat = os.stat(path)
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 5_000_000_000))


def test_poll_reports_created_updated_and_deleted(tree: ComponentTree) -> None:
    tree.write({"_components/a/block.liquid": "a", "_components/b/block.liquid": "b"})
    source = PollingChangeSource(root=tree.path())
    source.prime(["_components"])

    tree.write({"_components/c/block.liquid": "c"})
    _bump_mtime(tree.path("_components/a/block.liquid"))
    tree.path("_components/b/block.liquid").unlink()

    changes = source.poll()

    assert changes == {
        str(tree.path("_components/c/block.liquid")): ChangeKind.CREATED,
        str(tree.path("_components/a/block.liquid")): ChangeKind.UPDATED,
        str(tree.path("_components/b/block.liquid")): ChangeKind.DELETED,
    }
    assert source.poll() == {}


def test_coalesce_keeps_final_path_state() -> None:
    pending = {"a": ChangeKind.CREATED, "b": ChangeKind.CREATED, "c": ChangeKind.DELETED, "d": ChangeKind.UPDATED}

    merged = coalesce(
        pending,
        {"a": ChangeKind.UPDATED, "b": ChangeKind.DELETED, "c": ChangeKind.CREATED, "d": ChangeKind.DELETED},
    )

    assert merged == {"a": ChangeKind.CREATED, "c": ChangeKind.UPDATED, "d": ChangeKind.DELETED}
    assert pending["b"] is ChangeKind.CREATED


def test_subscribe_delivers_one_batch_after_quiet_interval(tree: ComponentTree) -> None:
    tree.path("_components").mkdir()
    batches = []
    ticks = []

    def sleep(_interval: float) -> None:
        ticks.append(len(ticks))
        tick = len(ticks)
        if tick == 1:
            tree.write({"_components/a/block.liquid": "a"})
        elif tick == 2:
            tree.write({"_components/a/schema.json": "{}"})
        elif tick > 4:
            source.stop()

    def callback(batch) -> None:
        batches.append((len(ticks), batch))

    source = PollingChangeSource(0.01, root=tree.path(), sleep=sleep)
    source.subscribe(["_components"], callback)

    assert batches == [
        (
            3,
            {
                str(tree.path("_components/a/block.liquid")): ChangeKind.CREATED,
                str(tree.path("_components/a/schema.json")): ChangeKind.CREATED,
            },
        )
    ]


def test_subscribe_survives_failing_callback(tree: ComponentTree) -> None:
    tree.path("_components").mkdir()
    calls = []

    def sleep(_interval: float) -> None:
        calls.append("tick")
        if len(calls) == 1:
            tree.write({"_components/a/block.liquid": "a"})
        elif len(calls) == 3:
            tree.write({"_components/b/block.liquid": "b"})
        elif len(calls) > 5:
            source.stop()

    delivered = []

    def callback(batch) -> None:
        delivered.append(batch)
        raise RuntimeError("boom")

    source = PollingChangeSource(root=tree.path(), sleep=sleep)
    source.subscribe(["_components"], callback)

    assert len(delivered) == 2
