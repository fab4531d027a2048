"""Fragment file vocabulary and path helpers for component directories."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Dict, Sequence, Tuple

PRIMARY_KINDS: Tuple[str, ...] = ("section", "block", "snippet")
PRIMARY_EXTENSION = ".liquid"

# Order here is the emission order used by the aggregator.
SIDECAR_FILES: Dict[str, str] = {
    "comment": "comment.txt",
    "doc": "doc.txt",
    "schema": "schema.json",
    "stylesheet": "style.css",
    "javascript": "index.js",
    "controller": "controller.js",
}

CONTROLLER_FILENAME = SIDECAR_FILES["controller"]


def pluralize(kind: str) -> str:
    """Return the output folder name for a primary kind."""
    return f"{kind}s"


def primary_filename(kind: str) -> str:
    return f"{kind}{PRIMARY_EXTENSION}"


PRIMARY_FILES: Tuple[str, ...] = tuple(primary_filename(kind) for kind in PRIMARY_KINDS)
KNOWN_FILES = frozenset(PRIMARY_FILES) | frozenset(SIDECAR_FILES.values())
KIND_SEGMENTS = frozenset(PRIMARY_KINDS) | frozenset(pluralize(kind) for kind in PRIMARY_KINDS)


def is_known_fragment(file_name: str | PurePath) -> bool:
    """Return True when the base name belongs to the fragment vocabulary."""
    return PurePath(file_name).name in KNOWN_FILES


def component_dir(path: str | PurePath) -> Path:
    """Return the component directory that owns a fragment file."""
    return Path(path).parent


def relativize(path: str | PurePath, root: Path) -> Path:
    """Strip the working directory prefix from an absolute path.

    Paths outside ``root`` (and already-relative paths) come back unchanged.
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        return candidate
    try:
        return candidate.relative_to(root)
    except ValueError:
        return candidate


def is_under(path: PurePath, roots: Sequence[str]) -> bool:
    """Return True when ``path`` sits inside one of the watched roots."""
    parts = path.parts
    for root in roots:
        root_parts = _root_parts(root)
        if root_parts and parts[: len(root_parts)] == root_parts:
            return True
    return False


def _root_parts(root: str) -> Tuple[str, ...]:
    return tuple(part for part in PurePath(root).parts if part not in ("", "."))


__all__ = [
    "CONTROLLER_FILENAME",
    "KIND_SEGMENTS",
    "KNOWN_FILES",
    "PRIMARY_EXTENSION",
    "PRIMARY_FILES",
    "PRIMARY_KINDS",
    "SIDECAR_FILES",
    "component_dir",
    "is_known_fragment",
    "is_under",
    "pluralize",
    "primary_filename",
    "relativize",
]
