"""Output path derivation for compiled components."""

from __future__ import annotations

from pathlib import PurePath, PurePosixPath
from typing import Optional, Sequence

from ..fragments import KIND_SEGMENTS, PRIMARY_EXTENSION, pluralize

NAME_SEPARATOR = "--"


def component_name(directory: str | PurePath, roots: Sequence[str] = ()) -> str:
    """Fold a component directory into its logical name.

    Example: ``_components/sections/header/main`` -> ``header--main``.
    """
    segments = _strip_root(PurePath(directory).parts, roots)
    segments = [segment for segment in segments if segment not in KIND_SEGMENTS]
    return NAME_SEPARATOR.join(segments)


def resolve_output_path(
    directory: str | PurePath, kind: str, roots: Sequence[str] = ()
) -> Optional[PurePosixPath]:
    """Return ``<kind>s/<name>.liquid`` or None when no name can be derived."""
    name = component_name(directory, roots)
    if not name:
        return None
    return PurePosixPath(pluralize(kind)) / f"{name}{PRIMARY_EXTENSION}"


def _strip_root(parts: Sequence[str], roots: Sequence[str]) -> list[str]:
    parts = [part for part in parts if part not in ("", ".")]
    for root in sorted(roots, key=lambda item: len(PurePath(item).parts), reverse=True):
        root_parts = [part for part in PurePath(root).parts if part not in ("", ".")]
        if root_parts and parts[: len(root_parts)] == root_parts:
            return parts[len(root_parts):]
    # Unknown root: the first segment is the components folder.
    return parts[1:]


__all__ = ["NAME_SEPARATOR", "component_name", "resolve_output_path"]
