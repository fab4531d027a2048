"""Component directory validation."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import List, Sequence, Tuple

from ..fragments import PRIMARY_EXTENSION, PRIMARY_KINDS, primary_filename
from .naming import resolve_output_path


class ComponentError(RuntimeError):
    """Base class for conditions that make a fragment file uncompilable."""

    def __init__(self, message: str, path: PurePath) -> None:
        super().__init__(message)
        self.path = path


class UnsupportedFragment(ComponentError):
    """Raised when a file name is outside the fragment vocabulary."""

    def __init__(self, path: PurePath) -> None:
        super().__init__(f"Skipping unsupported file: {path.as_posix()}", path)


class NoPrimaryFragment(ComponentError):
    """Raised when a component directory holds no primary Liquid file."""

    def __init__(self, directory: PurePath) -> None:
        super().__init__(f"No liquid file found in {directory.as_posix()}", directory)


class AmbiguousPrimaryFragment(ComponentError):
    """Raised when a component directory holds more than one primary Liquid file."""

    def __init__(self, directory: PurePath, candidates: Sequence[PurePath]) -> None:
        super().__init__(f"Multiple liquid files found in {directory.as_posix()}", directory)
        self.candidates = list(candidates)


class UnnameableComponent(ComponentError):
    """Raised when no output name can be derived for a component."""

    def __init__(self, path: PurePath) -> None:
        super().__init__(
            f"Invalid file name for file: {path.as_posix()}\n"
            "Probably because the file is directly under the components folder.",
            path,
        )


def find_primary_fragments(directory: Path, *, root: Path | None = None) -> List[Path]:
    """Return primary Liquid files in ``directory`` (non-recursive), in kind order.

    ``directory`` is interpreted relative to ``root`` when given; returned paths
    keep the same (relative) form as ``directory``.
    """
    base = root / directory if root is not None else directory
    return [
        directory / primary_filename(kind)
        for kind in PRIMARY_KINDS
        if (base / primary_filename(kind)).is_file()
    ]


def validate(
    directory: Path,
    roots: Sequence[str] = (),
    *,
    root: Path | None = None,
    source: PurePath | None = None,
) -> Tuple[Path, str]:
    """Return ``(primary_path, kind)`` for a compilable component directory."""
    candidates = find_primary_fragments(directory, root=root)
    if not candidates:
        raise NoPrimaryFragment(directory)
    if len(candidates) > 1:
        raise AmbiguousPrimaryFragment(directory, candidates)

    primary = candidates[0]
    kind = primary.name[: -len(PRIMARY_EXTENSION)]
    if resolve_output_path(directory, kind, roots) is None:
        raise UnnameableComponent(source or primary)
    return primary, kind


__all__ = [
    "AmbiguousPrimaryFragment",
    "ComponentError",
    "NoPrimaryFragment",
    "UnnameableComponent",
    "UnsupportedFragment",
    "find_primary_fragments",
    "validate",
]
