"""Helper utilities for constructing temporary theme projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping


class ComponentTree:
    """Utility for writing component fragments into a throwaway theme project."""

    def __init__(self, tmp_path: Path) -> None:
        (tmp_path / "theme").mkdir()
        self.root = (tmp_path / "theme").resolve()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content)
            path.write_text(normalised, encoding="utf-8")

    def read(self, relative: str) -> str:
        return (self.root / relative).read_text(encoding="utf-8")

    def exists(self, relative: str) -> bool:
        return (self.root / relative).exists()

    def path(self, relative: str = "") -> Path:
        """Return the project root, or a path inside it."""
        return self.root / relative if relative else self.root


__all__ = ["ComponentTree"]
