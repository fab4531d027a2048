"""Merge a component's primary fragment and sidecars into one Liquid text."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Callable, Dict, Optional

from ..fragments import SIDECAR_FILES

PRIMARY = "liquid"

# Emission order; the controller sidecar goes to the script bundle instead.
EMISSION_ORDER = ("comment", "doc", PRIMARY, "schema", "stylesheet", "javascript")

RULE = "-" * 60

DefaultContent = Callable[[PurePath], str]


def default_comment(primary_path: PurePath) -> str:
    return (
        f"\n{RULE}\n"
        "IMPORTANT: The contents of this file are auto-generated.\n"
        "Avoid editing this file directly.\n\n"
        f"Compiled from {primary_path.as_posix()}\n"
        f"{RULE}\n"
    )


DEFAULT_CONTENT: Dict[str, Optional[DefaultContent]] = {
    "comment": default_comment,
    "doc": None,
    "schema": None,
    "stylesheet": None,
    "javascript": None,
}


class ContentAggregator:
    """Builds the compiled text for one component directory.

    Each sidecar kind contributes ``\\n{% kind %}<text>{% endkind %}\\n`` where
    ``<text>`` is the kind's default content followed by the trimmed file
    content; the primary fragment is emitted without a wrapper. Kinds with no
    text contribute nothing.
    """

    def __init__(self, root: Path | None = None) -> None:
        self.root = root

    def aggregate(self, directory: Path, primary_path: Path, kind: str) -> str:
        parts = [
            self.formatted_content(content_type, directory, primary_path)
            for content_type in EMISSION_ORDER
        ]
        return "".join(parts).lstrip()

    def formatted_content(self, content_type: str, directory: Path, primary_path: Path) -> str:
        if content_type == PRIMARY:
            source = primary_path
        else:
            source = directory / SIDECAR_FILES[content_type]

        generator = DEFAULT_CONTENT.get(content_type)
        content = generator(primary_path) if generator is not None else ""

        on_disk = self._locate(source)
        if on_disk.is_file():
            content += file_content(on_disk)

        if not content:
            return ""
        if content_type == PRIMARY:
            return content
        return f"\n{{% {content_type} %}}{content}{{% end{content_type} %}}\n"

    def _locate(self, path: Path) -> Path:
        return self.root / path if self.root is not None else path


def file_content(path: Path) -> str:
    """Return trimmed file text inset by newlines, or '' when blank."""
    content = path.read_text(encoding="utf-8").strip()
    return f"\n{content}\n" if content else ""


__all__ = ["ContentAggregator", "DEFAULT_CONTENT", "EMISSION_ORDER", "default_comment", "file_content"]
