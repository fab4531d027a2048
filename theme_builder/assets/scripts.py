"""Stimulus controller bundling."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from ..fragments import CONTROLLER_FILENAME
from ..logging import get_logger

STIMULUS_PREAMBLE = (
    'import { Application, Controller } from "https://unpkg.com/@hotwired/stimulus/dist/stimulus.js"\n'
    "window.Stimulus = Application.start()\n\n"
)


class ScriptBundler:
    """Concatenates every controller sidecar under the watched roots into one file."""

    def __init__(
        self,
        roots: Sequence[str],
        output_path: str | Path = "./assets/controllers.js",
        *,
        root: Path | None = None,
    ) -> None:
        self.roots = list(roots)
        self.root = (root or Path.cwd()).resolve()
        self.output_path = Path(output_path)
        self.logger = get_logger("scripts")

    def discover(self) -> List[Path]:
        """Return controller files, roots in configured order, glob order within a root."""
        found: List[Path] = []
        for watched in self.roots:
            base = self.root / watched
            if not base.is_dir():
                continue
            found.extend(sorted(path for path in base.rglob(CONTROLLER_FILENAME) if path.is_file()))
        return found

    def rebuild(self) -> bool:
        """Rewrite the bundle; return False when there was nothing to bundle."""
        controllers = self.discover()
        if not controllers:
            self.logger.debug("No %s files found; skipping bundle", CONTROLLER_FILENAME)
            return False

        self.logger.info("Building Stimulus controllers...")

        try:
            content = STIMULUS_PREAMBLE
            for path in controllers:
                content += path.read_text(encoding="utf-8")
                content += "\n"

            destination = self.root / self.output_path
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(content.rstrip(), encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.error("Failed to build Stimulus controllers: %s", exc)
            return False

        self.logger.debug("Bundled %d controller(s) into %s", len(controllers), self.output_path)
        return True


__all__ = ["STIMULUS_PREAMBLE", "ScriptBundler"]
