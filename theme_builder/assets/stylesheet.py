"""Tailwind CSS build invocation."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Sequence

from ..config import TailwindDialect
from ..logging import get_logger

TAILWIND_BINARY = "tailwindcss"
TAILWIND_CONFIG = "tailwind.config.js"

_DEFAULT_INPUT = {
    TailwindDialect.V4: '@import "tailwindcss";',
    TailwindDialect.V3: "@tailwind base;\n@tailwind components;\n@tailwind utilities;",
}

CommandRunner = Callable[..., int]


class TailwindRunner:
    """Runs ``tailwindcss -i <input> -o <output>`` without inspecting its output."""

    def __init__(
        self,
        input_file: str | Path = "./assets/tailwind.css",
        output_file: str | Path = "./assets/tailwind-output.css",
        *,
        dialect: TailwindDialect = TailwindDialect.V4,
        root: Path | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.input_file = Path(input_file)
        self.output_file = Path(output_file)
        self.dialect = dialect
        self.root = (root or Path.cwd()).resolve()
        self._runner = runner or self._default_runner
        self.logger = get_logger("stylesheet")

    def run(self) -> int | None:
        """Build the stylesheet; return the exit code, or None if the binary is missing."""
        self.logger.info("Running Tailwind CSS build...")
        return self._run(
            [TAILWIND_BINARY, "-i", str(self.input_file), "-o", str(self.output_file)]
        )

    def ensure_input_file(self) -> bool:
        """Write the default input file when absent; return True if one was created."""
        destination = self.root / self.input_file
        if destination.exists():
            return False

        self.logger.info("Creating default Tailwind CSS input file at '%s'...", self.input_file)
        if self.dialect is TailwindDialect.V3 and not (self.root / TAILWIND_CONFIG).exists():
            self._run([TAILWIND_BINARY, "init"])

        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(_DEFAULT_INPUT[self.dialect], encoding="utf-8")
        return True

    def _run(self, args: Sequence[str]) -> int | None:
        try:
            code = self._runner(list(args), cwd=self.root)
        except OSError as exc:
            self.logger.error("Could not run %s: %s", args[0], exc)
            return None
        if code != 0:
            self.logger.warning("%s exited with status %s", " ".join(args), code)
        return code

    @staticmethod
    def _default_runner(args: Sequence[str], cwd: Path) -> int:
        completed = subprocess.run(list(args), cwd=cwd, check=False)
        return completed.returncode


__all__ = ["TAILWIND_BINARY", "TailwindRunner"]
