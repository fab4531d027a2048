"""Compile a single fragment file into its component's Liquid artifact."""

from __future__ import annotations

from pathlib import Path, PurePath, PurePosixPath
from typing import Iterable, Sequence

from ..fragments import component_dir, is_known_fragment, relativize
from ..logging import get_logger
from ..models import BuildReport, CompileResult, CompileStatus
from .aggregator import ContentAggregator
from .naming import resolve_output_path
from .validator import ComponentError, UnnameableComponent, UnsupportedFragment, validate


class ComponentCompiler:
    """Runs classify -> validate -> resolve -> aggregate -> write for one file.

    Component problems never raise out of :meth:`compile`; they come back as
    skipped or failed results and are logged with the offending path.
    """

    def __init__(
        self,
        roots: Sequence[str] = ("_components",),
        *,
        root: Path | None = None,
        aggregator: ContentAggregator | None = None,
    ) -> None:
        self.roots = list(roots)
        self.root = (root or Path.cwd()).resolve()
        self.aggregator = aggregator or ContentAggregator(self.root)
        self.logger = get_logger("compiler")

    def compile(self, source_path: str | PurePath) -> CompileResult:
        """Compile the component that owns ``source_path``."""
        relative = relativize(source_path, self.root)
        try:
            output = self._compile(relative)
        except ComponentError as exc:
            self.logger.error("%s", exc)
            return CompileResult(relative, CompileStatus.SKIPPED, message=str(exc))
        except (OSError, UnicodeDecodeError) as exc:
            message = f"Failed to compile {relative.as_posix()}: {exc}"
            self.logger.error("%s", message)
            return CompileResult(relative, CompileStatus.FAILED, message=message)

        self.logger.debug("Compiled %s -> %s", relative.as_posix(), output.as_posix())
        return CompileResult(relative, CompileStatus.COMPILED, output=output)

    def compile_many(self, paths: Iterable[str | PurePath]) -> BuildReport:
        """Compile every path independently and report the outcome of each."""
        files = list(paths)
        self.logger.info("Processing %d files...", len(files))

        report = BuildReport()
        for path in files:
            report.results.append(self.compile(path))

        if report.compiled:
            self.logger.info("Built %d files.", len(report.compiled))
        return report

    def _compile(self, relative: Path) -> PurePosixPath:
        if not is_known_fragment(relative):
            raise UnsupportedFragment(relative)

        directory = component_dir(relative)
        primary, kind = validate(directory, self.roots, root=self.root, source=relative)

        output = resolve_output_path(directory, kind, self.roots)
        if output is None:
            raise UnnameableComponent(relative)

        contents = self.aggregator.aggregate(directory, primary, kind)

        destination = self.root / output
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(contents, encoding="utf-8")
        return output


__all__ = ["ComponentCompiler"]
