"""Build orchestration: initial build, asset bundling and the watch loop."""

from __future__ import annotations

import enum
from pathlib import Path, PurePath
from typing import List, Mapping

from .assets import ScriptBundler, TailwindRunner
from .compiler import ComponentCompiler
from .config import BuilderConfig
from .fragments import CONTROLLER_FILENAME, PRIMARY_KINDS, pluralize, relativize
from .logging import get_logger
from .models import BuildReport, CompileResult
from .watch import ChangeKind, ChangeRouter, ChangeSource, PollingChangeSource


class BuildState(str, enum.Enum):
    """Lifecycle of a watch run; ``WATCHING`` lasts until the process is stopped."""

    IDLE = "idle"
    BOOTSTRAPPING = "bootstrapping"
    INITIAL_BUILDING = "initial_building"
    BUNDLING_ASSETS = "bundling_assets"
    WATCHING = "watching"


class BuildOrchestrator:
    """Coordinates the full build and the change-driven rebuild loop."""

    def __init__(
        self,
        config: BuilderConfig | None = None,
        *,
        root: Path | None = None,
        compiler: ComponentCompiler | None = None,
        router: ChangeRouter | None = None,
        stylesheet: TailwindRunner | None = None,
        scripts: ScriptBundler | None = None,
        source: ChangeSource | None = None,
    ) -> None:
        self.config = config or BuilderConfig()
        self.root = (root or Path.cwd()).resolve()
        self.roots = list(self.config.watched_roots)
        self.compiler = compiler or ComponentCompiler(self.roots, root=self.root)
        self.router = router or ChangeRouter(self.compiler, self.roots, root=self.root)
        self.stylesheet = stylesheet or TailwindRunner(
            self.config.tailwind_input_file,
            self.config.tailwind_output_file,
            dialect=self.config.tailwind_dialect,
            root=self.root,
        )
        self.scripts = scripts or ScriptBundler(
            self.roots, self.config.stimulus_output_file, root=self.root
        )
        self.source = source or PollingChangeSource(self.config.poll_interval, root=self.root)
        self.state = BuildState.IDLE
        self.logger = get_logger("orchestrator")

    def run(self) -> None:
        """Build everything, then block watching for changes."""
        self.build()
        self.watch()

    def build(self) -> BuildReport:
        """Run the one-shot build: folders, every component, then assets."""
        self.bootstrap()
        report = self.initial_build()
        self.bundle_assets()
        return report

    def bootstrap(self) -> None:
        self.state = BuildState.BOOTSTRAPPING
        self.logger.info("Creating necessary folders...")
        for folder in self.roots:
            (self.root / folder).mkdir(parents=True, exist_ok=True)
        for kind in PRIMARY_KINDS:
            (self.root / pluralize(kind)).mkdir(parents=True, exist_ok=True)

    def initial_build(self) -> BuildReport:
        self.state = BuildState.INITIAL_BUILDING
        self.logger.info("Doing an initial build...")
        report = BuildReport()
        for folder in self.roots:
            report.extend(self.compiler.compile_many(self._discover(folder)))
        if report.skipped or report.failed:
            self.logger.info(
                "Initial build skipped %d file(s) and failed on %d.",
                len(report.skipped),
                len(report.failed),
            )
        return report

    def bundle_assets(self) -> None:
        self.state = BuildState.BUNDLING_ASSETS
        if not self.config.skip_tailwind:
            self.stylesheet.ensure_input_file()
        self._run_stylesheet()
        self.scripts.rebuild()

    def watch(self) -> None:
        self.state = BuildState.WATCHING
        self.logger.info("Watching for changes in '%s' folders...", ", ".join(self.roots))
        self.source.subscribe(self.roots, self.handle_batch)

    def handle_batch(self, batch: Mapping[str, ChangeKind]) -> List[CompileResult]:
        """Recompile changed components and refresh the derived bundles."""
        results = self.router.route(batch)
        self._run_stylesheet()
        if any(PurePath(changed).name == CONTROLLER_FILENAME for changed in batch):
            self.scripts.rebuild()
        return results

    def _run_stylesheet(self) -> None:
        if self.config.skip_tailwind:
            return
        self.stylesheet.run()

    def _discover(self, folder: str) -> List[Path]:
        base = self.root / folder
        if not base.is_dir():
            return []
        # Hidden files and folders stay out of the build, as with a shell glob.
        return [
            relativize(path, self.root)
            for path in sorted(base.rglob("*.*"))
            if path.is_file()
            and not any(part.startswith(".") for part in path.relative_to(base).parts)
        ]


__all__ = ["BuildOrchestrator", "BuildState"]
