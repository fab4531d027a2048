"""Tests for theme_builder.assets.stylesheet."""

from __future__ import annotations

from pathlib import Path

from theme_builder.assets.stylesheet import TailwindRunner
from theme_builder.config import TailwindDialect
from tests._fixtures.component_tree import ComponentTree


class RecordingRunner:
    """Test double standing in for subprocess execution."""

    def __init__(self, code: int = 0) -> None:
        self.code = code
        self.calls: list[tuple[list[str], Path]] = []

    def __call__(self, args, cwd):
        self.calls.append((list(args), Path(cwd)))
        return self.code


def test_run_invokes_tailwind_with_configured_paths(tree: ComponentTree) -> None:
    runner = RecordingRunner()
    stylesheet = TailwindRunner("input.css", "output.css", root=tree.path(), runner=runner)

    assert stylesheet.run() == 0
    assert runner.calls == [(["tailwindcss", "-i", "input.css", "-o", "output.css"], tree.path())]


def test_run_reports_but_does_not_raise_on_failure(tree: ComponentTree) -> None:
    stylesheet = TailwindRunner(root=tree.path(), runner=RecordingRunner(code=2))

    assert stylesheet.run() == 2


def test_run_handles_missing_binary(tree: ComponentTree) -> None:
    def missing(args, cwd):
        raise FileNotFoundError(args[0])

    stylesheet = TailwindRunner(root=tree.path(), runner=missing)

    assert stylesheet.run() is None


def test_ensure_input_file_writes_v4_default(tree: ComponentTree) -> None:
    runner = RecordingRunner()
    stylesheet = TailwindRunner("./assets/tailwind.css", root=tree.path(), runner=runner)

    assert stylesheet.ensure_input_file() is True
    assert tree.read("assets/tailwind.css") == '@import "tailwindcss";'
    assert runner.calls == []


def test_ensure_input_file_writes_v3_default_and_inits_config(tree: ComponentTree) -> None:
    runner = RecordingRunner()
    stylesheet = TailwindRunner(
        "./assets/tailwind.css", dialect=TailwindDialect.V3, root=tree.path(), runner=runner
    )

    stylesheet.ensure_input_file()

    assert tree.read("assets/tailwind.css") == "@tailwind base;\n@tailwind components;\n@tailwind utilities;"
    assert runner.calls == [(["tailwindcss", "init"], tree.path())]


def test_ensure_input_file_keeps_existing_file(tree: ComponentTree) -> None:
    tree.write({"assets/tailwind.css": "/* mine */"})
    stylesheet = TailwindRunner("./assets/tailwind.css", root=tree.path(), runner=RecordingRunner())

    assert stylesheet.ensure_input_file() is False
    assert tree.read("assets/tailwind.css") == "/* mine */"
