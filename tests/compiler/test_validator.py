"""Tests for theme_builder.compiler.validator."""

from __future__ import annotations

from pathlib import Path

import pytest

from theme_builder.compiler.validator import (
    AmbiguousPrimaryFragment,
    ComponentError,
    NoPrimaryFragment,
    UnnameableComponent,
    validate,
)
from tests._fixtures.component_tree import ComponentTree


def test_validate_returns_primary_and_kind(tree: ComponentTree) -> None:
    tree.write({"_components/button/block.liquid": "<button></button>", "_components/button/style.css": ""})

    primary, kind = validate(Path("_components/button"), ["_components"], root=tree.path())

    assert primary == Path("_components/button/block.liquid")
    assert kind == "block"


def test_validate_rejects_directory_without_primary(tree: ComponentTree) -> None:
    tree.write({"_components/button/schema.json": "{}"})

    with pytest.raises(NoPrimaryFragment) as excinfo:
        validate(Path("_components/button"), ["_components"], root=tree.path())

    assert str(excinfo.value) == "No liquid file found in _components/button"


def test_validate_rejects_multiple_primaries(tree: ComponentTree) -> None:
    tree.write(
        {
            "_components/button/section.liquid": "<section></section>",
            "_components/button/block.liquid": "<div></div>",
        }
    )

    with pytest.raises(AmbiguousPrimaryFragment) as excinfo:
        validate(Path("_components/button"), ["_components"], root=tree.path())

    assert str(excinfo.value) == "Multiple liquid files found in _components/button"
    assert len(excinfo.value.candidates) == 2


def test_validate_rejects_primary_directly_under_root(tree: ComponentTree) -> None:
    tree.write({"_components/section.liquid": "<section></section>"})

    with pytest.raises(UnnameableComponent) as excinfo:
        validate(
            Path("_components"),
            ["_components"],
            root=tree.path(),
            source=Path("_components/section.liquid"),
        )

    message = str(excinfo.value)
    assert message.startswith("Invalid file name for file: _components/section.liquid\n")
    assert "directly under the components folder" in message


def test_component_errors_share_a_base_class() -> None:
    assert issubclass(NoPrimaryFragment, ComponentError)
    assert issubclass(ComponentError, RuntimeError)
