"""Component compilation: validation, naming, aggregation and writing."""

from __future__ import annotations

from .aggregator import ContentAggregator
from .component import ComponentCompiler
from .naming import component_name, resolve_output_path
from .validator import (
    AmbiguousPrimaryFragment,
    ComponentError,
    NoPrimaryFragment,
    UnnameableComponent,
    UnsupportedFragment,
    validate,
)

__all__ = [
    "AmbiguousPrimaryFragment",
    "ComponentCompiler",
    "ComponentError",
    "ContentAggregator",
    "NoPrimaryFragment",
    "UnnameableComponent",
    "UnsupportedFragment",
    "component_name",
    "resolve_output_path",
    "validate",
]
