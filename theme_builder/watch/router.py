"""Dispatch change batches to the component compiler."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Sequence

from ..compiler import ComponentCompiler
from ..fragments import is_known_fragment, is_under, relativize
from ..logging import get_logger
from ..models import CompileResult
from .source import ChangeKind


class ChangeRouter:
    """Compiles each changed path that lives under a watched root."""

    def __init__(
        self,
        compiler: ComponentCompiler,
        roots: Sequence[str] | None = None,
        *,
        root: Path | None = None,
    ) -> None:
        self.compiler = compiler
        self.roots = list(roots) if roots is not None else list(compiler.roots)
        self.root = (root or compiler.root).resolve()
        self.logger = get_logger("router")

    def route(self, batch: Mapping[str, ChangeKind]) -> List[CompileResult]:
        results: List[CompileResult] = []
        for changed, kind in batch.items():
            relative = relativize(changed, self.root)
            if relative.is_absolute() or not is_under(relative, self.roots):
                self.logger.debug("Ignoring %s change outside watched folders: %s", _label(kind), changed)
                continue
            if not is_known_fragment(relative):
                self.logger.debug("Ignoring unsupported file: %s", relative.as_posix())
                continue
            self.logger.debug("Routing %s change: %s", _label(kind), relative.as_posix())
            results.append(self.compiler.compile(relative))
        return results


def _label(kind: ChangeKind | str) -> str:
    return kind.value if isinstance(kind, ChangeKind) else str(kind)


__all__ = ["ChangeRouter"]
