"""Core data models shared across theme-builder components."""

import enum
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import List, Optional


class CompileStatus(str, enum.Enum):
    """Outcome of compiling a single fragment file."""

    COMPILED = "compiled"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class CompileResult:
    """Per-file result reported by the component compiler."""

    source: Path
    status: CompileStatus
    output: Optional[PurePosixPath] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is CompileStatus.COMPILED


@dataclass
class BuildReport:
    """Results of compiling a batch of fragment files."""

    results: List[CompileResult] = field(default_factory=list)

    @property
    def compiled(self) -> List[CompileResult]:
        return [result for result in self.results if result.status is CompileStatus.COMPILED]

    @property
    def skipped(self) -> List[CompileResult]:
        return [result for result in self.results if result.status is CompileStatus.SKIPPED]

    @property
    def failed(self) -> List[CompileResult]:
        return [result for result in self.results if result.status is CompileStatus.FAILED]

    def extend(self, other: "BuildReport") -> None:
        self.results.extend(other.results)
