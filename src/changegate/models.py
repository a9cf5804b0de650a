from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Literal, Optional, Tuple

from .constants import OutputName

ChangeKind = Literal["ignored", "doc", "notebook", "code"]
DiffSource = Literal["auto", "git", "api"]
OutputFormat = Literal["auto", "github", "azure"]
Provider = Literal["github", "azure", "local"]


@dataclass(frozen=True)
class ChangedFileSet:
    """Ordered, immutable list of paths touched by a revision."""

    paths: Tuple[str, ...] = ()

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> "ChangedFileSet":
        cleaned = (str(p).strip() for p in paths if p is not None)
        return cls(paths=tuple(p for p in cleaned if p))

    @classmethod
    def from_text(cls, text: str, sep: Optional[str] = None) -> "ChangedFileSet":
        """Parse `git diff --name-only` output, NUL separated when run with `-z`."""
        text = text or ""
        return cls.from_paths(text.split(sep) if sep else text.splitlines())

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)


@dataclass(frozen=True)
class ClassificationResult:
    build_docs: bool
    build_notebooks: bool
    test_code: bool
    doc_changes: bool = False
    notebook_changes: bool = False
    code_changes: bool = False
    forced: bool = False
    kinds: Dict[str, ChangeKind] = field(default_factory=dict, compare=False)

    def outputs(self) -> Dict[str, bool]:
        """Signals keyed by their step output name."""
        return {
            OutputName.BUILD_DOCS.value: self.build_docs,
            OutputName.BUILD_NOTEBOOKS.value: self.build_notebooks,
            OutputName.TEST_CODE.value: self.test_code,
        }

    def counts(self) -> Dict[str, int]:
        totals: Dict[str, int] = {"ignored": 0, "doc": 0, "notebook": 0, "code": 0}
        for kind in self.kinds.values():
            totals[kind] += 1
        return totals
