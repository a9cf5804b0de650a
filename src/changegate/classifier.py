from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from .context import RevisionContext
from .models import ChangeKind, ClassificationResult


@dataclass(frozen=True)
class ClassificationRules:
    """Path rules, checked in field order; the first match wins."""

    ignored_paths: Tuple[str, ...] = ("README.md",)
    ignored_prefixes: Tuple[str, ...] = ("prototypes/",)
    doc_prefix: str = "doc/"
    notebook_prefix: str = "notebooks/"


DEFAULT_RULES = ClassificationRules()


def classify_path(path: str, rules: ClassificationRules = DEFAULT_RULES) -> ChangeKind:
    # Case-sensitive prefix match; nested directories count.
    if path in rules.ignored_paths:
        return "ignored"
    if any(path.startswith(prefix) for prefix in rules.ignored_prefixes):
        return "ignored"
    if path.startswith(rules.doc_prefix):
        return "doc"
    if path.startswith(rules.notebook_prefix):
        return "notebook"
    return "code"


def classify(
    files: Iterable[str],
    ctx: RevisionContext,
    rules: ClassificationRules = DEFAULT_RULES,
) -> ClassificationResult:
    """
    Decide which downstream jobs should run.

    Revisions that are not merge requests always run everything. For merge
    requests, docs are rebuilt on doc or code changes, notebooks are re-run on
    notebook or code changes, and lint/tests run only on code changes. Paths
    matching no rule count as code.
    """
    if not ctx.is_merge_request:
        return ClassificationResult(
            build_docs=True,
            build_notebooks=True,
            test_code=True,
            forced=True,
        )

    kinds: Dict[str, ChangeKind] = {}
    for path in files:
        kinds[path] = classify_path(path, rules)

    seen = set(kinds.values())
    doc_changes = "doc" in seen
    notebook_changes = "notebook" in seen
    code_changes = "code" in seen

    return ClassificationResult(
        build_docs=doc_changes or code_changes,
        build_notebooks=notebook_changes or code_changes,
        test_code=code_changes,
        doc_changes=doc_changes,
        notebook_changes=notebook_changes,
        code_changes=code_changes,
        kinds=kinds,
    )
