"""Decide which CI jobs a revision needs from its changed files."""

from .classifier import DEFAULT_RULES, ClassificationRules, classify, classify_path
from .context import RevisionContext
from .models import ChangedFileSet, ClassificationResult

__all__ = [
    "DEFAULT_RULES",
    "ClassificationRules",
    "classify",
    "classify_path",
    "ChangedFileSet",
    "ClassificationResult",
    "RevisionContext",
]
