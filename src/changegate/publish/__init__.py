from __future__ import annotations

from .outputs import format_bool, write_outputs
from .report import write_classification_report
from .step_summary import write_step_summary

__all__ = [
    "format_bool",
    "write_outputs",
    "write_classification_report",
    "write_step_summary",
]
