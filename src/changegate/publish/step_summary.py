from __future__ import annotations

import os

from ..context import RevisionContext
from ..errors import PublishError
from ..models import ClassificationResult
from .outputs import format_bool


def write_step_summary(result: ClassificationResult, ctx: RevisionContext, run_id: str, version: str) -> None:
    """
    Write GitHub Actions Step Summary.

    Shows which jobs were enabled and why, without opening the logs.
    """
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary_path:
        return

    if result.forced:
        reason = f"Not a merge request (`{ctx.event_name or ctx.provider}`): running every job."
    else:
        counts = result.counts()
        reason = (
            f"{len(result.kinds)} changed file(s): "
            f"{counts['code']} code, {counts['doc']} doc, "
            f"{counts['notebook']} notebook, {counts['ignored']} ignored."
        )

    md = [
        "## Change classification",
        "",
        reason,
        "",
        "| Output | Value |",
        "|--------|:-----:|",
    ]
    for name, value in result.outputs().items():
        md.append(f"| `{name}` | {format_bool(value)} |")
    md.extend(["", f"<sub>changegate v{version} • run_id={run_id[:8]}</sub>", ""])

    try:
        with open(summary_path, "a", encoding="utf-8") as summary_file:
            summary_file.write("\n".join(md))
    except OSError as exc:
        raise PublishError(f"Cannot write step summary {summary_path}: {exc}") from exc
