from __future__ import annotations

import json
from pathlib import Path

from ..context import RevisionContext
from ..errors import PublishError
from ..models import ClassificationResult

REPORT_FILENAME = "CHANGES.json"


def write_classification_report(
    report_dir: Path,
    result: ClassificationResult,
    ctx: RevisionContext,
    run_id: str,
) -> Path:
    """Write CHANGES.json with every file's kind and the resulting outputs."""
    payload = {
        "run_id": run_id,
        "provider": ctx.provider,
        "event_name": ctx.event_name,
        "is_merge_request": ctx.is_merge_request,
        "pr_number": ctx.pr_number,
        "forced": result.forced,
        "outputs": result.outputs(),
        "counts": result.counts(),
        "files": [{"path": path, "kind": kind} for path, kind in result.kinds.items()],
    }
    path = report_dir / REPORT_FILENAME
    try:
        report_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    except OSError as exc:
        raise PublishError(f"Cannot write {path}: {exc}") from exc
    return path
