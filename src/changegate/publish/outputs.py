from __future__ import annotations

import os
import sys
from typing import Dict, List, Optional, TextIO

from ..context import RevisionContext
from ..errors import PublishError
from ..models import OutputFormat


def format_bool(value: bool) -> str:
    """Render a signal the way `eq(..., 'True')` conditions expect."""
    return "True" if value else "False"


def _targets(output_format: OutputFormat, ctx: RevisionContext) -> List[str]:
    if output_format != "auto":
        return [output_format]
    targets = []
    if os.environ.get("GITHUB_OUTPUT"):
        targets.append("github")
    if ctx.provider == "azure":
        targets.append("azure")
    return targets


def write_outputs(
    outputs: Dict[str, bool],
    ctx: RevisionContext,
    output_format: OutputFormat = "auto",
    stream: Optional[TextIO] = None,
) -> List[str]:
    """
    Publish step outputs for downstream jobs.

    GitHub outputs go to the file named by GITHUB_OUTPUT; Azure outputs are
    `##vso[task.setvariable]` logging commands on stdout. Returns the
    transports written to.
    """
    targets = _targets(output_format, ctx)

    if "github" in targets:
        output_path = os.environ.get("GITHUB_OUTPUT")
        if not output_path:
            raise PublishError("GITHUB_OUTPUT is not set")
        try:
            with open(output_path, "a", encoding="utf-8") as f:
                for name, value in outputs.items():
                    f.write(f"{name}={format_bool(value)}\n")
        except OSError as exc:
            raise PublishError(f"Cannot write {output_path}: {exc}") from exc

    if "azure" in targets:
        out = stream or sys.stdout
        for name, value in outputs.items():
            out.write(f"##vso[task.setvariable variable={name};isOutput=true]{format_bool(value)}\n")
        out.flush()

    return targets
