from __future__ import annotations

import os
import sys
import uuid
from pathlib import Path

from pydantic import ValidationError

from .classifier import classify
from .config import ChangeGateConfig
from .constants import ExitCode
from .context import RevisionContext
from .diff import collect_changed_files
from .errors import ChangeGateError, ConfigError
from .logging import ChangeGateLogger
from .models import ChangedFileSet
from .publish import write_classification_report, write_outputs, write_step_summary

VERSION = "1.0.0"


def _load_config() -> ChangeGateConfig:
    try:
        return ChangeGateConfig()
    except ValidationError as exc:
        raise ConfigError(f"Configuration error: {exc}") from exc


def run(logger: ChangeGateLogger) -> int:
    config = _load_config()
    ctx = RevisionContext.from_environment(force_full=config.force_full)
    repo_root = Path(os.environ.get("GITHUB_WORKSPACE") or os.environ.get("BUILD_SOURCESDIRECTORY") or ".")

    logger.info(
        "changegate starting",
        provider=ctx.provider,
        event_name=ctx.event_name,
        is_merge_request=ctx.is_merge_request,
        pr_number=ctx.pr_number,
    )

    files = ChangedFileSet()
    if ctx.is_merge_request:
        with logger.stage("diff"):
            files = collect_changed_files(config, ctx, repo_root, logger=logger)
        logger.info("changed files", count=len(files), files=list(files.paths))

    with logger.stage("classify"):
        result = classify(files, ctx, config.rules())
    logger.info("classification", forced=result.forced, **result.outputs())

    with logger.stage("publish"):
        write_outputs(result.outputs(), ctx, config.output_format)
        write_step_summary(result, ctx, run_id=logger.run_id, version=VERSION)
        if config.report_dir:
            write_classification_report(Path(config.report_dir), result, ctx, logger.run_id)

    return ExitCode.SUCCESS.value


def main() -> int:
    """Main entry point."""
    logger = ChangeGateLogger(str(uuid.uuid4()))
    try:
        return run(logger)
    except ChangeGateError as exc:
        logger.error(str(exc), error_type=type(exc).__name__)
        return int(exc.exit_code)


if __name__ == "__main__":
    sys.exit(main())
