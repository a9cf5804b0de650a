from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

from .config import ChangeGateConfig
from .context import RevisionContext
from .errors import DiffError
from .github import GitHubClient
from .logging import ChangeGateLogger
from .models import ChangedFileSet


def git_changed_files(repo_root: Path, base: str = "HEAD^") -> ChangedFileSet:
    """Return paths changed between ``base`` and the working tree HEAD."""
    try:
        result = subprocess.run(
            ["git", "-c", "core.quotePath=false", "diff", base, "--name-only", "-z"],
            cwd=str(repo_root),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise DiffError(f"git unavailable: {exc}") from exc
    if result.returncode != 0:
        stderr = result.stderr.strip() or "unknown error"
        raise DiffError(f"git diff {base} failed: {stderr}")
    return ChangedFileSet.from_text(result.stdout, sep="\0")


def _api_changed_files(config: ChangeGateConfig, ctx: RevisionContext) -> ChangedFileSet:
    token = config.github_token.get_secret_value()
    if not token or not ctx.repo_full_name or not ctx.pr_number:
        raise DiffError("API diff requires github_token, repository and PR number")
    client = GitHubClient(token=token, repo=ctx.repo_full_name)
    return ChangedFileSet.from_paths(client.list_pull_request_files(ctx.pr_number))


def collect_changed_files(
    config: ChangeGateConfig,
    ctx: RevisionContext,
    repo_root: Path,
    logger: Optional[ChangeGateLogger] = None,
) -> ChangedFileSet:
    """Fetch the changed files of a merge request from the configured source."""
    if config.diff_source == "api":
        return _api_changed_files(config, ctx)
    if config.diff_source == "git":
        return git_changed_files(repo_root, config.diff_base)

    bases = [config.diff_base]
    if ctx.base_sha and ctx.base_sha != config.diff_base:
        bases.append(ctx.base_sha)

    error: Optional[DiffError] = None
    for base in bases:
        try:
            return git_changed_files(repo_root, base)
        except DiffError as exc:
            error = exc
            if logger:
                logger.warning("git diff failed", base=base, error=str(exc))

    can_use_api = bool(
        config.github_token.get_secret_value() and ctx.repo_full_name and ctx.pr_number
    )
    if not can_use_api:
        raise error
    if logger:
        logger.warning("falling back to API", pr_number=ctx.pr_number)
    return _api_changed_files(config, ctx)
