from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .models import Provider

MERGE_REQUEST_EVENTS = {"pull_request", "pull_request_target"}
AZURE_PULL_REQUEST_REASON = "PullRequest"


def _load_event() -> Dict[str, Any]:
    event_path = os.environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        return {}
    try:
        return json.loads(Path(event_path).read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _coerce_int(value: Any) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _detect_provider() -> Provider:
    if os.environ.get("GITHUB_ACTIONS", "").lower() == "true" or os.environ.get("GITHUB_EVENT_NAME"):
        return "github"
    if os.environ.get("BUILD_REASON") or os.environ.get("TF_BUILD"):
        return "azure"
    return "local"


@dataclass(frozen=True)
class RevisionContext:
    """Immutable description of the revision under evaluation."""

    is_merge_request: bool
    provider: Provider = "local"
    event_name: str = ""
    pr_number: Optional[int] = None
    base_sha: Optional[str] = None
    repo_full_name: Optional[str] = None

    @classmethod
    def from_environment(cls, *, force_full: bool = False) -> "RevisionContext":
        """Load context from the CI environment.

        ``force_full`` treats the revision as a direct update so every job runs.
        """
        provider = _detect_provider()
        if provider == "github":
            ctx = cls._from_github()
        elif provider == "azure":
            ctx = cls._from_azure()
        else:
            ctx = cls(is_merge_request=False, provider="local", event_name="local")

        if force_full and ctx.is_merge_request:
            return cls(
                is_merge_request=False,
                provider=ctx.provider,
                event_name=ctx.event_name,
                pr_number=ctx.pr_number,
                base_sha=ctx.base_sha,
                repo_full_name=ctx.repo_full_name,
            )
        return ctx

    @classmethod
    def _from_github(cls) -> "RevisionContext":
        event = _load_event()
        event_name = os.environ.get("GITHUB_EVENT_NAME") or ""
        repo_full_name = (
            os.environ.get("GITHUB_REPOSITORY")
            or event.get("repository", {}).get("full_name")
            or None
        )

        pr = event.get("pull_request") or {}
        is_merge_request = event_name in MERGE_REQUEST_EVENTS
        if is_merge_request:
            pr_number = _coerce_int(event.get("number") or pr.get("number"))
            base_sha = (pr.get("base") or {}).get("sha")
        else:
            pr_number = None
            base_sha = None

        return cls(
            is_merge_request=is_merge_request,
            provider="github",
            event_name=event_name,
            pr_number=pr_number,
            base_sha=base_sha or None,
            repo_full_name=repo_full_name,
        )

    @classmethod
    def _from_azure(cls) -> "RevisionContext":
        reason = os.environ.get("BUILD_REASON", "")
        is_merge_request = reason == AZURE_PULL_REQUEST_REASON
        pr_number = (
            _coerce_int(os.environ.get("SYSTEM_PULLREQUEST_PULLREQUESTNUMBER"))
            if is_merge_request
            else None
        )
        return cls(
            is_merge_request=is_merge_request,
            provider="azure",
            event_name=reason,
            pr_number=pr_number,
            repo_full_name=os.environ.get("BUILD_REPOSITORY_NAME") or None,
        )
