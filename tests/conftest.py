from __future__ import annotations

import os
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

CI_ENV_VARS = (
    "GITHUB_ACTIONS",
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "GITHUB_REPOSITORY",
    "GITHUB_SHA",
    "GITHUB_OUTPUT",
    "GITHUB_STEP_SUMMARY",
    "GITHUB_WORKSPACE",
    "BUILD_REASON",
    "BUILD_SOURCEVERSION",
    "BUILD_REPOSITORY_NAME",
    "BUILD_SOURCESDIRECTORY",
    "SYSTEM_PULLREQUEST_PULLREQUESTNUMBER",
    "TF_BUILD",
)


@pytest.fixture(autouse=True)
def clean_ci_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from the CI system actually running them."""
    for name in CI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    for name in list(os.environ):
        if name.startswith("INPUT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def event_pr_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "event_pr.json"


@pytest.fixture
def event_push_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "event_push.json"
