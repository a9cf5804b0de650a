from __future__ import annotations

import os
from typing import List

import requests

from .errors import DiffError

GITHUB_API = os.environ.get("GITHUB_API_URL", "https://api.github.com")
DEFAULT_HTTP_TIMEOUT_SECONDS = float(os.environ.get("CHANGEGATE_HTTP_TIMEOUT_SECONDS", "15"))
PAGE_SIZE = 100
# The files endpoint stops at 3000 entries.
MAX_PAGES = 30


class GitHubClient:
    def __init__(self, token: str, repo: str, session: requests.Session | None = None):
        self.repo = repo
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "changegate",
        })

    def list_pull_request_files(self, pr_number: int) -> List[str]:
        """Get changed file paths of a PR, following pagination."""
        url = f"{GITHUB_API}/repos/{self.repo}/pulls/{pr_number}/files"
        filenames: List[str] = []
        for page in range(1, MAX_PAGES + 1):
            try:
                r = self.session.get(
                    url,
                    params={"per_page": PAGE_SIZE, "page": page},
                    timeout=DEFAULT_HTTP_TIMEOUT_SECONDS,
                )
                r.raise_for_status()
                entries = r.json()
            except (requests.RequestException, ValueError) as exc:
                raise DiffError(f"Listing files of PR #{pr_number} failed: {exc}") from exc
            filenames.extend(e.get("filename", "") for e in entries if e.get("filename"))
            if len(entries) < PAGE_SIZE:
                break
        else:
            # A partial list could hide code changes.
            raise DiffError(
                f"PR #{pr_number} has more than {MAX_PAGES * PAGE_SIZE} changed files; the API cannot list them all"
            )
        return filenames
