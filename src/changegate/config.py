from __future__ import annotations

from typing import Tuple

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .classifier import ClassificationRules
from .models import DiffSource, OutputFormat


def _split_csv(value: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in (value or "").split(",") if item.strip())


def _as_prefix(value: str) -> str:
    return value.rstrip("/") + "/"


class ChangeGateConfig(BaseSettings):
    """Configuration loaded from action inputs."""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        frozen=True,
        extra="ignore",
    )

    diff_base: str = Field(
        default="HEAD^",
        description="Revision to diff against. HEAD^ is the base branch side of a PR merge commit.",
    )
    diff_source: DiffSource = Field(default="auto", description="Where changed files come from: auto, git, api")
    output_format: OutputFormat = Field(default="auto", description="Output transport: auto, github, azure")
    force_full: bool = Field(default=False, description="Run every job regardless of what changed")
    github_token: SecretStr = Field(default="", description="Token for listing PR files via the API")
    report_dir: str = Field(default="", description="Directory for the CHANGES.json report (disabled when empty)")

    # Classification rules (comma separated)
    ignored_paths: str = Field(default="README.md")
    ignored_prefixes: str = Field(default="prototypes/")
    doc_prefix: str = Field(default="doc/")
    notebook_prefix: str = Field(default="notebooks/")

    @field_validator("diff_source", "output_format", mode="before")
    @classmethod
    def _normalize_lowercase(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("diff_base")
    @classmethod
    def _require_diff_base(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("diff_base must not be empty")
        return trimmed

    @field_validator("doc_prefix", "notebook_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed.strip("/"):
            raise ValueError("prefix must name a directory")
        return _as_prefix(trimmed)

    @field_validator("ignored_prefixes")
    @classmethod
    def _normalize_prefix_list(cls, value: str) -> str:
        return ",".join(_as_prefix(item) for item in _split_csv(value) if item.strip("/"))

    def rules(self) -> ClassificationRules:
        return ClassificationRules(
            ignored_paths=_split_csv(self.ignored_paths),
            ignored_prefixes=_split_csv(self.ignored_prefixes),
            doc_prefix=self.doc_prefix,
            notebook_prefix=self.notebook_prefix,
        )
