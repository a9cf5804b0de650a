from __future__ import annotations

import pytest
from pydantic import ValidationError

from changegate.classifier import DEFAULT_RULES
from changegate.config import ChangeGateConfig


def test_config_defaults_match_default_rules() -> None:
    cfg = ChangeGateConfig()

    assert cfg.diff_base == "HEAD^"
    assert cfg.diff_source == "auto"
    assert cfg.output_format == "auto"
    assert cfg.force_full is False
    assert cfg.rules() == DEFAULT_RULES


def test_config_masks_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_GITHUB_TOKEN", "ghp_dummy")
    cfg = ChangeGateConfig()

    assert cfg.github_token.get_secret_value() == "ghp_dummy"
    assert "ghp_dummy" not in repr(cfg)


def test_config_normalizes_enums_and_booleans(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_DIFF_SOURCE", " API ")
    monkeypatch.setenv("INPUT_OUTPUT_FORMAT", "Azure")
    monkeypatch.setenv("INPUT_FORCE_FULL", "true")
    cfg = ChangeGateConfig()

    assert cfg.diff_source == "api"
    assert cfg.output_format == "azure"
    assert cfg.force_full is True


def test_invalid_diff_source_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_DIFF_SOURCE", "svn")
    with pytest.raises(ValidationError):
        ChangeGateConfig()


def test_blank_prefix_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_DOC_PREFIX", " / ")
    with pytest.raises(ValidationError):
        ChangeGateConfig()


def test_custom_rules_from_inputs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_IGNORED_PATHS", "README.md, CHANGELOG.md")
    monkeypatch.setenv("INPUT_IGNORED_PREFIXES", "prototypes,scratch/")
    monkeypatch.setenv("INPUT_DOC_PREFIX", "docs")
    rules = ChangeGateConfig().rules()

    assert rules.ignored_paths == ("README.md", "CHANGELOG.md")
    assert rules.ignored_prefixes == ("prototypes/", "scratch/")
    assert rules.doc_prefix == "docs/"
    assert rules.notebook_prefix == "notebooks/"


def test_config_is_frozen() -> None:
    cfg = ChangeGateConfig()
    with pytest.raises((TypeError, ValidationError)):
        cfg.force_full = True
