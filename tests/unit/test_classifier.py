from __future__ import annotations

import pytest

from changegate.classifier import DEFAULT_RULES, ClassificationRules, classify, classify_path
from changegate.context import RevisionContext

PR = RevisionContext(is_merge_request=True, provider="github", event_name="pull_request")
PUSH = RevisionContext(is_merge_request=False, provider="github", event_name="push")


def _signals(result) -> tuple[bool, bool, bool]:
    return (result.build_docs, result.build_notebooks, result.test_code)


@pytest.mark.parametrize(
    "files",
    [[], ["README.md"], ["src/model.py", "doc/index.rst"]],
)
def test_direct_update_runs_everything(files: list[str]) -> None:
    result = classify(files, PUSH)
    assert _signals(result) == (True, True, True)
    assert result.forced is True


def test_empty_merge_request_runs_nothing() -> None:
    result = classify([], PR)
    assert _signals(result) == (False, False, False)
    assert result.forced is False


def test_doc_change_only_builds_docs() -> None:
    assert _signals(classify(["doc/spec/estimation.rst"], PR)) == (True, False, False)


def test_notebook_change_only_runs_notebooks() -> None:
    assert _signals(classify(["notebooks/Double ML.ipynb"], PR)) == (False, True, False)


def test_readme_and_prototypes_are_ignored() -> None:
    assert _signals(classify(["README.md", "prototypes/x.py"], PR)) == (False, False, False)


def test_code_change_forces_all_jobs() -> None:
    assert _signals(classify(["src/model.py"], PR)) == (True, True, True)


def test_doc_and_notebook_changes_skip_tests() -> None:
    result = classify(["doc/conf.py", "notebooks/demo.ipynb", "README.md"], PR)
    assert _signals(result) == (True, True, False)
    assert result.counts() == {"ignored": 1, "doc": 1, "notebook": 1, "code": 0}


@pytest.mark.parametrize(
    "path, kind",
    [
        ("README.md", "ignored"),
        ("docs/README.md", "code"),
        ("readme.md", "code"),
        ("prototypes/dml/x.py", "ignored"),
        ("doc/a/b/c.rst", "doc"),
        ("Doc/index.rst", "code"),
        ("document.txt", "code"),
        ("notebooks/sub/dir/n.ipynb", "notebook"),
        ("setup.cfg", "code"),
        ("doc\\index.rst", "code"),
    ],
)
def test_classify_path(path: str, kind: str) -> None:
    assert classify_path(path) == kind


def test_metadata_files_count_as_code() -> None:
    result = classify(["azure-pipelines.yml"], PR)
    assert result.code_changes is True
    assert result.kinds == {"azure-pipelines.yml": "code"}


def test_custom_rules_keep_priority() -> None:
    rules = ClassificationRules(
        ignored_paths=("CHANGELOG.md",),
        ignored_prefixes=("docs/drafts/",),
        doc_prefix="docs/",
        notebook_prefix="examples/",
    )
    assert classify_path("docs/drafts/wip.md", rules) == "ignored"
    assert classify_path("docs/index.md", rules) == "doc"
    assert classify_path("examples/demo.ipynb", rules) == "notebook"
    assert classify_path("README.md", rules) == "code"
    assert DEFAULT_RULES.doc_prefix == "doc/"
