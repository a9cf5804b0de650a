from __future__ import annotations

from enum import Enum


class ExitCode(int, Enum):
    """Process exit codes."""

    SUCCESS = 0
    ERROR = 2


class OutputName(str, Enum):
    """Step output variable names read by downstream job conditions."""

    BUILD_DOCS = "buildDocs"
    BUILD_NOTEBOOKS = "buildNbs"
    TEST_CODE = "testCode"
