"""Shared test fixtures for the covserve test suite.

Provides report directories, scripted stdin replacements and a mock
coverage runner so the loop can be exercised without spawning
processes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock

import pytest

from covserve.domain.models import RunResult
from covserve.runner.coverage import CoverageRunner, build_commands


# ---------------------------------------------------------------------------
# Report directory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def report_dir(tmp_path: Path) -> Path:
    """An empty, existing report directory."""
    path = tmp_path / "htmlcov"
    path.mkdir()
    return path


# ---------------------------------------------------------------------------
# Input fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def scripted_input() -> Callable[[list[str]], Callable[[str], str]]:
    """Factory for ``input()`` replacements that replay a list of lines.

    The returned callable records every prompt it was shown and raises
    EOFError once the lines are exhausted.
    """

    def factory(lines: list[str]) -> Callable[[str], str]:
        remaining = iter(lines)
        prompts: list[str] = []

        def read_line(prompt: str) -> str:
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        read_line.prompts = prompts  # type: ignore[attr-defined]
        return read_line

    return factory


# ---------------------------------------------------------------------------
# Runner fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_runner() -> MagicMock:
    """A CoverageRunner whose run() succeeds without spawning anything."""
    runner = MagicMock(spec=CoverageRunner)
    runner.run.side_effect = lambda test_path: RunResult(
        test_path=test_path,
        commands=build_commands(test_path),
        returncode=0,
    )
    return runner
