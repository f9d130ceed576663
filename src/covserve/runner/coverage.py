"""Execution of the coverage command chain.

The chain is the argument-vector form of::

    python -m coverage run -m pytest <TEST_PATH> && python -m coverage html

No shell is involved. The steps run in order and the chain stops at
the first non-zero exit, so the test path is always a single verbatim
argument and shell metacharacters in it are inert.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from pathlib import Path

from covserve.domain.models import RunResult
from covserve.utils.console import printable

logger = logging.getLogger(__name__)

DEFAULT_REPORT_DIR = "htmlcov"


def build_commands(
    test_path: str,
    python: str = "python",
    directory: Path | str = DEFAULT_REPORT_DIR,
) -> list[list[str]]:
    """Build the argument vectors for one coverage run.

    ``coverage html`` writes to ``htmlcov`` by default; any other report
    directory is passed explicitly with ``-d``.
    """
    run_cmd = [python, "-m", "coverage", "run", "-m", "pytest", test_path]
    html_cmd = [python, "-m", "coverage", "html"]
    if Path(directory) != Path(DEFAULT_REPORT_DIR):
        html_cmd += ["-d", str(directory)]
    return [run_cmd, html_cmd]


def format_command(commands: list[list[str]]) -> str:
    """Render argument vectors as a quoted, copy-pasteable shell line."""
    return " && ".join(shlex.join(argv) for argv in commands)


def locate_interpreter(python: str = "python") -> str | None:
    """Return the full path of ``python`` on PATH, or None."""
    return shutil.which(python)


class CoverageRunner:
    """Runs the coverage chain for a given test path.

    Child processes inherit the working directory, the environment and
    stdout/stderr of this process. Failures are reported to the console
    and returned in the RunResult; they never raise.
    """

    def __init__(
        self,
        python: str = "python",
        directory: Path | str = DEFAULT_REPORT_DIR,
    ) -> None:
        self._python = python
        self._directory = directory

    def run(self, test_path: str) -> RunResult:
        commands = build_commands(test_path, self._python, self._directory)
        print("Running coverage tests...")
        logger.debug("Coverage chain: %s", printable(format_command(commands)))

        returncode: int | None = None
        for argv in commands:
            print(f"Executing: {printable(shlex.join(argv))}")
            try:
                completed = subprocess.run(argv, check=False)
            except OSError as e:
                logger.error("Failed to launch %s: %s", argv[0], e)
                print(f"Error running coverage: {printable(str(e))}")
                return RunResult(test_path=test_path, commands=commands, error=str(e))

            returncode = completed.returncode
            if returncode != 0:
                logger.warning("Step %s exited with %d", printable(shlex.join(argv)), returncode)
                print(f"Command failed with exit code: {returncode}")
                return RunResult(test_path=test_path, commands=commands, returncode=returncode)

        print("Coverage tests completed successfully!")
        return RunResult(test_path=test_path, commands=commands, returncode=returncode)
