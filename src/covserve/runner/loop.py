"""The interactive command loop.

Owns the current test path and decides, one input line at a time,
whether to re-run coverage with it, replace it, or stop.
"""

from __future__ import annotations

import logging
from typing import Callable

from covserve.domain.models import RunResult
from covserve.runner.coverage import CoverageRunner
from covserve.utils.console import printable, read_stdin_line

logger = logging.getLogger(__name__)


class CommandLoop:
    """Prompt -> run -> prompt, until the exit keyword or end of input.

    An empty line re-runs with the current test path, the exit keyword
    (exact, case-sensitive) stops the loop, and any other line becomes
    the new test path before running. Paths are not validated here;
    pytest reports bad ones through its own exit status.
    """

    def __init__(
        self,
        runner: CoverageRunner,
        default_test_path: str = ".",
        exit_keyword: str = "exit",
        read_line: Callable[[str], str] | None = None,
        prompt: str = "> ",
    ) -> None:
        self._runner = runner
        self._test_path = default_test_path
        self._exit_keyword = exit_keyword
        self._read_line = read_line
        self._prompt = prompt
        self._last_result: RunResult | None = None

    @property
    def test_path(self) -> str:
        return self._test_path

    @property
    def last_result(self) -> RunResult | None:
        return self._last_result

    def handle_line(self, line: str) -> bool:
        """Apply one line of input.

        Returns:
            False if the loop should terminate, True otherwise.
        """
        text = line.strip()
        if text == self._exit_keyword:
            return False
        if text:
            self._test_path = text
            print(f"Test path updated to: {printable(self._test_path)}")
        self._run_once()
        return True

    def run(self) -> int:
        """Run once with the default path, then serve the prompt.

        Returns:
            The process exit status (always 0).
        """
        logger.info("Command loop starting with test path %s", printable(self._test_path))
        self._run_once()

        print("Press Enter to run coverage tests with the current test path, or enter a new path")
        print(f"Type '{self._exit_keyword}' to quit")

        read_line = self._read_line or read_stdin_line
        while True:
            try:
                line = read_line(self._prompt)
            except EOFError:
                print()
                logger.info("End of input, stopping")
                break
            if not self.handle_line(line):
                break

        print("Goodbye!")
        return 0

    def _run_once(self) -> None:
        result = self._runner.run(self._test_path)
        self._last_result = result
        if not result.success:
            logger.info("Coverage run for %s failed, waiting for input", printable(result.test_path))
        print(f"Current test path: {printable(self._test_path)}")
