"""Command-line interface for covserve.

Starts the report server in the background and hands the terminal to
the interactive coverage prompt. Run without arguments for the default
behavior: serve ``htmlcov`` on http://localhost:8080 and test ``.``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from covserve.config.settings import Settings
from covserve.reports import ensure_placeholder_index, ensure_report_dir
from covserve.runner.coverage import CoverageRunner, locate_interpreter
from covserve.runner.loop import CommandLoop
from covserve.server.background import ReportServer, ServerBindError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="covserve",
        description="Serve HTML coverage reports and re-run coverage on demand",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/covserve.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def run(settings: Settings) -> int:
    """Start the server and the prompt; return the process exit status."""
    python_path = locate_interpreter(settings.runner.python)
    if python_path:
        print(f"Python interpreter path: {python_path}")
    else:
        print(f"Python interpreter '{settings.runner.python}' not found on PATH")

    srv = settings.server
    ensure_report_dir(srv.directory)
    if srv.placeholder_index:
        ensure_placeholder_index(srv.directory)

    log_level = "debug" if settings.logging.level.upper() == "DEBUG" else "warning"
    server = ReportServer(
        directory=srv.directory,
        host=srv.host,
        port=srv.port,
        log_level=log_level,
    )
    try:
        server.start()
    except ServerBindError as e:
        logger.error("HTTP server failed to start: %s", e)
        print(f"HTTP server error: {e}", file=sys.stderr)
        return 1

    print(f"Starting HTTP server on {server.url}")
    print("Navigate to this URL to view coverage reports")

    runner = CoverageRunner(python=settings.runner.python, directory=srv.directory)
    loop = CommandLoop(
        runner=runner,
        default_test_path=settings.runner.default_test_path,
        exit_keyword=settings.runner.exit_keyword,
    )
    try:
        return loop.run()
    except KeyboardInterrupt:
        print("\nReceived Ctrl+C, shutting down...")
        return 0
    finally:
        server.stop()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the covserve CLI."""
    args = parse_args(argv)

    from covserve.config.settings import load_settings
    from covserve.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    sys.exit(run(settings))


if __name__ == "__main__":
    main()
