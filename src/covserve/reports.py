"""Preparation of the coverage report directory.

The directory has to exist before the static file server mounts it.
Optionally a placeholder ``index.html`` tells the visitor that no
report has been generated yet.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PLACEHOLDER_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Coverage Report</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 0; padding: 20px; color: #333; }
        .container { max-width: 800px; margin: 0 auto; background-color: #f9f9f9; padding: 20px; }
        .message { background-color: #e7f2fa; border-left: 4px solid #3498db; padding: 15px; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Coverage Report Placeholder</h1>
        <div class="message">
            <p>No coverage reports have been generated yet.</p>
            <p>Press Enter in the terminal to run the coverage tests,
               then refresh this page.</p>
        </div>
    </div>
</body>
</html>
"""


def ensure_report_dir(directory: Path | str) -> Path:
    """Create the report directory if it does not exist yet."""
    path = Path(directory)
    if not path.exists():
        logger.info("Creating directory: %s", path)
        path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_placeholder_index(directory: Path | str) -> bool:
    """Write a placeholder index.html unless one already exists.

    Returns:
        True if a placeholder was written.
    """
    index_path = ensure_report_dir(directory) / "index.html"
    if index_path.exists():
        return False
    logger.info("Creating placeholder index.html in %s", index_path.parent)
    index_path.write_text(PLACEHOLDER_HTML, encoding="utf-8")
    return True
