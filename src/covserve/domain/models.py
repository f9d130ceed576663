"""Domain models for covserve.

Describes the outcome of a coverage invocation and the status payload
reported by the report server.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel


@dataclass
class RunResult:
    """Outcome of one ``coverage run`` + ``coverage html`` invocation.

    ``returncode`` is the exit code of the last step that ran, which is
    the failing one when the chain stopped early. It is None when the
    executable could not be launched at all.

    ``test_path`` may hold surrogate escapes, which pydantic str fields
    reject.
    """

    test_path: str
    commands: list[list[str]]
    returncode: int | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.returncode == 0 and self.error is None


class ServerStatus(BaseModel):
    status: str = "ok"
    directory: str
    index_present: bool = False
