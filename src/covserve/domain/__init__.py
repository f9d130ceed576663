"""Domain models shared by the covserve components."""

from covserve.domain.models import RunResult, ServerStatus

__all__ = ["RunResult", "ServerStatus"]
