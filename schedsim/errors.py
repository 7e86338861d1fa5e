"""
Exceptions raised by the scheduling engine.

Every input problem is reported before a simulation starts, so callers
never receive a partial schedule.
"""

from __future__ import annotations

from typing import Any, Optional


class SchedulerError(ValueError):
    """Base class for all scheduler errors."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.field and self.value is not None:
            return f"{self.message} ({self.field}={self.value!r})"
        if self.field:
            return f"{self.message} ({self.field})"
        return self.message


class InvalidProcessError(SchedulerError):
    """A process has a bad burst, arrival or priority, or a duplicate pid."""


class InvalidAlgorithmError(SchedulerError):
    """The algorithm selector is not one of the known variants."""


class InvalidQuantumError(SchedulerError):
    """Round Robin was requested without a positive integer quantum."""


class IncompleteScheduleError(SchedulerError):
    """An algorithm finished without recording a completion for some process."""
