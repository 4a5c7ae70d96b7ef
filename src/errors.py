"""Exceptions raised by the planner core.

The CLI catches these and prints a one-line message; persistence errors are
recovered inside the planner itself.
"""
from __future__ import annotations


class PlannerError(Exception):
    """Base class for planner errors."""


class TaskNotFoundError(PlannerError, LookupError):
    def __init__(self, task_id: str):
        super().__init__(f'Task id {task_id} not found.')
        self.task_id = task_id


class DecodeFailure(PlannerError, ValueError):
    """Persisted bytes could not be decoded."""


class InvalidDateError(PlannerError, ValueError):
    """Birthdate rejected (for example, a date in the future)."""
