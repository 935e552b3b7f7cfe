# src/priority_tasks/tasks/validation.py

"""
Task input validation.

Returns an explicit result instead of raising: the caller checks `ok` before
building a Task. Checks run in a fixed order and the first failure wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from .task_models import Priority

DEFAULT_TITLE_MIN_LENGTH = 3
DEFAULT_DESCRIPTION_MAX_LENGTH = 500


class ValidationErrorKind(StrEnum):
    TITLE_TOO_SHORT = "title_too_short"
    DESCRIPTION_TOO_LONG = "description_too_long"
    DUE_DATE_MISSING = "due_date_missing"
    DUE_DATE_INVALID = "due_date_invalid"
    DUE_DATE_IN_PAST = "due_date_in_past"
    PRIORITY_INVALID = "priority_invalid"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    kind: ValidationErrorKind | None
    message: str = ""
    due: date | None = None
    priority: int | None = None

    @property
    def ok(self) -> bool:
        return self.kind is None


def _fail(kind: ValidationErrorKind, message: str) -> ValidationResult:
    return ValidationResult(kind=kind, message=message)


def parse_priority(raw: object) -> int | None:
    """Return a valid Priority value or None."""
    if isinstance(raw, bool):
        return None
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    try:
        return int(Priority(value))
    except ValueError:
        return None


def validate_task_input(
    title: str,
    description: str,
    due_date: str | None,
    priority: object,
    *,
    today: date,
    title_min_length: int = DEFAULT_TITLE_MIN_LENGTH,
    description_max_length: int = DEFAULT_DESCRIPTION_MAX_LENGTH,
) -> ValidationResult:
    if len((title or "").strip()) < title_min_length:
        return _fail(
            ValidationErrorKind.TITLE_TOO_SHORT,
            f"Task title must be at least {title_min_length} characters long",
        )

    if len((description or "").strip()) > description_max_length:
        return _fail(
            ValidationErrorKind.DESCRIPTION_TOO_LONG,
            f"Description cannot exceed {description_max_length} characters",
        )

    raw_due = (due_date or "").strip()
    if not raw_due:
        return _fail(ValidationErrorKind.DUE_DATE_MISSING, "Due date is required")

    try:
        due = date.fromisoformat(raw_due)
    except ValueError:
        return _fail(ValidationErrorKind.DUE_DATE_INVALID, "Due date must be a YYYY-MM-DD date")

    if due < today:
        return _fail(ValidationErrorKind.DUE_DATE_IN_PAST, "Due date cannot be in the past!")

    prio = parse_priority(priority)
    if prio is None:
        choices = ", ".join(str(int(p)) for p in Priority)
        return _fail(ValidationErrorKind.PRIORITY_INVALID, f"Priority must be one of {choices}")

    return ValidationResult(kind=None, due=due, priority=prio)
