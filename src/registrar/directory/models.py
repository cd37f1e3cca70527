"""Data models for the Course Directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """Return an aware datetime, treating naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@dataclass
class CourseRecord:
    """A course definition together with its enrollment roster.

    Attributes:
        code: Unique course code (e.g. "CS201").
        name: Display name.
        capacity: Maximum number of simultaneously enrolled students.
        prerequisites: Course codes a student must have on record to register.
        deadline: Registration closes once the clock passes this point.
        enrolled: Ids of the students currently on the roster.
    """

    code: str
    name: str
    capacity: int
    prerequisites: frozenset[str]
    deadline: datetime
    enrolled: set[str] = field(default_factory=set)

    @property
    def enrollment_count(self) -> int:
        return len(self.enrolled)

    @property
    def seats_remaining(self) -> int:
        return max(0, self.capacity - len(self.enrolled))

    @property
    def is_full(self) -> bool:
        return len(self.enrolled) >= self.capacity

    def __repr__(self) -> str:
        return (
            f"<CourseRecord(code={self.code!r}, enrolled={len(self.enrolled)}, "
            f"capacity={self.capacity})>"
        )
