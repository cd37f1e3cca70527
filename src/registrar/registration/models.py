"""Data models for the Registration Engine."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable


class RegistrationOutcome(StrEnum):
    """Result of a well-formed registration attempt."""

    SUCCESS = "success"
    COURSE_FULL = "course_full"
    PREREQ_NOT_MET = "prereq_not_met"
    TIME_CONFLICT = "time_conflict"  # reserved, never returned
    ALREADY_ENROLLED = "already_enrolled"
    REGISTRATION_CLOSED = "registration_closed"


@runtime_checkable
class StudentRecord(Protocol):
    """What the engine needs from a student record."""

    id: str

    def get_enrolled_courses(self) -> list[str]: ...

    def enroll_in_course(self, code: str) -> bool: ...
