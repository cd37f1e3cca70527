"""Shared pytest fixtures and configuration."""

from datetime import UTC, datetime, timedelta

import pytest

from registrar.directory import CourseDirectory
from registrar.students import Student

NOW = datetime(2026, 8, 15, 12, 0, tzinfo=UTC)


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


class FakeClock:
    """Settable clock for deadline tests."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def clock() -> FakeClock:
    """Clock fixed at NOW."""
    return FakeClock()


@pytest.fixture
def directory() -> CourseDirectory:
    """Empty course directory."""
    return CourseDirectory()


@pytest.fixture
def make_student():
    """Factory for students with an optional course history."""

    def _make(student_id: str, *courses: str, max_courses: int = 6) -> Student:
        student = Student(student_id, f"Student {student_id}", "CS", max_courses=max_courses)
        for code in courses:
            student.enroll_in_course(code)
        return student

    return _make
