"""Student record model."""

from __future__ import annotations

import logging
import re
from enum import StrEnum

from registrar.students.exceptions import (
    CourseLoadExceededError,
    InvalidCGPAError,
    InvalidStudentIdError,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_COURSES = 6
MIN_CGPA = 0.0
MAX_CGPA = 10.0

_STUDENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


class AcademicStanding(StrEnum):
    """Academic standing derived from CGPA."""

    EXCELLENT = "excellent"  # >= 9.0
    GOOD = "good"  # >= 7.0
    SATISFACTORY = "satisfactory"  # >= 5.0
    PROBATION = "probation"  # < 5.0


class Student:
    """A student and the courses they have taken or are taking.

    Satisfies the StudentRecord contract expected by the registration
    engine. The course list is append-only.
    """

    def __init__(
        self,
        student_id: str,
        name: str,
        department: str,
        max_courses: int = DEFAULT_MAX_COURSES,
    ) -> None:
        """Initialize a student record.

        Args:
            student_id: Unique id, letters/digits with optional '-' or '_'
            name: Full name
            department: Department the student belongs to
            max_courses: Maximum number of courses the record can hold

        Raises:
            InvalidStudentIdError: If student_id is malformed
        """
        if not _STUDENT_ID_PATTERN.match(student_id):
            raise InvalidStudentIdError(f"Invalid student id: {student_id!r}")
        self.id = student_id
        self.name = name
        self.department = department
        self.max_courses = max_courses
        self.cgpa = 0.0
        self.semester = 1
        self._courses: list[str] = []

    def get_enrolled_courses(self) -> list[str]:
        """Get the course codes on record, in enrollment order."""
        return list(self._courses)

    def enroll_in_course(self, code: str) -> bool:
        """Append a course code to the record.

        Returns:
            True if added, False if the code was already on record

        Raises:
            CourseLoadExceededError: If the record already holds max_courses codes
        """
        if code in self._courses:
            return False
        if len(self._courses) >= self.max_courses:
            raise CourseLoadExceededError(
                f"Student {self.id} already holds {self.max_courses} courses"
            )
        self._courses.append(code)
        return True

    def update_cgpa(self, value: float) -> None:
        """Set the CGPA.

        Raises:
            InvalidCGPAError: If value is outside 0.0 - 10.0
        """
        if not MIN_CGPA <= value <= MAX_CGPA:
            raise InvalidCGPAError(f"CGPA must be between {MIN_CGPA} and {MAX_CGPA}, got {value}")
        self.cgpa = value

    @property
    def academic_standing(self) -> AcademicStanding:
        if self.cgpa >= 9.0:
            return AcademicStanding.EXCELLENT
        if self.cgpa >= 7.0:
            return AcademicStanding.GOOD
        if self.cgpa >= 5.0:
            return AcademicStanding.SATISFACTORY
        return AcademicStanding.PROBATION

    def advance_to_next_semester(self) -> bool:
        """Move to the next semester unless on probation."""
        if self.academic_standing is AcademicStanding.PROBATION:
            logger.info("Student %s on probation, semester not advanced", self.id)
            return False
        self.semester += 1
        return True

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, name={self.name!r}, semester={self.semester})>"
