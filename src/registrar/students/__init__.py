"""Students - Concrete student records used by the registration engine."""

from registrar.students.exceptions import (
    CourseLoadExceededError,
    InvalidCGPAError,
    InvalidStudentIdError,
    StudentError,
)
from registrar.students.models import DEFAULT_MAX_COURSES, AcademicStanding, Student

__all__ = [
    "DEFAULT_MAX_COURSES",
    "AcademicStanding",
    "CourseLoadExceededError",
    "InvalidCGPAError",
    "InvalidStudentIdError",
    "Student",
    "StudentError",
]
