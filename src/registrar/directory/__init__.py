"""Course Directory - Owns course definitions and enrollment rosters."""

from registrar.directory.directory import CourseDirectory
from registrar.directory.exceptions import (
    CourseFullError,
    DirectoryError,
    DuplicateCourseError,
    InvalidCapacityError,
    UnknownCourseError,
)
from registrar.directory.models import CourseRecord

__all__ = [
    "CourseDirectory",
    "CourseFullError",
    "CourseRecord",
    "DirectoryError",
    "DuplicateCourseError",
    "InvalidCapacityError",
    "UnknownCourseError",
]
