"""Custom exceptions for the Course Directory."""


class DirectoryError(Exception):
    """Base exception for Course Directory errors."""


class DuplicateCourseError(DirectoryError):
    """Course with given code already exists."""


class InvalidCapacityError(DirectoryError):
    """Course capacity is negative."""


class UnknownCourseError(DirectoryError):
    """Course with given code does not exist."""


class CourseFullError(DirectoryError):
    """Roster insert would exceed course capacity."""
