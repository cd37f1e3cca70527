"""Custom exceptions for student records."""


class StudentError(Exception):
    """Base exception for student record errors."""


class InvalidStudentIdError(StudentError):
    """Student id is empty or malformed."""


class InvalidCGPAError(StudentError):
    """CGPA is outside the 0.0 - 10.0 scale."""


class CourseLoadExceededError(StudentError):
    """Student already holds the maximum number of courses."""
