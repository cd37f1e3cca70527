"""RegistrationEngine - Validates and commits registration attempts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from registrar.directory.models import as_utc
from registrar.registration.models import RegistrationOutcome, StudentRecord

if TYPE_CHECKING:
    from registrar.directory import CourseDirectory, CourseRecord

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Default engine clock."""
    return datetime.now(UTC)


class RegistrationEngine:
    """Decides whether a student may register for a course.

    Checks run in a fixed order and the first failing check decides the
    outcome:

        deadline -> already enrolled -> capacity -> prerequisites

    Only when every check passes is the enrollment committed, to the course
    roster and to the student's record. The directory lock is held across
    the whole validate-then-commit sequence.
    """

    def __init__(
        self,
        directory: CourseDirectory,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the RegistrationEngine.

        Args:
            directory: CourseDirectory owning the course records.
            clock: Returns the current time. Naive values are taken as UTC.
        """
        self.directory = directory
        self.clock = clock

    def register(self, student: StudentRecord, code: str) -> RegistrationOutcome:
        """Attempt to register a student for a course.

        Args:
            student: Record supplying the student's id and course history.
            code: Code of the course to register for.

        Returns:
            The RegistrationOutcome of the attempt.

        Raises:
            UnknownCourseError: If the course doesn't exist.
        """
        with self.directory.lock:
            course = self.directory.lookup(code)
            outcome = self._evaluate(student, course)
            if outcome is RegistrationOutcome.SUCCESS:
                self._commit(student, code)

        logger.info("Registration %s -> %s: %s", student.id, code, outcome.value)
        return outcome

    def withdraw(self, student_id: str, code: str) -> bool:
        """Withdraw a student from a course. See CourseDirectory.withdraw."""
        return self.directory.withdraw(code, student_id)

    def check_prerequisites(self, student: StudentRecord, code: str) -> bool:
        """Check whether the student's record holds every prerequisite.

        Raises:
            UnknownCourseError: If the course doesn't exist.
        """
        return not self.missing_prerequisites(student, code)

    def missing_prerequisites(self, student: StudentRecord, code: str) -> frozenset[str]:
        """Get the prerequisites of a course absent from the student's record.

        Raises:
            UnknownCourseError: If the course doesn't exist.
        """
        course = self.directory.lookup(code)
        return self._missing(student, course)

    def _evaluate(self, student: StudentRecord, course: CourseRecord) -> RegistrationOutcome:
        if as_utc(self.clock()) > course.deadline:
            return RegistrationOutcome.REGISTRATION_CLOSED
        if student.id in course.enrolled:
            return RegistrationOutcome.ALREADY_ENROLLED
        if course.is_full:
            return RegistrationOutcome.COURSE_FULL

        missing = self._missing(student, course)
        if missing:
            logger.debug("Student %s missing prerequisites %s", student.id, sorted(missing))
            return RegistrationOutcome.PREREQ_NOT_MET
        return RegistrationOutcome.SUCCESS

    def _commit(self, student: StudentRecord, code: str) -> None:
        self.directory.enroll(code, student.id)
        try:
            added = student.enroll_in_course(code)
        except Exception:
            self.directory.unenroll(code, student.id)
            logger.warning(
                "Student %s refused %s, roster entry rolled back", student.id, code
            )
            raise
        if not added:
            logger.warning("Student %s already had %s on record", student.id, code)

    @staticmethod
    def _missing(student: StudentRecord, course: CourseRecord) -> frozenset[str]:
        # Currently-enrolled courses count toward prerequisites
        taken = set(student.get_enrolled_courses())
        return frozenset(course.prerequisites - taken)
