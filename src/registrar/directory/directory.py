"""CourseDirectory - Main API for course and roster operations."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import replace
from datetime import datetime

from registrar.directory.exceptions import (
    CourseFullError,
    DuplicateCourseError,
    InvalidCapacityError,
    UnknownCourseError,
)
from registrar.directory.models import CourseRecord, as_utc

logger = logging.getLogger(__name__)


class CourseDirectory:
    """Owns every CourseRecord and its roster.

    All reads and writes go through a single re-entrant lock. Callers that
    need a check-then-act sequence to be atomic (the registration engine)
    hold ``lock`` across the whole sequence.
    """

    def __init__(self) -> None:
        self._courses: dict[str, CourseRecord] = {}
        self.lock = threading.RLock()

    def __contains__(self, code: object) -> bool:
        with self.lock:
            return code in self._courses

    def __len__(self) -> int:
        with self.lock:
            return len(self._courses)

    def codes(self) -> Iterator[str]:
        """Iterate over course codes in creation order."""
        with self.lock:
            return iter(list(self._courses))

    # --- Course Operations ---

    def add_course(
        self,
        code: str,
        name: str,
        capacity: int,
        prerequisites: Iterable[str],
        deadline: datetime,
    ) -> CourseRecord:
        """Create a course with an empty roster.

        Args:
            code: Unique course code
            name: Display name
            capacity: Maximum number of enrolled students, must be >= 0
            prerequisites: Course codes required before registering
            deadline: Registration deadline (naive values are taken as UTC)

        Returns:
            Snapshot of the created CourseRecord

        Raises:
            DuplicateCourseError: If a course with the same code exists
            InvalidCapacityError: If capacity is negative
        """
        with self.lock:
            if code in self._courses:
                raise DuplicateCourseError(f"Course '{code}' already exists")
            if capacity < 0:
                raise InvalidCapacityError(
                    f"Capacity must be non-negative, got {capacity} for '{code}'"
                )

            record = CourseRecord(
                code=code,
                name=name,
                capacity=capacity,
                prerequisites=frozenset(prerequisites),
                deadline=as_utc(deadline),
            )
            self._courses[code] = record

        logger.info(
            "Added course %s (%s), capacity=%d, prerequisites=%s",
            code,
            name,
            capacity,
            sorted(record.prerequisites),
        )
        return self._snapshot(record)

    def lookup(self, code: str) -> CourseRecord:
        """Get a read-only snapshot of a course.

        Raises:
            UnknownCourseError: If course doesn't exist
        """
        with self.lock:
            return self._snapshot(self._get(code))

    # --- Roster Operations ---

    def enroll(self, code: str, student_id: str) -> None:
        """Add a student to a course roster without any policy checks.

        Only the registration engine calls this, after validation passed.

        Raises:
            UnknownCourseError: If course doesn't exist
            CourseFullError: If the insert would exceed capacity
        """
        with self.lock:
            record = self._get(code)
            if student_id in record.enrolled:
                return
            if record.is_full:
                raise CourseFullError(f"Course '{code}' is at capacity ({record.capacity})")
            record.enrolled.add(student_id)
        logger.debug("Roster %s += %s", code, student_id)

    def unenroll(self, code: str, student_id: str) -> None:
        """Undo an enroll whose commit could not be completed.

        Raises:
            UnknownCourseError: If course doesn't exist
        """
        with self.lock:
            self._get(code).enrolled.discard(student_id)
        logger.debug("Roster %s -= %s", code, student_id)

    def withdraw(self, code: str, student_id: str) -> bool:
        """Remove a student from a course roster.

        No deadline or state validation is performed.

        Returns:
            True if the student was removed, False if the course is unknown
            or the student was not enrolled
        """
        with self.lock:
            record = self._courses.get(code)
            if record is None or student_id not in record.enrolled:
                logger.info("Withdraw %s from %s: not enrolled", student_id, code)
                return False
            record.enrolled.discard(student_id)
        logger.info("Withdrew %s from %s", student_id, code)
        return True

    def roster(self, code: str) -> frozenset[str]:
        """Get the ids of students enrolled in a course.

        Raises:
            UnknownCourseError: If course doesn't exist
        """
        with self.lock:
            return frozenset(self._get(code).enrolled)

    def enrollment_count(self, code: str) -> int:
        """Get the number of students enrolled in a course.

        Raises:
            UnknownCourseError: If course doesn't exist
        """
        with self.lock:
            return self._get(code).enrollment_count

    def is_full(self, code: str) -> bool:
        """Check whether a course has reached capacity.

        Raises:
            UnknownCourseError: If course doesn't exist
        """
        with self.lock:
            return self._get(code).is_full

    # --- Internal Helpers ---

    def _get(self, code: str) -> CourseRecord:
        record = self._courses.get(code)
        if record is None:
            raise UnknownCourseError(f"Course '{code}' not found")
        return record

    @staticmethod
    def _snapshot(record: CourseRecord) -> CourseRecord:
        return replace(record, enrolled=set(record.enrolled))
