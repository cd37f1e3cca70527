"""Unit tests for the Student record."""

import pytest

from registrar.students import (
    DEFAULT_MAX_COURSES,
    AcademicStanding,
    CourseLoadExceededError,
    InvalidCGPAError,
    InvalidStudentIdError,
    Student,
)


@pytest.fixture
def student() -> Student:
    return Student("S2025-001", "Ada Lovelace", "Mathematics")


@pytest.mark.unit
class TestCreateStudent:
    """Tests for Student construction."""

    def test_defaults(self, student: Student) -> None:
        assert student.id == "S2025-001"
        assert student.name == "Ada Lovelace"
        assert student.department == "Mathematics"
        assert student.cgpa == 0.0
        assert student.semester == 1
        assert student.max_courses == DEFAULT_MAX_COURSES
        assert student.get_enrolled_courses() == []

    @pytest.mark.parametrize("bad_id", ["", " S1", "-S1", "S 1", "S1!"])
    def test_invalid_id_raises(self, bad_id: str) -> None:
        with pytest.raises(InvalidStudentIdError):
            Student(bad_id, "Name", "Dept")


@pytest.mark.unit
class TestEnrollInCourse:
    """Tests for enroll_in_course and get_enrolled_courses."""

    def test_enroll_appends_in_order(self, student: Student) -> None:
        assert student.enroll_in_course("CS101") is True
        assert student.enroll_in_course("MATH101") is True

        assert student.get_enrolled_courses() == ["CS101", "MATH101"]

    def test_enroll_duplicate_returns_false(self, student: Student) -> None:
        student.enroll_in_course("CS101")

        assert student.enroll_in_course("CS101") is False
        assert student.get_enrolled_courses() == ["CS101"]

    def test_enroll_beyond_limit_raises(self) -> None:
        student = Student("S1", "Name", "Dept", max_courses=2)
        student.enroll_in_course("A")
        student.enroll_in_course("B")

        with pytest.raises(CourseLoadExceededError):
            student.enroll_in_course("C")
        assert student.get_enrolled_courses() == ["A", "B"]

    def test_get_enrolled_courses_returns_copy(self, student: Student) -> None:
        student.enroll_in_course("CS101")
        student.get_enrolled_courses().append("HACK")

        assert student.get_enrolled_courses() == ["CS101"]


@pytest.mark.unit
class TestAcademicStanding:
    """Tests for CGPA and academic standing."""

    @pytest.mark.parametrize(
        ("cgpa", "standing"),
        [
            (10.0, AcademicStanding.EXCELLENT),
            (9.0, AcademicStanding.EXCELLENT),
            (8.99, AcademicStanding.GOOD),
            (7.0, AcademicStanding.GOOD),
            (5.0, AcademicStanding.SATISFACTORY),
            (4.99, AcademicStanding.PROBATION),
            (0.0, AcademicStanding.PROBATION),
        ],
    )
    def test_standing_thresholds(
        self, student: Student, cgpa: float, standing: AcademicStanding
    ) -> None:
        student.update_cgpa(cgpa)

        assert student.academic_standing is standing

    @pytest.mark.parametrize("cgpa", [-0.1, 10.1])
    def test_update_cgpa_out_of_range(self, student: Student, cgpa: float) -> None:
        student.update_cgpa(6.0)

        with pytest.raises(InvalidCGPAError):
            student.update_cgpa(cgpa)
        assert student.cgpa == 6.0


@pytest.mark.unit
class TestAdvanceSemester:
    """Tests for advance_to_next_semester."""

    def test_advance_in_good_standing(self, student: Student) -> None:
        student.update_cgpa(7.5)

        assert student.advance_to_next_semester() is True
        assert student.semester == 2

    def test_probation_blocks_advance(self, student: Student) -> None:
        student.update_cgpa(3.0)

        assert student.advance_to_next_semester() is False
        assert student.semester == 1
