"""Configuration loading for Registrar."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from registrar.directory import CourseDirectory
from registrar.directory.models import as_utc
from registrar.logging import DEFAULT_LOG_DIR, DEFAULT_LOG_LEVEL, setup_logging
from registrar.students import DEFAULT_MAX_COURSES, Student

if TYPE_CHECKING:
    import logging

CONFIG_FILENAME = "registrar.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class LoggingConfig:
    """Logging settings applied by RegistrarConfig.setup_logging."""

    level: str = DEFAULT_LOG_LEVEL
    log_dir: str = DEFAULT_LOG_DIR
    console: bool = True


@dataclass
class StudentsConfig:
    """Defaults for student records."""

    max_courses: int = DEFAULT_MAX_COURSES


@dataclass
class CourseConfig:
    """A course to seed into the directory."""

    code: str
    name: str
    capacity: int
    deadline: datetime
    prerequisites: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CourseConfig:
        """Create a course entry from a YAML mapping.

        Raises:
            ConfigError: If required fields are missing or malformed.
        """
        required_fields = ["code", "name", "capacity", "deadline"]
        missing = [f for f in required_fields if f not in data]
        if missing:
            raise ConfigError(f"Course entry missing required fields: {', '.join(missing)}")

        capacity = data["capacity"]
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise ConfigError(f"Course '{data['code']}' capacity must be an integer")

        prerequisites = data.get("prerequisites") or []
        if not isinstance(prerequisites, list):
            raise ConfigError(f"Course '{data['code']}' prerequisites must be a list")

        return cls(
            code=str(data["code"]),
            name=str(data["name"]),
            capacity=capacity,
            deadline=_parse_deadline(data["code"], data["deadline"]),
            prerequisites=[str(p) for p in prerequisites],
        )


@dataclass
class RegistrarConfig:
    """Registrar configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    students: StudentsConfig = field(default_factory=StudentsConfig)
    courses: list[CourseConfig] = field(default_factory=list)
    root_path: Path = field(default_factory=Path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> RegistrarConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Root directory containing the config file.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a section is malformed.
        """
        logging_data = _section(data, "logging")
        console = logging_data.get("console", True)
        if not isinstance(console, bool):
            raise ConfigError(f"'logging.console' must be true or false, got {console!r}")
        logging_config = LoggingConfig(
            level=str(logging_data.get("level", DEFAULT_LOG_LEVEL)),
            log_dir=str(logging_data.get("log_dir", DEFAULT_LOG_DIR)),
            console=console,
        )

        students_data = _section(data, "students")
        max_courses = students_data.get("max_courses", DEFAULT_MAX_COURSES)
        if not isinstance(max_courses, int) or isinstance(max_courses, bool) or max_courses < 1:
            raise ConfigError(
                f"'students.max_courses' must be a positive integer, got {max_courses!r}"
            )
        students = StudentsConfig(max_courses=max_courses)

        courses_data = data.get("courses") or []
        if not isinstance(courses_data, list):
            raise ConfigError("'courses' must be a list")
        courses = []
        for entry in courses_data:
            if not isinstance(entry, dict):
                raise ConfigError(f"Course entry must be a mapping, got {type(entry).__name__}")
            courses.append(CourseConfig.from_dict(entry))

        return cls(
            logging=logging_config,
            students=students,
            courses=courses,
            root_path=root_path,
        )

    def get_log_dir(self) -> Path:
        """Get the log directory, relative paths resolved against root_path."""
        log_dir = Path(self.logging.log_dir)
        if log_dir.is_absolute():
            return log_dir
        return self.root_path / log_dir

    def setup_logging(self) -> logging.Logger:
        """Configure the registrar logger from the logging section.

        Returns:
            The root registrar logger.
        """
        return setup_logging(
            log_dir=self.get_log_dir(),
            level=self.logging.level,
            console=self.logging.console,
        )

    def build_directory(self) -> CourseDirectory:
        """Create a CourseDirectory seeded with the configured courses.

        Raises:
            DuplicateCourseError: If two entries share a code.
            InvalidCapacityError: If an entry has a negative capacity.
        """
        directory = CourseDirectory()
        for course in self.courses:
            directory.add_course(
                code=course.code,
                name=course.name,
                capacity=course.capacity,
                prerequisites=course.prerequisites,
                deadline=course.deadline,
            )
        return directory

    def new_student(self, student_id: str, name: str, department: str) -> Student:
        """Create a Student using the configured course load limit."""
        return Student(student_id, name, department, max_courses=self.students.max_courses)


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping, got {type(section).__name__}")
    return section


def _parse_deadline(code: Any, value: Any) -> datetime:
    # PyYAML already turns ISO timestamps into datetime/date objects
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, date):
        return as_utc(datetime.combine(value, time.max))
    if isinstance(value, str):
        try:
            return as_utc(datetime.fromisoformat(value))
        except ValueError as e:
            raise ConfigError(f"Course '{code}' has invalid deadline {value!r}") from e
    raise ConfigError(f"Course '{code}' has invalid deadline {value!r}")


def load_config(config_path: Path | str) -> RegistrarConfig:
    """Load Registrar configuration from a YAML file.

    Args:
        config_path: Path to registrar.yaml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return RegistrarConfig.from_dict(data, config_path.parent)


def find_config(start_path: Path | str | None = None) -> Path:
    """Find registrar.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to registrar.yaml file.

    Raises:
        ConfigError: If no config file is found.
    """
    start_path = Path.cwd() if start_path is None else Path(start_path)

    current = start_path.resolve()
    while True:
        config_path = current / CONFIG_FILENAME
        if config_path.exists():
            return config_path
        if current == current.parent:
            break
        current = current.parent

    raise ConfigError(f"No {CONFIG_FILENAME} found in {start_path} or any parent directory")
