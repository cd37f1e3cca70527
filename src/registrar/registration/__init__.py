"""Registration Engine - Decides and commits course registrations."""

from registrar.registration.engine import RegistrationEngine
from registrar.registration.models import RegistrationOutcome, StudentRecord

__all__ = [
    "RegistrationEngine",
    "RegistrationOutcome",
    "StudentRecord",
]
