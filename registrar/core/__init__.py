"""
Core module containing the entity model, enumerations and exceptions.
"""

from .entities import *
from .exceptions import *
from .enums import *
from .validation import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Student",
    "Course",

    # Enums
    "StudentKind",
    "ResultStatus",
    "ReportType",

    # Exceptions
    "RegistrarException",
    "ValidationError",
    "ResourceNotFoundError",
    "DuplicateEntityError",
    "EnrollmentError",
    "PersistenceError",
    "MalformedRecordError",
    "ConfigurationError",

    # Validation
    "STUDENT_ID_PATTERN",
    "STUDENT_KIND_PATTERN",
    "is_valid_student_id",
    "is_valid_student_kind",
    "COURSE_CODE_PATTERN",
    "is_valid_course_code",
    "is_valid_record_key",
]
