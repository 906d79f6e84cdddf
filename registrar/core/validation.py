"""
Boundary validators shared by the interactive shell and the REST models.
"""

import re

from .enums import StudentKind

__all__ = [
    "STUDENT_ID_PATTERN",
    "STUDENT_KIND_PATTERN",
    "COURSE_CODE_PATTERN",
    "is_valid_student_id",
    "is_valid_student_kind",
    "is_valid_course_code",
    "is_valid_record_key",
]

STUDENT_ID_PATTERN = r'^S[0-9]{3}$'
STUDENT_KIND_PATTERN = r'^(' + '|'.join(kind.value for kind in StudentKind) + r')$'
# No list delimiter, path separators or line breaks
COURSE_CODE_PATTERN = r'^[^;/\\\r\n]+$'

_STUDENT_ID_RE = re.compile(r'S[0-9]{3}')
_RECORD_KEY_RE = re.compile(r'[^;/\\\r\n]+')


def is_valid_student_id(student_id: str) -> bool:
    """Check the Sxxx format, e.g. S001."""
    return _STUDENT_ID_RE.fullmatch(student_id) is not None


def is_valid_student_kind(label: str) -> bool:
    return any(kind.value == label for kind in StudentKind)


def is_valid_record_key(key: str) -> bool:
    """Check that a key can be stored in a delimited list and used as a file name."""
    return _RECORD_KEY_RE.fullmatch(key) is not None and '..' not in key


def is_valid_course_code(course_code: str) -> bool:
    return is_valid_record_key(course_code)
