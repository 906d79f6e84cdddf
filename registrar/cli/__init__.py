"""
Interactive console shell for the registrar.
"""

from .prompts import CANCELLED, read_non_empty, read_student_id, read_student_kind, read_course_code, read_choice
from .shell import InteractiveShell

__all__ = [
    "CANCELLED",
    "InteractiveShell",
    "read_non_empty",
    "read_student_id",
    "read_student_kind",
    "read_course_code",
    "read_choice",
]
