"""
Persistence module for the flat delimited text files.
"""

from .csv_store import (
    CsvStore, LoadSummary, StudentRecord, CourseRecord,
    STUDENTS_HEADER, COURSES_HEADER
)

__all__ = [
    "CsvStore",
    "LoadSummary",
    "StudentRecord",
    "CourseRecord",
    "STUDENTS_HEADER",
    "COURSES_HEADER",
]
