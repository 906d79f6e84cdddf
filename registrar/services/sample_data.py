"""
Deterministic sample data for demonstrations and tests.
"""

from typing import List

from .registry import Registry, OperationResult

# (name, student_id, kind)
SAMPLE_STUDENTS = [
    ("Alice Johnson", "S001", "Undergraduate"),
    ("Bob Smith", "S002", "Postgraduate"),
    ("Charlie Brown", "S003", "Undergraduate"),
    ("David Williams", "S004", "Undergraduate"),
    ("Eve Davis", "S005", "Postgraduate"),
]

# (name, course_code)
SAMPLE_COURSES = [
    ("Introduction to Programming", "CSE101"),
    ("Data Structures", "CSE102"),
    ("Algorithms", "CSE103"),
    ("Operating Systems", "CSE104"),
]

# (student_id, course_code)
SAMPLE_ENROLLMENTS = [
    ("S001", "CSE101"),
    ("S001", "CSE102"),
    ("S002", "CSE101"),
    ("S003", "CSE103"),
    ("S004", "CSE104"),
    ("S005", "CSE101"),
    ("S005", "CSE102"),
    ("S005", "CSE104"),
]


def populate_sample_data(registry: Registry) -> List[OperationResult]:
    """Add the sample students, courses and enrollments to a registry.

    Running it against a registry that already holds the sample keys is
    harmless: the duplicate adds and enrollments are reported in the
    returned results and nothing else changes.
    """
    results = []
    for name, student_id, kind in SAMPLE_STUDENTS:
        results.append(registry.add_student(name, student_id, kind))
    for name, course_code in SAMPLE_COURSES:
        results.append(registry.add_course(name, course_code))
    for student_id, course_code in SAMPLE_ENROLLMENTS:
        results.append(registry.enroll(student_id, course_code))
    return results
