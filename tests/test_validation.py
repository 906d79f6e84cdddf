import pytest

import registrar.core as core
from registrar.core.validation import is_valid_course_code, is_valid_student_id


@pytest.mark.parametrize("student_id, expected", [
    ("S001", True),
    ("S999", True),
    ("S001\n", False),
    ("S01", False),
    ("s001", False),
    ("S0011", False),
])
def test_student_id_format(student_id, expected):
    assert is_valid_student_id(student_id) is expected


@pytest.mark.parametrize("course_code, expected", [
    ("CSE101", True),
    ("Intro, Part 1", True),
    ("A;B", False),
    ("a/b", False),
    ("a\\b", False),
    ("../x", False),
    ("CSE101\n", False),
    ("", False),
])
def test_course_code_format(course_code, expected):
    assert is_valid_course_code(course_code) is expected


def test_core_exports_only_public_names():
    for leaked in ("re", "ABC", "Enum", "Dict"):
        assert not hasattr(core, leaked)
    assert "is_valid_course_code" in core.__all__
