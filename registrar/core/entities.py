"""
Core entities for the registrar: students, courses and their cross-references.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .enums import StudentKind

__all__ = ["AbstractEntity", "Student", "Course"]


class AbstractEntity(ABC):
    """Base abstract entity identified by an externally supplied key."""

    def __init__(self, name: str):
        self._name = name

    @property
    @abstractmethod
    def key(self) -> str:
        """Primary key of the entity within its collection."""
        pass

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.key})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r}, name={self._name!r})"


class Student(AbstractEntity):
    """Student entity with an ordered transcript of course codes."""

    def __init__(self, name: str, student_id: str, kind: StudentKind):
        super().__init__(name)
        self._student_id = student_id
        self._kind = kind
        self._enrolled_course_codes: List[str] = []

    @property
    def key(self) -> str:
        return self._student_id

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def kind(self) -> StudentKind:
        return self._kind

    @property
    def enrolled_course_codes(self) -> List[str]:
        return self._enrolled_course_codes.copy()

    def is_enrolled_in(self, course_code: str) -> bool:
        return course_code in self._enrolled_course_codes

    def add_course(self, course_code: str) -> bool:
        """Add a course code to the transcript; False if already present."""
        if course_code in self._enrolled_course_codes:
            return False
        self._enrolled_course_codes.append(course_code)
        return True

    def remove_course(self, course_code: str) -> bool:
        """Remove a course code from the transcript; False if it was absent."""
        if course_code not in self._enrolled_course_codes:
            return False
        self._enrolled_course_codes.remove(course_code)
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        return {
            'student_id': self._student_id,
            'name': self._name,
            'kind': self._kind.value,
            'enrolled_course_codes': list(self._enrolled_course_codes),
        }


class Course(AbstractEntity):
    """Course entity with an ordered roster of student ids."""

    def __init__(self, name: str, course_code: str):
        super().__init__(name)
        self._course_code = course_code
        self._enrolled_student_ids: List[str] = []

    @property
    def key(self) -> str:
        return self._course_code

    @property
    def course_code(self) -> str:
        return self._course_code

    @property
    def enrolled_student_ids(self) -> List[str]:
        return self._enrolled_student_ids.copy()

    @property
    def enrolled_count(self) -> int:
        return len(self._enrolled_student_ids)

    def has_student(self, student_id: str) -> bool:
        return student_id in self._enrolled_student_ids

    def add_student(self, student_id: str) -> bool:
        """Add a student id to the roster; False if already present."""
        if student_id in self._enrolled_student_ids:
            return False
        self._enrolled_student_ids.append(student_id)
        return True

    def remove_student(self, student_id: str) -> bool:
        """Remove a student id from the roster; False if it was absent."""
        if student_id not in self._enrolled_student_ids:
            return False
        self._enrolled_student_ids.remove(student_id)
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        return {
            'course_code': self._course_code,
            'name': self._name,
            'enrolled_student_ids': list(self._enrolled_student_ids),
        }
