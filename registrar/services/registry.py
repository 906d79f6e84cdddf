"""
Registry service owning all students and courses and their enrollments.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Mapping, Optional, TypeVar, Union

from ..core.entities import Student, Course
from ..core.enums import StudentKind, ResultStatus
from ..core.exceptions import (
    ValidationError, ResourceNotFoundError, DuplicateEntityError,
    EnrollmentError, PersistenceError
)
from ..core.validation import is_valid_course_code

T = TypeVar('T')

_STATUS_ERRORS = {
    ResultStatus.DUPLICATE_KEY: DuplicateEntityError,
    ResultStatus.NOT_FOUND: ResourceNotFoundError,
    ResultStatus.INVALID_ARGUMENT: ValidationError,
    ResultStatus.ALREADY_ENROLLED: EnrollmentError,
    ResultStatus.IO_FAILURE: PersistenceError,
}


@dataclass
class OperationResult:
    """Result of a registry, report or export operation."""
    success: bool
    status: ResultStatus
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, **details) -> "OperationResult":
        return cls(True, ResultStatus.OK, message, details)

    @classmethod
    def failure(cls, status: ResultStatus, message: str, **details) -> "OperationResult":
        return cls(False, status, message, details)

    def raise_for_status(self) -> "OperationResult":
        """Raise the exception matching a failed status, else return self."""
        if self.success:
            return self
        error_class = _STATUS_ERRORS[self.status]
        raise error_class(self.message, error_code=self.status.value, details=self.details)


class RecordView(Generic[T]):
    """Lazy, restartable view over a snapshot of registry records."""

    def __init__(self, source: Callable[[], Iterable[T]]):
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source())

    def __len__(self) -> int:
        return sum(1 for _ in self._source())

    def __bool__(self) -> bool:
        return any(True for _ in self._source())


class Registry:
    """Sole owner of the student and course collections.

    Keeps student ids and course codes unique and keeps every transcript in
    step with every roster: a course code is on a student's transcript if and
    only if that student's id is on the course roster.
    """

    def __init__(self):
        self._students: Dict[str, Student] = {}
        self._courses: Dict[str, Course] = {}
        self._lock = threading.RLock()

    # Lookups

    def find_student(self, student_id: str) -> Optional[Student]:
        """Find a student by id, None when absent."""
        with self._lock:
            return self._students.get(student_id)

    def find_course(self, course_code: str) -> Optional[Course]:
        """Find a course by code, None when absent."""
        with self._lock:
            return self._courses.get(course_code)

    # Students

    def add_student(self, name: str, student_id: str, kind: Union[StudentKind, str]) -> OperationResult:
        """Add a new student."""
        with self._lock:
            if student_id in self._students:
                return OperationResult.failure(
                    ResultStatus.DUPLICATE_KEY,
                    f"Student with ID {student_id} already exists.",
                    student_id=student_id,
                )

            try:
                student_kind = kind if isinstance(kind, StudentKind) else StudentKind.from_label(kind)
            except ValidationError as e:
                return OperationResult.failure(ResultStatus.INVALID_ARGUMENT, e.message, student_id=student_id)

            self._students[student_id] = Student(name, student_id, student_kind)
            return OperationResult.ok(
                f"Student added: {name} ({student_kind.value})",
                student_id=student_id,
            )

    def remove_student(self, student_id: str) -> OperationResult:
        """Remove a student and drop it from every roster."""
        with self._lock:
            if student_id not in self._students:
                return self._student_not_found(student_id)

            for course in self._courses.values():
                course.remove_student(student_id)
            del self._students[student_id]
            return OperationResult.ok(f"Student removed: {student_id}", student_id=student_id)

    def list_students(self) -> RecordView[Student]:
        """All students in insertion order."""
        return RecordView(self._snapshot_students)

    def search(self, keyword: str) -> RecordView[Student]:
        """Students whose name, id or an enrolled course code contains keyword."""
        def matches() -> List[Student]:
            return [
                student for student in self._snapshot_students()
                if keyword in student.name
                or keyword in student.student_id
                or any(keyword in code for code in student.enrolled_course_codes)
            ]
        return RecordView(matches)

    # Courses

    def add_course(self, name: str, course_code: str) -> OperationResult:
        """Add a new course."""
        with self._lock:
            if course_code in self._courses:
                return OperationResult.failure(
                    ResultStatus.DUPLICATE_KEY,
                    f"Course with code {course_code} already exists.",
                    course_code=course_code,
                )

            if not is_valid_course_code(course_code):
                return OperationResult.failure(
                    ResultStatus.INVALID_ARGUMENT,
                    f"Invalid course code: {course_code!r}. Course codes cannot contain "
                    "';', '/', '\\', '..' or line breaks.",
                    course_code=course_code,
                )

            self._courses[course_code] = Course(name, course_code)
            return OperationResult.ok(f"Course added: {name} ({course_code})", course_code=course_code)

    def remove_course(self, course_code: str) -> OperationResult:
        """Remove a course and drop it from every transcript."""
        with self._lock:
            if course_code not in self._courses:
                return self._course_not_found(course_code)

            for student in self._students.values():
                student.remove_course(course_code)
            del self._courses[course_code]
            return OperationResult.ok(f"Course removed: {course_code}", course_code=course_code)

    def list_courses(self) -> RecordView[Course]:
        """All courses in insertion order."""
        return RecordView(self._snapshot_courses)

    # Enrollment

    def enroll(self, student_id: str, course_code: str) -> OperationResult:
        """Enroll a student in a course."""
        with self._lock:
            student = self._students.get(student_id)
            if student is None:
                return self._student_not_found(student_id)
            course = self._courses.get(course_code)
            if course is None:
                return self._course_not_found(course_code)

            if student.is_enrolled_in(course_code):
                return OperationResult.failure(
                    ResultStatus.ALREADY_ENROLLED,
                    f"Student {student_id} is already enrolled in course {course_code}.",
                    student_id=student_id,
                    course_code=course_code,
                )

            student.add_course(course_code)
            course.add_student(student_id)
            return OperationResult.ok(
                f"Enrolled student {student_id} in course {course_code}",
                student_id=student_id,
                course_code=course_code,
            )

    def unenroll(self, student_id: str, course_code: str) -> OperationResult:
        """Remove a student from a course; a no-op when they are not linked."""
        with self._lock:
            student = self._students.get(student_id)
            course = self._courses.get(course_code)
            if student is None or course is None:
                return OperationResult.failure(
                    ResultStatus.NOT_FOUND,
                    "Either student or course not found.",
                    student_id=student_id,
                    course_code=course_code,
                )

            was_enrolled = student.remove_course(course_code)
            course.remove_student(student_id)
            if not was_enrolled:
                return OperationResult.ok(
                    f"Student {student_id} is not enrolled in course {course_code}.",
                    student_id=student_id,
                    course_code=course_code,
                    changed=False,
                )
            return OperationResult.ok(
                f"Removed student {student_id} from course {course_code}",
                student_id=student_id,
                course_code=course_code,
                changed=True,
            )

    def restore_enrollments(self, transcripts: Mapping[str, Iterable[str]],
                            rosters: Mapping[str, Iterable[str]]) -> int:
        """Re-attach stored transcripts and rosters after a load.

        Both sides are attached in their stored order so that saving again
        reproduces the same files. References to unknown students or courses
        are dropped, and any link recorded on one side only is completed on
        the other. Returns the number of dropped references.
        """
        dropped = 0
        with self._lock:
            for student_id, course_codes in transcripts.items():
                student = self._students.get(student_id)
                if student is None:
                    continue
                for course_code in course_codes:
                    if course_code in self._courses:
                        student.add_course(course_code)
                    else:
                        print(f"Warning: Dropping unknown course {course_code} from student {student_id}")
                        dropped += 1

            for course_code, student_ids in rosters.items():
                course = self._courses.get(course_code)
                if course is None:
                    continue
                for student_id in student_ids:
                    if student_id in self._students:
                        course.add_student(student_id)
                    else:
                        print(f"Warning: Dropping unknown student {student_id} from course {course_code}")
                        dropped += 1

            # Complete one-sided links
            for student in self._students.values():
                for course_code in student.enrolled_course_codes:
                    self._courses[course_code].add_student(student.student_id)
            for course in self._courses.values():
                for student_id in course.enrolled_student_ids:
                    self._students[student_id].add_course(course.course_code)

        return dropped

    def get_statistics(self) -> Dict[str, Any]:
        """Get registry statistics."""
        with self._lock:
            return {
                'total_students': len(self._students),
                'total_courses': len(self._courses),
                'total_enrollments': sum(course.enrolled_count for course in self._courses.values()),
            }

    def _snapshot_students(self) -> List[Student]:
        with self._lock:
            return list(self._students.values())

    def _snapshot_courses(self) -> List[Course]:
        with self._lock:
            return list(self._courses.values())

    def _student_not_found(self, student_id: str) -> OperationResult:
        return OperationResult.failure(
            ResultStatus.NOT_FOUND,
            f"Student with ID {student_id} not found.",
            student_id=student_id,
        )

    def _course_not_found(self, course_code: str) -> OperationResult:
        return OperationResult.failure(
            ResultStatus.NOT_FOUND,
            f"Course with code {course_code} not found.",
            course_code=course_code,
        )
