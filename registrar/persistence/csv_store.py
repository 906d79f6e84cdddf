"""
Flat delimited text storage for the registry.

One entity per line, fields separated by commas, and the enrollment
cross-references of each entity joined by semicolons in the last field.
"""

import csv
import os
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from ..core.entities import Student, Course
from ..core.enums import StudentKind
from ..core.exceptions import PersistenceError, MalformedRecordError, ValidationError
from ..services.registry import Registry

STUDENTS_HEADER = ["StudentID", "Name", "Type", "EnrolledCourses"]
COURSES_HEADER = ["CourseCode", "CourseName", "EnrolledStudents"]
REFERENCE_DELIMITER = ";"


class StudentRecord(NamedTuple):
    student_id: str
    name: str
    kind: StudentKind
    course_codes: List[str]


class CourseRecord(NamedTuple):
    course_code: str
    name: str
    student_ids: List[str]


@dataclass
class LoadSummary:
    """Counts gathered while loading stored state into a registry."""
    students_loaded: int = 0
    courses_loaded: int = 0
    rows_skipped: int = 0
    rows_rejected: int = 0
    links_dropped: int = 0
    warnings: List[str] = field(default_factory=list)


def join_references(references: Iterable[str]) -> str:
    return REFERENCE_DELIMITER.join(references)


def split_references(field_value: str) -> List[str]:
    """Split a semicolon joined reference list, ignoring empty entries."""
    return [ref for ref in field_value.split(REFERENCE_DELIMITER) if ref]


def encode_student(student: Student) -> List[str]:
    return [student.student_id, student.name, student.kind.value,
            join_references(student.enrolled_course_codes)]


def encode_course(course: Course) -> List[str]:
    return [course.course_code, course.name, join_references(course.enrolled_student_ids)]


def decode_student(row: List[str]) -> StudentRecord:
    """Parse a students file row, raising ValidationError when malformed."""
    if len(row) != len(STUDENTS_HEADER):
        raise ValidationError(f"expected {len(STUDENTS_HEADER)} fields, found {len(row)}")
    student_id, name, kind_label, courses_field = row
    if not student_id or not name:
        raise ValidationError("student id and name must not be empty")
    kind = StudentKind.from_label(kind_label)
    return StudentRecord(student_id, name, kind, split_references(courses_field))


def decode_course(row: List[str]) -> CourseRecord:
    """Parse a courses file row, raising ValidationError when malformed."""
    if len(row) != len(COURSES_HEADER):
        raise ValidationError(f"expected {len(COURSES_HEADER)} fields, found {len(row)}")
    course_code, name, students_field = row
    if not course_code or not name:
        raise ValidationError("course code and name must not be empty")
    return CourseRecord(course_code, name, split_references(students_field))


class CsvStore:
    """Reads and writes the students and courses files."""

    def __init__(self, students_path: str = os.path.join("Students", "students.csv"),
                 courses_path: str = os.path.join("Courses", "courses.csv")):
        self._students_path = students_path
        self._courses_path = courses_path
        self._lock = threading.RLock()

    @property
    def students_path(self) -> str:
        return self._students_path

    @property
    def courses_path(self) -> str:
        return self._courses_path

    def save(self, registry: Registry) -> Tuple[str, str]:
        """Overwrite both files with the current registry state."""
        with self._lock:
            self._write_rows(
                self._students_path, STUDENTS_HEADER,
                (encode_student(student) for student in registry.list_students()),
            )
            self._write_rows(
                self._courses_path, COURSES_HEADER,
                (encode_course(course) for course in registry.list_courses()),
            )
            return self._students_path, self._courses_path

    def load(self, registry: Registry, strict: bool = False) -> LoadSummary:
        """Load stored students, courses and enrollments into a registry.

        Missing files mean there is no saved state yet. Malformed rows are
        skipped with a warning, unless ``strict`` is set, in which case the
        first malformed row raises MalformedRecordError before the registry
        is modified.
        """
        with self._lock:
            summary = LoadSummary()
            student_records = self._parse_file(
                self._students_path, STUDENTS_HEADER, decode_student, strict, summary)
            course_records = self._parse_file(
                self._courses_path, COURSES_HEADER, decode_course, strict, summary)

            transcripts: Dict[str, List[str]] = {}
            for record in student_records:
                result = registry.add_student(record.name, record.student_id, record.kind)
                if result.success:
                    transcripts[record.student_id] = record.course_codes
                    summary.students_loaded += 1
                else:
                    self._warn(summary, f"Rejected stored student {record.student_id}: {result.message}")
                    summary.rows_rejected += 1

            rosters: Dict[str, List[str]] = {}
            for record in course_records:
                result = registry.add_course(record.name, record.course_code)
                if result.success:
                    rosters[record.course_code] = record.student_ids
                    summary.courses_loaded += 1
                else:
                    self._warn(summary, f"Rejected stored course {record.course_code}: {result.message}")
                    summary.rows_rejected += 1

            summary.links_dropped = registry.restore_enrollments(transcripts, rosters)
            return summary

    def _parse_file(self, path: str, header: List[str], decode, strict: bool,
                    summary: LoadSummary) -> list:
        rows = self._read_rows(path)
        if rows is None:
            return []

        records = []
        header_seen = False
        for line_number, row in rows:
            if not row:
                continue
            if not header_seen:
                header_seen = True
                if row != header:
                    message = f"Unexpected header in {path}: {','.join(row)}"
                    if strict:
                        raise MalformedRecordError(message, path=path, line_number=line_number)
                    self._warn(summary, message)
                continue
            try:
                records.append(decode(row))
            except ValidationError as e:
                message = f"Skipping malformed row at {path}:{line_number}: {e.message}"
                if strict:
                    raise MalformedRecordError(
                        f"Malformed row at {path}:{line_number}: {e.message}",
                        path=path,
                        line_number=line_number,
                    )
                self._warn(summary, message)
                summary.rows_skipped += 1
        return records

    def _read_rows(self, path: str) -> Optional[List[Tuple[int, List[str]]]]:
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                reader = csv.reader(f)
                return [(reader.line_num, row) for row in reader]
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise PersistenceError(
                f"Failed to read {path}: {str(e)}",
                error_code="read_failed",
                details={"path": path},
            )

    def _write_rows(self, path: str, header: List[str], rows: Iterable[List[str]]) -> None:
        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                writer.writerow(header)
                writer.writerows(rows)
        except OSError as e:
            raise PersistenceError(
                f"Error opening file for exporting: {str(e)}",
                error_code="write_failed",
                details={"path": path},
            )

    def _warn(self, summary: LoadSummary, message: str) -> None:
        print(f"Warning: {message}")
        summary.warnings.append(message)
