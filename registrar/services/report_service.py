"""
Report generation: one course's roster or one student's transcript as CSV.
"""

import csv
import io
import os
from typing import List

from ..core.entities import Student
from ..core.enums import ReportType, ResultStatus
from ..core.exceptions import PersistenceError, ValidationError
from ..core.validation import is_valid_record_key
from .registry import Registry, OperationResult

COURSE_REPORT_HEADER = ["StudentID", "Name", "Type"]
STUDENT_REPORT_HEADER = ["StudentID", "Name", "Type"]
STUDENT_COURSES_HEADER = ["CourseCode", "CourseName"]


def _format_rows(rows: List[List[str]]) -> List[str]:
    """Render rows as CSV lines without line terminators."""
    lines = []
    for row in rows:
        buffer = io.StringIO()
        csv.writer(buffer, lineterminator="").writerow(row)
        lines.append(buffer.getvalue())
    return lines


class ReportService:
    """Projects registry state into small CSV report files."""

    def __init__(self, registry: Registry, reports_dir: str = "Reports", echo: bool = True):
        self._registry = registry
        self._reports_dir = reports_dir
        self._echo = echo

    @property
    def reports_dir(self) -> str:
        return self._reports_dir

    def report_path(self, report_type: ReportType, key: str) -> str:
        """Output path for a report, derived from its type and entity key."""
        if not is_valid_record_key(key):
            raise ValidationError(f"Cannot use {key!r} as a report file name.", details={"key": key})
        return os.path.join(self._reports_dir, report_type.value, f"{key}.csv")

    def generate_course_report(self, course_code: str) -> OperationResult:
        """Roster of one course in stored order."""
        course = self._registry.find_course(course_code)
        if course is None:
            return OperationResult.failure(
                ResultStatus.NOT_FOUND,
                f"Course with code {course_code} not found.",
                course_code=course_code,
            )

        rows = [COURSE_REPORT_HEADER]
        for student_id in course.enrolled_student_ids:
            student = self._registry.find_student(student_id)
            if student is not None:
                rows.append(self._student_row(student))

        return self._write_report(
            ReportType.COURSE, course_code, rows,
            title=f"Course Report for {course_code}",
            saved_label="Course report",
        )

    def generate_student_report(self, student_id: str) -> OperationResult:
        """A student's details followed by their courses in stored order."""
        student = self._registry.find_student(student_id)
        if student is None:
            return OperationResult.failure(
                ResultStatus.NOT_FOUND,
                f"Student with ID {student_id} not found.",
                student_id=student_id,
            )

        rows = [STUDENT_REPORT_HEADER, self._student_row(student), [], STUDENT_COURSES_HEADER]
        for course_code in student.enrolled_course_codes:
            course = self._registry.find_course(course_code)
            if course is not None:
                rows.append([course.course_code, course.name])

        return self._write_report(
            ReportType.STUDENT, student_id, rows,
            title=f"Student Report for {student_id}",
            saved_label="Student report",
        )

    def _student_row(self, student: Student) -> List[str]:
        return [student.student_id, student.name, student.kind.value]

    def _write_report(self, report_type: ReportType, key: str, rows: List[List[str]],
                      title: str, saved_label: str) -> OperationResult:
        lines = _format_rows(rows)
        try:
            path = self.report_path(report_type, key)
        except ValidationError as e:
            return OperationResult.failure(ResultStatus.INVALID_ARGUMENT, e.message, key=key)

        if self._echo:
            print(f"\n--- {title} ---")
            for line in lines:
                print(line)

        try:
            self._save(path, lines)
        except PersistenceError as e:
            return OperationResult.failure(ResultStatus.IO_FAILURE, e.message, path=path)

        return OperationResult.ok(f"{saved_label} saved to: {path}", path=path, lines=lines)

    def _save(self, path: str, lines: List[str]) -> None:
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            raise PersistenceError(
                f"Error opening file for report: {e}",
                error_code="report_write_failed",
                details={"path": path},
            )
