"""
Interactive menu shell driving the registry from the console.
"""

from typing import Callable, Dict, List, Optional, Tuple, TYPE_CHECKING

from .console import print_result
from .prompts import (
    CANCELLED, CANCELLED_MESSAGE, InputFunc, read_choice, read_course_code,
    read_non_empty, read_student_id, read_student_kind
)

if TYPE_CHECKING:
    from ..main import RegistrarApp

SEPARATOR = "=============================="

MENU_SECTIONS: List[Tuple[str, List[Tuple[int, str]]]] = [
    ("Student Management", [
        (1, "Add Student"),
        (2, "Remove Student"),
        (3, "List Students"),
        (4, "Search Student"),
    ]),
    ("Course Management", [
        (5, "Add Course"),
        (6, "Remove Course"),
        (7, "List Courses"),
    ]),
    ("Enrollment", [
        (8, "Enroll Student in Course"),
        (9, "Remove Student from Course"),
    ]),
    ("Reporting", [
        (10, "Generate Course Report"),
        (11, "Generate Student Report"),
    ]),
    ("Data Export", [
        (12, "Export Data to CSV (Students & Courses)"),
    ]),
    ("Populate Sample Data", [
        (13, "Populate Sample Data"),
    ]),
    ("Exit", [
        (0, "Exit"),
    ]),
]


class InteractiveShell:
    """Numbered menu loop over a RegistrarApp."""

    def __init__(self, app: "RegistrarApp", input_func: InputFunc = input):
        self._app = app
        self._input = input_func
        self._actions: Dict[int, Callable[[], None]] = {
            1: self._add_student,
            2: self._remove_student,
            3: self._list_students,
            4: self._search_students,
            5: self._add_course,
            6: self._remove_course,
            7: self._list_courses,
            8: self._enroll,
            9: self._unenroll,
            10: self._course_report,
            11: self._student_report,
            12: self._export,
            13: self._populate,
        }

    def run(self) -> None:
        """Run the menu until the user exits; state is exported on exit."""
        while True:
            self.print_menu()
            try:
                choice = read_choice(self._input)
                if choice != 0:
                    self._dispatch(choice)
                    continue
            except EOFError:
                pass

            print("Exiting the system. Goodbye!")
            self._export()
            return

    def _dispatch(self, choice: int) -> None:
        action = self._actions.get(choice)
        if action is None:
            print("Invalid choice. Please try again.")
            return
        action()

    def print_menu(self) -> None:
        for title, entries in MENU_SECTIONS:
            print(f"\n{SEPARATOR}\n{title.center(len(SEPARATOR)).rstrip()}\n{SEPARATOR}")
            for number, label in entries:
                print(f"{number}. {label}")

    def _ask(self, *readers: Callable[[], object]) -> Optional[List[str]]:
        """Run prompts in order; None if the user cancelled any of them."""
        answers = []
        for reader in readers:
            answer = reader()
            if answer is CANCELLED:
                print(CANCELLED_MESSAGE)
                return None
            answers.append(answer)
        return answers

    def _text(self, prompt: str) -> Callable[[], object]:
        return lambda: read_non_empty(self._input, prompt)

    def _course_code(self, prompt: str) -> Callable[[], object]:
        return lambda: read_course_code(self._input, prompt)

    # Student management

    def _add_student(self) -> None:
        answers = self._ask(
            self._text("Enter student name: "),
            lambda: read_student_id(self._input),
            lambda: read_student_kind(self._input),
        )
        if answers:
            name, student_id, kind = answers
            print_result(self._app.registry.add_student(name, student_id, kind))

    def _remove_student(self) -> None:
        answers = self._ask(self._text("Enter student ID to remove: "))
        if answers:
            print_result(self._app.registry.remove_student(answers[0]))

    def _list_students(self) -> None:
        print("\n--- List of Students ---")
        for student in self._app.registry.list_students():
            print(f"Name: {student.name}, ID: {student.student_id}, Type: {student.kind.value}")

    def _search_students(self) -> None:
        answers = self._ask(self._text("Enter keyword to search (name, ID, or course code): "))
        if not answers:
            return
        keyword = answers[0]
        print(f'\n--- Search Results for "{keyword}" ---')
        matches = list(self._app.registry.search(keyword))
        for student in matches:
            print(f"Name: {student.name}, ID: {student.student_id}, Type: {student.kind.value}")
        if not matches:
            print("No matching student found.")

    # Course management

    def _add_course(self) -> None:
        answers = self._ask(self._text("Enter course name: "), self._course_code("Enter course code: "))
        if answers:
            name, course_code = answers
            print_result(self._app.registry.add_course(name, course_code))

    def _remove_course(self) -> None:
        answers = self._ask(self._course_code("Enter course code to remove: "))
        if answers:
            print_result(self._app.registry.remove_course(answers[0]))

    def _list_courses(self) -> None:
        print("\n--- List of Courses ---")
        for course in self._app.registry.list_courses():
            print(f"Course Name: {course.name}, Course Code: {course.course_code}")

    # Enrollment

    def _enroll(self) -> None:
        answers = self._ask(
            self._text("Enter student ID to enroll: "),
            self._course_code("Enter course code to enroll in: "),
        )
        if answers:
            print_result(self._app.registry.enroll(*answers))

    def _unenroll(self) -> None:
        answers = self._ask(
            self._text("Enter student ID to remove from course: "),
            self._course_code("Enter course code: "),
        )
        if answers:
            print_result(self._app.registry.unenroll(*answers))

    # Reporting and data

    def _course_report(self) -> None:
        answers = self._ask(self._course_code("Enter course code for report: "))
        if answers:
            print_result(self._app.reports.generate_course_report(answers[0]))

    def _student_report(self) -> None:
        answers = self._ask(self._text("Enter student ID for report: "))
        if answers:
            print_result(self._app.reports.generate_student_report(answers[0]))

    def _export(self) -> None:
        print_result(self._app.export_data())

    def _populate(self) -> None:
        print_result(self._app.populate_sample_data())
