"""
Input prompts for the interactive shell.

Every prompt returns ``CANCELLED`` when the user types ESC (any case),
which hands control back to the menu without touching the registry.
"""

from typing import Callable, Union

from ..core.validation import is_valid_course_code, is_valid_student_id, is_valid_student_kind

InputFunc = Callable[[str], str]


class _Cancelled:
    """Marker returned by a prompt the user aborted."""

    def __repr__(self) -> str:
        return "CANCELLED"

    def __bool__(self) -> bool:
        return False


CANCELLED = _Cancelled()
CANCEL_WORD = "esc"
CANCELLED_MESSAGE = "Operation cancelled by user."

PromptResult = Union[str, _Cancelled]


def read_non_empty(input_func: InputFunc, prompt: str) -> PromptResult:
    """Read a trimmed, non-empty line, re-asking on blank input."""
    while True:
        value = input_func(prompt).strip()
        if value.lower() == CANCEL_WORD:
            return CANCELLED
        if value:
            return value
        print("Input cannot be empty. Please try again.")


def read_student_id(input_func: InputFunc) -> PromptResult:
    while True:
        value = read_non_empty(input_func, "Enter student ID (format Sxxx, e.g., S001): ")
        if value is CANCELLED or is_valid_student_id(value):
            return value
        print("Invalid student ID format. Please follow the format Sxxx (e.g., S001).")


def read_student_kind(input_func: InputFunc) -> PromptResult:
    while True:
        value = read_non_empty(input_func, "Enter student type (Undergraduate/Postgraduate): ")
        if value is CANCELLED or is_valid_student_kind(value):
            return value
        print("Invalid type. Please enter either 'Undergraduate' or 'Postgraduate'.")


def read_course_code(input_func: InputFunc, prompt: str = "Enter course code: ") -> PromptResult:
    while True:
        value = read_non_empty(input_func, prompt)
        if value is CANCELLED or is_valid_course_code(value):
            return value
        print("Invalid course code. Course codes cannot contain ';', '/', '\\', '..' or line breaks.")


def read_choice(input_func: InputFunc, prompt: str = "Enter your choice: ") -> int:
    """Read a menu number, re-asking until the input parses as an integer."""
    while True:
        raw = input_func(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            prompt = "Invalid input. Please enter a valid number: "
