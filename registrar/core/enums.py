"""
Enumerations and constants for the registrar.
"""

from enum import Enum

from .exceptions import ValidationError

__all__ = ["StudentKind", "ResultStatus", "ReportType"]


class StudentKind(Enum):
    """Kinds of students tracked by the registry."""
    UNDERGRADUATE = "Undergraduate"
    POSTGRADUATE = "Postgraduate"

    @classmethod
    def from_label(cls, label: str) -> "StudentKind":
        """Resolve a kind from its exact display label."""
        for kind in cls:
            if kind.value == label:
                return kind
        labels = "', '".join(kind.value for kind in cls)
        raise ValidationError(
            f"Unknown student type '{label}'. Please use '{labels}'.",
            error_code="invalid_kind",
            details={"label": label},
        )


class ResultStatus(Enum):
    """Outcome of a registry, report or export operation."""
    OK = "ok"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    ALREADY_ENROLLED = "already_enrolled"
    IO_FAILURE = "io_failure"


class ReportType(Enum):
    """Report projections and the directory each one is written to."""
    COURSE = "CourseReports"
    STUDENT = "StudentReports"
