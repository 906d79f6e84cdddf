"""
Client that adds the sample data set to a running registrar REST API.

Usage:
    python -m registrar.api.client [BASE_URL]
"""

import os
import sys
from typing import Any, Dict, Optional

import requests

from ..cli.console import OK_CHAR, FAIL_CHAR
from ..services.sample_data import SAMPLE_STUDENTS, SAMPLE_COURSES, SAMPLE_ENROLLMENTS

BASE_URL_ENV = "REGISTRAR_BASE_URL"
DEFAULT_BASE_URL = "http://127.0.0.1:8000"


class RegistrarClient:
    """Thin wrapper over the registrar REST endpoints."""

    def __init__(self, base_url: Optional[str] = None, session=None, timeout: float = 5.0):
        self._base_url = (base_url or os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL).rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def check_server(self) -> bool:
        """Check if the server is running."""
        try:
            response = self._session.get(f"{self._base_url}/health", timeout=self._timeout)
        except requests.exceptions.RequestException:
            print(f"{FAIL_CHAR} Server is not running at {self._base_url}!")
            print("\nPlease start the server first:")
            print("  registrar --serve")
            return False
        if response.status_code == 200:
            print(f"{OK_CHAR} Server is running")
            return True
        print(f"{FAIL_CHAR} Unexpected health status: {response.status_code}")
        return False

    def create_student(self, name: str, student_id: str, kind: str) -> Optional[Dict[str, Any]]:
        """Create a new student."""
        data = {"name": name, "student_id": student_id, "kind": kind}
        response = self._session.post(f"{self._base_url}/students", json=data, timeout=self._timeout)
        if response.status_code == 201:
            print(f"{OK_CHAR} Created student: {name} ({student_id})")
            return response.json()
        print(f"{FAIL_CHAR} Failed to create student: {response.text}")
        return None

    def create_course(self, name: str, course_code: str) -> Optional[Dict[str, Any]]:
        """Create a new course."""
        data = {"name": name, "course_code": course_code}
        response = self._session.post(f"{self._base_url}/courses", json=data, timeout=self._timeout)
        if response.status_code == 201:
            print(f"{OK_CHAR} Created course: {course_code} - {name}")
            return response.json()
        print(f"{FAIL_CHAR} Failed to create course: {response.text}")
        return None

    def enroll(self, student_id: str, course_code: str) -> bool:
        """Enroll a student in a course."""
        data = {"student_id": student_id, "course_code": course_code}
        response = self._session.post(f"{self._base_url}/enrollments", json=data, timeout=self._timeout)
        if response.status_code == 200:
            print(f"{OK_CHAR} Enrolled {student_id} in {course_code}")
            return True
        print(f"{FAIL_CHAR} Failed to enroll {student_id} in {course_code}: {response.text}")
        return False

    def seed_sample_data(self) -> Dict[str, int]:
        """Create the sample students, courses and enrollments."""
        counts = {"students": 0, "courses": 0, "enrollments": 0}
        for name, student_id, kind in SAMPLE_STUDENTS:
            if self.create_student(name, student_id, kind):
                counts["students"] += 1
        for name, course_code in SAMPLE_COURSES:
            if self.create_course(name, course_code):
                counts["courses"] += 1
        for student_id, course_code in SAMPLE_ENROLLMENTS:
            if self.enroll(student_id, course_code):
                counts["enrollments"] += 1
        return counts


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    client = RegistrarClient(argv[0] if argv else None)
    if not client.check_server():
        return 1

    counts = client.seed_sample_data()
    print(f"\nCreated {counts['students']} students, {counts['courses']} courses "
          f"and {counts['enrollments']} enrollments")
    return 0


if __name__ == "__main__":
    sys.exit(main())
