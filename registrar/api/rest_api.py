"""
REST API for the registrar using FastAPI.
"""

import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..core.entities import Student, Course
from ..core.exceptions import (
    ValidationError, ResourceNotFoundError, DuplicateEntityError,
    EnrollmentError, PersistenceError
)
from ..core.validation import COURSE_CODE_PATTERN, STUDENT_ID_PATTERN, STUDENT_KIND_PATTERN
from ..services.registry import OperationResult

if TYPE_CHECKING:
    from ..main import RegistrarApp


# Pydantic models for API
class StudentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    student_id: str = Field(..., pattern=STUDENT_ID_PATTERN)
    kind: str = Field(..., pattern=STUDENT_KIND_PATTERN)


class StudentResponse(BaseModel):
    student_id: str
    name: str
    kind: str
    enrolled_course_codes: List[str] = []


class CourseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    course_code: str = Field(..., min_length=1, max_length=50, pattern=COURSE_CODE_PATTERN)


class CourseResponse(BaseModel):
    course_code: str
    name: str
    enrolled_student_ids: List[str] = []


class EnrollmentRequest(BaseModel):
    student_id: str = Field(..., min_length=1)
    course_code: str = Field(..., min_length=1)


class OperationResponse(BaseModel):
    success: bool
    status: str
    message: str


class ReportResponse(BaseModel):
    path: str
    lines: List[str]


class StatisticsResponse(BaseModel):
    success: bool
    message: str
    statistics: Dict[str, Any]


class RegistrarRestAPI:
    """REST API over a RegistrarApp."""

    def __init__(self, registrar: "RegistrarApp"):
        self._registrar = registrar
        self._registry = registrar.registry
        self._lock = threading.RLock()

        # Create FastAPI app
        self.app = FastAPI(
            title="Registrar API",
            description="Students, courses and enrollments",
            version="1.0.0",
            docs_url="/docs",
            redoc_url="/redoc"
        )

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes."""

        @self.app.get("/", response_model=Dict[str, str])
        async def root():
            """Root endpoint."""
            return {
                "message": "Registrar API",
                "version": "1.0.0",
                "docs": "/docs"
            }

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        # Student endpoints
        @self.app.post("/students", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
        async def create_student(student_data: StudentCreate):
            """Create a new student."""
            with self._lock:
                self._unwrap(self._registry.add_student(
                    student_data.name, student_data.student_id, student_data.kind))
                return self._student_to_response(self._registry.find_student(student_data.student_id))

        @self.app.get("/students", response_model=List[StudentResponse])
        async def list_students(q: Optional[str] = None, skip: int = 0, limit: int = 100):
            """List all students, or those matching a search keyword."""
            with self._lock:
                view = self._registry.search(q) if q else self._registry.list_students()
                students = list(view)[skip:skip + limit]
                return [self._student_to_response(student) for student in students]

        @self.app.get("/students/{student_id}", response_model=StudentResponse)
        async def get_student(student_id: str):
            """Get a student by student ID."""
            with self._lock:
                student = self._registry.find_student(student_id)
                if not student:
                    raise HTTPException(status_code=404, detail="Student not found")
                return self._student_to_response(student)

        @self.app.delete("/students/{student_id}", response_model=OperationResponse)
        async def delete_student(student_id: str):
            """Remove a student and their enrollments."""
            with self._lock:
                return self._operation_response(self._registry.remove_student(student_id))

        # Course endpoints
        @self.app.post("/courses", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
        async def create_course(course_data: CourseCreate):
            """Create a new course."""
            with self._lock:
                self._unwrap(self._registry.add_course(course_data.name, course_data.course_code))
                return self._course_to_response(self._registry.find_course(course_data.course_code))

        @self.app.get("/courses", response_model=List[CourseResponse])
        async def list_courses(skip: int = 0, limit: int = 100):
            """List all courses."""
            with self._lock:
                courses = list(self._registry.list_courses())[skip:skip + limit]
                return [self._course_to_response(course) for course in courses]

        @self.app.get("/courses/{course_code}", response_model=CourseResponse)
        async def get_course(course_code: str):
            """Get a course by code."""
            with self._lock:
                course = self._registry.find_course(course_code)
                if not course:
                    raise HTTPException(status_code=404, detail="Course not found")
                return self._course_to_response(course)

        @self.app.delete("/courses/{course_code}", response_model=OperationResponse)
        async def delete_course(course_code: str):
            """Remove a course and its enrollments."""
            with self._lock:
                return self._operation_response(self._registry.remove_course(course_code))

        # Enrollment endpoints
        @self.app.post("/enrollments", response_model=OperationResponse)
        async def enroll_student(enrollment_data: EnrollmentRequest):
            """Enroll a student in a course."""
            with self._lock:
                return self._operation_response(
                    self._registry.enroll(enrollment_data.student_id, enrollment_data.course_code))

        @self.app.delete("/enrollments/{student_id}/{course_code}", response_model=OperationResponse)
        async def unenroll_student(student_id: str, course_code: str):
            """Remove a student from a course."""
            with self._lock:
                return self._operation_response(self._registry.unenroll(student_id, course_code))

        # Report endpoints
        @self.app.post("/reports/courses/{course_code}", response_model=ReportResponse)
        async def course_report(course_code: str):
            """Generate a course roster report."""
            with self._lock:
                return self._report_response(self._registrar.reports.generate_course_report(course_code))

        @self.app.post("/reports/students/{student_id}", response_model=ReportResponse)
        async def student_report(student_id: str):
            """Generate a student transcript report."""
            with self._lock:
                return self._report_response(self._registrar.reports.generate_student_report(student_id))

        # Data endpoints
        @self.app.post("/export", response_model=OperationResponse)
        async def export_data():
            """Write the students and courses files."""
            with self._lock:
                return self._operation_response(self._registrar.export_data())

        @self.app.post("/sample-data", response_model=OperationResponse)
        async def sample_data():
            """Populate the sample students, courses and enrollments."""
            with self._lock:
                return self._operation_response(self._registrar.populate_sample_data())

        @self.app.get("/statistics", response_model=StatisticsResponse)
        async def get_statistics():
            """Get registry statistics."""
            with self._lock:
                return StatisticsResponse(
                    success=True,
                    message="Statistics retrieved successfully",
                    statistics=self._registry.get_statistics()
                )

    def _unwrap(self, result: OperationResult) -> OperationResult:
        """Turn a failed result into the matching HTTP error."""
        try:
            return result.raise_for_status()
        except ResourceNotFoundError as e:
            raise HTTPException(status_code=404, detail=e.message)
        except (DuplicateEntityError, EnrollmentError) as e:
            raise HTTPException(status_code=409, detail=e.message)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=e.message)
        except PersistenceError as e:
            raise HTTPException(status_code=500, detail=e.message)

    def _operation_response(self, result: OperationResult) -> OperationResponse:
        self._unwrap(result)
        return OperationResponse(success=result.success, status=result.status.value, message=result.message)

    def _report_response(self, result: OperationResult) -> ReportResponse:
        self._unwrap(result)
        return ReportResponse(path=result.details["path"], lines=result.details["lines"])

    def _student_to_response(self, student: Student) -> StudentResponse:
        """Convert Student entity to response model."""
        return StudentResponse(**student.to_dict())

    def _course_to_response(self, course: Course) -> CourseResponse:
        """Convert Course entity to response model."""
        return CourseResponse(**course.to_dict())
