import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(app):
    return TestClient(app.create_rest_api().app)


def create_alice(client):
    client.post("/students", json={"name": "Alice Johnson", "student_id": "S001", "kind": "Undergraduate"})
    client.post("/courses", json={"name": "Data Structures", "course_code": "CSE102"})
    return client.post("/enrollments", json={"student_id": "S001", "course_code": "CSE102"})


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_and_get_student(client):
    response = client.post("/students", json={
        "name": "Alice Johnson", "student_id": "S001", "kind": "Undergraduate"})

    assert response.status_code == 201
    assert response.json() == {
        "student_id": "S001",
        "name": "Alice Johnson",
        "kind": "Undergraduate",
        "enrolled_course_codes": [],
    }
    assert client.get("/students/S001").status_code == 200
    assert client.get("/students/S404").status_code == 404


@pytest.mark.parametrize("payload", [
    {"name": "Alice", "student_id": "X001", "kind": "Undergraduate"},
    {"name": "Alice", "student_id": "S001", "kind": "Graduate"},
    {"name": "", "student_id": "S001", "kind": "Undergraduate"},
])
def test_boundary_validation_rejects_bad_students(client, payload):
    assert client.post("/students", json=payload).status_code == 422


def test_duplicate_student_conflicts(client):
    payload = {"name": "Alice Johnson", "student_id": "S001", "kind": "Undergraduate"}
    client.post("/students", json=payload)

    response = client.post("/students", json=payload)

    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]


def test_enrollment_flow(client):
    assert create_alice(client).json()["status"] == "ok"

    again = client.post("/enrollments", json={"student_id": "S001", "course_code": "CSE102"})
    assert again.status_code == 409

    course = client.get("/courses/CSE102").json()
    assert course["enrolled_student_ids"] == ["S001"]

    missing = client.post("/enrollments", json={"student_id": "S001", "course_code": "NOPE"})
    assert missing.status_code == 404

    dropped = client.delete("/enrollments/S001/CSE102")
    assert dropped.status_code == 200
    assert client.get("/students/S001").json()["enrolled_course_codes"] == []


def test_delete_course_cascades(client):
    create_alice(client)

    assert client.delete("/courses/CSE102").status_code == 200
    assert client.get("/students/S001").json()["enrolled_course_codes"] == []
    assert client.delete("/courses/CSE102").status_code == 404


def test_search_students(client):
    client.post("/sample-data")

    response = client.get("/students", params={"q": "CSE104"})

    assert [s["student_id"] for s in response.json()] == ["S004", "S005"]


def test_reports(client):
    create_alice(client)

    course = client.post("/reports/courses/CSE102")
    student = client.post("/reports/students/S001")

    assert course.status_code == 200
    assert course.json()["lines"] == ["StudentID,Name,Type", "S001,Alice Johnson,Undergraduate"]
    assert student.json()["lines"][-1] == "CSE102,Data Structures"
    assert client.post("/reports/courses/NOPE").status_code == 404


def test_export_and_statistics(client, app):
    client.post("/sample-data")

    exported = client.post("/export")
    stats = client.get("/statistics").json()["statistics"]

    assert exported.status_code == 200
    assert stats == {"total_students": 5, "total_courses": 4, "total_enrollments": 8}
    with open(app.config.courses_path, encoding="utf-8") as f:
        assert f.readline() == "CourseCode,CourseName,EnrolledStudents\n"


@pytest.mark.parametrize("course_code", ["A;B", "a/b", "a\\b"])
def test_course_codes_with_delimiter_or_separator_are_rejected(client, course_code):
    response = client.post("/courses", json={"name": "Broken", "course_code": course_code})

    assert response.status_code == 422
    assert client.get("/courses").json() == []


def test_dotted_course_code_is_a_bad_request(client):
    response = client.post("/courses", json={"name": "Broken", "course_code": "..x"})

    assert response.status_code == 400
    assert client.get("/courses").json() == []
