import os

import pytest

from registrar.config import RegistrarConfig
from registrar.main import RegistrarApp
from registrar.persistence import CsvStore
from registrar.services import Registry, ReportService


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def alice_registry(registry):
    registry.add_student("Alice Johnson", "S001", "Undergraduate")
    registry.add_course("Data Structures", "CSE102")
    registry.enroll("S001", "CSE102")
    return registry


@pytest.fixture
def store(tmp_path):
    return CsvStore(
        students_path=os.path.join(str(tmp_path), "Students", "students.csv"),
        courses_path=os.path.join(str(tmp_path), "Courses", "courses.csv"),
    )


@pytest.fixture
def reports(registry, tmp_path):
    return ReportService(registry, reports_dir=os.path.join(str(tmp_path), "Reports"), echo=False)


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.delenv("REGISTRAR_DATA_DIR", raising=False)
    return RegistrarApp(RegistrarConfig(data_dir=str(tmp_path), echo_reports=False))
