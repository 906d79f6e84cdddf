import json
import os

import pytest

from registrar.config import DATA_DIR_ENV, RegistrarConfig, load_config
from registrar.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)


def test_defaults_match_classic_layout():
    config = load_config()

    assert config.students_path == os.path.join(".", "Students", "students.csv")
    assert config.courses_path == os.path.join(".", "Courses", "courses.csv")
    assert config.reports_path == os.path.join(".", "Reports")
    assert config.strict_load is False


def test_file_environment_and_overrides(tmp_path, monkeypatch):
    path = tmp_path / "registrar.json"
    path.write_text(json.dumps({"data_dir": "from-file", "port": 9000, "reports_dir": "Out"}))
    monkeypatch.setenv(DATA_DIR_ENV, "from-env")

    config = load_config(str(path), {"strict_load": True})

    assert config.data_dir == "from-env"
    assert config.port == 9000
    assert config.reports_path == os.path.join("from-env", "Out")
    assert config.strict_load is True


@pytest.mark.parametrize("content", [
    "{not json",
    "[1, 2]",
    json.dumps({"port": 0}),
    json.dumps({"unknown_key": True}),
])
def test_invalid_configuration_raises(tmp_path, content):
    path = tmp_path / "registrar.json"
    path.write_text(content)

    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_missing_file_raises():
    with pytest.raises(ConfigurationError):
        load_config("/nonexistent/registrar.json")


def test_model_is_usable_directly(tmp_path):
    config = RegistrarConfig(data_dir=str(tmp_path))

    assert config.students_path.startswith(str(tmp_path))
