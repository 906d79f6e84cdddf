"""
Configuration for the registrar.

Defaults reproduce the classic layout relative to the working directory:
``Students/students.csv``, ``Courses/courses.csv`` and ``Reports/``.
"""

import json
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .core.exceptions import ConfigurationError

DATA_DIR_ENV = "REGISTRAR_DATA_DIR"


class RegistrarConfig(BaseModel):
    """Paths, load behaviour and REST server settings."""

    model_config = ConfigDict(extra="forbid")

    data_dir: str = "."
    students_file: str = Field(default=os.path.join("Students", "students.csv"), min_length=1)
    courses_file: str = Field(default=os.path.join("Courses", "courses.csv"), min_length=1)
    reports_dir: str = Field(default="Reports", min_length=1)
    strict_load: bool = False
    echo_reports: bool = True
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)

    @property
    def students_path(self) -> str:
        return os.path.join(self.data_dir, self.students_file)

    @property
    def courses_path(self) -> str:
        return os.path.join(self.data_dir, self.courses_file)

    @property
    def reports_path(self) -> str:
        return os.path.join(self.data_dir, self.reports_dir)


def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> RegistrarConfig:
    """Build the configuration from an optional JSON file, the environment and overrides."""
    values: Dict[str, Any] = {}

    if path:
        try:
            with open(path, 'r', encoding="utf-8") as f:
                values = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}")
        if not isinstance(values, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

    env_data_dir = os.environ.get(DATA_DIR_ENV)
    if env_data_dir:
        values["data_dir"] = env_data_dir

    values.update(overrides or {})

    try:
        return RegistrarConfig(**values)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", details={"errors": e.errors()})
