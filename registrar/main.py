"""
Main entry point for the registrar.
"""

import argparse
import sys
from typing import List, Optional

from .config import RegistrarConfig, load_config
from .core.enums import ResultStatus
from .core.exceptions import ConfigurationError, PersistenceError
from .persistence import CsvStore
from .services import Registry, OperationResult, ReportService, populate_sample_data
from .cli.console import OK_CHAR, FAIL_CHAR, print_result


class RegistrarApp:
    """Wires the registry to its storage, reports and front ends."""

    def __init__(self, config: Optional[RegistrarConfig] = None):
        self._config = config or RegistrarConfig()
        self._registry = Registry()
        self._store = CsvStore(self._config.students_path, self._config.courses_path)
        self._reports = ReportService(
            self._registry,
            reports_dir=self._config.reports_path,
            echo=self._config.echo_reports,
        )

    @property
    def config(self) -> RegistrarConfig:
        return self._config

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def store(self) -> CsvStore:
        return self._store

    @property
    def reports(self) -> ReportService:
        return self._reports

    def load_data(self) -> OperationResult:
        """Load previously saved state, if any."""
        try:
            summary = self._store.load(self._registry, strict=self._config.strict_load)
        except PersistenceError as e:
            return OperationResult.failure(ResultStatus.IO_FAILURE, e.message, **e.details)

        return OperationResult.ok(
            f"Loaded {summary.students_loaded} students and {summary.courses_loaded} courses",
            summary=summary,
        )

    def export_data(self) -> OperationResult:
        """Write the full registry state to the students and courses files."""
        try:
            students_path, courses_path = self._store.save(self._registry)
        except PersistenceError as e:
            return OperationResult.failure(ResultStatus.IO_FAILURE, e.message, **e.details)

        return OperationResult.ok(
            f"Students exported to {students_path}\nCourses exported to {courses_path}",
            students_path=students_path,
            courses_path=courses_path,
        )

    def populate_sample_data(self) -> OperationResult:
        """Seed the registry with the sample students, courses and enrollments."""
        results = populate_sample_data(self._registry)
        failures = [result for result in results if not result.success]
        for result in failures:
            print(result.message)
        return OperationResult.ok(
            "Sample data populated successfully.",
            applied=len(results) - len(failures),
            rejected=len(failures),
        )

    def create_rest_api(self):
        """Build the FastAPI adapter over this application."""
        from .api.rest_api import RegistrarRestAPI
        return RegistrarRestAPI(self)

    def serve(self, host: Optional[str] = None, port: Optional[int] = None) -> None:
        """Serve the REST adapter until interrupted, then export state."""
        import uvicorn

        host = host or self._config.host
        port = port or self._config.port
        api = self.create_rest_api()

        print(f"{OK_CHAR} REST server starting on {host}:{port}")
        print(f"  - API Docs: http://{host}:{port}/docs")
        try:
            uvicorn.run(api.app, host=host, port=port, log_level="info")
        finally:
            print_result(self.export_data(), marks=True)

    def run_shell(self, input_func=None) -> None:
        """Run the interactive menu; state is exported when it exits."""
        from .cli.shell import InteractiveShell
        InteractiveShell(self, input_func=input_func or input).run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Student, course and enrollment registrar")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--data-dir", type=str, help="Base directory for data and report files")
    parser.add_argument("--serve", action="store_true", help="Run the REST API instead of the menu")
    parser.add_argument("--host", type=str, help="REST server host")
    parser.add_argument("--port", type=int, help="REST server port")
    parser.add_argument("--seed", action="store_true", help="Populate sample data after loading")
    parser.add_argument("--strict", action="store_true", help="Fail on malformed rows in stored files")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
    if args.strict:
        overrides["strict_load"] = True

    try:
        config = load_config(args.config, overrides)
    except ConfigurationError as e:
        print(f"{FAIL_CHAR} {e.message}")
        return 1

    app = RegistrarApp(config)

    loaded = app.load_data()
    if not loaded.success:
        print(f"{FAIL_CHAR} {loaded.message}")
        return 1

    if args.seed:
        print_result(app.populate_sample_data(), marks=True)

    try:
        if args.serve:
            app.serve(args.host, args.port)
        else:
            app.run_shell()
    except KeyboardInterrupt:
        print("\nShutting down...")
        print_result(app.export_data(), marks=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
