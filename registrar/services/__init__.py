"""
Services module containing the registry, reporting and sample data seeding.
"""

from .registry import Registry, OperationResult, RecordView
from .report_service import ReportService
from .sample_data import populate_sample_data

__all__ = [
    "Registry",
    "OperationResult",
    "RecordView",
    "ReportService",
    "populate_sample_data",
]
