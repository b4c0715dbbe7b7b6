"""
Services module containing the session, creation and report use-cases.
"""

from .creation import CreationService, apply_fields
from .session import ApplicationContext
from .reports import (
    ReportService,
    AnalysisReport,
    CertificateReport,
    PeriodReport,
    StudentAnalysisRow,
    CertificateRow,
    EvaluationLine,
)

__all__ = [
    "CreationService",
    "apply_fields",
    "ApplicationContext",
    "ReportService",
    "AnalysisReport",
    "CertificateReport",
    "PeriodReport",
    "StudentAnalysisRow",
    "CertificateRow",
    "EvaluationLine",
]
