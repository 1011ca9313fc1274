"""Business logic services."""

from app.services.training_report_service import TrainingReportService

__all__ = [
    "TrainingReportService",
]
