"""Pydantic schemas for request/response validation."""

from app.schemas.training import (
    TrainingInput,
    TrainingReportRequest,
    TrainingSummary,
    TrainingType,
    TrainingTypeInfo,
)

__all__ = [
    "TrainingInput",
    "TrainingReportRequest",
    "TrainingSummary",
    "TrainingType",
    "TrainingTypeInfo",
]
