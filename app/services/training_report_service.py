"""
Training report service.

Bridges the API request schema and the pure calculators, translating an
unknown training type into an HTTP error for the structured endpoint.
"""

from typing import Optional

from fastapi import HTTPException, status

from app.schemas.training import TrainingReportRequest, TrainingSummary, TrainingTypeInfo
from app.sports.registry import TrainingRegistry, UnknownTrainingTypeError
from app.trainings.report import compute_summary, generate_report


class TrainingReportService:
    """Service for training statistics business logic."""

    def list_types(self) -> list[TrainingTypeInfo]:
        return [TrainingTypeInfo(training_type=p.training_id, display_name=p.display_name, aliases=list(p.aliases),
                                 required_fields=list(p.required_fields), ) for p in
                TrainingRegistry.all().values()]

    def summarize(self, data: TrainingReportRequest) -> TrainingSummary:
        try:
            return compute_summary(**data.model_dump())
        except UnknownTrainingTypeError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail=f"Unknown training type: '{e.tag}'. Available: {e.available}", )

    def report(self, data: TrainingReportRequest, language: Optional[str] = None) -> str:
        # Unknown types come back as the sentinel text, not as an error.
        return generate_report(**data.model_dump(), language=language)
