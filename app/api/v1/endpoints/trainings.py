"""
Training statistics endpoints.
"""

from typing import Literal, Optional

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from app.schemas.training import TrainingReportRequest, TrainingSummary, TrainingTypeInfo
from app.services.training_report_service import TrainingReportService

router = APIRouter()


@router.get("/types", summary="List all available training types from the plugin registry.",
            response_model=list[TrainingTypeInfo], )
def list_training_types():
    return TrainingReportService().list_types()


@router.post("/summary", summary="Compute distance, mean speed and calories for a session.",
             response_model=TrainingSummary, )
def summarize_training(data: TrainingReportRequest):
    return TrainingReportService().summarize(data)


@router.post("/report", summary="Render the text report for a session.", response_class=PlainTextResponse, )
def report_training(data: TrainingReportRequest,
                    language: Optional[Literal["en", "ru"]] = Query(None, description="Report language "
                                                                                      "(defaults to settings)"), ):
    return TrainingReportService().report(data, language)
