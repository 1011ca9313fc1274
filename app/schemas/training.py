"""
Training schemas.

``TrainingInput`` carries the raw counters of one session exactly as the
caller provides them; the calculators never validate ranges.  The API layer
uses :class:`TrainingReportRequest`, which adds the range constraints that
make sense for HTTP clients.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class TrainingType(str, Enum):
    """Supported training types (report tag values)."""

    RUNNING = "Running"
    WALKING = "Walking"
    SWIMMING = "Swimming"


# Plugin-read fields that must be strictly positive in API requests.
_POSITIVE_WHEN_REQUIRED = ("height_cm", "pool_length_m")


class TrainingInput(BaseModel):
    """Raw counters for a single training session."""

    action_count: int = Field(..., description="Steps (running / walking) or strokes (swimming)")
    training_type: str = Field(..., description="Training type tag, e.g. 'Running'")
    duration_h: float = Field(..., description="Duration in hours")
    weight_kg: float = Field(..., description="Body weight in kilograms")
    height_cm: float = Field(0.0, description="Body height in centimetres (walking only)")
    pool_length_m: int = Field(0, description="Pool length in metres (swimming only)")
    pool_laps: int = Field(0, description="Pool lengths swum (swimming only)")


class TrainingReportRequest(TrainingInput):
    """API request body.  Same fields as :class:`TrainingInput`, range-checked."""

    action_count: int = Field(..., ge=0, description="Steps (running / walking) or strokes (swimming)")
    duration_h: float = Field(..., ge=0.0, le=48.0, description="Duration in hours")
    weight_kg: float = Field(..., gt=0.0, le=500.0, description="Body weight in kilograms")
    height_cm: float = Field(0.0, ge=0.0, le=300.0, description="Body height in centimetres (walking only)")
    pool_length_m: int = Field(0, ge=0, description="Pool length in metres (swimming only)")
    pool_laps: int = Field(0, ge=0, description="Pool lengths swum (swimming only)")

    @model_validator(mode="after")
    def _check_type_specific_fields(self) -> "TrainingReportRequest":
        """Height (walking) and pool length (swimming) must be positive when the type reads them."""
        from app.sports import TrainingRegistry

        plugin = TrainingRegistry.get(self.training_type)
        if plugin is None:
            return self
        for name in _POSITIVE_WHEN_REQUIRED:
            if name in plugin.required_fields and getattr(self, name) <= 0:
                raise ValueError(f"'{name}' must be greater than 0 for {plugin.display_name.lower()} trainings")
        return self


class TrainingSummary(BaseModel):
    """Derived statistics for one session."""

    training_type: str = Field(..., description="Plugin id of the training type, e.g. 'running'")
    duration_h: float
    distance_km: float
    mean_speed_kmh: float
    calories: float


class TrainingTypeInfo(BaseModel):
    """Registry entry as exposed by the API."""

    training_type: str
    display_name: str
    aliases: list[str]
    required_fields: list[str]
