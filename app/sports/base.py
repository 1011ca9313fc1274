"""
Abstract base class for training plugins.

Every training type must implement this interface.  The plugin defines:

- A unique training identifier (slug)
- A display name and the alternative tags it answers to
- The input fields its pipeline reads
- The distance -> speed -> calories pipeline (TrainingInput -> TrainingSummary)
"""

from abc import ABC, abstractmethod

from app.schemas.training import TrainingInput, TrainingSummary
from app.trainings import formulas


class TrainingPlugin(ABC):
    """Abstract base class that every training plugin must implement."""

    @property
    @abstractmethod
    def training_id(self) -> str:
        """Unique slug identifier, e.g. ``'running'``."""
        ...

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name, e.g. ``'Running'``."""
        ...

    @abstractmethod
    def mean_speed(self, data: TrainingInput, distance_km: float) -> float:
        """Mean speed (km/h) for the session."""
        ...

    @abstractmethod
    def spent_calories(self, data: TrainingInput, speed_kmh: float) -> float:
        """Calories burned for the session at *speed_kmh*."""
        ...

    # ------------------------------------------------------------------
    # Optional overrides with sensible defaults
    # ------------------------------------------------------------------

    @property
    def aliases(self) -> tuple[str, ...]:
        """Additional tags resolving to this plugin.  Default none."""
        return ()

    @property
    def required_fields(self) -> tuple[str, ...]:
        """``TrainingInput`` fields the pipeline reads."""
        return "action_count", "duration_h", "weight_kg"

    def distance(self, data: TrainingInput) -> float:
        """Distance (km).  Every training type counts actions the same way."""
        return formulas.distance(data.action_count)

    def compute_summary(self, data: TrainingInput) -> TrainingSummary:
        """Run the distance -> speed -> calories pipeline."""
        distance_km = self.distance(data)
        speed = self.mean_speed(data, distance_km)
        calories = self.spent_calories(data, speed)
        return TrainingSummary(training_type=self.training_id, duration_h=data.duration_h, distance_km=distance_km,
                               mean_speed_kmh=speed, calories=calories, )
