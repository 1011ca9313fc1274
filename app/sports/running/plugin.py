"""
Running training plugin.

Distance comes from the step count, speed from distance over duration.
Calories grow linearly with speed::

    calories = (18 * speed + 1.79) * weight / 1000 * duration_h * 60
"""

from app.schemas.training import TrainingInput, TrainingType
from app.sports.base import TrainingPlugin
from app.trainings import formulas


class RunningPlugin(TrainingPlugin):
    """Running training plugin implementation."""

    @property
    def training_id(self) -> str:
        return "running"

    @property
    def display_name(self) -> str:
        return TrainingType.RUNNING.value

    @property
    def aliases(self) -> tuple[str, ...]:
        return ("Бег",)

    def mean_speed(self, data: TrainingInput, distance_km: float) -> float:
        return formulas.mean_speed(distance_km, data.duration_h)

    def spent_calories(self, data: TrainingInput, speed_kmh: float) -> float:
        return formulas.running_spent_calories(data.weight_kg, data.duration_h, speed_kmh)
