"""
Walking training plugin.

Same distance and speed pipeline as running, but calories depend on the
square of the speed relative to the walker's height, so ``height_cm`` is
required.
"""

from app.schemas.training import TrainingInput, TrainingType
from app.sports.base import TrainingPlugin
from app.trainings import formulas


class WalkingPlugin(TrainingPlugin):
    """Walking training plugin implementation."""

    @property
    def training_id(self) -> str:
        return "walking"

    @property
    def display_name(self) -> str:
        return TrainingType.WALKING.value

    @property
    def aliases(self) -> tuple[str, ...]:
        return ("Ходьба",)

    @property
    def required_fields(self) -> tuple[str, ...]:
        return super().required_fields + ("height_cm",)

    def mean_speed(self, data: TrainingInput, distance_km: float) -> float:
        return formulas.mean_speed(distance_km, data.duration_h)

    def spent_calories(self, data: TrainingInput, speed_kmh: float) -> float:
        return formulas.walking_spent_calories(data.duration_h, data.weight_kg, data.height_cm, speed_kmh)
