"""
Swimming training plugin.

The reported distance still comes from the stroke count, but the mean
speed is measured from the pool: ``pool_length_m * pool_laps`` over the
duration.  Calories are linear in speed::

    calories = (speed + 1.1) * 2 * weight * duration_h
"""

from app.schemas.training import TrainingInput, TrainingType
from app.sports.base import TrainingPlugin
from app.trainings import formulas


class SwimmingPlugin(TrainingPlugin):
    """Swimming training plugin implementation."""

    @property
    def training_id(self) -> str:
        return "swimming"

    @property
    def display_name(self) -> str:
        return TrainingType.SWIMMING.value

    @property
    def aliases(self) -> tuple[str, ...]:
        return ("Плавание",)

    @property
    def required_fields(self) -> tuple[str, ...]:
        return super().required_fields + ("pool_length_m", "pool_laps")

    def mean_speed(self, data: TrainingInput, distance_km: float) -> float:
        # Pool-based; the stroke distance is not used for speed.
        return formulas.swimming_mean_speed(data.pool_length_m, data.pool_laps, data.duration_h)

    def spent_calories(self, data: TrainingInput, speed_kmh: float) -> float:
        return formulas.swimming_spent_calories(data.duration_h, data.weight_kg, speed_kmh)
