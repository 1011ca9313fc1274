"""Trainings calculator core: distance, speed and calorie formulas.

The text report lives in :mod:`app.trainings.report`.
"""

from app.trainings.formulas import (distance, mean_speed, running_spent_calories, swimming_mean_speed,
                                    swimming_spent_calories, walking_spent_calories, )

__all__ = ["distance", "mean_speed", "swimming_mean_speed", "running_spent_calories", "walking_spent_calories",
           "swimming_spent_calories", ]
