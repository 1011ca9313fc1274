"""
Distance, speed and calorie formulas for step- and stroke-based trainings.

All functions are pure and perform no input validation: negative or zero
inputs are the caller's responsibility and simply produce the number the
formula yields.  A zero duration yields a speed of ``0``; a zero height in
the walking formula yields ``inf`` / ``nan`` instead of raising.
"""

import math

# Base units
LEN_STEP_M = 0.65  # average length of one step / stroke
M_IN_KM = 1000
MIN_IN_H = 60
KMH_IN_MSEC = 0.278  # km/h -> m/s
CM_IN_M = 100

# Running calories
RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER = 18
RUNNING_CALORIES_MEAN_SPEED_SHIFT = 1.79

# Walking calories
WALKING_CALORIES_WEIGHT_MULTIPLIER = 0.035
WALKING_SPEED_HEIGHT_MULTIPLIER = 0.029

# Swimming calories
SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2


def _ratio(numerator: float, denominator: float) -> float:
    """IEEE-style division: ``x / 0`` is ``inf`` and ``0 / 0`` is ``nan``."""
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


def distance(action_count: int) -> float:
    """Distance in kilometres covered by *action_count* steps or strokes."""
    return action_count * LEN_STEP_M / M_IN_KM


def mean_speed(distance_km: float, duration_h: float) -> float:
    """Mean speed in km/h.  Returns ``0`` when *duration_h* is zero."""
    if duration_h == 0:
        return 0.0
    return distance_km / duration_h


def swimming_mean_speed(pool_length_m: int, pool_laps: int, duration_h: float) -> float:
    """
    Mean swimming speed in km/h, computed from the pool rather than strokes.

    Args:
        pool_length_m: Pool length in metres
        pool_laps: Number of pool lengths swum
        duration_h: Training duration in hours

    Returns:
        Speed in km/h, ``0`` when *duration_h* is zero
    """
    if duration_h == 0:
        return 0.0
    return pool_length_m * pool_laps / M_IN_KM / duration_h


def running_spent_calories(weight_kg: float, duration_h: float, speed_kmh: float) -> float:
    """
    Calories burned while running.

    Formula: (18 * speed + 1.79) * weight / 1000 * duration_h * 60
    """
    return ((RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER * speed_kmh + RUNNING_CALORIES_MEAN_SPEED_SHIFT)
            * weight_kg / M_IN_KM * duration_h * MIN_IN_H)


def walking_spent_calories(duration_h: float, weight_kg: float, height_cm: float, speed_kmh: float) -> float:
    """
    Calories burned while walking.

    Formula: (0.035 * weight + (speed_mps^2 / height_m) * 0.029 * weight) * duration_h * 60

    Args:
        duration_h: Training duration in hours
        weight_kg: Body weight in kilograms
        height_cm: Body height in centimetres
        speed_kmh: Mean walking speed in km/h

    Notes:
        - Speed enters squared, so faster walks cost disproportionately more
        - Taller walkers are penalised less for the same speed
    """
    speed_mps = speed_kmh * KMH_IN_MSEC
    height_m = height_cm / CM_IN_M
    return ((WALKING_CALORIES_WEIGHT_MULTIPLIER * weight_kg
             + _ratio(speed_mps ** 2, height_m) * WALKING_SPEED_HEIGHT_MULTIPLIER * weight_kg)
            * duration_h * MIN_IN_H)


def swimming_spent_calories(duration_h: float, weight_kg: float, speed_kmh: float) -> float:
    """Calories burned while swimming: (speed + 1.1) * 2 * weight * duration_h."""
    return (speed_kmh + SWIMMING_CALORIES_MEAN_SPEED_SHIFT) * SWIMMING_CALORIES_WEIGHT_MULTIPLIER * weight_kg * duration_h
