"""
Training report.

Dispatches a training-type tag to its plugin, runs the plugin's
distance -> speed -> calories pipeline and renders a fixed text template.

An unknown tag is **not** an error for :func:`generate_report`: it returns
the sentinel message of the report language.  :func:`compute_summary` is the
structured counterpart and raises
:class:`~app.sports.registry.UnknownTrainingTypeError` instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

# Ensure plugins are registered before the registry is used.
import app.sports  # noqa: F401
from app.core.config import settings
from app.core.logging import get_logger
from app.schemas.training import TrainingInput, TrainingSummary
from app.sports.registry import TrainingRegistry, UnknownTrainingTypeError

logger = get_logger(__name__)

# ======================================================================
# Templates
# ======================================================================

_REPORT_TEMPLATES: dict[str, str] = {
    "en": ("Training type: {name}\n"
           "Duration: {duration:.2f} h.\n"
           "Distance: {distance:.2f} km.\n"
           "Speed: {speed:.2f} km/h\n"
           "Calories burned: {calories:.2f}\n"),
    "ru": ("Тип тренировки: {name}\n"
           "Длительность: {duration:.2f} ч.\n"
           "Дистанция: {distance:.2f} км.\n"
           "Скорость: {speed:.2f} км/ч\n"
           "Сожгли калорий: {calories:.2f}\n"),
}

UNKNOWN_TRAINING_TYPE: dict[str, str] = {
    "en": "unknown training type",
    "ru": "неизвестный тип тренировки",
}

# Localized names; English falls back to the plugin display name.
_TRAINING_NAMES: dict[str, dict[str, str]] = {
    "ru": {"running": "Бег", "walking": "Ходьба", "swimming": "Плавание"},
}

SUPPORTED_LANGUAGES = tuple(_REPORT_TEMPLATES)


def _resolve_language(language: Optional[str]) -> str:
    lang = language or settings.REPORT_LANGUAGE
    if lang not in _REPORT_TEMPLATES:
        raise ValueError(f"Unsupported report language '{lang}'. Available: {list(SUPPORTED_LANGUAGES)}")
    return lang


# ======================================================================
# Computation
# ======================================================================


def compute_summary(action_count: int, training_type: Union[str, Enum], duration_h: float, weight_kg: float,
                    height_cm: float = 0.0, pool_length_m: int = 0, pool_laps: int = 0, ) -> TrainingSummary:
    """Compute distance, mean speed and calories for one session.

    Raises:
        UnknownTrainingTypeError: *training_type* matches no registered plugin.
    """
    plugin = TrainingRegistry.get_or_raise(training_type)
    data = TrainingInput(action_count=action_count, training_type=plugin.display_name, duration_h=duration_h,
                         weight_kg=weight_kg, height_cm=height_cm, pool_length_m=pool_length_m,
                         pool_laps=pool_laps, )
    summary = plugin.compute_summary(data)
    logger.debug("Training summary computed", training_type=summary.training_type,
                 distance_km=summary.distance_km, mean_speed_kmh=summary.mean_speed_kmh,
                 calories=summary.calories, )
    return summary


def format_report(summary: TrainingSummary, language: Optional[str] = None) -> str:
    """Render *summary* with the template of *language* (settings default)."""
    lang = _resolve_language(language)
    plugin = TrainingRegistry.get_or_raise(summary.training_type)
    name = _TRAINING_NAMES.get(lang, {}).get(plugin.training_id, plugin.display_name)
    return _REPORT_TEMPLATES[lang].format(name=name, duration=summary.duration_h, distance=summary.distance_km,
                                          speed=summary.mean_speed_kmh, calories=summary.calories, )


def generate_report(action_count: int, training_type: Union[str, Enum], duration_h: float, weight_kg: float,
                    height_cm: float = 0.0, pool_length_m: int = 0, pool_laps: int = 0, *,
                    language: Optional[str] = None, ) -> str:
    """Return the human-readable report for one session.

    Args:
        action_count: Steps (running / walking) or strokes (swimming).
        training_type: Plugin id, display name, alias or
            :class:`~app.schemas.training.TrainingType` member.
        duration_h: Duration in hours.
        weight_kg: Body weight in kilograms.
        height_cm: Body height in centimetres (walking only).
        pool_length_m: Pool length in metres (swimming only).
        pool_laps: Pool lengths swum (swimming only).
        language: ``'en'`` or ``'ru'``; defaults to ``settings.REPORT_LANGUAGE``.

    Returns:
        Five newline-terminated lines, or the unknown-type sentinel.
    """
    lang = _resolve_language(language)
    try:
        summary = compute_summary(action_count, training_type, duration_h, weight_kg, height_cm, pool_length_m,
                                  pool_laps, )
    except UnknownTrainingTypeError as e:
        logger.warning("Unknown training type", training_type=str(e.tag), available=e.available)
        return UNKNOWN_TRAINING_TYPE[lang]
    return format_report(summary, lang)
