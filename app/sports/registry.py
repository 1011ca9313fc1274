"""
Training plugin registry.

Central registry for all available training plugins.  Plugins are
registered at import time via :func:`TrainingRegistry.register`.
Lookup accepts the plugin id, its display name, or any of its aliases.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from app.sports.base import TrainingPlugin


class UnknownTrainingTypeError(KeyError):
    """Raised when a training-type tag does not resolve to a plugin."""

    def __init__(self, tag: object, available: list[str]):
        self.tag = tag
        self.available = available
        super().__init__(f"Training type '{tag}' not registered. Available: {available}")


def _normalize(tag: Union[str, Enum]) -> str:
    if isinstance(tag, Enum):
        tag = tag.value
    return str(tag).strip()


class TrainingRegistry:
    """Singleton registry of available training plugins."""

    _plugins: dict[str, TrainingPlugin] = {}
    _tags: dict[str, str] = {}

    @classmethod
    def register(cls, plugin: TrainingPlugin) -> None:
        """Register a training plugin.

        Raises :class:`ValueError` if ``training_id`` or one of its tags is
        already taken.
        """
        if plugin.training_id in cls._plugins:
            raise ValueError(
                f"Training '{plugin.training_id}' already registered"
            )
        tags = {plugin.training_id, plugin.display_name, *plugin.aliases}
        taken = sorted(t for t in tags if t in cls._tags)
        if taken:
            raise ValueError(
                f"Tags {taken} already registered by '{cls._tags[taken[0]]}'"
            )
        cls._plugins[plugin.training_id] = plugin
        for tag in tags:
            cls._tags[tag] = plugin.training_id

    @classmethod
    def get(cls, tag: Union[str, Enum]) -> Optional[TrainingPlugin]:
        """Get a plugin by id, display name or alias.  Returns ``None`` if not found."""
        training_id = cls._tags.get(_normalize(tag))
        if training_id is None:
            return None
        return cls._plugins[training_id]

    @classmethod
    def get_or_raise(cls, tag: Union[str, Enum]) -> TrainingPlugin:
        """Get a plugin by *tag*.

        Raises :class:`UnknownTrainingTypeError` if not found.
        """
        plugin = cls.get(tag)
        if not plugin:
            raise UnknownTrainingTypeError(tag, cls.available_training_ids())
        return plugin

    @classmethod
    def all(cls) -> dict[str, TrainingPlugin]:
        """Return all registered plugins as ``{training_id: plugin}``."""
        return dict(cls._plugins)

    @classmethod
    def available_training_ids(cls) -> list[str]:
        """Return sorted list of all registered ``training_id`` values."""
        return sorted(cls._plugins.keys())

    @classmethod
    def clear(cls) -> None:
        """Remove all plugins.  Useful for testing."""
        cls._plugins.clear()
        cls._tags.clear()
