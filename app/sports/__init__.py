"""
Training plugin system.

Import this module to register all available training plugins.
New training types are added by:
  1. Creating a plugin class implementing :class:`TrainingPlugin`
  2. Adding a registration line below
"""

from app.sports.registry import TrainingRegistry, UnknownTrainingTypeError
from app.sports.running.plugin import RunningPlugin
from app.sports.walking.plugin import WalkingPlugin
from app.sports.swimming.plugin import SwimmingPlugin

# Register all built-in plugins
TrainingRegistry.register(RunningPlugin())
TrainingRegistry.register(WalkingPlugin())
TrainingRegistry.register(SwimmingPlugin())

__all__ = ["TrainingRegistry", "UnknownTrainingTypeError"]
