"""Adapters layer - external system integrations."""

from train_finder.adapters.config import AppConfig
from train_finder.adapters.schedule import JsonScheduleRepository

__all__ = [
    "AppConfig",
    "JsonScheduleRepository",
]
