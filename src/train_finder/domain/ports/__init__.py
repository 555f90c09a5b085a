"""Ports (interfaces) for the ports-and-adapters architecture."""

from train_finder.domain.ports.schedule_repository import ScheduleRepository

__all__ = ["ScheduleRepository"]
