"""Configuration adapters."""

from train_finder.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
