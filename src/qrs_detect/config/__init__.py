"""Configuration system for qrs-detect."""

from .loaders import ConfigLoader
from .models import DetectionSettings, Settings

__all__ = [
    "ConfigLoader",
    "DetectionSettings",
    "Settings",
]
