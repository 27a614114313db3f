"""Render configuration."""

from .models import RenderConfig
from .config_loader import ConfigLoader

__all__ = [
    'RenderConfig',
    'ConfigLoader',
]
