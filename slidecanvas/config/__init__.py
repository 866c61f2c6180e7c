"""
Configuration package.
"""

from slidecanvas.config.scene_config import SceneConfig, get_config
from slidecanvas.config.logging_config import get_logging_config, apply_logging_config

__all__ = [
    'SceneConfig',
    'get_config',
    'get_logging_config',
    'apply_logging_config'
]
