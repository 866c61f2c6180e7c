"""
Configuration for scene building.

Layout constants default to a 16:9 reference frame laid out four slides
per row. Each value can be overridden from the environment.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Any


@dataclass
class SceneConfig:
    """Layout and viewport settings for the scene builder"""

    # Grid layout
    slides_per_row: int = field(default_factory=lambda: int(os.getenv('SLIDECANVAS_SLIDES_PER_ROW', '4')))
    slide_spacing: float = field(default_factory=lambda: float(os.getenv('SLIDECANVAS_SLIDE_SPACING', '200')))
    grid_margin: float = field(default_factory=lambda: float(os.getenv('SLIDECANVAS_GRID_MARGIN', '50')))

    # Frame sizing (standard 16:9 PowerPoint resolution)
    base_frame_width: float = field(default_factory=lambda: float(os.getenv('SLIDECANVAS_BASE_FRAME_WIDTH', '1280')))
    base_frame_height: float = field(default_factory=lambda: float(os.getenv('SLIDECANVAS_BASE_FRAME_HEIGHT', '720')))
    frame_padding: float = field(default_factory=lambda: float(os.getenv('SLIDECANVAS_FRAME_PADDING', '50')))

    # Viewport
    zoom_animation_ms: int = field(default_factory=lambda: int(os.getenv('SLIDECANVAS_ZOOM_ANIMATION_MS', '500')))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'slides_per_row': self.slides_per_row,
            'slide_spacing': self.slide_spacing,
            'grid_margin': self.grid_margin,
            'base_frame_width': self.base_frame_width,
            'base_frame_height': self.base_frame_height,
            'frame_padding': self.frame_padding,
            'zoom_animation_ms': self.zoom_animation_ms,
        }

    def validate(self) -> None:
        """Validate configuration values"""
        if self.slides_per_row < 1:
            raise ValueError(f"slides_per_row must be at least 1, got {self.slides_per_row}")

        if self.slide_spacing < 0:
            raise ValueError(f"slide_spacing must not be negative, got {self.slide_spacing}")

        if self.base_frame_width <= 0 or self.base_frame_height <= 0:
            raise ValueError(
                f"base frame size must be positive, got {self.base_frame_width}x{self.base_frame_height}"
            )

        if self.zoom_animation_ms < 0:
            raise ValueError(f"zoom_animation_ms must not be negative, got {self.zoom_animation_ms}")


@lru_cache(maxsize=1)
def get_config() -> SceneConfig:
    """Get singleton configuration instance"""
    config = SceneConfig()
    config.validate()
    return config
