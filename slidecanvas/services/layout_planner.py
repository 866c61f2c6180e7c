"""
Layout Planner

Computes one uniform frame size for all slides and a grid origin per slide.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from slidecanvas.config.scene_config import SceneConfig, get_config
from slidecanvas.models.component import Component
from slidecanvas.models.slide import Slide
from slidecanvas.services.geometry import Bounds, Point

logger = logging.getLogger(__name__)


def calculate_component_bounds(components: Sequence[Component]) -> Bounds:
    """Furthest right/bottom edge reached by any component; missing values count as 0"""
    max_x = 0.0
    max_y = 0.0
    for component in components:
        comp_max_x = (component.x or 0) + (component.width or 0)
        comp_max_y = (component.y or 0) + (component.height or 0)
        if comp_max_x > max_x:
            max_x = comp_max_x
        if comp_max_y > max_y:
            max_y = comp_max_y
    return Bounds(max_x, max_y)


@dataclass
class LayoutPlan:
    frame_width: float
    frame_height: float
    origins: List[Point] = field(default_factory=list)

    def origin(self, slide_index: int) -> Point:
        return self.origins[slide_index]


class LayoutPlanner:
    """Grid layout of slide frames, ``slides_per_row`` frames per row."""

    def __init__(self, config: Optional[SceneConfig] = None):
        self.config = config or get_config()

    def frame_size(self, slides: Sequence[Slide]) -> tuple:
        # Uniform size: no frame is smaller than the 16:9 base or its own content
        width = self.config.base_frame_width
        height = self.config.base_frame_height
        for slide in slides:
            bounds = calculate_component_bounds(slide.components)
            width = max(width, bounds.max_x + self.config.frame_padding)
            height = max(height, bounds.max_y + self.config.frame_padding)
        return width, height

    def slide_origin(self, slide_index: int, frame_width: float, frame_height: float) -> Point:
        col = slide_index % self.config.slides_per_row
        row = slide_index // self.config.slides_per_row
        x = col * (frame_width + self.config.slide_spacing) + self.config.grid_margin
        y = row * (frame_height + self.config.slide_spacing) + self.config.grid_margin
        return Point(x, y)

    def plan(self, slides: Sequence[Slide]) -> LayoutPlan:
        frame_width, frame_height = self.frame_size(slides)
        logger.info(f"Using uniform slide size: {frame_width}x{frame_height} for all slides")
        origins = [self.slide_origin(i, frame_width, frame_height) for i in range(len(slides))]
        return LayoutPlan(frame_width=frame_width, frame_height=frame_height, origins=origins)
