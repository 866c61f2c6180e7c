"""
Tests for uniform frame sizing and grid placement
"""

import pytest

from slidecanvas.config.scene_config import SceneConfig
from slidecanvas.models.component import Component
from slidecanvas.models.slide import Slide
from slidecanvas.services.layout_planner import LayoutPlanner, calculate_component_bounds


def slide_with(*components):
    return Slide.model_validate({"components": list(components)})


class TestComponentBounds:

    def test_empty_slide(self):
        assert calculate_component_bounds([]) == (0, 0)

    def test_max_edges(self):
        components = [
            Component(type="text", x=10, y=10, width=100, height=50),
            Component(type="shape", x=500, y=5, width=20, height=20),
            Component(type="shape", x=0, y=300, width=10, height=10),
        ]
        assert calculate_component_bounds(components) == (520, 310)

    def test_missing_fields_count_as_zero(self):
        components = [Component(type="text", x=700), Component(type="text", y=400, height=None)]
        assert calculate_component_bounds(components) == (700, 400)


class TestFrameSize:

    def test_single_empty_slide_uses_base_size(self, scene_config):
        plan = LayoutPlanner(scene_config).plan([slide_with()])
        assert (plan.frame_width, plan.frame_height) == (1280, 720)
        assert plan.origin(0) == (50, 50)

    def test_size_is_uniform_across_slides(self, scene_config):
        big = slide_with({"type": "shape", "x": 1000, "y": 500, "width": 400, "height": 300})
        empty = slide_with()

        plan = LayoutPlanner(scene_config).plan([big, empty])

        assert (plan.frame_width, plan.frame_height) == (1450, 850)
        assert len(plan.origins) == 2

    def test_width_and_height_grow_independently(self, scene_config):
        wide = slide_with({"type": "shape", "x": 1500, "y": 0, "width": 100, "height": 100})
        plan = LayoutPlanner(scene_config).plan([wide])
        assert (plan.frame_width, plan.frame_height) == (1650, 720)


class TestGridPlacement:

    def test_fifth_slide_wraps_to_second_row(self, scene_config):
        slides = [slide_with() for _ in range(5)]
        plan = LayoutPlanner(scene_config).plan(slides)

        assert plan.origin(4) == (50, plan.frame_height + 200 + 50)
        assert plan.origin(3) == (3 * (plan.frame_width + 200) + 50, 50)

    @pytest.mark.parametrize("count", [1, 4, 9, 17])
    def test_frames_never_overlap(self, scene_config, count):
        plan = LayoutPlanner(scene_config).plan([slide_with() for _ in range(count)])
        boxes = [(o.x, o.y, o.x + plan.frame_width, o.y + plan.frame_height) for o in plan.origins]
        for i, a in enumerate(boxes):
            for b in boxes[i + 1:]:
                assert a[2] <= b[0] or b[2] <= a[0] or a[3] <= b[1] or b[3] <= a[1]

    def test_columns_follow_config(self):
        config = SceneConfig(slides_per_row=2, slide_spacing=100, grid_margin=0,
                             base_frame_width=1280, base_frame_height=720, frame_padding=50)
        plan = LayoutPlanner(config).plan([slide_with() for _ in range(3)])
        assert plan.origin(1) == (1380, 0)
        assert plan.origin(2) == (0, 820)
