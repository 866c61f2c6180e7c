"""
Tests for input models, scene payloads and configuration
"""

import logging
import subprocess
import sys
from concurrent.futures import ThreadPoolExecutor

import pytest

from slidecanvas.config.logging_config import apply_logging_config, get_logging_config
from slidecanvas.config.scene_config import SceneConfig
from slidecanvas.exceptions import DuplicateShapeError, ImageDecodeError
from slidecanvas.models.component import Component
from slidecanvas.models.scene import (
    FrameDescriptor,
    FrameProps,
    GeoProps,
    GeoShapeDescriptor,
    to_rich_text,
)
from slidecanvas.models.slide import PresentationDocument, Slide
from slidecanvas.utils.threading import run_in_threadpool


class TestComponent:

    def test_camel_case_fields(self):
        component = Component.model_validate({
            "id": 7,
            "type": "image",
            "zIndex": 4,
            "style": {"backgroundColor": "#fff", "fontSize": 12},
            "metadata": {"imageUrl": "data:,x", "tableData": [["a"]], "hasHeader": True},
        })
        assert component.id == "7"
        assert component.z_index == 4
        assert component.style.background_color == "#fff"
        assert component.style.font_size == 12
        assert component.metadata.image_url == "data:,x"
        assert component.metadata.has_header is True

    def test_missing_style_and_metadata(self):
        component = Component.model_validate({"type": "text", "style": None, "metadata": None})
        assert component.style.color is None
        assert component.metadata.table_data is None

    def test_key_falls_back_to_index(self):
        assert Component(type="text").key(3) == "3"
        assert Component.model_validate({"id": "", "type": "text"}).key(3) == "3"
        assert Component(id="abc", type="text").key(3) == "abc"

    def test_malformed_fields_read_as_absent(self):
        component = Component.model_validate({
            "type": "table",
            "x": "12",
            "y": "left",
            "zIndex": float("nan"),
            "content": 42,
            "richText": "not a doc",
            "style": {"fontSize": "12pt", "color": 123, "fontFamily": ["Arial"]},
            "metadata": {"tableData": "oops", "rows": 2.5, "cols": "3", "hasHeader": "yes", "imageUrl": {}},
        })
        assert component.x == 12
        assert component.y is None
        assert component.z_index is None
        assert component.content == "42"
        assert component.rich_text is None
        assert component.style.font_size is None
        assert component.style.color is None
        assert component.style.font_family is None
        assert component.metadata.table_data is None
        assert component.metadata.rows is None
        assert component.metadata.cols == 3
        assert component.metadata.has_header is None
        assert component.metadata.image_url is None

    def test_non_object_style_and_metadata(self):
        component = Component.model_validate({"type": "shape", "style": "bold", "metadata": [1]})
        assert component.style.background_color is None
        assert component.metadata.shape_type is None

    def test_unknown_fields_are_kept(self):
        component = Component.model_validate({"type": "chart", "series": [1, 2]})
        assert component.type == "chart"


class TestSlide:

    def test_display_name(self):
        assert Slide.model_validate({"slideNumber": 3}).display_name == "Slide 3"
        assert Slide.model_validate({"metadata": {"name": "Agenda"}}).display_name == "Agenda"
        assert Slide.model_validate({"metadata": None}).display_name == "Slide 1"
        assert Slide.model_validate({"slideNumber": "x", "metadata": {"name": 5}}).display_name == "Slide 1"

    def test_document_from_list(self):
        document = PresentationDocument.model_validate([{"components": []}, {}])
        assert len(document.slides) == 2
        assert document.components == []


class TestScenePayload:

    def test_rich_text_one_paragraph_per_line(self):
        assert to_rich_text("a\nb") == {
            "type": "doc",
            "content": [
                {"type": "paragraph", "content": [{"type": "text", "text": "a"}]},
                {"type": "paragraph", "content": [{"type": "text", "text": "b"}]},
            ],
        }

    def test_payload_uses_canvas_field_names(self):
        shape = GeoShapeDescriptor(
            id="shape:g",
            x=1,
            y=2,
            parent_id="shape:f",
            props=GeoProps(geo="rectangle", color="grey", fill="none", size="m", w=10, h=10),
        )
        payload = shape.to_payload()
        assert payload["parentId"] == "shape:f"
        assert payload["type"] == "geo"
        assert "parent_id" not in payload

    def test_frame_without_parent_omits_key(self):
        frame = FrameDescriptor(id="shape:f", props=FrameProps(w=1, h=1, name="Slide 1"))
        assert "parentId" not in frame.to_payload()

    def test_invalid_palette_value_rejected(self):
        with pytest.raises(ValueError):
            GeoProps(geo="rectangle", color="magenta", fill="none", size="m", w=1, h=1)


class TestExceptions:

    def test_cause_and_context_in_message(self):
        error = ImageDecodeError("bad payload", cause=ValueError("boom"), context={"slide": 1})
        text = str(error)
        assert "bad payload" in text
        assert "ValueError: boom" in text
        assert "'slide': 1" in text

    def test_duplicate_shape_carries_id(self):
        error = DuplicateShapeError("shape:x")
        assert error.shape_id == "shape:x"
        assert "shape:x" in str(error)


class TestSceneConfig:

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SLIDECANVAS_SLIDES_PER_ROW", "3")
        monkeypatch.setenv("SLIDECANVAS_ZOOM_ANIMATION_MS", "0")
        config = SceneConfig()
        assert config.slides_per_row == 3
        assert config.zoom_animation_ms == 0
        assert config.to_dict()["slides_per_row"] == 3

    @pytest.mark.parametrize("overrides", [
        {"slides_per_row": 0},
        {"slide_spacing": -1},
        {"base_frame_width": 0},
        {"zoom_animation_ms": -5},
    ])
    def test_validate_rejects_bad_values(self, scene_config, overrides):
        for name, value in overrides.items():
            setattr(scene_config, name, value)
        with pytest.raises(ValueError):
            scene_config.validate()


class TestLoggingConfig:

    def test_profile_selection(self, monkeypatch):
        monkeypatch.delenv("ENV", raising=False)
        monkeypatch.delenv("DEBUG", raising=False)
        assert get_logging_config()["environment"] == "development"

        monkeypatch.setenv("ENV", "production")
        assert get_logging_config()["default_level"] == "WARNING"

        monkeypatch.setenv("DEBUG", "true")
        assert get_logging_config()["environment"] == "debug"

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            apply_logging_config(level="error")
            assert root.level == logging.ERROR
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_importing_the_package_leaves_logging_alone(self):
        script = (
            "import logging, slidecanvas, slidecanvas.cli\n"
            "root = logging.getLogger()\n"
            "assert root.handlers == [], root.handlers\n"
            "assert root.level == logging.WARNING, root.level\n"
        )
        completed = subprocess.run([sys.executable, "-c", script], capture_output=True, text=True)
        assert completed.returncode == 0, completed.stderr


class TestThreadpool:

    @pytest.mark.asyncio
    async def test_runs_with_args_and_kwargs(self):
        with ThreadPoolExecutor(max_workers=1) as executor:
            result = await run_in_threadpool(executor, "-".join, ["a", "b"])
            assert result == "a-b"
        assert await run_in_threadpool(None, int, "ff", base=16) == 255
