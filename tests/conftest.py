"""
Pytest configuration and fixtures
"""

import base64
import struct
import zlib
from io import BytesIO
from typing import Any, Dict

import pytest
from PIL import Image

from slidecanvas.config.scene_config import SceneConfig
from slidecanvas.services.diagnostics import Diagnostics
from slidecanvas.services.scene_builder import SceneBuilder
from slidecanvas.services.scene_graph import SceneGraph


def make_png_bytes(width: int = 4, height: int = 3) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (width, height), (255, 0, 0)).save(buffer, "PNG")
    return buffer.getvalue()


def _png_chunk(chunk_type: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + chunk_type + data + struct.pack(">I", zlib.crc32(chunk_type + data))


def make_png_header_bytes(width: int, height: int) -> bytes:
    """A PNG whose header declares ``width`` x ``height`` without the pixel data to back it."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IDAT", zlib.compress(b"\x00"))
        + _png_chunk(b"IEND", b"")
    )


@pytest.fixture
def oversized_png_data_uri() -> str:
    """Header claims 20000x20000 pixels, well past Pillow's decompression bomb limit."""
    return "data:image/png;base64," + base64.b64encode(make_png_header_bytes(20000, 20000)).decode("utf-8")


@pytest.fixture
def png_data_uri() -> str:
    """A real 4x3 PNG encoded as a base64 data URI."""
    return "data:image/png;base64," + base64.b64encode(make_png_bytes()).decode("utf-8")


@pytest.fixture
def scene_config() -> SceneConfig:
    """Default layout constants, independent of the environment."""
    return SceneConfig(
        slides_per_row=4,
        slide_spacing=200,
        grid_margin=50,
        base_frame_width=1280,
        base_frame_height=720,
        frame_padding=50,
        zoom_animation_ms=500,
    )


@pytest.fixture
def scene() -> SceneGraph:
    return SceneGraph()


@pytest.fixture
def diagnostics() -> Diagnostics:
    return Diagnostics()


@pytest.fixture
def builder(scene: SceneGraph, scene_config: SceneConfig) -> SceneBuilder:
    return SceneBuilder(scene=scene, config=scene_config)


@pytest.fixture
def sample_document(png_data_uri: str) -> Dict[str, Any]:
    """Two slides covering every component type, as produced by the parser."""
    return {
        "slides": [
            {
                "slideNumber": 1,
                "metadata": {"name": "Intro"},
                "components": [
                    {
                        "id": "title",
                        "type": "text",
                        "x": 100, "y": 80, "width": 600, "height": 60,
                        "zIndex": 2,
                        "content": "Quarterly Review",
                        "style": {"color": "#E97132", "fontSize": 28, "fontFamily": "Georgia"},
                    },
                    {
                        "id": "box",
                        "type": "shape",
                        "x": 50, "y": 50, "width": 300, "height": 200,
                        "rotation": 30,
                        "zIndex": 1,
                        "style": {"backgroundColor": "#4472C4", "borderColor": "#000000"},
                        "metadata": {"shapeType": "star5"},
                    },
                    {
                        "id": "logo",
                        "type": "image",
                        "x": 900, "y": 400, "width": 120, "height": 90,
                        "zIndex": 3,
                        "metadata": {"imageUrl": png_data_uri, "imageSize": 70, "name": "logo.png"},
                    },
                ],
            },
            {
                "slideNumber": 2,
                "components": [
                    {
                        "id": "grid",
                        "type": "table",
                        "x": 100, "y": 100, "width": 400, "height": 120,
                        "content": "[TABLE]",
                        "metadata": {
                            "tableData": [["Name", "Value"], ["a", ""], ["b", "2"]],
                            "hasHeader": True,
                        },
                    },
                    {
                        "id": "missing",
                        "type": "image",
                        "x": 600, "y": 100,
                        "metadata": {"imageUrl": "https://example.com/picture.png"},
                    },
                ],
            },
        ]
    }
