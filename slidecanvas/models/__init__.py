"""
Input and output models.
"""

from slidecanvas.models.component import Component, ComponentStyle, ComponentMetadata
from slidecanvas.models.slide import Slide, SlideMetadata, PresentationDocument
from slidecanvas.models.scene import (
    AssetRecord,
    FrameDescriptor,
    GeoShapeDescriptor,
    ImageShapeDescriptor,
    SceneShapeDescriptor,
    TextShapeDescriptor,
)

__all__ = [
    'Component',
    'ComponentStyle',
    'ComponentMetadata',
    'Slide',
    'SlideMetadata',
    'PresentationDocument',
    'AssetRecord',
    'FrameDescriptor',
    'GeoShapeDescriptor',
    'ImageShapeDescriptor',
    'SceneShapeDescriptor',
    'TextShapeDescriptor'
]
