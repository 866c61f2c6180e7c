"""
slidecanvas: convert parsed presentation documents into a scene graph of
primitive canvas shapes and image assets.
"""

from slidecanvas.models import Component, PresentationDocument, Slide
from slidecanvas.services import SceneBuilder, SceneBuildResult, SceneGraph

__version__ = "0.1.0"

__all__ = [
    'Component',
    'PresentationDocument',
    'Slide',
    'SceneBuilder',
    'SceneBuildResult',
    'SceneGraph'
]
