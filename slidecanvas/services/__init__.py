"""
Scene building services.
"""

from slidecanvas.services.scene_builder import SceneBuilder, SceneBuildResult
from slidecanvas.services.scene_graph import SceneGraph
from slidecanvas.services.diagnostics import Diagnostic, Diagnostics

__all__ = [
    'SceneBuilder',
    'SceneBuildResult',
    'SceneGraph',
    'Diagnostic',
    'Diagnostics'
]
