"""
Scene Builder

Top-level orchestrator: clears the scene graph, lays out one frame per
slide, draws every slide's components into its frame and finally asks the
runtime to fit the viewport to the content.

The scene graph is rebuilt from scratch on every call; there is no
incremental diffing.
"""

import asyncio
import logging
from concurrent.futures import Executor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from slidecanvas.config.scene_config import SceneConfig, get_config
from slidecanvas.exceptions import ConcurrentRebuildError
from slidecanvas.models.component import Component
from slidecanvas.models.scene import FrameDescriptor, FrameProps, SceneShapeDescriptor, create_shape_id
from slidecanvas.models.slide import PresentationDocument, Slide
from slidecanvas.services.component_dispatcher import ComponentDispatcher
from slidecanvas.services.diagnostics import Diagnostics
from slidecanvas.services.image_resolver import ImageAssetResolver
from slidecanvas.services.layout_planner import LayoutPlan, LayoutPlanner
from slidecanvas.services.scene_graph import SceneGraph

logger = logging.getLogger(__name__)


@dataclass
class SceneBuildResult:
    shapes: List[SceneShapeDescriptor] = field(default_factory=list)
    layout: Optional[LayoutPlan] = None
    stats: Dict[str, int] = field(default_factory=dict)
    diagnostics: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def shape_ids(self) -> List[str]:
        return [shape.id for shape in self.shapes]


class SceneBuilder:
    """
    Builds the canvas scene for a presentation document.

    Callers must not run two rebuilds on the same builder at once; a second
    concurrent call fails fast with ConcurrentRebuildError.
    """

    def __init__(
        self,
        scene: Optional[SceneGraph] = None,
        config: Optional[SceneConfig] = None,
        thread_pool: Optional[Executor] = None,
    ):
        self.scene = scene if scene is not None else SceneGraph()
        self.config = config or get_config()
        self.diagnostics = Diagnostics()
        self.layout_planner = LayoutPlanner(self.config)
        self.dispatcher = ComponentDispatcher(
            self.scene,
            self.diagnostics,
            ImageAssetResolver(self.scene, self.diagnostics, thread_pool),
        )
        self.stats: Dict[str, int] = {}
        self._lock = asyncio.Lock()

    async def build(self, document: Union[PresentationDocument, Dict[str, Any], List[Any]]) -> SceneBuildResult:
        """Draw a document: slides with frames, or the legacy flat component list"""
        if not isinstance(document, PresentationDocument):
            document = PresentationDocument.model_validate(document)

        if document.slides:
            return await self.draw_slides(document.slides)
        if document.components:
            return await self.draw_components(document.components)
        logger.info("Nothing to draw: document has no slides and no components")
        return SceneBuildResult()

    async def draw_slides(self, slides: Sequence[Slide]) -> SceneBuildResult:
        if not slides:
            return SceneBuildResult()

        async with self._rebuild():
            logger.info(f"Drawing {len(slides)} slides with frames")
            self._begin()

            self.stats["slides"] = len(slides)
            layout = self.layout_planner.plan(slides)
            shapes: List[SceneShapeDescriptor] = []

            for slide_index, slide in enumerate(slides):
                origin = layout.origin(slide_index)
                logger.info(
                    f"Drawing slide {slide_index + 1} at ({origin.x}, {origin.y}) size "
                    f"{layout.frame_width}x{layout.frame_height} with {len(slide.components)} components"
                )

                frame = FrameDescriptor(
                    id=create_shape_id(f"slide-frame-{slide_index}"),
                    x=origin.x,
                    y=origin.y,
                    props=FrameProps(w=layout.frame_width, h=layout.frame_height, name=slide.display_name),
                )
                self.scene.create_shape(frame)
                self.stats["frames"] += 1
                shapes.append(frame)

                shapes.extend(
                    await self.dispatcher.draw_components_in_frame(
                        slide.components, origin.x, origin.y, slide_index, frame.id
                    )
                )

            self.scene.zoom_to_fit(animation_duration=self.config.zoom_animation_ms)
            return self._finish(shapes, layout)

    async def draw_components(self, components: Sequence[Component]) -> SceneBuildResult:
        """Legacy mode: components without slide structure, absolute positions, no frames"""
        if not components:
            return SceneBuildResult()

        async with self._rebuild():
            logger.info(f"Drawing {len(components)} components without slides structure")
            self._begin()

            shapes = await self.dispatcher.draw_components_in_frame(components, 0, 0, 0, None)

            self.scene.zoom_to_fit(animation_duration=self.config.zoom_animation_ms)
            return self._finish(shapes, None)

    def _rebuild(self) -> asyncio.Lock:
        if self._lock.locked():
            raise ConcurrentRebuildError("A scene rebuild is already running on this builder")
        return self._lock

    def _begin(self) -> None:
        # Clear existing shapes
        self.scene.clear()
        self.diagnostics.clear()
        self.dispatcher.reset_stats()
        self.stats = {"slides": 0, "frames": 0}

    def _finish(self, shapes: List[SceneShapeDescriptor], layout: Optional[LayoutPlan]) -> SceneBuildResult:
        self.stats.update(self.dispatcher.stats)
        self.stats["diagnostics"] = len(self.diagnostics)
        logger.info(f"Scene build complete. Stats: {self.stats}")
        return SceneBuildResult(
            shapes=shapes,
            layout=layout,
            stats=dict(self.stats),
            diagnostics=self.diagnostics.to_list(),
        )
