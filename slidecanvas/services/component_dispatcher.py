"""
Component Dispatcher

Sorts a slide's components by stacking order and builds the canvas shapes
for each one, strictly one component at a time.
"""

import logging
from typing import Dict, List, Optional, Sequence

from slidecanvas.exceptions import SceneBuildError
from slidecanvas.models.component import Component
from slidecanvas.models.scene import (
    GeoProps,
    GeoShapeDescriptor,
    SceneShapeDescriptor,
    TextProps,
    TextShapeDescriptor,
    create_shape_id,
    to_rich_text,
)
from slidecanvas.services import diagnostics as diag
from slidecanvas.services import style_mapper
from slidecanvas.services.diagnostics import Diagnostics
from slidecanvas.services.geometry import degrees_to_radians, place, text_position
from slidecanvas.services.image_resolver import ImageAssetResolver
from slidecanvas.services.scene_graph import SceneGraph
from slidecanvas.services.table_decomposer import decompose_table

logger = logging.getLogger(__name__)

DEFAULT_SHAPE_SIZE = 100
DEFAULT_TEXT = "Sample text"


def sort_by_z_index(components: Sequence[Component]) -> List[Component]:
    """Stable ascending sort on zIndex; components without one count as 0"""
    return sorted(components, key=lambda c: c.z_index or 0)


class ComponentDispatcher:
    """
    Routes components to the matching shape builder and writes the results
    to the scene graph.

    Attributes:
        scene: Scene graph receiving the shapes
        diagnostics: Collector for skipped or replaced components
        stats: Running counts of emitted shapes by kind
    """

    def __init__(self, scene: SceneGraph, diagnostics: Diagnostics, image_resolver: Optional[ImageAssetResolver] = None):
        self.scene = scene
        self.diagnostics = diagnostics
        self.image_resolver = image_resolver or ImageAssetResolver(scene, diagnostics)
        self.stats: Dict[str, int] = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            "texts": 0,
            "geos": 0,
            "images": 0,
            "placeholders": 0,
            "table_cells": 0,
            "assets": 0,
            "skipped": 0
        }

    def reset_stats(self) -> None:
        self.stats = self._empty_stats()

    async def draw_components_in_frame(
        self,
        components: Sequence[Component],
        frame_x: float,
        frame_y: float,
        slide_index: int,
        frame_id: Optional[str],
    ) -> List[SceneShapeDescriptor]:
        """
        Draw all components of one slide in stacking order.

        Each component is fully built (including any image decode) before the
        next one starts. A failure in one component is recorded as a
        diagnostic and does not affect the others.

        Returns:
            Shapes created for this slide, in emission order
        """
        sorted_components = sort_by_z_index(components)
        logger.debug(
            "Rendering components in zIndex order: "
            + ", ".join(f"{c.type}(z:{c.z_index or 0})" for c in sorted_components)
        )

        emitted: List[SceneShapeDescriptor] = []
        for index, component in enumerate(sorted_components):
            try:
                if component.type == "text":
                    shapes = [self.render_text(component, index, frame_x, frame_y, slide_index, frame_id)]
                elif component.type == "shape":
                    shapes = [self.render_shape(component, index, frame_x, frame_y, slide_index, frame_id)]
                elif component.type == "image":
                    shapes = [await self.render_image(component, index, frame_x, frame_y, slide_index, frame_id)]
                elif component.type == "table":
                    shapes = self.render_table(component, index, frame_x, frame_y, slide_index, frame_id)
                else:
                    self.stats["skipped"] += 1
                    self.diagnostics.warn(
                        diag.UNKNOWN_COMPONENT_TYPE,
                        f"Unknown component type: {component.type}",
                        slide_index,
                        component.id,
                    )
                    continue
            except SceneBuildError as e:
                self.stats["skipped"] += 1
                self.diagnostics.warn(
                    diag.COMPONENT_FAILED,
                    f"Failed to render {component.type} component {component.key(index)}: {e}",
                    slide_index,
                    component.id,
                )
                continue
            emitted.extend(shapes)
        return emitted

    def render_text(
        self,
        component: Component,
        index: int,
        frame_x: float,
        frame_y: float,
        slide_index: int,
        frame_id: Optional[str],
    ) -> TextShapeDescriptor:
        position, rotation = text_position(
            component.x,
            component.y,
            component.width,
            component.height,
            component.rotation,
            frame_x,
            frame_y,
            frame_id is not None,
        )
        if component.rotation:
            logger.debug(f"Text rotation {component.rotation} deg adjusted to ({position.x}, {position.y})")

        style = component.style
        color = style_mapper.classify_text_color(style.color)
        size = style_mapper.classify_size(style.font_size)
        font = style_mapper.classify_font(style.font_family)
        logger.debug(
            f"Text style: color {style.color} -> {color}, size {style.font_size}pt -> {size}, "
            f"font {style.font_family} -> {font}"
        )

        rich_text = component.rich_text or to_rich_text(component.content or DEFAULT_TEXT)

        shape = TextShapeDescriptor(
            id=create_shape_id(f"text-{slide_index}-{component.key(index)}"),
            x=position.x,
            y=position.y,
            rotation=rotation,
            parent_id=frame_id,
            props=TextProps(
                rich_text=rich_text,
                color=color,
                size=size,
                font=font,
                # Autosize only when the source gave no width
                auto_size=not component.width,
                w=component.width or None,
            ),
        )
        self.scene.create_shape(shape)
        self.stats["texts"] += 1
        return shape

    def render_shape(
        self,
        component: Component,
        index: int,
        frame_x: float,
        frame_y: float,
        slide_index: int,
        frame_id: Optional[str],
    ) -> GeoShapeDescriptor:
        x, y = place(component.x, component.y, frame_x, frame_y, frame_id is not None)
        width = component.width or DEFAULT_SHAPE_SIZE
        height = component.height or DEFAULT_SHAPE_SIZE

        style = component.style
        fill_color = style_mapper.classify_fill_color(style.background_color)
        stroke_color = style_mapper.classify_stroke_color(style.border_color)
        shape_type = style_mapper.resolve_shape_type_name(component)
        geo = style_mapper.classify_geo(shape_type)
        color = style_mapper.resolve_geo_color(fill_color, stroke_color)
        fill = style_mapper.resolve_fill_style(style.background_color)
        logger.debug(
            f"Shape {component.key(index)}: {shape_type} -> {geo}, background {style.background_color} -> {fill_color}, "
            f"border {style.border_color} -> {stroke_color}, color {color}, fill {fill}"
        )

        shape = GeoShapeDescriptor(
            id=create_shape_id(f"shape-{slide_index}-{component.key(index)}"),
            x=x,
            y=y,
            # Rotation passes through; the canvas rotates geo shapes in place
            rotation=degrees_to_radians(component.rotation),
            parent_id=frame_id,
            props=GeoProps(
                geo=geo,
                color=color,
                fill=fill,
                size='m',
                w=width,
                h=height,
            ),
        )
        self.scene.create_shape(shape)
        self.stats["geos"] += 1
        return shape

    async def render_image(
        self,
        component: Component,
        index: int,
        frame_x: float,
        frame_y: float,
        slide_index: int,
        frame_id: Optional[str],
    ) -> SceneShapeDescriptor:
        resolved = await self.image_resolver.resolve(component, index=index, slide_index=slide_index,
                                                     frame_x=frame_x, frame_y=frame_y, parent_id=frame_id)
        self.scene.create_shape(resolved.shape)
        if resolved.is_placeholder:
            self.stats["placeholders"] += 1
        else:
            self.stats["images"] += 1
            self.stats["assets"] += 1
        return resolved.shape

    def render_table(
        self,
        component: Component,
        index: int,
        frame_x: float,
        frame_y: float,
        slide_index: int,
        frame_id: Optional[str],
    ) -> List[SceneShapeDescriptor]:
        decomposition = decompose_table(
            component, slide_index, index, frame_x, frame_y, frame_id, self.diagnostics
        )
        for shape in decomposition.shapes:
            self.scene.create_shape(shape)
        self.stats["table_cells"] += len(decomposition.cells)
        self.stats["texts"] += len(decomposition.texts)
        return decomposition.shapes
