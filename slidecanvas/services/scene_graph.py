"""
In-memory scene graph: the output boundary towards the canvas runtime.

It records create-shape, create-asset, delete and viewport calls in order.
A runtime adapter can subclass it and forward each call after the base
bookkeeping succeeded.
"""

import logging
from typing import Dict, Any, List, Optional, Sequence

from slidecanvas.exceptions import AssetRegistrationError, DuplicateShapeError
from slidecanvas.models.scene import AssetRecord, SceneShapeDescriptor

logger = logging.getLogger(__name__)


class SceneGraph:
    """Shapes and assets of the current page, in creation order"""

    def __init__(self):
        self._shapes: Dict[str, SceneShapeDescriptor] = {}
        self._assets: Dict[str, AssetRecord] = {}
        self.viewport_requests: List[Dict[str, Any]] = []

    # Shapes

    def create_shape(self, shape: SceneShapeDescriptor) -> SceneShapeDescriptor:
        if shape.id in self._shapes:
            raise DuplicateShapeError(shape.id, context={"type": shape.type})
        if shape.parent_id is not None and shape.parent_id not in self._shapes:
            logger.warning(f"Shape {shape.id} references unknown parent {shape.parent_id}")
        self._shapes[shape.id] = shape
        return shape

    def get_shape(self, shape_id: str) -> Optional[SceneShapeDescriptor]:
        return self._shapes.get(shape_id)

    def get_current_page_shapes(self) -> List[SceneShapeDescriptor]:
        return list(self._shapes.values())

    def delete_shapes(self, shape_ids: Sequence[str]) -> None:
        for shape_id in shape_ids:
            self._shapes.pop(shape_id, None)

    def clear(self) -> None:
        """Delete every shape on the page; registered assets are kept"""
        self.delete_shapes([shape.id for shape in self.get_current_page_shapes()])

    # Assets

    def create_assets(self, assets: Sequence[AssetRecord]) -> None:
        for asset in assets:
            if not asset.props.src:
                raise AssetRegistrationError(f"Asset {asset.id} has no source", context={"asset_id": asset.id})
            self._assets[asset.id] = asset

    def get_asset(self, asset_id: str) -> Optional[AssetRecord]:
        return self._assets.get(asset_id)

    @property
    def assets(self) -> List[AssetRecord]:
        return list(self._assets.values())

    # Viewport

    def zoom_to_fit(self, animation_duration: int = 500) -> None:
        self.viewport_requests.append({"type": "zoomToFit", "animation": {"duration": animation_duration}})

    def to_payload(self) -> Dict[str, Any]:
        return {
            "shapes": [shape.to_payload() for shape in self._shapes.values()],
            "assets": [asset.to_payload() for asset in self._assets.values()],
            "viewport": list(self.viewport_requests),
        }
