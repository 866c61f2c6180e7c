"""
Image Asset Resolver

Turns an image component's data URI into a registered canvas asset plus an
image shape. Anything that cannot be resolved becomes a grey placeholder
rectangle with the same bounding box, so one bad image never stops the
rest of the slide.
"""

import base64
import binascii
import logging
from concurrent.futures import Executor
from dataclasses import dataclass
from io import BytesIO
from typing import NamedTuple, Optional
from urllib.parse import unquote_to_bytes

from PIL import Image, UnidentifiedImageError

from slidecanvas.exceptions import AssetResolutionError, DuplicateShapeError, ImageDecodeError
from slidecanvas.models.component import Component
from slidecanvas.models.scene import (
    AssetProps,
    AssetRecord,
    GeoProps,
    GeoShapeDescriptor,
    ImageProps,
    ImageShapeDescriptor,
    SceneShapeDescriptor,
    create_asset_id,
    create_shape_id,
)
from slidecanvas.services import diagnostics as diag
from slidecanvas.services.diagnostics import Diagnostics
from slidecanvas.services.geometry import degrees_to_radians, place
from slidecanvas.services.scene_graph import SceneGraph
from slidecanvas.utils.threading import run_in_threadpool

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_WIDTH = 200
DEFAULT_IMAGE_HEIGHT = 150

# Formats Pillow cannot open but the canvas renders natively
PASSTHROUGH_MIME_TYPES = {"image/svg+xml"}


@dataclass
class DecodedImage:
    data: bytes
    mime_type: str
    natural_w: Optional[int] = None
    natural_h: Optional[int] = None


class ResolvedImage(NamedTuple):
    shape: SceneShapeDescriptor
    asset: Optional[AssetRecord]

    @property
    def is_placeholder(self) -> bool:
        return self.asset is None


def is_data_uri(url: Optional[str]) -> bool:
    return bool(url) and url.startswith("data:")


def decode_data_uri(url: str) -> DecodedImage:
    """
    Decode a ``data:`` URI into image bytes.

    Supports base64 and percent-encoded payloads. Bitmap payloads are opened
    with Pillow to confirm they are images and to read their pixel size; the
    MIME type comes from the URI header, or from Pillow when the header has
    none.

    Raises:
        ImageDecodeError: If the URI or its payload cannot be decoded
    """
    if not is_data_uri(url):
        raise ImageDecodeError("Not a data URI")

    header, separator, payload = url.partition(",")
    if not separator:
        raise ImageDecodeError("Data URI has no payload separator")

    params = [p.strip().lower() for p in header[len("data:"):].split(";")]
    declared_mime = params[0]
    try:
        if "base64" in params[1:]:
            data = base64.b64decode("".join(payload.split()), validate=True)
        else:
            data = unquote_to_bytes(payload)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError("Invalid data URI payload", cause=e, context={"mime_type": declared_mime})

    if not data:
        raise ImageDecodeError("Data URI payload is empty", context={"mime_type": declared_mime})

    if declared_mime in PASSTHROUGH_MIME_TYPES:
        return DecodedImage(data=data, mime_type=declared_mime)

    try:
        with Image.open(BytesIO(data)) as img:
            image_format = img.format
            natural_w, natural_h = img.size
            img.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise ImageDecodeError("Payload is not a readable image", cause=e, context={"mime_type": declared_mime})

    mime_type = declared_mime if declared_mime.startswith("image/") else None
    if mime_type is None:
        mime_type = Image.MIME.get(image_format or "", "image/png")

    return DecodedImage(data=data, mime_type=mime_type, natural_w=natural_w, natural_h=natural_h)


class ImageAssetResolver:
    """Resolves image components into assets and image shapes."""

    def __init__(self, scene: SceneGraph, diagnostics: Diagnostics, thread_pool: Optional[Executor] = None):
        self.scene = scene
        self.diagnostics = diagnostics
        self.thread_pool = thread_pool

    async def resolve(
        self,
        component: Component,
        slide_index: int,
        index: int,
        frame_x: float,
        frame_y: float,
        parent_id: Optional[str],
    ) -> ResolvedImage:
        """
        Resolve one image component.

        Components without a data URI get a placeholder right away, without
        suspending. Otherwise the decode runs in the thread pool (the single
        suspension point) and the asset is registered on the scene graph.
        """
        key = component.key(index)
        x, y = place(component.x, component.y, frame_x, frame_y, parent_id is not None)
        width = component.width or DEFAULT_IMAGE_WIDTH
        height = component.height or DEFAULT_IMAGE_HEIGHT
        image_url = component.metadata.image_url

        if not is_data_uri(image_url):
            logger.debug(f"No valid image data URL for image {key}, creating placeholder")
            return ResolvedImage(self._placeholder(slide_index, key, x, y, width, height, parent_id), None)

        shape_id = create_shape_id(f"image-{slide_index}-{key}")
        # The asset id is derived from the same key; registering it for a duplicate
        # component would replace the asset an earlier image already points to
        if self.scene.get_shape(shape_id) is not None:
            raise DuplicateShapeError(shape_id)

        logger.debug(f"Creating image {key} from data URL ({component.metadata.image_size} bytes)")

        try:
            decoded = await run_in_threadpool(self.thread_pool, decode_data_uri, image_url)
            asset = AssetRecord(
                id=create_asset_id(f"image-{slide_index}-{key}"),
                props=AssetProps(
                    name=component.metadata.name or "image",
                    src=image_url,
                    w=width,
                    h=height,
                    mime_type=decoded.mime_type,
                    is_animated=False,
                ),
                natural_w=decoded.natural_w,
                natural_h=decoded.natural_h,
            )
            self.scene.create_assets([asset])
        except AssetResolutionError as e:
            self.diagnostics.warn(
                diag.IMAGE_RESOLUTION_FAILED,
                f"Failed to create image asset for {key}: {e}",
                slide_index,
                component.id,
            )
            return ResolvedImage(self._placeholder(slide_index, key, x, y, width, height, parent_id), None)

        shape = ImageShapeDescriptor(
            id=shape_id,
            x=x,
            y=y,
            rotation=degrees_to_radians(component.rotation),
            parent_id=parent_id,
            props=ImageProps(asset_id=asset.id, w=width, h=height),
        )
        return ResolvedImage(shape, asset)

    def _placeholder(
        self,
        slide_index: int,
        key: str,
        x: float,
        y: float,
        width: float,
        height: float,
        parent_id: Optional[str],
    ) -> GeoShapeDescriptor:
        return GeoShapeDescriptor(
            id=create_shape_id(f"placeholder-{slide_index}-{key}"),
            x=x,
            y=y,
            parent_id=parent_id,
            props=GeoProps(
                geo='rectangle',
                color='grey',
                fill='pattern',
                size='m',
                w=width,
                h=height,
            ),
        )
