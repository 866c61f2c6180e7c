"""
Output records handed to the canvas runtime.

Every descriptor carries a deterministic id, a kind tag, geometry and a
style payload restricted to the closed vocabularies below.
"""

from pydantic import BaseModel, Field
from typing import Dict, Any, List, Literal, Optional


CanvasColor = Literal[
    'black', 'grey', 'light-violet', 'violet', 'blue', 'light-blue',
    'yellow', 'orange', 'green', 'light-green', 'light-red', 'red'
]
CanvasFont = Literal['draw', 'sans', 'serif', 'mono']
CanvasSize = Literal['s', 'm', 'l', 'xl']
CanvasFill = Literal['none', 'semi', 'solid', 'pattern']
GeoKind = Literal[
    'rectangle', 'ellipse', 'triangle', 'diamond', 'pentagon', 'hexagon',
    'octagon', 'star', 'rhombus', 'oval', 'trapezoid', 'arrow-right',
    'arrow-left', 'arrow-up', 'arrow-down', 'x-box', 'check-box', 'cloud',
    'heart'
]


def create_shape_id(key: str) -> str:
    return f"shape:{key}"


def create_asset_id(key: str) -> str:
    return f"asset:{key}"


def to_rich_text(text: str) -> Dict[str, Any]:
    """Wrap plain text into a minimal rich text document, one paragraph per line"""
    paragraphs: List[Dict[str, Any]] = []
    for line in text.split("\n"):
        paragraph: Dict[str, Any] = {"type": "paragraph"}
        if line:
            paragraph["content"] = [{"type": "text", "text": line}]
        paragraphs.append(paragraph)
    return {"type": "doc", "content": paragraphs}


class _Payload(BaseModel):
    model_config = {
        "populate_by_name": True
    }

    def to_payload(self) -> Dict[str, Any]:
        """camelCase dict as expected by the canvas runtime"""
        return self.model_dump(by_alias=True, exclude_none=True)


class FrameProps(_Payload):
    w: float
    h: float
    name: str


class TextProps(_Payload):
    rich_text: Dict[str, Any] = Field(serialization_alias="richText")
    color: CanvasColor = 'black'
    size: CanvasSize = 'm'
    font: CanvasFont = 'sans'
    auto_size: Optional[bool] = Field(None, serialization_alias="autoSize")
    w: Optional[float] = None


class GeoProps(_Payload):
    geo: GeoKind = 'rectangle'
    color: CanvasColor = 'black'
    fill: CanvasFill = 'none'
    size: CanvasSize = 'm'
    w: float
    h: float


class ImageProps(_Payload):
    asset_id: str = Field(serialization_alias="assetId")
    w: float
    h: float


class SceneShapeDescriptor(_Payload):
    """Base class for all shape descriptors"""
    id: str
    type: str
    x: float = 0.0
    y: float = 0.0
    rotation: float = Field(0.0, description="Rotation in radians")
    parent_id: Optional[str] = Field(None, serialization_alias="parentId")


class FrameDescriptor(SceneShapeDescriptor):
    type: Literal['frame'] = 'frame'
    props: FrameProps


class TextShapeDescriptor(SceneShapeDescriptor):
    type: Literal['text'] = 'text'
    props: TextProps


class GeoShapeDescriptor(SceneShapeDescriptor):
    type: Literal['geo'] = 'geo'
    props: GeoProps


class ImageShapeDescriptor(SceneShapeDescriptor):
    type: Literal['image'] = 'image'
    props: ImageProps


class AssetProps(_Payload):
    name: str = 'image'
    src: str
    w: float
    h: float
    mime_type: str = Field(serialization_alias="mimeType")
    is_animated: bool = Field(False, serialization_alias="isAnimated")


class AssetRecord(_Payload):
    """A registered image resource that image shapes reference by id"""
    id: str
    type: Literal['image'] = 'image'
    type_name: Literal['asset'] = Field('asset', serialization_alias="typeName")
    props: AssetProps
    meta: Dict[str, Any] = Field(default_factory=dict)
    # Decoded pixel size, when the payload could be read
    natural_w: Optional[int] = Field(None, serialization_alias="naturalW")
    natural_h: Optional[int] = Field(None, serialization_alias="naturalH")
