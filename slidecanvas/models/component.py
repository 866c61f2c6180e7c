import math

from pydantic import BaseModel, Field, field_validator
from typing import Dict, Any, List, Optional, Union


KNOWN_COMPONENT_TYPES = ("text", "shape", "image", "table")


def lenient_float(value: Any) -> Optional[float]:
    """Numbers and numeric strings pass through; anything else reads as absent"""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def lenient_int(value: Any) -> Optional[int]:
    number = lenient_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def lenient_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class ComponentStyle(BaseModel):
    """Free-form style attributes as produced by the presentation parser"""
    model_config = {
        "extra": "allow",
        "populate_by_name": True
    }
    color: Optional[str] = Field(None, description="Text color as hex string")
    background_color: Optional[str] = Field(None, alias="backgroundColor", description="Fill color as hex string or 'transparent'")
    border_color: Optional[str] = Field(None, alias="borderColor", description="Stroke color as hex string or 'transparent'")
    font_size: Optional[float] = Field(None, alias="fontSize", description="Font size in points")
    font_family: Optional[str] = Field(None, alias="fontFamily", description="Font family name")
    shape_type: Optional[str] = Field(None, alias="shapeType", description="Shape type name, takes precedence over metadata")

    @field_validator("color", "background_color", "border_color", "font_family", "shape_type", mode="before")
    @classmethod
    def _text_or_none(cls, value):
        return lenient_str(value)

    @field_validator("font_size", mode="before")
    @classmethod
    def _number_or_none(cls, value):
        return lenient_float(value)


class ComponentMetadata(BaseModel):
    """Type-specific payload attached to a component"""
    model_config = {
        "extra": "allow",
        "populate_by_name": True
    }
    name: Optional[str] = None
    shape_type: Optional[str] = Field(None, alias="shapeType")
    preset: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl", description="Image source, usually a data URI")
    image_type: Optional[str] = Field(None, alias="imageType")
    image_size: Optional[int] = Field(None, alias="imageSize", description="Image payload size in bytes")
    # Rows stay loose: malformed rows are skipped at decomposition time
    table_data: Optional[List[Any]] = Field(None, alias="tableData", description="Row-major grid of cell strings")
    rows: Optional[int] = None
    cols: Optional[int] = None
    has_header: Optional[bool] = Field(None, alias="hasHeader")

    @field_validator("name", "shape_type", "preset", "image_url", "image_type", mode="before")
    @classmethod
    def _text_or_none(cls, value):
        return lenient_str(value)

    @field_validator("image_size", "rows", "cols", mode="before")
    @classmethod
    def _count_or_none(cls, value):
        return lenient_int(value)

    @field_validator("table_data", mode="before")
    @classmethod
    def _grid_or_none(cls, value):
        return value if isinstance(value, list) else None

    @field_validator("has_header", mode="before")
    @classmethod
    def _flag(cls, value):
        return value if isinstance(value, bool) else None


class Component(BaseModel):
    """
    One positioned content element of a slide.

    Numeric fields stay ``None`` when the parser omitted them or sent something
    unreadable; the builders substitute their own defaults (0 for position,
    type-specific sizes). A bad field never rejects the whole document.
    """
    model_config = {
        "extra": "allow",
        "populate_by_name": True
    }
    id: Optional[str] = Field(None, description="Component id; positional index is used when absent")
    type: str = Field("", description="One of text, shape, image, table")
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    rotation: Optional[float] = Field(None, description="Clockwise rotation in degrees")
    z_index: Optional[float] = Field(None, alias="zIndex", description="Stacking order, lower draws first")
    content: Optional[str] = None
    rich_text: Optional[Dict[str, Any]] = Field(None, alias="richText", description="Pre-built rich text document")
    style: ComponentStyle = Field(default_factory=ComponentStyle)
    metadata: ComponentMetadata = Field(default_factory=ComponentMetadata)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Union[str, int, None]) -> Optional[str]:
        if value is None or value == "" or isinstance(value, (bool, dict, list)):
            return None
        return str(value)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value):
        return value if isinstance(value, str) else ""

    @field_validator("x", "y", "width", "height", "rotation", "z_index", mode="before")
    @classmethod
    def _number_or_none(cls, value):
        return lenient_float(value)

    @field_validator("content", mode="before")
    @classmethod
    def _content_text(cls, value):
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None

    @field_validator("rich_text", mode="before")
    @classmethod
    def _rich_text_or_none(cls, value):
        return value if isinstance(value, dict) else None

    @field_validator("style", "metadata", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value if isinstance(value, (dict, BaseModel)) else {}

    def key(self, index: int) -> str:
        """Identifier fragment for this component: its id, or the index when absent"""
        return self.id if self.id else str(index)
