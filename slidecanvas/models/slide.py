from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Any, List, Optional

from slidecanvas.models.component import Component, lenient_int, lenient_str


class SlideMetadata(BaseModel):
    model_config = {
        "extra": "allow"
    }
    name: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _text_or_none(cls, value):
        return lenient_str(value)


class Slide(BaseModel):
    """
    Model representing one slide of a parsed presentation.

    Attributes:
        slide_number: 1-based slide number from the source document
        metadata: Optional slide metadata (name)
        components: Ordered list of components
    """
    model_config = {
        "extra": "allow",
        "populate_by_name": True
    }
    slide_number: int = Field(1, alias="slideNumber")
    metadata: SlideMetadata = Field(default_factory=SlideMetadata)
    components: List[Component] = Field(default_factory=list)

    @field_validator("slide_number", mode="before")
    @classmethod
    def _number_or_default(cls, value):
        number = lenient_int(value)
        return 1 if number is None else number

    @field_validator("metadata", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value if isinstance(value, (dict, BaseModel)) else {}

    @field_validator("components", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value

    @property
    def display_name(self) -> str:
        return self.metadata.name or f"Slide {self.slide_number}"


class PresentationDocument(BaseModel):
    """
    Parsed presentation handed over by the upstream parser.

    ``components`` carries the legacy flat layout (no slide structure); it is
    only drawn when ``slides`` is empty.
    """
    model_config = {
        "extra": "allow"
    }
    slides: List[Slide] = Field(default_factory=list)
    components: List[Component] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_slide_list(cls, data: Any) -> Any:
        # A bare list is treated as the slide list
        if isinstance(data, list):
            return {"slides": data}
        return data

    @field_validator("slides", "components", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value
