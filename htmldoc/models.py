"""Pydantic models describing a document declaratively."""

from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AttributeSpec(BaseModel):
    """A single attribute on an element."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Attribute name, emitted as given.")
    value: str = Field("", description="Attribute value. Only double quotes are escaped.")
    escape: bool = Field(
        False,
        description="Pre-escape &, < and > in the value before it reaches the tree.",
    )


class TextSpec(BaseModel):
    """A text child."""

    model_config = ConfigDict(extra="forbid")

    text: str = Field(..., description="Literal text, emitted verbatim unless escaped.")
    escape: bool = Field(
        False, description="Pre-escape markup characters with html.escape."
    )


def _coerce_attributes(value: Any) -> Any:
    # A plain mapping is accepted as shorthand; insertion order is kept.
    # Values are not stringified, so both forms reject numbers and booleans.
    if isinstance(value, dict):
        return [
            {"name": name, "value": "" if item is None else item}
            for name, item in value.items()
        ]
    return value


class ElementSpec(BaseModel):
    """An element with ordered attributes and ordered children."""

    model_config = ConfigDict(extra="forbid")

    tag: str = Field(..., min_length=1, description="Tag name, emitted as given.")
    attributes: List[AttributeSpec] = Field(
        default_factory=list, description="Attributes in rendering order."
    )
    children: List[Union["ElementSpec", TextSpec]] = Field(
        default_factory=list, description="Child elements and text in rendering order."
    )

    @field_validator("attributes", mode="before")
    @classmethod
    def normalize_attributes(cls, value: Any) -> Any:
        return _coerce_attributes(value)


class DocumentSpec(BaseModel):
    """Top-level description; attributes and children apply to the html root."""

    model_config = ConfigDict(extra="forbid")

    attributes: List[AttributeSpec] = Field(
        default_factory=list, description="Attributes on the html root element."
    )
    children: List[Union[ElementSpec, TextSpec]] = Field(
        default_factory=list, description="Children of the html root element."
    )

    @field_validator("attributes", mode="before")
    @classmethod
    def normalize_attributes(cls, value: Any) -> Any:
        return _coerce_attributes(value)


__all__ = ["AttributeSpec", "DocumentSpec", "ElementSpec", "TextSpec"]
