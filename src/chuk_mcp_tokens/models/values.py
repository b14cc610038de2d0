"""
Typed token values - the closed set every pipeline stage works on.

Raw theme nodes and raw design records are converted into exactly one of
these variants at the boundary (extraction.classifier for theme trees,
DesignValue.parse for design records). Nothing downstream re-inspects
untyped dictionaries.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, ValidationError, field_validator

from chuk_mcp_tokens.constants import ErrorMessages, TokenCategory
from chuk_mcp_tokens.core.colors import normalize_color
from chuk_mcp_tokens.errors import DesignValueError

Number = int | float


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass and would otherwise coerce to 0 or 1
    if isinstance(value, bool):
        raise ValueError("Expected a number, got bool")
    return value


class ColorValue(BaseModel):
    """A color, normalized to upper-case hex on construction."""

    category: Literal["color"] = "color"
    hex: str = Field(
        ...,
        validation_alias=AliasChoices("hex", "value"),
        description="Upper-case #RRGGBB or #RRGGBBAA",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("hex", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError(f"Color must be a string, got {type(value).__name__}")
        return normalize_color(value)


class SpacingValue(BaseModel):
    """A spacing value (gap, margin, padding) in pixels."""

    category: Literal["spacing"] = "spacing"
    value: Number

    model_config = {"frozen": True}

    @field_validator("value", mode="before")
    @classmethod
    def _not_bool(cls, value: Any) -> Any:
        return _reject_bool(value)


class RadiiValue(BaseModel):
    """A corner radius in pixels."""

    category: Literal["radii"] = "radii"
    value: Number

    model_config = {"frozen": True}

    @field_validator("value", mode="before")
    @classmethod
    def _not_bool(cls, value: Any) -> Any:
        return _reject_bool(value)


class ShadowValue(BaseModel):
    """
    A drop shadow.

    Missing numeric fields default to 0; color is informational only and
    never part of the lookup key.
    """

    category: Literal["shadow"] = "shadow"
    offset_x: Number = Field(0, validation_alias=AliasChoices("offset_x", "offsetX", "x"))
    offset_y: Number = Field(0, validation_alias=AliasChoices("offset_y", "offsetY", "y"))
    blur: Number = Field(0, validation_alias=AliasChoices("blur", "radius"))
    spread: Number = 0
    color: str | None = None

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("offset_x", "offset_y", "blur", "spread", mode="before")
    @classmethod
    def _not_bool(cls, value: Any) -> Any:
        return _reject_bool(value)


class TypographyValue(BaseModel):
    """A text style - any field may be missing."""

    category: Literal["typography"] = "typography"
    font_family: str | None = Field(
        None, validation_alias=AliasChoices("font_family", "fontFamily", "family")
    )
    font_size: Number | None = Field(
        None, validation_alias=AliasChoices("font_size", "fontSize", "size")
    )
    font_weight: Number | None = Field(
        None, validation_alias=AliasChoices("font_weight", "fontWeight", "weight")
    )
    line_height: Number | None = Field(
        None, validation_alias=AliasChoices("line_height", "lineHeight", "lineHeightPx")
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("font_size", "font_weight", "line_height", mode="before")
    @classmethod
    def _not_bool(cls, value: Any) -> Any:
        return _reject_bool(value)


TokenValue = Annotated[
    ColorValue | SpacingValue | RadiiValue | ShadowValue | TypographyValue,
    Field(discriminator="category"),
]

_TOKEN_VALUE_ADAPTER: TypeAdapter[TokenValue] = TypeAdapter(TokenValue)


def category_of(value: TokenValue) -> TokenCategory:
    """Get the category enum of a typed value."""
    return TokenCategory(value.category)


class ContextHints(BaseModel):
    """Optional hints carried alongside a design value."""

    font_family: str | None = Field(
        None, validation_alias=AliasChoices("font_family", "fontFamily")
    )
    path_keywords: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("path_keywords", "pathKeywords"),
        description="Keywords preferred when several token paths qualify",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class DesignValue(BaseModel):
    """
    A value extracted from a design document, waiting to be resolved.

    Construct typed values directly, or use parse() for raw records.
    """

    value: TokenValue
    hints: ContextHints = Field(default_factory=ContextHints)

    model_config = {"frozen": True}

    @property
    def category(self) -> TokenCategory:
        """Category of the wrapped value."""
        return category_of(self.value)

    def with_value(self, value: TokenValue) -> DesignValue:
        """Copy with a different value (hints preserved)."""
        return DesignValue(value=value, hints=self.hints)

    @classmethod
    def parse(cls, raw: dict[str, Any]) -> DesignValue:
        """
        Convert a raw design record into a typed design value.

        Accepts either flat records ({"category": "spacing", "value": 16})
        or the rawValue form ({"category": "color", "rawValue": "#fff",
        "contextHints": {...}}).

        Raises:
            DesignValueError: If the record fits no variant
        """
        if not isinstance(raw, dict):
            raise DesignValueError(
                ErrorMessages.INVALID_DESIGN_VALUE.format(error="record must be a mapping")
            )

        data = dict(raw)
        hints = data.pop("contextHints", None) or data.pop("hints", None) or {}
        raw_value = data.pop("rawValue", None)
        if raw_value is None:
            raw_value = data.pop("raw_value", None)

        category = data.get("category")
        if raw_value is not None:
            if isinstance(raw_value, dict):
                data = {**raw_value, **data}
            elif category == TokenCategory.COLOR.value:
                data["hex"] = raw_value
            else:
                data["value"] = raw_value

        try:
            value = _TOKEN_VALUE_ADAPTER.validate_python(data)
            return cls(value=value, hints=ContextHints.model_validate(hints))
        except ValidationError as e:
            raise DesignValueError(ErrorMessages.INVALID_DESIGN_VALUE.format(error=e)) from e
