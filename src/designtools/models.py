from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

TokenCategory = Literal["color", "spacing", "radius", "shadow", "typography", "other"]
ColorFormat = Literal["oklch", "hsl", "rgb", "hex", "none"]
ShadowSource = Literal["custom", "design-token", "framework-preset"]
ClassCategory = Literal["color", "spacing", "shape", "typography", "layout", "size", "other"]


class Token(BaseModel):
    name: str
    category: TokenCategory
    group: str
    light_value: str = ""
    dark_value: str = ""
    color_format: ColorFormat = "none"


class TokenMap(BaseModel):
    tokens: list[Token] = Field(default_factory=list)
    groups: dict[str, list[Token]] = Field(default_factory=dict)
    css_file_path: str | None = None

    def by_name(self) -> dict[str, Token]:
        return {t.name: t for t in self.tokens}


class ShadowLayer(BaseModel):
    offset_x: str
    offset_y: str
    blur: str = "0"
    spread: str = "0"
    color: str
    inset: bool = False


class ShadowDefinition(BaseModel):
    """A named shadow value together with where it came from."""

    name: str
    value: str
    layers: list[ShadowLayer] = Field(default_factory=list)
    source: ShadowSource
    is_overridden: bool = False
    css_variable: str | None = None
    sass_variable: str | None = None
    token_path: str | None = None
    token_file_path: str | None = None
    file_path: str | None = None
    description: str | None = None


class ShadowMap(BaseModel):
    shadows: list[ShadowDefinition] = Field(default_factory=list)
    styling: str | None = None
    css_file_path: str | None = None
    token_files: list[str] = Field(default_factory=list)

    def by_name(self) -> dict[str, ShadowDefinition]:
        return {s.name: s for s in self.shadows}


class StructuredProperty(BaseModel):
    category: ClassCategory
    property: str
    label: str
    value: str
    full_class_text: str
    variant_prefix: str | None = None


class ParsedClasses(BaseModel):
    color: list[StructuredProperty] = Field(default_factory=list)
    spacing: list[StructuredProperty] = Field(default_factory=list)
    shape: list[StructuredProperty] = Field(default_factory=list)
    typography: list[StructuredProperty] = Field(default_factory=list)
    layout: list[StructuredProperty] = Field(default_factory=list)
    size: list[StructuredProperty] = Field(default_factory=list)
    other: list[StructuredProperty] = Field(default_factory=list)

    def all(self) -> list[StructuredProperty]:
        return [*self.color, *self.spacing, *self.shape, *self.typography, *self.layout, *self.size, *self.other]


class VariantDimension(BaseModel):
    name: str
    options: list[str] = Field(default_factory=list)
    default: str | None = None
    classes: dict[str, str] = Field(default_factory=dict)


class ComponentEntry(BaseModel):
    name: str
    file_path: str
    export_name: str
    data_slot: str | None = None
    base_classes: str = ""
    variants: list[VariantDimension] = Field(default_factory=list)
    token_references: list[str] = Field(default_factory=list)


class ScanResult(BaseModel):
    tokens: TokenMap
    shadows: ShadowMap
    components: list[ComponentEntry] = Field(default_factory=list)
