from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
    error: str


# --- Writes ---


class TokenWriteRequest(BaseModel):
    """POST /tokens: set a custom property inside a selector block."""

    file_path: str
    token: str
    value: str
    selector: str = ":root"


class ShadowWriteRequest(BaseModel):
    """POST /shadows and /shadows/create.

    ``selector`` is a CSS selector, ``@theme``, or ``scss`` for a Sass
    ``$variable``.
    """

    file_path: str
    variable: str
    value: str
    selector: str = ":root"


class DesignTokenWriteRequest(BaseModel):
    file_path: str
    token_path: str
    value: str


class ExportShadow(BaseModel):
    name: str
    value: str
    description: str | None = None


class ExportTokensRequest(BaseModel):
    file_path: str
    shadows: list[ExportShadow] = Field(min_length=1)


class ComponentWriteRequest(BaseModel):
    file_path: str
    old_class: str
    new_class: str
    variant_context: str | None = None


class ElementWriteRequest(BaseModel):
    """POST /element: edit one rendered element instance."""

    file_path: str
    kind: Literal["class", "add-class", "remove-class", "prop"]
    identifier: str = ""
    value: str
    old_value: str | None = None
    prop: str | None = None
    line_hint: int | None = Field(default=None, ge=1)
    eid: str | None = None
    mark: bool = False


class MarkRequest(BaseModel):
    file_path: str
    identifier: str
    line_hint: int | None = Field(default=None, ge=1)


class UnmarkRequest(BaseModel):
    file_path: str
    eid: str


class CleanupResponse(BaseModel):
    cleaned: list[str]


class RescanResponse(BaseModel):
    tokens: int
    shadows: int
    components: int


# --- Class mapping ---


class ParseClassesRequest(BaseModel):
    classes: str


class BuildClassRequest(BaseModel):
    property: str
    value: str
    prefix: str | None = None


class ComputedClassRequest(BaseModel):
    css_property: str
    value: str
    prefix: str | None = None


class ClassResponse(BaseModel):
    class_name: str
    exact: bool = True
