"""Pure text mutators.

Each function takes the current file text and returns the complete new text,
or raises without producing anything. Plain ``write_*`` variants fail when
the target is missing; ``create_*`` variants insert it instead.
"""

from __future__ import annotations

import re
import uuid

from designtools.core.blocks import BlockSpan, find_selector_block, splice_block
from designtools.core.errors import AmbiguousError, NotFoundError, UnparsableError
from designtools.core.sass import normalize_variable, sass_declaration_regex
from designtools.core.source_locator import (
    LineSpan,
    TagExtent,
    TextMatch,
    class_boundary_regex,
    find_attribute_near,
    find_class_near,
    find_markers,
    find_opening_tag,
    find_tag_extent,
    locate_element,
    marker_regex,
    marker_text,
    split_lines,
)
from designtools.core.utility_classes import add_class, remove_class

_INDENT_RE = re.compile(r"\n([ \t]+)\S")

# ---------------------------------------------------------------------------
# Custom properties inside a selector block or @theme
# ---------------------------------------------------------------------------


def _property_regex(name: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![\w-])({re.escape(name)}\s*:\s*)([^;]+)(;)")


def _require_block(text: str, selector: str) -> BlockSpan:
    span = find_selector_block(text, selector)
    if span is None:
        raise NotFoundError(f"Selector {selector} not found")
    return span


def _replace_single(body: str, regex: re.Pattern[str], value: str, what: str, where: str) -> str | None:
    matches = list(regex.finditer(body))
    if not matches:
        return None
    if len(matches) > 1:
        raise AmbiguousError(f"{what} is declared {len(matches)} times in {where}", count=len(matches))
    m = matches[0]
    return body[: m.start(2)] + value + body[m.end(2) :]


def _append_declaration(body: str, declaration: str) -> str:
    content = body.rstrip()
    tail = body[len(content) :]
    if "\n" not in body:
        return f"{content} {declaration}{tail or ' '}"
    indent_match = _INDENT_RE.search(body)
    indent = indent_match.group(1) if indent_match else "  "
    if not tail.startswith("\n"):
        tail = "\n" + tail.lstrip(" \t")
    return f"{content}\n{indent}{declaration}{tail}"


def write_custom_property(text: str, selector: str, name: str, value: str) -> str:
    """Rewrite ``name: value;`` inside the block for *selector*.

    Raises ``NotFoundError`` if the block or declaration is missing.
    """
    span = _require_block(text, selector)
    body = span.body(text)
    new_body = _replace_single(body, _property_regex(name), value, name, selector)
    if new_body is None:
        raise NotFoundError(f"Variable {name} not found in {selector}")
    return splice_block(text, span, new_body)


def create_custom_property(text: str, selector: str, name: str, value: str) -> str:
    """Upsert ``name: value;`` into the block, creating the block if needed."""
    span = find_selector_block(text, selector)
    if span is None:
        sep = "" if not text or text.endswith("\n") else "\n"
        return f"{text}{sep}\n{selector} {{\n  {name}: {value};\n}}\n"
    body = span.body(text)
    new_body = _replace_single(body, _property_regex(name), value, name, selector)
    if new_body is None:
        new_body = _append_declaration(body, f"{name}: {value};")
    return splice_block(text, span, new_body)


# ---------------------------------------------------------------------------
# Sass variables
# ---------------------------------------------------------------------------


def write_sass_variable(text: str, name: str, value: str) -> str:
    bare = normalize_variable(name)
    new_text = _replace_single(text, sass_declaration_regex(bare), value, f"${bare}", "the stylesheet")
    if new_text is None:
        raise NotFoundError(f"Sass variable ${bare} not found")
    return new_text


def create_sass_variable(text: str, name: str, value: str) -> str:
    bare = normalize_variable(name)
    new_text = _replace_single(text, sass_declaration_regex(bare), value, f"${bare}", "the stylesheet")
    if new_text is not None:
        return new_text
    sep = "" if not text or text.endswith("\n") else "\n"
    return f"{text}{sep}${bare}: {value};\n"


# ---------------------------------------------------------------------------
# Component class rewrite (all instances share the edited source)
# ---------------------------------------------------------------------------


def _variant_string_regex(context: str) -> re.Pattern[str]:
    key = re.escape(context)
    return re.compile(rf"(?<![\w-])(?:{key}|\"{key}\"|'{key}')\s*:\s*([\"'`])(.*?)\1", re.DOTALL)


def replace_class_in_component(text: str, old: str, new: str, variant_context: str | None = None) -> str:
    """Replace one occurrence of class *old* in a component source.

    With *variant_context* the search is limited to the string literal of
    that variant key. Otherwise the class must occur exactly once.
    """
    regex = class_boundary_regex(old)

    if variant_context:
        for ctx in _variant_string_regex(variant_context).finditer(text):
            inner = regex.search(text, ctx.start(2), ctx.end(2))
            if inner is not None:
                return text[: inner.start()] + new + text[inner.end() :]

    matches = list(regex.finditer(text))
    if not matches:
        where = f" (variant {variant_context})" if variant_context else ""
        raise NotFoundError(f"Class {old!r} not found in component{where}")
    if len(matches) > 1:
        raise AmbiguousError(
            f"Class {old!r} found {len(matches)} times. Provide variant_context to narrow.",
            count=len(matches),
        )
    m = matches[0]
    return text[: m.start()] + new + text[m.end() :]


# ---------------------------------------------------------------------------
# Element instance edits
# ---------------------------------------------------------------------------


def _splice(text: str, line: int, start: int, end: int, replacement: str) -> str:
    lines = split_lines(text)
    target = lines[line]
    lines[line] = target[:start] + replacement + target[end:]
    return "\n".join(lines)


def _class_attribute(text: str, span: LineSpan, tag: TagExtent) -> TextMatch | None:
    return find_attribute_near(text, span, "className", within=tag) or find_attribute_near(
        text, span, "class", within=tag
    )


def replace_element_class(
    text: str,
    identifier: str,
    old: str,
    new: str,
    *,
    line_hint: int | None = None,
    eid: str | None = None,
) -> str:
    span = locate_element(text, identifier, line_hint=line_hint, eid=eid)
    match = find_class_near(text, span, old, within=find_tag_extent(text, span))
    return _splice(text, match.line, match.start, match.end, new)


def add_element_class(
    text: str,
    identifier: str,
    cls: str,
    *,
    line_hint: int | None = None,
    eid: str | None = None,
) -> str:
    span = locate_element(text, identifier, line_hint=line_hint, eid=eid)
    tag = find_tag_extent(text, span)
    attr = _class_attribute(text, span, tag)
    if attr is None:
        name = find_opening_tag(text, span)
        return _splice(text, name.line, name.end, name.end, f' className="{cls}"')
    value = split_lines(text)[attr.line][attr.start : attr.end]
    return _splice(text, attr.line, attr.start, attr.end, add_class(value, cls))


def remove_element_class(
    text: str,
    identifier: str,
    cls: str,
    *,
    line_hint: int | None = None,
    eid: str | None = None,
) -> str:
    span = locate_element(text, identifier, line_hint=line_hint, eid=eid)
    tag = find_tag_extent(text, span)
    attr = _class_attribute(text, span, tag)
    if attr is not None:
        value = split_lines(text)[attr.line][attr.start : attr.end]
        if cls in value.split():
            return _splice(text, attr.line, attr.start, attr.end, remove_class(value, cls))
    match = find_class_near(text, span, cls, within=tag)
    line = split_lines(text)[match.line]
    # swallow one adjacent space so no double spaces are left behind
    start, end = match.start, match.end
    if end < len(line) and line[end] == " ":
        end += 1
    elif start > 0 and line[start - 1] == " ":
        start -= 1
    return _splice(text, match.line, start, end, "")


def set_element_prop(
    text: str,
    identifier: str,
    prop: str,
    value: str,
    *,
    line_hint: int | None = None,
    eid: str | None = None,
) -> str:
    """Rewrite the string value of ``prop="..."`` on an element, adding it if absent."""
    if '"' in value:
        raise UnparsableError(f"Value for {prop} must not contain a double quote")
    span = locate_element(text, identifier, line_hint=line_hint, eid=eid)
    attr = find_attribute_near(text, span, prop, within=find_tag_extent(text, span))
    if attr is not None:
        return _splice(text, attr.line, attr.start, attr.end, value)
    name = find_opening_tag(text, span)
    return _splice(text, name.line, name.end, name.end, f' {prop}="{value}"')


# ---------------------------------------------------------------------------
# Element markers
# ---------------------------------------------------------------------------


def new_eid() -> str:
    return "s" + uuid.uuid4().hex[:8]


def mark_element(text: str, identifier: str, *, line_hint: int | None = None) -> tuple[str, str]:
    """Tag the element with a ``data-studio-eid`` marker and return ``(text, eid)``.

    An element that already carries a marker keeps it.
    """
    span = locate_element(text, identifier, line_hint=line_hint)
    tag = find_tag_extent(text, span)
    lines = split_lines(text)
    for i, lo, hi in tag.ranges(lines, span.anchor):
        existing = find_markers(lines[i][lo:hi])
        if existing:
            return text, existing[0]
    name = find_opening_tag(text, span)
    eid = new_eid()
    return _splice(text, name.line, name.end, name.end, f" {marker_text(eid)}"), eid


def remove_marker(text: str, eid: str) -> str:
    new_text, count = marker_regex(eid).subn("", text)
    if count == 0:
        raise NotFoundError(f"Element marker {eid} not found")
    return new_text


def strip_markers(text: str) -> tuple[str, int]:
    """Remove every ``data-studio-eid`` marker, returning the count removed."""
    return marker_regex().subn("", text)

