"""Heuristic, line-based mapping from a rendered element back to source text.

Everything here is a pure function of the file text and the caller's hints,
so a source-map or AST based locator can replace it behind the same calls.
Line numbers in hints are 1-based; everything returned is 0-based.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from designtools.core.errors import AmbiguousError, NotFoundError, UnparsableError

logger = logging.getLogger(__name__)

MARKER_ATTR = "data-studio-eid"
HINT_WINDOW = 5
TOKEN_WINDOW = 2

_TAG_OPEN_RE = re.compile(r"<([A-Za-z][\w.]*)")
_ATTR_START_RE = re.compile(r"\s[\w-]+=")
_MARKER_ANY_RE = re.compile(rf'\s+{MARKER_ATTR}="(s[0-9a-f]{{8}})"')


@dataclass(frozen=True)
class LineSpan:
    """The matched line and the window searched for the token to edit."""

    anchor: int
    start: int
    end: int

    def ordered_lines(self) -> list[int]:
        """Window lines, nearest to the anchor first (earlier line on ties)."""
        return sorted(range(self.start, self.end + 1), key=lambda i: (abs(i - self.anchor), i))


@dataclass(frozen=True)
class TextMatch:
    line: int
    start: int
    end: int


@dataclass(frozen=True)
class TagExtent:
    """Source range of one opening tag, from its ``<`` through the closing ``>``."""

    line: int
    start: int
    end_line: int
    end: int

    def ranges(self, lines: list[str], anchor: int) -> list[tuple[int, int, int]]:
        """``(line, lo, hi)`` slices covered by the tag, nearest to *anchor* first."""
        out: list[tuple[int, int, int]] = []
        for i in range(self.line, self.end_line + 1):
            lo = self.start if i == self.line else 0
            hi = self.end if i == self.end_line else len(lines[i])
            out.append((i, lo, hi))
        return sorted(out, key=lambda r: (abs(r[0] - anchor), r[0]))


def split_lines(text: str) -> list[str]:
    # "\n".join(split_lines(text)) == text
    return text.split("\n")


def class_boundary_regex(cls: str) -> re.Pattern[str]:
    """Match *cls* only as a whole class: bounded by whitespace, quotes or the string edge."""
    return re.compile(rf"(?<![^\s\"'`]){re.escape(cls)}(?![^\s\"'`])")


def attribute_regex(name: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![\w-]){re.escape(name)}=(?:\"([^\"]*)\"|'([^']*)'|(\{{))")


def marker_text(eid: str) -> str:
    return f'{MARKER_ATTR}="{eid}"'


def _window(anchor: int, radius: int, total: int) -> tuple[int, int]:
    return max(0, anchor - radius), min(total - 1, anchor + radius)


def _span(anchor: int, total: int) -> LineSpan:
    start, end = _window(anchor, TOKEN_WINDOW, total)
    return LineSpan(anchor, start, end)


def _nearest(candidates: list[int], hint: int) -> int:
    return min(candidates, key=lambda i: (abs(i - hint), i))


def locate_element(
    text: str,
    identifier: str,
    *,
    line_hint: int | None = None,
    eid: str | None = None,
) -> LineSpan:
    """Find the source line for an element.

    Lookup order: the ``eid`` marker when given, then a +/-5 line window
    around ``line_hint``, then the whole file. Without a hint, several
    whole-file matches are ambiguous.
    """
    lines = split_lines(text)

    if eid:
        needle = marker_text(eid)
        for i, line in enumerate(lines):
            if needle in line:
                return _span(i, len(lines))
        raise NotFoundError(f"Element marker {eid} not found")

    if not identifier:
        raise NotFoundError("An element identifier or marker is required")

    hint = None if line_hint is None else max(0, min(len(lines) - 1, line_hint - 1))
    if hint is not None:
        start, end = _window(hint, HINT_WINDOW, len(lines))
        near = [i for i in range(start, end + 1) if identifier in lines[i]]
        if near:
            return _span(_nearest(near, hint), len(lines))
        logger.debug("No match for %r near line %d, scanning whole file", identifier, line_hint)

    matches = [i for i, line in enumerate(lines) if identifier in line]
    if not matches:
        raise NotFoundError(f"No element matching {identifier!r} found")
    if hint is not None:
        return _span(_nearest(matches, hint), len(lines))
    if len(matches) > 1:
        raise AmbiguousError(
            f"Element {identifier!r} matches {len(matches)} lines; provide a line hint to narrow",
            count=len(matches),
        )
    return _span(matches[0], len(lines))


def _search_ranges(lines: list[str], span: LineSpan, within: TagExtent | None) -> list[tuple[int, int, int]]:
    if within is not None:
        return within.ranges(lines, span.anchor)
    return [(i, 0, len(lines[i])) for i in span.ordered_lines()]


def find_class_near(text: str, span: LineSpan, cls: str, *, within: TagExtent | None = None) -> TextMatch:
    """Find *cls* in the window, or only inside one tag when *within* is given."""
    lines = split_lines(text)
    regex = class_boundary_regex(cls)
    for i, lo, hi in _search_ranges(lines, span, within):
        m = regex.search(lines[i], lo, hi)
        if m:
            return TextMatch(i, m.start(), m.end())
    raise NotFoundError(f"Class {cls!r} not found near line {span.anchor + 1}")


def find_attribute_near(
    text: str, span: LineSpan, name: str, *, within: TagExtent | None = None
) -> TextMatch | None:
    """Locate the quoted value of ``name="..."`` within the window or tag.

    Returns ``None`` when the attribute is absent. An attribute whose value is
    a ``{...}`` expression cannot be rewritten as text and raises.
    """
    lines = split_lines(text)
    regex = attribute_regex(name)
    for i, lo, hi in _search_ranges(lines, span, within):
        m = regex.search(lines[i], lo, hi)
        if m is None:
            continue
        if m.group(3) is not None:
            raise UnparsableError(f"Attribute {name} on line {i + 1} is an expression, not a string")
        group = 1 if m.group(1) is not None else 2
        return TextMatch(i, m.start(group), m.end(group))
    return None


def find_opening_tag(text: str, span: LineSpan) -> TextMatch:
    """Locate the tag name of the element that owns the anchor line."""
    lines = split_lines(text)
    for i in range(span.anchor, max(-1, span.anchor - TOKEN_WINDOW - 1), -1):
        tags = list(_TAG_OPEN_RE.finditer(lines[i]))
        if i == span.anchor:
            # only tags that open before the first attribute on the line own it
            attr = _ATTR_START_RE.search(lines[i])
            if attr is not None:
                tags = [t for t in tags if t.start() < attr.start()]
        if tags:
            return TextMatch(i, tags[-1].start(1), tags[-1].end(1))
    raise NotFoundError(f"No opening tag found for line {span.anchor + 1}")


def find_tag_extent(text: str, span: LineSpan) -> TagExtent:
    """Range of the opening tag that owns the anchor line.

    The closing ``>`` is the first one outside quotes and ``{...}``
    expressions, so ``onClick={() => x}`` does not end the tag.
    """
    tag = find_opening_tag(text, span)
    lines = split_lines(text)
    quote: str | None = None
    depth = 0
    col = tag.end
    for i in range(tag.line, len(lines)):
        line = lines[i]
        while col < len(line):
            ch = line[col]
            if quote is not None:
                if ch == quote:
                    quote = None
            elif ch in "\"'`":
                quote = ch
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth = max(0, depth - 1)
            elif ch == ">" and depth == 0:
                return TagExtent(tag.line, tag.start - 1, i, col + 1)
            col += 1
        col = 0
    raise NotFoundError(f"Tag opened on line {tag.line + 1} is never closed")


def find_markers(text: str) -> list[str]:
    return [m.group(1) for m in _MARKER_ANY_RE.finditer(text)]


def marker_regex(eid: str | None = None) -> re.Pattern[str]:
    if eid is None:
        return _MARKER_ANY_RE
    return re.compile(rf'\s+{re.escape(marker_text(eid))}')
