"""Brace-balanced block lookup for CSS-like text.

Blocks are found by a regex search for ``head\\s*{`` followed by a forward
depth count to the matching close brace, so nested blocks inside the target
do not end it early. Braces inside strings or comments are not special-cased.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

THEME_HEAD = r"@theme\s*(?:inline\s*)?"
THEME_SELECTOR = "@theme"


@dataclass(frozen=True)
class BlockSpan:
    open_brace: int
    close_brace: int

    def body(self, text: str) -> str:
        return text[self.open_brace + 1 : self.close_brace]


def resolve_head(selector: str) -> tuple[str, bool]:
    """Return ``(head, is_pattern)`` for a selector as callers spell it."""
    if selector.strip() == THEME_SELECTOR:
        return THEME_HEAD, True
    return selector, False


def match_close_brace(text: str, open_brace: int) -> int | None:
    depth = 0
    for i in range(open_brace, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return None


def _head_regex(head: str, pattern: bool) -> re.Pattern[str]:
    source = head if pattern else re.escape(head)
    return re.compile(source + r"\s*\{")


def iter_blocks(text: str, head: str, *, pattern: bool = False) -> Iterator[BlockSpan]:
    regex = _head_regex(head, pattern)
    pos = 0
    while True:
        m = regex.search(text, pos)
        if m is None:
            return
        open_brace = m.end() - 1
        close_brace = match_close_brace(text, open_brace)
        if close_brace is None:
            return
        yield BlockSpan(open_brace, close_brace)
        pos = close_brace + 1


def find_block(text: str, head: str, *, pattern: bool = False) -> BlockSpan | None:
    """Return the first balanced block introduced by *head*, or ``None``."""
    return next(iter_blocks(text, head, pattern=pattern), None)


def find_selector_block(text: str, selector: str) -> BlockSpan | None:
    head, is_pattern = resolve_head(selector)
    return find_block(text, head, pattern=is_pattern)


def splice_block(text: str, span: BlockSpan, new_body: str) -> str:
    return text[: span.open_brace + 1] + new_body + text[span.close_brace :]
