"""Markdown -> Notion blocks, one line at a time.

This is a small, line-based classifier, not a full Markdown parser: no nested
lists, no tables, no fenced code spanning lines, no escapes. Blank lines are
dropped rather than treated as paragraph breaks.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from loguru import logger

from .blocks import (
    Block,
    bookmark_block,
    bulleted_list_blocks,
    code_block,
    heading_block,
    image_block,
    numbered_list_blocks,
    paragraph_block,
    quote_block,
)

# \ufeff (byte order mark) counts as whitespace when trimming, like \s does in JS
_BLANK_LINES_RE = re.compile(r"\n[\s\ufeff]*\n")
_TRIM_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")
_NUMBERED_PREFIX_RE = re.compile(r"^[0-9]+\.[\s\ufeff]")
_IMAGE_URL_RE = re.compile(r"\((.*?)\)")
_LINK_RE = re.compile(r"\[(.*?)\]\((.*?)\)")


class LineKind(str, Enum):
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    BULLET = "bullet"
    NUMBERED = "numbered"
    CODE = "code"
    QUOTE = "quote"
    IMAGE = "image"
    BOOKMARK = "bookmark"
    PARAGRAPH = "paragraph"


class ListState(str, Enum):
    IDLE = "idle"
    BULLETS = "bullets"
    NUMBERS = "numbers"


@dataclass
class ListAccumulator:
    """Collects consecutive same-kind list lines until something else shows up."""

    state: ListState = ListState.IDLE
    items: list[str] = field(default_factory=list)

    def add(self, state: ListState, item: str) -> list[Block]:
        """Append an item; returns the blocks flushed if the list kind changed."""
        if state is ListState.IDLE:
            raise ValueError("Cannot add list items in the idle state")
        flushed = self.flush() if self.state is not state else []
        self.state = state
        self.items.append(item)
        return flushed

    def flush(self) -> list[Block]:
        """Emit one block per pending item and go back to idle."""
        if self.state is ListState.BULLETS:
            blocks: list[Block] = list(bulleted_list_blocks(self.items))
        elif self.state is ListState.NUMBERS:
            blocks = list(numbered_list_blocks(self.items))
        else:
            blocks = []
        self.state = ListState.IDLE
        self.items = []
        return blocks


def classify_line(line: str) -> LineKind:
    """First matching rule wins; the order below is significant."""
    if line.startswith("# "):
        return LineKind.HEADING1
    if line.startswith("## "):
        return LineKind.HEADING2
    if line.startswith("### "):
        return LineKind.HEADING3
    if line.startswith("* ") or line.startswith("- "):
        return LineKind.BULLET
    if _NUMBERED_PREFIX_RE.match(line):
        return LineKind.NUMBERED
    if line.startswith("`"):
        return LineKind.CODE
    if line.startswith("> "):
        return LineKind.QUOTE
    if line.startswith("![") and "](" in line and line.endswith(")"):
        return LineKind.IMAGE
    if line.startswith("[") and "](" in line and line.endswith(")"):
        return LineKind.BOOKMARK
    return LineKind.PARAGRAPH


def parse_markdown(markdown: str) -> list[Block]:
    """
    Parse markdown into a flat list of blocks, in source line order.
    Consecutive list lines of one kind become sibling list-item blocks.
    """
    blocks: list[Block] = []
    pending_list = ListAccumulator()

    for line in _clean_lines(markdown):
        kind = classify_line(line)
        if kind is LineKind.BULLET:
            blocks.extend(pending_list.add(ListState.BULLETS, line[2:]))
            continue
        if kind is LineKind.NUMBERED:
            blocks.extend(pending_list.add(ListState.NUMBERS, _NUMBERED_PREFIX_RE.sub("", line, count=1)))
            continue

        blocks.extend(pending_list.flush())
        block = _build_block(kind, line)
        if block is None:
            logger.debug(f"Dropped malformed {kind.value} line: {line!r}")
            continue
        blocks.append(block)

    blocks.extend(pending_list.flush())
    return blocks


def _clean_lines(markdown: str) -> Iterator[str]:
    text = markdown.replace("\r\n", "\n").replace("\r", "\n")
    text = _trim(_BLANK_LINES_RE.sub("\n", text))
    for line in text.split("\n"):
        line = _trim(line)
        if line:
            yield line


def _trim(text: str) -> str:
    return _TRIM_RE.sub("", text)


def _build_block(kind: LineKind, line: str) -> Block | None:
    if kind is LineKind.HEADING1:
        return heading_block(1, line[2:])
    if kind is LineKind.HEADING2:
        return heading_block(2, line[3:])
    if kind is LineKind.HEADING3:
        return heading_block(3, line[4:])
    if kind is LineKind.CODE:
        return code_block(line[1:-1])
    if kind is LineKind.QUOTE:
        return quote_block(line[2:])
    if kind is LineKind.IMAGE:
        match = _IMAGE_URL_RE.search(line)
        if not match:
            return None
        return image_block(match.group(1))
    if kind is LineKind.BOOKMARK:
        match = _LINK_RE.search(line)
        if not match:
            return None
        return bookmark_block(match.group(2), match.group(1))
    return paragraph_block(line)
