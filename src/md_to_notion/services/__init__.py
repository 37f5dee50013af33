"""Markdown line classifier, inline tokenizer and Notion block builders."""

from .inline_styles import StyledRun, tokenize
from .blocks import Block
from .markdown_parser import ListAccumulator, ListState, LineKind, classify_line, parse_markdown
from .block_converter import build_notion_blocks, markdown_to_notion, to_notion_block

__all__ = [
    "StyledRun",
    "tokenize",
    "Block",
    "ListAccumulator",
    "ListState",
    "LineKind",
    "classify_line",
    "parse_markdown",
    "build_notion_blocks",
    "markdown_to_notion",
    "to_notion_block",
]
