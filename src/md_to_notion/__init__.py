"""Markdown to Notion blocks.

Examples:
    >>> from md_to_notion import markdown_to_notion
    >>> markdown_to_notion("# Hello")[0]["type"]
    'heading_1'
"""

__version__ = "0.1.0"

from .services import (
    Block,
    StyledRun,
    build_notion_blocks,
    markdown_to_notion,
    parse_markdown,
    tokenize,
)

__all__ = [
    "Block",
    "StyledRun",
    "build_notion_blocks",
    "markdown_to_notion",
    "parse_markdown",
    "tokenize",
]
