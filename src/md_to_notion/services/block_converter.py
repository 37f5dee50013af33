"""Block models -> Notion API payloads.

Builds the dicts accepted as ``children`` by
`PATCH https://api.notion.com/v1/blocks/{block_id}/children`:
``{"object": "block", "type": <tag>, <tag>: <payload>}``.
"""

from __future__ import annotations

from typing import Any, Iterable

from .blocks import (
    Block,
    BookmarkBlock,
    CodeBlock,
    DividerBlock,
    ImageBlock,
    RichTextBlock,
    VideoBlock,
)
from .inline_styles import StyledRun
from .markdown_parser import parse_markdown


def markdown_to_notion(markdown: str) -> list[dict[str, Any]]:
    """Parse markdown and return Notion block payloads."""
    return build_notion_blocks(parse_markdown(markdown))


def build_notion_blocks(blocks: Iterable[Block]) -> list[dict[str, Any]]:
    return [to_notion_block(block) for block in blocks]


def to_notion_block(block: Block) -> dict[str, Any]:
    return {"object": "block", "type": block.type, block.type: _block_payload(block)}


def rich_text_payload(runs: Iterable[StyledRun]) -> list[dict[str, Any]]:
    return [
        {
            "type": "text",
            "text": {"content": run.text},
            "annotations": {
                "bold": run.bold,
                "italic": run.italic,
                "strikethrough": run.strikethrough,
                "underline": run.underline,
                "code": run.code,
                "color": run.color,
            },
        }
        for run in runs
    ]


def _block_payload(block: Block) -> dict[str, Any]:
    if isinstance(block, CodeBlock):
        return {"rich_text": rich_text_payload(block.rich_text), "language": block.language}
    if isinstance(block, RichTextBlock):
        return {"rich_text": rich_text_payload(block.rich_text)}
    if isinstance(block, (ImageBlock, VideoBlock)):
        return {"type": "external", "external": {"url": block.url}}
    if isinstance(block, BookmarkBlock):
        return {"url": block.url, "caption": rich_text_payload(block.caption)}
    if isinstance(block, DividerBlock):
        return {}
    raise TypeError(f"Unsupported block: {block!r}")
