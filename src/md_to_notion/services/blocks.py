"""Notion block variants and the builders that create them.

``Block`` is a closed union discriminated on ``type``; the ``type`` values are
the Notion block type tags. Text-bearing builders run their text through the
inline tokenizer; URLs and code are stored verbatim.
"""

from __future__ import annotations

from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .. import config
from .inline_styles import StyledRun, tokenize


class _FrozenBlock(BaseModel):
    model_config = ConfigDict(frozen=True)


class RichTextBlock(_FrozenBlock):
    rich_text: tuple[StyledRun, ...]


class Heading1Block(RichTextBlock):
    type: Literal["heading_1"] = "heading_1"


class Heading2Block(RichTextBlock):
    type: Literal["heading_2"] = "heading_2"


class Heading3Block(RichTextBlock):
    type: Literal["heading_3"] = "heading_3"


class ParagraphBlock(RichTextBlock):
    type: Literal["paragraph"] = "paragraph"


class BulletedListItemBlock(RichTextBlock):
    type: Literal["bulleted_list_item"] = "bulleted_list_item"


class NumberedListItemBlock(RichTextBlock):
    type: Literal["numbered_list_item"] = "numbered_list_item"


class QuoteBlock(RichTextBlock):
    type: Literal["quote"] = "quote"


class ImageBlock(_FrozenBlock):
    type: Literal["image"] = "image"
    url: str


class VideoBlock(_FrozenBlock):
    type: Literal["video"] = "video"
    url: str


class BookmarkBlock(_FrozenBlock):
    type: Literal["bookmark"] = "bookmark"
    url: str
    caption: tuple[StyledRun, ...] = ()


class CodeBlock(_FrozenBlock):
    """Code is kept as one plain run, never tokenized."""

    type: Literal["code"] = "code"
    rich_text: tuple[StyledRun, ...]
    language: str


class DividerBlock(_FrozenBlock):
    type: Literal["divider"] = "divider"


Block = Annotated[
    Union[
        Heading1Block,
        Heading2Block,
        Heading3Block,
        ParagraphBlock,
        BulletedListItemBlock,
        NumberedListItemBlock,
        QuoteBlock,
        ImageBlock,
        VideoBlock,
        BookmarkBlock,
        CodeBlock,
        DividerBlock,
    ],
    Field(discriminator="type"),
]

_HEADINGS: dict[int, type[RichTextBlock]] = {
    1: Heading1Block,
    2: Heading2Block,
    3: Heading3Block,
}


def heading_block(level: int, text: str) -> RichTextBlock:
    if level not in _HEADINGS:
        raise ValueError(f"Unsupported heading level: {level}")
    return _HEADINGS[level](rich_text=tokenize(text))


def paragraph_block(text: str) -> ParagraphBlock:
    return ParagraphBlock(rich_text=tokenize(text))


def quote_block(text: str) -> QuoteBlock:
    return QuoteBlock(rich_text=tokenize(text))


def bulleted_list_blocks(items: Iterable[str]) -> list[BulletedListItemBlock]:
    """One sibling block per item."""
    return [BulletedListItemBlock(rich_text=tokenize(item)) for item in items]


def numbered_list_blocks(items: Iterable[str]) -> list[NumberedListItemBlock]:
    """One sibling block per item."""
    return [NumberedListItemBlock(rich_text=tokenize(item)) for item in items]


def image_block(url: str) -> ImageBlock:
    return ImageBlock(url=url)


def video_block(url: str) -> VideoBlock:
    return VideoBlock(url=url)


def bookmark_block(url: str, caption: str = "") -> BookmarkBlock:
    return BookmarkBlock(url=url, caption=tokenize(caption) if caption else ())


def code_block(code: str, language: str | None = None) -> CodeBlock:
    return CodeBlock(
        rich_text=(StyledRun(text=code),),
        language=language or config.DEFAULT_CODE_LANGUAGE,
    )


def divider_block() -> DividerBlock:
    return DividerBlock()


def spacer_blocks(count: int = 1) -> list[ParagraphBlock]:
    """Empty paragraphs used as vertical space."""
    return [ParagraphBlock(rich_text=(StyledRun(text=""),)) for _ in range(count)]
