import pytest

from md_to_notion.services.block_converter import (
    build_notion_blocks,
    markdown_to_notion,
    rich_text_payload,
    to_notion_block,
)
from md_to_notion.services.blocks import (
    ParagraphBlock,
    bookmark_block,
    code_block,
    divider_block,
    heading_block,
    spacer_blocks,
    video_block,
)
from md_to_notion.services.inline_styles import StyledRun


def plain_text(block: dict) -> str:
    payload = block[block["type"]]
    runs = payload.get("rich_text", payload.get("caption", []))
    return "".join(r["text"]["content"] for r in runs)


def test_rich_text_shape():
    (entry,) = rich_text_payload([StyledRun(text="hi", bold=True)])
    assert entry == {
        "type": "text",
        "text": {"content": "hi"},
        "annotations": {
            "bold": True,
            "italic": False,
            "strikethrough": False,
            "underline": False,
            "code": False,
            "color": "default",
        },
    }


def test_heading_payload():
    block = to_notion_block(heading_block(2, "Hello **there**"))
    assert block["object"] == "block"
    assert block["type"] == "heading_2"
    runs = block["heading_2"]["rich_text"]
    assert [r["text"]["content"] for r in runs] == ["Hello ", "there"]
    assert runs[1]["annotations"]["bold"] is True


def test_heading_level_out_of_range():
    with pytest.raises(ValueError):
        heading_block(4, "nope")


def test_image_and_video_are_external():
    (image,) = markdown_to_notion("![alt](http://x/y.png)")
    assert image == {
        "object": "block",
        "type": "image",
        "image": {"type": "external", "external": {"url": "http://x/y.png"}},
    }
    assert to_notion_block(video_block("http://v/1.mp4"))["video"] == {
        "type": "external",
        "external": {"url": "http://v/1.mp4"},
    }


def test_bookmark_payload():
    (block,) = markdown_to_notion("[**Click**](http://x)")
    assert block["type"] == "bookmark"
    assert block["bookmark"]["url"] == "http://x"
    assert block["bookmark"]["caption"][0]["annotations"]["bold"] is True
    assert to_notion_block(bookmark_block("http://x"))["bookmark"]["caption"] == []


def test_code_payload_is_unstyled():
    block = to_notion_block(code_block("**not bold**", language="python"))
    assert block["code"]["language"] == "python"
    (run,) = block["code"]["rich_text"]
    assert run["text"]["content"] == "**not bold**"
    assert not any(v for k, v in run["annotations"].items() if k != "color")


def test_code_default_language(monkeypatch):
    from md_to_notion import config

    monkeypatch.setattr(config, "DEFAULT_CODE_LANGUAGE", "plain text")
    assert code_block("x").language == "plain text"


def test_divider_payload():
    assert to_notion_block(divider_block()) == {"object": "block", "type": "divider", "divider": {}}


def test_spacer_blocks():
    blocks = spacer_blocks(3)
    assert len(blocks) == 3
    assert all(isinstance(b, ParagraphBlock) and b.rich_text == (StyledRun(text=""),) for b in blocks)
    assert build_notion_blocks(spacer_blocks())[0]["paragraph"]["rich_text"][0]["text"]["content"] == ""


def test_list_items_are_flat_siblings():
    blocks = markdown_to_notion("- one\n- _two_\n- three\nnext")
    assert [b["type"] for b in blocks] == ["bulleted_list_item"] * 3 + ["paragraph"]
    assert all("children" not in b["bulleted_list_item"] for b in blocks[:3])
    assert [plain_text(b) for b in blocks] == ["one", "two", "three", "next"]


def test_plain_text_reconstructs_line_without_markers():
    md = "## A **b** c\n> _q_ ~~r~~\n1. `s` t"
    assert [plain_text(b) for b in markdown_to_notion(md)] == ["A b c", "q r", "s t"]

