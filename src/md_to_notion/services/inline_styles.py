"""Inline style tokenizer: one line of markdown -> styled text runs.

Markers are checked in this order at every cursor position:
``**bold**``, ``_italic_``, ``__underline__``, ``~~strikethrough~~`` and
```code```. A marker only opens a span when its closer appears later in the
line, otherwise it stays plain text. Spans do not nest.

A single ``_`` is checked before ``__``, so italic usually wins:
``__x__`` yields an empty italic run, a plain ``x`` and another empty italic run.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class StyledRun(BaseModel):
    """One contiguous span of text sharing the same annotations."""

    model_config = ConfigDict(frozen=True)

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    code: bool = False
    color: Literal["default"] = "default"


# (marker, annotation) in match priority order
STYLE_MARKERS: tuple[tuple[str, str], ...] = (
    ("**", "bold"),
    ("_", "italic"),
    ("__", "underline"),
    ("~~", "strikethrough"),
    ("`", "code"),
)


def tokenize(line: str) -> list[StyledRun]:
    """Split a line into plain and styled runs.

    Concatenating the run texts gives back ``line`` without the matched
    delimiters. An empty line yields a single empty plain run.
    """
    if not line:
        return [StyledRun(text="")]

    runs: list[StyledRun] = []
    pending: list[str] = []
    i = 0
    while i < len(line):
        span = _match_span(line, i)
        if span is None:
            pending.append(line[i])
            i += 1
            continue
        style, text, i = span
        if pending:
            runs.append(StyledRun(text="".join(pending)))
            pending = []
        runs.append(StyledRun(text=text, **{style: True}))

    if pending:
        runs.append(StyledRun(text="".join(pending)))
    return runs


def _match_span(line: str, start: int) -> tuple[str, str, int] | None:
    """Return (annotation, inner text, cursor after closer) for a span opening at ``start``."""
    for marker, style in STYLE_MARKERS:
        if not line.startswith(marker, start):
            continue
        end = line.find(marker, start + len(marker))
        if end == -1:
            continue
        return style, line[start + len(marker) : end], end + len(marker)
    return None
