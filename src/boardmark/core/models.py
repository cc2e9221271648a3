"""Typed content blocks, segments, and note models for the markup parser"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class ModeEnum(str, Enum):
    """Interpretation mode set by an inline marker; never stored on a block."""
    heading = "HEADING"
    intro = "INTRO"
    body = "BODY"
    figure = "FIGURE"
    tip = "TIP"
    default = "DEFAULT"


class SegmentKindEnum(str, Enum):
    marker = "marker"       # inline tag literal, e.g. [H1]
    flow = "flow"           # full [FLOW]...[/FLOW] capture
    table = "table"         # full [TABLE]...[/TABLE] capture
    text = "text"


class BlockKindEnum(str, Enum):
    heading = "heading"
    intro = "intro"
    bullet_list = "bullet_list"
    figure = "figure"
    tip = "tip"
    flowchart = "flowchart"
    table = "table"
    paragraph = "paragraph"


@dataclass(frozen=True)
class Segment:
    """One unit of segmented source text; marker captures keep their literal bounds."""
    kind: SegmentKindEnum
    text: str


# --- spans ---

class PlainSpan(BaseModel):
    kind: Literal["plain"] = "plain"
    text: str


class BoldSpan(BaseModel):
    kind: Literal["bold"] = "bold"
    text: str


TextSpan = Annotated[Union[PlainSpan, BoldSpan], Field(discriminator="kind")]


class ListItem(BaseModel):
    """A bullet list line; ordinal_label is set only for numbered source lines."""
    ordinal_label: Optional[str] = None
    spans: list[TextSpan] = []


# --- blocks ---

class HeadingBlock(BaseModel):
    kind: Literal["heading"] = "heading"
    text: str


class IntroBlock(BaseModel):
    kind: Literal["intro"] = "intro"
    text: str


class BulletListBlock(BaseModel):
    kind: Literal["bullet_list"] = "bullet_list"
    items: list[ListItem]


class FigureBlock(BaseModel):
    """Diagram reference or fallback caption; exactly one of the two is set."""
    kind: Literal["figure"] = "figure"
    diagram_id: Optional[str] = None
    caption: Optional[str] = None


class TipBlock(BaseModel):
    kind: Literal["tip"] = "tip"
    text: str


class FlowchartBlock(BaseModel):
    kind: Literal["flowchart"] = "flowchart"
    steps: list[str]


class TableBlock(BaseModel):
    kind: Literal["table"] = "table"
    header_cells: list[str]
    rows: list[list[str]] = []


class ParagraphBlock(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    text: str


Block = Annotated[
    Union[
        HeadingBlock,
        IntroBlock,
        BulletListBlock,
        FigureBlock,
        TipBlock,
        FlowchartBlock,
        TableBlock,
        ParagraphBlock,
    ],
    Field(discriminator="kind"),
]


# --- notes ---

@dataclass
class ParsedNote:
    """Internal read result for a note file; not persisted."""
    path:        Path
    slug:        str
    raw:         str             # full file content (includes frontmatter)
    content:     str             # markup body only (frontmatter stripped)
    frontmatter: dict[str, Any] = field(default_factory=dict)


class ExtractedNote(BaseModel):
    """Public output contract: note metadata plus its ordered block sequence."""
    slug: str
    path: str
    title: str
    subject: Optional[str] = None
    frontmatter: dict[str, Any] = {}
    hash: str                       # sha256 of the markup body
    blocks: list[Block]


class DiagramAsset(BaseModel):
    """Resolved display resource for a figure block carrying a diagram id."""
    diagram_id: str
    path: str
    fallback_url: str
    alt: str
