"""Fold segments into typed blocks and convert a ParsedNote into an ExtractedNote"""

from dataclasses import dataclass
from functools import reduce
from typing import Callable

from boardmark.core.extract.blocks import build_figure, build_flowchart, build_list, build_table
from boardmark.core.extract.segments import INLINE_MARKERS, segment
from boardmark.core.models import (
    Block,
    ExtractedNote,
    HeadingBlock,
    IntroBlock,
    ModeEnum,
    ParagraphBlock,
    ParsedNote,
    Segment,
    SegmentKindEnum,
    TipBlock,
)
from boardmark.core.utils.hashing import sha256


TEXT_BUILDERS: dict[ModeEnum, Callable[[str], Block]] = {
    ModeEnum.heading: lambda text: HeadingBlock(text=text),
    ModeEnum.intro:   lambda text: IntroBlock(text=text),
    ModeEnum.body:    build_list,
    ModeEnum.figure:  build_figure,
    ModeEnum.tip:     lambda text: TipBlock(text=text),
    ModeEnum.default: lambda text: ParagraphBlock(text=text),
}


@dataclass(frozen=True)
class ParseState:
    """Fold accumulator: the current mode and the blocks emitted so far."""
    mode: ModeEnum = ModeEnum.default
    blocks: tuple[Block, ...] = ()

    def emit(self, block: Block | None) -> "ParseState":
        if block is None:
            return self
        return ParseState(self.mode, self.blocks + (block,))


def step(state: ParseState, seg: Segment) -> ParseState:
    """Consume one segment, returning the next state."""
    if seg.kind == SegmentKindEnum.marker:
        return ParseState(INLINE_MARKERS[seg.text], state.blocks)

    trimmed = seg.text.strip()
    if not trimmed:
        return state

    if seg.kind == SegmentKindEnum.flow:
        return state.emit(build_flowchart(trimmed))
    if seg.kind == SegmentKindEnum.table:
        return state.emit(build_table(trimmed))
    return state.emit(TEXT_BUILDERS[state.mode](trimmed))


def parse_content(text: str | None) -> list[Block]:
    """Parse note markup into its ordered block sequence. Total over all strings."""
    return list(reduce(step, segment(text), ParseState()).blocks)


def extract_note(parsed: ParsedNote) -> ExtractedNote:
    """Convert a ParsedNote into metadata plus typed blocks."""
    fm = parsed.frontmatter
    subject = fm.get('subject')
    return ExtractedNote(
        slug=parsed.slug,
        path=str(parsed.path),
        title=str(fm.get('title') or parsed.path.stem),
        subject=str(subject) if subject is not None else None,
        frontmatter=fm,
        hash=sha256(parsed.content),
        blocks=parse_content(parsed.content),
    )
