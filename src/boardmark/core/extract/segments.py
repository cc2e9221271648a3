"""Split raw note markup into marker, block-capture, and text segments"""

import logging
import re

from boardmark.core.models import ModeEnum, Segment, SegmentKindEnum


logger = logging.getLogger(__name__)

FLOW_OPEN, FLOW_CLOSE = "[FLOW]", "[/FLOW]"
TABLE_OPEN, TABLE_CLOSE = "[TABLE]", "[/TABLE]"

INLINE_MARKERS: dict[str, ModeEnum] = {
    "[H1]":  ModeEnum.heading,
    "[INT]": ModeEnum.intro,
    "[B]":   ModeEnum.body,
    "[FIG]": ModeEnum.figure,
    "[TIP]": ModeEnum.tip,
}

# Block captures come first so they win over inline literals at the same offset.
SEGMENT_RE = re.compile(
    r'(?P<flow>\[FLOW\].*?\[/FLOW\])'
    r'|(?P<table>\[TABLE\].*?\[/TABLE\])'
    r'|(?P<marker>\[H1\]|\[INT\]|\[B\]|\[FIG\]|\[TIP\])',
    re.DOTALL,
)


def segment(text: str | None) -> list[Segment]:
    """Return the ordered segments of text; None and '' both yield []."""
    if not text:
        return []

    segments: list[Segment] = []
    pos = 0
    for m in SEGMENT_RE.finditer(text):
        if m.start() > pos:
            segments.append(Segment(SegmentKindEnum.text, text[pos:m.start()]))
        segments.append(Segment(SegmentKindEnum(m.lastgroup), m.group()))
        pos = m.end()
    if pos < len(text):
        segments.append(Segment(SegmentKindEnum.text, text[pos:]))

    for opener in (FLOW_OPEN, TABLE_OPEN):
        if any(s.kind == SegmentKindEnum.text and opener in s.text for s in segments):
            logger.debug("Unterminated %s block left as literal text", opener)
    return segments
