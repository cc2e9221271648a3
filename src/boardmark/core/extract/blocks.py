"""Builders turning trimmed segment text into typed content blocks"""

import logging
import re

from boardmark.core.extract.segments import FLOW_CLOSE, FLOW_OPEN, TABLE_CLOSE, TABLE_OPEN
from boardmark.core.models import (
    BoldSpan,
    BulletListBlock,
    FigureBlock,
    FlowchartBlock,
    ListItem,
    PlainSpan,
    TableBlock,
    TextSpan,
)


logger = logging.getLogger(__name__)

ORDINAL_RE = re.compile(r'^(\d+)\.')
BULLET_RE = re.compile(r'^[-•]')
BOLD_RE = re.compile(r'(\*.*?\*)')
DIAGRAM_RE = re.compile(r'\[D(\d+)\]', re.IGNORECASE)

FLOW_SEPARATOR = '>'
CELL_SEPARATOR = '|'


def _non_blank_lines(text: str) -> list[str]:
    return [line for line in text.split('\n') if line.strip()]


def _unwrap(capture: str, opener: str, closer: str) -> str:
    """Strip the literal opening/closing tags from a block capture and trim."""
    return capture.strip()[len(opener):-len(closer)].strip()


def _cells(line: str) -> list[str]:
    return [cell.strip() for cell in line.split(CELL_SEPARATOR)]


def parse_spans(line: str) -> list[TextSpan]:
    """Split a cleaned list line into plain and *bold* spans, dropping empty plain fragments.

    Only fragments captured by the bold pattern are bold, so `**` is an empty
    bold span; an unpaired asterisk stays literal inside the surrounding plain span.
    """
    spans: list[TextSpan] = []
    for i, fragment in enumerate(BOLD_RE.split(line)):
        if i % 2:
            spans.append(BoldSpan(text=fragment[1:-1]))
        elif fragment:
            spans.append(PlainSpan(text=fragment))
    return spans


def parse_list_item(line: str) -> ListItem:
    """Build a ListItem, capturing a leading 'N.' ordinal or dropping a '-'/'•' bullet."""
    line = line.strip()
    m = ORDINAL_RE.match(line)
    if m:
        label, rest = m.group(1), line[m.end():]
    else:
        label, rest = None, BULLET_RE.sub('', line, count=1)
    return ListItem(ordinal_label=label, spans=parse_spans(rest.strip()))


def build_list(text: str) -> BulletListBlock:
    """Body-mode text: one item per non-blank line."""
    return BulletListBlock(items=[parse_list_item(line) for line in _non_blank_lines(text)])


def build_figure(text: str) -> FigureBlock:
    """Figure-mode text: keep only the [D<n>] id if present, else the text as caption."""
    m = DIAGRAM_RE.search(text)
    if m:
        return FigureBlock(diagram_id=m.group(1))
    logger.debug("Figure without diagram id, using caption: %r", text)
    return FigureBlock(caption=text)


def build_flowchart(capture: str) -> FlowchartBlock:
    """Split a [FLOW] capture on '>' into trimmed steps; empty steps are kept."""
    content = _unwrap(capture, FLOW_OPEN, FLOW_CLOSE)
    return FlowchartBlock(steps=[step.strip() for step in content.split(FLOW_SEPARATOR)])


def build_table(capture: str) -> TableBlock | None:
    """Split a [TABLE] capture into header cells and rows; None when it has no lines.

    Rows may differ in cell count; no column validation is applied.
    """
    lines = _non_blank_lines(_unwrap(capture, TABLE_OPEN, TABLE_CLOSE))
    if not lines:
        logger.debug("Empty table block dropped")
        return None
    return TableBlock(
        header_cells=_cells(lines[0]),
        rows=[_cells(line) for line in lines[1:]],
    )
