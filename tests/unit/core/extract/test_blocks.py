"""Unit tests for core/extract/blocks.py"""

import pytest

from boardmark.core.extract.blocks import (
    build_figure,
    build_flowchart,
    build_list,
    build_table,
    parse_list_item,
    parse_spans,
)
from boardmark.core.models import BoldSpan, PlainSpan


# --- spans ---

def test_bold_then_plain():
    """A leading *bold* run is bold; the rest keeps its leading space."""
    assert parse_spans("*Key* term explained") == [
        BoldSpan(text="Key"),
        PlainSpan(text=" term explained"),
    ]


def test_multiple_bold_runs():
    """Bold and plain spans alternate in source order."""
    spans = parse_spans("a *b* c *d*")
    assert spans == [
        PlainSpan(text="a "),
        BoldSpan(text="b"),
        PlainSpan(text=" c "),
        BoldSpan(text="d"),
    ]


@pytest.mark.parametrize("line", ["a *b", "*open only", "trailing*", "x * y"])
def test_unpaired_asterisk_is_literal(line):
    """An odd asterisk never opens a bold span."""
    assert parse_spans(line) == [PlainSpan(text=line)]


def test_odd_asterisk_after_pair():
    """With three asterisks, the first pair is bold and the last stays literal."""
    assert parse_spans("*a* b*") == [BoldSpan(text="a"), PlainSpan(text=" b*")]


def test_empty_fragments_dropped():
    """Empty plain fragments around a whole-line bold are dropped."""
    assert parse_spans("*all bold*") == [BoldSpan(text="all bold")]


def test_empty_bold_pair_is_empty_bold_span():
    """`**` matches the bold pattern and yields an empty bold span."""
    assert parse_spans("a ** b") == [PlainSpan(text="a "), BoldSpan(text=""), PlainSpan(text=" b")]


def test_double_asterisk_markdown_bold():
    """Markdown-style `**Key**` is two empty bold spans around plain text."""
    assert parse_spans("**Key**") == [BoldSpan(text=""), PlainSpan(text="Key"), BoldSpan(text="")]


def test_empty_line_has_no_spans():
    assert parse_spans("") == []


# --- list items ---

def test_numbered_item_label():
    """'N.' prefix sets ordinal_label and is removed from the text."""
    item = parse_list_item("12. Twelfth point")
    assert item.ordinal_label == "12"
    assert item.spans == [PlainSpan(text="Twelfth point")]


@pytest.mark.parametrize("line", ["- dash item", "• dot item", "plain item"])
def test_bullet_items_have_no_label(line):
    """Dash, dot, and unmarked lines carry no ordinal label."""
    item = parse_list_item(line)
    assert item.ordinal_label is None
    assert item.spans[0].text.endswith("item")
    assert not item.spans[0].text.startswith(("-", "•", " "))


def test_indented_numbered_line():
    """Leading indentation does not hide the ordinal prefix."""
    item = parse_list_item("   3. Third")
    assert item.ordinal_label == "3"
    assert item.spans == [PlainSpan(text="Third")]


def test_number_without_dot_is_text():
    """Digits not followed by '.' are part of the text."""
    item = parse_list_item("2024 was a year")
    assert item.ordinal_label is None
    assert item.spans == [PlainSpan(text="2024 was a year")]


def test_build_list_drops_blank_lines():
    """Blank lines produce no items."""
    block = build_list("1. First\n\n   \n2. *Second*")
    assert [i.ordinal_label for i in block.items] == ["1", "2"]
    assert block.items[1].spans == [BoldSpan(text="Second")]


# --- figure ---

def test_figure_with_diagram_id():
    """[D<n>] sets diagram_id and discards the caption."""
    block = build_figure("See [D3] for the cycle")
    assert block.diagram_id == "3"
    assert block.caption is None


def test_figure_id_case_insensitive():
    block = build_figure("[d42]")
    assert block.diagram_id == "42"


def test_figure_without_id_uses_caption():
    """Text without a diagram id becomes the caption."""
    block = build_figure("No diagram available")
    assert block.diagram_id is None
    assert block.caption == "No diagram available"


@pytest.mark.parametrize("text", ["[D]", "[Dx1]", "D3", "[D 3]"])
def test_figure_malformed_id_is_caption(text):
    assert build_figure(text).caption == text


# --- flowchart ---

def test_flowchart_steps_trimmed():
    block = build_flowchart("[FLOW] Start >Middle >  End [/FLOW]")
    assert block.steps == ["Start", "Middle", "End"]


def test_flowchart_single_step():
    assert build_flowchart("[FLOW]Only[/FLOW]").steps == ["Only"]


def test_empty_flowchart_still_has_one_step():
    """An empty interior yields a single empty step rather than no block."""
    assert build_flowchart("[FLOW]  [/FLOW]").steps == [""]


def test_flowchart_keeps_empty_steps():
    assert build_flowchart("[FLOW]A >> B[/FLOW]").steps == ["A", "", "B"]


# --- table ---

def test_table_header_and_rows():
    block = build_table("[TABLE]A|B\n1|2\n3|4[/TABLE]")
    assert block.header_cells == ["A", "B"]
    assert block.rows == [["1", "2"], ["3", "4"]]


def test_table_cells_trimmed_and_ragged():
    """Cells are trimmed and rows may differ in length."""
    block = build_table("[TABLE]\n Name | Dose \n Drug A | 5mg | oral \n\n Drug B\n[/TABLE]")
    assert block.header_cells == ["Name", "Dose"]
    assert block.rows == [["Drug A", "5mg", "oral"], ["Drug B"]]


def test_table_header_only():
    block = build_table("[TABLE]A|B[/TABLE]")
    assert block.rows == []


def test_table_crlf_lines():
    block = build_table("[TABLE]A|B\r\n1|2[/TABLE]")
    assert block.rows == [["1", "2"]]


@pytest.mark.parametrize("capture", ["[TABLE][/TABLE]", "[TABLE]\n  \n[/TABLE]"])
def test_empty_table_is_none(capture):
    assert build_table(capture) is None


@pytest.mark.parametrize("sep", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"])
def test_table_splits_on_newline_only(sep):
    """Other Unicode line separators stay inside the cell text."""
    block = build_table(f"[TABLE]a{sep}b[/TABLE]")
    assert block.header_cells == [f"a{sep}b"]
    assert block.rows == []


def test_list_splits_on_newline_only():
    block = build_list("one\u2028two\nthree")
    assert len(block.items) == 2
    assert block.items[0].spans == [PlainSpan(text="one\u2028two")]
