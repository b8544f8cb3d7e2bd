"""
Markdown 文档解析与输出测试
"""

from sheetdown.core.markdown.document import MarkdownDocumentParser, parse_markdown, split_lines
from sheetdown.core.markdown.writer import escape_cell_text, render_block, render_document, render_table
from sheetdown.core.models import Alignment, Table, TableBlock, TableCell, TableRow, TextBlock


def _row(*values: str, alignment: Alignment = Alignment.UNDEFINED) -> TableRow:
    return TableRow(tuple(TableCell(v, alignment) for v in values))


# ============ 文档解析 ============


def test_heading_blank_and_table(sample_markdown: str) -> None:
    blocks = MarkdownDocumentParser().parse(sample_markdown)

    assert blocks == [
        TextBlock("# Title"),
        TextBlock(""),
        TableBlock(Table((_row("A", "B"), _row("1", "2")))),
    ]


def test_malformed_table_falls_back_to_text() -> None:
    blocks = parse_markdown("| a | b |\n| 1 | 2 |\n\n| c |\n")

    assert blocks == [
        TextBlock("| a | b |"),
        TextBlock("| 1 | 2 |"),
        TextBlock(""),
        TextBlock("| c |"),
    ]
    assert not any(isinstance(block, TableBlock) for block in blocks)


def test_blank_line_after_table_is_dropped() -> None:
    blocks = parse_markdown("| A |\n|---|\n\ntext")
    assert len(blocks) == 2
    assert isinstance(blocks[0], TableBlock)
    assert blocks[1] == TextBlock("text")


def test_blank_lines_between_text_are_kept() -> None:
    assert parse_markdown("a\n\nb") == [TextBlock("a"), TextBlock(""), TextBlock("b")]


def test_table_between_text_lines() -> None:
    blocks = parse_markdown("before\n| A | B |\n|:-|-:|\n| 1 | 2 |\nafter")

    assert blocks[0] == TextBlock("before")
    assert blocks[2] == TextBlock("after")
    table = blocks[1].table
    assert table.column_alignments == [Alignment.LEFT, Alignment.RIGHT]
    assert [cell.value for cell in table.rows[1]] == ["1", "2"]


def test_table_at_end_of_input_is_flushed() -> None:
    blocks = parse_markdown("intro\n| A |\n|---|\n| 1 |")
    assert len(blocks) == 2
    assert isinstance(blocks[1], TableBlock)
    assert len(blocks[1].table.rows) == 2


def test_two_tables_separated_by_text() -> None:
    blocks = parse_markdown("| A |\n|---|\nmid\n| B |\n|:-:|\n")
    assert [type(block) for block in blocks] == [TableBlock, TextBlock, TableBlock]
    assert blocks[2].table.column_alignments == [Alignment.CENTER]


def test_crlf_line_endings() -> None:
    blocks = parse_markdown("# T\r\n| A |\r\n|---|\r\n")
    assert blocks[0] == TextBlock("# T")
    assert isinstance(blocks[1], TableBlock)


def test_line_break_marker_kept_in_cell() -> None:
    blocks = parse_markdown("| A |\n|---|\n| x<br>y |")
    assert blocks[0].table.rows[1][0].value == "x<br>y"


def test_fallback_keeps_lines_verbatim() -> None:
    blocks = parse_markdown("  | only header |  ")
    assert blocks == [TextBlock("  | only header |  ")]


def test_empty_document() -> None:
    assert parse_markdown("") == []


def test_split_lines() -> None:
    assert split_lines("a\nb") == ["a", "b"]
    assert split_lines("a\n") == ["a"]
    assert split_lines("a\r\n\r\nb\r") == ["a", "", "b"]


# ============ Markdown 输出 ============


def test_render_table_separator_and_padding() -> None:
    header = TableRow(
        (
            TableCell("A", Alignment.LEFT),
            TableCell("B", Alignment.CENTER),
            TableCell("C", Alignment.RIGHT),
            TableCell("D", Alignment.UNDEFINED),
        )
    )
    table = Table((header, _row("1", "2")))

    assert render_table(table) == "|A|B|C|D|\n|:---|:-:|---:|---|\n|1|2|||"


def test_render_table_drops_cells_beyond_header() -> None:
    table = Table((_row("A"), _row("1", "extra")))
    assert render_table(table) == "|A|\n|---|\n|1|"


def test_escape_cell_text() -> None:
    assert escape_cell_text("a|b\nc") == "a\\|b<br>c"
    assert escape_cell_text("C:\\") == "C:\\\\"
    assert escape_cell_text("a\\b") == "a\\b"
    assert escape_cell_text("") == ""


def test_render_empty_table() -> None:
    assert render_table(Table()) == ""
    assert render_block(TableBlock()) == ""


def test_render_document() -> None:
    blocks = [TextBlock("# T"), TableBlock(Table((_row("A"), _row("1"))))]
    assert render_document(blocks) == "# T\n\n|A|\n|---|\n|1|\n"


def test_render_empty_document() -> None:
    assert render_document([]) == ""
