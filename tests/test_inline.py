"""
行内样式解析测试
"""

from sheetdown.core.markdown.inline import InlineStyleParser, has_inline_markers, parse_inline
from sheetdown.core.models import StyledSegment


def test_bold_in_middle() -> None:
    assert parse_inline("a **b** c") == [
        StyledSegment("a "),
        StyledSegment("b", bold=True),
        StyledSegment(" c"),
    ]


def test_underscore_bold_and_italic() -> None:
    assert parse_inline("__x__ _y_") == [
        StyledSegment("x", bold=True),
        StyledSegment(" "),
        StyledSegment("y", italic=True),
    ]


def test_strikethrough() -> None:
    assert parse_inline("~~gone~~") == [StyledSegment("gone", strikethrough=True)]


def test_asterisk_italic() -> None:
    assert parse_inline("*it* and *it*") == [
        StyledSegment("it", italic=True),
        StyledSegment(" and "),
        StyledSegment("it", italic=True),
    ]


def test_inline_code_is_plain_and_merged() -> None:
    """代码去掉反引号后与相邻普通文本合并"""
    assert parse_inline("run `make` now") == [StyledSegment("run make now")]


def test_match_is_non_greedy() -> None:
    assert parse_inline("**a** and **b**") == [
        StyledSegment("a", bold=True),
        StyledSegment(" and "),
        StyledSegment("b", bold=True),
    ]


def test_bold_takes_precedence_over_italic() -> None:
    segments = parse_inline("**x**")
    assert segments == [StyledSegment("x", bold=True)]
    assert not segments[0].italic


def test_unterminated_marker_is_literal() -> None:
    assert parse_inline("a * b") == [StyledSegment("a * b")]
    assert parse_inline("~~open") == [StyledSegment("~~open")]


def test_plain_text_is_single_segment() -> None:
    text = "no markers here, just 1 + 2 = 3"
    assert InlineStyleParser().parse(text) == [StyledSegment(text)]


def test_styled_text_without_markers_reparses_as_plain() -> None:
    segments = parse_inline("x **bold** ~~strike~~ *it*")
    joined = "".join(s.text for s in segments)
    assert joined == "x bold strike it"
    assert parse_inline(joined) == [StyledSegment(joined)]


def test_no_adjacent_plain_segments() -> None:
    segments = parse_inline("a * b `c` d ~ e")
    for left, right in zip(segments, segments[1:]):
        assert not (left.is_plain and right.is_plain)


def test_empty_input() -> None:
    assert parse_inline("") == []


def test_has_inline_markers() -> None:
    assert has_inline_markers("a_b")
    assert not has_inline_markers("plain text")
