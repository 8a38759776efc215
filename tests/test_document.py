import pytest

from codesense.document import TextDocument

TEXT = "let a = 1;\n\nconsole.log(a);"


@pytest.mark.parametrize(
    "offset, expected",
    [
        pytest.param(0, (0, 0), id="start"),
        pytest.param(10, (0, 10), id="end_of_first_line"),
        pytest.param(11, (1, 0), id="empty_line"),
        pytest.param(12, (2, 0), id="third_line"),
        pytest.param(len(TEXT), (2, 15), id="end"),
        pytest.param(-3, (0, 0), id="negative_clamps"),
        pytest.param(999, (2, 15), id="past_end_clamps"),
    ],
)
def test_offset_to_position(offset, expected):
    assert TextDocument(TEXT).offset_to_position(offset) == expected


@pytest.mark.parametrize(
    "line, column, expected",
    [
        pytest.param(0, 4, 4, id="first_line"),
        pytest.param(2, 7, 19, id="third_line"),
        pytest.param(0, 99, 10, id="column_clamps"),
        pytest.param(9, 0, 12, id="line_clamps"),
    ],
)
def test_position_to_offset(line, column, expected):
    assert TextDocument(TEXT).position_to_offset(line, column) == expected


def test_lines_and_text_before():
    document = TextDocument(TEXT)
    assert document.line_count() == 3
    assert document.get_line(2) == "console.log(a);"
    assert document.get_line(5) == ""
    assert document.get_text_before(19) == "console"
    assert len(document) == len(TEXT)


def test_set_text_replaces_lines():
    document = TextDocument()
    assert document.line_count() == 1
    document.set_text("a\nb")
    assert document.get_text() == "a\nb"
    assert document.get_line(1) == "b"
