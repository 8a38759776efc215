import pytest

from codesense.parser.highlighter import HighlightKind, LineHighlighter, LineState
from codesense.parser.parser import parse_program
from codesense.parser.visitor import NodeVisitor, iter_child_nodes, walk


# --- Visitor ---


def test_walk_yields_nodes_in_source_order():
    program = parse_program("let a = b + c;")
    names = [node.name for node in walk(program) if node.type == "Identifier"]
    assert names == ["a", "b", "c"]


def test_iter_child_nodes_skips_holes():
    program = parse_program("[a, , b]")
    array = program.body[0].expression
    assert [child.name for child in iter_child_nodes(array)] == ["a", "b"]


def test_node_visitor_dispatches_on_type():
    class CallCounter(NodeVisitor):
        def __init__(self):
            self.callees = []

        def visit_CallExpression(self, node):
            self.callees.append(node.callee.name)
            self.generic_visit(node)

    counter = CallCounter()
    counter.visit(parse_program("outer(inner(1)); other();"))
    assert counter.callees == ["outer", "inner", "other"]


# --- Highlighter ---


def kinds_and_values(tokens):
    return [(token.type, token.value) for token in tokens if token.type != HighlightKind.WHITESPACE]


def test_highlights_a_simple_line():
    tokens, state = LineHighlighter().tokenize_line("const user = getUser(42);")
    assert kinds_and_values(tokens) == [
        (HighlightKind.KEYWORD, "const"),
        (HighlightKind.IDENTIFIER, "user"),
        (HighlightKind.OPERATOR, "="),
        (HighlightKind.FUNCTION, "getUser"),
        (HighlightKind.PUNCTUATION, "("),
        (HighlightKind.NUMBER, "42"),
        (HighlightKind.PUNCTUATION, ")"),
        (HighlightKind.PUNCTUATION, ";"),
    ]
    assert state == LineState.initial()


@pytest.mark.parametrize(
    "line, expected",
    [
        pytest.param("obj.name", (HighlightKind.PROPERTY, "name"), id="property_after_dot"),
        pytest.param("new Widget", (HighlightKind.CLASS, "Widget"), id="capitalised_class"),
        pytest.param("x = 'a b'", (HighlightKind.STRING, "'a b'"), id="string"),
        pytest.param("x = `t ${y}`", (HighlightKind.STRING, "`t ${y}`"), id="template"),
        pytest.param("x // note", (HighlightKind.COMMENT, "// note"), id="line_comment"),
    ],
)
def test_word_classification(line, expected):
    tokens, _ = LineHighlighter().tokenize_line(line)
    assert expected in kinds_and_values(tokens)


def test_tokens_reassemble_the_line():
    line = "  if (a.b >= 1.5e3) { return /* c */ `x` }"
    tokens, _ = LineHighlighter().tokenize_line(line)
    assert "".join(token.value for token in tokens) == line


def test_block_comment_state_carries_across_lines():
    # --- ARRANGE ---
    highlighter = LineHighlighter()

    # --- ACT ---
    first, state = highlighter.tokenize_line("a /* open")
    middle, state_after_middle = highlighter.tokenize_line("still comment", state)
    last, final_state = highlighter.tokenize_line("end */ b", state_after_middle)

    # --- ASSERT ---
    assert state.in_block_comment
    assert kinds_and_values(middle) == [(HighlightKind.COMMENT, "still comment")]
    assert state_after_middle.in_block_comment
    assert kinds_and_values(last) == [(HighlightKind.COMMENT, "end */"), (HighlightKind.IDENTIFIER, "b")]
    assert not final_state.in_block_comment


def test_tokenize_whole_document():
    lines = LineHighlighter().tokenize("a\n/*\n*/ b")
    assert len(lines) == 3
    assert lines[1][-1].type == HighlightKind.COMMENT


def test_other_languages_are_plain_text():
    tokens, _ = LineHighlighter("css").tokenize_line("a { color: red }")
    assert kinds_and_values(tokens) == [(HighlightKind.PLAIN, "a { color: red }")]
