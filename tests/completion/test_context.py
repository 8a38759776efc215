import pytest

from codesense.completion.context import CompletionContext, detect_js_context, extract_chain, is_in_string_or_comment


@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("x = 'abc", True, id="open_single_quote"),
        pytest.param("x = `tpl", True, id="open_template"),
        pytest.param("x = 'abc' + y", False, id="closed_string"),
        pytest.param("x = 'it\\'s", True, id="escaped_quote"),
        pytest.param("a // note", True, id="line_comment"),
        pytest.param("u = 'http://x' + y", False, id="slashes_inside_string"),
        pytest.param("a / b", False, id="division"),
        pytest.param("", False, id="empty"),
    ],
)
def test_is_in_string_or_comment(text, expected):
    assert is_in_string_or_comment(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("foo.bar", "foo.bar", id="dotted"),
        pytest.param("  user", "user", id="leading_space"),
        pytest.param("a + b.c", "b.c", id="stops_at_operator"),
        pytest.param("x = list.filter(a => a.ok)[0]", "list.filter(a => a.ok)[0]", id="balanced_groups"),
        pytest.param("getUser(')').name", "getUser(')').name", id="bracket_inside_string"),
        pytest.param("'hello'.toUpperCase()", "'hello'.toUpperCase()", id="string_literal_head"),
        pytest.param("a?.b", "a?.b", id="optional_chaining"),
        pytest.param("this.#count", "this.#count", id="private_name"),
        pytest.param("foo.", None, id="trailing_dot"),
        pytest.param("foo)", None, id="unbalanced_closer"),
        pytest.param("", None, id="empty"),
    ],
)
def test_extract_chain(text, expected):
    assert extract_chain(text) == expected


@pytest.mark.parametrize(
    "before_cursor, expected",
    [
        pytest.param("this.na", CompletionContext(type="this_access", prefix="na"), id="this_with_prefix"),
        pytest.param("if (this.", CompletionContext(type="this_access"), id="this_without_prefix"),
        pytest.param(
            "user.profile.na",
            CompletionContext(type="member_access", prefix="na", chain="user.profile"),
            id="member_with_prefix",
        ),
        pytest.param(
            "getUser(1).",
            CompletionContext(type="member_access", chain="getUser(1)"),
            id="member_after_call",
        ),
        pytest.param("a?.b", CompletionContext(type="member_access", prefix="b", chain="a"), id="optional_member"),
        pytest.param("foo. ", CompletionContext(type="member_access", chain="foo"), id="space_after_dot"),
        pytest.param("const us", CompletionContext(type="identifier", prefix="us"), id="identifier"),
        pytest.param("let $el", CompletionContext(type="identifier", prefix="$el"), id="dollar_identifier"),
    ],
)
def test_detect_js_context(before_cursor, expected):
    assert detect_js_context(before_cursor) == expected


@pytest.mark.parametrize(
    "before_cursor",
    [
        pytest.param("x = 'us", id="inside_string"),
        pytest.param("// user.", id="inside_comment"),
        pytest.param("x = ", id="after_operator"),
        pytest.param("", id="empty_line"),
    ],
)
def test_no_context(before_cursor):
    assert detect_js_context(before_cursor) is None
