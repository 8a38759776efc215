from textwrap import dedent

import pytest

from codesense.completion.javascript import JavaScriptCompletionProvider, identifier_sort_order
from codesense.completion.service import CompletionService, _closers_for
from codesense.config.config import DEFAULT_SORT_ORDER, IDENTIFIER_SORT_ORDERS, MAX_RESULTS_NO_PREFIX
from codesense.exceptions import CodesenseError, ErrorCode
from codesense.inference.engine import TypeInferenceEngine
from codesense.symbols.kinds import SymbolKind
from codesense.symbols.scope_builder import build_scopes
from codesense.symbols.symbol import Symbol, create_variable


def make_service(text, language="javascript"):
    service = CompletionService(language)
    service.update_document(text)
    return service


def labels(items):
    return [item.label for item in items]


# --- Service setup ---


def test_unsupported_language_is_rejected():
    with pytest.raises(CodesenseError) as exc_info:
        CompletionService("python")
    assert exc_info.value.code == ErrorCode.UNSUPPORTED_LANGUAGE
    assert "javascript, html, css" in str(exc_info.value)


@pytest.mark.parametrize("offset", [-1, 4], ids=["negative", "past_end"])
def test_offset_outside_document_is_rejected(offset):
    service = make_service("abc")
    with pytest.raises(CodesenseError) as exc_info:
        service.get_completions(offset)
    assert exc_info.value.code == ErrorCode.INVALID_POSITION


def test_empty_service_completes_builtins():
    service = CompletionService()
    assert service.get_completions(0) == []
    assert service.scope_manager.resolve("document") is not None


# --- JavaScript ---


def test_member_completion_on_valid_document():
    # --- ARRANGE ---
    text = "const nums = [1, 2];\nnums.fi"
    service = make_service(text)

    # --- ACT ---
    items = service.get_completions(len(text))

    # --- ASSERT ---
    assert service.parse_error is None
    assert labels(items) == ["fill", "filter", "find", "findIndex", "findLast", "findLastIndex"]


def test_member_completion_recovers_from_parse_error():
    # --- ARRANGE ---
    text = "const user = {name: 'Ann', age: 3};\nuser."
    service = make_service(text)

    # --- ACT ---
    items = service.get_completions(len(text))

    # --- ASSERT ---
    assert service.parse_error is not None
    assert service.parse_error.code == ErrorCode.UNEXPECTED_END_OF_INPUT
    assert [(item.label, item.type_info) for item in items] == [("name", "String"), ("age", "Number")]


def test_recovery_closes_open_blocks():
    text = dedent(
        """
        function f() {
          const s = 'x';
          s.
        """
    )
    service = make_service(text)
    offset = text.index("s.\n") + 2

    items = service.get_completions(offset)

    assert "trim" in labels(items)
    assert not any(item.is_unknown for item in items)


LONG_CONCATENATION = "const s = " + " + ".join(["'a'"] * 600) + ";\n"
LONG_MEMBER_CHAIN = "const s = a" + ".b" * 600 + " + '';\n"


@pytest.mark.parametrize(
    "text",
    [
        pytest.param(LONG_CONCATENATION + "s.tri", id="long_concatenation"),
        pytest.param(LONG_MEMBER_CHAIN + "s.tri", id="long_member_chain"),
        pytest.param(LONG_CONCATENATION + "f(s.tri", id="long_concatenation_while_editing"),
    ],
)
def test_long_chains_keep_their_type(text):
    service = make_service(text)
    items = service.get_completions(len(text))
    assert labels(items) == ["trim", "trimEnd", "trimStart"]
    assert not any(item.is_unknown for item in items)


def test_nesting_deeper_than_the_stack_falls_back_to_builtins():
    # --- ARRANGE ---
    text = "const deep = " + "[" * 5000 + "]" * 5000 + ";\ndocument.bo"

    # --- ACT ---
    service = make_service(text)
    items = service.get_completions(len(text))

    # --- ASSERT ---
    assert service.parse_error is None
    assert "body" in labels(items)


def test_closers_for_open_groups():
    assert _closers_for("function f() {\n  g(a, [1,") == "])}"
    assert _closers_for("a(b)[c]{}") == ""


def test_unknown_chain_falls_back_to_guesses_then_union():
    text = "const saveButton = find();\nsaveButton.cl"
    guessed = make_service(text).get_completions(len(text))
    assert "classList" in labels(guessed)
    assert all(item.is_unknown for item in guessed)

    text = "mystery.tri"
    union = make_service(text).get_completions(len(text))
    assert labels(union) == ["trim", "trimEnd", "trimStart"]
    assert all(item.is_unknown for item in union)


def test_this_completion_lists_instance_members():
    text = dedent(
        """
        class Counter {
          constructor() { this.count = 0; }
          inc() {
            this.co
          }
        }
        """
    )
    offset = text.index("this.co") + len("this.co")
    items = make_service(text).get_completions(offset)
    assert labels(items) == ["count"]
    assert items[0].type_info == "number"


def test_identifier_completion():
    # --- ARRANGE ---
    text = "const userName = 'a';\nfunction useIt() {}\nus"
    service = make_service(text)

    # --- ACT ---
    items = service.get_completions(len(text))

    # --- ASSERT ---
    assert labels(items) == ["userName", "useIt"]
    assert items[0].kind == "constant"
    assert items[0].type_info == "string"
    assert items[1].kind == "function"


def test_keywords_follow_bindings():
    text = "const retries = 3;\nret"
    items = make_service(text).get_completions(len(text))
    assert labels(items) == ["retries", "return"]
    assert items[1].kind == "keyword"


def test_nothing_inside_strings():
    text = "const s = 'user."
    assert make_service(text).get_completions(len(text)) == []


def test_record_accepted_promotes_label():
    text = "const nums = [1, 2];\nnums.fi"
    service = make_service(text)
    service.record_accepted("findIndex")
    assert labels(service.get_completions(len(text)))[0] == "findIndex"


def test_get_completions_at_line_and_column():
    text = "const s = 'x';\ns.tr"
    service = make_service(text)
    assert labels(service.get_completions_at(1, 4)) == labels(service.get_completions(len(text)))


# --- Hover ---


HOVER_TEXT = "const user = {name: 'Ann'};\nconst n = user.name.length;"


@pytest.mark.parametrize(
    "needle, expected_chain, expected_type",
    [
        pytest.param("user.name.length", "user", "object", id="head"),
        pytest.param("name.length", "user.name", "string", id="middle"),
        pytest.param("length;", "user.name.length", "number", id="tail"),
        pytest.param("ngth;", "user.name.length", "number", id="inside_word"),
    ],
)
def test_hover(needle, expected_chain, expected_type):
    service = make_service(HOVER_TEXT)
    offset = HOVER_TEXT.index(needle)
    assert service.get_hover_chain(offset) == expected_chain
    assert service.get_type_at(offset) == expected_type


def test_hover_without_type():
    service = make_service(HOVER_TEXT + "\nmystery.x;")
    assert service.get_type_at(len(HOVER_TEXT) + 2) is None
    assert service.get_type_at(HOVER_TEXT.index("Ann")) is None
    assert make_service("a { color: red }", "css").get_type_at(2) is None


# --- HTML and CSS ---


def test_html_tag_completion():
    items = make_service("<di", "html").get_completions(3)
    assert labels(items) == ["dialog", "div"]


def test_css_property_completion():
    text = "a { col"
    items = make_service(text, "css").get_completions(len(text))
    assert labels(items)[0] == "color"
    assert all("col" in item.label for item in items)


def test_css_without_prefix_keeps_table_order():
    text = "a { "
    items = make_service(text, "css").get_completions(len(text))
    assert labels(items)[0] == "display"
    assert len(items) == MAX_RESULTS_NO_PREFIX


def test_explicit_prefix_overrides_text():
    service = make_service("<", "html")
    assert labels(service.get_completions(1, prefix="sp")) == ["span"]


# --- Provider ---


def test_provider_without_scopes_still_offers_keywords():
    provider = JavaScriptCompletionProvider(TypeInferenceEngine())
    items = provider.get_completions("whi", 3)
    assert labels(items) == ["while"]


def test_member_symbols_are_not_identifiers():
    manager = build_scopes("")
    manager.define(Symbol("hidden", SymbolKind.METHOD))
    provider = JavaScriptCompletionProvider(TypeInferenceEngine(manager))
    assert "hidden" not in labels(provider.get_identifier_completions("hid", 0))


@pytest.mark.parametrize(
    "symbol, expected",
    [
        pytest.param(create_variable("count"), IDENTIFIER_SORT_ORDERS["variable"], id="variable"),
        pytest.param(create_variable("_cache"), IDENTIFIER_SORT_ORDERS["private_variable"], id="private_variable"),
        pytest.param(Symbol("f", SymbolKind.FUNCTION), IDENTIFIER_SORT_ORDERS["function"], id="function"),
        pytest.param(Symbol("window", SymbolKind.BUILTIN), DEFAULT_SORT_ORDER, id="builtin_default"),
    ],
)
def test_identifier_sort_order(symbol, expected):
    assert identifier_sort_order(symbol) == expected
