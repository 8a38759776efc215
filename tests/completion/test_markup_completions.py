import pytest

from codesense.completion.css import get_css_completions, get_property_value_completions
from codesense.completion.html import HtmlTagContext, detect_tag_context, get_html_completions
from codesense.config.css_completions import CSS_AT_RULES, CSS_PROPERTIES, CSS_PSEUDO_CLASSES, CSS_PSEUDO_ELEMENTS
from codesense.config.html_completions import HTML_TAGS


def labels(items):
    return [item.label for item in items]


# --- HTML ---


@pytest.mark.parametrize(
    "before_cursor, expected",
    [
        pytest.param("<di", HtmlTagContext(in_tag=True, typing_tag_name=True, tag_name="di"), id="typing_tag"),
        pytest.param("</sp", HtmlTagContext(in_tag=True, typing_tag_name=True, tag_name="sp"), id="closing_tag"),
        pytest.param("<DIV cl", HtmlTagContext(in_tag=True, after_tag_name=True, tag_name="div"), id="after_tag_name"),
        pytest.param(
            '<input type="te',
            HtmlTagContext(in_tag=True, in_attribute_value=True, tag_name="input", attribute_name="type"),
            id="attribute_value",
        ),
        pytest.param("<p>text", HtmlTagContext(), id="after_closed_tag"),
        pytest.param("plain", HtmlTagContext(), id="outside_tags"),
    ],
)
def test_detect_tag_context(before_cursor, expected):
    assert detect_tag_context(before_cursor) == expected


def test_tag_completions_are_snippets():
    items = {item.label: item for item in get_html_completions("<")}
    assert set(items) == set(HTML_TAGS)
    assert items["div"].insert_text == "<div></div>"
    assert items["br"].insert_text == "<br>"
    assert items["img"].insert_text == "<img>"
    assert all(item.kind == "tag" and item.is_snippet for item in items.values())


def test_attribute_completions_merge_global_event_and_tag_specific():
    names = labels(get_html_completions("<a hr"))
    assert names[0] == "accesskey"
    for name in ("class", "onclick", "href", "target"):
        assert name in names
    assert "src" not in names
    assert len(names) == len(set(names))


@pytest.mark.parametrize(
    "before_cursor, expected",
    [
        pytest.param('<a target="', ["_self", "_blank", "_parent", "_top"], id="plain_values"),
        pytest.param('<button type="', ["submit", "reset", "button"], id="values_per_tag"),
        pytest.param("<script type='", ["text/javascript", "module"], id="single_quotes"),
        pytest.param('<div type="', [], id="tag_without_values"),
        pytest.param('<div data-x="', [], id="unknown_attribute"),
    ],
)
def test_attribute_value_completions(before_cursor, expected):
    assert labels(get_html_completions(before_cursor)) == expected


def test_bare_text_offers_tags_only_for_tag_prefixes():
    assert "section" in labels(get_html_completions("sec", "sec"))
    assert get_html_completions("zzz", "zzz") == []
    assert get_html_completions("", "") == []


# --- CSS ---


def test_at_rules():
    items = get_css_completions("@me")
    assert labels(items) == [rule[1:] for rule in CSS_AT_RULES]
    assert items[0].kind == "at-rule"


def test_property_names_leave_cursor_before_semicolon():
    items = get_css_completions(".a { dis")
    assert labels(items) == CSS_PROPERTIES
    display = items[0]
    assert display.insert_text == "display: ;"
    assert display.cursor_offset == len("display: ")


def test_property_values():
    # --- ACT ---
    items = get_css_completions(".a { display: fl")
    values = [item.label for item in items if item.kind == "value"]
    functions = [item.label for item in items if item.kind == "function"]

    # --- ASSERT ---
    assert values[:3] == ["none", "block", "inline"]
    assert "inherit" in values
    assert functions == ["var(", "calc("]


@pytest.mark.parametrize(
    "name, expected_value, expected_function",
    [
        pytest.param("color", "red", "rgb(", id="color"),
        pytest.param("background-color", "transparent", "hsl(", id="background_color"),
        pytest.param("transform", "none", "rotate(", id="transform"),
        pytest.param("max-width", "auto", "clamp(", id="size"),
        pytest.param("margin-top", "0", "min(", id="spacing"),
    ],
)
def test_property_specific_functions(name, expected_value, expected_function):
    items = get_property_value_completions(name)
    assert expected_value in labels(items)
    assert expected_function in [item.label for item in items if item.kind == "function"]


def test_color_values_are_not_offered_for_other_properties():
    names = labels(get_property_value_completions("width"))
    assert "red" not in names
    assert "url(" not in names


def test_pseudo_classes_and_elements():
    classes = get_css_completions("a:ho")
    elements = get_css_completions("p::bef")
    assert labels(classes) == [p[1:] for p in CSS_PSEUDO_CLASSES]
    assert classes[0].kind == "pseudo-class"
    assert labels(elements) == [p[2:] for p in CSS_PSEUDO_ELEMENTS]
    assert elements[0].kind == "pseudo-element"


def test_value_context_beats_pseudo_selector():
    names = labels(get_css_completions(".a { position: ab"))
    assert "absolute" in names
    assert "hover" not in names


def test_new_selector_after_closed_rule_offers_pseudo_classes():
    names = labels(get_css_completions(".a { color: red; } li:fi"))
    assert "first-child" in names
