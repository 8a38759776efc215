"""
CSS completion: at-rules, property names, property values and the pseudo
classes and elements of selectors.
"""

import re
from typing import List

from ..config.css_completions import (
    CSS_AT_RULES,
    CSS_COLORS,
    CSS_COMMON_VALUES,
    CSS_FUNCTIONS,
    CSS_PROPERTIES,
    CSS_PROPERTY_VALUES,
    CSS_PSEUDO_CLASSES,
    CSS_PSEUDO_ELEMENTS,
)
from .item import CompletionItem

AT_RULE = re.compile(r"@[\w-]*$")
PROPERTY_VALUE = re.compile(r"([\w-]+)\s*:\s*([^;]*)$")
PSEUDO = re.compile(r"(::?)\s*([\w-]*)$")
PROPERTY_NAME_BEFORE_COLON = re.compile(r"([\w-]+)\s*:")
SELECTOR_TAIL = re.compile(r"^[;\s\w.#\[\]:,>+~-]*$")

SIZE_PROPERTIES = frozenset(["width", "height", "min-width", "min-height", "max-width", "max-height"])

TRANSFORM_FUNCTIONS = ("translate", "rotate", "scale", "skew", "matrix")
COLOR_FUNCTIONS = ("rgb", "hsl", "linear-gradient", "radial-gradient", "conic-gradient")
IMAGE_FUNCTIONS = ("url", "linear-gradient", "radial-gradient", "conic-gradient")
SIZE_FUNCTIONS = ("calc(", "min(", "max(", "clamp(", "var(")
DEFAULT_FUNCTIONS = ("var(", "calc(")


def _is_color_property(name: str) -> bool:
    return "color" in name or name == "background"


def _property_functions(name: str) -> List[str]:
    """The value functions that make sense for property `name`."""
    if name == "transform":
        return [f for f in CSS_FUNCTIONS if f.startswith(TRANSFORM_FUNCTIONS)]
    if _is_color_property(name):
        return [f for f in CSS_FUNCTIONS if f.startswith(COLOR_FUNCTIONS) or f == "var("]
    if name == "background-image":
        return [f for f in CSS_FUNCTIONS if f.startswith(IMAGE_FUNCTIONS) or f == "var("]
    if name in SIZE_PROPERTIES or any(part in name for part in ("margin", "padding", "gap")):
        return [f for f in CSS_FUNCTIONS if f in SIZE_FUNCTIONS]
    return [f for f in CSS_FUNCTIONS if f in DEFAULT_FUNCTIONS]


def get_property_value_completions(name: str) -> List[CompletionItem]:
    if name in CSS_PROPERTY_VALUES:
        values = CSS_PROPERTY_VALUES[name] + CSS_COMMON_VALUES
    elif _is_color_property(name):
        values = CSS_COLORS + CSS_COMMON_VALUES
    else:
        values = list(CSS_COMMON_VALUES)

    items = [CompletionItem(label=value, insert_text=value, kind="value") for value in dict.fromkeys(values)]
    items.extend(CompletionItem(label=function, insert_text=function, kind="function") for function in _property_functions(name))
    return items


def get_property_completions() -> List[CompletionItem]:
    # The cursor lands between `: ` and `;`.
    return [
        CompletionItem(label=name, insert_text=f"{name}: ;", kind="property", cursor_offset=len(name) + 2)
        for name in CSS_PROPERTIES
    ]


def _in_selector_context(before_cursor: str) -> bool:
    last_open = before_cursor.rfind("{")
    last_close = before_cursor.rfind("}")
    last_semicolon = before_cursor.rfind(";")
    if last_open == -1 or last_close > last_open:
        return True
    return last_semicolon > last_open and bool(SELECTOR_TAIL.match(before_cursor[last_semicolon:]))


def get_css_completions(before_cursor: str, prefix: str = "") -> List[CompletionItem]:
    if AT_RULE.search(before_cursor):
        return [CompletionItem(label=rule[1:], insert_text=rule[1:], kind="at-rule") for rule in CSS_AT_RULES]

    # Property values win over pseudo-classes: `color: r` is not a selector.
    match = PROPERTY_VALUE.search(before_cursor)
    if match and match.group(1) in CSS_PROPERTIES:
        return get_property_value_completions(match.group(1))

    match = PSEUDO.search(before_cursor)
    if match:
        property_match = PROPERTY_NAME_BEFORE_COLON.search(before_cursor)
        declared = property_match.group(1) if property_match else ""
        if _in_selector_context(before_cursor) or declared not in CSS_PROPERTIES:
            if match.group(1) == "::":
                return [CompletionItem(label=p[2:], insert_text=p[2:], kind="pseudo-element") for p in CSS_PSEUDO_ELEMENTS]
            return [CompletionItem(label=p[1:], insert_text=p[1:], kind="pseudo-class") for p in CSS_PSEUDO_CLASSES]

    return get_property_completions()
