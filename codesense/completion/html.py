import re
from dataclasses import dataclass
from typing import List

from ..config.html_completions import (
    HTML_ATTRIBUTE_VALUES,
    HTML_EVENT_ATTRIBUTES,
    HTML_GLOBAL_ATTRIBUTES,
    HTML_SELF_CLOSING_TAGS,
    HTML_TAG_ATTRIBUTES,
    HTML_TAGS,
)
from .item import CompletionItem

ATTRIBUTE_VALUE = re.compile(r"""([\w-]+)\s*=\s*["']([^"']*)$""")
TAG_NAME = re.compile(r"^/?\s*(\w+)")
TYPING_TAG_NAME = re.compile(r"^/?\s*(\w*)$")
AFTER_TAG_NAME = re.compile(r"^/?\s*(\w+)\s+")


@dataclass
class HtmlTagContext:
    in_tag: bool = False
    typing_tag_name: bool = False
    after_tag_name: bool = False
    in_attribute_value: bool = False
    tag_name: str = ""
    attribute_name: str = ""


def detect_tag_context(before_cursor: str) -> HtmlTagContext:
    """Where the cursor sits relative to the last unclosed `<` of the line."""
    context = HtmlTagContext()
    last_open = before_cursor.rfind("<")
    if last_open <= before_cursor.rfind(">"):
        return context

    context.in_tag = True
    content = before_cursor[last_open + 1 :]

    match = ATTRIBUTE_VALUE.search(content)
    if match:
        context.in_attribute_value = True
        context.attribute_name = match.group(1).lower()
        tag = TAG_NAME.match(content)
        if tag:
            context.tag_name = tag.group(1).lower()
        return context

    match = TYPING_TAG_NAME.match(content)
    if match:
        context.typing_tag_name = True
        context.tag_name = match.group(1).lower()
        return context

    match = AFTER_TAG_NAME.match(content)
    if match:
        context.after_tag_name = True
        context.tag_name = match.group(1).lower()
    return context


def is_tag_prefix(prefix: str) -> bool:
    lowered = prefix.lower()
    return any(tag.startswith(lowered) for tag in HTML_TAGS)


def get_tag_completions() -> List[CompletionItem]:
    items = []
    for tag in HTML_TAGS:
        insert_text = f"<{tag}>" if tag in HTML_SELF_CLOSING_TAGS else f"<{tag}></{tag}>"
        items.append(CompletionItem(label=tag, insert_text=insert_text, kind="tag", is_snippet=True))
    return items


def get_attribute_completions(tag_name: str) -> List[CompletionItem]:
    names = HTML_GLOBAL_ATTRIBUTES + HTML_EVENT_ATTRIBUTES + HTML_TAG_ATTRIBUTES.get(tag_name, [])
    return [CompletionItem(label=name, insert_text=name, kind="attribute") for name in dict.fromkeys(names)]


def get_attribute_value_completions(tag_name: str, attribute_name: str) -> List[CompletionItem]:
    values = HTML_ATTRIBUTE_VALUES.get(attribute_name, [])
    # Some attributes (`type`) take different values on different tags.
    if isinstance(values, dict):
        values = values.get(tag_name, [])
    return [CompletionItem(label=value, insert_text=value, kind="value") for value in values]


def get_html_completions(before_cursor: str, prefix: str = "") -> List[CompletionItem]:
    context = detect_tag_context(before_cursor)
    if context.in_tag:
        if context.in_attribute_value:
            return get_attribute_value_completions(context.tag_name, context.attribute_name)
        if context.after_tag_name:
            return get_attribute_completions(context.tag_name)
        return get_tag_completions()

    # Bare text that could be the start of a tag name.
    if prefix and is_tag_prefix(prefix):
        return get_tag_completions()
    return []
