"""
Best-guess member completion for chains the inference engine cannot type.

Nothing here is sound. A variable named `submitButton` is taken for a DOM element,
`x = document.querySelector(...)` anywhere in the text marks `x` as an
element, and well-known property names such as `classList` or `style` map
straight onto member lists whatever their receiver is. Completion consults this
module only after the engine answered UNKNOWN, and an answer of None from here
means "no guess either".
"""

import re
from typing import List, Optional, Sequence

from ..completion.item import CompletionItem
from ..config.js_completions import (
    JS_HTML_ELEMENT_MEMBERS,
    JS_METHOD_RETURN_TYPES,
    JS_NESTED_MEMBERS,
    JS_OBJECT_MEMBERS,
    JS_TYPE_MEMBERS,
)
from .engine import CHAIN_SEGMENT, ELEMENT_ACCESS, split_chain

# Methods whose result is conventionally a single element.
ELEMENT_RETURNING_METHODS = frozenset(name for name, returns in JS_METHOD_RETURN_TYPES.items() if returns == "HTMLElement")

# `{name}` is replaced by the escaped variable name.
ELEMENT_ASSIGNMENT_TEMPLATES = (
    r"(?:const|let|var)\s+{name}\s*=\s*(?:document\.)?getElementById\s*\(",
    r"(?:const|let|var)\s+{name}\s*=\s*(?:document\.)?querySelector\s*\(",
    r"(?:const|let|var)\s+{name}\s*=\s*(?:document\.)?createElement\s*\(",
    r"(?:const|let|var)\s+{name}\s*=\s*\w+\.closest\s*\(",
    r"(?:const|let|var)\s+{name}\s*=\s*\w+\.cloneNode\s*\(",
    r"(?:const|let|var)\s+{name}\s*=\s*\w+\.target\b",
    r"(?:const|let|var)\s+{name}\s*=\s*\w+\.currentTarget\b",
    r"\b{name}\s*=\s*(?:document\.)?getElementById\s*\(",
    r"\b{name}\s*=\s*(?:document\.)?querySelector\s*\(",
)

ELEMENT_NAME_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"^el$", r"^elem$", r"^element$", r"el$", r"elem$", r"element$",
        r"^btn", r"button$", r"^input", r"input$", r"^div", r"div$", r"^span", r"span$",
        r"^container", r"container$", r"^wrapper", r"wrapper$", r"^modal", r"modal$",
        r"^dialog", r"dialog$", r"^form", r"form$", r"^header", r"header$",
        r"^footer", r"footer$", r"^nav", r"nav$", r"^section", r"section$",
        r"^canvas", r"canvas$", r"^img", r"^image", r"image$", r"^link", r"link$",
        r"^anchor", r"^table", r"table$", r"^row", r"row$", r"^cell", r"cell$",
        r"^list", r"list$", r"^item", r"item$", r"^node", r"node$", r"^dom",
        r"^target$", r"^parent$", r"^child$", r"^sibling$",
    )
]


def looks_like_dom_element(name: str) -> bool:
    return any(pattern.search(name) for pattern in ELEMENT_NAME_PATTERNS)


def is_element_variable(name: str, text: str) -> bool:
    """True when `text` assigns `name` from a call that conventionally returns an element."""
    if not text:
        return False
    escaped = re.escape(name)
    return any(re.search(template.replace("{name}", escaped), text, re.MULTILINE) for template in ELEMENT_ASSIGNMENT_TEMPLATES)


def infer_type_from_name(name: str, text: str = "") -> Optional[str]:
    if name == "window":
        return "Window"
    if name == "document":
        return "Document"
    if name in JS_OBJECT_MEMBERS:
        return name
    if is_element_variable(name, text) or looks_like_dom_element(name):
        return "HTMLElement"
    return None


def chain_looks_like_dom_element(parts: Sequence[str], text: str = "") -> bool:
    head = parts[0]
    if head == "document" or looks_like_dom_element(head) or is_element_variable(head, text):
        return True
    return any(part in ELEMENT_RETURNING_METHODS for part in parts)


def _chain_names(chain: str) -> List[str]:
    """Member names of a chain with calls and element accesses dropped."""
    names = []
    for segment in split_chain(chain):
        name = CHAIN_SEGMENT.match(segment).group(1)
        if name != ELEMENT_ACCESS and not name.startswith("<"):
            names.append(name)
    return names


def _guess_object_members(name: str, text: str) -> Optional[List[str]]:
    if name in JS_OBJECT_MEMBERS:
        return JS_OBJECT_MEMBERS[name]
    if is_element_variable(name, text) or looks_like_dom_element(name):
        return JS_HTML_ELEMENT_MEMBERS
    return None


def guess_chain_members(chain: str, text: str = "") -> Optional[List[str]]:
    """
    Member names guessed for `chain.`, or None. The type is tracked through the
    chain by name alone: nested-member tables win, then methods with a known
    return type, then the members of the type tracked so far.
    """
    parts = _chain_names(chain)
    if not parts:
        return None
    if len(parts) == 1:
        return _guess_object_members(parts[0], text)

    current_type = infer_type_from_name(parts[0], text)
    members = None
    for prop in parts[1:]:
        if prop in JS_NESTED_MEMBERS:
            members = JS_NESTED_MEMBERS[prop]
            current_type = None
        elif prop in JS_METHOD_RETURN_TYPES:
            current_type = JS_METHOD_RETURN_TYPES[prop]
            members = JS_TYPE_MEMBERS.get(current_type)
        elif current_type in JS_TYPE_MEMBERS:
            members = JS_TYPE_MEMBERS[current_type]
        else:
            members = None
            current_type = None

    if members:
        return members
    if chain_looks_like_dom_element(parts, text):
        return JS_HTML_ELEMENT_MEMBERS
    return None


def guess_member_items(chain: str, text: str = "") -> Optional[List[CompletionItem]]:
    labels = guess_chain_members(chain, text)
    if labels is None:
        return None
    return [
        CompletionItem(label=label, insert_text=label, kind="property", type_info="any", is_unknown=True, sort_order=1)
        for label in dict.fromkeys(labels)
    ]
