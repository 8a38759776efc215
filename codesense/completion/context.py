"""
Works out what kind of JavaScript completion the text before the cursor asks
for: members after `this.`, members after some other chain and a dot, or plain
identifiers.
"""

import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

THIS_ACCESS = re.compile(r"\bthis\.([\w$]*)$")
MEMBER_ACCESS = re.compile(r"\.\s*([\w$]*)$")
IDENTIFIER = re.compile(r"([\w$]+)$")
WORD_CHAR = re.compile(r"[\w$#]")

CLOSERS = {")": "(", "]": "["}
QUOTES = "'\"`"


class CompletionContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["this_access", "member_access", "identifier"]
    prefix: str = ""
    chain: Optional[str] = None


def is_in_string_or_comment(text: str) -> bool:
    """True when the end of `text` (one line) sits inside a string literal or a line comment."""
    in_string = None
    previous = ""
    for char in text:
        if in_string is None:
            if char == "/" and previous == "/":
                return True
            if char in QUOTES:
                in_string = char
        elif char == in_string and previous != "\\":
            in_string = None
        previous = char
    return in_string is not None


def _skip_back_group(text: str, end: int) -> int:
    """`text[end]` closes a bracket or string; returns the index of its opener, or -1."""
    char = text[end]
    if char in QUOTES:
        index = end - 1
        while index >= 0:
            if text[index] == char and (index == 0 or text[index - 1] != "\\"):
                return index
            index -= 1
        return -1

    stack = [CLOSERS[char]]
    index = end - 1
    while index >= 0 and stack:
        current = text[index]
        if current in QUOTES:
            index = _skip_back_group(text, index) - 1
            if index < -1:
                return -1
            continue
        if current in CLOSERS:
            stack.append(CLOSERS[current])
        elif current == stack[-1]:
            stack.pop()
            if not stack:
                return index
        elif current in "([":
            return -1
        index -= 1
    return -1


def extract_chain(text: str) -> Optional[str]:
    """
    The member-access chain ending at the end of `text`, scanning backwards over
    names, dots, balanced call/index groups and string literals:
    `x = list.filter(a => a.ok)[0]` gives `list.filter(a => a.ok)[0]`.
    """
    index = len(text) - 1
    while index >= 0 and text[index].isspace():
        index -= 1
    end = index + 1
    start = end

    while index >= 0:
        char = text[index]
        if WORD_CHAR.match(char):
            index -= 1
        elif char in CLOSERS or (char in QUOTES and index == start - 1):
            opener = _skip_back_group(text, index)
            if opener < 0:
                return None
            index = opener - 1
            if char in QUOTES:
                start = opener
                break
        elif char == "." or (char == "?" and text[index + 1 : index + 2] == "."):
            index -= 1
        else:
            break
        start = index + 1

    chain = text[start:end]
    if not chain or chain.startswith(".") or chain.endswith("."):
        return None
    return chain


def detect_js_context(before_cursor: str) -> Optional[CompletionContext]:
    """Returns None when nothing should be offered, e.g. inside a string or comment."""
    if is_in_string_or_comment(before_cursor):
        return None

    match = THIS_ACCESS.search(before_cursor)
    if match:
        return CompletionContext(type="this_access", prefix=match.group(1))

    match = MEMBER_ACCESS.search(before_cursor)
    if match:
        before_dot = before_cursor[: match.start()]
        if before_dot.endswith("?"):
            before_dot = before_dot[:-1]
        chain = extract_chain(before_dot)
        if chain:
            return CompletionContext(type="member_access", prefix=match.group(1), chain=chain)

    match = IDENTIFIER.search(before_cursor)
    if match:
        return CompletionContext(type="identifier", prefix=match.group(1))
    return None
