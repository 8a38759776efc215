"""
Per-line tokenizer for syntax highlighting.

Each line is tokenized on its own, which lets an editor re-highlight only the
lines that changed. The only state carried from one line to the next is
whether the line ends inside an unterminated block comment.
"""

import re
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .tokenizer import is_identifier_part, is_identifier_start


class HighlightKind(Enum):
    KEYWORD = "keyword"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    IDENTIFIER = "identifier"
    WHITESPACE = "whitespace"
    FUNCTION = "function"
    CLASS = "class"
    PROPERTY = "property"
    PLAIN = "plain"


HIGHLIGHT_KEYWORDS = frozenset(
    {
        "break", "case", "catch", "class", "const", "continue", "debugger", "default", "delete", "do",
        "else", "export", "extends", "finally", "for", "function", "if", "import", "in", "instanceof",
        "let", "new", "return", "static", "super", "switch", "this", "throw", "try", "typeof", "var",
        "void", "while", "with", "yield", "async", "await", "true", "false", "null", "undefined", "NaN",
        "Infinity",
    }
)

OPERATOR_CHARS = frozenset("+-*/%=!<>&|^~?:")
PUNCTUATION_CHARS = frozenset("(){}[],.;")
NUMBER_BODY = re.compile(r"[\d.xXa-fA-FeE_n]*")


class HighlightToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: HighlightKind
    value: str


class LineState(BaseModel):
    """Tokenizer state at a line boundary."""

    model_config = ConfigDict(frozen=True)

    name: str = "root"
    stack: Tuple[str, ...] = ()

    @classmethod
    def initial(cls) -> "LineState":
        return cls()

    @property
    def in_block_comment(self) -> bool:
        return self.name == "comment"


class LineHighlighter:
    def __init__(self, language: str = "javascript"):
        self.language = language

    def tokenize(self, text: str) -> List[List[HighlightToken]]:
        """Tokenizes a whole document, threading line state through every line."""
        state = LineState.initial()
        lines = []
        for line in text.split("\n"):
            tokens, state = self.tokenize_line(line, state)
            lines.append(tokens)
        return lines

    def tokenize_line(self, line: str, state: Optional[LineState] = None) -> Tuple[List[HighlightToken], LineState]:
        state = state or LineState.initial()
        if self.language != "javascript":
            return ([HighlightToken(type=HighlightKind.PLAIN, value=line)] if line else []), state
        return self._tokenize_javascript(line, state)

    def _tokenize_javascript(self, line: str, state: LineState) -> Tuple[List[HighlightToken], LineState]:
        tokens: List[HighlightToken] = []
        i = 0

        if state.in_block_comment:
            close = line.find("*/")
            if close == -1:
                if line:
                    tokens.append(HighlightToken(type=HighlightKind.COMMENT, value=line))
                return tokens, state
            tokens.append(HighlightToken(type=HighlightKind.COMMENT, value=line[: close + 2]))
            i = close + 2
            state = LineState.initial()

        while i < len(line):
            ch = line[i]
            nxt = line[i + 1] if i + 1 < len(line) else ""

            if ch.isspace():
                start = i
                while i < len(line) and line[i].isspace():
                    i += 1
                tokens.append(HighlightToken(type=HighlightKind.WHITESPACE, value=line[start:i]))
                continue

            if ch == "/" and nxt == "/":
                tokens.append(HighlightToken(type=HighlightKind.COMMENT, value=line[i:]))
                break

            if ch == "/" and nxt == "*":
                close = line.find("*/", i + 2)
                if close == -1:
                    tokens.append(HighlightToken(type=HighlightKind.COMMENT, value=line[i:]))
                    return tokens, LineState(name="comment")
                tokens.append(HighlightToken(type=HighlightKind.COMMENT, value=line[i : close + 2]))
                i = close + 2
                continue

            if ch in ("'", '"', "`"):
                end = self._string_end(line, i, ch)
                tokens.append(HighlightToken(type=HighlightKind.STRING, value=line[i:end]))
                i = end
                continue

            if ch.isdigit() or (ch == "." and nxt.isdigit()):
                end = NUMBER_BODY.match(line, i + 1).end()
                tokens.append(HighlightToken(type=HighlightKind.NUMBER, value=line[i:end]))
                i = end
                continue

            if ch in OPERATOR_CHARS:
                start = i
                while i < len(line) and line[i] in OPERATOR_CHARS:
                    i += 1
                tokens.append(HighlightToken(type=HighlightKind.OPERATOR, value=line[start:i]))
                continue

            if ch in PUNCTUATION_CHARS:
                tokens.append(HighlightToken(type=HighlightKind.PUNCTUATION, value=ch))
                i += 1
                continue

            if is_identifier_start(ch):
                start = i
                while i < len(line) and is_identifier_part(line[i]):
                    i += 1
                word = line[start:i]
                tokens.append(HighlightToken(type=self._classify_word(word, line, start, i), value=word))
                continue

            tokens.append(HighlightToken(type=HighlightKind.PLAIN, value=ch))
            i += 1

        return tokens, state

    @staticmethod
    def _string_end(line: str, start: int, quote: str) -> int:
        i = start + 1
        while i < len(line):
            if line[i] == "\\":
                i += 2
                continue
            if line[i] == quote:
                return i + 1
            i += 1
        return len(line)

    @staticmethod
    def _classify_word(word: str, line: str, start: int, end: int) -> HighlightKind:
        if word in HIGHLIGHT_KEYWORDS:
            return HighlightKind.KEYWORD
        rest = line[end:].lstrip()
        if rest.startswith("("):
            return HighlightKind.FUNCTION
        if line[:start].rstrip().endswith(".") and not line[:start].rstrip().endswith(".."):
            return HighlightKind.PROPERTY
        if word[0].isupper() and any(c.islower() for c in word):
            return HighlightKind.CLASS
        return HighlightKind.IDENTIFIER
