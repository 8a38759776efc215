"""
Lexer and token cursor used by the expression parser.

The whole input is lexed up front into a token array terminated by a single
EOF token. The parser walks that array through an integer cursor, so a
speculative parse is undone by restoring a saved position with `reset`.
Lexing never raises: characters that belong to no token class come out as
UNKNOWN tokens.
"""

from typing import Iterable, List, Optional

from ..exceptions import ErrorCode, ParseError
from .tokens import (
    KEYWORDS,
    ONE_CHAR_OPERATORS,
    THREE_CHAR_OPERATORS,
    TWO_CHAR_OPERATORS,
    WORD_TOKENS,
    Token,
    TokenKind,
)

SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", "'": "'", '"': '"'}

# After one of these a '/' starts a regular expression rather than a division.
REGEX_PRECEDING_KINDS = frozenset(
    {
        TokenKind.ASSIGN, TokenKind.PLUS_ASSIGN, TokenKind.MINUS_ASSIGN, TokenKind.LPAREN,
        TokenKind.LBRACKET, TokenKind.LBRACE, TokenKind.RBRACE, TokenKind.COMMA, TokenKind.COLON,
        TokenKind.SEMICOLON, TokenKind.QUESTION, TokenKind.NOT, TokenKind.AND, TokenKind.OR,
        TokenKind.NULLISH, TokenKind.EQ, TokenKind.NEQ, TokenKind.STRICT_EQ, TokenKind.STRICT_NEQ,
        TokenKind.LT, TokenKind.GT, TokenKind.LTE, TokenKind.GTE, TokenKind.ARROW, TokenKind.PLUS,
        TokenKind.MINUS, TokenKind.STAR, TokenKind.PERCENT, TokenKind.POWER, TokenKind.RETURN,
        TokenKind.TYPEOF, TokenKind.KEYWORD, TokenKind.IN, TokenKind.OF, TokenKind.SPREAD,
    }
)


def is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or ch in "_$"


def is_identifier_part(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.tokens: List[Token] = []

    def lex(self) -> List[Token]:
        text = self.text
        while True:
            self._skip_trivia()
            if self.pos >= len(text):
                break
            self.tokens.append(self._read_token())
        self.tokens.append(Token(type=TokenKind.EOF, value="", start=len(text), end=len(text)))
        return self.tokens

    # --- Trivia ---

    def _skip_trivia(self):
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch.isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                newline = text.find("\n", self.pos)
                self.pos = len(text) if newline == -1 else newline
            elif text.startswith("/*", self.pos):
                close = text.find("*/", self.pos + 2)
                self.pos = len(text) if close == -1 else close + 2
            else:
                break

    # --- Token dispatch ---

    def _read_token(self) -> Token:
        ch = self.text[self.pos]
        nxt = self.text[self.pos + 1] if self.pos + 1 < len(self.text) else ""

        if ch in ("'", '"'):
            return self._read_string(ch)
        if ch == "`":
            return self._read_template()
        if ch.isdigit() or (ch == "." and nxt.isdigit()):
            return self._read_number()
        if is_identifier_start(ch):
            return self._read_word()
        if ch == "/" and self._regex_allowed():
            regex = self._read_regex()
            if regex is not None:
                return regex
        return self._read_operator()

    def _make(self, kind: TokenKind, start: int, cooked: Optional[str] = None) -> Token:
        return Token(type=kind, value=self.text[start : self.pos], start=start, end=self.pos, cooked=cooked)

    # --- Literals ---

    def _read_string(self, quote: str) -> Token:
        text = self.text
        start = self.pos
        self.pos += 1
        chars = []
        while self.pos < len(text):
            ch = text[self.pos]
            if ch == quote:
                self.pos += 1
                break
            if ch == "\n":
                # Unterminated: stop at the end of the line.
                break
            if ch == "\\" and self.pos + 1 < len(text):
                escaped = text[self.pos + 1]
                chars.append(SIMPLE_ESCAPES.get(escaped, escaped))
                self.pos += 2
                continue
            chars.append(ch)
            self.pos += 1
        return self._make(TokenKind.STRING, start, cooked="".join(chars))

    def _read_template(self) -> Token:
        text = self.text
        start = self.pos
        self.pos += 1
        while self.pos < len(text):
            ch = text[self.pos]
            if ch == "\\":
                self.pos += 2
                continue
            if ch == "`":
                self.pos += 1
                break
            if text.startswith("${", self.pos):
                # Interpolations are skipped by brace depth, not tokenized.
                depth = 0
                while self.pos < len(text):
                    if text[self.pos] == "{":
                        depth += 1
                    elif text[self.pos] == "}":
                        depth -= 1
                        if depth == 0:
                            self.pos += 1
                            break
                    self.pos += 1
                continue
            self.pos += 1
        self.pos = min(self.pos, len(text))
        body_end = self.pos - 1 if self.pos - start >= 2 and text[self.pos - 1] == "`" else self.pos
        return self._make(TokenKind.TEMPLATE, start, cooked=text[start + 1 : body_end])

    def _read_number(self) -> Token:
        text = self.text
        start = self.pos

        if text[self.pos] == "0" and self.pos + 1 < len(text) and text[self.pos + 1] in "xXoObB":
            self.pos += 2
            while self.pos < len(text) and (text[self.pos] in "0123456789abcdefABCDEF_"):
                self.pos += 1
        else:
            self._consume_digits()
            if self.pos < len(text) and text[self.pos] == ".":
                self.pos += 1
                self._consume_digits()
            if self.pos < len(text) and text[self.pos] in "eE":
                look = self.pos + 1
                if look < len(text) and text[look] in "+-":
                    look += 1
                if look < len(text) and text[look].isdigit():
                    self.pos = look
                    self._consume_digits()

        if self.pos < len(text) and text[self.pos] == "n":
            self.pos += 1
        return self._make(TokenKind.NUMBER, start)

    def _consume_digits(self):
        while self.pos < len(self.text) and (self.text[self.pos].isdigit() or self.text[self.pos] == "_"):
            self.pos += 1

    def _read_word(self) -> Token:
        start = self.pos
        while self.pos < len(self.text) and is_identifier_part(self.text[self.pos]):
            self.pos += 1
        word = self.text[start : self.pos]
        if word in WORD_TOKENS:
            return self._make(WORD_TOKENS[word], start)
        if word in KEYWORDS:
            return self._make(TokenKind.KEYWORD, start)
        return self._make(TokenKind.IDENTIFIER, start)

    def _regex_allowed(self) -> bool:
        if not self.tokens:
            return True
        return self.tokens[-1].type in REGEX_PRECEDING_KINDS

    def _read_regex(self) -> Optional[Token]:
        text = self.text
        start = self.pos
        pos = start + 1
        in_class = False
        while pos < len(text):
            ch = text[pos]
            if ch == "\n":
                return None
            if ch == "\\":
                pos += 2
                continue
            if ch == "[":
                in_class = True
            elif ch == "]":
                in_class = False
            elif ch == "/" and not in_class:
                break
            pos += 1
        else:
            return None
        pos += 1
        while pos < len(text) and is_identifier_part(text[pos]):
            pos += 1
        self.pos = pos
        return self._make(TokenKind.REGEX, start)

    # --- Operators ---

    def _read_operator(self) -> Token:
        start = self.pos
        for width, table in ((3, THREE_CHAR_OPERATORS), (2, TWO_CHAR_OPERATORS), (1, ONE_CHAR_OPERATORS)):
            candidate = self.text[start : start + width]
            if len(candidate) == width and candidate in table:
                self.pos += width
                return self._make(table[candidate], start)
        self.pos += 1
        return self._make(TokenKind.UNKNOWN, start)


def tokenize(text: str) -> List[Token]:
    """Lexes `text` and returns every token except the trailing EOF."""
    return Lexer(text).lex()[:-1]


class Tokenizer:
    """A cursor over a fully materialized token array."""

    def __init__(self, text: str):
        self.text = text
        self.tokens: List[Token] = Lexer(text).lex()
        self._position = 0

    def next(self) -> Token:
        token = self.tokens[self._position]
        if token.type != TokenKind.EOF:
            self._position += 1
        return token

    def peek(self) -> Token:
        return self.tokens[self._position]

    def peek_at(self, distance: int) -> Token:
        index = min(self._position + distance, len(self.tokens) - 1)
        return self.tokens[index]

    def previous(self) -> Optional[Token]:
        return self.tokens[self._position - 1] if self._position > 0 else None

    def check(self, kind: TokenKind) -> bool:
        return self.peek().type == kind

    def check_any(self, kinds: Iterable[TokenKind]) -> bool:
        return self.peek().type in set(kinds)

    def match(self, kind: TokenKind) -> Optional[Token]:
        if self.check(kind):
            return self.next()
        return None

    def expect(self, kind: TokenKind) -> Token:
        token = self.peek()
        if token.type == kind:
            return self.next()
        if token.type == TokenKind.EOF:
            raise ParseError(ErrorCode.UNEXPECTED_END_OF_INPUT, offset=token.start, expected=kind, actual=token.type)
        raise ParseError(ErrorCode.UNEXPECTED_TOKEN, offset=token.start, expected=kind, actual=token.type, value=token.value)

    def get_position(self) -> int:
        return self._position

    def reset(self, position: int = 0):
        self._position = max(0, min(position, len(self.tokens) - 1))

    def is_eof(self) -> bool:
        return self.peek().type == TokenKind.EOF

    @property
    def last_end(self) -> int:
        """End offset of the most recently consumed token."""
        previous = self.previous()
        return previous.end if previous else 0
