"""
Token kinds and the immutable Token record produced by the tokenizer.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TokenKind(Enum):
    # --- Literals ---
    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    UNDEFINED = "UNDEFINED"
    REGEX = "REGEX"
    TEMPLATE = "TEMPLATE"

    # --- Names ---
    IDENTIFIER = "IDENTIFIER"
    KEYWORD = "KEYWORD"
    THIS = "THIS"

    # --- Punctuation ---
    DOT = "DOT"
    OPTIONAL_CHAIN = "OPTIONAL_CHAIN"
    COMMA = "COMMA"
    COLON = "COLON"
    SEMICOLON = "SEMICOLON"
    QUESTION = "QUESTION"
    ARROW = "ARROW"
    SPREAD = "SPREAD"

    # --- Operators ---
    ASSIGN = "ASSIGN"
    PLUS_ASSIGN = "PLUS_ASSIGN"
    MINUS_ASSIGN = "MINUS_ASSIGN"
    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"
    PERCENT = "PERCENT"
    POWER = "POWER"
    EQ = "EQ"
    NEQ = "NEQ"
    STRICT_EQ = "STRICT_EQ"
    STRICT_NEQ = "STRICT_NEQ"
    LT = "LT"
    GT = "GT"
    LTE = "LTE"
    GTE = "GTE"
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    NULLISH = "NULLISH"

    # --- Brackets ---
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"

    # --- Contextual keywords with their own kind ---
    NEW = "NEW"
    TYPEOF = "TYPEOF"
    INSTANCEOF = "INSTANCEOF"
    IN = "IN"
    OF = "OF"
    CLASS = "CLASS"
    EXTENDS = "EXTENDS"
    STATIC = "STATIC"
    GET = "GET"
    SET = "SET"
    ASYNC = "ASYNC"
    FUNCTION = "FUNCTION"
    RETURN = "RETURN"
    CONSTRUCTOR = "CONSTRUCTOR"
    VAR = "VAR"
    LET = "LET"
    CONST = "CONST"

    # --- Special ---
    EOF = "EOF"
    UNKNOWN = "UNKNOWN"


# Reserved words that lex as a generic KEYWORD unless listed in WORD_TOKENS.
KEYWORDS = frozenset(
    {
        "break", "case", "catch", "continue", "debugger", "default", "delete", "do", "else",
        "finally", "for", "function", "if", "in", "instanceof", "new", "return", "switch", "this",
        "throw", "try", "typeof", "var", "void", "while", "with", "class", "const", "enum", "export",
        "extends", "import", "super", "implements", "interface", "let", "package", "private",
        "protected", "public", "static", "yield", "async", "await", "of", "get", "set",
    }
)

WORD_TOKENS = {
    "this": TokenKind.THIS,
    "new": TokenKind.NEW,
    "typeof": TokenKind.TYPEOF,
    "instanceof": TokenKind.INSTANCEOF,
    "in": TokenKind.IN,
    "of": TokenKind.OF,
    "class": TokenKind.CLASS,
    "extends": TokenKind.EXTENDS,
    "static": TokenKind.STATIC,
    "get": TokenKind.GET,
    "set": TokenKind.SET,
    "async": TokenKind.ASYNC,
    "function": TokenKind.FUNCTION,
    "return": TokenKind.RETURN,
    "constructor": TokenKind.CONSTRUCTOR,
    "var": TokenKind.VAR,
    "let": TokenKind.LET,
    "const": TokenKind.CONST,
    "true": TokenKind.BOOLEAN,
    "false": TokenKind.BOOLEAN,
    "null": TokenKind.NULL,
    "undefined": TokenKind.UNDEFINED,
}

# Longest spelling first within each table; the tokenizer tries 3, then 2, then 1 characters.
THREE_CHAR_OPERATORS = {
    "...": TokenKind.SPREAD,
    "===": TokenKind.STRICT_EQ,
    "!==": TokenKind.STRICT_NEQ,
    "**=": TokenKind.ASSIGN,
    "??=": TokenKind.ASSIGN,
    "&&=": TokenKind.ASSIGN,
    "||=": TokenKind.ASSIGN,
}

TWO_CHAR_OPERATORS = {
    "?.": TokenKind.OPTIONAL_CHAIN,
    "??": TokenKind.NULLISH,
    "=>": TokenKind.ARROW,
    "==": TokenKind.EQ,
    "!=": TokenKind.NEQ,
    "<=": TokenKind.LTE,
    ">=": TokenKind.GTE,
    "&&": TokenKind.AND,
    "||": TokenKind.OR,
    "+=": TokenKind.PLUS_ASSIGN,
    "-=": TokenKind.MINUS_ASSIGN,
    "*=": TokenKind.ASSIGN,
    "/=": TokenKind.ASSIGN,
    "%=": TokenKind.ASSIGN,
    "**": TokenKind.POWER,
    "++": TokenKind.PLUS,
    "--": TokenKind.MINUS,
}

ONE_CHAR_OPERATORS = {
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    "?": TokenKind.QUESTION,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "!": TokenKind.NOT,
}


class Token(BaseModel):
    """A classified lexical unit. `value` is always the exact source slice."""

    model_config = ConfigDict(frozen=True)

    type: TokenKind
    value: str
    start: int
    end: int
    cooked: Optional[str] = None
