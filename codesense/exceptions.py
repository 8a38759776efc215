"""
Custom exception types for the codesense analysis engine.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):

    # --- Syntax Errors ---
    UNEXPECTED_TOKEN = "Syntax Error: Expected {expected} but found {actual} '{value}'."
    UNEXPECTED_END_OF_INPUT = "Syntax Error: Unexpected end of input, expected {expected}."
    INVALID_ARROW_PARAMETERS = "Syntax Error: Invalid arrow function parameter list."
    INVALID_ASSIGNMENT_TARGET = "Syntax Error: Invalid left-hand side in assignment."
    REST_PARAMETER_NOT_LAST = "Syntax Error: A rest parameter must be the last parameter."

    # --- Input Errors ---
    UNSUPPORTED_LANGUAGE = "Unsupported language '{language}'. Expected one of: {supported}."
    INVALID_POSITION = "Invalid cursor position: {details}"


class CodesenseError(Exception):
    def __init__(
        self,
        code: ErrorCode,
        offset: Optional[int] = None,
        source: Optional[str] = None,
        **kwargs,
    ):
        self.code = code
        self.offset = offset
        self.details = kwargs

        # --- 1. Generate the core error message ---
        core_message = code.value.format(**kwargs)

        # --- 2. Determine the location prefix ---
        location_prefix = ""
        if offset is not None and source:
            location_prefix = f"Error in '{source}' at offset {offset}: "
        elif offset is not None:
            location_prefix = f"Error at offset {offset}: "
        elif source:
            location_prefix = f"Error in '{source}': "

        self.message = location_prefix + core_message

        super().__init__(self.message)


class ParseError(CodesenseError):
    """Raised by the tokenizer cursor and the parser. Never raised by type resolution."""

    def __init__(self, code: ErrorCode, offset: Optional[int] = None, expected=None, actual=None, **kwargs):
        self.expected = expected
        self.actual = actual
        if expected is not None:
            kwargs.setdefault("expected", getattr(expected, "value", expected))
        if actual is not None:
            kwargs.setdefault("actual", getattr(actual, "value", actual))
        super().__init__(code, offset=offset, **kwargs)


class InternalAnalysisError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
