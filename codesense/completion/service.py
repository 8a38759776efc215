"""
The single entry point editors talk to: holds the current document of one
language, keeps its scope tree in step with edits and answers completion and
hover requests at a cursor position.
"""

import re
from typing import List, Optional

from ..config.config import MAX_RESULTS_NO_PREFIX, MAX_RESULTS_WITH_PREFIX, SUPPORTED_LANGUAGES
from ..document import TextDocument
from ..exceptions import CodesenseError, ErrorCode, ParseError
from ..inference.engine import TypeInferenceEngine
from ..parser.tokenizer import tokenize
from ..parser.tokens import TokenKind
from ..symbols.scope_builder import build_builtin_scopes, build_scopes
from ..symbols.scope_manager import ScopeManager
from .context import extract_chain, is_in_string_or_comment
from .css import get_css_completions
from .html import get_html_completions
from .item import CompletionItem
from .javascript import JavaScriptCompletionProvider
from .ranking import RecencyTracker, rank_items

WORD_BEFORE = re.compile(r"[\w$-]*$")
JS_WORD_BEFORE = re.compile(r"[\w$]*$")
JS_WORD_AFTER = re.compile(r"^[\w$]*")

CLOSING_TOKENS = {TokenKind.LPAREN: ")", TokenKind.LBRACKET: "]", TokenKind.LBRACE: "}"}
OPENING_TOKENS = {TokenKind.RPAREN: TokenKind.LPAREN, TokenKind.RBRACKET: TokenKind.LBRACKET, TokenKind.RBRACE: TokenKind.LBRACE}


def _closers_for(text: str) -> str:
    """The brackets that would close every group left open in `text`."""
    stack = []
    for token in tokenize(text):
        if token.type in CLOSING_TOKENS:
            stack.append(token.type)
        elif token.type in OPENING_TOKENS and stack and stack[-1] == OPENING_TOKENS[token.type]:
            stack.pop()
    return "".join(CLOSING_TOKENS[kind] for kind in reversed(stack))


class CompletionService:
    def __init__(self, language: str = "javascript"):
        if language not in SUPPORTED_LANGUAGES:
            raise CodesenseError(ErrorCode.UNSUPPORTED_LANGUAGE, language=language, supported=", ".join(SUPPORTED_LANGUAGES))
        self.language = language
        self.document = TextDocument()
        self.recency = RecencyTracker()
        self.parse_error: Optional[ParseError] = None
        self.scope_manager: ScopeManager = build_builtin_scopes()
        self.engine = TypeInferenceEngine(self.scope_manager, self.document)
        # Scope trees rebuilt from a truncated document, keyed by the cut offset.
        self._recovered = {}

    def update_document(self, text: str):
        """Replaces the document text and, for JavaScript, rebuilds the scope tree."""
        self.document.set_text(text)
        self._recovered.clear()
        if self.language != "javascript":
            return
        try:
            self.scope_manager = build_scopes(text)
            self.parse_error = None
        except ParseError as e:
            # Half-typed code is the normal case while editing.
            self.scope_manager = build_builtin_scopes()
            self.parse_error = e
        except RecursionError:
            # Nesting deeper than the interpreter stack: answer from the builtins.
            self.scope_manager = build_builtin_scopes()
            self.parse_error = None
        self.engine = TypeInferenceEngine(self.scope_manager, self.document)

    def get_completions(self, offset: int, prefix: Optional[str] = None) -> List[CompletionItem]:
        text = self.document.get_text()
        if not 0 <= offset <= len(text):
            raise CodesenseError(ErrorCode.INVALID_POSITION, details=f"offset {offset} outside 0..{len(text)}")
        before_cursor = self.document.get_text_before(offset)

        if self.language == "javascript":
            provider = JavaScriptCompletionProvider(self._engine_for(offset), text, self.recency)
            return provider.get_completions(before_cursor, offset)

        if prefix is None:
            prefix = WORD_BEFORE.search(before_cursor).group(0)
        if self.language == "html":
            items = get_html_completions(before_cursor, prefix)
        else:
            items = get_css_completions(before_cursor, prefix)
        limit = MAX_RESULTS_WITH_PREFIX if prefix else MAX_RESULTS_NO_PREFIX
        # Without a prefix the tables' own order is kept.
        return rank_items(items, prefix, self.recency, limit=limit, by_label=bool(prefix))

    def get_completions_at(self, line: int, column: int, prefix: Optional[str] = None) -> List[CompletionItem]:
        return self.get_completions(self.document.position_to_offset(line, column), prefix)

    def record_accepted(self, label: str):
        """Notes that the user picked `label`; it ranks higher from now on."""
        self.recency.record(label)

    def get_hover_chain(self, offset: int) -> Optional[str]:
        """The member chain ending at the end of the word under `offset`, or None."""
        text = self.document.get_text()
        line, _ = self.document.offset_to_position(offset)
        line_start = self.document.position_to_offset(line, 0)
        word_end = offset + JS_WORD_AFTER.match(text[offset:]).end()
        before = text[line_start:word_end]
        if is_in_string_or_comment(before) or not JS_WORD_BEFORE.search(before).group(0):
            return None
        return extract_chain(before)

    def get_type_at(self, offset: int) -> Optional[str]:
        """The inferred type of the chain under `offset`, or None where nothing is known."""
        if self.language != "javascript":
            return None
        chain = self.get_hover_chain(offset)
        if chain is None:
            return None
        engine = self._engine_for(offset)
        type = engine.get_type_of_expression(chain, offset=offset)
        if engine.is_unknown_type(type):
            return None
        return engine.get_type_string(type)

    def _engine_for(self, offset: int) -> TypeInferenceEngine:
        """
        The engine to answer at `offset`. While the document does not parse, the
        scopes come from the text before the cursor line with its open brackets
        closed, and only when that fails as well from the builtins alone.
        """
        if self.parse_error is None:
            return self.engine
        line, _ = self.document.offset_to_position(offset)
        cut = self.document.position_to_offset(line, 0)
        if cut not in self._recovered:
            width = len(self.document.get_line(line))
            self._recovered[cut] = TypeInferenceEngine(self._recover_scopes(cut, width), self.document)
        return self._recovered[cut]

    def _recover_scopes(self, cut: int, width: int) -> ScopeManager:
        head = self.document.get_text()[:cut]
        try:
            # Blank padding keeps the cursor line inside the scopes closed after it.
            return build_scopes(head + " " * width + _closers_for(head))
        except (ParseError, RecursionError):
            return self.scope_manager
