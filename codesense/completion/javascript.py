"""
JavaScript completion. Member lists come from the inference engine; when the
engine cannot type a chain the best-guess layer gets a turn, and failing that
the union of string, array and object members is offered, flagged as unknown.
Identifier completion lists every binding visible at the cursor plus keywords.
"""

from typing import List, Optional

from ..config.config import (
    DEFAULT_SORT_ORDER,
    IDENTIFIER_KEYWORDS,
    IDENTIFIER_SORT_ORDERS,
    KEYWORD_SORT_ORDER,
    MAX_IDENTIFIER_RESULTS,
)
from ..inference import heuristics
from ..inference.engine import TypeInferenceEngine
from ..symbols.kinds import SymbolKind
from ..symbols.symbol import Symbol
from .context import detect_js_context
from .item import CompletionItem
from .ranking import RecencyTracker, dedupe, rank_items

# Members live on their owner's type; they are not bindings in lexical scope.
MEMBER_KINDS = frozenset(
    [SymbolKind.METHOD, SymbolKind.PROPERTY, SymbolKind.GETTER, SymbolKind.SETTER, SymbolKind.CONSTRUCTOR]
)


def identifier_sort_order(symbol: Symbol) -> int:
    if symbol.kind in (SymbolKind.VARIABLE, SymbolKind.CONSTANT) and symbol.name.startswith("_"):
        return IDENTIFIER_SORT_ORDERS["private_variable"]
    return IDENTIFIER_SORT_ORDERS.get(symbol.kind.value, DEFAULT_SORT_ORDER)


class JavaScriptCompletionProvider:
    def __init__(self, engine: TypeInferenceEngine, text: str = "", recency: Optional[RecencyTracker] = None):
        self.engine = engine
        self.text = text
        self.recency = recency

    def get_completions(self, before_cursor: str, offset: int) -> List[CompletionItem]:
        context = detect_js_context(before_cursor)
        if context is None:
            return []
        if context.type == "this_access":
            members = self.engine.get_this_members(offset=offset)
            return rank_items(members, context.prefix, self.recency, by_label=False)
        if context.type == "member_access":
            members = self.get_member_completions(context.chain, offset)
            return rank_items(members, context.prefix, self.recency, by_label=False)
        return self.get_identifier_completions(context.prefix, offset)

    def get_member_completions(self, chain: str, offset: Optional[int] = None) -> List[CompletionItem]:
        type = self.engine.get_type_of_expression(chain, offset=offset)
        if self.engine.is_unknown_type(type):
            guessed = heuristics.guess_member_items(chain, self.text)
            if guessed is not None:
                return guessed
        return self.engine.get_members_of_type(type)

    def get_identifier_completions(self, prefix: str, offset: int) -> List[CompletionItem]:
        items = []
        scope_manager = self.engine.scope_manager
        symbols = scope_manager.get_visible_symbols_at_offset(offset) if scope_manager else []
        for symbol in symbols:
            if symbol.kind in MEMBER_KINDS:
                continue
            items.append(
                CompletionItem(
                    label=symbol.name,
                    insert_text=symbol.name,
                    kind=symbol.completion_kind,
                    type_info=self.engine.get_type_string(symbol.type),
                    is_unknown=self.engine.is_unknown_type(symbol.type),
                    sort_order=identifier_sort_order(symbol),
                )
            )
        items.extend(
            CompletionItem(label=keyword, insert_text=keyword, kind="keyword", sort_order=KEYWORD_SORT_ORDER)
            for keyword in IDENTIFIER_KEYWORDS
        )
        return rank_items(dedupe(items), prefix, self.recency, limit=MAX_IDENTIFIER_RESULTS)
