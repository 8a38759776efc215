"""
Lexical scopes.

A scope owns a name -> Symbol mapping and points at its parent. Children are
registered on the parent when a scope is constructed, so the tree can be
searched top-down by offset as well as walked bottom-up by name.

Ranges are half-open: a scope covers `start_offset <= offset < end_offset`.
A scope must be closed no later than its parent, otherwise offset lookups
degrade to a less specific scope.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..inference.descriptors import TypeDescriptor, create_instance, create_unknown
from .kinds import ScopeKind
from .symbol import Symbol


@dataclass(eq=False)
class Scope:
    kind: ScopeKind = ScopeKind.BLOCK
    parent: Optional["Scope"] = field(default=None, repr=False)
    start_offset: float = 0
    end_offset: float = 0
    class_symbol: Optional[Symbol] = None
    function_symbol: Optional[Symbol] = None
    symbols: Dict[str, Symbol] = field(default_factory=dict, repr=False)
    children: List["Scope"] = field(default_factory=list, repr=False)
    depth: int = field(init=False, default=0)

    def __post_init__(self):
        if self.parent is not None:
            self.depth = self.parent.depth + 1
            self.parent.children.append(self)

    # --- Symbol definition ---

    def define(self, symbol: Symbol) -> Symbol:
        """Inserts `symbol`, overwriting any earlier binding of the same name."""
        self.symbols[symbol.name] = symbol
        return symbol

    def define_all(self, symbols: Iterable[Symbol]) -> "Scope":
        for symbol in symbols:
            self.define(symbol)
        return self

    def remove(self, name: str) -> bool:
        return self.symbols.pop(name, None) is not None

    def has(self, name: str) -> bool:
        return name in self.symbols

    def get(self, name: str) -> Optional[Symbol]:
        return self.symbols.get(name)

    # --- Resolution ---

    def resolve(self, name: str) -> Optional[Symbol]:
        found = self.resolve_with_scope(name)
        return found[0] if found else None

    def resolve_with_scope(self, name: str) -> Optional[Tuple[Symbol, "Scope"]]:
        current = self
        while current is not None:
            if name in current.symbols:
                return current.symbols[name], current
            current = current.parent
        return None

    def can_resolve(self, name: str) -> bool:
        return self.resolve(name) is not None

    # --- Enumeration ---

    def get_symbols(self) -> List[Symbol]:
        return list(self.symbols.values())

    def get_all_visible_symbols(self) -> List[Symbol]:
        """Every binding visible from here; the closest declaration of a name wins."""
        visible: Dict[str, Symbol] = {}
        for scope in self.get_scope_chain():
            for name, symbol in scope.symbols.items():
                visible.setdefault(name, symbol)
        return list(visible.values())

    def get_symbols_with_prefix(self, prefix: str, include_parents: bool = True) -> List[Symbol]:
        lowered = prefix.lower()
        chain = self.get_scope_chain() if include_parents else [self]
        results: Dict[str, Symbol] = {}
        for scope in chain:
            for name, symbol in scope.symbols.items():
                if name not in results and name.lower().startswith(lowered):
                    results[name] = symbol
        return list(results.values())

    # --- Navigation ---

    def get_scope_chain(self) -> List["Scope"]:
        chain = []
        current = self
        while current is not None:
            chain.append(current)
            current = current.parent
        return chain

    def get_global_scope(self) -> "Scope":
        return self.get_scope_chain()[-1]

    def get_enclosing_function_scope(self) -> Optional["Scope"]:
        for scope in self.get_scope_chain():
            if scope.kind in (ScopeKind.FUNCTION, ScopeKind.ARROW):
                return scope
        return None

    def get_enclosing_class_scope(self) -> Optional["Scope"]:
        for scope in self.get_scope_chain():
            if scope.kind == ScopeKind.CLASS:
                return scope
        return None

    def contains(self, offset: int) -> bool:
        return self.start_offset <= offset < self.end_offset

    def find_scope_at_offset(self, offset: int) -> Optional["Scope"]:
        """The most deeply nested scope whose range contains `offset`, or None if this one does not."""
        if not self.contains(offset):
            return None
        for child in self.children:
            found = child.find_scope_at_offset(offset)
            if found is not None:
                return found
        return self

    # --- 'this' context ---

    def get_this_type(self) -> TypeDescriptor:
        """
        Arrow scopes are skipped because they inherit `this`. A class scope, or a
        function nested in one, yields the class instance; anything else is unknown.
        """
        current = self
        while current is not None:
            if current.kind == ScopeKind.ARROW:
                current = current.parent
                continue
            if current.kind == ScopeKind.CLASS and current.class_symbol and current.class_symbol.type:
                return create_instance(current.class_symbol.type)
            if current.kind == ScopeKind.FUNCTION:
                class_scope = current.get_enclosing_class_scope()
                if class_scope and class_scope.class_symbol and class_scope.class_symbol.type:
                    return create_instance(class_scope.class_symbol.type)
                return create_unknown()
            current = current.parent
        return create_unknown()

    # --- Utilities ---

    def set_range(self, start: float, end: float) -> "Scope":
        self.start_offset = start
        self.end_offset = end
        return self

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "start": self.start_offset,
            "end": None if self.end_offset == float("inf") else self.end_offset,
            "symbols": [symbol.to_dict() for symbol in self.symbols.values()],
            "children": [child.to_dict() for child in self.children],
        }

    def __str__(self) -> str:
        names = ", ".join(self.symbols)
        return f"Scope({self.kind.value}, depth={self.depth}, symbols=[{names}])"
