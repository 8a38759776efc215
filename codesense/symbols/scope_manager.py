from typing import List, Optional, Tuple

from ..exceptions import InternalAnalysisError
from ..inference.descriptors import ClassMember, TypeDescriptor
from . import symbol as symbols
from .kinds import ScopeKind
from .scope import Scope
from .symbol import Symbol


class ScopeManager:
    """
    Owns the scope tree of one document and a stack tracking the scope that is
    currently being populated. Queries by offset search the finished tree.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.global_scope = Scope(ScopeKind.GLOBAL, start_offset=0, end_offset=float("inf"))
        self.current_scope = self.global_scope
        self._scope_stack: List[Scope] = [self.global_scope]
        self._all_scopes: List[Scope] = [self.global_scope]

    # --- Scope navigation ---

    def enter_scope(self, kind: ScopeKind, start_offset: int = 0, class_symbol: Optional[Symbol] = None, function_symbol: Optional[Symbol] = None) -> Scope:
        scope = Scope(kind, parent=self.current_scope, start_offset=start_offset, class_symbol=class_symbol, function_symbol=function_symbol)
        self._scope_stack.append(scope)
        self._all_scopes.append(scope)
        self.current_scope = scope
        return scope

    def exit_scope(self, end_offset: Optional[int] = None) -> Scope:
        """Closes the current scope at `end_offset`. Every exit pairs with an earlier enter."""
        if len(self._scope_stack) <= 1:
            raise InternalAnalysisError("ScopeManager attempted to exit the global scope. Enter and exit calls are unbalanced; this is a bug.")
        exited = self._scope_stack.pop()
        if end_offset is not None:
            exited.end_offset = end_offset
        self.current_scope = self._scope_stack[-1]
        return exited

    def enter_function_scope(self, start_offset: int, function_symbol: Optional[Symbol] = None) -> Scope:
        return self.enter_scope(ScopeKind.FUNCTION, start_offset, function_symbol=function_symbol)

    def enter_arrow_scope(self, start_offset: int) -> Scope:
        return self.enter_scope(ScopeKind.ARROW, start_offset)

    def enter_class_scope(self, start_offset: int, class_symbol: Optional[Symbol] = None) -> Scope:
        return self.enter_scope(ScopeKind.CLASS, start_offset, class_symbol=class_symbol)

    def enter_block_scope(self, start_offset: int) -> Scope:
        return self.enter_scope(ScopeKind.BLOCK, start_offset)

    def enter_catch_scope(self, start_offset: int) -> Scope:
        return self.enter_scope(ScopeKind.CATCH, start_offset)

    # --- Symbol definition ---

    def define(self, symbol: Symbol) -> Symbol:
        return self.current_scope.define(symbol)

    def define_variable(self, name: str, type: Optional[TypeDescriptor] = None, declaration_kind: str = "let", start: Optional[int] = None) -> Symbol:
        """`var` bindings land in the nearest function, arrow or global scope; `let`/`const` stay put."""
        symbol = symbols.create_variable(name, type, declaration_kind, start)
        target = self.current_scope
        if declaration_kind == "var":
            target = self.current_scope.get_enclosing_function_scope() or self.global_scope
        return target.define(symbol)

    def define_function(self, name: str, type: Optional[TypeDescriptor] = None, start: Optional[int] = None) -> Symbol:
        return self.define(symbols.create_function(name, type, start))

    def define_class(self, name: str, type: Optional[TypeDescriptor] = None, start: Optional[int] = None) -> Symbol:
        return self.define(symbols.create_class(name, type, start))

    def define_parameter(self, name: str, type: Optional[TypeDescriptor] = None, start: Optional[int] = None) -> Symbol:
        return self.define(symbols.create_parameter(name, type, start))

    # --- Resolution ---

    def resolve(self, name: str, offset: Optional[int] = None) -> Optional[Symbol]:
        scope = self.current_scope if offset is None else self.get_scope_at_offset(offset)
        return scope.resolve(name)

    def can_resolve(self, name: str, offset: Optional[int] = None) -> bool:
        return self.resolve(name, offset) is not None

    def resolve_with_scope(self, name: str, offset: Optional[int] = None) -> Optional[Tuple[Symbol, Scope]]:
        scope = self.current_scope if offset is None else self.get_scope_at_offset(offset)
        return scope.resolve_with_scope(name)

    # --- Offset queries ---

    def get_scope_at_offset(self, offset: int) -> Scope:
        return self.global_scope.find_scope_at_offset(offset) or self.global_scope

    def get_visible_symbols_at_offset(self, offset: int) -> List[Symbol]:
        return self.get_scope_at_offset(offset).get_all_visible_symbols()

    def get_symbols_with_prefix_at_offset(self, offset: int, prefix: str) -> List[Symbol]:
        return self.get_scope_at_offset(offset).get_symbols_with_prefix(prefix, include_parents=True)

    def get_this_type(self) -> TypeDescriptor:
        return self.current_scope.get_this_type()

    def get_this_type_at_offset(self, offset: int) -> TypeDescriptor:
        return self.get_scope_at_offset(offset).get_this_type()

    # --- Class lookups ---

    def find_class_scope(self, name: str) -> Optional[Scope]:
        for scope in self._all_scopes:
            if scope.kind == ScopeKind.CLASS and scope.class_symbol and scope.class_symbol.name == name:
                return scope
        return None

    def get_class_members(self, name: str) -> List[ClassMember]:
        """Members recorded on the class named `name`, as discovered while building the tree."""
        scope = self.find_class_scope(name)
        if scope is None or scope.class_symbol.type is None:
            return []
        return list(scope.class_symbol.type.members or [])

    # --- Scope queries ---

    def get_current_scope(self) -> Scope:
        return self.current_scope

    def get_global_scope(self) -> Scope:
        return self.global_scope

    def get_depth(self) -> int:
        return len(self._scope_stack) - 1

    def is_in_global_scope(self) -> bool:
        return self.current_scope is self.global_scope

    def is_in_function_scope(self) -> bool:
        return self.current_scope.kind in (ScopeKind.FUNCTION, ScopeKind.ARROW)

    def get_enclosing_function_scope(self) -> Optional[Scope]:
        return self.current_scope.get_enclosing_function_scope()

    def get_enclosing_class_scope(self) -> Optional[Scope]:
        return self.current_scope.get_enclosing_class_scope()

    def get_all_scopes(self) -> List[Scope]:
        return list(self._all_scopes)

    def to_dict(self) -> dict:
        return self.global_scope.to_dict()

    def to_debug_string(self) -> str:
        lines = []

        def print_scope(scope: Scope, indent: int):
            names = ", ".join(scope.symbols)
            lines.append(f"{'  ' * indent}{scope.kind.value} [{names}]")
            for child in scope.children:
                print_scope(child, indent + 1)

        print_scope(self.global_scope, 0)
        return "\n".join(lines)

    def __str__(self) -> str:
        return f"ScopeManager(depth={self.get_depth()}, current={self.current_scope.kind.value}, total_scopes={len(self._all_scopes)})"
