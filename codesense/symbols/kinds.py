from enum import Enum


class SymbolKind(Enum):
    VARIABLE = "variable"
    FUNCTION = "function"
    CLASS = "class"
    METHOD = "method"
    PROPERTY = "property"
    PARAMETER = "parameter"
    CONSTANT = "constant"
    GETTER = "getter"
    SETTER = "setter"
    CONSTRUCTOR = "constructor"
    IMPORT = "import"
    BUILTIN = "builtin"
    UNKNOWN = "unknown"

    @property
    def is_callable(self) -> bool:
        return self in (SymbolKind.FUNCTION, SymbolKind.METHOD, SymbolKind.CONSTRUCTOR)

    @property
    def is_value(self) -> bool:
        return self in (
            SymbolKind.VARIABLE,
            SymbolKind.CONSTANT,
            SymbolKind.PARAMETER,
            SymbolKind.PROPERTY,
            SymbolKind.FUNCTION,
            SymbolKind.METHOD,
            SymbolKind.GETTER,
        )

    def to_completion_kind(self) -> str:
        """Maps a symbol kind onto the completion item kind shown in the popup."""
        return COMPLETION_KINDS.get(self, "text")


COMPLETION_KINDS = {
    SymbolKind.VARIABLE: "variable",
    SymbolKind.PARAMETER: "variable",
    SymbolKind.CONSTANT: "constant",
    SymbolKind.FUNCTION: "function",
    SymbolKind.METHOD: "method",
    SymbolKind.CONSTRUCTOR: "method",
    SymbolKind.CLASS: "class",
    SymbolKind.PROPERTY: "property",
    SymbolKind.GETTER: "property",
    SymbolKind.SETTER: "property",
    SymbolKind.IMPORT: "module",
    SymbolKind.BUILTIN: "builtin",
}


class ScopeKind(Enum):
    GLOBAL = "global"
    FUNCTION = "function"
    BLOCK = "block"
    CLASS = "class"
    ARROW = "arrow"
    CATCH = "catch"
