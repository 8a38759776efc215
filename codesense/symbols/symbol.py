from dataclasses import dataclass
from typing import Optional

from ..inference.descriptors import TypeDescriptor
from .kinds import SymbolKind


@dataclass
class Symbol:
    """A named binding declared into exactly one scope."""

    name: str
    kind: SymbolKind = SymbolKind.UNKNOWN
    type: Optional[TypeDescriptor] = None
    declaration_kind: Optional[str] = None  # var | let | const
    start: Optional[int] = None
    is_static: bool = False

    @property
    def is_callable(self) -> bool:
        return self.kind.is_callable

    @property
    def completion_kind(self) -> str:
        return self.kind.to_completion_kind()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "kind": self.kind.value,
            "type": self.type.model_dump(mode="json", exclude_none=True) if self.type else None,
            "declaration_kind": self.declaration_kind,
            "start": self.start,
        }


# --- Factories ---


def create_variable(name: str, type: Optional[TypeDescriptor] = None, declaration_kind: str = "let", start: Optional[int] = None) -> Symbol:
    kind = SymbolKind.CONSTANT if declaration_kind == "const" else SymbolKind.VARIABLE
    return Symbol(name, kind, type, declaration_kind=declaration_kind, start=start)


def create_function(name: str, type: Optional[TypeDescriptor] = None, start: Optional[int] = None) -> Symbol:
    return Symbol(name, SymbolKind.FUNCTION, type, start=start)


def create_class(name: str, type: Optional[TypeDescriptor] = None, start: Optional[int] = None) -> Symbol:
    return Symbol(name, SymbolKind.CLASS, type, start=start)


def create_parameter(name: str, type: Optional[TypeDescriptor] = None, start: Optional[int] = None) -> Symbol:
    return Symbol(name, SymbolKind.PARAMETER, type, start=start)


def create_builtin(name: str, type: Optional[TypeDescriptor] = None) -> Symbol:
    return Symbol(name, SymbolKind.BUILTIN, type)
