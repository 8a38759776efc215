"""
Type inference over textual member-access chains.

`get_type_of_expression("user.profile.name")` resolves the chain head (a
catalog global, a scope symbol, `this` or a literal) and folds every further
segment through member resolution. Each internal step returns
`Optional[TypeDescriptor]`, where None means "no information"; only the public
methods fold None into the UNKNOWN descriptor, so the engine never raises on a
miss.

Catalog members resolve straight to their declared return type, so `s.trim`
and `s.trim()` both give String. Calls matter for user code only: calling a
FUNCTION descriptor yields its return type.
"""

import re
from typing import Dict, List, Optional

from ..completion.item import CompletionItem
from ..symbols.scope import Scope
from ..symbols.scope_manager import ScopeManager
from .builtins import BuiltinTypes
from .descriptors import (
    ClassMember,
    TypeDescriptor,
    TypeKind,
    create_array,
    create_function,
    create_named_object,
    create_primitive,
    create_unknown,
)
from .signature import parse_return_type

ELEMENT_ACCESS = "[]"
CALL = "()"

STRING_HEAD = re.compile(r"""^(['"`])(?:\\.|(?!\1).)*\1""", re.DOTALL)
NUMBER_HEAD = re.compile(r"^\d[\d_]*(?:\.\d+)?(?=\.|$)")
# A head or member name followed by any number of calls.
CHAIN_SEGMENT = re.compile(r"^(<\w+>|\[\]|[\w$#]+)((?:\(\))*)$")

OPENERS = {"(": ")", "[": "]", "{": "}"}
QUOTES = "'\"`"
STRING_PATTERNS = {quote: re.compile(rf"{quote}(?:\\.|[^\\{quote}])*{quote}", re.DOTALL) for quote in QUOTES}

LITERAL_HEAD_TYPES = {
    "<string>": lambda: create_primitive("String"),
    "<number>": lambda: create_primitive("Number"),
    "<array>": lambda: create_array(),
}

FUNCTION_MEMBERS = [
    ("call", "method", "any"),
    ("apply", "method", "any"),
    ("bind", "method", "Function"),
    ("length", "property", "number"),
    ("name", "property", "string"),
]


def _closing_index(text: str, start: int) -> Optional[int]:
    """Index of the bracket closing the one at `start`, skipping nested brackets and strings."""
    stack = []
    index = start
    while index < len(text):
        char = text[index]
        if char in QUOTES:
            match = STRING_PATTERNS[char].match(text, index)
            if match is None:
                return None
            index = match.end()
            continue
        if char in OPENERS:
            stack.append(OPENERS[char])
        elif stack and char == stack[-1]:
            stack.pop()
            if not stack:
                return index
        index += 1
    return None


def split_chain(expression: Optional[str]) -> List[str]:
    """
    Splits an expression into its head and member segments.

    Call arguments are collapsed to `()` and kept on their segment
    (`getUser(id).name` -> `["getUser()", "name"]`), `[index]` becomes an
    element-access segment, `?.` counts as `.`, and a string, number or array
    literal head is replaced by a marker. Returns [] for anything that is not a
    plain chain.
    """
    if not expression:
        return []
    text = expression.strip()

    head = ""
    match = STRING_HEAD.match(text)
    if match:
        head, text = "<string>", text[match.end() :]
    elif NUMBER_HEAD.match(text):
        match = NUMBER_HEAD.match(text)
        head, text = "<number>", text[match.end() :]
    elif text.startswith("["):
        close = _closing_index(text, 0)
        if close is None:
            return []
        head, text = "<array>", text[close + 1 :]

    segments: List[str] = []
    current = head
    index = 0
    while index < len(text):
        char = text[index]
        if char in "([":
            close = _closing_index(text, index)
            if close is None:
                return []
            if char == "(":
                current += CALL
            else:
                if current:
                    segments.append(current)
                current = ELEMENT_ACCESS
            index = close + 1
            continue
        if text.startswith("?.", index):
            # `a?.[0]` and `f?.()` keep their bracket on the same step.
            if not text.startswith(("?.(", "?.["), index):
                segments.append(current)
                current = ""
            index += 2
            continue
        if char == ".":
            segments.append(current)
            current = ""
        elif not char.isspace():
            current += char
        index += 1
    segments.append(current)

    if segments and segments[-1] == "":
        segments.pop()
    if not segments or not all(CHAIN_SEGMENT.match(segment) for segment in segments):
        return []
    return segments


class TypeInferenceEngine:
    def __init__(self, scope_manager: Optional[ScopeManager] = None, document=None):
        self.scope_manager = scope_manager
        self.document = document
        self.builtins = BuiltinTypes()

    # --- Public surface ---

    def get_type_of_expression(self, expression: str, line: Optional[int] = None, column: Optional[int] = None, offset: Optional[int] = None) -> TypeDescriptor:
        return self.infer_chain(expression, self._offset_for(line, column, offset)) or create_unknown()

    def get_members_of_expression(self, expression: str, line: Optional[int] = None, column: Optional[int] = None, offset: Optional[int] = None) -> List[CompletionItem]:
        return self.get_members_of_type(self.get_type_of_expression(expression, line, column, offset))

    def get_this_members(self, line: Optional[int] = None, column: Optional[int] = None, offset: Optional[int] = None) -> List[CompletionItem]:
        scope = self._scope_for(self._offset_for(line, column, offset))
        if scope is None:
            return []
        return self.get_members_of_type(scope.get_this_type())

    def resolve_member_access(self, type: Optional[TypeDescriptor], member: str) -> TypeDescriptor:
        return self.resolve_member(type, member) or create_unknown()

    def is_unknown_type(self, type: Optional[TypeDescriptor]) -> bool:
        return type is None or type.is_unknown

    def get_type_string(self, type: Optional[TypeDescriptor]) -> str:
        if type is None:
            return "any"
        if type.kind == TypeKind.PRIMITIVE:
            return type.name.lower() if type.name else "any"
        if type.kind == TypeKind.ARRAY:
            return f"{self.get_type_string(type.element_type)}[]" if type.element_type else "array"
        if type.kind == TypeKind.OBJECT:
            return type.name or "object"
        if type.kind == TypeKind.CLASS:
            return type.name or "class"
        if type.kind == TypeKind.FUNCTION:
            return f"() => {self.get_type_string(type.return_type)}" if type.return_type else "function"
        return "any"

    # --- Chain resolution ---

    def infer_chain(self, expression: str, offset: Optional[int] = None) -> Optional[TypeDescriptor]:
        parts = split_chain(expression)
        if not parts:
            return None

        current: Optional[TypeDescriptor] = None
        for index, part in enumerate(parts):
            match = CHAIN_SEGMENT.match(part)
            name, calls = match.group(1), len(match.group(2)) // len(CALL)
            if index == 0:
                current = self._resolve_head(name, offset)
            else:
                current = self.resolve_member(current, name)
            for _ in range(calls):
                current = self.call_result(current)
            if current is None:
                return None
        return current

    def _resolve_head(self, name: str, offset: Optional[int]) -> Optional[TypeDescriptor]:
        if name == "this":
            scope = self._scope_for(offset)
            this_type = scope.get_this_type() if scope else None
            return None if this_type is None or this_type.is_unknown else this_type
        if name in LITERAL_HEAD_TYPES:
            return LITERAL_HEAD_TYPES[name]()
        return self.get_type_of_identifier(name, offset)

    def call_result(self, type: Optional[TypeDescriptor]) -> Optional[TypeDescriptor]:
        """Type of calling a value. Catalog members already stand for their return type."""
        if type is None:
            return None
        if type.kind == TypeKind.FUNCTION:
            return type.return_type
        if type.kind == TypeKind.CLASS:
            return None
        return type

    def get_type_of_identifier(self, name: str, offset: Optional[int] = None) -> Optional[TypeDescriptor]:
        global_object = self.builtins.get_global_object(name)
        if global_object:
            return create_named_object(global_object)

        scope = self._scope_for(offset)
        symbol = scope.resolve(name) if scope else None
        if symbol is None or symbol.type is None or symbol.type.is_unknown:
            return None
        return symbol.type

    def resolve_member(self, type: Optional[TypeDescriptor], member: str) -> Optional[TypeDescriptor]:
        """Type of `<type>.<member>`; for catalog methods this is the method's return type."""
        if type is None or type.is_unknown:
            return None

        if member == ELEMENT_ACCESS:
            return self._resolve_element(type)

        if type.kind == TypeKind.PRIMITIVE and type.name:
            return parse_return_type(self.builtins.get_method_return_type(type.name, member))

        if type.kind == TypeKind.ARRAY:
            substitutions = {"T": type.element_type} if type.element_type else None
            return parse_return_type(self.builtins.get_method_return_type("Array", member), substitutions)

        if type.kind == TypeKind.OBJECT and type.name:
            signature = self.builtins.get_method_return_type(type.name, member)
            if signature is None:
                signature = self.builtins.get_all_members(type.name).get(member, {}).get("returns")
            return parse_return_type(signature)

        if type.kind == TypeKind.OBJECT and type.shape:
            found = type.shape.get(member)
            return None if found is None or found.is_unknown else found

        if type.kind == TypeKind.CLASS:
            for class_member in self._class_members(type):
                if class_member.name == member:
                    return class_member.type
            return None

        if type.kind == TypeKind.FUNCTION:
            return {"length": create_primitive("Number"), "name": create_primitive("String"), "bind": create_function(type)}.get(member)

        return None

    def _resolve_element(self, type: TypeDescriptor) -> Optional[TypeDescriptor]:
        if type.kind == TypeKind.ARRAY:
            return type.element_type
        if type.kind == TypeKind.PRIMITIVE and type.name == "String":
            return type
        if type.kind == TypeKind.OBJECT and type.name:
            # Array-likes such as NodeList index to whatever `item()` returns.
            return parse_return_type(self.builtins.get_all_members(type.name).get("item", {}).get("returns"))
        return None

    # --- Member listing ---

    def get_members_of_type(self, type: Optional[TypeDescriptor]) -> List[CompletionItem]:
        if type is None or type.is_unknown:
            return self._get_unknown_type_members()
        if type.kind == TypeKind.PRIMITIVE:
            return self._format_members(self.builtins.get_type_members(type.name or "") or {})
        if type.kind == TypeKind.ARRAY:
            return self._format_members(self.builtins.get_type_members("Array"), element_type=type.element_type)
        if type.kind == TypeKind.OBJECT:
            if type.name:
                return self._get_named_type_members(type.name)
            if type.shape is not None:
                return self._get_object_shape_members(type.shape)
            return self._get_generic_object_members()
        if type.kind == TypeKind.CLASS:
            return self._get_class_members(type)
        if type.kind == TypeKind.FUNCTION:
            return [
                CompletionItem(label=label, insert_text=label, kind=kind, type_info=info)
                for label, kind, info in FUNCTION_MEMBERS
            ]
        return self._get_unknown_type_members()

    def _get_named_type_members(self, type_name: str) -> List[CompletionItem]:
        members = self.builtins.get_all_members(type_name)
        if members:
            return self._format_members(members)
        statics = self.builtins.get_static_members(type_name)
        if statics:
            return self._format_members(statics)
        return self._get_generic_object_members()

    def _get_object_shape_members(self, shape: Dict[str, TypeDescriptor]) -> List[CompletionItem]:
        items = []
        for key, prop_type in shape.items():
            if prop_type.is_unknown:
                type_info = "any"
            else:
                type_info = prop_type.name or prop_type.kind.value
            items.append(
                CompletionItem(
                    label=key,
                    insert_text=key,
                    kind="method" if prop_type.kind == TypeKind.FUNCTION else "property",
                    type_info=type_info,
                    is_unknown=prop_type.is_unknown,
                )
            )
        return items

    def _class_members(self, type: TypeDescriptor) -> List[ClassMember]:
        """Recorded members plus any the scope tree knows about, filtered by static-ness."""
        members = list(type.members or [])
        if type.name and self.scope_manager is not None:
            known = {member.name for member in members}
            members.extend(member for member in self.scope_manager.get_class_members(type.name) if member.name not in known)
        # An instance sees prototype members; the class itself sees its statics.
        return [member for member in members if member.is_static != type.is_instance]

    def _get_class_members(self, type: TypeDescriptor) -> List[CompletionItem]:
        items = []
        for member in self._class_members(type):
            is_method = member.kind == "method" or (member.type is not None and member.type.kind == TypeKind.FUNCTION)
            items.append(
                CompletionItem(
                    label=member.name,
                    insert_text=member.name,
                    kind="method" if is_method else "property",
                    type_info=self.get_type_string(member.type),
                    is_unknown=member.type is None or member.type.is_unknown,
                    sort_order=2 if member.name.startswith("_") else 0,
                )
            )
        items.sort(key=lambda item: item.sort_order)
        return items

    def _get_generic_object_members(self) -> List[CompletionItem]:
        return self._format_members(self.builtins.get_type_members("Object") or {})

    def _get_unknown_type_members(self) -> List[CompletionItem]:
        """Deduplicated union of String, Array and Object members, all flagged unknown."""
        items: Dict[str, CompletionItem] = {}
        for type_name in ("String", "Array", "Object"):
            for name, member in (self.builtins.get_type_members(type_name) or {}).items():
                if name in items:
                    continue
                items[name] = CompletionItem(
                    label=name,
                    insert_text=name,
                    kind="property" if member.get("is_property") else "method",
                    type_info=member.get("returns") or "any",
                    is_unknown=True,
                    sort_order=1,
                )
        return sorted(items.values(), key=lambda item: (item.is_unknown, item.label.lower(), item.label))

    def _format_members(self, members: Dict[str, dict], element_type: Optional[TypeDescriptor] = None) -> List[CompletionItem]:
        items = []
        for name, member in members.items():
            type_info = member.get("returns") or "any"
            if type_info == "T" and element_type is not None:
                type_info = self.get_type_string(element_type)
            items.append(
                CompletionItem(
                    label=name,
                    insert_text=name,
                    kind="property" if member.get("is_property") else "method",
                    type_info=type_info,
                )
            )
        return items

    # --- Position helpers ---

    def _offset_for(self, line: Optional[int], column: Optional[int], offset: Optional[int]) -> Optional[int]:
        if offset is not None:
            return offset
        if line is not None and self.document is not None:
            return self.document.position_to_offset(line, column or 0)
        return None

    def _scope_for(self, offset: Optional[int]) -> Optional[Scope]:
        if self.scope_manager is None:
            return None
        if offset is None:
            return self.scope_manager.get_current_scope()
        return self.scope_manager.get_scope_at_offset(offset)
