"""
Builds the scope tree of a document from its AST.

The builder walks the program once. Every construct that opens a lexical region
(function, arrow, class, block, loop, catch clause) enters a scope at the
node's start and exits it at the node's end, so child ranges always nest inside
their parent. Declarations are typed on the way using a small expression
inferrer; the types feed the member completion of later chains.
"""

from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..inference.builtins import GLOBAL_FUNCTIONS, GLOBAL_NAMES, GLOBAL_OBJECTS, BuiltinTypes
from ..inference.descriptors import (
    ClassMember,
    TypeDescriptor,
    TypeKind,
    create_array,
    create_class,
    create_function,
    create_instance,
    create_named_object,
    create_object,
    create_primitive,
    create_unknown,
    with_member,
)
from ..inference.engine import TypeInferenceEngine
from ..inference.signature import parse_return_type
from ..parser.classes import *
from ..parser.parser import parse_program
from ..parser.visitor import NodeVisitor, iter_child_nodes
from . import symbol as symbols
from .kinds import ScopeKind
from .scope_manager import ScopeManager
from .symbol import Symbol

# Array methods whose callback receives the element as its first argument.
ARRAY_CALLBACK_METHODS = frozenset(
    {"forEach", "map", "filter", "find", "findIndex", "findLast", "findLastIndex", "some", "every", "flatMap", "sort"}
)

ARITHMETIC_OPERATORS = frozenset({"-", "*", "/", "%", "**", "&", "|", "^", "<<", ">>", ">>>"})
COMPARISON_OPERATORS = frozenset({"==", "!=", "===", "!==", "<", ">", "<=", ">=", "instanceof", "in"})

AnyFunction = Union[ArrowFunction, FunctionExpression, FunctionDeclaration]
AnyClass = Union[ClassExpression, ClassDeclaration]

# Nodes whose left-hand child continues a chain.
CHAIN_NODES = (MemberExpression, CallExpression, BinaryExpression)


def _property_name(key: ASTNode, computed: bool = False) -> Optional[str]:
    """Static name of an object or class member key, None for computed keys."""
    if computed:
        return key.value if isinstance(key, StringLiteral) else None
    if isinstance(key, Identifier):
        return key.name
    if isinstance(key, StringLiteral):
        return key.value
    if isinstance(key, NumberLiteral):
        return key.raw
    return None


def _chain_child(node: ASTNode) -> ASTNode:
    if isinstance(node, MemberExpression):
        return node.object
    if isinstance(node, CallExpression):
        return node.callee
    return node.left


class ScopeBuilder(NodeVisitor):
    """
    Populates a ScopeManager from a Program. Use `build_scopes` rather than
    driving the visitor by hand.
    """

    def __init__(self, scope_manager: Optional[ScopeManager] = None):
        self.scope_manager = scope_manager or ScopeManager()
        self.builtins = BuiltinTypes()
        self.engine = TypeInferenceEngine(self.scope_manager)
        # Types of function and class nodes once their bodies have been visited.
        self._node_types: Dict[int, TypeDescriptor] = {}
        # Element types handed to array-method callbacks, keyed by the callback node.
        self._param_hints: Dict[int, TypeDescriptor] = {}

    def build(self, program: Program) -> ScopeManager:
        self.define_builtins()
        self.visit(program)
        return self.scope_manager

    def define_builtins(self):
        for name, type_name in {**GLOBAL_OBJECTS, **GLOBAL_NAMES}.items():
            self.scope_manager.define(symbols.create_builtin(name, create_named_object(type_name)))
        for name, returns in GLOBAL_FUNCTIONS.items():
            self.scope_manager.define(symbols.create_builtin(name, create_function(parse_return_type(returns))))

    # --- Statements ---

    def visit_Program(self, node: Program):
        for statement in node.body:
            self.visit(statement)

    def visit_VariableDeclaration(self, node: VariableDeclaration):
        for declarator in node.declarations:
            initial_type = self._infer(declarator.init)
            declared = self._declare_pattern(declarator.id, initial_type, node.kind, declarator.start)
            if declarator.init is None:
                continue
            self.visit(declarator.init)
            # Functions (also those nested in object literals) know their return type only once visited.
            if isinstance(declarator.id, Identifier):
                final_type = self._infer(declarator.init)
                if final_type is not None:
                    declared[0].type = final_type

    def visit_FunctionDeclaration(self, node: FunctionDeclaration):
        function_symbol = None
        if node.id is not None:
            function_symbol = self.scope_manager.define_function(node.id.name, create_function(), node.start)
        self._visit_function(node, function_symbol)

    def visit_ClassDeclaration(self, node: ClassDeclaration):
        self._visit_class(node)

    def visit_BlockStatement(self, node: BlockStatement):
        self.scope_manager.enter_block_scope(node.start)
        for statement in node.body:
            self.visit(statement)
        self.scope_manager.exit_scope(node.end)

    def visit_ForStatement(self, node: ForStatement):
        self.scope_manager.enter_block_scope(node.start)
        self.generic_visit(node)
        self.scope_manager.exit_scope(node.end)

    def visit_ForInStatement(self, node: ForInStatement):
        self.scope_manager.enter_block_scope(node.start)
        self.visit(node.right)
        element_type = self._iteration_type(node)
        if isinstance(node.left, VariableDeclaration):
            for declarator in node.left.declarations:
                self._declare_pattern(declarator.id, element_type, node.left.kind, declarator.start)
        else:
            self.visit(node.left)
        self.visit(node.body)
        self.scope_manager.exit_scope(node.end)

    def visit_CatchClause(self, node: CatchClause):
        self.scope_manager.enter_catch_scope(node.start)
        if isinstance(node.param, Identifier):
            self.scope_manager.define_parameter(node.param.name, create_named_object("Error"), node.param.start)
        elif node.param is not None:
            self._declare_parameter_pattern(node.param, None)
        for statement in node.body.body:
            self.visit(statement)
        self.scope_manager.exit_scope(node.end)

    # --- Expressions that open scopes ---

    def visit_FunctionExpression(self, node: FunctionExpression):
        self._visit_function(node)

    def visit_ArrowFunction(self, node: ArrowFunction):
        self._visit_function(node)

    def visit_ClassExpression(self, node: ClassExpression):
        self._visit_class(node)

    # --- Chains ---
    # `a.b.c()`, `x + y + z` nest to the left; they are walked head first with a loop.

    def visit_CallExpression(self, node: CallExpression):
        self._visit_chain(node)

    def visit_MemberExpression(self, node: MemberExpression):
        self._visit_chain(node)

    def visit_BinaryExpression(self, node: BinaryExpression):
        self._visit_chain(node)

    def _visit_chain(self, node: ASTNode):
        links = []
        while isinstance(node, CHAIN_NODES):
            links.append(node)
            node = _chain_child(node)
        self.visit(node)
        for link in reversed(links):
            if isinstance(link, CallExpression):
                self._record_callback_hint(link)
                for argument in link.arguments:
                    self.visit(argument)
            elif isinstance(link, MemberExpression):
                if link.computed:
                    self.visit(link.property)
            else:
                self.visit(link.right)

    def _record_callback_hint(self, node: CallExpression):
        callee = node.callee
        if isinstance(callee, MemberExpression) and not callee.computed and node.arguments:
            method = _property_name(callee.property)
            callback = node.arguments[0]
            if method in ARRAY_CALLBACK_METHODS and isinstance(callback, FUNCTION_NODES):
                receiver = self._infer(callee.object)
                if receiver is not None and receiver.kind == TypeKind.ARRAY and receiver.element_type is not None:
                    self._param_hints[id(callback)] = receiver.element_type

    # --- Assignments ---

    def visit_AssignmentExpression(self, node: AssignmentExpression):
        target = node.left
        if isinstance(target, MemberExpression) and isinstance(target.object, ThisExpression) and not target.computed:
            self._record_this_assignment(target, node.right)
        elif isinstance(target, Identifier) and node.operator == "=":
            symbol = self.scope_manager.resolve(target.name)
            if symbol is not None and (symbol.type is None or symbol.type.is_unknown):
                symbol.type = self._infer(node.right)
        self.generic_visit(node)

    # --- Functions ---

    def _visit_function(self, node: AnyFunction, function_symbol: Optional[Symbol] = None) -> TypeDescriptor:
        if isinstance(node, ArrowFunction):
            self.scope_manager.enter_arrow_scope(node.start)
        else:
            self.scope_manager.enter_function_scope(node.start, function_symbol)
            if isinstance(node, FunctionExpression) and node.id is not None:
                # A named function expression can refer to itself.
                self.scope_manager.define_function(node.id.name, create_function(), node.id.start)

        hint = self._param_hints.pop(id(node), None)
        for index, param in enumerate(node.params):
            self._define_parameter(param, hint if index == 0 else None)

        if isinstance(node, ArrowFunction) and node.expression:
            self.visit(node.body)
            return_type = self._infer(node.body)
        else:
            for statement in node.body.body:
                self.visit(statement)
            return_type = self._infer_return_type(node.body)

        if node.is_async:
            return_type = create_named_object("Promise")
        self.scope_manager.exit_scope(node.end)

        function_type = create_function(return_type)
        self._node_types[id(node)] = function_type
        if function_symbol is not None:
            function_symbol.type = function_type
        return function_type

    def _define_parameter(self, param: Parameter, hint: Optional[TypeDescriptor]):
        if param.default_value is not None:
            self.visit(param.default_value)
        if not isinstance(param.id, Identifier):
            self._declare_parameter_pattern(param.id, hint)
            return
        if param.rest:
            param_type = create_array(hint)
        else:
            param_type = hint or self._infer(param.default_value)
        self.scope_manager.define_parameter(param.id.name, param_type, param.id.start)

    def _declare_parameter_pattern(self, pattern: ASTNode, source_type: Optional[TypeDescriptor]):
        for name, start, found in self._pattern_bindings(pattern, source_type):
            self.scope_manager.define_parameter(name, found, start)

    def _infer_return_type(self, body: BlockStatement) -> Optional[TypeDescriptor]:
        """Type of the first `return <expr>` in the body, ignoring nested functions and classes."""
        stack = list(reversed(body.body))
        while stack:
            current = stack.pop()
            if isinstance(current, FUNCTION_NODES + CLASS_NODES):
                continue
            if isinstance(current, ReturnStatement):
                if current.argument is not None:
                    return self._infer(current.argument)
                continue
            stack.extend(reversed(list(iter_child_nodes(current))))
        return None

    # --- Classes ---

    def _visit_class(self, node: AnyClass) -> TypeDescriptor:
        name = node.id.name if node.id is not None else None
        class_type = create_class(name, self._inherited_members(node.super_class))
        if node.super_class is not None:
            self.visit(node.super_class)

        if isinstance(node, ClassDeclaration) and name:
            class_symbol = self.scope_manager.define_class(name, class_type, node.start)
        else:
            class_symbol = symbols.create_class(name or "", class_type, node.start)

        self.scope_manager.enter_class_scope(node.start, class_symbol)
        if isinstance(node, ClassExpression) and name:
            self.scope_manager.define(class_symbol)

        # First every member with a shallow type, so method bodies can see each other.
        for member in node.body.body:
            class_member = self._shallow_member(member)
            if class_member is not None:
                class_symbol.type = with_member(class_symbol.type, class_member)

        for member in node.body.body:
            self._visit_class_member(member, class_symbol)

        self.scope_manager.exit_scope(node.end)
        self._node_types[id(node)] = class_symbol.type
        return class_symbol.type

    def _inherited_members(self, super_class: Optional[ASTNode]) -> List[ClassMember]:
        if not isinstance(super_class, Identifier):
            return []
        parent = self.scope_manager.resolve(super_class.name)
        if parent is None or parent.type is None or parent.type.kind != TypeKind.CLASS:
            return []
        return list(parent.type.members or [])

    def _shallow_member(self, member: ASTNode) -> Optional[ClassMember]:
        name = _property_name(member.key, member.computed)
        if name is None:
            return None
        if isinstance(member, MethodDefinition):
            if member.kind == "constructor":
                return None
            if member.kind == "get":
                return ClassMember(name=name, kind="getter", is_static=member.is_static)
            if member.kind == "set":
                return ClassMember(name=name, kind="setter", is_static=member.is_static)
            return ClassMember(name=name, kind="method", type=create_function(), is_static=member.is_static)
        field_type = self._infer(member.value)
        return ClassMember(name=name, kind="property", type=field_type, is_static=member.is_static)

    def _visit_class_member(self, member: ASTNode, class_symbol: Symbol):
        if isinstance(member, PropertyDefinition):
            if member.value is None:
                return
            self.visit(member.value)
            if isinstance(member.value, FUNCTION_NODES + CLASS_NODES):
                refined = self._shallow_member(member)
                if refined is not None:
                    class_symbol.type = with_member(class_symbol.type, refined)
            return

        function_type = self._visit_function(member.value)
        name = _property_name(member.key, member.computed)
        if name is None or member.kind in ("constructor", "set"):
            return
        if member.kind == "get":
            refined = ClassMember(name=name, kind="getter", type=function_type.return_type, is_static=member.is_static)
        else:
            refined = ClassMember(name=name, kind="method", type=function_type, is_static=member.is_static)
        class_symbol.type = with_member(class_symbol.type, refined)

    def _this_class_symbol(self) -> Optional[Symbol]:
        """The class `this` refers to at the current position, if any."""
        scope = self.scope_manager.current_scope
        while scope is not None and scope.kind not in (ScopeKind.FUNCTION, ScopeKind.CLASS):
            scope = scope.parent
        if scope is None:
            return None
        class_scope = scope.get_enclosing_class_scope()
        return class_scope.class_symbol if class_scope is not None else None

    def _record_this_assignment(self, target: MemberExpression, value: ASTNode):
        class_symbol = self._this_class_symbol()
        name = _property_name(target.property)
        if class_symbol is None or class_symbol.type is None or name is None:
            return
        for existing in class_symbol.type.members or []:
            if existing.name == name and not existing.is_static and (existing.kind != "property" or existing.type is not None):
                return
        member = ClassMember(name=name, kind="property", type=self._infer(value))
        class_symbol.type = with_member(class_symbol.type, member)

    # --- Declarations ---

    def _declare_pattern(self, pattern: ASTNode, source_type: Optional[TypeDescriptor], kind: str, start: int) -> List[Symbol]:
        if isinstance(pattern, Identifier):
            return [self.scope_manager.define_variable(pattern.name, source_type, kind, start)]
        return [
            self.scope_manager.define_variable(name, found, kind, name_start)
            for name, name_start, found in self._pattern_bindings(pattern, source_type)
        ]

    def _pattern_bindings(self, pattern: ASTNode, source_type: Optional[TypeDescriptor]) -> Iterator[Tuple[str, int, Optional[TypeDescriptor]]]:
        """Names bound by a destructuring pattern, each with the type it takes from `source_type`."""
        if isinstance(pattern, Identifier):
            yield pattern.name, pattern.start, source_type
        elif isinstance(pattern, AssignmentExpression):
            yield from self._pattern_bindings(pattern.left, source_type or self._infer(pattern.right))
        elif isinstance(pattern, ObjectLiteral):
            for prop in pattern.properties:
                if isinstance(prop, SpreadElement):
                    yield from self._pattern_bindings(prop.argument, None)
                elif isinstance(prop, Property) and prop.value is not None:
                    key = _property_name(prop.key, prop.computed)
                    yield from self._pattern_bindings(prop.value, self.engine.resolve_member(source_type, key) if key else None)
        elif isinstance(pattern, ArrayLiteral):
            element_type = source_type.element_type if source_type is not None and source_type.kind == TypeKind.ARRAY else None
            for element in pattern.elements:
                if isinstance(element, SpreadElement):
                    yield from self._pattern_bindings(element.argument, source_type)
                elif element is not None:
                    yield from self._pattern_bindings(element, element_type)

    def _iteration_type(self, node: ForInStatement) -> Optional[TypeDescriptor]:
        if not node.of:
            return create_primitive("String")
        iterated = self._infer(node.right)
        if iterated is None:
            return None
        if iterated.kind == TypeKind.ARRAY:
            return iterated.element_type
        if iterated.kind == TypeKind.PRIMITIVE and iterated.name == "String":
            return iterated
        return self.engine.resolve_member(iterated, "[]")

    # --- Expression typing ---

    def _infer(self, node: Optional[ASTNode]) -> Optional[TypeDescriptor]:
        """Best-effort type of an expression node; None when nothing is known."""
        if node is None:
            return None
        inferrer = getattr(self, f"_infer_{node.type}", None)
        return inferrer(node) if inferrer is not None else None

    def _infer_StringLiteral(self, node):
        return create_primitive("String")

    def _infer_TemplateLiteral(self, node):
        return create_primitive("String")

    def _infer_NumberLiteral(self, node):
        return create_primitive("Number")

    def _infer_BooleanLiteral(self, node):
        return create_primitive("Boolean")

    def _infer_RegexLiteral(self, node):
        return create_named_object("RegExp")

    def _infer_ArrayLiteral(self, node: ArrayLiteral):
        for element in node.elements:
            if element is None:
                continue
            if isinstance(element, SpreadElement):
                spread = self._infer(element.argument)
                return create_array(spread.element_type if spread is not None and spread.kind == TypeKind.ARRAY else None)
            return create_array(self._infer(element))
        return create_array()

    def _infer_ObjectLiteral(self, node: ObjectLiteral):
        shape: Dict[str, TypeDescriptor] = {}
        for prop in node.properties:
            if isinstance(prop, SpreadElement):
                spread = self._infer(prop.argument)
                if spread is not None and spread.shape:
                    shape.update(spread.shape)
                continue
            name = _property_name(prop.key, prop.computed)
            if name is None:
                continue
            if prop.kind == "get":
                getter = self._infer(prop.value)
                value_type = getter.return_type if getter is not None else None
            elif prop.kind == "set":
                continue
            else:
                value_type = self._infer(prop.value)
            shape[name] = value_type or create_unknown()
        return create_object(shape)

    def _infer_Identifier(self, node: Identifier):
        symbol = self.scope_manager.resolve(node.name)
        if symbol is None or symbol.type is None or symbol.type.is_unknown:
            return None
        return symbol.type

    def _infer_ThisExpression(self, node):
        this_type = self.scope_manager.get_this_type()
        return None if this_type.is_unknown else this_type

    def _infer_NewExpression(self, node: NewExpression):
        if not isinstance(node.callee, Identifier):
            return None
        symbol = self.scope_manager.resolve(node.callee.name)
        if symbol is not None and symbol.type is not None and symbol.type.kind == TypeKind.CLASS:
            return create_instance(symbol.type)
        constructed = self.builtins.get_constructor_type(node.callee.name)
        if constructed is None:
            return None
        return parse_return_type(constructed)

    def _infer_CallExpression(self, node: CallExpression):
        return self._infer_access_chain(node)

    def _infer_MemberExpression(self, node: MemberExpression):
        return self._infer_access_chain(node)

    def _infer_access_chain(self, node: ASTNode) -> Optional[TypeDescriptor]:
        """Types `head.a().b[0]` from the head outwards."""
        links = []
        while isinstance(node, (MemberExpression, CallExpression)):
            links.append(node)
            node = _chain_child(node)
        result = self._infer(node)
        for link in reversed(links):
            if isinstance(link, MemberExpression):
                result = self._member_type(result, link)
            else:
                result = self._call_type(result, link)
        return result

    def _call_type(self, callee_type: Optional[TypeDescriptor], node: CallExpression) -> Optional[TypeDescriptor]:
        callee = node.callee
        if isinstance(callee, Identifier):
            # `String(x)`, `Number(x)`: calling a catalog constructor converts.
            converted = self.builtins.get_constructor_type(callee.name)
            symbol = self.scope_manager.resolve(callee.name)
            if converted is not None and (symbol is None or symbol.type is None or symbol.type.kind != TypeKind.CLASS):
                return parse_return_type(converted)
        return self.engine.call_result(callee_type)

    def _member_type(self, receiver: Optional[TypeDescriptor], node: MemberExpression) -> Optional[TypeDescriptor]:
        if node.computed:
            key = node.property.value if isinstance(node.property, StringLiteral) else "[]"
        else:
            key = _property_name(node.property)
        if receiver is None or key is None:
            return None
        # Statics of catalog globals: `Array.isArray`, `Math.max`.
        return self.engine.resolve_member(receiver, key)

    def _infer_ConditionalExpression(self, node: ConditionalExpression):
        return self._infer(node.consequent) or self._infer(node.alternate)

    def _infer_BinaryExpression(self, node: BinaryExpression):
        operations = []
        while isinstance(node, BinaryExpression):
            operations.append(node)
            node = node.left
        result = self._infer(node)
        for operation in reversed(operations):
            result = self._binary_type(operation, result)
        return result

    def _binary_type(self, node: BinaryExpression, left: Optional[TypeDescriptor]) -> Optional[TypeDescriptor]:
        if node.operator in COMPARISON_OPERATORS:
            return create_primitive("Boolean")
        if node.operator in ARITHMETIC_OPERATORS:
            return create_primitive("Number")
        if node.operator in ("||", "??"):
            return left or self._infer(node.right)
        if node.operator == "&&":
            return self._infer(node.right)
        if node.operator == "+":
            right = self._infer(node.right)
            for side in (left, right):
                if side is not None and side.kind == TypeKind.PRIMITIVE and side.name == "String":
                    return side
            if left is not None and right is not None and left.name == right.name == "Number":
                return left
        return None

    def _infer_UnaryExpression(self, node: UnaryExpression):
        if node.operator in ("!", "delete"):
            return create_primitive("Boolean")
        if node.operator == "typeof":
            return create_primitive("String")
        if node.operator in ("-", "+", "~"):
            return create_primitive("Number")
        if node.operator == "await":
            awaited = self._infer(node.argument)
            if awaited is not None and awaited.kind == TypeKind.OBJECT and awaited.name == "Promise":
                return None
            return awaited
        return None

    def _infer_UpdateExpression(self, node):
        return create_primitive("Number")

    def _infer_AssignmentExpression(self, node: AssignmentExpression):
        return self._infer(node.right)

    def _infer_SequenceExpression(self, node: SequenceExpression):
        return self._infer(node.expressions[-1]) if node.expressions else None

    def _infer_ArrowFunction(self, node):
        return self._node_types.get(id(node)) or create_function()

    def _infer_FunctionExpression(self, node):
        return self._node_types.get(id(node)) or create_function()

    def _infer_ClassExpression(self, node):
        return self._node_types.get(id(node))


def build_scopes(program_or_text: Union[Program, str]) -> ScopeManager:
    """
    Builds the scope tree for a document. Accepts source text or an already
    parsed Program; text that does not parse raises ParseError.
    """
    program = parse_program(program_or_text) if isinstance(program_or_text, str) else program_or_text
    return ScopeBuilder().build(program)


def build_builtin_scopes() -> ScopeManager:
    """A scope tree holding only the global builtins, for documents that do not parse."""
    builder = ScopeBuilder()
    builder.define_builtins()
    return builder.scope_manager
