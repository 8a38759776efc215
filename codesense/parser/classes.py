"""
Defines the data structures (contracts) for the Abstract Syntax Tree produced
by the expression parser.

Every node is an immutable pydantic model tagged by a `type` literal and
carrying the `[start, end)` character offsets it was parsed from. Child slots
are typed with the discriminated `Node` union declared at the bottom of the
module, so a serialized tree can be validated back into the same classes.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# --- Core Data Structures ---


class ASTNode(BaseModel):
    """A base class for all AST nodes, ensuring they have a source range."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    def clone(self):
        """Shallow copy, used when a node is transplanted into another context."""
        return self.model_copy()


# --- Literals and Identifiers ---


class StringLiteral(ASTNode):
    type: Literal["StringLiteral"] = "StringLiteral"
    value: str
    raw: str


class NumberLiteral(ASTNode):
    type: Literal["NumberLiteral"] = "NumberLiteral"
    value: Union[int, float]
    raw: str


class BooleanLiteral(ASTNode):
    type: Literal["BooleanLiteral"] = "BooleanLiteral"
    value: bool


class NullLiteral(ASTNode):
    type: Literal["NullLiteral"] = "NullLiteral"


class UndefinedLiteral(ASTNode):
    type: Literal["UndefinedLiteral"] = "UndefinedLiteral"


class RegexLiteral(ASTNode):
    type: Literal["RegexLiteral"] = "RegexLiteral"
    raw: str


class TemplateLiteral(ASTNode):
    type: Literal["TemplateLiteral"] = "TemplateLiteral"
    value: str
    expressions: List["Node"] = []


class ArrayLiteral(ASTNode):
    type: Literal["ArrayLiteral"] = "ArrayLiteral"
    elements: List[Optional["Node"]]  # None marks a hole: [a, , b]


class Property(ASTNode):
    type: Literal["Property"] = "Property"
    key: "Node"
    value: Optional["Node"] = None
    computed: bool = False
    shorthand: bool = False
    kind: Literal["init", "get", "set", "method"] = "init"


class ObjectLiteral(ASTNode):
    type: Literal["ObjectLiteral"] = "ObjectLiteral"
    properties: List["Node"]


class Identifier(ASTNode):
    type: Literal["Identifier"] = "Identifier"
    name: str


class ThisExpression(ASTNode):
    type: Literal["ThisExpression"] = "ThisExpression"


# --- Expressions ---


class MemberExpression(ASTNode):
    type: Literal["MemberExpression"] = "MemberExpression"
    object: "Node"
    property: "Node"
    computed: bool = False
    optional: bool = False


class CallExpression(ASTNode):
    type: Literal["CallExpression"] = "CallExpression"
    callee: "Node"
    arguments: List["Node"]
    optional: bool = False


class NewExpression(ASTNode):
    type: Literal["NewExpression"] = "NewExpression"
    callee: "Node"
    arguments: List["Node"] = []


class SpreadElement(ASTNode):
    type: Literal["SpreadElement"] = "SpreadElement"
    argument: "Node"


class BinaryExpression(ASTNode):
    type: Literal["BinaryExpression"] = "BinaryExpression"
    operator: str
    left: "Node"
    right: "Node"


class UnaryExpression(ASTNode):
    type: Literal["UnaryExpression"] = "UnaryExpression"
    operator: str
    argument: "Node"
    prefix: bool = True


class UpdateExpression(ASTNode):
    type: Literal["UpdateExpression"] = "UpdateExpression"
    operator: Literal["++", "--"]
    argument: "Node"
    prefix: bool


class ConditionalExpression(ASTNode):
    type: Literal["ConditionalExpression"] = "ConditionalExpression"
    test: "Node"
    consequent: "Node"
    alternate: "Node"


class AssignmentExpression(ASTNode):
    type: Literal["AssignmentExpression"] = "AssignmentExpression"
    operator: str
    left: "Node"
    right: "Node"


class SequenceExpression(ASTNode):
    type: Literal["SequenceExpression"] = "SequenceExpression"
    expressions: List["Node"]


# --- Functions and Classes ---


class Parameter(ASTNode):
    type: Literal["Parameter"] = "Parameter"
    id: "Node"  # an Identifier, or an object/array pattern
    default_value: Optional["Node"] = None
    rest: bool = False

    @property
    def name(self) -> str:
        return self.id.name if isinstance(self.id, Identifier) else ""


class ArrowFunction(ASTNode):
    type: Literal["ArrowFunction"] = "ArrowFunction"
    params: List[Parameter]
    body: "Node"
    expression: bool  # True when the body is a bare expression rather than a block
    is_async: bool = False


class FunctionExpression(ASTNode):
    type: Literal["FunctionExpression"] = "FunctionExpression"
    id: Optional[Identifier] = None
    params: List[Parameter]
    body: "BlockStatement"
    is_async: bool = False
    generator: bool = False


class FunctionDeclaration(ASTNode):
    type: Literal["FunctionDeclaration"] = "FunctionDeclaration"
    id: Optional[Identifier] = None
    params: List[Parameter]
    body: "BlockStatement"
    is_async: bool = False
    generator: bool = False


class MethodDefinition(ASTNode):
    type: Literal["MethodDefinition"] = "MethodDefinition"
    key: "Node"
    value: FunctionExpression
    kind: Literal["constructor", "method", "get", "set"] = "method"
    computed: bool = False
    is_static: bool = False


class PropertyDefinition(ASTNode):
    type: Literal["PropertyDefinition"] = "PropertyDefinition"
    key: "Node"
    value: Optional["Node"] = None
    computed: bool = False
    is_static: bool = False


class ClassBody(ASTNode):
    type: Literal["ClassBody"] = "ClassBody"
    body: List[Union[MethodDefinition, PropertyDefinition]]


class ClassExpression(ASTNode):
    type: Literal["ClassExpression"] = "ClassExpression"
    id: Optional[Identifier] = None
    super_class: Optional["Node"] = None
    body: ClassBody


class ClassDeclaration(ASTNode):
    type: Literal["ClassDeclaration"] = "ClassDeclaration"
    id: Optional[Identifier] = None
    super_class: Optional["Node"] = None
    body: ClassBody


# --- Statements ---


class VariableDeclarator(ASTNode):
    type: Literal["VariableDeclarator"] = "VariableDeclarator"
    id: "Node"
    init: Optional["Node"] = None


class VariableDeclaration(ASTNode):
    type: Literal["VariableDeclaration"] = "VariableDeclaration"
    kind: Literal["var", "let", "const"]
    declarations: List[VariableDeclarator]


class ReturnStatement(ASTNode):
    type: Literal["ReturnStatement"] = "ReturnStatement"
    argument: Optional["Node"] = None


class BlockStatement(ASTNode):
    type: Literal["BlockStatement"] = "BlockStatement"
    body: List["Node"]


class ExpressionStatement(ASTNode):
    type: Literal["ExpressionStatement"] = "ExpressionStatement"
    expression: "Node"


class EmptyStatement(ASTNode):
    type: Literal["EmptyStatement"] = "EmptyStatement"


class IfStatement(ASTNode):
    type: Literal["IfStatement"] = "IfStatement"
    test: "Node"
    consequent: "Node"
    alternate: Optional["Node"] = None


class ForStatement(ASTNode):
    type: Literal["ForStatement"] = "ForStatement"
    init: Optional["Node"] = None
    test: Optional["Node"] = None
    update: Optional["Node"] = None
    body: "Node"


class ForInStatement(ASTNode):
    type: Literal["ForInStatement"] = "ForInStatement"
    left: "Node"
    right: "Node"
    body: "Node"
    of: bool = False


class WhileStatement(ASTNode):
    type: Literal["WhileStatement"] = "WhileStatement"
    test: "Node"
    body: "Node"


class DoWhileStatement(ASTNode):
    type: Literal["DoWhileStatement"] = "DoWhileStatement"
    body: "Node"
    test: "Node"


class CatchClause(ASTNode):
    type: Literal["CatchClause"] = "CatchClause"
    param: Optional["Node"] = None
    body: BlockStatement


class TryStatement(ASTNode):
    type: Literal["TryStatement"] = "TryStatement"
    block: BlockStatement
    handler: Optional[CatchClause] = None
    finalizer: Optional[BlockStatement] = None


class ThrowStatement(ASTNode):
    type: Literal["ThrowStatement"] = "ThrowStatement"
    argument: "Node"


class BreakStatement(ASTNode):
    type: Literal["BreakStatement"] = "BreakStatement"
    label: Optional[Identifier] = None


class ContinueStatement(ASTNode):
    type: Literal["ContinueStatement"] = "ContinueStatement"
    label: Optional[Identifier] = None


# --- Top-level Structure ---


class Program(ASTNode):
    """The root of the tree, representing a whole document."""

    type: Literal["Program"] = "Program"
    body: List["Node"]


ALL_NODE_CLASSES = (
    StringLiteral, NumberLiteral, BooleanLiteral, NullLiteral, UndefinedLiteral, RegexLiteral,
    TemplateLiteral, ArrayLiteral, Property, ObjectLiteral, Identifier, ThisExpression,
    MemberExpression, CallExpression, NewExpression, SpreadElement, BinaryExpression,
    UnaryExpression, UpdateExpression, ConditionalExpression, AssignmentExpression,
    SequenceExpression, Parameter, ArrowFunction, FunctionExpression, FunctionDeclaration,
    MethodDefinition, PropertyDefinition, ClassBody, ClassExpression, ClassDeclaration,
    VariableDeclarator, VariableDeclaration, ReturnStatement, BlockStatement, ExpressionStatement,
    EmptyStatement, IfStatement, ForStatement, ForInStatement, WhileStatement, DoWhileStatement,
    CatchClause, TryStatement, ThrowStatement, BreakStatement, ContinueStatement, Program,
)

# A generic type hint for any node in the AST
Node = Annotated[Union[ALL_NODE_CLASSES], Field(discriminator="type")]

FUNCTION_NODES = (ArrowFunction, FunctionExpression, FunctionDeclaration)
CLASS_NODES = (ClassExpression, ClassDeclaration)

for _model in ALL_NODE_CLASSES:
    _model.model_rebuild()
