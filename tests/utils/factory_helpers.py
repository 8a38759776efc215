from typing import List, Optional

from codesense.parser.classes import *


# Offsets are ignored by assert_asts_equal, so every factory uses a zero range.
def get_identifier(name: str):
    return Identifier(start=0, end=0, name=name)


def get_number_literal(value, raw: Optional[str] = None):
    return NumberLiteral(start=0, end=0, value=value, raw=raw if raw is not None else str(value))


def get_string_literal(value: str, quote: str = "'"):
    return StringLiteral(start=0, end=0, value=value, raw=f"{quote}{value}{quote}")


def get_boolean_literal(value: bool):
    return BooleanLiteral(start=0, end=0, value=value)


def get_member(obj, name: str, optional: bool = False):
    return MemberExpression(start=0, end=0, object=obj, property=get_identifier(name), optional=optional)


def get_index(obj, index):
    return MemberExpression(start=0, end=0, object=obj, property=index, computed=True)


def get_call(callee, arguments: Optional[List] = None, optional: bool = False):
    return CallExpression(start=0, end=0, callee=callee, arguments=arguments or [], optional=optional)


def get_new(callee, arguments: Optional[List] = None):
    return NewExpression(start=0, end=0, callee=callee, arguments=arguments or [])


def get_binary(operator: str, left, right):
    return BinaryExpression(start=0, end=0, operator=operator, left=left, right=right)


def get_unary(operator: str, argument):
    return UnaryExpression(start=0, end=0, operator=operator, argument=argument)


def get_update(operator: str, argument, prefix: bool):
    return UpdateExpression(start=0, end=0, operator=operator, argument=argument, prefix=prefix)


def get_assignment(left, right, operator: str = "="):
    return AssignmentExpression(start=0, end=0, operator=operator, left=left, right=right)


def get_param(name: str, default_value=None, rest: bool = False):
    return Parameter(start=0, end=0, id=get_identifier(name), default_value=default_value, rest=rest)


def get_arrow(params: List[Parameter], body, is_async: bool = False):
    return ArrowFunction(start=0, end=0, params=params, body=body, expression=not isinstance(body, BlockStatement), is_async=is_async)


def get_block(body: Optional[List] = None):
    return BlockStatement(start=0, end=0, body=body or [])


def get_return(argument=None):
    return ReturnStatement(start=0, end=0, argument=argument)


def get_expression_statement(expression):
    return ExpressionStatement(start=0, end=0, expression=expression)


def get_declaration(kind: str, name: str, init=None):
    declarator = VariableDeclarator(start=0, end=0, id=get_identifier(name), init=init)
    return VariableDeclaration(start=0, end=0, kind=kind, declarations=[declarator])


def get_property(key: str, value):
    return Property(start=0, end=0, key=get_identifier(key), value=value)


def get_object(properties: List):
    return ObjectLiteral(start=0, end=0, properties=properties)


def get_array(elements: List):
    return ArrayLiteral(start=0, end=0, elements=elements)


def get_program(body: List):
    return Program(start=0, end=0, body=body)
