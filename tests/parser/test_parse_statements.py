from textwrap import dedent

import pytest

from codesense.exceptions import ErrorCode, ParseError
from codesense.parser.classes import *
from codesense.parser.parser import parse_program
from ..utils.assertion_helper import assert_asts_equal
from ..utils.factory_helpers import *


def test_program_spans_whole_document():
    code = "  let a = 1;\n\n"
    program = parse_program(code)
    assert (program.start, program.end) == (0, len(code))


def test_empty_document():
    assert_asts_equal(parse_program(""), get_program([]))


@pytest.mark.parametrize(
    "code, expected_ast",
    [
        pytest.param("let a = 1;", get_declaration("let", "a", get_number_literal(1)), id="let"),
        pytest.param("const b = 'x'", get_declaration("const", "b", get_string_literal("x")), id="const_no_semicolon"),
        pytest.param("var c;", get_declaration("var", "c"), id="var_without_init"),
        pytest.param(
            "a.b = c;",
            get_expression_statement(get_assignment(get_member(get_identifier("a"), "b"), get_identifier("c"))),
            id="expression_statement",
        ),
        pytest.param(";", EmptyStatement(start=0, end=0), id="empty_statement"),
        pytest.param("return;", get_return(), id="bare_return"),
    ],
)
def test_simple_statements(code, expected_ast):
    assert_asts_equal(parse_program(code), get_program([expected_ast]))


def test_multiple_declarators():
    program = parse_program("let a = 1, b, c = a;")
    (declaration,) = program.body
    assert [d.id.name for d in declaration.declarations] == ["a", "b", "c"]
    assert declaration.declarations[1].init is None


def test_destructuring_declaration():
    program = parse_program("const {name, age: years} = user;")
    declarator = program.body[0].declarations[0]
    assert isinstance(declarator.id, ObjectLiteral)
    assert [p.key.name for p in declarator.id.properties] == ["name", "age"]
    assert declarator.id.properties[1].value.name == "years"


def test_statement_ranges_include_semicolon():
    code = "let a = 1;"
    (declaration,) = parse_program(code).body
    assert (declaration.start, declaration.end) == (0, len(code))


def test_return_on_next_line_has_no_argument():
    code = "function f() {\n  return\n  42\n}"
    function = parse_program(code).body[0]
    first, second = function.body.body
    assert isinstance(first, ReturnStatement)
    assert first.argument is None
    assert isinstance(second, ExpressionStatement)


def test_function_declaration():
    # --- ARRANGE ---
    code = "async function load(url, {retries = 3} = {}) { return fetch(url); }"

    # --- ACT ---
    (function,) = parse_program(code).body

    # --- ASSERT ---
    assert isinstance(function, FunctionDeclaration)
    assert function.id.name == "load"
    assert function.is_async is True
    assert function.generator is False
    assert function.params[0].name == "url"
    assert isinstance(function.params[1].id, ObjectLiteral)
    assert function.params[1].name == ""
    assert isinstance(function.params[1].default_value, ObjectLiteral)


def test_generator_function():
    (function,) = parse_program("function* ids() {}").body
    assert function.generator is True


def test_class_declaration():
    code = dedent(
        """
        class Dog extends Animal {
          #secret = 1;
          static create() { return new Dog(); }
          speak() {}
        }
        """
    )
    (cls,) = parse_program(code).body
    assert isinstance(cls, ClassDeclaration)
    assert cls.id.name == "Dog"
    assert [m.key.name for m in cls.body.body] == ["#secret", "create", "speak"]
    assert cls.body.body[1].is_static is True


def test_static_block_is_skipped():
    (cls,) = parse_program("class A { static { init(); } run() {} }").body
    assert [m.key.name for m in cls.body.body] == ["run"]


@pytest.mark.parametrize(
    "code, node_type",
    [
        pytest.param("if (a) b(); else c();", IfStatement, id="if_else"),
        pytest.param("for (let i = 0; i < n; i++) {}", ForStatement, id="for"),
        pytest.param("for (;;) {}", ForStatement, id="for_empty_clauses"),
        pytest.param("for (const x of xs) {}", ForInStatement, id="for_of"),
        pytest.param("for (const k in obj) {}", ForInStatement, id="for_in_declaration"),
        pytest.param("for (k in obj) {}", ForInStatement, id="for_in_expression"),
        pytest.param("while (x) x--;", WhileStatement, id="while"),
        pytest.param("do { x++ } while (x < 3);", DoWhileStatement, id="do_while"),
        pytest.param("try { a() } catch (e) {} finally {}", TryStatement, id="try_catch_finally"),
        pytest.param("try { a() } catch {}", TryStatement, id="optional_catch_binding"),
        pytest.param("throw new Error('x');", ThrowStatement, id="throw"),
        pytest.param("{ let scoped = 1; }", BlockStatement, id="block"),
    ],
)
def test_control_flow_statements(code, node_type):
    (statement,) = parse_program(code).body
    assert isinstance(statement, node_type)
    assert (statement.start, statement.end) == (0, len(code))


def test_for_of_flags():
    for_of = parse_program("for (const x of xs) {}").body[0]
    for_in = parse_program("for (k in obj) {}").body[0]
    assert for_of.of is True
    assert for_in.of is False
    assert for_in.left.name == "k"


def test_break_and_continue_labels():
    code = "for (;;) { break outer; continue }"
    loop = parse_program(code).body[0]
    brk, cont = loop.body.body
    assert isinstance(brk, BreakStatement)
    assert brk.label.name == "outer"
    assert isinstance(cont, ContinueStatement)
    assert cont.label is None


def test_catch_parameter():
    statement = parse_program("try {} catch (err) { err.message }").body[0]
    assert statement.handler.param.name == "err"
    assert statement.finalizer is None


@pytest.mark.parametrize(
    "code, error",
    [
        pytest.param("let = 1", ErrorCode.UNEXPECTED_TOKEN, id="declaration_without_name"),
        pytest.param("function f(a b) {}", ErrorCode.UNEXPECTED_TOKEN, id="missing_parameter_comma"),
        pytest.param("function f(...a, b) {}", ErrorCode.REST_PARAMETER_NOT_LAST, id="rest_not_last"),
        pytest.param("if (a { }", ErrorCode.UNEXPECTED_TOKEN, id="unclosed_condition"),
        pytest.param("class A {", ErrorCode.UNEXPECTED_END_OF_INPUT, id="unclosed_class"),
        pytest.param("const x = user.", ErrorCode.UNEXPECTED_END_OF_INPUT, id="half_typed_member"),
        pytest.param("do {} until (x)", ErrorCode.UNEXPECTED_TOKEN, id="do_without_while"),
    ],
)
def test_malformed_programs_raise(code, error):
    with pytest.raises(ParseError) as exc_info:
        parse_program(code)
    assert exc_info.value.code == error


def test_parse_error_message_has_offset():
    with pytest.raises(ParseError) as exc_info:
        parse_program("let x = (1;")
    assert str(exc_info.value).startswith("Error at offset 10: Syntax Error:")
