from textwrap import dedent

import pytest

from codesense.document import TextDocument
from codesense.inference.descriptors import (
    TypeKind,
    create_array,
    create_function,
    create_named_object,
    create_object,
    create_primitive,
    create_unknown,
)
from codesense.inference.engine import TypeInferenceEngine, split_chain
from codesense.symbols.scope_builder import build_scopes

SOURCE = dedent(
    """
    const user = {name: 'Ann', age: 3, greet: () => 'hi'};
    const nums = [1, 2, 3];
    class Person {
      constructor() {
        this._id = 1;
        this.name = 'x';
      }
      greet() { return 'hi'; }
      static create() { return new Person(); }
    }
    const p = new Person();
    function total() { return 0; }
    """
)


@pytest.fixture
def engine():
    document = TextDocument(SOURCE)
    return TypeInferenceEngine(build_scopes(SOURCE), document)


@pytest.fixture
def bare_engine():
    """An engine that only knows the builtin catalog."""
    return TypeInferenceEngine()


def labels(items):
    return [item.label for item in items]


# --- Chain splitting ---


@pytest.mark.parametrize(
    "expression, expected",
    [
        pytest.param("user.profile.name", ["user", "profile", "name"], id="dotted"),
        pytest.param("getUser(id, {a: 1}).name", ["getUser()", "name"], id="call_arguments_collapsed"),
        pytest.param("items[0].name", ["items", "[]", "name"], id="element_access"),
        pytest.param("a?.b", ["a", "b"], id="optional_chaining"),
        pytest.param("f?.()", ["f()"], id="optional_call"),
        pytest.param("'hello'.length", ["<string>", "length"], id="string_head"),
        pytest.param("3.14.toFixed()", ["<number>", "toFixed()"], id="number_head"),
        pytest.param("[1, 2].map(x => x)", ["<array>", "map()"], id="array_head"),
        pytest.param("this.#count", ["this", "#count"], id="private_member"),
        pytest.param("user.", ["user"], id="trailing_dot"),
        pytest.param("fn()()", ["fn()()"], id="repeated_calls"),
        pytest.param("", [], id="empty"),
        pytest.param(None, [], id="none"),
        pytest.param("a + b", [], id="not_a_chain"),
        pytest.param("foo(", [], id="unclosed_call"),
    ],
)
def test_split_chain(expression, expected):
    assert split_chain(expression) == expected


# --- Catalog-only inference ---


@pytest.mark.parametrize(
    "expression, expected",
    [
        pytest.param("document", create_named_object("Document"), id="global_object"),
        pytest.param("document.getElementById('x')", create_named_object("HTMLElement"), id="catalog_call"),
        pytest.param("document.getElementById('x').classList", create_named_object("DOMTokenList"), id="inherited_property"),
        pytest.param("document.querySelectorAll('a')[0]", create_named_object("Node"), id="array_like_index"),
        pytest.param("Math.max(1, 2)", create_primitive("Number"), id="namespace_static"),
        pytest.param("Array.isArray(x)", create_primitive("Boolean"), id="constructor_static"),
        pytest.param("'hello'.toUpperCase()", create_primitive("String"), id="string_literal_method"),
        pytest.param("'hello'.length", create_primitive("Number"), id="string_literal_property"),
        pytest.param("'hello'[0]", create_primitive("String"), id="string_index"),
        pytest.param("'a,b'.split(',')", create_array(create_primitive("String")), id="array_of_strings"),
        pytest.param("[1, 2].length", create_primitive("Number"), id="array_literal_property"),
        pytest.param("localStorage.getItem('k').trim()", create_primitive("String"), id="storage"),
    ],
)
def test_catalog_expressions(bare_engine, expression, expected):
    assert bare_engine.get_type_of_expression(expression) == expected


@pytest.mark.parametrize(
    "expression",
    [
        pytest.param("foo.bar", id="undeclared_head"),
        pytest.param("document.body.nope", id="missing_member"),
        pytest.param("JSON.parse(s).data", id="any_result"),
        pytest.param("a + b", id="not_a_chain"),
        pytest.param("this.x", id="this_outside_class"),
    ],
)
def test_unresolvable_expressions_are_unknown(bare_engine, expression):
    assert bare_engine.get_type_of_expression(expression) == create_unknown()


# --- Scope-aware inference ---


def test_object_shape_members(engine):
    assert engine.get_type_of_expression("user.name") == create_primitive("String")
    assert engine.get_type_of_expression("user.age") == create_primitive("Number")
    assert engine.get_type_of_expression("user.greet()") == create_primitive("String")
    assert engine.get_type_of_expression("user.missing").is_unknown


@pytest.mark.parametrize(
    "expression, expected",
    [
        pytest.param("nums", "number[]", id="array"),
        pytest.param("nums[0]", "number", id="element"),
        pytest.param("nums.pop()", "number", id="element_returning_method"),
        pytest.param("nums.filter(n => n > 1)", "number[]", id="element_preserving_method"),
        pytest.param("nums.map(n => n * 2)", "array", id="element_changing_method"),
        pytest.param("nums.join(',')", "string", id="join"),
        pytest.param("total", "() => number", id="function"),
        pytest.param("total()", "number", id="function_call"),
        pytest.param("p", "Person", id="class_instance"),
        pytest.param("p.greet()", "string", id="instance_method"),
        pytest.param("Person.create()", "Person", id="static_method"),
    ],
)
def test_type_strings_of_user_code(engine, expression, expected):
    assert engine.get_type_string(engine.get_type_of_expression(expression)) == expected


@pytest.mark.parametrize(
    "expression",
    [
        pytest.param("user", id="object_shape"),
        pytest.param("user.greet()", id="shape_method_call"),
        pytest.param("nums.filter(n => n > 1)", id="array_chain"),
        pytest.param("p", id="class_instance"),
        pytest.param("Person", id="class"),
        pytest.param("foo.bar", id="unknown"),
    ],
)
def test_repeated_queries_give_the_same_answer(engine, expression):
    # --- ACT ---
    first_type = engine.get_type_of_expression(expression)
    first_members = engine.get_members_of_expression(expression)
    second_type = engine.get_type_of_expression(expression)
    second_members = engine.get_members_of_expression(expression)

    # --- ASSERT ---
    assert first_type == second_type
    assert engine.get_type_string(first_type) == engine.get_type_string(second_type)
    assert first_members == second_members
    assert first_members


def test_instance_and_class_see_different_members(engine):
    instance = engine.get_type_of_expression("p")
    assert instance.is_instance
    assert engine.resolve_member(instance, "create") is None
    assert engine.get_type_of_expression("Person.greet").is_unknown


def test_this_resolves_inside_methods(engine):
    offset = SOURCE.index("return 'hi'")
    assert engine.get_type_of_expression("this.name", offset=offset) == create_primitive("String")
    assert engine.get_type_of_expression("this.name", offset=0).is_unknown


def test_line_and_column_are_converted_through_the_document(engine):
    line = SOURCE.split("\n").index("  greet() { return 'hi'; }")
    assert engine.get_type_of_expression("this._id", line=line, column=12) == create_primitive("Number")


def test_call_result():
    engine = TypeInferenceEngine()
    assert engine.call_result(create_function(create_primitive("Number"))) == create_primitive("Number")
    assert engine.call_result(create_primitive("String")) == create_primitive("String")
    assert engine.call_result(create_function()) is None
    assert engine.call_result(None) is None


def test_resolve_member_access_never_returns_none():
    engine = TypeInferenceEngine()
    assert engine.resolve_member_access(None, "x").is_unknown
    assert engine.resolve_member_access(create_primitive("String"), "length") == create_primitive("Number")
    assert engine.is_unknown_type(None)
    assert engine.is_unknown_type(create_unknown())
    assert not engine.is_unknown_type(create_primitive("String"))


@pytest.mark.parametrize(
    "descriptor, expected",
    [
        pytest.param(None, "any", id="none"),
        pytest.param(create_unknown(), "any", id="unknown"),
        pytest.param(create_primitive("Boolean"), "boolean", id="primitive"),
        pytest.param(create_array(), "array", id="untyped_array"),
        pytest.param(create_array(create_array(create_primitive("String"))), "string[][]", id="nested_array"),
        pytest.param(create_named_object("Date"), "Date", id="named_object"),
        pytest.param(create_object({}), "object", id="anonymous_object"),
        pytest.param(create_function(), "function", id="function_without_return"),
    ],
)
def test_get_type_string(descriptor, expected):
    assert TypeInferenceEngine().get_type_string(descriptor) == expected


# --- Member listing ---


def test_primitive_members(bare_engine):
    items = bare_engine.get_members_of_type(create_primitive("String"))
    by_label = {item.label: item for item in items}
    assert "trim" in by_label
    assert by_label["length"].kind == "property"
    assert by_label["trim"].kind == "method"
    assert by_label["trim"].type_info == "String"
    assert not any(item.is_unknown for item in items)


def test_array_members_substitute_element_type(bare_engine):
    items = {item.label: item for item in bare_engine.get_members_of_type(create_array(create_primitive("Number")))}
    assert items["pop"].type_info == "number"
    assert items["join"].type_info == "String"


def test_named_object_members_include_inherited(bare_engine):
    names = labels(bare_engine.get_members_of_expression("document"))
    assert "getElementById" in names
    assert "addEventListener" in names


def test_namespace_members_come_from_statics(bare_engine):
    names = labels(bare_engine.get_members_of_expression("Math"))
    assert "max" in names
    assert "floor" in names


def test_object_shape_member_items(engine):
    items = engine.get_members_of_expression("user")
    assert [(item.label, item.kind, item.type_info) for item in items] == [
        ("name", "property", "String"),
        ("age", "property", "Number"),
        ("greet", "method", "function"),
    ]


def test_instance_members_put_underscored_names_last(engine):
    items = engine.get_members_of_expression("p")
    assert labels(items) == ["name", "greet", "_id"]
    greet = items[1]
    assert greet.kind == "method"
    assert greet.type_info == "() => string"
    assert items[2].sort_order == 2


def test_class_members_are_statics(engine):
    assert labels(engine.get_members_of_expression("Person")) == ["create"]


def test_this_members(engine):
    offset = SOURCE.index("return 'hi'")
    assert labels(engine.get_this_members(offset=offset)) == ["name", "greet", "_id"]
    assert labels(TypeInferenceEngine().get_this_members(offset=offset)) == []


def test_function_members(engine):
    assert labels(engine.get_members_of_expression("total")) == ["call", "apply", "bind", "length", "name"]


def test_unknown_type_offers_deduplicated_union(bare_engine):
    # --- ACT ---
    items = bare_engine.get_members_of_expression("mystery")
    names = labels(items)

    # --- ASSERT ---
    assert all(item.is_unknown and item.sort_order == 1 for item in items)
    assert len(names) == len(set(names))
    for name in ("trim", "push", "hasOwnProperty", "length"):
        assert name in names
    assert names == sorted(names, key=lambda name: (name.lower(), name))
