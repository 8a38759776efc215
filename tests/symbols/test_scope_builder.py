from textwrap import dedent

import pytest

from codesense.exceptions import ErrorCode, ParseError
from codesense.inference.descriptors import TypeKind
from codesense.parser.parser import parse_program
from codesense.symbols.kinds import ScopeKind, SymbolKind
from codesense.symbols.scope_builder import build_builtin_scopes, build_scopes

SAMPLE = dedent(
    """
    const user = {name: 'Ann', age: 30};
    function greet(person, times = 2) {
      let msg = 'hi';
      if (times) {
        var hoisted = true;
      }
      return msg;
    }
    """
)


def offset_of(text, needle, delta=0):
    return text.index(needle) + delta


def visible_names(manager, offset):
    return {symbol.name for symbol in manager.get_visible_symbols_at_offset(offset)}


def test_builtins_are_defined_in_global_scope():
    manager = build_scopes("")
    for name in ("window", "document", "console", "Math", "JSON", "parseInt", "setTimeout", "Map"):
        symbol = manager.global_scope.get(name)
        assert symbol is not None, name
        assert symbol.kind == SymbolKind.BUILTIN


def test_builtin_scopes_alone():
    manager = build_builtin_scopes()
    assert manager.resolve("document").type.name == "Document"
    assert manager.resolve("parseInt").type.return_type.name == "Number"
    assert manager.global_scope.children == []


def test_accepts_text_or_program():
    from_text = build_scopes("let a = 1;")
    from_program = build_scopes(parse_program("let a = 1;"))
    assert from_text.resolve("a").type == from_program.resolve("a").type


def test_malformed_text_raises():
    with pytest.raises(ParseError) as exc_info:
        build_scopes("const x = user.")
    assert exc_info.value.code == ErrorCode.UNEXPECTED_END_OF_INPUT


def test_declarations_land_in_their_scopes():
    # --- ARRANGE ---
    manager = build_scopes(SAMPLE)
    in_function = offset_of(SAMPLE, "let msg")
    in_block = offset_of(SAMPLE, "var hoisted")

    # --- ACT & ASSERT ---
    global_names = visible_names(manager, 0)
    assert {"user", "greet"} <= global_names
    assert not {"person", "times", "msg", "hoisted"} & global_names

    assert {"user", "greet", "person", "times", "msg", "hoisted"} <= visible_names(manager, in_function)
    assert manager.get_scope_at_offset(in_block).kind == ScopeKind.BLOCK
    # `var` is hoisted out of the block into the function.
    function_scope = manager.get_scope_at_offset(in_function)
    assert function_scope.kind == ScopeKind.FUNCTION
    assert function_scope.has("hoisted")


def test_scope_ranges_match_nodes():
    manager = build_scopes(SAMPLE)
    function_scope = manager.get_scope_at_offset(offset_of(SAMPLE, "let msg"))
    assert function_scope.start_offset == offset_of(SAMPLE, "function greet")
    assert function_scope.end_offset == SAMPLE.rindex("}") + 1
    after_function = SAMPLE.rindex("}") + 1
    assert manager.get_scope_at_offset(after_function).kind == ScopeKind.GLOBAL


def test_declaration_types():
    # --- ARRANGE ---
    manager = build_scopes(SAMPLE)
    inside = offset_of(SAMPLE, "return msg")

    # --- ACT ---
    user = manager.resolve("user", inside)
    greet = manager.resolve("greet", inside)
    times = manager.resolve("times", inside)
    person = manager.resolve("person", inside)

    # --- ASSERT ---
    assert user.kind == SymbolKind.CONSTANT
    assert user.type.kind == TypeKind.OBJECT
    assert list(user.type.shape) == ["name", "age"]
    assert user.type.shape["name"].name == "String"
    assert greet.kind == SymbolKind.FUNCTION
    assert greet.type.return_type.name == "String"
    assert times.kind == SymbolKind.PARAMETER
    assert times.type.name == "Number"
    assert person.type is None


@pytest.mark.parametrize(
    "code, name, expected",
    [
        pytest.param("const s = `x`;", "s", ("primitive", "String"), id="template"),
        pytest.param("const n = 1 + 2;", "n", ("primitive", "Number"), id="numeric_sum"),
        pytest.param("const s = 'a' + 1;", "s", ("primitive", "String"), id="string_concatenation"),
        pytest.param("const b = a > 1;", "b", ("primitive", "Boolean"), id="comparison"),
        pytest.param("const t = typeof x;", "t", ("primitive", "String"), id="typeof"),
        pytest.param("const r = /x/;", "r", ("object", "RegExp"), id="regex"),
        pytest.param("const d = new Date();", "d", ("object", "Date"), id="new_builtin"),
        pytest.param("const m = new Map();", "m", ("object", "Map"), id="new_map"),
        pytest.param("const p = parseInt('1');", "p", ("primitive", "Number"), id="global_function_call"),
        pytest.param("const s = String(1);", "s", ("primitive", "String"), id="conversion_call"),
        pytest.param("const el = document.getElementById('x');", "el", ("object", "HTMLElement"), id="dom_lookup"),
        pytest.param("const n = Math.max(1, 2);", "n", ("primitive", "Number"), id="static_member"),
        pytest.param("const xs = [1, 2];", "xs", ("array", "Array"), id="array_literal"),
        pytest.param("const v = cond ? 'a' : 1;", "v", ("primitive", "String"), id="conditional_takes_consequent"),
        pytest.param("const f = () => 1;", "f", ("function", None), id="arrow"),
        pytest.param("async function f() {}", "f", ("function", None), id="async_function"),
    ],
)
def test_initializer_inference(code, name, expected):
    manager = build_scopes(code)
    symbol = manager.resolve(name)
    assert (symbol.type.kind.value, symbol.type.name) == expected


def test_unknown_initializer_leaves_type_empty():
    manager = build_scopes("const mystery = foo.bar;")
    assert manager.resolve("mystery").type is None


def test_arrow_and_async_return_types():
    manager = build_scopes("const f = () => 'x';\nasync function load() { return 1; }")
    assert manager.resolve("f").type.return_type.name == "String"
    assert manager.resolve("load").type.return_type.name == "Promise"


def test_array_element_type_flows_into_callbacks():
    # --- ARRANGE ---
    code = "const nums = [1, 2];\nnums.forEach(n => n.toFixed(1));\nfor (const item of nums) { item; }"
    manager = build_scopes(code)

    # --- ACT ---
    callback_param = manager.resolve("n", offset_of(code, "n.toFixed"))
    loop_variable = manager.resolve("item", offset_of(code, "item; }"))

    # --- ASSERT ---
    assert manager.resolve("nums").type.element_type.name == "Number"
    assert callback_param.kind == SymbolKind.PARAMETER
    assert callback_param.type.name == "Number"
    assert loop_variable.type.name == "Number"


def test_for_in_key_is_string():
    code = "for (const key in obj) { key; }"
    manager = build_scopes(code)
    assert manager.resolve("key", offset_of(code, "key; }")).type.name == "String"


def test_destructuring_takes_member_types():
    code = "const user = {name: 'Ann', tags: ['a']};\nconst {name, tags: [first]} = user;"
    manager = build_scopes(code)
    assert manager.resolve("name").type.name == "String"
    assert manager.resolve("first").type.name == "String"


def test_catch_parameter_is_error():
    code = "try { risky(); } catch (err) { err; }"
    manager = build_scopes(code)
    err = manager.resolve("err", offset_of(code, "err; }"))
    assert err.kind == SymbolKind.PARAMETER
    assert err.type.name == "Error"
    assert manager.get_scope_at_offset(offset_of(code, "err; }")).kind == ScopeKind.CATCH


def test_late_assignment_types_untyped_variable():
    manager = build_scopes("let later;\nlater = 'now';")
    assert manager.resolve("later").type.name == "String"


def test_named_function_expression_sees_itself():
    code = "const f = function fact(n) { return fact; };"
    manager = build_scopes(code)
    assert manager.resolve("fact", offset_of(code, "return fact")).kind == SymbolKind.FUNCTION
    assert manager.resolve("fact") is None


CLASS_SAMPLE = dedent(
    """
    class Person {
      static count = 0;
      constructor(name) {
        this.name = name;
        this._id = 1;
      }
      greet() { return 'hi ' + this.name; }
      static create() { return new Person('x'); }
      get label() { return 'p'; }
    }
    const p = new Person('a');
    """
)


def test_class_members_are_recorded():
    # --- ARRANGE ---
    manager = build_scopes(CLASS_SAMPLE)

    # --- ACT ---
    person = manager.resolve("Person")
    members = {member.name: member for member in person.type.members}

    # --- ASSERT ---
    assert person.kind == SymbolKind.CLASS
    assert set(members) == {"count", "name", "_id", "greet", "create", "label"}
    assert members["count"].is_static
    assert members["create"].is_static
    assert members["greet"].kind == "method"
    assert members["greet"].type.return_type.name == "String"
    assert members["label"].kind == "getter"
    assert members["label"].type.name == "String"
    assert members["_id"].type.name == "Number"
    assert "constructor" not in members


def test_new_class_gives_instance():
    manager = build_scopes(CLASS_SAMPLE)
    instance = manager.resolve("p").type
    assert instance.kind == TypeKind.CLASS
    assert instance.is_instance
    assert {member.name for member in instance.members} == {"name", "_id", "greet", "label"}


def test_this_inside_methods_is_the_instance():
    manager = build_scopes(CLASS_SAMPLE)
    this_type = manager.get_this_type_at_offset(offset_of(CLASS_SAMPLE, "return 'hi'"))
    assert this_type.name == "Person"
    assert this_type.is_instance
    assert manager.get_this_type_at_offset(offset_of(CLASS_SAMPLE, "const p")).is_unknown


def test_subclass_inherits_members():
    code = "class A { run() {} }\nclass B extends A { stop() {} }"
    manager = build_scopes(code)
    assert {member.name for member in manager.resolve("B").type.members} == {"run", "stop"}


def test_class_expression_name_is_local():
    code = "const Widget = class Inner { render() { return Inner; } };"
    manager = build_scopes(code)
    assert manager.resolve("Inner") is None
    assert manager.resolve("Inner", offset_of(code, "return Inner")).kind == SymbolKind.CLASS
    assert manager.resolve("Widget").type.kind == TypeKind.CLASS
