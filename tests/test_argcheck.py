"""Tests for argument declarations and the debug message helpers."""

import pytest

from protochain import (
    BadArgument,
    Container,
    DebugSettings,
    TooManyArguments,
    argscheck,
    check_args,
    parse_declaration,
)
from protochain import debug


def _checked(signature, fn=lambda *args: "ok"):
    return check_args("m", "f", signature, fn, settings=DebugSettings())


def test_parse_declaration_reads_names_types_and_options():
    sig = parse_declaration("m.f (table, ?string|number, ...)")

    assert sig.name == "m.f"
    assert sig.arity == 2
    assert sig.variadic
    assert sig.params[0].types == ("table",)
    assert sig.params[1].optional
    assert sig.params[1].describe() == "string or number or nil"


@pytest.mark.parametrize("decl", ["", "no parens", "m.f (table", "m.f (ta-ble)", "m.f (table, ?)"])
def test_parse_declaration_rejects_malformed_input(decl):
    with pytest.raises(ValueError):
        parse_declaration(decl)


def test_argscheck_is_a_passthrough_when_disabled():
    def fn(x):
        return x

    assert argscheck("m.f (table)", fn, settings=DebugSettings(argcheck=False)) is fn


def test_matching_arguments_reach_the_function():
    f = _checked("(table, ?number)")

    assert f({}) == "ok"
    assert f([1], 2) == "ok"
    assert f({}, None) == "ok"


def test_mismatched_argument_raises_structured_error():
    f = _checked("(table, ?number)")

    with pytest.raises(BadArgument, match=r"bad argument #1 to 'm\.f' \(table expected, got number\)") as excinfo:
        f(5)
    error = excinfo.value
    assert (error.module_name, error.function_name) == ("m", "f")
    assert error.index == 1
    assert error.expected == "table"
    assert error.actual == "number"

    with pytest.raises(BadArgument, match=r"#2 .*\(number or nil expected, got string\)"):
        f({}, "two")


def test_missing_argument_is_reported_as_no_value():
    f = _checked("(table)")

    with pytest.raises(BadArgument, match=r"\(table expected, got no value\)"):
        f()


def test_excess_arguments_raise_too_many_arguments():
    f = _checked("(table, ?number)")

    with pytest.raises(TooManyArguments) as excinfo:
        f({}, 1, 2)
    assert str(excinfo.value) == "too many arguments to 'm.f' (no more than 2 expected, got 3)"
    assert excinfo.value.index == 3
    assert isinstance(excinfo.value, BadArgument)

    assert _checked("(table, ...)")({}, 1, 2, 3) == "ok"


def test_object_and_tag_types_match_prototypes(Node):
    node = Node(a=1)

    assert _checked("(object)")(node) == "ok"
    assert _checked("(Node)")(node) == "ok"
    with pytest.raises(BadArgument, match="object expected, got table"):
        _checked("(object)")({})
    with pytest.raises(BadArgument, match="table expected, got Node"):
        _checked("(table)")(node)
    with pytest.raises(BadArgument, match="Node expected, got Container"):
        _checked("(Node)")(Container())


def test_any_rejects_nil_unless_optional():
    with pytest.raises(BadArgument, match="any expected, got nil"):
        _checked("(any)")(None)
    assert _checked("(?any)")(None) == "ok"
    assert _checked("(nil)")(None) == "ok"


def test_keyword_arguments_are_passed_through():
    f = _checked("(table)", fn=lambda t, **kw: kw)

    assert f({}, flag=True) == {"flag": True}


def test_debug_message_helpers():
    assert debug.extramsg_mismatch("table", 5) == "table expected, got number"
    assert debug.extramsg_mismatch("table", 5, index=2) == "table expected, got number at index 2"
    assert debug.extramsg_mismatch("table") == "table expected, got no value"
    assert debug.extramsg_toomany("argument", 1, 2) == "no more than 1 argument expected, got 2"
    assert debug.extramsg_toomany("argument", 2, 3) == "no more than 2 arguments expected, got 3"


def test_debug_raisers():
    with pytest.raises(BadArgument, match=r"bad argument #3 to 'm\.g' \(string expected, got nil\)"):
        debug.argerror("m.g", 3, "string", None)
    with pytest.raises(TooManyArguments, match="no more than 1 expected, got 4"):
        debug.toomanyargerror("m.g", 1, 4)
