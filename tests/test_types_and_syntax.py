import pytest

from vsig.exceptions import ErrorCode, SignatureError
from vsig.syntax import BooleanLiteral, CallArgument, FunctionCall, Identifier, NumberLiteral, StringLiteral, VectorLiteral, argument_type, literal_value
from vsig.types import ANY, BOOLEAN, SCALAR, STRING, VECTOR, StringLiteralType, TupleType, is_assignable, type_from_name


# --- 1. Types ---


@pytest.mark.parametrize("name, expected", [("any", ANY), ("scalar", SCALAR), ("vector", VECTOR), ("boolean", BOOLEAN), ("string", STRING)])
def test_type_from_name(name, expected):
    assert type_from_name(name) == expected


def test_unknown_type_name_raises():
    with pytest.raises(SignatureError) as excinfo:
        type_from_name("matrix")
    assert excinfo.value.code == ErrorCode.UNKNOWN_TYPE_NAME


def test_composite_type_names():
    assert TupleType.of(SCALAR, VECTOR).name == "(scalar, vector)"
    assert StringLiteralType.of("call").name == "'call'"
    assert StringLiteralType.of("call") == StringLiteralType.of("call")
    assert StringLiteralType.of("call") != STRING


def test_types_are_hashable():
    assert len({SCALAR, type_from_name("scalar"), VECTOR, TupleType.of(SCALAR, SCALAR)}) == 3


@pytest.mark.parametrize(
    "source, target, expected",
    [
        (SCALAR, ANY, True),
        (ANY, VECTOR, True),
        (SCALAR, SCALAR, True),
        (SCALAR, VECTOR, False),
        (StringLiteralType.of("put"), STRING, True),
        (STRING, StringLiteralType.of("put"), False),
    ],
)
def test_is_assignable(source, target, expected):
    assert is_assignable(source, target) is expected


# --- 2. Call-site arguments ---


def test_literal_value_of_literals_and_non_literals():
    assert literal_value(CallArgument(expression=NumberLiteral(value=3.5))) == 3.5
    assert literal_value(CallArgument(expression=StringLiteral(value="call"))) == "call"
    assert literal_value(CallArgument(expression=BooleanLiteral(value=False))) is False
    assert literal_value(CallArgument(expression=Identifier(value="x"), static_type=SCALAR)) is None


def test_argument_type_narrows_string_literals():
    arg = CallArgument(expression=StringLiteral(value="put"), static_type=STRING)
    assert argument_type(arg) == StringLiteralType.of("put")


def test_argument_type_prefers_static_type_then_literal_kind():
    assert argument_type(CallArgument(expression=Identifier(value="v"), static_type=VECTOR)) == VECTOR
    assert argument_type(CallArgument(expression=NumberLiteral(value=1))) == SCALAR
    assert argument_type(CallArgument(expression=BooleanLiteral(value=True))) == BOOLEAN
    assert argument_type(CallArgument(expression=VectorLiteral(items=[NumberLiteral(value=1)]))) == VECTOR
    assert argument_type(CallArgument(expression=FunctionCall(function="Normal", args=[]))) == ANY
