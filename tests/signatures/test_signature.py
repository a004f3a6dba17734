import pytest

from vsig.config import FunctionFlags
from vsig.signatures import FunctionSignatureBuilder, VariableParameter
from vsig.types import ANY, SCALAR, STRING, VECTOR


def test_arity_of_fixed_only_signature():
    sig = (
        FunctionSignatureBuilder.create("f")
        .with_required_parameter("a", SCALAR, "")
        .with_required_parameter("b", SCALAR, "")
        .with_optional_parameter("c", SCALAR, "")
        .build()
    )

    assert sig.minimum_argument_count == 2
    assert sig.maximum_argument_count == 3
    assert [p.name for p in sig.required_parameters] == ["a", "b"]
    assert [p.name for p in sig.optional_parameters] == ["c"]


def test_variable_parameter_makes_arity_unbounded():
    sig = FunctionSignatureBuilder.create("f").with_required_parameter("a", SCALAR, "").with_variable_parameter("x", SCALAR, 2, "").build()

    assert sig.minimum_argument_count == 3
    assert sig.maximum_argument_count is None


def test_variable_parameter_display_names():
    var = VariableParameter("item", "", ANY, 1)

    assert [var.display_name(i) for i in range(3)] == ["item1", "item2", "item3"]


@pytest.mark.parametrize(
    "builder, expected",
    [
        (
            FunctionSignatureBuilder.create("concat").with_required_parameter("a", STRING, "").with_optional_parameter("b", STRING, "").with_return_type(STRING),
            "concat(a: string, [b: string]): string",
        ),
        (FunctionSignatureBuilder.create("first").with_variable_parameter("item", ANY, 1, ""), "first(item1: any, ...): any"),
        (FunctionSignatureBuilder.create("sum").with_variable_parameter("value", SCALAR, 0, "").with_return_type(SCALAR), "sum([value1: scalar, ...]): scalar"),
        (FunctionSignatureBuilder.create("now").with_return_type(SCALAR), "now(): scalar"),
    ],
)
def test_type_signature_display(builder, expected):
    assert builder.build().type_signature == expected


def test_signatures_differing_in_flags_are_not_equal():
    base = FunctionSignatureBuilder.create("f").with_return_type(VECTOR)

    assert base.with_flags(FunctionFlags.PURE).build() != base.with_flags(FunctionFlags.STOCHASTIC).build()


def test_signature_is_immutable():
    sig = FunctionSignatureBuilder.create("f").build()

    with pytest.raises(AttributeError):
        sig.name = "g"
