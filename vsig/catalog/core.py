"""
Signatures for core mathematical, logical, and comparison functions.
Arithmetic functions use dynamic return types so that scalar/vector
broadcasting is reflected in the inferred result.
"""

from ..config import COMPARISON_OPERATOR_MAP, LOGICAL_OPERATOR_MAP, MATH_OPERATOR_MAP, FunctionFlags
from ..signatures import FunctionSignatureBuilder
from ..syntax import argument_type
from ..types import ANY, BOOLEAN, SCALAR, VECTOR

_OPERATOR_SYMBOLS = {func: op for op, func in {**MATH_OPERATOR_MAP, **COMPARISON_OPERATOR_MAP, **LOGICAL_OPERATOR_MAP}.items()}


def _math_return_type(args):
    """Determines the return type for a math operation."""
    types = [argument_type(arg) for arg in args]
    if ANY in types:
        return ANY
    return VECTOR if VECTOR in types else SCALAR


def _first_argument_type(args):
    return argument_type(args[0]) if args else ANY


def _operator_description(func_name: str, summary: str) -> str:
    symbol = _OPERATOR_SYMBOLS.get(func_name)
    if symbol is None:
        return summary
    return f"{summary} Backs the '{symbol}' operator."


def _comparison(name: str, operand_type, summary: str):
    return (
        FunctionSignatureBuilder.create(name, strict=True)
        .with_description(_operator_description(name, summary))
        .with_required_parameter("left", operand_type, "The left-hand operand.")
        .with_required_parameter("right", operand_type, "The right-hand operand.")
        .with_return_type(BOOLEAN)
        .with_flags(FunctionFlags.INTERNAL | FunctionFlags.PURE)
        .build()
    )


def _unary_scalar(name: str, summary: str):
    return (
        FunctionSignatureBuilder.create(name, strict=True)
        .with_description(summary)
        .with_required_parameter("value", SCALAR, "The input value.")
        .with_return_type(SCALAR)
        .with_flags(FunctionFlags.PURE)
        .build()
    )


def _variadic_math(name: str, summary: str):
    return (
        FunctionSignatureBuilder.create(name, strict=True)
        .with_description(_operator_description(name, summary))
        .with_variable_parameter("operand", ANY, 2, "A scalar or vector operand. Scalars are broadcast against vectors.")
        .with_dynamic_return_type(_math_return_type)
        .with_flags(FunctionFlags.PURE)
        .build()
    )


def _binary_math(name: str, summary: str):
    return (
        FunctionSignatureBuilder.create(name, strict=True)
        .with_description(_operator_description(name, summary))
        .with_required_parameter("left", ANY, "A scalar or vector operand.")
        .with_required_parameter("right", ANY, "A scalar or vector operand.")
        .with_dynamic_return_type(_math_return_type)
        .with_flags(FunctionFlags.PURE)
        .build()
    )


def _variadic_logical(name: str, summary: str):
    return (
        FunctionSignatureBuilder.create(name, strict=True)
        .with_description(_operator_description(name, summary))
        .with_variable_parameter("condition", BOOLEAN, 2, "A boolean operand.")
        .with_return_type(BOOLEAN)
        .with_flags(FunctionFlags.INTERNAL | FunctionFlags.PURE)
        .build()
    )


def build_signatures():
    return [
        # --- Internal Boolean & Comparison Operations ---
        _comparison("__eq__", ANY, "Tests two values for equality."),
        _comparison("__neq__", ANY, "Tests two values for inequality."),
        _comparison("__gt__", SCALAR, "Tests whether the left value is greater than the right."),
        _comparison("__lt__", SCALAR, "Tests whether the left value is less than the right."),
        _comparison("__gte__", SCALAR, "Tests whether the left value is greater than or equal to the right."),
        _comparison("__lte__", SCALAR, "Tests whether the left value is less than or equal to the right."),
        _variadic_logical("__and__", "True when every operand is true."),
        _variadic_logical("__or__", "True when at least one operand is true."),
        FunctionSignatureBuilder.create("__not__", strict=True)
        .with_description(_operator_description("__not__", "Negates a boolean value."))
        .with_required_parameter("condition", BOOLEAN, "The value to negate.")
        .with_return_type(BOOLEAN)
        .with_flags(FunctionFlags.INTERNAL | FunctionFlags.PURE)
        .build(),
        # --- Mathematical Operations ---
        _variadic_math("add", "Adds all operands element-wise."),
        _binary_math("subtract", "Subtracts the right operand from the left, element-wise."),
        _variadic_math("multiply", "Multiplies all operands element-wise."),
        _binary_math("divide", "Divides the left operand by the right, element-wise."),
        _binary_math("power", "Raises the left operand to the power of the right, element-wise."),
        FunctionSignatureBuilder.create("identity", strict=True)
        .with_description("Returns its argument unchanged.")
        .with_required_parameter("value", ANY, "The value to return.")
        .with_dynamic_return_type(_first_argument_type)
        .with_flags(FunctionFlags.PURE)
        .build(),
        _unary_scalar("log", "Calculates the natural logarithm of a value."),
        _unary_scalar("log10", "Calculates the base-10 logarithm of a value."),
        _unary_scalar("exp", "Calculates e raised to the power of a value."),
        _unary_scalar("sin", "Calculates the sine of a value in radians."),
        _unary_scalar("cos", "Calculates the cosine of a value in radians."),
        _unary_scalar("tan", "Calculates the tangent of a value in radians."),
    ]
