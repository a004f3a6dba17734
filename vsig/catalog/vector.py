"""
Signatures for vector manipulation functions.
"""

from ..config import FunctionFlags
from ..signatures import FunctionSignatureBuilder
from ..types import ANY, SCALAR, VECTOR


def build_signatures():
    return [
        FunctionSignatureBuilder.create("ComposeVector", strict=True)
        .with_description("Creates a new vector from a series of values.")
        .with_variable_parameter("value", ANY, 1, "The values to include in the vector. Input vectors will be flattened.")
        .with_return_type(VECTOR)
        .with_flags(FunctionFlags.PURE)
        .build(),
        FunctionSignatureBuilder.create("SumVector", strict=True)
        .with_description("Calculates the sum of all elements in a vector.")
        .with_required_parameter("vector", VECTOR, "The input vector.")
        .with_return_type(SCALAR)
        .with_flags(FunctionFlags.PURE)
        .build(),
        FunctionSignatureBuilder.create("VectorDelta", strict=True)
        .with_description("Calculates the period-over-period change for a vector.")
        .with_required_parameter("vector", VECTOR, "The input vector.")
        .with_return_type(VECTOR)
        .with_flags(FunctionFlags.PURE)
        .build(),
        FunctionSignatureBuilder.create("GetElement", strict=True)
        .with_description("Retrieves an element from a vector at a specific index.")
        .with_required_parameter("vector", VECTOR, "The source vector.")
        .with_required_parameter("index", SCALAR, "The zero-based index of the element. Negative indices count from the end.")
        .with_return_type(SCALAR)
        .with_flags(FunctionFlags.PURE)
        .build(),
        FunctionSignatureBuilder.create("DeleteElement", strict=True)
        .with_description("Returns a new vector with the element at the specified index removed.")
        .with_required_parameter("vector", VECTOR, "The source vector.")
        .with_required_parameter("index", SCALAR, "The zero-based index of the element to remove. Negative indices count from the end.")
        .with_return_type(VECTOR)
        .with_flags(FunctionFlags.PURE)
        .build(),
    ]
