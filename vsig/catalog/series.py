"""
Signatures for series projection functions.
"""

from ..config import FunctionFlags
from ..signatures import FunctionSignatureBuilder
from ..types import SCALAR, VECTOR


def build_signatures():
    return [
        FunctionSignatureBuilder.create("CompoundSerie", strict=True)
        .with_description("Projects a base value forward using a vector of period-specific growth rates.")
        .with_required_parameter("base_value", SCALAR, "The starting scalar value.")
        .with_required_parameter("rates_vector", VECTOR, "A vector of growth rates for each period.")
        .with_return_type(VECTOR)
        .with_flags(FunctionFlags.PURE)
        .build(),
        FunctionSignatureBuilder.create("GrowSerie", strict=True)
        .with_description("Projects a series by applying a constant growth rate.")
        .with_required_parameter("base_value", SCALAR, "The starting scalar value.")
        .with_required_parameter("growth_rate", SCALAR, "The constant growth rate to apply each period (e.g., 0.05 for 5%).")
        .with_required_parameter("periods", SCALAR, "The number of periods to project forward.")
        .with_return_type(VECTOR)
        .with_flags(FunctionFlags.PURE)
        .build(),
        FunctionSignatureBuilder.create("InterpolateSerie", strict=True)
        .with_description("Creates a vector by linearly interpolating between a start and end value.")
        .with_required_parameter("start_value", SCALAR, "The scalar value at the beginning of the series.")
        .with_required_parameter("end_value", SCALAR, "The scalar value at the end of the series.")
        .with_required_parameter("periods", SCALAR, "The total number of periods in the series.")
        .with_return_type(VECTOR)
        .with_flags(FunctionFlags.PURE)
        .build(),
    ]
