"""
Signatures for quantitative finance functions.
"""

from ..config import FunctionFlags
from ..signatures import FunctionSignatureBuilder
from ..types import SCALAR, STRING, VECTOR, TupleType


def build_signatures():
    return [
        FunctionSignatureBuilder.create("Npv", strict=True)
        .with_description("Calculates the Net Present Value (Npv) of a series of cash flows.")
        .with_required_parameter("rate", SCALAR, "The discount rate per period.")
        .with_required_parameter("cashflows", VECTOR, "A vector of cash flows.")
        .with_return_type(SCALAR)
        .with_flags(FunctionFlags.PURE)
        .build(),
        FunctionSignatureBuilder.create("CapitalizeExpenses", strict=True)
        .with_description(
            "Calculates the value of capitalized assets (e.g., R&D) and the amortization for the current year. "
            "Returns the total capitalized asset value and the amortization for the current year."
        )
        .with_required_parameter("current_expense", SCALAR, "The expense in the current period.")
        .with_required_parameter("past_expenses", VECTOR, "A vector of expenses from prior periods, oldest first.")
        .with_required_parameter("amortization_period", SCALAR, "The number of years over which the expense is amortized.")
        .with_return_type(TupleType.of(SCALAR, SCALAR))
        .with_flags(FunctionFlags.PURE)
        .build(),
        FunctionSignatureBuilder.create("BlackScholes", strict=True)
        .with_description("Calculates the price of a European option using the Black-Scholes model.")
        .with_required_parameter("spot", SCALAR, "The current spot price of the underlying asset.")
        .with_required_parameter("strike", SCALAR, "The strike price of the option.")
        .with_required_parameter("rate", SCALAR, "The annualized risk-free interest rate (e.g., 0.05 for 5%).")
        .with_required_parameter("time_to_maturity", SCALAR, "The time to expiration in years.")
        .with_required_parameter("volatility", SCALAR, "The annualized volatility of the asset's returns (e.g., 0.2 for 20%).")
        .with_required_parameter("option_type", STRING, "The type of option to price. Must be the string 'call' or 'put'.")
        .with_return_type(SCALAR)
        .with_flags(FunctionFlags.PURE)
        .build(),
    ]
