"""
Signatures for the probability distributions used to sample model inputs.
Every call draws a new value on each simulation trial.
"""

from ..config import FunctionFlags
from ..signatures import FunctionSignatureBuilder
from ..types import SCALAR


def _distribution(name: str, summary: str, *params):
    builder = FunctionSignatureBuilder.create(name, strict=True).with_description(summary)
    for param_name, param_desc in params:
        builder.with_required_parameter(param_name, SCALAR, param_desc)
    return builder.with_return_type(SCALAR).with_flags(FunctionFlags.STOCHASTIC).build()


def build_signatures():
    return [
        _distribution("Normal", "Samples from a normal distribution.", ("mean", "The mean of the distribution."), ("std_dev", "The standard deviation.")),
        _distribution(
            "Lognormal",
            "Samples from a log-normal distribution.",
            ("log_mean", "The mean of the underlying normal distribution."),
            ("log_std_dev", "The standard deviation of the underlying normal distribution."),
        ),
        _distribution("Beta", "Samples from a beta distribution.", ("alpha", "The alpha shape parameter."), ("beta", "The beta shape parameter.")),
        _distribution("Uniform", "Samples uniformly between two bounds.", ("min", "The lower bound."), ("max", "The upper bound.")),
        _distribution("Bernoulli", "Returns 1 with probability p and 0 otherwise.", ("p", "The probability of success, between 0 and 1.")),
        _distribution(
            "Pert",
            "Samples from a PERT distribution.",
            ("min", "The minimum value."),
            ("mode", "The most likely value."),
            ("max", "The maximum value."),
        ),
        _distribution(
            "Triangular",
            "Samples from a triangular distribution.",
            ("min", "The minimum value."),
            ("mode", "The most likely value."),
            ("max", "The maximum value."),
        ),
    ]
