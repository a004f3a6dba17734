"""
Static configuration data for the ValuaScript signature model.
This includes the function capability flags, operator mappings and the
display conventions used when rendering signatures.
"""

from enum import Flag, auto


class FunctionFlags(Flag):
    """
    Capability tags attached to a signature and consumed by the type checker.

    - INTERNAL:   Backs an operator (e.g. '==', 'and'); not callable by name in user code.
    - STOCHASTIC: Produces a new random draw on every simulation trial.
    - PRE_TRIAL:  Executed once before the simulation trials begin. Ideal for loading data.
    - DEPRECATED: Still accepted, but scheduled for removal.
    - PURE:       No side effects; eligible for constant folding.
    """

    NONE = 0
    INTERNAL = auto()
    STOCHASTIC = auto()
    PRE_TRIAL = auto()
    DEPRECATED = auto()
    PURE = auto()


MATH_OPERATOR_MAP = {"+": "add", "-": "subtract", "*": "multiply", "/": "divide", "^": "power"}
COMPARISON_OPERATOR_MAP = {
    "==": "__eq__",
    "!=": "__neq__",
    ">": "__gt__",
    "<": "__lt__",
    ">=": "__gte__",
    "<=": "__lte__",
}
LOGICAL_OPERATOR_MAP = {"and": "__and__", "or": "__or__", "not": "__not__"}

# Appended after the last synthesized variable-parameter slot in display forms,
# e.g. "ComposeVector(value1: any, ...): vector".
VARIABLE_PARAMETER_SUFFIX = "..."
