"""
Custom exception types for the ValuaScript signature model.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):

    # --- Signature Invariant Errors ---
    DUPLICATE_PARAMETER = "Function '{name}' declares parameter '{parameter}' more than once."
    REQUIRED_AFTER_OPTIONAL = "Function '{name}': required parameter '{parameter}' cannot follow optional parameter '{previous}'."
    OPTIONAL_WITH_VARIABLE = "Function '{name}': variable parameter '{parameter}' cannot follow optional parameter '{previous}'."
    NEGATIVE_MINIMUM_COUNT = "Function '{name}': variable parameter '{parameter}' has a negative minimum count ({minimum_count})."

    # --- Type Errors ---
    UNKNOWN_TYPE_NAME = "Unknown type '{type_name}'. Expected one of: {expected}."

    # --- Registry Errors ---
    UNKNOWN_FUNCTION = "Unknown function '{name}'."
    REGISTRY_FROZEN = "Cannot register '{name}': the signature registry is already initialized."


class SignatureError(Exception):
    def __init__(self, code: ErrorCode, **kwargs):
        self.code = code
        self.details = kwargs

        # The format string (e.g., "Unknown function '{name}'") is populated
        # with any extra data it needs from kwargs.
        self.message = code.value.format(**kwargs)

        super().__init__(self.message)


class SignatureInvariantViolation(SignatureError):
    """Raised by strict builders when a signature breaks a structural invariant."""

    def __init__(self, code: ErrorCode, parameter: Optional[str] = None, **kwargs):
        self.parameter = parameter
        super().__init__(code, parameter=parameter, **kwargs)
