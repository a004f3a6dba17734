"""
Function signature model for the ValuaScript type checker.
"""

from .catalog import SignatureRegistry, get_builtin_registry, initialize_builtin_registry
from .config import FunctionFlags
from .exceptions import ErrorCode, SignatureError, SignatureInvariantViolation
from .signatures import FixedParameter, FunctionSignature, FunctionSignatureBuilder, VariableParameter
from .syntax import CallArgument
from .types import ANY, BOOLEAN, SCALAR, STRING, VECTOR, TypeSymbol
