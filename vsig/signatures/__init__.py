from .builder import FunctionSignatureBuilder
from .parameters import FixedParameter, VariableParameter
from .signature import FunctionSignature, ReturnTypeRule
