"""
The fluent builder used to declare every ValuaScript function signature.

Each `with_*` call mutates the builder and returns it, so a declaration reads
as a single chained expression ending in `build()`:

    FunctionSignatureBuilder.create("GetElement")
        .with_description("Retrieves an element from a vector at a specific index.")
        .with_required_parameter("vector", VECTOR, "The source vector.")
        .with_required_parameter("index", SCALAR, "The zero-based index of the element.")
        .with_return_type(SCALAR)
        .build()

A builder is owned by the code declaring the signature and must not be shared
while it is being configured. The signatures it builds are immutable.
"""

from typing import List, Optional

from ..config import FunctionFlags
from ..exceptions import ErrorCode, SignatureInvariantViolation
from ..types import ANY, TypeSymbol
from .parameters import FixedParameter, VariableParameter
from .signature import FunctionSignature, ReturnTypeRule


def _constant_rule(return_type: TypeSymbol) -> ReturnTypeRule:
    return lambda args: return_type


class FunctionSignatureBuilder:
    def __init__(self, name: str, strict: bool = False):
        self._name = name
        self._strict = strict
        self._description = ""
        self._return_type: TypeSymbol = ANY
        self._return_type_rule: ReturnTypeRule = _constant_rule(ANY)
        self._fixed_parameters: List[FixedParameter] = []
        self._variable_parameter: Optional[VariableParameter] = None
        self._flags = FunctionFlags.NONE

    @classmethod
    def create(cls, name: str, strict: bool = False) -> "FunctionSignatureBuilder":
        return cls(name, strict=strict)

    def build(self) -> FunctionSignature:
        """
        Snapshots the accumulated state into an immutable signature.

        Non-strict builders accept any parameter layout. Strict builders run
        `validate()` first and raise `SignatureInvariantViolation` on a
        malformed layout.
        """
        if self._strict:
            self.validate()

        return FunctionSignature(
            name=self._name,
            description=self._description,
            return_type_rule=self._return_type_rule,
            return_type=self._return_type,
            fixed_parameters=tuple(self._fixed_parameters),
            variable_parameter=self._variable_parameter,
            flags=self._flags,
        )

    def with_description(self, description: str) -> "FunctionSignatureBuilder":
        self._description = description
        return self

    def with_return_type(self, return_type: TypeSymbol) -> "FunctionSignatureBuilder":
        self._return_type = return_type
        self._return_type_rule = _constant_rule(return_type)
        return self

    def with_dynamic_return_type(self, return_type_rule: ReturnTypeRule) -> "FunctionSignatureBuilder":
        # Evaluated first: if the rule fails on the empty probe the builder is left untouched.
        self._return_type = return_type_rule(())
        self._return_type_rule = return_type_rule
        return self

    def with_required_parameter(self, name: str, type: TypeSymbol, description: str) -> "FunctionSignatureBuilder":
        self._fixed_parameters.append(FixedParameter(name, description, type, required=True))
        return self

    def with_optional_parameter(self, name: str, type: TypeSymbol, description: str) -> "FunctionSignatureBuilder":
        self._fixed_parameters.append(FixedParameter(name, description, type, required=False))
        return self

    def with_variable_parameter(self, name_prefix: str, type: TypeSymbol, minimum_count: int, description: str) -> "FunctionSignatureBuilder":
        self._variable_parameter = VariableParameter(name_prefix, description, type, minimum_count)
        return self

    def with_flags(self, flags: FunctionFlags) -> "FunctionSignatureBuilder":
        self._flags = flags
        return self

    def validate(self) -> None:
        """
        Checks the parameter layout. Subclasses may extend it with their own checks.

        - fixed parameter names are unique
        - required parameters precede optional ones
        - a variable parameter cannot follow an optional parameter
        - a variable parameter's minimum count is not negative
        """
        seen = set()
        for param in self._fixed_parameters:
            if param.name in seen:
                raise SignatureInvariantViolation(ErrorCode.DUPLICATE_PARAMETER, parameter=param.name, name=self._name)
            seen.add(param.name)

        last_optional: Optional[FixedParameter] = None
        for param in self._fixed_parameters:
            if not param.required:
                last_optional = param
            elif last_optional is not None:
                raise SignatureInvariantViolation(ErrorCode.REQUIRED_AFTER_OPTIONAL, parameter=param.name, name=self._name, previous=last_optional.name)

        var = self._variable_parameter
        if var is None:
            return
        if last_optional is not None:
            raise SignatureInvariantViolation(ErrorCode.OPTIONAL_WITH_VARIABLE, parameter=var.name_prefix, name=self._name, previous=last_optional.name)
        if var.minimum_count < 0:
            raise SignatureInvariantViolation(ErrorCode.NEGATIVE_MINIMUM_COUNT, parameter=var.name_prefix, name=self._name, minimum_count=var.minimum_count)
