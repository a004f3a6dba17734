"""
The immutable description of one callable ValuaScript function.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from ..config import VARIABLE_PARAMETER_SUFFIX, FunctionFlags
from ..syntax import ArgumentList
from ..types import TypeSymbol
from .parameters import FixedParameter, VariableParameter

ReturnTypeRule = Callable[[ArgumentList], TypeSymbol]


@dataclass(frozen=True)
class FunctionSignature:
    """
    One overload of a function. Several signatures may share a name; together
    they form the function's overload set.

    `return_type` is the representative type, i.e. `return_type_rule` evaluated
    against an empty argument list. It is what documentation and hover text show
    when no call site is available. The rule is excluded from equality: two
    signatures built from the same configuration compare equal.
    """

    name: str
    description: str
    return_type_rule: ReturnTypeRule = field(compare=False, repr=False)
    return_type: TypeSymbol
    fixed_parameters: Tuple[FixedParameter, ...]
    variable_parameter: Optional[VariableParameter]
    flags: FunctionFlags

    @property
    def required_parameters(self) -> Tuple[FixedParameter, ...]:
        return tuple(p for p in self.fixed_parameters if p.required)

    @property
    def optional_parameters(self) -> Tuple[FixedParameter, ...]:
        return tuple(p for p in self.fixed_parameters if not p.required)

    @property
    def minimum_argument_count(self) -> int:
        count = len(self.required_parameters)
        if self.variable_parameter is not None:
            count += self.variable_parameter.minimum_count
        return count

    @property
    def maximum_argument_count(self) -> Optional[int]:
        """None when a variable parameter makes the arity unbounded."""
        if self.variable_parameter is not None:
            return None
        return len(self.fixed_parameters)

    def has_flag(self, flag: FunctionFlags) -> bool:
        return flag in self.flags

    def infer_return_type(self, arguments: ArgumentList = ()) -> TypeSymbol:
        """Evaluates the return-type rule for a concrete call site."""
        return self.return_type_rule(arguments)

    @property
    def type_signature(self) -> str:
        """A one-line display form, e.g. "concat(a: string, [b: string]): string"."""
        parts = []
        for param in self.fixed_parameters:
            text = f"{param.name}: {param.type}"
            parts.append(text if param.required else f"[{text}]")

        if self.variable_parameter is not None:
            var = self.variable_parameter
            text = f"{var.display_name(0)}: {var.element_type}, {VARIABLE_PARAMETER_SUFFIX}"
            parts.append(text if var.minimum_count > 0 else f"[{text}]")

        return f"{self.name}({', '.join(parts)}): {self.return_type}"
