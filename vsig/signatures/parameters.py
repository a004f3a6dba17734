from dataclasses import dataclass

from ..types import TypeSymbol

"""
Parameter descriptors. These are plain immutable values; any validation of
a parameter list happens when a strict builder finalizes a signature.
"""


@dataclass(frozen=True)
class FixedParameter:
    """A positional parameter with a definite slot."""

    name: str
    description: str
    type: TypeSymbol
    required: bool


@dataclass(frozen=True)
class VariableParameter:
    """The trailing parameter that matches every remaining argument."""

    name_prefix: str
    description: str
    element_type: TypeSymbol
    minimum_count: int

    def display_name(self, index: int) -> str:
        """Name of the zero-based `index`-th argument matched by this parameter."""
        return f"{self.name_prefix}{index + 1}"
