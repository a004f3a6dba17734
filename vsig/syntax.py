"""
Defines the call-site argument contracts handed to return-type rules.

The nodes mirror the expression subset of the ValuaScript AST produced by the
parser. Each node carries a `Span` so that a checker consuming a signature can
still point at the offending argument.
"""

from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict

from .types import ANY, BOOLEAN, SCALAR, VECTOR, StringLiteralType, TypeSymbol

# --- Core Data Structures ---


class Span(BaseModel):
    """Represents a location in the source code for precise error reporting."""

    s_line: int
    s_col: int
    e_line: int
    e_col: int
    file_path: Optional[str] = None


class ASTNode(BaseModel):
    """A base class for all expression nodes, ensuring they have a span."""

    model_config = ConfigDict(frozen=True)

    span: Optional[Span] = None


# --- Literals and Identifiers ---


class NumberLiteral(ASTNode):
    value: Union[int, float]


class StringLiteral(ASTNode):
    value: str


class BooleanLiteral(ASTNode):
    value: bool


class Identifier(ASTNode):
    value: str


class VectorLiteral(ASTNode):
    items: List["Expression"]


class FunctionCall(ASTNode):
    function: str
    args: List["Expression"]


Expression = Union[NumberLiteral, StringLiteral, BooleanLiteral, Identifier, VectorLiteral, FunctionCall]

VectorLiteral.model_rebuild()
FunctionCall.model_rebuild()


# --- Call-site Arguments ---


class CallArgument(BaseModel):
    """
    One argument at a call site: the expression as written plus the static
    type the checker has already inferred for it.
    """

    model_config = ConfigDict(frozen=True)

    expression: Expression
    static_type: TypeSymbol = ANY


ArgumentList = Sequence[CallArgument]

_LITERAL_NODES = (NumberLiteral, StringLiteral, BooleanLiteral)


def literal_value(argument: CallArgument) -> Optional[Union[int, float, str, bool]]:
    """Returns the Python value of a literal argument, or None if it is not a literal."""
    if isinstance(argument.expression, _LITERAL_NODES):
        return argument.expression.value
    return None


def argument_type(argument: CallArgument) -> TypeSymbol:
    """
    The most precise type known for an argument. String literals narrow to a
    `StringLiteralType`; other literals fill in a missing static type.
    """
    node = argument.expression
    if isinstance(node, StringLiteral):
        return StringLiteralType.of(node.value)
    if argument.static_type != ANY:
        return argument.static_type
    if isinstance(node, BooleanLiteral):
        return BOOLEAN
    if isinstance(node, NumberLiteral):
        return SCALAR
    if isinstance(node, VectorLiteral):
        return VECTOR
    return ANY
