"""
Semantic types of the ValuaScript type system as seen by function signatures.

Types are immutable, hashable values. `ANY` is the top type: every other type
is assignable to it, and it is the default return and parameter type of a
signature that has not been configured further.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict

from .exceptions import ErrorCode, SignatureError


class TypeSymbol(BaseModel):
    """A named type in the ValuaScript type system."""

    model_config = ConfigDict(frozen=True)

    name: str

    def __str__(self) -> str:
        return self.name


class StringLiteralType(TypeSymbol):
    """A string type narrowed to a single known literal value."""

    value: str

    @classmethod
    def of(cls, value: str) -> "StringLiteralType":
        return cls(name=f"'{value}'", value=value)


class TupleType(TypeSymbol):
    """The result type of a function returning several values."""

    members: Tuple[TypeSymbol, ...]

    @classmethod
    def of(cls, *members: TypeSymbol) -> "TupleType":
        return cls(name="(" + ", ".join(m.name for m in members) + ")", members=tuple(members))


ANY = TypeSymbol(name="any")
SCALAR = TypeSymbol(name="scalar")
VECTOR = TypeSymbol(name="vector")
BOOLEAN = TypeSymbol(name="boolean")
STRING = TypeSymbol(name="string")

TYPE_KEYWORDS = {t.name: t for t in (ANY, SCALAR, VECTOR, BOOLEAN, STRING)}


def type_from_name(name: str) -> TypeSymbol:
    """Maps a type keyword used in ValuaScript source (e.g. 'scalar') to its type."""
    try:
        return TYPE_KEYWORDS[name]
    except KeyError:
        raise SignatureError(ErrorCode.UNKNOWN_TYPE_NAME, type_name=name, expected=", ".join(TYPE_KEYWORDS)) from None


def is_assignable(source: TypeSymbol, target: TypeSymbol) -> bool:
    if target == ANY or source == ANY or source == target:
        return True
    return isinstance(source, StringLiteralType) and target == STRING
