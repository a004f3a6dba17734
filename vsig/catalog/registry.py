"""
The catalog of every callable function signature, keyed by function name.

A registry is built once, at start-up, by an explicit call to
`initialize_builtin_registry()`; after that it is frozen and shared read-only
by every consumer (type checker, overload resolver, documentation tools).
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ..exceptions import ErrorCode, SignatureError
from ..signatures import FunctionSignature
from . import core, data, financial, series, statistics, vector


class SignatureRegistry:
    def __init__(self):
        self._overloads: Dict[str, List[FunctionSignature]] = {}
        self._frozen = False

    def register(self, signature: FunctionSignature) -> FunctionSignature:
        """Adds a signature to the overload set of its name, after any existing overloads."""
        if self._frozen:
            raise SignatureError(ErrorCode.REGISTRY_FROZEN, name=signature.name)
        self._overloads.setdefault(signature.name, []).append(signature)
        return signature

    def register_all(self, signatures: Iterable[FunctionSignature]) -> None:
        for signature in signatures:
            self.register(signature)

    def get_overloads(self, name: str) -> Tuple[FunctionSignature, ...]:
        if name not in self._overloads:
            raise SignatureError(ErrorCode.UNKNOWN_FUNCTION, name=name)
        return tuple(self._overloads[name])

    def names(self) -> List[str]:
        return sorted(self._overloads)

    def signatures(self) -> List[FunctionSignature]:
        return [signature for overloads in self._overloads.values() for signature in overloads]

    def freeze(self) -> None:
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: str) -> bool:
        return name in self._overloads

    def __len__(self) -> int:
        return len(self._overloads)


_BUILTIN_REGISTRY: Optional[SignatureRegistry] = None


def initialize_builtin_registry() -> SignatureRegistry:
    """Builds a frozen registry holding every built-in ValuaScript function."""
    registry = SignatureRegistry()
    for module in (core, vector, series, statistics, financial, data):
        registry.register_all(module.build_signatures())
    registry.freeze()
    return registry


def get_builtin_registry() -> SignatureRegistry:
    """Returns the process-wide built-in registry, initializing it on first use."""
    global _BUILTIN_REGISTRY
    if _BUILTIN_REGISTRY is None:
        _BUILTIN_REGISTRY = initialize_builtin_registry()
    return _BUILTIN_REGISTRY
