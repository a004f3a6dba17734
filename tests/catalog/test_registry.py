import pytest

from vsig.catalog import SignatureRegistry, get_builtin_registry, initialize_builtin_registry
from vsig.exceptions import ErrorCode, SignatureError
from vsig.signatures import FunctionSignatureBuilder
from vsig.types import SCALAR, VECTOR


def make_overload(name, param_type):
    return FunctionSignatureBuilder.create(name).with_required_parameter("value", param_type, "").with_return_type(param_type).build()


def test_overloads_keep_registration_order():
    registry = SignatureRegistry()
    scalar_version = registry.register(make_overload("abs", SCALAR))
    vector_version = registry.register(make_overload("abs", VECTOR))

    assert registry.get_overloads("abs") == (scalar_version, vector_version)
    assert len(registry) == 1
    assert "abs" in registry
    assert registry.signatures() == [scalar_version, vector_version]


def test_unknown_function_raises():
    with pytest.raises(SignatureError) as excinfo:
        SignatureRegistry().get_overloads("missing")
    assert excinfo.value.code == ErrorCode.UNKNOWN_FUNCTION


def test_frozen_registry_rejects_registration():
    registry = SignatureRegistry()
    registry.register_all([make_overload("a", SCALAR), make_overload("b", SCALAR)])
    registry.freeze()

    with pytest.raises(SignatureError) as excinfo:
        registry.register(make_overload("c", SCALAR))

    assert excinfo.value.code == ErrorCode.REGISTRY_FROZEN
    assert registry.names() == ["a", "b"]


def test_initialize_builds_a_fresh_frozen_registry():
    first = initialize_builtin_registry()
    second = initialize_builtin_registry()

    assert first is not second
    assert first.is_frozen
    assert first.signatures() == second.signatures()


def test_builtin_registry_is_initialized_once():
    assert get_builtin_registry() is get_builtin_registry()
