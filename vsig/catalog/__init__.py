from .registry import SignatureRegistry, get_builtin_registry, initialize_builtin_registry
