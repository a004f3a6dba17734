"""
Utility functions for the signature tooling, including terminal coloring
and a JSON artifact serializer for the signature catalog.
"""

import json
from dataclasses import asdict, is_dataclass
from enum import Flag

from pydantic import BaseModel

from .signatures import FunctionSignature
from .types import TypeSymbol


class TerminalColors:
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    RESET = "\033[0m"


def flag_names(flags: Flag) -> list:
    return sorted(member.name for member in type(flags) if member.value and member in flags)


def signature_to_dict(signature: FunctionSignature) -> dict:
    var = signature.variable_parameter
    return {
        "name": signature.name,
        "description": signature.description,
        "signature": signature.type_signature,
        "return_type": signature.return_type.name,
        "fixed_parameters": [
            {"name": p.name, "description": p.description, "type": p.type.name, "required": p.required} for p in signature.fixed_parameters
        ],
        "variable_parameter": (
            None
            if var is None
            else {"name_prefix": var.name_prefix, "description": var.description, "element_type": var.element_type.name, "minimum_count": var.minimum_count}
        ),
        "flags": flag_names(signature.flags),
    }


class SignatureArtifactEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, FunctionSignature):
            return signature_to_dict(o)
        if isinstance(o, TypeSymbol):
            return o.name
        if isinstance(o, BaseModel):
            return o.model_dump(mode="json")
        if is_dataclass(o) and not isinstance(o, type):
            return asdict(o)
        if isinstance(o, Flag):
            return flag_names(o)
        if isinstance(o, (set, frozenset)):
            return list(o)
        return super().default(o)
