import json

import pytest

from vsig.catalog import get_builtin_registry
from vsig.cli import main
from vsig.signatures import FunctionSignatureBuilder
from vsig.types import SCALAR
from vsig.utils import SignatureArtifactEncoder, signature_to_dict


def test_list_prints_every_overload(capsys):
    main(["list"])
    out = capsys.readouterr().out

    assert "GetElement(vector: vector, index: scalar): scalar" in out
    assert f"{len(get_builtin_registry().signatures())} overloads" in out


def test_show_prints_parameters_and_flags(capsys):
    main(["show", "Normal"])
    out = capsys.readouterr().out

    assert "Normal(mean: scalar, std_dev: scalar): scalar" in out
    assert "STOCHASTIC" in out


def test_show_unknown_function_exits_with_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["show", "NoSuchFunction"])

    assert excinfo.value.code == 1
    assert "Unknown function 'NoSuchFunction'" in capsys.readouterr().err


def test_dump_writes_json_catalog(tmp_path):
    output = tmp_path / "out" / "catalog.json"
    main(["dump", "-o", str(output)])

    catalog = json.loads(output.read_text())
    names = {entry["name"] for entry in catalog}
    assert {"add", "Npv", "ReadCsvVector"} <= names


def test_signature_to_dict():
    sig = (
        FunctionSignatureBuilder.create("clamp")
        .with_required_parameter("value", SCALAR, "v")
        .with_optional_parameter("limit", SCALAR, "l")
        .with_return_type(SCALAR)
        .build()
    )

    data = signature_to_dict(sig)
    assert data["signature"] == "clamp(value: scalar, [limit: scalar]): scalar"
    assert data["fixed_parameters"][1] == {"name": "limit", "description": "l", "type": "scalar", "required": False}
    assert data["variable_parameter"] is None
    assert data["flags"] == []
    assert json.loads(json.dumps(sig, cls=SignatureArtifactEncoder)) == data
