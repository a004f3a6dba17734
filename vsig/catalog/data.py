"""
Signatures for data loading functions. These run once before the simulation
trials begin, so their results are constant across trials.
"""

from ..config import FunctionFlags
from ..signatures import FunctionSignatureBuilder
from ..types import SCALAR, STRING, VECTOR

# Names accepted before the PascalCase convention was adopted.
_LEGACY_ALIASES = {"ReadCsvScalar": "read_csv_scalar", "ReadCsvVector": "read_csv_vector"}


def _read_csv_scalar(name: str, flags: FunctionFlags):
    return (
        FunctionSignatureBuilder.create(name, strict=True)
        .with_description("Reads a single value from a CSV file.")
        .with_required_parameter("file_path", STRING, "The path to the CSV file.")
        .with_required_parameter("column_name", STRING, "The name of the column to read from.")
        .with_required_parameter("row_index", SCALAR, "The zero-based index of the row to read.")
        .with_return_type(SCALAR)
        .with_flags(flags)
        .build()
    )


def _read_csv_vector(name: str, flags: FunctionFlags):
    return (
        FunctionSignatureBuilder.create(name, strict=True)
        .with_description("Reads an entire column from a CSV file as a vector.")
        .with_required_parameter("file_path", STRING, "The path to the CSV file.")
        .with_required_parameter("column_name", STRING, "The name of the column to read.")
        .with_return_type(VECTOR)
        .with_flags(flags)
        .build()
    )


def build_signatures():
    deprecated = FunctionFlags.PRE_TRIAL | FunctionFlags.DEPRECATED
    return [
        _read_csv_scalar("ReadCsvScalar", FunctionFlags.PRE_TRIAL),
        _read_csv_vector("ReadCsvVector", FunctionFlags.PRE_TRIAL),
        _read_csv_scalar(_LEGACY_ALIASES["ReadCsvScalar"], deprecated),
        _read_csv_vector(_LEGACY_ALIASES["ReadCsvVector"], deprecated),
    ]
