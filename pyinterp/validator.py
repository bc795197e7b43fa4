"""Schema validation for probe payloads."""

from __future__ import annotations

import json
from importlib import resources

from jsonschema import Draft202012Validator

from pyinterp.types import RawMetadata


def _load_schema(package: str, resource_name: str) -> dict:
    with resources.files(package).joinpath(resource_name).open("r", encoding="utf-8") as f:
        return json.load(f)


def _metadata_schema() -> dict:
    return _load_schema("pyinterp.schema", "metadata.schema.json")


def validate_metadata(data: object) -> None:
    """Raise ``jsonschema.ValidationError`` if *data* is not a probe payload."""
    Draft202012Validator(_metadata_schema()).validate(data)


def parse_metadata(stdout: bytes | str) -> RawMetadata:
    """Decode the probe's stdout into RawMetadata.

    Raises ``ValueError`` for malformed JSON and ``jsonschema.ValidationError``
    when the document does not match the schema.
    """
    data = json.loads(stdout)
    validate_metadata(data)
    return RawMetadata.model_validate(data)
