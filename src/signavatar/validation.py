"""Validation utilities for SignAvatar pose resources."""

from __future__ import annotations

import json
from pathlib import Path

import jsonschema

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "poses.schema.json"


def validate_catalog_json(data: object) -> None:
    """Validate a decoded pose resource against poses.schema.json.

    Parameters
    ----------
    data:
        The decoded ``{"poses": {...}}`` document.

    Raises
    ------
    jsonschema.ValidationError
        If the data does not conform to the schema.
    """
    schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
    jsonschema.validate(data, schema)
