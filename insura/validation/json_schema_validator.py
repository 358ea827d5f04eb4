from __future__ import annotations
from pathlib import Path
import json
from jsonschema import Draft7Validator

SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schemas" / "json"


def load_schema(name: str) -> dict:
    """Load `<name>.schema.json` from the bundled schema folder; {} if it doesn't exist."""
    p = SCHEMA_DIR / f"{name}.schema.json"
    return json.loads(p.read_text(encoding="utf-8")) if p.exists() else {}


def validate_document(name: str, doc: dict) -> list[str]:
    """
    Returns a list of "path: message" strings; empty when the document is valid
    (or when no schema is registered under `name`).
    """
    schema = load_schema(name)
    if not schema:
        return []
    validator = Draft7Validator(schema)
    errs = sorted(validator.iter_errors(doc or {}), key=lambda e: list(e.path))
    return [f"{'.'.join([str(p) for p in e.path]) or '$'}: {e.message}" for e in errs]
