# insura/config.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from insura.pricing.pricing_contracts import RatingTable
from insura.validation.json_schema_validator import validate_document

# load .env in local dev
load_dotenv()


def _load_yaml(path: str | Path) -> dict:
    """Returns {} if the file is missing or empty."""
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
        return data or {}


def _getenv_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() in ("1", "true", "yes", "on")


def get_config() -> Dict[str, Any]:
    """
    Central place for runtime config.
    Merges (in order): defaults <- YAML (if present) <- ENV.
    Returns only keys the package actually uses.
    """
    cfg = {}
    for candidate in ("insura/config.yaml", "config.yaml"):
        cfg.update(_load_yaml(candidate))

    defaults = {
        "pricing_strategy": "rules",
        "agent_name": "healthInsuranceAgent",
        "agent_voice": "sage",
        "events_enabled": True,
        "rating": {},
    }

    merged = {**defaults, **cfg}

    # ENV overrides
    merged["pricing_strategy"] = os.getenv("PRICING_STRATEGY", merged["pricing_strategy"])
    merged["agent_name"]       = os.getenv("AGENT_NAME", merged["agent_name"])
    merged["agent_voice"]      = os.getenv("AGENT_VOICE", merged["agent_voice"])
    merged["events_enabled"]   = _getenv_bool("EVENTS_ENABLED", bool(merged["events_enabled"]))

    return merged


def get_rating_table(cfg: Optional[Dict[str, Any]] = None) -> RatingTable:
    """
    Build the RatingTable from the `rating` section of the config.
    Raises ValueError when the section doesn't match rating_table.schema.json.
    """
    cfg = cfg if cfg is not None else get_config()
    rating = cfg.get("rating") or {}
    errors = validate_document("rating_table", rating)
    if errors:
        raise ValueError("Invalid rating config: " + "; ".join(errors))
    return RatingTable.from_dict(rating)
