# insura/utils/events.py
import json, os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

EVENTS_PATH = os.environ.get("INSURA_EVENTS_PATH", "data/events.jsonl")


def publish(event_type: str, payload: Dict[str, Any]) -> None:
    dirname = os.path.dirname(EVENTS_PATH)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    record = {
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "type": event_type,
        "payload": payload,
    }
    with open(EVENTS_PATH, "a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")


def read_events(event_type: Optional[str] = None) -> List[Dict[str, Any]]:
    """Read the event log back, optionally filtered by type; malformed lines are skipped."""
    if not os.path.exists(EVENTS_PATH):
        return []
    out: List[Dict[str, Any]] = []
    with open(EVENTS_PATH, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                rec = json.loads(line)
            except json.JSONDecodeError:
                continue
            if event_type and rec.get("type") != event_type:
                continue
            out.append(rec)
    return out
