import pytest

from insura.utils import events


@pytest.fixture(autouse=True)
def _events_in_tmp(tmp_path, monkeypatch):
    # keep tool-call events out of the working tree
    monkeypatch.setattr(events, "EVENTS_PATH", str(tmp_path / "events.jsonl"))
    for name in ("PRICING_STRATEGY", "AGENT_NAME", "AGENT_VOICE", "EVENTS_ENABLED"):
        monkeypatch.delenv(name, raising=False)
