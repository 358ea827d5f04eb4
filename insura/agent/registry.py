# insura/agent/registry.py
from typing import Any, Dict, List, Optional

from insura.agent.prompts import HEALTH_INSURANCE_AGENT_INSTRUCTIONS
from insura.agent.tools import tool_definitions
from insura.config import get_config

DEFAULT_AGENT_SET_KEY = "healthInsurance"


def build_agent_config(cfg: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Agent definition handed to the realtime runtime: identity, policy prompt and tools."""
    cfg = cfg if cfg is not None else get_config()
    return {
        "name": cfg["agent_name"],
        "voice": cfg["agent_voice"],
        "instructions": HEALTH_INSURANCE_AGENT_INSTRUCTIONS,
        "tools": tool_definitions(),
        "handoffs": [],   # standalone agent
    }


# scenario key -> agents in that scenario
AGENT_SETS = {
    DEFAULT_AGENT_SET_KEY: [build_agent_config],
}


def get_agent_set(key: Optional[str] = None, cfg: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    key = key or DEFAULT_AGENT_SET_KEY
    if key not in AGENT_SETS:
        raise KeyError(f"Unknown agent set: {key}")
    return [build(cfg) for build in AGENT_SETS[key]]
