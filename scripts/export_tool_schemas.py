#!/usr/bin/env python3
# scripts/export_tool_schemas.py
import argparse, json, sys
from pathlib import Path

# Ensure project root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from insura.agent.registry import DEFAULT_AGENT_SET_KEY, get_agent_set


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Export the voice agent definition (prompt + tool JSON schemas) for the realtime runtime."
    )
    parser.add_argument("--agent-set", default=DEFAULT_AGENT_SET_KEY, help="Scenario key (default: %(default)s)")
    parser.add_argument("--out", type=str, default=None, help="Write JSON here instead of stdout")
    parser.add_argument("--tools-only", action="store_true", help="Only export the tool definitions")
    args = parser.parse_args(argv)

    try:
        agents = get_agent_set(args.agent_set)
    except KeyError as e:
        print(f"[ERROR] {e.args[0]}")
        return 1

    payload = [a["tools"] for a in agents] if args.tools_only else agents
    if args.tools_only and len(payload) == 1:
        payload = payload[0]
    text = json.dumps(payload, indent=2, ensure_ascii=False)

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
        print(f"Saved {len(agents)} agent(s) to: {out}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
