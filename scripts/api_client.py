"""Lightweight REST client for the lineupgrid API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_payload(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Invalid roster JSON: {exc}") from exc
    if isinstance(data, list):
        return {"startXI": data}
    return data


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the lineupgrid REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster JSON")
    parser.add_argument("--formation", default=None, help="Formation override")
    parser.add_argument("--layout", choices=("fixed", "interpolated"), default=None)
    parser.add_argument("--mirror", action="store_true", help="Place the roster as the away side")
    parser.add_argument("--detect-only", action="store_true", help="Only detect the formation")
    parser.add_argument("--list-formations", action="store_true", help="List known formations and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_formations:
            resp = client.get("/formations")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.roster is None:
            parser.error("roster is required unless --list-formations is used")

        payload = load_payload(args.roster)
        if args.detect_only:
            resp = client.post("/lineups/detect", json={"startXI": payload.get("startXI", [])})
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.formation:
            payload["formation"] = args.formation
        if args.layout:
            payload["layout"] = args.layout
        if args.mirror:
            payload["mirror"] = True

        resp = client.post("/lineups/arrange", json=payload)
        resp.raise_for_status()
        body = resp.json()
        print(f"Formation {body['formation']}")
        for item in body["startXI"]:
            player = item["player"]
            position = item["fieldPosition"]
            print(f"{player.get('number') or '-':>3} {player['name']:<24} x={position['x']:5.1f} y={position['y']:5.1f}")


if __name__ == "__main__":
    main()
