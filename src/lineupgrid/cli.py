"""Command-line interface for placing lineups from roster JSON files."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from lineupgrid.config_loader import ArrangeProfile
from lineupgrid.formation import normalize_formation
from lineupgrid.models import RosterEntry
from lineupgrid.placement import arrange_players, detect_formation


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Place lineup players on a pitch diagram")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each placement decision")
    subparsers = parser.add_subparsers(dest="command", required=True)

    arrange = subparsers.add_parser("arrange", help="Attach field positions to a roster")
    arrange.add_argument("roster", type=Path, help="Roster JSON (list of entries or object with startXI)")
    arrange.add_argument("--formation", default=None, help="Formation such as 4-3-3 (detected if omitted)")
    arrange.add_argument(
        "--layout",
        choices=("fixed", "interpolated"),
        default=None,
        help="Line layout used when a line size has no fixed table",
    )
    arrange.add_argument("--mirror", action="store_true", default=None, help="Reflect x for the away side")
    arrange.add_argument("--profile", type=Path, default=None, help="Load arrangement options JSON")
    arrange.add_argument("--save-profile", type=Path, default=None, help="Save arrangement options JSON")
    arrange.add_argument("--output", type=Path, default=None, help="Output JSON path (stdout if omitted)")

    detect = subparsers.add_parser("detect", help="Infer the formation of a roster")
    detect.add_argument("roster", type=Path, help="Roster JSON (list of entries or object with startXI)")

    return parser.parse_args(argv)


def _load_roster(path: Path) -> tuple[list[RosterEntry], str | None]:
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Could not read roster {path}: {exc}") from exc

    formation = None
    items = data
    if isinstance(data, dict):
        formation = data.get("formation")
        items = data.get("startXI", [])
    if not isinstance(items, list):
        raise SystemExit(f"Roster {path} must be a list or an object with a startXI list")

    try:
        entries = [RosterEntry.model_validate(item) for item in items]
    except ValidationError as exc:
        raise SystemExit(f"Invalid roster entry in {path}: {exc}") from exc
    return entries, formation


def _run_arrange(args: argparse.Namespace) -> None:
    entries, file_formation = _load_roster(args.roster)

    profile = ArrangeProfile.load(args.profile) if args.profile else ArrangeProfile()
    if args.formation is not None:
        profile.formation = args.formation
    if args.layout is not None:
        profile.layout = args.layout
    if args.mirror is not None:
        profile.mirror = args.mirror

    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved arrangement profile to {args.save_profile}")

    formation = profile.formation or file_formation
    if not formation:
        formation = detect_formation([entry.player for entry in entries])
        print(f"Detected formation {formation}")
    canonical = normalize_formation(formation)

    arranged = arrange_players(entries, canonical, layout=profile.layout, mirror=profile.mirror)
    payload = {
        "formation": canonical,
        "startXI": [player.model_dump(mode="json", by_alias=True) for player in arranged],
    }
    text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(text, encoding="utf-8")
        print(f"Wrote {len(arranged)} placed players to {args.output}")
    else:
        print(text)


def _run_detect(args: argparse.Namespace) -> None:
    entries, _ = _load_roster(args.roster)
    formation = detect_formation([entry.player for entry in entries])
    print(f"{formation} (normalized {normalize_formation(formation)})")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "arrange":
        _run_arrange(args)
    else:
        _run_detect(args)


if __name__ == "__main__":
    main()
