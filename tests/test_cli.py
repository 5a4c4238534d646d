import json
from pathlib import Path

import pytest

from lineupgrid.cli import main
from lineupgrid.config_loader import ArrangeProfile


def _roster() -> list[dict]:
    codes = ["G", "LB", "CB", "CB", "RB", "CM", "CM", "CM", "LW", "ST", "RW"]
    return [
        {"player": {"id": idx, "name": f"Player {idx}", "number": idx + 1, "pos": code}}
        for idx, code in enumerate(codes)
    ]


def test_cli_arrange_writes_output(tmp_path: Path):
    roster_path = tmp_path / "roster.json"
    roster_path.write_text(json.dumps({"formation": "4–3–3", "startXI": _roster()}), encoding="utf-8")
    output = tmp_path / "placed.json"

    main(["arrange", str(roster_path), "--output", str(output)])

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["formation"] == "4-3-3"
    assert len(payload["startXI"]) == 11
    assert payload["startXI"][0]["fieldPosition"] == {"x": 50.0, "y": 90.0}
    assert [item["fieldPosition"]["x"] for item in payload["startXI"][1:5]] == [20, 40, 60, 80]
    assert payload["startXI"][1]["player"]["pos"] == "LB"


def test_cli_arrange_mirror_and_profile_roundtrip(tmp_path: Path, capsys):
    roster_path = tmp_path / "roster.json"
    roster_path.write_text(json.dumps(_roster()), encoding="utf-8")
    profile_path = tmp_path / "profile.json"

    main(["arrange", str(roster_path), "--mirror", "--layout", "interpolated", "--save-profile", str(profile_path)])

    profile = ArrangeProfile.load(profile_path)
    assert profile.mirror is True
    assert profile.layout == "interpolated"

    out = capsys.readouterr().out
    assert "Detected formation 4-3-3" in out
    body = json.loads(out[out.index("{"):])
    assert [item["fieldPosition"]["x"] for item in body["startXI"][1:5]] == [80, 60, 40, 20]


def test_cli_detect(tmp_path: Path, capsys):
    roster_path = tmp_path / "roster.json"
    roster_path.write_text(json.dumps(_roster()), encoding="utf-8")

    main(["detect", str(roster_path)])

    assert capsys.readouterr().out.strip() == "4-3-3 (normalized 4-3-3)"


def test_cli_rejects_invalid_roster(tmp_path: Path):
    roster_path = tmp_path / "roster.json"
    roster_path.write_text(json.dumps([{"player": {"name": "No id"}}]), encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["arrange", str(roster_path)])
