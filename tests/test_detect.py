from lineupgrid.formation import normalize_formation
from lineupgrid.models import Player
from lineupgrid.placement import detect_formation


def _grid_lineup(rows: list[int]) -> list[Player]:
    players = [Player(player_id=0, name="Keeper", grid="1:1")]
    idx = 1
    for row, count in enumerate(rows, start=2):
        for col in range(1, count + 1):
            players.append(Player(player_id=idx, name=f"P{idx}", grid=f"{row}:{col}"))
            idx += 1
    return players


def test_detect_from_grid_rows():
    assert detect_formation(_grid_lineup([4, 2, 3, 1])) == "4-2-3-1"
    assert detect_formation(_grid_lineup([3, 5, 2])) == "3-5-2"


def test_detect_from_grid_ignores_unparseable_cells():
    players = _grid_lineup([4, 4, 2]) + [Player(player_id=99, name="Odd", grid="bad")]
    assert detect_formation(players) == "4-4-2"


def test_detect_from_position_codes():
    codes = ["G", "LB", "CB", "CB", "RB", "CM", "CDM", "CM", "LW", "ST", "RW"]
    players = [Player(player_id=idx, name=f"P{idx}", pos=code) for idx, code in enumerate(codes)]
    assert detect_formation(players) == "4-3-3"


def test_detect_without_signal_uses_default():
    players = [Player(player_id=idx, name=f"P{idx}") for idx in range(11)]
    assert detect_formation(players) == "4-3-3"
    assert detect_formation([]) == "4-3-3"


def test_detected_formation_can_be_normalized():
    codes = ["G", "D", "D", "M", "M", "M", "M", "M", "M", "M", "F"]
    players = [Player(player_id=idx, name=f"P{idx}", pos=code) for idx, code in enumerate(codes)]
    detected = detect_formation(players)
    assert detected == "2-7-1"
    assert normalize_formation(detected) == "4-3-3"
