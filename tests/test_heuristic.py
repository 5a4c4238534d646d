import pytest

from lineupgrid.config import Role
from lineupgrid.placement import (
    FixedTableLayout,
    InterpolatedLayout,
    classify_position,
    get_layout,
    position_to_field,
    role_to_field,
)


def _xy(position):
    return position.x, position.y


@pytest.mark.parametrize(
    "code, role",
    [
        ("G", Role.GOALKEEPER),
        ("gk", Role.GOALKEEPER),
        ("D", Role.DEFENDER),
        ("LB", Role.DEFENDER),
        ("lwb", Role.DEFENDER),
        ("CB", Role.DEFENDER),
        ("M", Role.MIDFIELDER),
        ("CDM", Role.MIDFIELDER),
        ("cam", Role.MIDFIELDER),
        ("F", Role.FORWARD),
        ("ST", Role.FORWARD),
        ("LW", Role.FORWARD),
        ("X", None),
        ("", None),
        (None, None),
    ],
)
def test_classify_position(code, role):
    assert classify_position(code) == role


def test_goalkeeper_short_circuits():
    assert _xy(position_to_field("GK", 3, "5-4-1")) == (50, 90)
    assert _xy(position_to_field("g", 0, "not-a-formation")) == (50, 90)


def test_back_four_from_codes():
    xs = [position_to_field(code, idx, "4-3-3").x for idx, code in enumerate(["LB", "CB", "CB", "RB"])]
    assert xs == [20, 40, 60, 80]


def test_front_three_and_midfield_pair():
    assert [_xy(position_to_field("F", idx, "4-3-3")) for idx in range(3)] == [(25, 25), (50, 25), (75, 25)]
    assert [_xy(position_to_field("M", idx, "4-2-3-1")) for idx in range(2)] == [(35, 55), (65, 55)]


def test_index_wraps_modulo_line_size():
    first = position_to_field("D", 0, "3-5-2")
    assert position_to_field("D", 3, "3-5-2") == first
    assert position_to_field("D", 7, "3-5-2") == position_to_field("D", 1, "3-5-2")


def test_uncovered_line_size_collapses_to_band_center():
    assert _xy(position_to_field("M", 2, "3-6-1")) == (50, 50)
    assert _xy(position_to_field("D", 0, "1-6-3")) == (50, 75)
    assert _xy(position_to_field("F", 0, "4-5-1")) == (50, 25)


def test_missing_lines_and_malformed_tokens_use_band_center():
    assert _xy(position_to_field("F", 0, "4-4")) == (50, 25)
    assert _xy(position_to_field("M", 0, "4-x-3")) == (50, 50)


def test_unrecognized_code_is_centered():
    assert _xy(position_to_field("X", 0, "4-3-3")) == (50, 50)


def test_interpolated_layout_spreads_uncovered_lines():
    layout = InterpolatedLayout()
    xs = [position_to_field("M", idx, "3-6-1", layout).x for idx in range(6)]
    assert xs == pytest.approx([15, 29, 43, 57, 71, 85])
    assert len(set(xs)) == 6
    assert _xy(position_to_field("F", 0, "4-5-1", layout)) == (50, 25)


def test_interpolated_layout_keeps_fixed_tables():
    fixed = FixedTableLayout()
    interpolated = InterpolatedLayout()
    for role in (Role.DEFENDER, Role.MIDFIELDER, Role.FORWARD):
        for size in (2, 3, 4, 5):
            for idx in range(size):
                assert interpolated.locate(role, size, idx) == fixed.locate(role, size, idx)
    assert interpolated.locate(Role.DEFENDER, 0, 0) == (50, 75)
    assert interpolated.locate(Role.DEFENDER, None, 0) == (50, 75)


def test_get_layout_by_name():
    assert get_layout("Interpolated").name == "interpolated"
    with pytest.raises(KeyError):
        get_layout("diamond")


def test_role_to_field_line_size_depends_on_layout():
    fixed = role_to_field(Role.FORWARD, 0, "4-3-3", FixedTableLayout(), assigned=1)
    interpolated = role_to_field(Role.FORWARD, 0, "4-3-3", InterpolatedLayout(), assigned=1)

    assert _xy(fixed) == (25, 25)
    assert _xy(interpolated) == (50, 25)
    assert role_to_field(Role.FORWARD, 1, "4-3-3", InterpolatedLayout(), assigned=None).x == 50
