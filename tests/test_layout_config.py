import pytest

from lineupgrid.config import (
    KNOWN_FORMATIONS,
    SUPPORTED_LINE_SIZES,
    Role,
    get_line_layout,
    get_line_layout_by_key,
    iter_line_layouts,
)


def test_get_line_layout_returns_tabulated_back_four():
    layout = get_line_layout(Role.DEFENDER, 4)
    assert layout.size == 4
    assert [x for x, _ in layout.slots] == [20, 40, 60, 80]
    assert {y for _, y in layout.slots} == {75}


def test_get_line_layout_by_key_string_alias():
    layout = get_line_layout_by_key("f_3")
    assert layout.role is Role.FORWARD
    assert layout.slots[1] == (50, 25)


def test_get_line_layout_missing_raises():
    with pytest.raises(KeyError):
        get_line_layout(Role.MIDFIELDER, 6)


def test_get_line_layout_by_key_rejects_malformed_key():
    with pytest.raises(ValueError):
        get_line_layout_by_key("defenders")


def test_line_slot_wraps_past_line_size():
    layout = get_line_layout(Role.FORWARD, 2)
    assert layout.slot(2) == layout.slot(0)
    assert layout.slot(5) == layout.slot(1)


def test_every_layout_stays_on_the_pitch():
    for layout in iter_line_layouts():
        assert layout.size in SUPPORTED_LINE_SIZES
        assert len(layout.slots) == layout.size
        for x, y in layout.slots:
            assert 0 <= x <= 100
            assert 0 <= y <= 100


def test_known_formations_are_unique():
    assert len(set(KNOWN_FORMATIONS)) == len(KNOWN_FORMATIONS)
    assert 10 <= len(KNOWN_FORMATIONS) <= 15
