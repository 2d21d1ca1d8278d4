import pytest

from slideswitch.core.selector import CircularSelector, Panel, advance


def test_advance_round_trip_for_all_sizes():
    for count in range(1, 9):
        for i in range(count):
            assert advance(advance(i, 1, count), -1, count) == i
            assert 0 <= advance(i, 1, count) < count
            assert 0 <= advance(i, -1, count) < count


def test_advance_wraps_at_both_ends():
    assert advance(4, 1, 5) == 0
    assert advance(0, -1, 5) == 4
    assert advance(2, 1, 5) == 3
    assert advance(2, -1, 5) == 1


def test_advance_handles_large_steps():
    assert advance(0, -11, 5) == 4
    assert advance(3, 12, 5) == 0


def test_advance_rejects_empty_domain():
    with pytest.raises(ValueError):
        advance(0, 1, 0)


def test_panel_next_sequence_wraps_to_first():
    seen = [Panel.VIEW_A]
    for _ in range(4):
        seen.append(seen[-1].next())
    assert seen == [Panel.VIEW_A, Panel.VIEW_B, Panel.VIEW_C, Panel.VIEW_D, Panel.VIEW_E]
    assert seen[-1].next() is Panel.VIEW_A


def test_panel_prev_from_first_is_last():
    assert Panel.VIEW_A.prev() is Panel.VIEW_E
    assert Panel.VIEW_C.offset(-7) is Panel.VIEW_A
    assert Panel.VIEW_E.letter == "E"


def test_circular_selector_next_and_prev():
    selector = CircularSelector(["a", "b", "c"])
    assert selector.current == "a"
    assert selector.next() == "b"
    assert selector.next() == "c"
    assert selector.next() == "a"
    assert selector.prev() == "c"
    assert len(selector) == 3


def test_circular_selector_start_is_wrapped():
    selector = CircularSelector(["a", "b", "c"], start=-1)
    assert selector.current == "c"


def test_circular_selector_select():
    selector = CircularSelector(["a", "b", "c"])
    assert selector.select("c") == "c"
    assert selector.index == 2
    with pytest.raises(ValueError):
        selector.select("z")


def test_circular_selector_needs_items():
    with pytest.raises(ValueError):
        CircularSelector([])
