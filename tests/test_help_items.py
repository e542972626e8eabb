import pytest

from meshcore.exceptions import InvalidInputException
from meshcore.help_items import HelpItems


def _window_items() -> HelpItems:
    items = HelpItems()
    items.add("F", "Toggle fullscreen mode")
    items.add("G", "Toggle GUI dialog")
    items.add("PageUp/Down", "Scale GUI dialogs")
    return items


def test_empty_by_default():
    items = HelpItems()
    assert len(items) == 0
    assert list(items) == []


def test_append_keeps_order():
    items = _window_items()
    assert [key for key, _ in items] == ["F", "G", "PageUp/Down"]
    assert list(items)[0] == ("F", "Toggle fullscreen mode")


def test_insert_at_positions_like_viewer():
    items = _window_items()
    items.add("Left/Right", "Rotate model horizontally", 0)
    items.add("Up/Down", "Rotate model vertically", 1)
    items.add("Space", "Cycle through draw modes", 2)
    items.add("Backspace", "Reload mesh", 3)
    keys = [key for key, _ in items]
    assert keys == [
        "Left/Right",
        "Up/Down",
        "Space",
        "Backspace",
        "F",
        "G",
        "PageUp/Down",
    ]


def test_insert_at_end_position():
    items = _window_items()
    items.add("W", "Write mesh to 'output.off'", len(items))
    assert list(items)[-1] == ("W", "Write mesh to 'output.off'")
    assert len(items) == 4


def test_clear_removes_everything():
    items = _window_items()
    items.clear()
    assert len(items) == 0
    items.add("Esc/Q", "Quit application")
    assert list(items) == [("Esc/Q", "Quit application")]


@pytest.mark.parametrize("position", [-2, 4, 100])
def test_out_of_range_position_raises(position):
    items = _window_items()
    with pytest.raises(InvalidInputException):
        items.add("P", "Save screenshot", position)
    assert len(items) == 3


def test_invalid_input_is_value_error():
    items = HelpItems()
    with pytest.raises(ValueError):
        items.add("P", "Save screenshot", 1)