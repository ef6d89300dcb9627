import pytest

from zappyview.settings import SettingsPage


def test_default_label():
    page = SettingsPage()
    assert page.volume == 50.0
    assert page.label == "Volume: 50%"


def test_knob_starts_at_volume():
    page = SettingsPage(0.0)
    assert page.knob_x == page.bar.x


def test_drag_to_ends():
    page = SettingsPage()
    assert page.handle_drag(page.bar.x, page.bar.y, True)
    assert page.volume == 0.0
    assert page.label == "Volume: 0%"
    page.handle_drag(page.bar.x + page.bar.width, page.bar.y, True)
    assert page.volume == 100.0
    assert page.label == "Volume: 100%"


def test_drag_moves_knob():
    page = SettingsPage()
    x = page.bar.x + page.bar.width / 4
    page.handle_drag(x, page.bar.y + 5, True)
    assert page.knob_x == x
    assert page.knob_y == page.bar.y + 2
    assert page.volume == pytest.approx(25.0)


@pytest.mark.parametrize(
    "dx,dy,down",
    [(10.0, 0.0, False), (10.0, 11.0, True), (-1.0, 0.0, True), (301.0, 0.0, True)],
)
def test_drag_ignored(dx, dy, down):
    page = SettingsPage()
    changed = page.handle_drag(page.bar.x + dx, page.bar.y + dy, down)
    assert changed is False
    assert page.volume == 50.0
    assert page.label == "Volume: 50%"