import pytest

from zappyview.login import LoginInput, LoginScreen


def _click(box):
    return LoginInput(
        mouse_x=box.x + box.width / 2, mouse_y=box.y + box.height / 2, clicked=True
    )


@pytest.fixture
def screen():
    return LoginScreen(1920, 1080)


def test_defaults(screen):
    screen.update(0.0)
    assert screen.host == "127.0.0.1"
    assert screen.port == 4242
    assert not screen.login_requested
    assert not screen.should_exit


def test_click_activates_fields(screen):
    screen.update(0.0, _click(screen.host_box))
    assert screen.host_active and not screen.port_active
    screen.update(0.0, _click(screen.port_box))
    assert screen.port_active and not screen.host_active


def test_host_length_is_limited(screen):
    screen.update(0.0, _click(screen.host_box))
    screen.update(0.0, LoginInput(text="0123456789abcdef"))
    assert len(screen.host) == 15
    assert screen.host.startswith("127.0.0.1")


def test_host_rejects_characters_out_of_range(screen):
    screen.update(0.0, _click(screen.host_box))
    screen.update(0.0, LoginInput(text="~\t"))
    assert screen.host == "127.0.0.1"


def test_port_typing_and_backspace(screen):
    screen.update(0.0, _click(screen.port_box))
    for _ in range(4):
        screen.update(0.0, LoginInput(backspace=True))
    screen.update(0.0, LoginInput(text="8x0"))
    assert screen.port_text == "80"
    assert screen.port == 80


def test_invalid_port_falls_back(screen):
    screen.update(0.0, _click(screen.port_box))
    screen.port_text = ""
    screen.update(0.0, LoginInput(text="99999"))
    assert screen.port_text == "99999"
    assert screen.port == 4242


def test_enter_requests_login_and_reset(screen):
    screen.update(0.0, LoginInput(enter=True))
    assert screen.login_requested
    screen.reset_login_request()
    assert not screen.login_requested


def test_enter_with_empty_port_does_nothing(screen):
    screen.port_text = ""
    screen.update(0.0, LoginInput(enter=True))
    assert not screen.login_requested
    assert screen.port == 4242


def test_buttons(screen):
    screen.update(0.0, _click(screen.connect_button))
    assert screen.login_requested
    assert not screen.should_exit
    screen.update(0.0, _click(screen.exit_button))
    assert screen.should_exit


def test_escape_exits(screen):
    screen.update(0.0, LoginInput(escape=True))
    assert screen.should_exit


def test_tab_cycles_fields(screen):
    screen.update(0.0, LoginInput(tab=True))
    assert screen.host_active and not screen.port_active
    screen.update(0.0, LoginInput(tab=True))
    assert screen.port_active and not screen.host_active
    screen.update(0.0, LoginInput(tab=True))
    assert screen.host_active and not screen.port_active


def test_cursor_blinks(screen):
    start = screen.show_cursor
    screen.update(0.2)
    assert screen.show_cursor == start
    screen.update(0.3)
    assert screen.show_cursor != start
    assert screen.blink_timer == 0.0