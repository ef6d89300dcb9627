"""The connection form shown before joining a server."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from zappyview.geometry import Rectangle

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 4242
MAX_HOST_LENGTH = 15
MAX_PORT_LENGTH = 5
BLINK_PERIOD = 0.5


@dataclass
class LoginInput:
    """Input gathered during one frame of the login screen."""

    mouse_x: float = 0.0
    mouse_y: float = 0.0
    clicked: bool = False
    text: str = ""
    backspace: bool = False
    enter: bool = False
    escape: bool = False
    tab: bool = False


class LoginScreen:
    """Host and port entry with connect and exit buttons."""

    def __init__(self, screen_width: int = 1920, screen_height: int = 1080) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.host = DEFAULT_HOST
        self.port_text = str(DEFAULT_PORT)
        self.port = DEFAULT_PORT
        self.host_active = False
        self.port_active = False
        self.login_requested = False
        self.should_exit = False
        self.blink_timer = 0.0
        self.show_cursor = True

        cx = screen_width * 0.5
        cy = screen_height * 0.5
        self.host_box = Rectangle(cx - 200, cy - 60, 400, 50)
        self.port_box = Rectangle(cx - 200, cy + 20, 400, 50)
        self.connect_button = Rectangle(cx - 120, cy + 100, 240, 50)
        self.exit_button = Rectangle(cx - 120, cy + 170, 240, 50)

    @property
    def can_connect(self) -> bool:
        """Whether both fields hold something."""
        return bool(self.host) and bool(self.port_text)

    def update(self, delta_time: float, events: Optional[LoginInput] = None) -> None:
        """Apply one frame of input, blink the cursor and re-read the port."""
        self._handle_input(events or LoginInput())

        self.blink_timer += delta_time
        if self.blink_timer >= BLINK_PERIOD:
            self.show_cursor = not self.show_cursor
            self.blink_timer = 0.0

        try:
            port = int(self.port_text)
        except ValueError:
            port = DEFAULT_PORT
        self.port = port if 0 < port <= 65535 else DEFAULT_PORT

    def reset_login_request(self) -> None:
        """Clear a pending connection request."""
        self.login_requested = False

    def _handle_input(self, events: LoginInput) -> None:
        mx, my = events.mouse_x, events.mouse_y
        if events.clicked:
            self.host_active = self.host_box.contains(mx, my)
            self.port_active = self.port_box.contains(mx, my)
            if self.connect_button.contains(mx, my) and self.can_connect:
                self.login_requested = True
                logger.info("Connecting to %s:%s", self.host, self.port_text)
            if self.exit_button.contains(mx, my):
                self.should_exit = True

        for char in events.text:
            if self.host_active and len(self.host) < MAX_HOST_LENGTH:
                if 32 <= ord(char) <= 125:
                    self.host += char
            elif self.port_active and len(self.port_text) < MAX_PORT_LENGTH:
                if "0" <= char <= "9":
                    self.port_text += char

        if events.backspace:
            if self.host_active and self.host:
                self.host = self.host[:-1]
            elif self.port_active and self.port_text:
                self.port_text = self.port_text[:-1]

        if events.enter and self.can_connect:
            self.login_requested = True

        if events.escape:
            self.should_exit = True

        if events.tab:
            if self.host_active:
                self.host_active, self.port_active = False, True
            elif self.port_active:
                self.port_active, self.host_active = False, True
            else:
                self.host_active = True