"""Settings page with a volume slider."""

from __future__ import annotations

from zappyview.geometry import Rectangle


class SettingsPage:
    """A horizontal volume slider from 0 to 100."""

    def __init__(self, volume: float = 50.0) -> None:
        self.volume = volume
        self.bar = Rectangle(150.0, 200.0, 300.0, 5.0)
        self.knob_radius = 10.0
        self.knob_x = self.bar.x + (volume / 100.0) * self.bar.width
        self.knob_y = 202.0

    @property
    def label(self) -> str:
        """Text shown above the slider."""
        return f"Volume: {int(self.volume)}%"

    def handle_drag(self, x: float, y: float, button_down: bool) -> bool:
        """Move the knob to a pointer on the bar; True when the volume changed."""
        if not button_down:
            return False
        bar = self.bar
        if not (bar.y - 10 <= y <= bar.y + 10 and bar.x <= x <= bar.x + bar.width):
            return False
        self.knob_x = x
        self.knob_y = bar.y + 2
        volume = (x - bar.x) / bar.width * 100.0
        self.volume = max(0.0, min(volume, 100.0))
        return True