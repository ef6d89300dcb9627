"""Text and colours of the selected-player panel."""

from __future__ import annotations

from zappyview.player import Player
from zappyview.resources import (
    BLUE,
    GOLD,
    GRAY,
    GREEN,
    ORANGE,
    PURPLE,
    RED,
    WHITE,
    Color,
)

RESOURCE_LABELS = ("FOOD", "LIME", "DERA", "SIBU", "MEND", "PHIR", "THYS")

_LEVEL_COLORS = {
    1: GRAY,
    2: GREEN,
    3: BLUE,
    4: PURPLE,
    5: ORANGE,
    6: RED,
    7: GOLD,
    8: Color(255, 215, 0, 255),
}

_COLUMN = 6


def level_color(level: int) -> Color:
    """Colour used to show a player's level."""
    return _LEVEL_COLORS.get(level, WHITE)


def format_player_info(player: Player) -> list[str]:
    """Lines of the player information panel."""
    counts = list(player.inventory[: len(RESOURCE_LABELS)])
    counts += [0] * (len(RESOURCE_LABELS) - len(counts))
    header = "LEVEL".ljust(_COLUMN) + "".join(
        label.rjust(_COLUMN) for label in RESOURCE_LABELS
    )
    values = str(player.level).ljust(_COLUMN) + "".join(
        str(count).rjust(_COLUMN) for count in counts
    )
    return [
        f"ID: #{player.id}",
        f"Team: {player.team_id}",
        f"Pos: ({player.x}, {player.y})",
        "INVENTORY",
        header,
        values,
    ]