"""Colours, asset names and animation lookup shared by the viewer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


LIGHTGRAY = Color(200, 200, 200)
GRAY = Color(130, 130, 130)
DARKGRAY = Color(80, 80, 80)
YELLOW = Color(253, 249, 0)
GOLD = Color(255, 203, 0)
ORANGE = Color(255, 161, 0)
RED = Color(230, 41, 55)
GREEN = Color(0, 228, 48)
LIME = Color(0, 158, 47)
SKYBLUE = Color(102, 191, 255)
BLUE = Color(0, 121, 241)
PURPLE = Color(200, 122, 255)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)

PLAYER_MODEL_PATHS = {
    "player1": "gui/gui/assets/models/scuttle_crab.glb",
    "player2": "gui/gui/assets/models/scuttle_crab2.glb",
}

RESOURCE_MODEL_PATHS = (
    "gui/gui/assets/models/yellow.glb",
    "gui/gui/assets/models/azur.glb",
    "gui/gui/assets/models/diiamond.glb",
    "gui/gui/assets/models/orange.glb",
    "gui/gui/assets/models/green.glb",
    "gui/gui/assets/models/purple.glb",
    "gui/gui/assets/models/red.glb",
)

_TEAM_COLORS = (RED, BLUE, GREEN, YELLOW, PURPLE, ORANGE)
_RESOURCE_COLORS = (YELLOW, SKYBLUE, GRAY, ORANGE, LIME, PURPLE, RED)


@dataclass(frozen=True)
class Animation:
    """A named skeletal animation and its number of frames."""

    name: Optional[str]
    frame_count: int


@dataclass
class _TeamAnimations:
    animations: tuple[Animation, ...] = ()
    names: list[str] = field(default_factory=list)


class ResourceManager:
    """Holds per-team player animations and maps ids to colours and models."""

    def __init__(self) -> None:
        # Team 1 uses the second model; every other team uses the first.
        self._teams: dict[int, _TeamAnimations] = {
            0: _TeamAnimations(),
            1: _TeamAnimations(),
        }

    def set_player_animations(self, team_id: int, animations: Iterable[Animation]) -> None:
        """Install the animations of the model used by ``team_id``."""
        anims = tuple(animations)
        entry = _TeamAnimations(anims, [a.name for a in anims if a.name])
        self._teams[1 if team_id == 1 else 0] = entry

    def player_animations(self, team_id: int) -> tuple[Animation, ...]:
        """Animations of the model used by ``team_id``."""
        return self._teams.get(team_id, self._teams[0]).animations

    def player_anim_count(self, team_id: int) -> int:
        """Number of animations of the model used by ``team_id``."""
        return len(self._teams.get(team_id, self._teams[0]).animations)

    def player_anim_index_by_name(self, name: str, team_id: int = 0) -> int:
        """Index of the named animation, or 0 when it is unknown."""
        names = self._teams.get(team_id, self._teams[0]).names
        try:
            return names.index(name)
        except ValueError:
            return 0

    def player_model_key(self, team_id: int) -> str:
        """Model name used to draw players of ``team_id``, falling back to the first model."""
        key = "player1" if team_id == 0 else "player2"
        if key not in PLAYER_MODEL_PATHS:
            return "player1"
        return key

    def resource_model_key(self, resource_type: int) -> str:
        """Model name used to draw resource ``resource_type``."""
        return f"resource_{resource_type}"

    def team_color(self, team_id: int) -> Color:
        """Colour of a team, cycling through six colours."""
        return _TEAM_COLORS[team_id % len(_TEAM_COLORS)]

    def resource_color(self, resource_type: int) -> Color:
        """Colour of a resource kind, cycling through seven colours."""
        return _RESOURCE_COLORS[resource_type % len(_RESOURCE_COLORS)]