"""A player avatar: grid position, smoothed motion, command timing and animation."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from zappyview.geometry import BoundingBox, Vector3
from zappyview.resources import ResourceManager

logger = logging.getLogger(__name__)


class AnimState(Enum):
    """High-level animation states of a player."""

    IDLE = 0
    RUN = 1
    CAST = 2
    INCANT = 3
    CELEBRATE = 4
    INTERACT = 5


_STATE_ANIMATIONS = {
    AnimState.RUN: "Run",
    AnimState.CAST: "Cast_Animation",
    AnimState.INCANT: "Into_Cast",
    AnimState.CELEBRATE: "Celebrate",
    AnimState.INTERACT: "Interact",
}

_TIMED_STATES = {AnimState.CAST, AnimState.INTERACT, AnimState.INCANT}

_SEVEN_TICK_COMMANDS = frozenset(
    {"Forward", "Right", "Left", "Look", "Broadcast", "Eject", "Take", "Set"}
)

_ORIENTATION_ROTATIONS = {1: 0.0, 2: 90.0, 3: 180.0, 4: 270.0}

# Command name -> (animation name, fallback state when that animation is missing)
_COMMAND_ANIMATIONS = {
    "Forward": ("Run", AnimState.RUN),
    "Look": ("SRU_Crab_Flee", AnimState.INTERACT),
    "Incantation": ("Crab_Stun", AnimState.INCANT),
    "Take": ("Crab_Dance", AnimState.INTERACT),
    "Set": ("Crab_Dance", AnimState.INTERACT),
    "Fork": ("Crab_Spawn", AnimState.IDLE),
}

_ANIMATION_FPS = 24.0


def command_ticks(command: str) -> int:
    """Number of server ticks a player command takes."""
    if command in _SEVEN_TICK_COMMANDS:
        return 7
    if command == "Fork":
        return 42
    if command == "Incantation":
        return 300
    return 1


class Player:
    """One player on the map, moving and animating towards server state."""

    move_speed = 5.0
    bounding_half_width = 0.3
    bounding_height = 0.5

    def __init__(self, player_id: int, team_id: int) -> None:
        self.id = player_id
        self.team_id = team_id
        self.x = 0
        self.y = 0
        self.orientation = 1
        self.level = 1
        self.inventory: list[int] = [0] * 7

        self.world_position = Vector3(0.0, 0.0, 0.0)
        self.target_position = self.world_position
        self.rotation = 0.0
        self.target_rotation = 0.0
        self.is_moving = False

        self.anim_state = AnimState.IDLE
        self.current_anim = 0
        self.anim_frame = 0.0
        self.special_anim_timer = 0.0
        self.resources: Optional[ResourceManager] = None

        self.tile_size = 2.0
        self.map_width = 10
        self.map_height = 10
        self.server_tick_rate = 10.0

        self.current_command = ""
        self.command_timer = 0.0
        self.command_duration = 0.0
        self.executing_command = False
        logger.debug("Player %d created at (0,0)", self.id)

    def attach_resources(self, resources: Optional[ResourceManager]) -> None:
        """Give the player access to animations."""
        self.resources = resources
        if resources is not None:
            self.set_anim_state(AnimState.IDLE)

    def set_position(self, x: int, y: int) -> None:
        """Move to a tile, wrapping around the map and facing the shortest way."""
        x %= self.map_width
        y %= self.map_height
        dx = x - self.x
        dy = y - self.y
        half_w = self.map_width // 2
        half_h = self.map_height // 2
        if dx > half_w:
            dx -= self.map_width
        elif dx < -half_w:
            dx += self.map_width
        if dy > half_h:
            dy -= self.map_height
        elif dy < -half_h:
            dy += self.map_height

        if dx > 0:
            self.set_orientation(2)
        elif dx < 0:
            self.set_orientation(4)
        elif dy > 0:
            self.set_orientation(3)
        elif dy < 0:
            self.set_orientation(1)

        self.x = x
        self.y = y
        half = self.tile_size * 0.5
        self.target_position = Vector3(
            x * self.tile_size + half, 0.5, y * self.tile_size + half
        )
        self.is_moving = True
        logger.debug(
            "Player %d set to (%d,%d) facing %d (delta %d,%d)",
            self.id, x, y, self.orientation, dx, dy,
        )

    def set_orientation(self, orientation: int) -> None:
        """Face north (1), east (2), south (3) or west (4)."""
        self.orientation = orientation
        if orientation in _ORIENTATION_ROTATIONS:
            self.target_rotation = _ORIENTATION_ROTATIONS[orientation]

    def look(self) -> None:
        """Spin the player once on itself."""
        self.target_rotation += 360.0

    def start_command(self, command: str) -> None:
        """Begin a timed command and play the animation that goes with it."""
        self.current_command = command
        self.executing_command = True
        self.command_timer = 0.0
        self.command_duration = command_ticks(command) / self.server_tick_rate
        logger.debug(
            "Player %d started %s (%.3fs)", self.id, command, self.command_duration
        )

        if command == "Right":
            self.target_rotation += 90.0
            self.set_anim_state(AnimState.IDLE)
        elif command == "Left":
            self.target_rotation -= 90.0
            self.set_anim_state(AnimState.IDLE)
        else:
            name, fallback = _COMMAND_ANIMATIONS.get(command, ("Idle1", AnimState.IDLE))
            if self.resources is not None and not self._play(name):
                self.set_anim_state(fallback)

    def spawn_animation(self) -> None:
        """Play the spawn animation, falling back to the idle one."""
        if self.resources is None:
            return
        if not self._play("Crab_Spawn"):
            self._play("Idle1")

    def set_anim_state(self, state: AnimState, special_duration: float = 0.0) -> None:
        """Switch to another animation state; needs resources to take effect."""
        if state == self.anim_state or self.resources is None:
            return
        self.anim_state = state
        if not self._play(_STATE_ANIMATIONS.get(state, "Idle1")):
            self.current_anim = 0
            self.anim_frame = 0.0
        if state in _TIMED_STATES:
            self.special_anim_timer = special_duration

    def update(self, delta_time: float) -> None:
        """Advance command timing, motion, rotation and animation by one frame."""
        if self.executing_command:
            self.command_timer += delta_time
            if self.command_timer >= self.command_duration:
                logger.debug("Player %d finished %s", self.id, self.current_command)
                self.executing_command = False
                self.current_command = ""
                self.command_timer = 0.0
                self.set_anim_state(AnimState.RUN if self.is_moving else AnimState.IDLE)

        diff = self.target_position - self.world_position
        dist = diff.length()
        if dist > 0.01:
            step = min(1.0, delta_time * self.move_speed / dist)
            self.world_position = self.world_position + diff.scaled(step)
            self.is_moving = True
        else:
            self.world_position = self.target_position
            self.is_moving = False

        rot_diff = self.target_rotation - self.rotation
        if rot_diff > 180:
            rot_diff -= 360
        if rot_diff < -180:
            rot_diff += 360
        self.rotation += rot_diff * 5.0 * delta_time

        if self.special_anim_timer > 0.0:
            self.special_anim_timer -= delta_time
            if self.special_anim_timer <= 0.0:
                self.set_anim_state(AnimState.RUN if self.is_moving else AnimState.IDLE)
        elif not self.executing_command:
            self.set_anim_state(AnimState.RUN if self.is_moving else AnimState.IDLE)

        self._advance_frame(delta_time)

    def bounding_box(self) -> BoundingBox:
        """Box used to pick the player with the mouse."""
        p = self.world_position
        w = self.bounding_half_width
        return BoundingBox(
            Vector3(p.x - w, p.y, p.z - w),
            Vector3(p.x + w, p.y + self.bounding_height, p.z + w),
        )

    def _play(self, name: str) -> bool:
        """Select the named animation; False when the index is unusable."""
        if self.resources is None:
            return False
        index = self.resources.player_anim_index_by_name(name, self.team_id)
        if 0 <= index < self.resources.player_anim_count(self.team_id):
            self.current_anim = index
            self.anim_frame = 0.0
            return True
        return False

    def _advance_frame(self, delta_time: float) -> None:
        if self.resources is None:
            return
        animations = self.resources.player_animations(self.team_id)
        if not 0 <= self.current_anim < len(animations):
            return
        self.anim_frame += delta_time * _ANIMATION_FPS
        if self.anim_frame >= animations[self.current_anim].frame_count:
            self.anim_frame = 0.0