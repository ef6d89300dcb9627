"""Orbiting camera that follows a target point over the map."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from zappyview.geometry import Ray, Vector3


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.y * b.z - a.z * b.y, a.z * b.x - a.x * b.z, a.x * b.y - a.y * b.x)


def _normalized(v: Vector3) -> Vector3:
    length = v.length()
    return v if length == 0 else v.scaled(1.0 / length)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass
class CameraInput:
    """Camera controls held or pressed during one frame."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    rotate_left: bool = False
    rotate_right: bool = False
    view: Optional[int] = None
    reset: bool = False
    wheel: float = 0.0


class GameCamera:
    """Perspective camera orbiting a smoothed target point."""

    def __init__(self, screen_width: int = 1920, screen_height: int = 1080) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.position = Vector3(40.0, 40.0, 40.0)
        self.target = Vector3(0.0, 0.0, 0.0)
        self.up = Vector3(0.0, 1.0, 0.0)
        self.fovy = 45.0

        self.distance = 60.0
        self.angle = 45.0
        self.rotation = 45.0
        self.min_distance = 8.0
        self.max_distance = 200.0

        self.min_x = -50.0
        self.max_x = 50.0
        self.min_z = -50.0
        self.max_z = 50.0

        self.target_position = self.target
        self.smooth_speed = 8.0
        self.rotation_speed = 90.0
        self.pan_speed = 25.0
        self.zoom_speed = 8.0

    def update(self, delta_time: float, controls: Optional[CameraInput] = None) -> None:
        """Apply one frame of input, then move the camera towards its target."""
        controls = controls or CameraInput()
        self._handle_keyboard(delta_time, controls)
        self._handle_wheel(controls.wheel)
        step = self.smooth_speed * delta_time
        self.target = Vector3(
            self.target.x + (self.target_position.x - self.target.x) * step,
            self.target.y,
            self.target.z + (self.target_position.z - self.target.z) * step,
        )
        self._update_position()

    def set_target(self, target: Vector3) -> None:
        """Point the camera should glide towards."""
        self.target_position = target

    def set_bounds(self, min_x: float, max_x: float, min_z: float, max_z: float) -> None:
        """Limits of the target on the ground plane."""
        self.min_x, self.max_x = min_x, max_x
        self.min_z, self.max_z = min_z, max_z

    def mouse_ray(
        self, mouse_x: float, mouse_y: float, screen_width: int, screen_height: int
    ) -> Ray:
        """Ray from the camera through a point on the screen."""
        ndc_x = (2.0 * mouse_x) / screen_width - 1.0
        ndc_y = 1.0 - (2.0 * mouse_y) / screen_height
        forward = _normalized(self.target - self.position)
        right = _normalized(_cross(forward, self.up))
        cam_up = _cross(right, forward)
        tan_half = math.tan(math.radians(self.fovy) / 2.0)
        aspect = screen_width / screen_height
        direction = (
            forward
            + right.scaled(ndc_x * tan_half * aspect)
            + cam_up.scaled(ndc_y * tan_half)
        )
        return Ray(self.position, _normalized(direction))

    def _handle_keyboard(self, delta_time: float, controls: CameraInput) -> None:
        move = self.pan_speed * delta_time
        turn = self.rotation_speed * delta_time
        rad = math.radians(self.rotation)
        forward = Vector3(math.sin(rad), 0.0, math.cos(rad)).scaled(move)
        right = Vector3(math.cos(rad), 0.0, -math.sin(rad)).scaled(move)

        target = self.target_position
        if controls.forward:
            target = target - forward
        if controls.backward:
            target = target + forward
        if controls.left:
            target = target - right
        if controls.right:
            target = target + right

        if controls.rotate_left:
            self.rotation -= turn
        if controls.rotate_right:
            self.rotation += turn

        if controls.view is not None and 0 <= controls.view <= 3:
            self.rotation = 90.0 * controls.view

        if controls.reset:
            target = Vector3(0.0, target.y, 0.0)
            self.rotation = 45.0
            self.distance = 60.0
            self.angle = 45.0

        self.target_position = Vector3(
            _clamp(target.x, self.min_x, self.max_x),
            target.y,
            _clamp(target.z, self.min_z, self.max_z),
        )

    def _handle_wheel(self, wheel: float) -> None:
        if wheel != 0:
            self.distance = _clamp(
                self.distance - wheel * self.zoom_speed,
                self.min_distance,
                self.max_distance,
            )

    def _update_position(self) -> None:
        rad_angle = math.radians(self.angle)
        rad_rotation = math.radians(self.rotation)
        self.position = Vector3(
            self.target.x + self.distance * math.cos(rad_angle) * math.sin(rad_rotation),
            self.target.y + self.distance * math.sin(rad_angle),
            self.target.z + self.distance * math.cos(rad_angle) * math.cos(rad_rotation),
        )