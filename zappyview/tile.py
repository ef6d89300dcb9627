"""Map tiles and the resources lying on them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from zappyview.geometry import Vector3
from zappyview.resources import Color

_EVEN_COLOR = Color(34, 139, 34, 255)
_ODD_COLOR = Color(46, 125, 50, 255)


@dataclass
class TileData:
    """Resource counts on one tile: food and six kinds of stone."""

    food: int = 0
    stones: tuple[int, ...] = field(default=(0, 0, 0, 0, 0, 0))

    def __post_init__(self) -> None:
        self.stones = tuple(self.stones)
        if len(self.stones) != 6:
            raise ValueError(f"expected 6 stone counts, got {len(self.stones)}")

    def resource_counts(self) -> tuple[int, ...]:
        """All seven counts, food first."""
        return (self.food, *self.stones)


class Tile:
    """One square of the map, placed in world space."""

    resource_height = 0.1
    resource_spacing = 0.3

    def __init__(self, x: int, y: int, tile_size: float = 2.0) -> None:
        self.x = x
        self.y = y
        self.tile_size = tile_size
        self.data = TileData()
        self.world_position = Vector3(x * tile_size, 0.0, y * tile_size)

    def set_data(self, data: TileData) -> None:
        """Replace the resource counts of the tile."""
        self.data = data

    def center(self) -> Vector3:
        """Centre of the tile on the ground plane."""
        half = self.tile_size * 0.5
        return Vector3(self.world_position.x + half, 0.0, self.world_position.z + half)

    def color(self) -> Color:
        """Checkerboard colour of the tile."""
        return _EVEN_COLOR if (self.x + self.y) % 2 == 0 else _ODD_COLOR

    def resource_positions(self) -> list[tuple[int, Vector3]]:
        """Where each resource item is drawn, as (resource index, position) pairs."""
        angle_step = 2 * math.pi / 7.0
        radius = self.tile_size * 0.3
        origin = self.world_position
        positions = []
        for kind, count in enumerate(self.data.resource_counts()):
            for j in range(count):
                angle = kind * angle_step + j * 0.15
                positions.append(
                    (
                        kind,
                        Vector3(
                            origin.x + math.cos(angle) * radius,
                            origin.y + self.resource_height + 0.2 * j,
                            origin.z + math.sin(angle) * radius,
                        ),
                    )
                )
        return positions