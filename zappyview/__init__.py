"""Building blocks of a Zappy spectator: geometry, tiles, players, camera, login and networking."""

__version__ = "1.0.0"