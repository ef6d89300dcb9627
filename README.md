# zappyview

`zappyview` is a set of building blocks for a Zappy spectator client. It
contains the state a viewer keeps about a game: map tiles and the resources
on them, players with smooth movement, rotation, command timing and animation
selection, an orbiting camera, a login form, a volume slider, and a TCP
connection that splits what the server sends into lines. The package does no
drawing. It gives a renderer positions, colours, bounding boxes and animation
indices to draw from.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

| Module                 | What it holds |
|------------------------|---------------|
| `zappyview.geometry`   | `Vector3` (add, subtract, `length`, `scaled`), `Ray`, `BoundingBox.intersects(ray)`, `Rectangle.contains(x, y)` |
| `zappyview.tile`       | `TileData` holds food plus six stones, and `resource_counts()` returns all seven. `Tile` provides `center()`, a checkerboard `color()` and `resource_positions()` |
| `zappyview.resources`  | `Color`, `Animation` and `ResourceManager`, which covers team and resource colours, model keys and per-team animation tables |
| `zappyview.network`    | `LineBuffer` splits a byte stream into lines. `Connection` is a threaded TCP client with a message queue and works as a context manager |
| `zappyview.camera`     | `GameCamera` pans, rotates and zooms according to a `CameraInput`, stays inside its bounds, and builds mouse rays with `mouse_ray` |
| `zappyview.player`     | `Player` moves across the wrapping map, turns, and times commands. The module also defines `AnimState` and `command_ticks` |
| `zappyview.ui`         | `level_color` and `format_player_info` for the selected-player panel |
| `zappyview.login`      | `LoginScreen` handles host and port entry, driven by `LoginInput` |
| `zappyview.settings`   | `SettingsPage` is a volume slider from 0 to 100 |

## Examples

Split incoming server data into lines:

```python
from zappyview.network import LineBuffer

buf = LineBuffer()
buf.feed(b"msz 10 10\nsgt 100\npart")   # ['msz 10 10', 'sgt 100']
buf.feed(b"ial\n")                      # ['partial']
```

Talk to a server. `connect` raises `OSError` when the connection cannot be
made. `send_command` returns `False` when it is not connected or the send
fails:

```python
from zappyview.network import Connection

with Connection() as conn:
    conn.connect("127.0.0.1", 4242)
    conn.send_command("GRAPHIC")
    for line in conn.messages():
        print(line)
```

Command durations are counted in server ticks. A player turns ticks into
seconds using its `server_tick_rate`:

```python
from zappyview.player import Player, command_ticks

command_ticks("Forward")       # 7
command_ticks("Fork")          # 42
command_ticks("Incantation")   # 300
command_ticks("Inventory")     # 1

p = Player(1, 0)               # 10x10 map, tiles of size 2 by default
p.set_position(3, 0)
p.orientation                  # 2 (east)
p.target_position              # Vector3(x=7.0, y=0.5, z=1.0)
p.update(0.016)                # glide towards the target
```

## What the package does not do

`zappyview` has no command-line program and opens no window. It has no
container that holds the whole tile grid and all the players together, no
main menu, and no game loop that reads protocol messages (`msz`, `bct`,
`pnw`, `ppo`, `pin`, `sgt`) and applies them. An application that uses this
package has to parse those messages and call `Tile.set_data`,
`Player.set_position`, `Player.start_command` and the other methods itself.