# snakenet

A snake game on a square grid. You can play it alone in a desktop window.
A small UDP server keeps multiplayer rooms.

## Installing

```
pip install .
```

The desktop client uses `tkinter` from the standard library. The package
has no other dependencies.

## Playing alone

```
snakenet
```

This opens the main menu. Choose **Singleplayer game** and pick a field
size from 5×5 up to 20×20. The game starts on the first key press. Steer
with these keys:

| Key | Direction |
|-----|-----------|
| W   | up        |
| S   | down      |
| A   | left      |
| D   | right     |

The snake cannot turn straight back on itself. Each fruit that it eats
makes it one segment longer. The game ends when the snake hits a wall or
its own body. A dialog then shows the result and offers **Restart** or
**Exit**.

The client takes `--host` and `--port` (by default `127.0.0.1` and
`12345`). These set the server that it uses for multiplayer.

## The server

```
snakenet-server [--host ADDRESS] [--port PORT] [-v]
```

The server binds a UDP socket, by default on `0.0.0.0:12345`. `-v` logs
every request. The server understands these datagrams:

| Request | Effect |
|---------|--------|
| `REGISTER_PLAYER: <name>` | Registers the sender's address under `<name>` and answers `REGISTER_SUCCESS`. If the name is taken, it answers `ERROR Player already registered` to the registered player. |
| `CREATE_SESSION:<leader>:<players>:<field size>` | Opens a room led by `<leader>` and answers `ROOM_CREATED`. |
| `INVITE_PLAYER <inviter> <invitee>` | Sends `INVITE from <inviter>` to the invitee and `SUCCESS Invitation sent` to the inviter. |

Malformed requests and requests of any other type are logged and dropped.

A room starts its game by itself once it holds as many players as it
allows. While the game runs, the server moves every snake every half
second. A snake that runs into a wall, itself or another snake drops out.
After each step the server sends every player in the room the state as
JSON, in this form:

```
{"snakes": {"<name>": [{"x": 0, "y": 0}, ...]}}
```

## Multiplayer in the client

In the client, choose **Multiplayer game** and enter a username. The
client registers that name with the server. When the server accepts the
name, the multiplayer menu opens. **Create Room** asks for the number of
players (1–4) and the field size (5–20). It sends the `CREATE_SESSION`
request and opens a window showing an empty field of that size.

## What it does not do

- The client has no way to join a room. **Join Room** is disabled, and the
  server has no request that adds a player to an existing room. Only a
  room for a single player ever fills and starts.
- Players cannot steer in a multiplayer game. Key presses in a multiplayer
  window are ignored, and the server takes no direction requests.
- The client does not read the game state that the server sends. The
  multiplayer window never shows the snakes.

## Using the pieces from Python

The game logic does not depend on the window, so you can drive it
directly:

```python
import random

from snakenet.controls import handle_key
from snakenet.field import GameField
from snakenet.game import Game

field = GameField(10)
game = Game(field, random.Random(1))
handle_key("s", game.snake)
game.start()
result = game.tick()  # a GameResult once the game ends, else None
```

- `snakenet.field`: the grid. `GameField` is made of `Cell` objects, and
  each cell holds a `CellContent`. `GameField.subscribe` reports every
  change to a cell.
- `snakenet.snake`, `snakenet.rules`, `snakenet.game`: the single-player
  game (`Snake`, `Direction`, `GameRules`, `Game`, `GameResult`).
- `snakenet.controls`: `handle_key` maps W/A/S/D to turns.
- `snakenet.server_snake`, `snakenet.server_rules`, `snakenet.server_game`:
  the multiplayer game (`PlayerSnake`, `MultiplayerRules`,
  `MultiplayerGame`).
- `snakenet.session`: the rooms (`Session`, `SessionManager`).
- `snakenet.server`: the server. `SnakeServer` takes a send function, so it
  can run without a socket. `serve` runs it on UDP.
- `snakenet.client_net`: the client side of the protocol
  (`ClientNetworkManager`, `ResponseRouter`).
- `snakenet.gui`: the tkinter windows.

## Running the tests

```
pip install .[test]
pytest
```