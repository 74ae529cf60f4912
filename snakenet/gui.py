"""Tkinter front end: main menu, game windows and the dialogs between them."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from snakenet.client_net import ClientNetworkManager
from snakenet.controls import handle_key
from snakenet.field import CellContent, GameField
from snakenet.game import TICK_INTERVAL, Game, GameResult

log = logging.getLogger(__name__)

# tkinter is imported where a widget is built, so the protocol helpers of
# this module stay usable on machines without a display toolkit.

CELL_SIZE = 50
"""Side of one cell on screen, in pixels."""

SERVER_HOST = "127.0.0.1"
SERVER_PORT = 12345
POLL_INTERVAL_MS = 50

GameFactory = Callable[[GameField], Game]
NumberField = Tuple[str, int, int, int]

_CELL_COLORS: Dict[CellContent, str] = {
    CellContent.EMPTY: "white",
    CellContent.FRUIT: "red",
    CellContent.SNAKE: "green",
}


def window_size(field_size: int) -> Tuple[int, int]:
    """Width and height of a game window showing a ``field_size`` field."""
    side = field_size * CELL_SIZE
    return side + 20, side + 50


def cell_color(content: CellContent) -> str:
    """The fill colour of a cell holding ``content``; KeyError for anything else."""
    return _CELL_COLORS[content]


def create_session_message(username: str, player_count: int, field_size: int) -> bytes:
    """The request asking the server to open a room led by ``username``."""
    return f"CREATE_SESSION:{username.strip()}:{player_count}:{field_size}".encode("utf-8")


def _grab(dialog) -> None:
    import tkinter as tk

    try:
        dialog.grab_set()
    except tk.TclError:
        log.debug("could not grab input for dialog")


def _ask_restart(parent, message: str) -> bool:
    """Show the game-over dialog; True when the player picks Restart."""
    import tkinter as tk

    dialog = tk.Toplevel(parent)
    dialog.title("Game Over")
    dialog.transient(parent)
    dialog.resizable(False, False)
    chosen: List[bool] = []

    def choose(restart: bool) -> None:
        chosen.append(restart)
        dialog.destroy()

    tk.Label(dialog, text=message).pack(padx=10, pady=5)
    tk.Button(dialog, text="Restart", command=lambda: choose(True)).pack(fill="x", padx=10)
    tk.Button(dialog, text="Exit", command=lambda: choose(False)).pack(fill="x", padx=10, pady=(0, 10))
    dialog.protocol("WM_DELETE_WINDOW", lambda: choose(False))
    _grab(dialog)
    parent.wait_window(dialog)
    return bool(chosen and chosen[0])


def _ask_numbers(parent, title: str, fields: Sequence[NumberField]) -> Optional[List[int]]:
    """Ask for bounded integers with spin boxes; None when the dialog is cancelled.

    Each field is ``(label, lowest, highest, default)``.
    """
    import tkinter as tk

    dialog = tk.Toplevel(parent)
    dialog.title(title)
    dialog.transient(parent)
    dialog.resizable(False, False)
    variables: List[Tuple[tk.StringVar, int, int, int]] = []
    for label, low, high, default in fields:
        tk.Label(dialog, text=label).pack(anchor="w", padx=10, pady=(5, 0))
        variable = tk.StringVar(value=str(default))
        tk.Spinbox(dialog, from_=low, to=high, textvariable=variable, width=6).pack(
            fill="x", padx=10
        )
        variables.append((variable, low, high, default))
    result: List[int] = []

    def accept() -> None:
        for variable, low, high, default in variables:
            try:
                value = int(variable.get().strip())
            except ValueError:
                value = default
            result.append(min(max(value, low), high))
        dialog.destroy()

    tk.Button(dialog, text="OK", command=accept).pack(fill="x", padx=10, pady=(10, 0))
    tk.Button(dialog, text="Cancel", command=dialog.destroy).pack(fill="x", padx=10, pady=(0, 10))
    _grab(dialog)
    parent.wait_window(dialog)
    return result or None


class GameWindow:
    """A window drawing a field; with a game factory it plays single-player snake.

    Without one (``game=None``) the window only shows the field and ignores keys.
    """

    def __init__(self, master, field_size: int = 16, game: Optional[GameFactory] = Game) -> None:
        import tkinter as tk

        self.field = GameField(field_size)
        self.game: Optional[Game] = game(self.field) if game is not None else None
        self.window = tk.Toplevel(master)
        self.window.title("Snake")
        width, height = window_size(field_size)
        self.window.geometry(f"{width}x{height}")
        self.window.resizable(False, False)
        side = field_size * CELL_SIZE
        self.canvas = tk.Canvas(self.window, width=side, height=side, highlightthickness=0)
        self.canvas.pack(padx=10, pady=10)
        self._rects: Dict[Tuple[int, int], int] = {}
        for cell in self.field:
            left, top = cell.x * CELL_SIZE, cell.y * CELL_SIZE
            self._rects[(cell.x, cell.y)] = self.canvas.create_rectangle(
                left,
                top,
                left + CELL_SIZE,
                top + CELL_SIZE,
                fill=cell_color(cell.content),
                outline="black",
            )
        self._unsubscribe = self.field.subscribe(self._on_cell_changed)
        self._timer: Optional[str] = None
        self.window.bind("<Key>", self.on_key)
        self.window.bind("<Destroy>", self._on_destroy)
        self.window.focus_set()

    def on_key(self, event) -> None:
        """Steer the snake and start the game on the first key press."""
        if self.game is None:
            log.debug("multiplayer input: %s", event.keysym)
            return
        handle_key(event.keysym, self.game.snake)
        if self.game.start():
            self._schedule()

    def _schedule(self) -> None:
        self._timer = self.window.after(int(TICK_INTERVAL * 1000), self._tick)

    def _tick(self) -> None:
        self._timer = None
        result = self.game.tick()
        if result is not None:
            self._game_over(result)
        elif self.game.started and not self.game.over:
            self._schedule()

    def _game_over(self, result: GameResult) -> None:
        if _ask_restart(self.window, result.value):
            self.game.restart()
        else:
            self.window.destroy()

    def _on_cell_changed(self, x: int, y: int, content: CellContent) -> None:
        self.canvas.itemconfigure(self._rects[(x, y)], fill=cell_color(content))

    def _on_destroy(self, event) -> None:
        if event.widget is not self.window:
            return
        if self._timer is not None:
            self.window.after_cancel(self._timer)
            self._timer = None
        self._unsubscribe()


class MultiplayerMenu:
    """The menu shown once the server has accepted the player's name."""

    def __init__(self, master, network: ClientNetworkManager, username: str) -> None:
        import tkinter as tk

        self.network = network
        self.username = username
        self.window = tk.Toplevel(master)
        self.window.title("Multiplayer Menu")
        self.window.geometry("300x200")
        self.window.resizable(False, False)
        tk.Label(self.window, text="Multiplayer Menu").pack(pady=5)
        tk.Button(self.window, text="Create Room", command=self.create_room).pack(fill="x", padx=10)
        # The server offers no way to join an existing room yet.
        tk.Button(self.window, text="Join Room", state="disabled").pack(fill="x", padx=10)
        tk.Button(self.window, text="Back to Main Menu", command=self.window.destroy).pack(
            fill="x", padx=10
        )

    def create_room(self) -> Optional[GameWindow]:
        """Ask for the room settings, request the room and open its window."""
        from tkinter import messagebox

        settings = _ask_numbers(
            self.window,
            "Create Room",
            [("Number of players:", 1, 4, 2), ("Field size:", 5, 20, 10)],
        )
        if settings is None:
            return None
        player_count, field_size = settings
        try:
            self.network.send(create_session_message(self.username, player_count, field_size))
        except (RuntimeError, OSError) as exc:
            messagebox.showerror("Create Room", str(exc), parent=self.window)
            return None
        return GameWindow(self.window, field_size, None)


class MainMenu:
    """The first window: pick a single-player or a multiplayer game."""

    def __init__(self, master) -> None:
        import tkinter as tk

        self.master = master
        self.server_address: Tuple[str, int] = (SERVER_HOST, SERVER_PORT)
        self.username: Optional[str] = None
        self.network = ClientNetworkManager(on_registered=self._open_multiplayer_menu)
        master.title("Main Menu")
        master.resizable(False, False)
        self.frame = tk.Frame(master)
        self.frame.pack(fill="both", expand=True, padx=10, pady=10)
        tk.Label(self.frame, text="Main Menu").pack()
        tk.Button(self.frame, text="Singleplayer game", command=self.start_singleplayer).pack(fill="x")
        tk.Button(self.frame, text="Multiplayer game", command=self.start_multiplayer).pack(fill="x")
        self.frame.after(POLL_INTERVAL_MS, self._poll)

    def start_singleplayer(self) -> Optional[GameWindow]:
        """Ask for a field size and open a single-player game of that size."""
        answer = _ask_numbers(
            self.master, "Select Game Field Size", [("Select field size (NxN):", 5, 20, 5)]
        )
        if answer is None:
            return None
        return GameWindow(self.master, answer[0], Game)

    def start_multiplayer(self) -> bool:
        """Ask for a name and register it with the server."""
        from tkinter import messagebox, simpledialog

        username = simpledialog.askstring(
            "Enter username", "Enter your username:", parent=self.master
        )
        if username is None:
            return False
        host, port = self.server_address
        if not self.network.connect(host, port, username):
            messagebox.showerror("Multiplayer", "Failed to bind udp socket", parent=self.master)
            return False
        self.username = username
        return True

    def _open_multiplayer_menu(self) -> None:
        MultiplayerMenu(self.master, self.network, self.username or "")

    def _poll(self) -> None:
        try:
            self.network.poll()
        except OSError as exc:
            log.warning("network error: %s", exc)
        self.frame.after(POLL_INTERVAL_MS, self._poll)


def main(argv: Optional[Sequence[str]] = None) -> int:
    import tkinter as tk

    parser = argparse.ArgumentParser(prog="snakenet", description="Play snake.")
    parser.add_argument("--host", default=SERVER_HOST, help="game server address")
    parser.add_argument("--port", type=int, default=SERVER_PORT, help="game server UDP port")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    root = tk.Tk()
    menu = MainMenu(root)
    menu.server_address = (args.host, args.port)
    try:
        root.mainloop()
    finally:
        menu.network.close()
    return 0