"""Snake on a square grid: single-player tkinter game and a UDP server for multiplayer rooms."""

__version__ = "0.1.0"