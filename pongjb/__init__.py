"""Two-player Pong game: ball, paddles, button, match rules and a pygame window."""

__version__ = "0.1.0"