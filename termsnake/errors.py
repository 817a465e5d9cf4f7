"""Exceptions raised by termsnake."""


class SnakeError(Exception):
    """Base class for all termsnake errors."""


class BoardFullError(SnakeError):
    """No free cell is left to place the food on."""


class ConfigError(SnakeError):
    """A configuration value could not be parsed or is out of range."""


class TerminalTooSmallError(SnakeError):
    """The terminal cannot fit the playfield."""

    def __init__(self, needed: tuple[int, int], available: tuple[int, int]):
        self.needed = needed
        self.available = available
        super().__init__(
            f"terminal is {available[0]}x{available[1]}, "
            f"the game needs at least {needed[0]}x{needed[1]}"
        )
