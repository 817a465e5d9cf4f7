"""
termsnake - Terminal front end

Curses implementations of the surface and the input source. ``play`` runs a
whole game under ``curses.wrapper`` so the terminal is put back in its normal
mode however the game ends.

Controls:
    Arrow Keys / WASD - Change direction
    Q / ESC           - Quit
"""

import curses
import logging
from collections import deque

from .cell import Color, Direction
from .config import SCORE_POSITION, TITLE_POSITION
from .errors import TerminalTooSmallError
from .events import DirectionKey, OtherKey, QuitKey
from .game import Game

logger = logging.getLogger(__name__)

BLOCK = "█"
ESC = 27

CURSES_COLORS = {
    Color.RED: curses.COLOR_RED,
    Color.BLUE: curses.COLOR_BLUE,
    Color.WHITE: curses.COLOR_WHITE,
    Color.GREEN: curses.COLOR_GREEN,
    Color.MAGENTA: curses.COLOR_MAGENTA,
}

KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    ord("w"): Direction.UP,
    ord("s"): Direction.DOWN,
    ord("a"): Direction.LEFT,
    ord("d"): Direction.RIGHT,
}

QUIT_KEYS = {ord("q"), ord("Q"), ESC}

SCORE_WIDTH = len("Score: ") + 4   # room for a four-digit score


def translate_key(code: int):
    """Map a curses key code to a game event."""
    if code in QUIT_KEYS:
        return QuitKey()
    direction = KEY_DIRECTIONS.get(code)
    if direction is None and 0 <= code < 256:
        direction = KEY_DIRECTIONS.get(ord(chr(code).lower()))
    if direction is not None:
        return DirectionKey(direction)
    return OtherKey(code)


def required_size(config) -> tuple[int, int]:
    """Columns and rows the playfield and its header need.

    Curses refuses to write the bottom-right character of the screen, so the
    last wall row must not be the last terminal line.
    """
    gw, gh = config.ground_size
    ch = config.cell_size[1]
    header = max(TITLE_POSITION[0] + len(config.title), SCORE_POSITION[0] + SCORE_WIDTH)
    return max(gw, header), gh + ch + 1


def check_terminal_size(stdscr, config):
    rows, cols = stdscr.getmaxyx()
    need_cols, need_rows = required_size(config)
    if cols < need_cols or rows < need_rows:
        raise TerminalTooSmallError((need_cols, need_rows), (cols, rows))


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

class CursesSurface:
    """Draws cells as blocks of full-block glyphs."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._attrs = self._init_colors()

    @staticmethod
    def _init_colors() -> dict:
        if not curses.has_colors():
            return {color: 0 for color in Color}
        background = -1
        try:
            curses.use_default_colors()
        except curses.error:
            background = curses.COLOR_BLACK
        attrs = {}
        for pair, color in enumerate(Color, start=1):
            curses.init_pair(pair, CURSES_COLORS[color], background)
            attrs[color] = curses.color_pair(pair)
        return attrs

    def clear(self):
        self.stdscr.erase()

    def draw_cell(self, position, size, color):
        x0, y0 = position
        attr = self._attrs[color]
        row = BLOCK * size[0]
        for y in range(y0, y0 + size[1]):
            self.stdscr.addstr(y, x0, row, attr)

    def draw_text(self, position, text, color):
        x, y = position
        self.stdscr.addstr(y, x, text, self._attrs[color] | curses.A_BOLD)

    def flush(self):
        self.stdscr.refresh()


class CursesInput:
    """Non-blocking key reader with a small lookahead queue."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._pending = deque()
        stdscr.keypad(True)
        stdscr.nodelay(True)

    def poll(self, timeout: float) -> bool:
        if self._pending:
            return True
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        code = self.stdscr.getch()
        if code == -1:
            return False
        self._pending.append(code)
        return True

    def read(self):
        if self._pending:
            code = self._pending.popleft()
        else:
            self.stdscr.timeout(-1)
            code = self.stdscr.getch()
        return translate_key(code)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _run(stdscr, config) -> Game:
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor")
    check_terminal_size(stdscr, config)

    game = Game(config)
    game.run(CursesSurface(stdscr), CursesInput(stdscr))
    return game


def play(config) -> Game:
    """Play one game in the terminal and return the finished game."""
    return curses.wrapper(_run, config)
