"""
termsnake - Game

Owns the wall, the snake, the food and the score, and runs the loop:

    render -> drain input -> (once per time step) advance the simulation

Rendering and input run every frame; the snake only moves when a full time
step has elapsed since the previous move, so the game stays responsive at a
steady speed.
"""

import logging
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .cell import Cell, Direction
from .config import GameConfig, SCORE_COLOR, SCORE_POSITION, TITLE_COLOR, TITLE_POSITION
from .errors import BoardFullError
from .events import DirectionKey, QuitKey
from .snake import Snake
from .wall import Wall

logger = logging.getLogger(__name__)


class GameState(Enum):
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game at one instant."""
    state: GameState
    score: int
    heading: Direction
    snake: tuple[tuple[int, int], ...]
    food: tuple[int, int]
    over_reason: Optional[str] = None


# ---------------------------------------------------------------------------
# Game class
# ---------------------------------------------------------------------------

class Game:
    """Single-player snake game state machine (RUNNING -> OVER)."""

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None,
                 clock=time.monotonic, sleep=time.sleep):
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.clock = clock
        self.sleep = sleep

        cw, ch = self.config.cell_size
        gw, gh = self.config.ground_size
        self.wall = Wall(self.config.ground_size, self.config.cell_size)
        self._interior = self.wall.interior()

        start = ((gw // cw // 2) * cw, (gh // ch // 2) * ch)
        self.snake = Snake(start, Direction.RIGHT, self.config.initial_length,
                           self.config.cell_size)

        self.food: Optional[Cell] = None
        self.score = 0
        self.time_step = self.config.time_step
        self.frame_interval = self.config.frame_interval
        self.is_over = False
        self.over_reason: Optional[str] = None

        self.relocate_food()
        self.last_update = self.clock()

    @property
    def state(self) -> GameState:
        return GameState.OVER if self.is_over else GameState.RUNNING

    def snapshot(self) -> Snapshot:
        return Snapshot(
            state=self.state,
            score=self.score,
            heading=self.snake.heading,
            snake=tuple(cell.position for cell in self.snake),
            food=self.food.position,
            over_reason=self.over_reason,
        )

    # ----- Food ------------------------------------------------------------

    def relocate_food(self):
        """Move the food to a random free cell inside the wall.

        Random sampling first; once the sampling budget is spent, pick from
        the explicit list of free cells so a crowded board still terminates.
        Raises BoardFullError when the snake fills the whole interior.
        """
        for _ in range(self.config.food_placement_attempts):
            candidate = self.rng.choice(self._interior)
            if not self.snake.check_overlap_food(candidate):
                self._place_food(candidate)
                return

        occupied = set(self.snake)
        free = [cell for cell in self._interior if cell not in occupied]
        if not free:
            logger.error("No free cell left for food (snake length %d)", len(self.snake))
            raise BoardFullError(
                f"snake of length {len(self.snake)} fills all "
                f"{len(self._interior)} cells of the playfield"
            )
        self._place_food(self.rng.choice(free))

    def _place_food(self, cell: Cell):
        self.food = cell
        logger.debug("Food placed at %s", cell.position)

    # ----- Input -----------------------------------------------------------

    def _can_turn(self, direction: Direction) -> bool:
        # Compare against the last step too: several frames can pass before
        # the snake moves, and the neck is where it last came from.
        return (direction is not self.snake.heading.opposite
                and direction is not self.snake.last_step.opposite)

    def quit(self):
        self._end("quit")

    def process_input(self, events):
        """Drain every pending event; the last valid turn wins."""
        wanted = None
        while events.poll(0):
            event = events.read()
            if isinstance(event, QuitKey):
                self.quit()
            elif isinstance(event, DirectionKey) and self._can_turn(event.direction):
                wanted = event.direction

        if wanted is not None and not self.is_over:
            self.snake.set_heading(wanted)

    # ----- Game logic ------------------------------------------------------

    def update_state(self):
        """Advance the snake by exactly one step."""
        if self.is_over:
            return

        if self.snake.peek_head() == self.food:
            self.snake.grow_body()
        else:
            self.snake.move_body()

        if self.snake.check_bite_self():
            self._end("bit itself")
            return
        if self.snake.check_collide_wall(self.wall):
            self._end("hit the wall")
            return

        if self.snake.check_bite_food(self.food):
            self.score += 1
            logger.info("Food eaten at %s, score %d", self.food.position, self.score)
            self.relocate_food()

    def _end(self, reason: str):
        if self.is_over:
            return
        self.is_over = True
        self.over_reason = reason
        logger.info("Game over (%s) with score %d, snake length %d",
                    reason, self.score, len(self.snake))

    # ----- Rendering -------------------------------------------------------

    def render(self, surface):
        """Draw the whole frame. Does not touch game state."""
        surface.clear()
        surface.draw_text(TITLE_POSITION, self.config.title, TITLE_COLOR)
        surface.draw_text(SCORE_POSITION, f"Score: {self.score}", SCORE_COLOR)
        self.snake.render(surface, self.config.snake_color)
        self.food.render(surface, self.config.food_color)
        self.wall.render(surface, self.config.wall_color)
        surface.flush()

    # ----- Main loop -------------------------------------------------------

    def tick(self, surface, events):
        """One loop iteration."""
        self.render(surface)
        self.process_input(events)
        if not self.is_over and self.clock() - self.last_update >= self.time_step:
            self.update_state()
            self.last_update = self.clock()

    def run(self, surface, events) -> int:
        """Play until the game is over and return the final score."""
        logger.info("Game started: ground %s, cell %s, time step %.3fs",
                    self.config.ground_size, self.config.cell_size, self.time_step)
        while not self.is_over:
            self.tick(surface, events)
            if not self.is_over:
                self.sleep(self.frame_interval)
        return self.score
