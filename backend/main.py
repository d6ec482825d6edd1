import argparse
import json
import logging
import random
import time
from collections import deque
from typing import Dict, List, Optional, Tuple, Any

from config import load_settings
from domain.constants import DIRECTION_VECTORS, DEFAULT_GRID_SIZE, MAX_GRID_SIZE, VALID_MOVES
from domain.game_state import GameState
from domain.reachability import in_bounds
from domain.snake import Snake
from players.base import Player
from players.heuristic_player import HeuristicPlayer

logger = logging.getLogger(__name__)

MOVE_VECTORS = dict(DIRECTION_VECTORS)


class SnakeGame:
    """
    Single-snake game loop.

    The player picks a direction each tick; the game applies it, handles
    food and decides whether the snake died. Food is placed from outside
    (cursor, CLI, tests) and is consumed when eaten.
    """

    def __init__(
        self,
        player: Player,
        grid_size: int = DEFAULT_GRID_SIZE,
        start: Optional[Tuple[int, int]] = None,
        max_ticks: Optional[int] = None,
    ):
        if not 0 < grid_size <= MAX_GRID_SIZE:
            raise ValueError(f"grid_size must be between 1 and {MAX_GRID_SIZE}, got {grid_size}")
        self.grid_size = grid_size
        self.player = player
        self.start = start if start is not None else (grid_size // 2, grid_size // 2)
        if not in_bounds(self.start, grid_size):
            raise ValueError(f"Start cell out of bounds at {self.start}.")
        self.max_ticks = max_ticks
        self.reset()

    def reset(self):
        """Back to a single-cell snake, no food, score 0."""
        self.snake = Snake([self.start])
        self.food: Optional[Tuple[int, int]] = None
        self.score = 0
        self.tick_number = 0
        self.game_over = False
        self.history: List[GameState] = []
        self.move_history: List[Dict[str, Any]] = []

    def set_food(self, cell: Tuple[int, int]):
        if not in_bounds(cell, self.grid_size):
            raise ValueError(f"Food out of bounds at {cell}.")
        if cell in self.snake.positions:
            # tail included: eating there keeps the tail under the new head
            raise ValueError(f"Food on the snake at {cell}.")
        self.food = cell

    def clear_food(self):
        self.food = None

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake_positions=self.snake.body(),
            food=self.food,
            score=self.score,
            grid_size=self.grid_size,
            alive=self.snake.alive,
        )

    def tick(self) -> Optional[Dict[str, Any]]:
        """
        Execute one tick:
          1) Do nothing if the game is over or there is no food to chase
          2) Ask the player for a direction
          3) Move the head; grow if it lands on the food, else drop the tail
          4) Check wall and body collisions
        Returns the player's move data, or None when nothing happened.
        """
        if self.game_over or self.food is None:
            return None

        self.record_history()
        move_data = self.player.get_move(self.get_current_state())
        self.move_history.append(move_data)
        direction = move_data.get("direction")

        if direction is None:
            self._die("no_legal_move")
            return move_data
        if direction not in VALID_MOVES:
            raise ValueError(f"Player returned an invalid direction: {direction!r}")

        dx, dy = MOVE_VECTORS[direction]
        hx, hy = self.snake.head
        new_head = (hx + dx, hy + dy)

        if not in_bounds(new_head, self.grid_size):
            self._die("wall")
            return move_data

        original_body = self.snake.body()
        eats_food = new_head == self.food
        if eats_food:
            # grow: keep the tail
            new_body = [new_head] + original_body
        else:
            new_body = [new_head] + original_body[:-1]

        if new_head in new_body[1:]:
            self._die("self")
            return move_data

        self.snake.positions = deque(new_body)
        if eats_food:
            self.score += 1
            self.food = None
            logger.info(f"Ate food at {new_head}; score {self.score}, length {self.snake.length}")

        self.tick_number += 1
        if self.max_ticks is not None and self.tick_number >= self.max_ticks:
            self.end_game("Reached max ticks.")

        return move_data

    def _die(self, reason: str):
        self.snake.alive = False
        self.snake.death_reason = reason
        self.snake.death_tick = self.tick_number
        self.end_game(f"Snake died: {reason}")

    def end_game(self, reason: str):
        self.game_over = True
        self.record_history()
        logger.info(f"Game Over: {reason} (score {self.score}, ticks {self.tick_number})")

    def record_history(self):
        self.history.append(self.get_current_state())

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")

    def random_free_cell(self, rng: random.Random) -> Optional[Tuple[int, int]]:
        """
        Return a random cell not occupied by the snake, or None if the board is full.
        """
        occupied = set(self.snake.positions)
        free = [
            (x, y)
            for x in range(self.grid_size)
            for y in range(self.grid_size)
            if (x, y) not in occupied
        ]
        return rng.choice(free) if free else None


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    grid_size: int = DEFAULT_GRID_SIZE,
    foods: Optional[List[Tuple[int, int]]] = None,
    max_ticks: int = 500,
    seed: Optional[int] = None,
    tick_delay: float = 0.0,
    verbose: bool = False,
) -> Dict[str, Any]:
    """
    Run the heuristic snake until it dies, the food runs out or max_ticks is reached.

    Args:
        grid_size: board width and height
        foods: food cells placed one after another as each is eaten;
               when None, food respawns on random free cells
        max_ticks: tick limit
        seed: random seed for food placement
        tick_delay: seconds to sleep between ticks
        verbose: print the board every tick

    Returns:
        A dictionary summarizing the run (score, ticks, length, death_reason).
    """
    rng = random.Random(seed)
    game = SnakeGame(HeuristicPlayer(), grid_size=grid_size, max_ticks=max_ticks)
    pending = deque(foods) if foods is not None else None

    while not game.game_over:
        if game.food is None:
            if pending is not None:
                while pending and pending[0] in game.snake.positions:
                    logger.warning(f"Skipping food at {pending[0]}: cell is on the snake")
                    pending.popleft()
                if not pending:
                    game.end_game("No more food.")
                    break
                cell = pending.popleft()
            else:
                cell = game.random_free_cell(rng)
                if cell is None:
                    game.end_game("Board is full.")
                    break
            game.set_food(cell)

        if verbose:
            game.print_board()
        game.tick()
        if tick_delay:
            time.sleep(tick_delay)

    return {
        "score": game.score,
        "ticks": game.tick_number,
        "length": game.snake.length,
        "alive": game.snake.alive,
        "death_reason": game.snake.death_reason,
    }


def parse_cell_arg(value: str) -> Tuple[int, int]:
    try:
        x, y = value.split(",")
        return (int(x), int(y))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a cell as X,Y, got {value!r}")


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(message)s")

    parser = argparse.ArgumentParser(
        description="Run the heuristic snake on a local board."
    )
    parser.add_argument("--grid_size", type=int, default=settings.grid_size,
                        help="Width and height of the board")
    parser.add_argument("--food", type=parse_cell_arg, nargs='*', default=None,
                        help="Food cells as X,Y placed in order (default: random)")
    parser.add_argument("--max_ticks", type=int, default=500,
                        help="Maximum number of ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement")
    parser.add_argument("--verbose", action="store_true",
                        help="Print the board every tick")

    args = parser.parse_args()

    result = run_simulation(
        grid_size=args.grid_size,
        foods=args.food,
        max_ticks=args.max_ticks,
        seed=args.seed,
        tick_delay=settings.tick_delay,
        verbose=args.verbose,
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
