"""
Game constants for the snake move engine.
"""

# Movement directions
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit vectors in screen coordinates (y grows downward).
# Order matters: it is the tie-break order used by the move selector.
DIRECTION_VECTORS = (
    (UP, (0, -1)),
    (DOWN, (0, 1)),
    (LEFT, (-1, 0)),
    (RIGHT, (1, 0)),
)

# Board settings
DEFAULT_GRID_SIZE = 20
# Upper bound on board size; flood fill work grows with its square
MAX_GRID_SIZE = 100

# Move scoring weights
FOOD_WEIGHT = 10
SPACE_WEIGHT = 1
CONTINUATION_BONUS = 0.1
