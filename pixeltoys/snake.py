"""Snake game rules: the snake, the board and food placement."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

DEFAULT_GRID_SIZE = 11


class GridCoords(NamedTuple):
    """A cell on the game grid."""

    x: int = 0
    y: int = 0


class Direction(Enum):
    """Heading of the snake; north is towards smaller y."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


@dataclass
class Snake:
    """The snake; its head is the last element of ``body``."""

    head: GridCoords
    direction: Direction = Direction.NORTH
    body: list[GridCoords] = field(init=False)

    def __post_init__(self) -> None:
        self.head = GridCoords(*self.head)
        self.body = [self.head]

    def next_head(self) -> GridCoords:
        """Where the head would be after one move."""
        dx, dy = self.direction.delta
        return GridCoords(self.head.x + dx, self.head.y + dy)

    def move(self, has_eaten_food: bool = False) -> None:
        """Move one cell; collisions and food must be handled by the caller."""
        self.head = self.next_head()
        if len(self.body) > 1:
            self.body[:-1] = self.body[1:]
        if has_eaten_food:
            self.body.append(self.head)
        else:
            self.body[-1] = self.head

    def occupies(self, here: GridCoords) -> bool:
        """Whether any part of the snake lies on ``here``."""
        return here in self.body


class Board:
    """A square grid holding the snake and a piece of food."""

    def __init__(
        self,
        grid_size: int = DEFAULT_GRID_SIZE,
        init_snake_coords: GridCoords = GridCoords(0, 0),
        rng: random.Random | None = None,
    ) -> None:
        self.grid_size = grid_size
        self.init_snake_coords = GridCoords(*init_snake_coords)
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake(self.init_snake_coords)
        self.food = GridCoords()
        self._spawn_food()

    def _spawn_food(self) -> None:
        free = [
            cell
            for cell in (GridCoords(x, y) for y in range(self.grid_size) for x in range(self.grid_size))
            if not self.is_collision(cell)
        ]
        if not free:
            raise RuntimeError("no free cell left for food")
        self.food = self.rng.choice(free)

    def set_direction(self, direction: Direction) -> None:
        self.snake.direction = direction

    def is_collision(self, loc: GridCoords) -> bool:
        """Whether ``loc`` is a wall or part of the snake."""
        x, y = loc
        hits_wall = x <= 0 or x >= self.grid_size or y <= 0 or y >= self.grid_size
        return hits_wall or self.snake.occupies(GridCoords(x, y))

    def update(self) -> bool:
        """Advance the snake one cell; return False when it would crash."""
        next_head = self.snake.next_head()
        if self.is_collision(next_head):
            return False
        has_eaten_food = next_head == self.food
        if has_eaten_food:
            self._spawn_food()
        self.snake.move(has_eaten_food)
        return True

    def reset(self) -> None:
        """Start over with a new snake and new food."""
        self.snake = Snake(self.init_snake_coords)
        self._spawn_food()