"""Window, input handling and drawing for the snake game."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator
from dataclasses import dataclass

from pixeltoys.snake import DEFAULT_GRID_SIZE, Board, Direction, GridCoords

WIN_WIDTH = 650
WIN_HEIGHT = 650
DEFAULT_SNAKE_POS = GridCoords(5, 5)
BOARD_OFFSET = 100
FRAME_DELAY_MS = 200
CELL_MARGIN = 5
CELL_SHRINK = 8

Point = tuple[float, float]

_DIRECTION_KEYS = {
    "w": Direction.NORTH,
    "a": Direction.WEST,
    "s": Direction.SOUTH,
    "d": Direction.EAST,
}


@dataclass(frozen=True)
class Layout:
    """Screen placement of the board grid."""

    grid_size: int = DEFAULT_GRID_SIZE
    x_offset: int = BOARD_OFFSET
    y_offset: int = BOARD_OFFSET
    width: int = WIN_WIDTH
    height: int = WIN_HEIGHT

    @property
    def grid_length(self) -> int:
        return min(self.width - 2 * self.x_offset, self.height - 2 * self.y_offset)

    @property
    def cell_size(self) -> float:
        return self.grid_length / self.grid_size

    def cell_origin(self, coords: GridCoords) -> Point:
        """Top-left screen corner of a grid cell."""
        x, y = coords
        return (self.x_offset + x * self.cell_size, self.y_offset + y * self.cell_size)

    def cell_rect(self, coords: GridCoords) -> tuple[float, float, float, float]:
        """The inset rectangle (x, y, w, h) filled to draw a cell."""
        ox, oy = self.cell_origin(coords)
        side = self.cell_size - CELL_SHRINK
        return (ox + CELL_MARGIN, oy + CELL_MARGIN, side, side)

    def grid_lines(self) -> Iterator[tuple[Point, Point]]:
        """Vertical and horizontal lines of the grid, alternating."""
        for i in range(self.grid_size + 1):
            step = self.cell_size * i
            yield (
                (self.x_offset + step, self.y_offset),
                (self.x_offset + step, self.y_offset + self.grid_length),
            )
            yield (
                (self.x_offset, self.y_offset + step),
                (self.x_offset + self.grid_length, self.y_offset + step),
            )


@dataclass
class GameState:
    """The board, its layout and whether play is paused."""

    board: Board
    layout: Layout | None = None
    paused: bool = True

    def __post_init__(self) -> None:
        if self.layout is None:
            self.layout = Layout(self.board.grid_size)

    def handle_key(self, key: str) -> bool:
        """React to a key name; return False when the game should quit."""
        key = key.lower()
        if key in _DIRECTION_KEYS:
            self.board.set_direction(_DIRECTION_KEYS[key])
            self.paused = False
        elif key == "p":
            self.paused = True
        elif key == "escape":
            return False
        return True

    def tick(self) -> None:
        """Advance the game by one frame, restarting after a crash."""
        if not self.paused and not self.board.update():
            self.board.reset()
            self.paused = True


def _draw(screen, state: GameState) -> None:
    import pygame

    layout = state.layout
    screen.fill((0, 0, 0))
    for start, end in layout.grid_lines():
        pygame.draw.line(screen, (128, 128, 128), start, end)

    def fill(coords: GridCoords, colour: tuple[int, int, int]) -> None:
        x, y, w, h = layout.cell_rect(coords)
        pygame.draw.rect(screen, colour, pygame.Rect(round(x), round(y), round(w), round(h)))

    for part in state.board.snake.body:
        fill(part, (255, 0, 0))
    fill(state.board.food, (0, 255, 0))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="snake", description="Play snake with W/A/S/D, P pauses.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption("snek")
        board = Board(DEFAULT_GRID_SIZE, DEFAULT_SNAKE_POS, rng=random.Random(args.seed))
        state = GameState(board)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not state.handle_key(pygame.key.name(event.key)):
                        running = False
            if not running:
                break
            state.tick()
            _draw(screen, state)
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())