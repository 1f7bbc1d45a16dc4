"""A field of stars streaking outward from the centre of the window."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field

WIDTH = 640
HEIGHT = 640
STAR_COUNT = 1000
SPEED_STEP = 5

Point = tuple[float, float]
Segment = tuple[Point, Point]


def map_range(value: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """Scale ``value`` from one range to the span of another.

    Only the width of the target range is used; its start is not added.
    """
    return (stop2 - start2) * ((value - start1) / (stop1 - start1))


def center(point: Point, width: int, height: int) -> Point:
    """Shift a point so that the origin lies at the middle of the window."""
    x, y = point
    return (x + width // 2, y + height // 2)


@dataclass
class Star:
    """One star: where it started, where it was last drawn and its depth."""

    width: int = WIDTH
    height: int = HEIGHT
    x: float = 0.0
    y: float = 0.0
    prev: Point = (0.0, 0.0)
    speed: int = 0

    def reset(self, rng: random.Random) -> None:
        """Place the star at a fresh random position and depth."""
        self.x = float(rng.randrange(2 * self.width) - self.width)
        self.y = float(rng.randrange(2 * self.height) - self.height)
        self.prev = center((self.x, self.y), self.width, self.height)
        self.speed = rng.randrange(self.width) + 1

    def advance(self, rng: random.Random) -> Segment:
        """Move the star one frame closer and return the trail to draw."""
        self.speed -= SPEED_STEP
        if self.speed < 1:
            self.reset(rng)
        final = center(
            (
                map_range(self.x / self.speed, 0, 1, 0, self.width),
                map_range(self.y / self.speed, 0, 1, 0, self.height),
            ),
            self.width,
            self.height,
        )
        segment = (self.prev, final)
        self.prev = final
        return segment


@dataclass
class StarField:
    """A collection of stars sharing one random generator."""

    width: int = WIDTH
    height: int = HEIGHT
    count: int = STAR_COUNT
    rng: random.Random = field(default_factory=random.Random)
    stars: list[Star] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        for _ in range(self.count):
            star = Star(self.width, self.height)
            star.reset(self.rng)
            self.stars.append(star)

    def step(self) -> list[Segment]:
        """Advance every star by one frame and return the lines to draw."""
        return [star.advance(self.rng) for star in self.stars]


def main(argv: list[str] | None = None) -> int:
    """Open a window and animate the star field until it is closed."""
    parser = argparse.ArgumentParser(prog="starfield", description="Animated star field.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--fps", type=int, default=60, help="frames per second")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("StarField")
        clock = pygame.time.Clock()
        starfield = StarField(rng=random.Random(args.seed))
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            screen.fill((0, 0, 0))
            for start, end in starfield.step():
                pygame.draw.line(screen, (255, 255, 255), start, end)
            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())