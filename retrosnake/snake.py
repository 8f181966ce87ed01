"""The snake: its body on the grid, movement, crashes and sprite choice."""

from __future__ import annotations

from collections import deque
from enum import Enum
from pathlib import Path
from typing import Iterator

from .constants import BORDER_SIZE, CELL_SIZE, COLS, ROWS, GameState

Cell = tuple[int, int]

START_BODY: tuple[Cell, ...] = ((3, 3), (2, 3), (1, 3))

SPRITE_NAMES: tuple[str, ...] = tuple(
    f"{prefix}{part}_{side}"
    for prefix in ("", "dead_")
    for part in ("head", "body", "tail")
    for side in ("up", "down", "left", "right")
)


class Direction(Enum):
    """A unit step on the grid."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Snake:
    """A snake whose head is the first cell of its body."""

    def __init__(self) -> None:
        self.body: deque[Cell] = deque(START_BODY)
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT
        self.is_alive = True

    @property
    def head(self) -> Cell:
        return self.body[0]

    def update_position(self) -> None:
        """Apply the buffered direction and move one cell."""
        self.direction = self.next_direction
        x, y = self.body[0]
        self.body.appendleft((x + self.direction.dx, y + self.direction.dy))
        self.body.pop()

    def steer(self, direction: Direction) -> bool:
        """Buffer a turn unless it runs along the current axis; report success."""
        if direction.dy != 0 and self.direction.dy == 0:
            self.next_direction = direction
            return True
        if direction.dx != 0 and self.direction.dx == 0:
            self.next_direction = direction
            return True
        return False

    def has_crashed(self) -> bool:
        """True if the head is off the board or on another segment."""
        x, y = self.body[0]
        if x < 0 or x >= COLS or y < 0 or y >= ROWS:
            return True
        return any(segment == (x, y) for segment in list(self.body)[1:])

    def reset(self) -> None:
        """Put the snake back at its starting place, alive and heading right."""
        self.body = deque(START_BODY)
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT
        self.is_alive = True

    def tick(self, state: GameState) -> bool:
        """Move once the frame counter reaches the delay; return whether it moved."""
        if not self.is_alive or state.frame_counter < state.move_delay:
            return False
        self.update_position()
        state.frame_counter = 0
        if self.has_crashed():
            self.is_alive = False
        return True

    def segment_sprites(self) -> Iterator[tuple[Cell, str]]:
        """Yield (cell, sprite name) pairs from tail to head, in drawing order."""
        prefix = "" if self.is_alive else "dead_"
        segments = list(self.body)
        last = len(segments) - 1
        for i in range(last, -1, -1):
            cell = segments[i]
            if i == 0:
                side = {
                    Direction.RIGHT: "right",
                    Direction.LEFT: "left",
                    Direction.DOWN: "down",
                    Direction.UP: "up",
                }[self.direction]
                yield cell, f"{prefix}head_{side}"
                continue
            (x, y), (px, py) = cell, segments[i - 1]
            if i == last:
                if x == px:
                    side = "up" if y > py else "down"
                elif y == py:
                    side = "left" if x > px else "right"
                else:
                    continue
                yield cell, f"{prefix}tail_{side}"
            else:
                if x == px:
                    side = "down" if y > py else "up"
                elif y == py:
                    side = "right" if x > px else "left"
                else:
                    continue
                yield cell, f"{prefix}body_{side}"

    def draw(self, surface, sprites) -> None:
        """Blit every segment's sprite onto the surface."""
        for (x, y), name in self.segment_sprites():
            surface.blit(sprites[name], (x * CELL_SIZE + BORDER_SIZE, y * CELL_SIZE + BORDER_SIZE))


def load_snake_sprites(asset_dir) -> dict:
    """Load every snake sprite image from a directory, keyed by sprite name."""
    import pygame

    base = Path(asset_dir)
    return {name: pygame.image.load(str(base / f"{name}.png")) for name in SPRITE_NAMES}