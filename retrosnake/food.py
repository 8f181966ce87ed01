"""Apples on the board, their rewards and the floating score texts."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import pygame

from .constants import BORDER_SIZE, CELL_SIZE, COLS, MAX_MOVE_DELAY, ROWS, GameState
from .snake import Cell, Snake

Color = tuple[int, ...]

RED: Color = (230, 41, 55)
GOLD: Color = (255, 203, 0)
BLUE: Color = (0, 121, 241)

EAT_SCORE = 10
FROZEN_SLOWDOWN = 5
ROTATION_SPEED = 2.0
MAX_ROTATION = 15.0
FLOATING_TEXT_SIZE = 24


class AppleType(Enum):
    """Kinds of apple; the value is the stem of the apple's image file."""

    NORMAL = "apple"
    GOLDEN = "golden_apple"
    FROZEN = "frozen_apple"


# label, colour and bonus points on top of EAT_SCORE
_REWARDS: dict[AppleType, tuple[str, Color, int]] = {
    AppleType.NORMAL: ("+10", RED, 10),
    AppleType.GOLDEN: ("+50", GOLD, 50),
    AppleType.FROZEN: ("+5", BLUE, 5),
}


@dataclass
class FloatingText:
    """A short label that drifts upward and fades out."""

    position: tuple[float, float]
    text: str
    color: Color
    velocity: tuple[float, float] = (0.0, -1.5)
    life_time: float = 1.5
    life_remaining: float | None = None
    font_size: int = FLOATING_TEXT_SIZE

    def __post_init__(self) -> None:
        if self.life_remaining is None:
            self.life_remaining = self.life_time

    def alpha(self) -> float:
        """Opacity in [0, 1], proportional to the life left."""
        return self.life_remaining / self.life_time


class Food:
    """The apple currently on the board."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.position: Cell = (0, 0)
        self.apple_type = AppleType.NORMAL
        self.rotation_angle = 0.0
        self.floating_texts: list[FloatingText] = []

    def spawn(self, snake: Snake) -> None:
        """Pick an apple type and place it on a cell the snake does not occupy."""
        roll = self.rng.randint(1, 100)
        if roll <= 5:
            self.apple_type = AppleType.GOLDEN
        elif roll <= 15:
            self.apple_type = AppleType.FROZEN
        else:
            self.apple_type = AppleType.NORMAL

        occupied = set(snake.body)
        while True:
            cell = (self.rng.randint(0, COLS - 1), self.rng.randint(0, ROWS - 1))
            if cell not in occupied:
                break
        self.position = cell

    def _centre(self) -> tuple[int, int]:
        x, y = self.position
        half = CELL_SIZE // 2
        return x * CELL_SIZE + BORDER_SIZE + half, y * CELL_SIZE + BORDER_SIZE + half

    def check_collision(self, snake: Snake, state: GameState) -> bool:
        """Let the snake eat the apple if its head is on it; report whether it did."""
        if snake.head != self.position:
            return False

        snake.body.append(snake.body[-1])
        state.score += EAT_SCORE

        label, color, bonus = _REWARDS[self.apple_type]
        self.add_floating_text(self._centre(), label, color)
        state.score += bonus
        if self.apple_type is AppleType.FROZEN:
            state.move_delay = min(state.move_delay + FROZEN_SLOWDOWN, MAX_MOVE_DELAY)

        if state.move_delay > state.min_move_delay:
            state.move_delay -= 1

        self.spawn(snake)
        return True

    def add_floating_text(self, pos, text: str, color: Color) -> FloatingText:
        """Start a floating label at a pixel position."""
        floating = FloatingText(position=(float(pos[0]), float(pos[1])), text=text, color=color)
        self.floating_texts.append(floating)
        return floating

    def update_floating_texts(self, dt: float) -> None:
        """Move every label, age it by dt seconds and drop the expired ones."""
        survivors = []
        for floating in self.floating_texts:
            (x, y), (vx, vy) = floating.position, floating.velocity
            floating.position = (x + vx, y + vy)
            floating.life_remaining -= dt
            if floating.life_remaining > 0:
                survivors.append(floating)
        self.floating_texts = survivors

    def update(self, elapsed: float, dt: float) -> None:
        """Swing the apple with the clock and advance the floating labels."""
        self.rotation_angle = math.sin(elapsed * ROTATION_SPEED) * MAX_ROTATION
        self.update_floating_texts(dt)

    def draw(self, surface, textures, font) -> None:
        """Draw the rotating apple and its floating labels."""
        texture = textures[self.apple_type]
        rotated = pygame.transform.rotate(texture, -self.rotation_angle)
        surface.blit(rotated, rotated.get_rect(center=self._centre()))

        for floating in self.floating_texts:
            rendered = font.render(floating.text, True, floating.color[:3])
            rendered.set_alpha(round(max(0.0, min(1.0, floating.alpha())) * 255))
            x, y = floating.position
            surface.blit(rendered, (x - rendered.get_width() // 2, y))


def load_food_textures(asset_dir) -> dict:
    """Load the image of every apple type from a directory."""
    base = Path(asset_dir)
    return {kind: pygame.image.load(str(base / f"{kind.value}.png")) for kind in AppleType}