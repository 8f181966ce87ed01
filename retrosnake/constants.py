"""Board geometry and the mutable state shared by one game session."""

from __future__ import annotations

from dataclasses import dataclass

CELL_SIZE = 45
SCREEN_WIDTH = 900
SCREEN_HEIGHT = 900
BORDER_SIZE = 50
WINDOW_WIDTH = SCREEN_WIDTH + 2 * BORDER_SIZE
WINDOW_HEIGHT = SCREEN_HEIGHT + 2 * BORDER_SIZE
ROWS = SCREEN_HEIGHT // CELL_SIZE
COLS = SCREEN_WIDTH // CELL_SIZE

TARGET_FPS = 60
INITIAL_MOVE_DELAY = 15
MIN_MOVE_DELAY = 5
MAX_MOVE_DELAY = 15


@dataclass
class GameState:
    """Scores, movement timing and sound flags for a running game."""

    score: int = 0
    highscore: int = 0
    frame_counter: int = 0
    move_delay: int = INITIAL_MOVE_DELAY
    min_move_delay: int = MIN_MOVE_DELAY
    played_game_over_sound: bool = False

    def reset_round(self) -> None:
        """Start a new round: clear the score and restore the initial speed."""
        self.score = 0
        self.move_delay = INITIAL_MOVE_DELAY
        self.played_game_over_sound = False

    def record_score(self) -> None:
        """Raise the high score to the current score if it has been beaten."""
        if self.score > self.highscore:
            self.highscore = self.score