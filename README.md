# retrosnake

The rules and drawing helpers of a retro snake game on a 20 × 20 grid:
a snake that moves, turns, grows and crashes, apples of three kinds with
their rewards, and score labels that float up and fade out. Drawing is done
with pygame.

## Installing

```
pip install .
```

## Modules

### `retrosnake.constants`

Board geometry (`CELL_SIZE` 45, `SCREEN_WIDTH`/`SCREEN_HEIGHT` 900,
`BORDER_SIZE` 50, `ROWS`/`COLS` 20, `TARGET_FPS` 60) and the speed limits
`INITIAL_MOVE_DELAY` 15, `MIN_MOVE_DELAY` 5 and `MAX_MOVE_DELAY` 15.

`GameState` is a dataclass holding `score`, `highscore`, `frame_counter`,
`move_delay`, `min_move_delay` and `played_game_over_sound`.

- `reset_round()` sets the score to 0, the move delay back to its initial
  value and clears the game-over-sound flag.
- `record_score()` raises `highscore` to `score` when the score is higher.

### `retrosnake.snake`

`Snake` keeps its body as a deque of `(x, y)` cells, head first, starting at
`(3, 3), (2, 3), (1, 3)` and heading right. `Direction` is an enum of
`UP`, `DOWN`, `LEFT` and `RIGHT`.

- `steer(direction)` buffers a turn and returns `True`, unless the turn runs
  along the axis the snake is already moving on, in which case it returns
  `False`. The snake cannot turn straight back on itself.
- `update_position()` applies the buffered turn and moves one cell.
- `has_crashed()` is true when the head is off the board or on the body.
- `tick(state)` moves the snake once `state.frame_counter` has reached
  `state.move_delay`, resets the counter and marks the snake dead on a
  crash; it returns whether the snake moved. The caller advances
  `frame_counter` each frame.
- `reset()` puts the snake back at its start, alive and heading right.
- `segment_sprites()` yields `(cell, sprite name)` pairs from tail to head,
  choosing head, body and tail sprites by direction, with a `dead_` prefix
  once the snake has died.
- `draw(surface, sprites)` blits those sprites onto a pygame surface.

`load_snake_sprites(asset_dir)` loads `head_*`, `body_*`, `tail_*` and their
`dead_` variants for `up`, `down`, `left` and `right` as `<name>.png` from a
directory.

### `retrosnake.food`

`Food(rng=None)` is the apple on the board; pass a `random.Random` for
repeatable play.

- `spawn(snake)` picks an apple type — golden on 5 %, frozen on 10 %,
  normal otherwise — and places it on a random cell the snake does not
  occupy.
- `check_collision(snake, state)`: when the snake's head is on the apple,
  the snake grows by one segment, the score gains a base 10 points plus the
  apple's bonus, a floating label is added, the snake speeds up by one step
  (never below `min_move_delay`), and a new apple is spawned. Returns
  whether the apple was eaten.

| Apple  | Chance | Bonus | Label | Effect on the move delay                     |
|--------|--------|-------|-------|----------------------------------------------|
| Normal | 85 %   | +10   | `+10` | −1                                           |
| Golden | 5 %    | +50   | `+50` | −1                                           |
| Frozen | 10 %   | +5    | `+5`  | +5 (capped at 15), then −1                   |

- `add_floating_text(pos, text, color)` starts a `FloatingText` that drifts
  upward and lives 1.5 seconds; `FloatingText.alpha()` gives its opacity.
- `update_floating_texts(dt)` moves and ages the labels and drops expired ones.
- `update(elapsed, dt)` swings the apple by up to 15° with the clock and
  advances the labels.
- `draw(surface, textures, font)` draws the rotated apple and its labels.

`load_food_textures(asset_dir)` loads `apple.png`, `golden_apple.png` and
`frozen_apple.png`, keyed by `AppleType`.

## Example

```python
import random

from retrosnake.constants import GameState
from retrosnake.snake import Direction, Snake
from retrosnake.food import Food

state = GameState()
snake = Snake()
food = Food(random.Random(1))
food.spawn(snake)

snake.steer(Direction.DOWN)
state.frame_counter = state.move_delay
snake.tick(state)
food.check_collision(snake, state)
state.record_score()
print(list(snake.body), snake.is_alive, state.score)
```

## What this package does not do

It has no command to start the game and opens no window: there is no main
loop, title screen, game-over screen, keyboard handling or sound. It also
does not store the high score anywhere; `GameState.highscore` lives only in
memory. An application built on the package supplies these itself.

## Running the tests

```
pip install .[test]
pytest
```