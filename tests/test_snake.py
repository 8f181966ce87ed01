from retrosnake.constants import COLS, ROWS, GameState
from retrosnake.snake import SPRITE_NAMES, START_BODY, Direction, Snake


def test_initial_body_and_direction():
    snake = Snake()
    assert list(snake.body) == [(3, 3), (2, 3), (1, 3)]
    assert snake.direction is Direction.RIGHT
    assert snake.is_alive


def test_update_position_moves_head_and_keeps_length():
    snake = Snake()
    old = list(snake.body)
    snake.update_position()
    hx, hy = old[0]
    assert snake.body[0] == (hx + 1, hy)
    assert list(snake.body)[1:] == old[:-1]
    assert len(snake.body) == len(old)


def test_steer_rejects_same_axis():
    snake = Snake()
    assert snake.steer(Direction.LEFT) is False
    assert snake.next_direction is Direction.RIGHT


def test_steer_buffers_until_move():
    snake = Snake()
    assert snake.steer(Direction.UP) is True
    assert snake.direction is Direction.RIGHT
    snake.update_position()
    assert snake.direction is Direction.UP
    assert snake.body[0] == (START_BODY[0][0], START_BODY[0][1] - 1)


def test_steer_checks_current_not_buffered_direction():
    snake = Snake()
    snake.steer(Direction.UP)
    assert snake.steer(Direction.DOWN) is True
    assert snake.next_direction is Direction.DOWN


def test_has_crashed_on_walls():
    snake = Snake()
    snake.body[0] = (COLS, 3)
    assert snake.has_crashed()
    snake.body[0] = (0, -1)
    assert snake.has_crashed()
    snake.body[0] = (0, ROWS)
    assert snake.has_crashed()


def test_has_crashed_on_self():
    snake = Snake()
    assert not snake.has_crashed()
    snake.body[0] = snake.body[2]
    assert snake.has_crashed()


def test_reset_restores_start():
    snake = Snake()
    snake.steer(Direction.DOWN)
    snake.update_position()
    snake.is_alive = False
    snake.reset()
    assert tuple(snake.body) == START_BODY
    assert snake.direction is Direction.RIGHT
    assert snake.next_direction is Direction.RIGHT
    assert snake.is_alive


def test_tick_waits_for_delay():
    snake = Snake()
    state = GameState(frame_counter=3)
    assert snake.tick(state) is False
    assert tuple(snake.body) == START_BODY
    assert state.frame_counter == 3


def test_tick_moves_and_resets_counter():
    snake = Snake()
    state = GameState()
    state.frame_counter = state.move_delay
    assert snake.tick(state) is True
    assert state.frame_counter == 0
    assert snake.body[0] != START_BODY[0]
    assert snake.is_alive


def test_tick_into_wall_kills_snake():
    snake = Snake()
    state = GameState()
    for _ in range(COLS):
        state.frame_counter = state.move_delay
        snake.tick(state)
    assert snake.is_alive is False
    frozen = list(snake.body)
    state.frame_counter = state.move_delay
    assert snake.tick(state) is False
    assert list(snake.body) == frozen


def test_segment_sprites_order_and_names():
    snake = Snake()
    sprites = list(snake.segment_sprites())
    assert [cell for cell, _ in sprites] == list(reversed(snake.body))
    assert sprites[-1][1] == "head_right"
    assert sprites[0][1] == "tail_right"
    assert sprites[1][1] == "body_left"
    assert all(name in SPRITE_NAMES for _, name in sprites)


def test_segment_sprites_dead_prefix():
    snake = Snake()
    snake.is_alive = False
    names = [name for _, name in snake.segment_sprites()]
    assert all(name.startswith("dead_") for name in names)
    assert names[-1] == "dead_head_right"


def test_draw_blits_every_segment():
    class Recorder:
        def __init__(self):
            self.calls = []

        def blit(self, image, pos):
            self.calls.append((image, pos))

    snake = Snake()
    surface = Recorder()
    sprites = {name: name for name in SPRITE_NAMES}
    snake.draw(surface, sprites)
    assert len(surface.calls) == len(snake.body)
    assert surface.calls[-1][0] == "head_right"