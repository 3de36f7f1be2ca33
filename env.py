"""
Симуляция змейки: один вызов step() = один тик игрового таймера.

Матрица мира (world()):
  0 = пусто
  1 = тело змейки
  2 = еда
  3 = мигающая стена
  4 = твёрдая стена
  7 = голова

Поле замкнуто: выходя за край, змейка появляется с другой стороны.
Все интервалы в миллисекундах переводятся в тики по текущей скорости.
"""
import logging
from collections import deque

import numpy as np

from config import (
    START_HEAD, FOOD_MAX_TIME, FOOD_RESPAWN_DELAY,
    WALL_SPAWN_INTERVAL, WALL_FLASH_DURATION, WALL_LIFETIME,
    WALL_MIN_BLOCKS, WALL_MAX_BLOCKS, PANEL_WIDTH, PANEL_HEIGHT,
)
from settings import Settings
from wall import Wall, generate_wall_blocks

logger = logging.getLogger(__name__)

EMPTY = 0
BODY = 1
FOOD = 2
WALL_FLASHING = 3
WALL_SOLID = 4
HEAD = 7


def is_opposite(a, b):
    return a[0] == -b[0] and a[1] == -b[1]


class SnakeEnv:
    def __init__(self, width=None, height=None, settings=None, rng=None):
        self.settings = settings or Settings()
        self.width = width or PANEL_WIDTH // self.settings.size
        self.height = height or PANEL_HEIGHT // self.settings.size
        self.rng = rng if rng is not None else np.random.default_rng()

        self.food_respawn_ticks = self.ms_to_ticks(FOOD_RESPAWN_DELAY)
        self.wall_spawn_ticks = self.ms_to_ticks(WALL_SPAWN_INTERVAL)

        self.reset()

    def ms_to_ticks(self, ms):
        return max(1, round(ms * self.settings.speed / 1000))

    def reset(self):
        """Сброс игры"""
        self.snake = [START_HEAD if self._in_bounds(START_HEAD) else (self.width // 2, self.height // 2)]
        self.direction = self.settings.direction_vector
        self.direction_queue = deque()

        self.walls = []
        self.score = 0
        self.steps = 0
        self.done = False

        self.food = None
        self.food_active = False
        self.food_timer = FOOD_MAX_TIME
        self.food_respawn_countdown = None
        self.spawn_food()

        self.wall_spawn_countdown = self.wall_spawn_ticks

    def _in_bounds(self, cell):
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    # --- Управление -------------------------------------------------------

    def queue_direction(self, direction):
        """
        Поставить поворот в очередь. Разворот на 180° и повторы игнорируются.
        Возвращает True, если направление принято.
        """
        direction = tuple(direction)
        if is_opposite(direction, self.direction):
            return False
        if direction in self.direction_queue:
            return False
        self.direction_queue.append(direction)
        return True

    def next_position(self, cell, direction):
        """Соседняя клетка с учётом перехода через край поля"""
        return ((cell[0] + direction[0]) % self.width,
                (cell[1] + direction[1]) % self.height)

    def _apply_queued_direction(self):
        if not self.direction_queue:
            return
        next_dir = self.direction_queue.popleft()

        # Поворот, который ведёт в первый сегмент тела, не применяем
        if len(self.snake) > 1:
            new_head = self.next_position(self.snake[0], next_dir)
            if new_head == self.snake[1]:
                return
        self.direction = next_dir

    # --- Тик ----------------------------------------------------------------

    def step(self):
        """
        Один тик игры.
        Возвращает (съела_ли_еду, игра_окончена).
        """
        if self.done:
            return False, True

        self.steps += 1
        self._apply_queued_direction()

        # Двигаем змейку, хвост запоминаем для роста
        tail_prev = self.snake[-1]
        new_head = self.next_position(self.snake[0], self.direction)
        self.snake = [new_head] + self.snake[:-1]

        self._tick_food_respawn()

        ate = False
        if self.food_active and new_head == self.food:
            self._eat(tail_prev)
            ate = True

        self._update_walls()
        self._update_food_timer()
        self._tick_wall_spawn()

        if self._check_collision():
            self.done = True
            logger.info("Game over: score=%d length=%d steps=%d",
                        self.score, len(self.snake), self.steps)

        return ate, self.done

    def _eat(self, tail_prev):
        remaining = min(1.0, max(0.0, self.food_timer / FOOD_MAX_TIME))
        self.score += int(remaining * self.settings.score_increment)

        # Новый сегмент там, где был хвост
        self.snake.append(tail_prev)

        self.food_active = False
        self.food_respawn_countdown = self.food_respawn_ticks

    def _update_walls(self):
        alive = []
        for wall in self.walls:
            if not wall.tick():
                alive.append(wall)
        self.walls = alive

    def _update_food_timer(self):
        if not self.food_active:
            return
        self.food_timer -= 1
        if self.food_timer <= 0:
            # Еда протухла
            self.food_active = False
            self.food_respawn_countdown = self.food_respawn_ticks

    def _tick_food_respawn(self):
        if self.food_respawn_countdown is None:
            return
        self.food_respawn_countdown -= 1
        if self.food_respawn_countdown <= 0:
            self.food_respawn_countdown = None
            self.spawn_food()

    def _tick_wall_spawn(self):
        self.wall_spawn_countdown -= 1
        if self.wall_spawn_countdown <= 0:
            self.wall_spawn_countdown = self.wall_spawn_ticks
            self.spawn_wall()

    def _check_collision(self):
        head = self.snake[0]
        if head in self.snake[1:]:
            return True
        for wall in self.walls:
            if wall.is_solid and head in wall:
                return True
        return False

    # --- Появление объектов ---------------------------------------------------

    def spawn_food(self):
        """Еда в случайной пустой клетке (не на змейке и не на стене)"""
        grid = self.world(include_food=False)
        empty = np.argwhere(grid == EMPTY)
        if len(empty) == 0:
            self.food = None
            self.food_active = False
            # Поле забито - попробуем ещё раз после задержки
            self.food_respawn_countdown = self.food_respawn_ticks
            return None

        y, x = empty[int(self.rng.integers(len(empty)))]
        self.food = (int(x), int(y))
        self.food_timer = FOOD_MAX_TIME
        self.food_active = True
        return self.food

    def spawn_wall(self):
        """
        Попытка поставить новую стену из 3-8 блоков.
        Если стена задевает змейку, еду или другую стену - не ставим.
        """
        count = int(self.rng.integers(WALL_MIN_BLOCKS, WALL_MAX_BLOCKS + 1))
        blocks = generate_wall_blocks(self.width, self.height, count, self.rng)

        occupied = set(self.snake)
        if self.food is not None:
            occupied.add(self.food)
        for wall in self.walls:
            occupied.update(wall.blocks)

        if any(block in occupied for block in blocks):
            logger.debug("Wall spawn skipped: overlap at %s", blocks)
            return None

        wall = Wall(blocks, WALL_FLASH_DURATION, WALL_LIFETIME)
        self.walls.append(wall)
        logger.debug("Wall spawned: %d blocks", len(blocks))
        return wall

    # --- Состояние ----------------------------------------------------------

    def world(self, include_food=True):
        """Матрица мира height x width"""
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for wall in self.walls:
            code = WALL_SOLID if wall.is_solid else WALL_FLASHING
            for x, y in wall.blocks:
                grid[y, x] = code
        if include_food and self.food_active and self.food is not None:
            grid[self.food[1], self.food[0]] = FOOD
        for x, y in self.snake[1:]:
            grid[y, x] = BODY
        head_x, head_y = self.snake[0]
        grid[head_y, head_x] = HEAD
        return grid

    @property
    def food_remaining(self):
        """Доля оставшегося времени жизни еды, 0..1"""
        return min(1.0, max(0.0, self.food_timer / FOOD_MAX_TIME))
