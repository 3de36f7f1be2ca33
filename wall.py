"""
Временные стены.

Стена появляется мигающей (через неё можно проползти), через
WALL_FLASH_DURATION тиков становится твёрдой, а через WALL_LIFETIME
тиков исчезает.
"""
from config import WALL_FLASH_DURATION, WALL_LIFETIME

FLASHING = 'flashing'
SOLID = 'solid'


class Wall:
    def __init__(self, blocks, flash_duration=WALL_FLASH_DURATION, lifetime=WALL_LIFETIME):
        self.blocks = list(blocks)
        self.state = FLASHING
        self.flash_counter = flash_duration
        self.lifetime = lifetime

    @property
    def is_solid(self):
        return self.state == SOLID

    def tick(self):
        """Один тик. Возвращает True, если стена отжила своё"""
        if self.state == FLASHING:
            self.flash_counter -= 1
            if self.flash_counter <= 0:
                self.state = SOLID
            return False

        if self.lifetime is None:
            return False
        self.lifetime -= 1
        return self.lifetime <= 0

    def __contains__(self, cell):
        return tuple(cell) in self.blocks


def generate_wall_blocks(width, height, count, rng):
    """
    Цепочка из count связанных клеток внутри поля width x height.
    Каждый следующий блок - сосед последнего, без повторов.
    Если продолжать некуда, цепочка получается короче.
    """
    start = (int(rng.integers(0, width)), int(rng.integers(0, height)))
    blocks = [start]

    for _ in range(1, count):
        last_x, last_y = blocks[-1]
        candidates = [
            (last_x + 1, last_y),  # вправо
            (last_x - 1, last_y),  # влево
            (last_x, last_y + 1),  # вниз
            (last_x, last_y - 1),  # вверх
        ]
        candidates = [
            (x, y) for x, y in candidates
            if 0 <= x < width and 0 <= y < height and (x, y) not in blocks
        ]
        if not candidates:
            break
        blocks.append(candidates[int(rng.integers(len(candidates)))])

    return blocks
