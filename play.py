"""
Запуск Arcade Hub.

Использование:
    python play.py                      # Меню
    python play.py --snake              # Сразу змейка
    python play.py --mute --verbose     # Без звука, подробный лог
    python play.py --settings my.json   # Другой файл настроек
"""
import argparse
import logging
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from config import WIDTH, HEIGHT, SETTINGS_FILE, HIGHSCORES_FILE, SOUNDS_DIR
from dialogs import Dialogs
from menu import MainMenu

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Arcade Hub - Snake with a launcher menu")
    parser.add_argument('--settings', default=SETTINGS_FILE,
                        help='Файл настроек (JSON)')
    parser.add_argument('--highscores', default=HIGHSCORES_FILE,
                        help='Файл рекордов')
    parser.add_argument('--sounds', default=SOUNDS_DIR,
                        help='Папка со звуками (background.wav, gameover.wav, eat.wav)')
    parser.add_argument('--mute', action='store_true',
                        help='Без звука')
    parser.add_argument('--snake', action='store_true',
                        help='Пропустить меню и сразу открыть змейку')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Подробный лог')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    dialogs = Dialogs(screen, clock)

    menu = MainMenu(
        screen, clock, dialogs,
        settings_path=args.settings,
        highscores_path=args.highscores,
        sounds_dir=args.sounds,
        mute=args.mute,
    )

    game = None
    try:
        if args.snake:
            game = menu.open_snake()
        else:
            menu.run()
    finally:
        pygame.quit()

    if game is not None and game.games > 0 and game.highscores is not None:
        print(f"\nResults: {game.games} games")
        print(f"Best: {game.highscores.best}")
    logger.info("Bye")


if __name__ == "__main__":
    main()
