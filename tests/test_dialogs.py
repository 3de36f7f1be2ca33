import pygame

from dialogs import Dialogs


def post_key(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_message_closes_on_enter(screen, clock):
    pygame.event.clear()
    post_key(pygame.K_RETURN)
    Dialogs(screen, clock).show_message("Snake Game", "Press any key to start the game!")


def test_yes_no_keys(screen, clock):
    dialogs = Dialogs(screen, clock)

    pygame.event.clear()
    post_key(pygame.K_y)
    assert dialogs.ask_yes_no("Snake Game", "Do you want to play again?")

    post_key(pygame.K_n)
    assert not dialogs.ask_yes_no("Snake Game", "Do you want to play again?")

    post_key(pygame.K_RIGHT)
    post_key(pygame.K_RETURN)
    assert not dialogs.ask_yes_no("Snake Game", "Do you want to play again?")


def test_window_close_answers_no_and_is_kept(screen, clock):
    dialogs = Dialogs(screen, clock)
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    assert not dialogs.ask_yes_no("Snake Game", "Do you want to play again?")
    assert any(e.type == pygame.QUIT for e in pygame.event.get())
