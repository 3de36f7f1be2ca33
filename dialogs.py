"""
Модальные диалоги поверх текущего кадра.

Пока диалог открыт, игра стоит: свой цикл событий, своя отрисовка.
Закрытие окна в диалоге = "OK"/"No", событие QUIT возвращается в очередь,
чтобы его увидел внешний цикл.
"""
import pygame

from config import BLACK, WHITE, GRAY, BUTTON_COLOR, BUTTON_ACTIVE, MENU_FPS

BOX_PADDING = 20
LINE_SPACING = 6
BUTTON_WIDTH = 100
BUTTON_HEIGHT = 36


class Dialogs:
    def __init__(self, screen, clock=None):
        self.screen = screen
        self.clock = clock or pygame.time.Clock()
        self.title_font = pygame.font.SysFont('arial', 22, bold=True)
        self.font = pygame.font.SysFont('arial', 18)

    def show_message(self, title, text):
        """Сообщение с одной кнопкой OK"""
        self._run(title, text, ["OK"], default=0)

    def show_error(self, text):
        self.show_message("Error", text)

    def ask_yes_no(self, title, text):
        """Вопрос Yes/No, возвращает True для Yes"""
        return self._run(title, text, ["Yes", "No"], default=0) == 0

    def _run(self, title, text, buttons, default):
        background = self.screen.copy()
        selected = default
        cancel = len(buttons) - 1

        while True:
            rects = self._draw(background, title, text, buttons, selected)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                    return cancel
                if event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                        return selected
                    if event.key == pygame.K_ESCAPE:
                        return cancel
                    if event.key in (pygame.K_LEFT, pygame.K_a):
                        selected = (selected - 1) % len(buttons)
                    elif event.key in (pygame.K_RIGHT, pygame.K_d, pygame.K_TAB):
                        selected = (selected + 1) % len(buttons)
                    elif len(buttons) == 2 and event.key == pygame.K_y:
                        return 0
                    elif len(buttons) == 2 and event.key == pygame.K_n:
                        return 1
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    for i, rect in enumerate(rects):
                        if rect.collidepoint(event.pos):
                            return i

            self.clock.tick(MENU_FPS)

    def _draw(self, background, title, text, buttons, selected):
        self.screen.blit(background, (0, 0))

        lines = [self.font.render(line, True, BLACK) for line in text.split("\n")]
        title_surf = self.title_font.render(title, True, BLACK)

        content_w = max([title_surf.get_width()] + [s.get_width() for s in lines])
        box_w = max(content_w, len(buttons) * (BUTTON_WIDTH + BOX_PADDING)) + BOX_PADDING * 2
        text_h = sum(s.get_height() + LINE_SPACING for s in lines)
        box_h = BOX_PADDING * 4 + title_surf.get_height() + text_h + BUTTON_HEIGHT

        sw, sh = self.screen.get_size()
        box = pygame.Rect((sw - box_w) // 2, (sh - box_h) // 2, box_w, box_h)

        shade = pygame.Surface((sw, sh), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 120))
        self.screen.blit(shade, (0, 0))

        pygame.draw.rect(self.screen, WHITE, box)
        pygame.draw.rect(self.screen, GRAY, box, 2)

        y = box.y + BOX_PADDING
        self.screen.blit(title_surf, (box.x + BOX_PADDING, y))
        y += title_surf.get_height() + BOX_PADDING
        for surf in lines:
            self.screen.blit(surf, (box.x + BOX_PADDING, y))
            y += surf.get_height() + LINE_SPACING

        # Кнопки справа внизу
        rects = []
        bx = box.right - BOX_PADDING - len(buttons) * (BUTTON_WIDTH + BOX_PADDING) + BOX_PADDING
        by = box.bottom - BOX_PADDING - BUTTON_HEIGHT
        for i, label in enumerate(buttons):
            rect = pygame.Rect(bx + i * (BUTTON_WIDTH + BOX_PADDING), by, BUTTON_WIDTH, BUTTON_HEIGHT)
            pygame.draw.rect(self.screen, BUTTON_ACTIVE if i == selected else BUTTON_COLOR, rect)
            label_surf = self.font.render(label, True, WHITE)
            self.screen.blit(label_surf, label_surf.get_rect(center=rect.center))
            rects.append(rect)

        pygame.display.flip()
        return rects
