"""
Reusable UI widgets: a flat label button and a preset picker.
"""
from __future__ import annotations
import pygame
from typing import List
from config    import FONT_NAME
from constants import BUTTON_BG_COLOR, BUTTON_FG_COLOR

# --------------------------------------------------------------------
class Button:
    FONT_SIZE = 20

    def __init__(self, rect: pygame.Rect, text: str,
                 bg=BUTTON_BG_COLOR, fg=BUTTON_FG_COLOR):
        self.rect    = rect
        self.text    = text
        self.surface = self._render(rect.size, text, bg, fg)

    @classmethod
    def _render(cls, size, text: str, bg, fg) -> pygame.Surface:
        surf = pygame.Surface(size, pygame.SRCALPHA)
        surf.fill(bg)
        lbl = pygame.font.Font(FONT_NAME, cls.FONT_SIZE).render(text, True, fg)
        surf.blit(lbl, lbl.get_rect(center=surf.get_rect().center))
        return surf

    def draw(self, screen):  screen.blit(self.surface, self.rect.topleft)
    def hovered(self, pos):  return self.rect.collidepoint(pos)

# --------------------------------------------------------------------
class Dropdown:
    """
    Click the box to open the option list, click an option to pick it.
    Up/Down arrows step through the options while the list is closed.
    """
    def __init__(
        self,
        rect: pygame.Rect,
        options: list[str],
        font: pygame.font.Font,
        bg=(60,60,60),
        fg=(220,220,220),
        highlight=(100,100,100),
        selected: str | None = None,
    ):
        self.rect    = rect
        self.options = options
        self.font    = font
        self.colours = (bg, fg, highlight)
        self.open    = False
        self.index   = options.index(selected) if selected in options else 0

        # option n sits n+1 box heights below the box
        self._option_rects: List[pygame.Rect] = [
            rect.move(0, (i + 1) * rect.height) for i in range(len(options))
        ]
        self._labels = [font.render(opt, True, fg) for opt in options]

    @property
    def selected(self) -> str:
        return self.options[self.index] if self.options else ""

    def step(self, offset: int) -> None:
        if self.options:
            self.index = (self.index + offset) % len(self.options)

    def _click(self, pos) -> bool:
        if not self.open:
            self.open = self.rect.collidepoint(pos)
            return self.open
        self.open = False
        for i, opt_rect in enumerate(self._option_rects):
            if opt_rect.collidepoint(pos):
                self.index = i
                return True
        # a click on the box itself just closes the list
        return self.rect.collidepoint(pos)

    def handle_event(self, event) -> bool:
        """Return True when the event was consumed."""
        if not self.options:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._click(event.pos)
        if event.type == pygame.KEYDOWN and not self.open and event.key in (pygame.K_UP, pygame.K_DOWN):
            self.step(-1 if event.key == pygame.K_UP else 1)
            return True
        return False

    def draw(self, screen):
        bg, fg, hl = self.colours
        pygame.draw.rect(screen, bg, self.rect)
        lbl = self.font.render(self.selected, True, fg)
        screen.blit(lbl, lbl.get_rect(center=self.rect.center))
        # arrow
        r = self.rect
        pygame.draw.polygon(screen, fg, [(r.right - 12, r.centery - 4),
                                         (r.right - 4,  r.centery - 4),
                                         (r.right - 8,  r.centery + 4)])
        if not self.open:
            return
        for i, (opt_rect, label) in enumerate(zip(self._option_rects, self._labels)):
            pygame.draw.rect(screen, hl if i == self.index else bg, opt_rect)
            screen.blit(label, label.get_rect(center=opt_rect.center))
