"""
ui/menu.py

Lobby with:
 - Title banner
 - Player-count dropdown (presets come from the registry, per game; arrow keys step it)
 - Colour swatches of the players taking part
 - PLAY button
"""

from __future__ import annotations
import pygame
from typing import Any

from config              import WIDTH, HEIGHT, FONT_NAME
from constants           import (MENU_BG_COLOR, TEXT_COLOR, BUTTON_BG_COLOR,
                                 DROPDOWN_SIZE, BUTTON_SIZE)
from core.game_registry  import GameRegistry
from core.players        import PlayerColor
from ui.widgets          import Button, Dropdown

SWATCH = 36


class MenuUI:
    def __init__(self, screen: pygame.Surface, registry: GameRegistry,
                 default_preset: str | None = None):
        self.screen   = screen
        self.registry = registry
        self.font     = pygame.font.Font(FONT_NAME, 18)
        self.title_font = pygame.font.Font(FONT_NAME, 56)

        games = registry.all_games()
        self.game = games[0] if games else ""

        # Title banner ------------------------------------------------------
        self.title_surf = self.title_font.render(self.game or "No games", True, TEXT_COLOR)
        self.title_rect = self.title_surf.get_rect(midtop=(WIDTH//2, HEIGHT//6))

        # Preset dropdown + PLAY -------------------------------------------
        mid    = WIDTH // 2
        drop_y = self.title_rect.bottom + SWATCH + 50
        presets = list(registry.presets(self.game).keys()) if self.game else []
        self.dropdown: Dropdown | None = None
        if presets:
            dr = pygame.Rect(mid - DROPDOWN_SIZE[0]//2, drop_y, *DROPDOWN_SIZE)
            self.dropdown = Dropdown(dr, presets, self.font, selected=default_preset)

        # keep PLAY clear of the opened option list
        play_y = drop_y + DROPDOWN_SIZE[1] * (len(presets) + 1) + 20
        self.play_btn = Button(
            pygame.Rect(mid - BUTTON_SIZE[0]//2, play_y, *BUTTON_SIZE),
            "PLAY",
            bg=BUTTON_BG_COLOR
        )

    # ───────────────────────────────────────────────────────── helpers ─────
    def _params(self) -> dict[str, Any]:
        if not self.dropdown:
            return {}
        return self.registry.presets(self.game).get(self.dropdown.selected, {})

    def _swatch_colors(self) -> list[PlayerColor]:
        return [PlayerColor(c) for c in self._params().get("colors", [])]

    # ───────────────────────────────────────────────────────── event ─────
    def handle_event(self, ev: pygame.event.Event) -> tuple[str, Any] | None:
        # dropdown swallows clicks while it is open
        if self.dropdown and self.dropdown.handle_event(ev):
            return None

        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self.game and self.play_btn.hovered(ev.pos):
                return ("play", (self.game, self._params()))

        if ev.type == pygame.KEYDOWN and ev.key == pygame.K_RETURN and self.game:
            return ("play", (self.game, self._params()))
        return None

    # ───────────────────────────────────────────────────────── update ─────
    def update(self, dt: float) -> None:
        pass

    # ───────────────────────────────────────────────────────── draw ─────
    def draw(self) -> None:
        self.screen.fill(MENU_BG_COLOR)
        self.screen.blit(self.title_surf, self.title_rect)

        colors = self._swatch_colors()
        total  = len(colors) * SWATCH + (len(colors) - 1) * 10 if colors else 0
        x      = WIDTH // 2 - total // 2
        y      = self.title_rect.bottom + 20
        for color in colors:
            pygame.draw.circle(self.screen, color.rgb, (x + SWATCH//2, y + SWATCH//2), SWATCH//2)
            x += SWATCH + 10

        self.play_btn.draw(self.screen)
        # dropdown last so its open list sits on top of the button
        if self.dropdown:
            self.dropdown.draw(self.screen)
