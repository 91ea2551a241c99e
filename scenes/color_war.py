# scenes/color_war.py
"""
Color War scene: an 8×8 chain‑reaction board for 2–4 players.

The scene only translates clicks into ``GameState.apply_move`` calls and
draws what the engine reports.  Explosions returned by a move are replayed
wave by wave as a short animation on top of the settled board.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Sequence, Tuple

import pygame

from boards.grid_board import GridBoard
from config            import WIDTH, HEIGHT, FONT_NAME, RNG_SEED, GAMES, DEFAULT_PRESET
from constants         import (BOARD_BG_COLOR, CELL_COLOR, CELL_BORDER_COLOR, TEXT_COLOR,
                               TEXT_OUTLINE_COLOR, HINT_COLOR, BUTTON_ALT_BG_COLOR,
                               CELL_SIZE, BOARD_MARGIN, CELL_GAP, TILE_RADIUS_RATIO,
                               ANIMATION_DURATION, HINT_DURATION, BUTTON_SIZE)
from core.errors       import EngineStalled, MoveError
from core.explosions   import ExplosionEvent
from core.game_state   import new_game
from core.grid         import ROWS, COLS
from core.players      import PlayerColor
from ui.widgets        import Button

logger = logging.getLogger(__name__)

GAME_NAME = "Color War"

HALTED_MESSAGE  = "Match halted: chain reaction did not settle"

OUTLINE_OFFSETS = [(-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1), (1, 1)]


class ColorWarScene:
    def __init__(self, screen: pygame.Surface,
                 colors: Sequence[str] = ("Red", "Green", "Blue", "Yellow"),
                 preset_name: str = DEFAULT_PRESET,
                 seed: int | None = RNG_SEED):
        self.screen = screen
        self.colors = [PlayerColor(c) for c in colors]
        self.preset = preset_name
        self.seed   = seed
        self.board  = GridBoard(ROWS, COLS, CELL_SIZE, (BOARD_MARGIN, BOARD_MARGIN),
                                gap=CELL_GAP, cell_color=CELL_COLOR,
                                border_color=CELL_BORDER_COLOR)

        # fonts
        self.power_font = pygame.font.Font(FONT_NAME, 18)
        self.msg_font   = pygame.font.Font(FONT_NAME, 22)
        self.hud_font   = pygame.font.Font(FONT_NAME, 16)
        self.preset_lbl = self._outlined_label(preset_name, self.hud_font, TEXT_COLOR)
        self.message_rects: Dict[str, pygame.Rect] = {}

        mid, y = WIDTH // 2, HEIGHT - 70
        self.restart_btn = Button(pygame.Rect(mid - 170, y, *BUTTON_SIZE), "Restart")
        self.back_btn    = Button(pygame.Rect(mid + 20, y, *BUTTON_SIZE), "Back to Menu",
                                  bg=BUTTON_ALT_BG_COLOR)
        self._reset()

    # ───────── helpers & setup ─────────────────────────────────────
    def _reset(self):
        self.state = new_game(self.colors, self.seed)
        self.clock = 0.0
        self.anims: List[Tuple[float, ExplosionEvent]] = []
        self.hint = ""
        self.hint_until = 0.0
        self.halted = False

    @property
    def game_over(self) -> bool:
        return self.halted or self.state.status().is_over

    def _show_hint(self, text: str):
        self.hint = text
        self.hint_until = self.clock + HINT_DURATION

    def _rgb(self, player: int) -> Tuple[int, int, int]:
        return self.state.player(player).color.rgb

    def play(self, cell: Tuple[int, int]) -> None:
        mover = self.state.current_player
        try:
            events = self.state.apply_move(mover, cell)
        except MoveError as exc:
            logger.debug("rejected move %s by player %d: %s", cell, mover, exc)
            self._show_hint(str(exc))
            return
        except EngineStalled:
            logger.exception("chain reaction did not settle; halting match")
            self.halted = True
            self._show_hint(HALTED_MESSAGE)
            return
        self.anims = [(self.clock + ev.wave * ANIMATION_DURATION, ev) for ev in events]

    # ───────── event handling ──────────────────────────────────────
    def handle_event(self, ev: pygame.event.Event):
        if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
            return "menu"

        if ev.type != pygame.MOUSEBUTTONDOWN or ev.button != 1:
            return None

        if self.game_over:
            if self.restart_btn.hovered(ev.pos): self._reset(); return None
            if self.back_btn.hovered(ev.pos):    return "menu"
            return None

        cell = self.board.pixel_to_cell(*ev.pos)
        if cell:
            self.play(cell)
        return None

    # ───────── update & draw ───────────────────────────────────────
    def update(self, dt: float):
        self.clock += dt
        self.anims = [(t, ev) for t, ev in self.anims
                      if self.clock - t < ANIMATION_DURATION]
        if self.hint and self.clock >= self.hint_until:
            self.hint = ""

    def message(self) -> str:
        if self.halted:
            return HALTED_MESSAGE
        return self.state.turn_message()

    def _message_colour(self) -> Tuple[int, int, int]:
        if self.halted:
            return HINT_COLOR
        status = self.state.status()
        return self._rgb(status.winner if status.is_over else self.state.current_player)

    @staticmethod
    def _outlined_label(text: str, font: pygame.font.Font, color) -> pygame.Surface:
        lbl    = font.render(text, True, color)
        shadow = font.render(text, True, TEXT_OUTLINE_COLOR)
        surf   = pygame.Surface((lbl.get_width() + 2, lbl.get_height() + 2), pygame.SRCALPHA)
        for dx, dy in OUTLINE_OFFSETS:
            surf.blit(shadow, (1 + dx, 1 + dy))
        surf.blit(lbl, (1, 1))
        return surf

    def _outlined(self, text: str, font: pygame.font.Font, color, **anchor):
        surf = self._outlined_label(text, font, color)
        self.screen.blit(surf, surf.get_rect(**anchor))

    def _draw_messages(self):
        """Turn prompt on all four sides so every seat can read it; a win banner only on top."""
        label  = self._outlined_label(self.message(), self.msg_font, self._message_colour())
        bw, bh = self.board.size
        mid_y  = BOARD_MARGIN + bh // 2
        placed = {"top": (label, (WIDTH // 2, BOARD_MARGIN // 2))}
        if not self.state.status().is_over:
            placed["bottom"] = (label, (WIDTH // 2, BOARD_MARGIN + bh + BOARD_MARGIN // 2))
            placed["left"]   = (pygame.transform.rotate(label, 90), (BOARD_MARGIN // 2, mid_y))
            placed["right"]  = (pygame.transform.rotate(label, -90),
                                (BOARD_MARGIN + bw + BOARD_MARGIN // 2, mid_y))

        self.message_rects = {}
        for side, (surf, centre) in placed.items():
            rect = surf.get_rect(center=centre)
            self.screen.blit(surf, rect)
            self.message_rects[side] = rect

    def _draw_tiles(self):
        radius = int(CELL_SIZE * TILE_RADIUS_RATIO)
        for r, row in enumerate(self.state.snapshot()):
            for c, cell in enumerate(row):
                centre = self.board.cell_center(r, c)
                if cell.owner is not None:
                    pygame.draw.circle(self.screen, self._rgb(cell.owner), centre, radius)
                if cell.power > 0:
                    self._outlined(str(cell.power), self.power_font, TEXT_COLOR, center=centre)

    def _draw_explosions(self):
        radius = CELL_SIZE * TILE_RADIUS_RATIO
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        for start, ev in self.anims:
            progress = (self.clock - start) / ANIMATION_DURATION
            if progress < 0 or ev.player is None:
                continue
            progress = min(progress, 1.0)
            rgb = self._rgb(ev.player)
            sx, sy = self.board.cell_center(*ev.position)
            # source shrinks and fades
            alpha = int(255 * (1.0 - progress))
            pygame.draw.circle(overlay, (*rgb, alpha), (sx, sy), int(radius * (1.0 - progress * 0.5)))
            # captured tiles fly out towards their cells
            for q in ev.neighbors:
                tx, ty = self.board.cell_center(*q)
                pos = (sx + (tx - sx) * progress, sy + (ty - sy) * progress)
                pygame.draw.circle(overlay, (*rgb, int(255 * progress)), pos,
                                   int(radius * (0.5 + progress * 0.5)))
        self.screen.blit(overlay, (0, 0))

    def draw(self):
        self.screen.fill(BOARD_BG_COLOR)
        self.board.draw(self.screen)
        self._draw_tiles()
        if self.anims:
            self._draw_explosions()

        self._draw_messages()

        # HUD: preset name, tiles per player
        self.screen.blit(self.preset_lbl, self.preset_lbl.get_rect(topright=(WIDTH - 10, 10)))
        x = 10
        for pid, count in self.state.tile_counts().items():
            p   = self.state.player(pid)
            txt = f"{p.name}: {'out' if p.eliminated else count}"
            self._outlined(txt, self.hud_font, p.color.rgb, topleft=(x, 10))
            x += 110

        if self.hint:
            h_lbl = self.hud_font.render(self.hint, True, HINT_COLOR)
            self.screen.blit(h_lbl, h_lbl.get_rect(midtop=(WIDTH // 2, BOARD_MARGIN - 30)))

        if self.game_over:
            self.restart_btn.draw(self.screen)
            self.back_btn.draw(self.screen)


# ───── register with GameRegistry ──────────────────────────────────
def register(registry):
    def launch(scr: pygame.Surface, **kw):
        return ColorWarScene(
            scr,
            colors      = kw.get("colors", ["Red", "Green", "Blue", "Yellow"]),
            preset_name = kw.get("preset_name", DEFAULT_PRESET),
            seed        = kw.get("seed", RNG_SEED),
        )
    presets = dict(GAMES).get(GAME_NAME, {})
    presets = {n: {**v, "preset_name": n} for n, v in presets.items()}
    registry.register(GAME_NAME, launcher=launch, presets=presets)
