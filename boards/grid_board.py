"""
GridBoard – the pixel side of a tile‑based play‑field.

Used by the Color War scene to:
    1. Convert between (row, col) <‑‑> pixel coordinates (clicks → cells).
    2. Pre‑render the cell backgrounds once.

The board itself holds *no* game state; the engine's ``core.grid.Grid`` does.
"""
from __future__ import annotations
from typing import Tuple
import pygame

class GridBoard:
    def __init__(
        self,
        rows: int,
        cols: int,
        cell_size: int = 32,
        origin: Tuple[int, int] = (0, 0),
        gap: int = 0,
        cell_color: Tuple[int, int, int] = (128, 128, 128),
        border_color: Tuple[int, int, int] = (255, 255, 255),
    ):
        self.rows      = rows
        self.cols      = cols
        self.cell_size = cell_size
        self.origin    = origin
        self.gap       = gap

        # cached surface for cell backgrounds
        self._grid_surf = self._build_grid_surface(cell_color, border_color)

    # ───────────────────────────── geometry ──────────────────────────
    @property
    def size(self) -> Tuple[int, int]:
        return self.cols * self.cell_size, self.rows * self.cell_size

    def cell_to_pixel(self, row: int, col: int) -> Tuple[int, int]:
        ox, oy = self.origin
        return ox + col * self.cell_size, oy + row * self.cell_size

    def cell_center(self, row: int, col: int) -> Tuple[int, int]:
        x, y = self.cell_to_pixel(row, col)
        return x + self.cell_size // 2, y + self.cell_size // 2

    def pixel_to_cell(self, x: int, y: int) -> Tuple[int, int] | None:
        ox, oy = self.origin
        if x < ox or y < oy:
            return None
        col = (x - ox) // self.cell_size
        row = (y - oy) // self.cell_size
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return int(row), int(col)
        return None

    # ─────────────────────────── rendering ───────────────────────────
    def _build_grid_surface(self, fill, border) -> pygame.Surface:
        surf = pygame.Surface(self.size, pygame.SRCALPHA)
        inner = self.cell_size - self.gap
        for r in range(self.rows):
            for c in range(self.cols):
                rect = pygame.Rect(c * self.cell_size, r * self.cell_size, inner, inner)
                pygame.draw.rect(surf, fill, rect)
                pygame.draw.rect(surf, border, rect, width=2)
        return surf

    def draw(self, target: pygame.Surface) -> None:
        target.blit(self._grid_surf, self.origin)
