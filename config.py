"""
Global settings shared across modules.  A few can be overridden from the
environment.
"""
import os

# Window ---------------------------------------------------------------
WIDTH, HEIGHT = 800, 800
FPS           = 60

# Fonts ----------------------------------------------------------------
import pygame  # only to query default font
FONT_NAME  = pygame.font.get_default_font()

# Environment ----------------------------------------------------------
LOG_LEVEL = os.environ.get("COLORWAR_LOG_LEVEL", "INFO").upper()
_seed     = os.environ.get("COLORWAR_SEED")
RNG_SEED  = int(_seed) if _seed else None   # None -> fresh turn order each match

# Game list  (display‑name, player‑count presets)
GAMES = [
    ("Color War", {
        "2 Players": {"colors": ["Red", "Blue"]},
        "3 Players": {"colors": ["Red", "Green", "Blue"]},
        "4 Players": {"colors": ["Red", "Green", "Blue", "Yellow"]},
    }),
]
DEFAULT_PRESET = "4 Players"
