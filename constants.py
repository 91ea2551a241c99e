"""
Values you can freely tinker with without touching the logic.
"""

# ── Colours ───────────────────────────────────────────────────────────
MENU_BG_COLOR          = (120, 120, 120)     # lobby background
BOARD_BG_COLOR         = (255, 255, 255)     # around the grid
CELL_COLOR             = (128, 128, 128)
CELL_BORDER_COLOR      = (255, 255, 255)
TEXT_COLOR             = (255, 255, 255)
TEXT_OUTLINE_COLOR     = (0, 0, 0)
HINT_COLOR             = (160, 40, 40)

BUTTON_FG_COLOR        = (240, 240, 240)
BUTTON_BG_COLOR        = (70, 120, 70)       # PLAY / Restart
BUTTON_ALT_BG_COLOR    = (120, 70, 120)      # Back

# ── Layout / sizes ────────────────────────────────────────────────────
CELL_SIZE              = 50
BOARD_MARGIN           = 4 * CELL_SIZE       # board origin, both axes
CELL_GAP               = 2                   # px between neighbouring cells
TILE_RADIUS_RATIO      = 1 / 3               # tile circle radius vs cell size

DROPDOWN_SIZE          = (200, 36)
BUTTON_SIZE            = (150, 40)

# ── Timing ────────────────────────────────────────────────────────────
ANIMATION_DURATION     = 0.1                 # seconds per explosion wave
HINT_DURATION          = 1.5                 # how long a rejected-move hint stays up
