"""
main.py

Entry point.  Configures logging, builds the registry via auto-discovery,
launches the lobby, and runs a generic loop that swaps into any Scene
returned by registry.launch_game.
"""

import logging
import sys
import pygame

from config              import WIDTH, HEIGHT, FPS, GAMES, LOG_LEVEL, DEFAULT_PRESET
from core.game_registry  import GameRegistry
from scenes.loader       import register_all
from ui.menu             import MenuUI

logger = logging.getLogger(__name__)


def build_registry() -> GameRegistry:
    reg = GameRegistry()
    # 1) register every listed game with its presets (no launcher yet)
    for name, presets in GAMES:
        reg.register(name, presets=presets)
    # 2) auto-discover & register any scenes with register(registry)
    register_all(reg)
    return reg


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()
    pygame.display.set_caption("Color War - Chain Reaction")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock  = pygame.time.Clock()

    registry = build_registry()
    logger.info("registered games: %s", registry.all_games())

    menu    = MenuUI(screen, registry, DEFAULT_PRESET)
    current = menu

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
                break

            # dispatch to current scene/menu
            result = current.handle_event(ev)

            # Lobby PLAY
            if isinstance(current, MenuUI) and isinstance(result, tuple):
                cmd, payload = result
                if cmd == "play":
                    name, params = payload
                    scene = registry.launch_game(name, screen, **params)
                    if scene:
                        current = scene
                continue

            # Game scene → back to lobby
            if not isinstance(current, MenuUI) and result == "menu":
                current = menu
                continue

        current.update(dt)
        current.draw()
        pygame.display.flip()

    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    main()
