# core/game_registry.py

from __future__ import annotations
import logging
import pygame
from typing import Dict, List, Tuple, Callable, Optional, Any

logger = logging.getLogger(__name__)


class GameRegistry:
    def __init__(self):
        # name → (launcher_callable?, presets_mapping?)
        self._registry: Dict[str, Tuple[Optional[Callable[..., Any]], Optional[Dict[str, dict]]]] = {}

    def register(
        self,
        name: str,
        launcher: Callable[..., Any] | None = None,
        presets: dict[str, dict] | None = None,
    ) -> None:
        """
        presets: mapping preset_name → kwargs dict for that game
        (e.g. "2 Players" → {"colors": [...]}).

        Registering a name twice keeps earlier presets unless new ones are given.
        """
        if name in self._registry:
            old_launcher, old_presets = self._registry[name]
            launcher = launcher or old_launcher
            presets  = presets or old_presets
        self._registry[name] = (launcher, presets)

    def all_games(self) -> List[str]:
        return list(self._registry.keys())

    def launcher(self, name: str) -> Callable[..., Any] | None:
        return self._registry[name][0]

    def presets(self, name: str) -> dict[str, dict]:
        """Return the mapping of preset→kwargs, or empty dict."""
        presets = self._registry[name][1]
        return presets or {}

    def launch_game(
        self,
        name: str,
        screen: pygame.Surface,
        **kwargs: Any
    ) -> Any | None:
        """
        Call the registered launcher with screen and any kwargs (e.g. preset settings).
        """
        if name not in self._registry:
            logger.warning("[Registry] No such game: %s", name)
            return None
        launcher, _ = self._registry[name]
        if not launcher:
            logger.warning("[Registry] No launcher defined for game: %s", name)
            return None
        return launcher(screen, **kwargs)
