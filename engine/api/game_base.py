from __future__ import annotations

from typing import Any, Dict

import pygame

from engine.app.context import Context

from .frame_data import FrameData


class Game:
    """
    Interface the engine drives once per frame: on_event for every raw
    pygame event, then on_update with the frame's key identifiers, then
    on_draw. Games live in games/<id>/main.py and expose get_game().
    """

    def on_load(self, ctx: Context, manifest: Dict[str, Any]) -> None:
        """
        Called once with the parsed manifest.yaml; manifest["options"] is always
        a mapping. Raise ValueError for options the game can't use.
        """
        ...

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        """
        Advance game time by dt_ms. frame.keys lists this frame's key
        identifiers in arrival order ("ArrowUp", " ", "W" ...); handle them
        before advancing timers.
        """
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Optional raw event hook (focus changes, mouse...)."""
        ...

    def on_unload(self) -> None:
        """Stop timers and release anything the game opened."""
        ...
