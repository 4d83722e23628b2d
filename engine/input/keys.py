from __future__ import annotations
from typing import Optional

import pygame

# Named keys use the same identifiers a browser reports in KeyboardEvent.key,
# so games can declare bindings like "ArrowUp" without touching pygame constants.
NAMED_KEYS = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_RETURN: "Enter",
    pygame.K_KP_ENTER: "Enter",
    pygame.K_ESCAPE: "Escape",
    pygame.K_SPACE: " ",
    pygame.K_TAB: "Tab",
    pygame.K_BACKSPACE: "Backspace",
}


def key_identifier(key: int, unicode: str = "") -> Optional[str]:
    """
    Map a pygame key code (+ the typed character, if any) to a key identifier.

    Printable characters are reported as typed, so shift+w gives "W".
    Returns None for keys with neither a name nor a printable character
    (bare modifiers, function keys...).
    """
    named = NAMED_KEYS.get(key)
    if named is not None:
        return named
    if unicode and unicode.isprintable():
        return unicode
    return None


def event_key_identifier(event: pygame.event.Event) -> Optional[str]:
    if event.type != pygame.KEYDOWN:
        return None
    return key_identifier(event.key, getattr(event, "unicode", ""))
