from __future__ import annotations
import math
from typing import Callable, Dict, Tuple

import pygame

from engine.render.shapes import draw_text_centered

Color = Tuple[int, int, int]


def _arrow(surface, color, c, s, w, direction):
    # shaft plus a two-stroke head, drawn pointing up then rotated
    pts = [(0, 0.8), (0, -0.8), (-0.55, -0.25), (0, -0.8), (0.55, -0.25)]
    ang = {"up": 0, "right": 90, "down": 180, "left": 270}[direction]
    rad = math.radians(ang)
    ca, sa = math.cos(rad), math.sin(rad)
    mapped = [(c[0] + s * (x * ca - y * sa), c[1] + s * (x * sa + y * ca)) for x, y in pts]
    pygame.draw.lines(surface, color, False, mapped[:2], w)
    pygame.draw.lines(surface, color, False, mapped[2:], w)


def _chevrons(surface, color, c, s, w, up):
    sign = -1 if up else 1
    for off in (-0.35, 0.35):
        y_tip = c[1] + s * (off + sign * 0.35)
        y_base = c[1] + s * (off - sign * 0.35)
        pygame.draw.lines(surface, color, False, [
            (c[0] - s * 0.6, y_base), (c[0], y_tip), (c[0] + s * 0.6, y_base)], w)


def _turn(surface, color, c, s, w, times=1):
    r = int(s * 0.75)
    rect = pygame.Rect(c[0] - r, c[1] - r, 2 * r, 2 * r)
    pygame.draw.arc(surface, color, rect, math.radians(-60), math.radians(200), w)
    # arrow head at the open end of the arc
    ex = c[0] + r * math.cos(math.radians(-60))
    ey = c[1] - r * math.sin(math.radians(-60))
    pygame.draw.polygon(surface, color, [
        (ex - s * 0.25, ey - s * 0.05), (ex + s * 0.2, ey - s * 0.2), (ex + s * 0.05, ey + s * 0.25)])
    if times > 1:
        draw_text_centered(surface, f"x{times}", (int(c[0]), int(c[1])), color, size=int(s * 0.9))


def _stop(surface, color, c, s, w):
    half = int(s * 0.65)
    pygame.draw.rect(surface, color, pygame.Rect(c[0] - half, c[1] - half, 2 * half, 2 * half), w,
                     border_radius=max(2, half // 4))


_DRAWERS: Dict[str, Callable] = {
    "arrow_up": lambda surf, col, c, s, w: _arrow(surf, col, c, s, w, "up"),
    "arrow_down": lambda surf, col, c, s, w: _arrow(surf, col, c, s, w, "down"),
    "arrow_right": lambda surf, col, c, s, w: _arrow(surf, col, c, s, w, "right"),
    "arrow_left": lambda surf, col, c, s, w: _arrow(surf, col, c, s, w, "left"),
    "stop": _stop,
    "turn": lambda surf, col, c, s, w: _turn(surf, col, c, s, w, 1),
    "turn_x2": lambda surf, col, c, s, w: _turn(surf, col, c, s, w, 2),
    "turn_x3": lambda surf, col, c, s, w: _turn(surf, col, c, s, w, 3),
    "jump": lambda surf, col, c, s, w: _chevrons(surf, col, c, s, w, up=True),
    "crouch": lambda surf, col, c, s, w: _chevrons(surf, col, c, s, w, up=False),
}


def draw_icon(surface: pygame.Surface, icon: str, center: Tuple[int, int], size: int,
              color: Color = (241, 245, 249), width: int = 4) -> None:
    """Draw a sign icon scaled so it fits in a size x size box around center."""
    drawer = _DRAWERS.get(icon)
    if drawer is None:
        draw_text_centered(surface, "?", center, color, size=size)
        return
    drawer(surface, color, center, size / 2.0, width)


def known_icons():
    return frozenset(_DRAWERS)
