import math
import pygame
from typing import Tuple


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    img = font.render(text, True, color)
    surface.blit(img, img.get_rect(center=center))


def draw_progress_ring(surface: pygame.Surface, center: Tuple[int, int], radius: int, pct: float,
                       color=(235, 235, 235), track_color=None, width: int = 2):
    """
    Arc covering `pct` of a full turn, starting at the top.
    pct is clamped to [0, 1]; an optional track draws the full circle underneath.
    """
    cx, cy = center
    rect = pygame.Rect(cx - radius, cy - radius, radius * 2, radius * 2)
    if track_color is not None:
        pygame.draw.circle(surface, track_color, (cx, cy), radius, width)

    pct = max(0.0, min(1.0, pct))
    if pct <= 0.0:
        return
    # pygame arcs run counter-clockwise; anchor the far end at the top so the arc shrinks clockwise
    end_angle = 0.5 * math.pi
    start_angle = end_angle - 2 * math.pi * pct
    pygame.draw.arc(surface, color, rect, start_angle, end_angle, width)
