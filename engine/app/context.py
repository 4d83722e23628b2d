from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Tuple
from engine.api.config import EngineConfig


@dataclass
class Context:
    """What a game gets to see of the engine when it loads."""
    screen: pygame.Surface
    cfg: EngineConfig
    screen_size: Tuple[int, int]
