from .game_base import Game
from .frame_data import FrameData
from .config import EngineConfig

__all__ = ["Game", "FrameData", "EngineConfig"]
