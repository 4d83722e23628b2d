from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class FrameData:
    timestamp: float
    # key identifiers pressed this frame, in arrival order, e.g. ["ArrowUp", " ", "W"]
    keys: List[str] = field(default_factory=list)
