from __future__ import annotations

import os
import random
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from games.sign_reflex.round import RoundController  # noqa: E402
from games.sign_reflex.signs import SIGNS_BY_DIFFICULTY, Difficulty, Sign  # noqa: E402


class Recorder:
    """Collects controller callbacks."""

    def __init__(self) -> None:
        self.shown: list[Sign] = []
        self.ended: list[int] = []


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def controller(recorder: Recorder) -> RoundController:
    return RoundController(
        rng=random.Random(1234),
        on_sign_shown=recorder.shown.append,
        on_round_ended=recorder.ended.append,
    )


def sign_by_id(sign_id: str) -> Sign:
    for sign in SIGNS_BY_DIFFICULTY[Difficulty.HARD]:
        if sign.id == sign_id:
            return sign
    raise KeyError(sign_id)
