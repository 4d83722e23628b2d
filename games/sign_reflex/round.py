from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Mapping, Optional, Sequence, Tuple

from engine.app.ticker import IntervalTicker

from .const import SESSION_SECONDS, SIGN_SECONDS, TICK_MS
from .signs import SIGNS_BY_DIFFICULTY, Difficulty, Sign, keys_for, validate_pool


class RoundState(Enum):
    IDLE = 1
    RUNNING = 2


class Feedback(Enum):
    NONE = "none"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass
class Session:
    difficulty: Difficulty
    current_sign: Sign
    session_seconds_remaining: int
    sign_seconds_remaining: int
    score: int = 0
    last_feedback: Feedback = Feedback.NONE


@dataclass(frozen=True)
class KeyResult:
    feedback: Feedback
    score_delta: int = 0
    sign_changed: bool = False


IGNORED = KeyResult(Feedback.NONE)


@dataclass(frozen=True)
class RoundView:
    """Read-only copy of what the screen needs for one frame."""
    running: bool
    difficulty: Optional[Difficulty]
    score: int
    session_seconds_remaining: int
    sign_seconds_remaining: int
    sign_fraction: float
    current_sign: Optional[Sign]
    last_feedback: Feedback


def pick_next(pool: Sequence[Sign], exclude: Optional[Sign] = None, rng=random) -> Sign:
    """
    Uniform pick from `pool`, skipping anything with the same id as `exclude`.
    `rng` is anything with a choice() method (the random module, random.Random).
    """
    candidates = list(pool)
    if exclude is not None:
        candidates = [s for s in candidates if s.id != exclude.id]
    if not candidates:
        raise ValueError("no sign left to pick from")
    return rng.choice(candidates)


class RoundController:
    """
    Owns one play session: the two countdowns, the score and the sign on screen.

    Time only moves through the ticker (advance(dt_ms) from the frame loop, or
    tick() directly). Each tick is bound to the session that armed it, so a
    tick left over from a stopped session can't touch the next one.
    """

    def __init__(
        self,
        signs_by_difficulty: Mapping[Difficulty, Tuple[Sign, ...]] = SIGNS_BY_DIFFICULTY,
        session_seconds: int = SESSION_SECONDS,
        sign_seconds: int = SIGN_SECONDS,
        ticker: Optional[IntervalTicker] = None,
        rng: Optional[random.Random] = None,
        on_sign_shown: Optional[Callable[[Sign], None]] = None,
        on_round_ended: Optional[Callable[[int], None]] = None,
    ):
        if session_seconds <= 0 or sign_seconds <= 0:
            raise ValueError("session_seconds and sign_seconds must be positive")
        for difficulty, pool in signs_by_difficulty.items():
            validate_pool(pool, name=f"{difficulty.value} signs")

        self.pools: Dict[Difficulty, Tuple[Sign, ...]] = dict(signs_by_difficulty)
        self._bound_keys: Dict[Difficulty, FrozenSet[str]] = {
            d: keys_for(pool) for d, pool in self.pools.items()}
        self.session_seconds = session_seconds
        self.sign_seconds = sign_seconds
        self.ticker = ticker or IntervalTicker(TICK_MS)
        self.rng = rng or random.Random()
        self.on_sign_shown = on_sign_shown
        self.on_round_ended = on_round_ended

        self.session: Optional[Session] = None
        self.last_score: Optional[int] = None

    @property
    def state(self) -> RoundState:
        return RoundState.RUNNING if self.session is not None else RoundState.IDLE

    # ------------- lifecycle -------------
    def start(self, difficulty: Difficulty) -> Session:
        if difficulty not in self.pools:
            raise ValueError(f"No signs configured for {difficulty.value}")
        self.stop()

        session = Session(
            difficulty=difficulty,
            current_sign=pick_next(self.pools[difficulty], rng=self.rng),
            session_seconds_remaining=self.session_seconds,
            sign_seconds_remaining=self.sign_seconds,
        )
        self.session = session
        self.ticker.arm(lambda: self._on_second(session))
        self._announce(session.current_sign)
        return session

    def stop(self) -> None:
        self.ticker.cancel()
        self.session = None

    def advance(self, dt_ms: float) -> int:
        return self.ticker.advance(dt_ms)

    def tick(self) -> None:
        """One second elapsed for the running session."""
        if self.session is not None:
            self._on_second(self.session)

    def _on_second(self, session: Session) -> None:
        if session is not self.session:
            return

        session.session_seconds_remaining -= 1
        session.sign_seconds_remaining -= 1

        if session.session_seconds_remaining <= 0:
            session.session_seconds_remaining = 0
            self._end_round(session)
            return

        if session.sign_seconds_remaining <= 0:
            self._show_next(session)

    def _end_round(self, session: Session) -> None:
        self.last_score = session.score
        self.stop()
        if self.on_round_ended is not None:
            self.on_round_ended(session.score)

    def _show_next(self, session: Session) -> None:
        session.current_sign = pick_next(
            self.pools[session.difficulty], exclude=session.current_sign, rng=self.rng)
        session.sign_seconds_remaining = self.sign_seconds
        self._announce(session.current_sign)

    def _announce(self, sign: Sign) -> None:
        if self.on_sign_shown is not None:
            self.on_sign_shown(sign)

    # ------------- input -------------
    def handle_key(self, key: str) -> KeyResult:
        session = self.session
        if session is None:
            return IGNORED

        if key in session.current_sign.accepted_keys:
            session.score += 1
            session.last_feedback = Feedback.CORRECT
            self._show_next(session)
            return KeyResult(Feedback.CORRECT, score_delta=1, sign_changed=True)

        if key in self._bound_keys[session.difficulty]:
            session.last_feedback = Feedback.INCORRECT
            return KeyResult(Feedback.INCORRECT)

        return IGNORED

    def clear_feedback(self) -> None:
        if self.session is not None:
            self.session.last_feedback = Feedback.NONE

    # ------------- render boundary -------------
    def snapshot(self) -> RoundView:
        s = self.session
        if s is None:
            return RoundView(
                running=False,
                difficulty=None,
                score=self.last_score or 0,
                session_seconds_remaining=0,
                sign_seconds_remaining=0,
                sign_fraction=0.0,
                current_sign=None,
                last_feedback=Feedback.NONE,
            )
        return RoundView(
            running=True,
            difficulty=s.difficulty,
            score=s.score,
            session_seconds_remaining=s.session_seconds_remaining,
            sign_seconds_remaining=s.sign_seconds_remaining,
            sign_fraction=s.sign_seconds_remaining / self.sign_seconds,
            current_sign=s.current_sign,
            last_feedback=s.last_feedback,
        )
