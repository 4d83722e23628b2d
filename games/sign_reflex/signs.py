from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Tuple


class SignPoolError(ValueError):
    """A sign pool that can't support picking a different sign each time."""


@dataclass(frozen=True)
class Sign:
    id: str
    accepted_keys: FrozenSet[str]
    label: str
    icon: str  # resolved by icons.py, never by the round logic


class Difficulty(Enum):
    NORMAL = "normal"
    HARD = "hard"

    @classmethod
    def parse(cls, name: str) -> "Difficulty":
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown level '{name}' (expected one of: {choices})") from None


def _sign(id: str, keys: Iterable[str], label: str, icon: str) -> Sign:
    return Sign(id=id, accepted_keys=frozenset(keys), label=label, icon=icon)


NORMAL_SIGNS: Tuple[Sign, ...] = (
    _sign("forward", ("ArrowUp", "w", "W"), "Forward (↑)", "arrow_up"),
    _sign("backward", ("ArrowDown", "s", "S"), "Backward (↓)", "arrow_down"),
    _sign("right", ("ArrowRight", "d", "D"), "Right (→)", "arrow_right"),
    _sign("left", ("ArrowLeft", "a", "A"), "Left (←)", "arrow_left"),
    _sign("brake", (" ", "f", "F"), "Brake (Space)", "stop"),
    _sign("turn", ("g", "G", "r", "R"), "Turn (G)", "turn"),
)

HARD_EXTRA_SIGNS: Tuple[Sign, ...] = (
    _sign("jump", ("j", "J"), "Jump (J)", "jump"),
    _sign("crouch", ("c", "C"), "Crouch (C)", "crouch"),
    _sign("turn_x2", ("2",), "Turn x2 (2)", "turn_x2"),
    _sign("turn_x3", ("3",), "Turn x3 (3)", "turn_x3"),
)

SIGNS_BY_DIFFICULTY: Dict[Difficulty, Tuple[Sign, ...]] = {
    Difficulty.NORMAL: NORMAL_SIGNS,
    Difficulty.HARD: NORMAL_SIGNS + HARD_EXTRA_SIGNS,
}


def validate_pool(pool: Tuple[Sign, ...], name: str = "pool") -> None:
    if not pool:
        raise SignPoolError(f"{name} has no signs")
    if len({s.id for s in pool}) < 2:
        raise SignPoolError(f"{name} needs at least 2 distinct signs, got {len(pool)}")


def keys_for(pool: Iterable[Sign]) -> FrozenSet[str]:
    """Union of every key bound to a sign in the pool."""
    out: set[str] = set()
    for sign in pool:
        out |= sign.accepted_keys
    return frozenset(out)
