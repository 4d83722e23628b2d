import pytest

from games.sign_reflex.icons import known_icons
from games.sign_reflex.signs import (
    HARD_EXTRA_SIGNS,
    NORMAL_SIGNS,
    SIGNS_BY_DIFFICULTY,
    Difficulty,
    Sign,
    SignPoolError,
    keys_for,
    validate_pool,
)


def test_normal_tier_has_six_signs() -> None:
    assert len(SIGNS_BY_DIFFICULTY[Difficulty.NORMAL]) == 6


def test_hard_tier_extends_normal_in_order() -> None:
    hard = SIGNS_BY_DIFFICULTY[Difficulty.HARD]
    assert hard[: len(NORMAL_SIGNS)] == NORMAL_SIGNS
    assert hard[len(NORMAL_SIGNS):] == HARD_EXTRA_SIGNS
    assert len(hard) == 10


def test_sign_ids_unique_and_keys_do_not_overlap() -> None:
    hard = SIGNS_BY_DIFFICULTY[Difficulty.HARD]
    assert len({s.id for s in hard}) == len(hard)
    seen: set[str] = set()
    for sign in hard:
        assert not (sign.accepted_keys & seen), sign.id
        seen |= sign.accepted_keys


def test_bindings_are_case_sensitive_tokens() -> None:
    forward = SIGNS_BY_DIFFICULTY[Difficulty.NORMAL][0]
    assert forward.id == "forward"
    assert forward.accepted_keys == {"ArrowUp", "w", "W"}
    brake = next(s for s in NORMAL_SIGNS if s.id == "brake")
    assert " " in brake.accepted_keys


def test_every_icon_has_a_drawer() -> None:
    assert {s.icon for s in SIGNS_BY_DIFFICULTY[Difficulty.HARD]} <= known_icons()


def test_keys_for_unions_bindings() -> None:
    keys = keys_for(NORMAL_SIGNS)
    assert "ArrowUp" in keys and "g" in keys
    assert "j" not in keys


def test_validate_pool_rejects_empty_and_single() -> None:
    with pytest.raises(SignPoolError):
        validate_pool(())
    only = Sign(id="x", accepted_keys=frozenset({"x"}), label="X", icon="stop")
    with pytest.raises(SignPoolError):
        validate_pool((only, only))
    validate_pool(NORMAL_SIGNS)


def test_sign_is_immutable() -> None:
    with pytest.raises(AttributeError):
        NORMAL_SIGNS[0].label = "changed"  # type: ignore[misc]


@pytest.mark.parametrize("name,expected", [("normal", Difficulty.NORMAL), (" HARD ", Difficulty.HARD)])
def test_difficulty_parse(name: str, expected: Difficulty) -> None:
    assert Difficulty.parse(name) is expected


def test_difficulty_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown level"):
        Difficulty.parse("insane")
