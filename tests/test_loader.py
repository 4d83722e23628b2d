from pathlib import Path

import pytest

from engine.app.loader import GAMES_DIR, find_game_root, load_game_manifest, load_game_module


def test_bundled_manifest_has_round_options() -> None:
    manifest = load_game_manifest(find_game_root("sign_reflex"))
    opts = manifest["options"]
    assert opts["session_seconds"] == 60
    assert opts["sign_seconds"] == 10
    assert opts["feedback_ms"] == 200


def test_bundled_game_module_exposes_factory() -> None:
    module = load_game_module(GAMES_DIR / "sign_reflex")
    assert callable(module.get_game)


def test_unknown_game(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="No game named"):
        find_game_root("nope", games_dir=tmp_path)


def test_missing_manifest(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="manifest.yaml"):
        load_game_manifest(tmp_path)


def test_manifest_without_options_gets_empty_mapping(tmp_path: Path) -> None:
    (tmp_path / "manifest.yaml").write_text("name: Bare\n", encoding="utf-8")
    assert load_game_manifest(tmp_path) == {"name": "Bare", "options": {}}


def test_manifest_options_must_be_mapping(tmp_path: Path) -> None:
    (tmp_path / "manifest.yaml").write_text("options: [1, 2]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="options"):
        load_game_manifest(tmp_path)


def test_module_without_factory(tmp_path: Path) -> None:
    (tmp_path / "main.py").write_text("X = 1\n", encoding="utf-8")
    with pytest.raises(AttributeError, match="get_game"):
        load_game_module(tmp_path)


def test_missing_main(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="main.py"):
        load_game_module(tmp_path)
