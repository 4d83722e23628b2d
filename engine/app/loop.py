from __future__ import annotations
import sys
import time
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData
from engine.app.context import Context
from engine.app.loader import find_game_root, load_game_manifest, load_game_module
from engine.input.keys import event_key_identifier


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    mute: bool = False,
    debug: bool = False,
) -> int:
    cfg = EngineConfig(
        screen_size=screen_size,
        fps=fps,
        mute=mute,
        debug=debug,
    )

    # load game before opening a window so config errors surface cleanly
    try:
        game_root = find_game_root(game_id)
        manifest = load_game_manifest(game_root)
        module = load_game_module(game_root)
    except (FileNotFoundError, AttributeError, ValueError) as e:
        print(f"ERROR: could not load game '{game_id}': {e}", file=sys.stderr)
        return 1
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(f"{manifest.get('name', game_id)}")
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()

    ctx = Context(
        screen=screen,
        cfg=cfg,
        screen_size=screen_size,
    )

    try:
        game.on_load(ctx, manifest)
    except ValueError as e:
        print(f"ERROR: game '{game_id}' rejected its configuration: {e}", file=sys.stderr)
        pygame.quit()
        return 1

    running = True
    try:
        while running:
            dt = clock.tick(fps)
            keys = []
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    key = event_key_identifier(event)
                    if key is not None:
                        keys.append(key)
                game.on_event(event)

            frame_data = FrameData(timestamp=time.time(), keys=keys)

            screen.fill((15, 23, 42))
            game.on_update(dt, frame_data)
            game.on_draw(screen)

            pygame.display.flip()
    finally:
        game.on_unload()
        pygame.quit()
    return 0
