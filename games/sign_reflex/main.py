from __future__ import annotations
import sys
from typing import Any, Dict, List, Optional

import pygame

from engine.api import Game, FrameData
from engine.app.context import Context
from engine.audio.tone import ToneCue
from engine.render.shapes import draw_progress_ring, draw_text, draw_text_centered

from .const import *
from .icons import draw_icon
from .round import Feedback, RoundController, RoundState
from .signs import Difficulty

LEVEL_KEYS = {
    "1": Difficulty.NORMAL,
    "2": Difficulty.HARD,
    "ArrowLeft": Difficulty.NORMAL,
    "ArrowRight": Difficulty.HARD,
}
START_KEYS = ("Enter",)
LEVEL_TITLES = {Difficulty.NORMAL: "Level 1: Normal", Difficulty.HARD: "Level 2: Hard"}
LEGEND_CELL = (260, 64)
LEGEND_MAX_COLS = 4
LEGEND_MARGIN = 20


def _option(opts: dict, name: str, default, cast):
    """Read one manifest option, turning bad or empty values into ValueError."""
    value = opts.get(name, default)
    if value is None:
        raise ValueError(f"option '{name}' is empty")
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ValueError(f"option '{name}' has a bad value: {value!r}") from None


class SignReflex(Game):
    def on_load(self, ctx: Context, manifest: Dict[str, Any]):
        self.ctx = ctx
        self.manifest = manifest
        self.w, self.h = ctx.screen_size
        opts = manifest.get("options", {})

        self.feedback_ms = _option(opts, "feedback_ms", FEEDBACK_MS, int)
        self.level = Difficulty.parse(_option(opts, "default_level", DEFAULT_LEVEL, str))
        self.tone = ToneCue(
            freq_hz=_option(opts, "beep_hz", BEEP_HZ, float),
            dur_ms=_option(opts, "beep_ms", BEEP_MS, int),
            gain=_option(opts, "beep_gain", BEEP_GAIN, float),
            enabled=not ctx.cfg.mute,
            debug=ctx.cfg.debug,
        )
        self.round = RoundController(
            session_seconds=_option(opts, "session_seconds", SESSION_SECONDS, int),
            sign_seconds=_option(opts, "sign_seconds", SIGN_SECONDS, int),
            on_sign_shown=lambda sign: self.tone.play(),
            on_round_ended=self._on_round_ended,
        )

        self._now_ms = 0.0
        self._feedback_until_ms: Optional[float] = None

    # ------------- helpers -------------
    def _log(self, msg: str) -> None:
        if self.ctx.cfg.debug:
            print(f"[sign_reflex] {msg}", file=sys.stderr)

    def _begin_round(self):
        self._feedback_until_ms = None
        self.round.start(self.level)
        self._log(f"round started ({self.level.value})")

    def _on_round_ended(self, score: int) -> None:
        self._feedback_until_ms = None
        self._log(f"round ended, score {score}")

    def _handle_menu_key(self, key: str) -> None:
        if key in LEVEL_KEYS:
            self.level = LEVEL_KEYS[key]
        elif key in START_KEYS:
            self._begin_round()

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        self._now_ms += dt_ms

        for key in frame.keys:
            if self.round.state == RoundState.IDLE:
                self._handle_menu_key(key)
                continue
            result = self.round.handle_key(key)
            if result.feedback != Feedback.NONE:
                self._feedback_until_ms = self._now_ms + self.feedback_ms

        # the flash is purely visual; clearing it never touches score or clocks
        if self._feedback_until_ms is not None and self._now_ms >= self._feedback_until_ms:
            self.round.clear_feedback()
            self._feedback_until_ms = None

        self.round.advance(dt_ms)

    def on_draw(self, surface: pygame.Surface) -> None:
        if self.round.state == RoundState.IDLE:
            self._draw_start_screen(surface)
            return
        self._draw_game_screen(surface)

    def _draw_start_screen(self, surface: pygame.Surface) -> None:
        cx = self.w // 2
        draw_text_centered(surface, "Sign Reflex", (cx, 70), ACCENT_COLOR, size=BIG_FONT_SIZE)
        draw_text_centered(
            surface,
            f"Press the key for each sign before its ring runs out. "
            f"You have {self.round.session_seconds} seconds.",
            (cx, 125), MUTED_COLOR, size=24)

        # level picker
        for i, level in enumerate((Difficulty.NORMAL, Difficulty.HARD)):
            selected = level == self.level
            color = ACCENT_COLOR if selected else MUTED_COLOR
            label = f"[{i + 1}] {LEVEL_TITLES[level]}"
            draw_text_centered(surface, label, (cx - 170 + i * 340, 180), color,
                               size=HUD_FONT_SIZE + (4 if selected else 0))

        # legend for the selected level
        signs = self.round.pools[self.level]
        for sign, rect in zip(signs, self._legend_cells(len(signs))):
            pygame.draw.rect(surface, PANEL_COLOR, rect, border_radius=8)
            draw_icon(surface, sign.icon, (rect.x + 28, rect.centery), 32, ACCENT_COLOR, width=3)
            draw_text(surface, sign.label, (rect.x + 56, rect.centery - 10), HUD_COLOR, size=24)

        draw_text_centered(surface, "Press Enter to play", (cx, self.h - 110), HUD_COLOR, size=HUD_FONT_SIZE + 6)
        if self.round.last_score is not None:
            draw_text_centered(surface, f"Last score: {self.round.last_score}", (cx, self.h - 60), MUTED_COLOR,
                               size=HUD_FONT_SIZE)

    def _legend_cells(self, count: int) -> List[pygame.Rect]:
        """Grid cells for the sign legend, as many columns as fit the window (1 to 4)."""
        cell_w, cell_h = LEGEND_CELL
        cols = max(1, min(LEGEND_MAX_COLS, (self.w - 2 * LEGEND_MARGIN) // cell_w))
        x0 = self.w // 2 - (cols * cell_w) // 2
        y0 = 230
        cells = []
        for i in range(count):
            col, row = i % cols, i // cols
            cells.append(pygame.Rect(x0 + col * cell_w + 6, y0 + row * cell_h + 6, cell_w - 12, cell_h - 12))
        return cells

    def _draw_game_screen(self, surface: pygame.Surface) -> None:
        view = self.round.snapshot()
        cx, cy = self.w // 2, self.h // 2

        # HUD
        draw_text(surface, "Score", (40, 24), MUTED_COLOR, size=HUD_FONT_SIZE)
        draw_text(surface, str(view.score), (40, 54), HUD_COLOR, size=BIG_FONT_SIZE)
        draw_text(surface, "Time", (self.w - 140, 24), MUTED_COLOR, size=HUD_FONT_SIZE)
        draw_text(surface, str(view.session_seconds_remaining), (self.w - 140, 54), HUD_COLOR,
                  size=BIG_FONT_SIZE)

        # dial: feedback-tinted border, sign countdown ring, icon
        border = {
            Feedback.CORRECT: CORRECT_COLOR,
            Feedback.INCORRECT: INCORRECT_COLOR,
            Feedback.NONE: RING_BORDER_COLOR,
        }[view.last_feedback]
        pygame.draw.circle(surface, PANEL_COLOR, (cx, cy), DIAL_RADIUS)
        pygame.draw.circle(surface, border, (cx, cy), DIAL_RADIUS + RING_WIDTH, RING_WIDTH // 2 + 2)
        draw_progress_ring(surface, (cx, cy), DIAL_RADIUS - RING_WIDTH, view.sign_fraction,
                           color=ACCENT_COLOR, track_color=RING_TRACK_COLOR, width=RING_WIDTH)

        if view.current_sign is not None:
            draw_icon(surface, view.current_sign.icon, (cx, cy), DIAL_RADIUS, ICON_COLOR, width=6)
            draw_text_centered(surface, view.current_sign.label, (cx, cy + DIAL_RADIUS + 60), ACCENT_COLOR,
                               size=BIG_FONT_SIZE - 8)

    def on_unload(self) -> None:
        self.round.stop()


def get_game():
    return SignReflex()
