"""
Arcade host for the asteroid game
---------------------------------
- ArcadeSurface buffers one frame of primitives and replays it in on_draw
- ArcadeScheduler runs session tasks on arcade's clock
- AsteroidsWindow maps keys to actions, shows the game-over message and
  restarts with a fresh session on R

Play:
    python -m game.asteroids.window
"""

from __future__ import annotations

import argparse
import random
from typing import Optional

import arcade

from .controls import Action
from .session import GameConfig, GameSession
from .surface import FrameBufferSurface
from .utils import seed_everything


KEY_BINDINGS = {
    arcade.key.W: Action.FORWARD,
    arcade.key.A: Action.ROTATE_LEFT,
    arcade.key.D: Action.ROTATE_RIGHT,
    arcade.key.SPACE: Action.FIRE,
}

RESTART_KEY = arcade.key.R


class ArcadeSurface(FrameBufferSurface):
    """Frame buffer drawn with arcade in on_draw"""

    def replay(self):
        for kind, points, radius, color in self.commands:
            if kind == "clear":
                arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, color)
            elif kind == "fill_polygon":
                arcade.draw_polygon_filled(points, color)
            elif kind == "stroke_polygon":
                arcade.draw_polygon_outline(points, color, 1)
            elif kind == "fill_circle":
                x, y = points[0]
                arcade.draw_circle_filled(x, y, radius, color)
            elif kind == "stroke_circle":
                x, y = points[0]
                arcade.draw_circle_outline(x, y, radius, color, 1)


class ArcadeScheduler:
    """Session task scheduling on arcade's clock"""

    def schedule_interval(self, callback, interval: float):
        arcade.schedule(callback, interval)

    def unschedule(self, callback):
        arcade.unschedule(callback)


class AsteroidsWindow(arcade.Window):
    """Arcade window hosting one GameSession at a time"""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        title: str = "Asteroids",
        autostart: bool = True,
        rng=random,
        verbose: int = 0,
    ):
        self.game_config = config or GameConfig()
        super().__init__(self.game_config.width, self.game_config.height, title)
        self.rng = rng
        self.verbose = verbose

        self.game_surface = ArcadeSurface(self.game_config.width, self.game_config.height)
        self.scheduler = ArcadeScheduler()
        self.session: Optional[GameSession] = None
        self.message: Optional[str] = None
        # Only sessions built here can be restarted with R
        self._owns_session = False

        self.TEXT_C = (255, 255, 255)

        if autostart:
            self.start_session()

    def start_session(self) -> GameSession:
        """Build and start a fresh session, replacing any finished one"""
        if self.session is not None:
            self.session.stop()
        self.message = None
        self.session = GameSession(
            config=self.game_config,
            surface=self.game_surface,
            scheduler=self.scheduler,
            rng=self.rng,
            verbose=self.verbose,
        )
        self.session.on_game_over(self._on_game_over)
        self.session.start()
        self._owns_session = True
        return self.session

    def attach(self, session: GameSession):
        """Display a session driven from elsewhere (e.g. the Gym env)"""
        self.session = session
        self.message = None
        self._owns_session = False
        session.on_game_over(self._on_game_over)

    def _on_game_over(self, session: GameSession):
        self.message = "Game Over!"

    def on_draw(self):
        self.clear()
        self.game_surface.replay()

        if self.message:
            cx, cy = self.width / 2, self.height / 2
            arcade.draw_text(self.message, cx, cy + 20, self.TEXT_C, 32, anchor_x="center")
            if self._owns_session:
                arcade.draw_text("Press R to restart", cx, cy - 20, self.TEXT_C, 16, anchor_x="center")

    def on_key_press(self, symbol: int, modifiers: int):
        if (
            symbol == RESTART_KEY
            and self._owns_session
            and self.session is not None
            and not self.session.running
        ):
            if self.verbose > 0:
                print("[AsteroidsWindow] Restarting")
            self.start_session()
            return
        action = KEY_BINDINGS.get(symbol)
        if action is not None and self.session is not None:
            self.session.handle_input(action, True)

    def on_key_release(self, symbol: int, modifiers: int):
        action = KEY_BINDINGS.get(symbol)
        if action is not None and self.session is not None:
            self.session.handle_input(action, False)

    def on_close(self):
        if self.session is not None:
            self.session.stop()
        super().on_close()


def main():
    parser = argparse.ArgumentParser(description="Play Asteroids")
    parser.add_argument("--width", type=int, default=800, help="Screen width (default: 800)")
    parser.add_argument("--height", type=int, default=600, help="Screen height (default: 600)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for asteroid spawns")
    parser.add_argument("--verbose", type=int, default=1, help="Print session diagnostics (default: 1)")
    args = parser.parse_args()

    seed_everything(args.seed)
    AsteroidsWindow(GameConfig(width=args.width, height=args.height), verbose=args.verbose)
    arcade.run()


if __name__ == "__main__":
    main()
