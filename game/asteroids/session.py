"""
GameSession - one run of the asteroid game, from start() to game over
---------------------------------------------------------------------
- Owns every piece of mutable game state (player, projectiles,
  asteroids, held keys, run state); nothing lives at module level
- Two repeating tasks on a scheduler: the frame step and the spawner
- Game over cancels both tasks and notifies the host exactly once

The session never draws or waits on its own: it is handed a drawing
surface and a scheduler (arcade's clock in the window, a manual clock
when headless).
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from .controls import Action, InputState
from .entities import Asteroid, Player, Projectile, Vector2
from .scheduler import ManualScheduler
from .spawner import AsteroidSpawner
from .surface import NullSurface
from .utils import circle_intersects_triangle, circles_intersect


@dataclass
class GameConfig:
    """Tunable constants for a session"""
    width: int = 800
    height: int = 600
    speed: float = 3.0  # thrust speed, px/frame
    friction: float = 0.96  # velocity multiplier per frame without thrust
    rotation_speed: float = 0.06  # rad/frame
    projectile_speed: float = 5.0
    projectile_offset: float = 30.0  # spawn distance ahead of the ship
    projectile_radius: float = 5.0
    spawn_interval: float = 3.0  # seconds
    asteroid_min_radius: float = 10.0
    asteroid_max_radius: float = 60.0
    asteroid_speed: float = 1.0
    frame_interval: float = 1 / 60
    background: tuple = (0, 0, 0)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Screen size must be positive, got {self.width}x{self.height}")
        if not 0.0 <= self.friction <= 1.0:
            raise ValueError(f"friction must be in [0, 1], got {self.friction}")
        if self.spawn_interval <= 0 or self.frame_interval <= 0:
            raise ValueError("spawn_interval and frame_interval must be positive")


class GameState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameSession:
    """Simulation loop for a single game"""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        surface=None,
        scheduler=None,
        rng=random,
        verbose: int = 0,
    ):
        self.config = config or GameConfig()
        self.surface = surface if surface is not None else NullSurface()
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.rng = rng
        self.verbose = verbose

        # World state, built in start()
        self.player: Player = None  # type: ignore
        self.projectiles: List[Projectile] = []
        self.asteroids: List[Asteroid] = []
        self.input = InputState()
        self.state = GameState.RUNNING
        self.spawner: Optional[AsteroidSpawner] = None

        self.stats: Dict[str, int] = {
            "frames": 0,
            "projectiles_fired": 0,
            "asteroids_destroyed": 0,
        }

        self._started = False
        self._game_over_handlers: List[Callable[["GameSession"], None]] = []

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def start(self):
        if self._started:
            raise RuntimeError("GameSession.start() called twice; build a new session to restart")
        self._started = True

        cfg = self.config
        self.player = Player(position=Vector2(cfg.width / 2, cfg.height / 2))
        self.projectiles = []
        self.asteroids = []
        self.input.reset()
        self.state = GameState.RUNNING

        self.spawner = AsteroidSpawner(
            cfg.width,
            cfg.height,
            self._add_asteroid,
            rng=self.rng,
            interval=cfg.spawn_interval,
            min_radius=cfg.asteroid_min_radius,
            max_radius=cfg.asteroid_max_radius,
            speed=cfg.asteroid_speed,
        )
        self.scheduler.schedule_interval(self._on_frame, cfg.frame_interval)
        self.spawner.start(self.scheduler)

        if self.verbose > 0:
            print(f"[GameSession] Started on {cfg.width}x{cfg.height}")

    def stop(self):
        """Cancel the frame and spawner tasks. Safe to call repeatedly."""
        self.scheduler.unschedule(self._on_frame)
        if self.spawner is not None:
            self.spawner.stop(self.scheduler)

    def on_game_over(self, callback: Callable[["GameSession"], None]):
        self._game_over_handlers.append(callback)

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    def _on_frame(self, delta_time: float):
        # Motion is per frame; delta_time is ignored
        self.frame()

    def _add_asteroid(self, asteroid: Asteroid):
        self.asteroids.append(asteroid)

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def frame(self):
        """Advance the world by one frame; no-op before start() or after game over"""
        if not self._started or not self.running:
            return

        cfg = self.config
        self.surface.clear(cfg.background)

        self.player.update(self.surface)
        self._update_projectiles()
        self._update_asteroids()
        self._apply_input()

        self.stats["frames"] += 1

    def _update_projectiles(self):
        cfg = self.config
        remaining = []
        for p in self.projectiles:
            p.update(self.surface)
            if not p.is_off_screen(cfg.width, cfg.height):
                remaining.append(p)
        self.projectiles = remaining

    def _update_asteroids(self):
        cfg = self.config
        remaining = []
        for a in self.asteroids:
            a.update(self.surface)

            if circle_intersects_triangle(a, self.player.get_vertices()):
                self._game_over()

            keep = not a.is_off_screen(cfg.width, cfg.height)

            # Every overlapping projectile is spent on this asteroid
            survivors = []
            hit = False
            for p in self.projectiles:
                if circles_intersect(a, p):
                    hit = True
                else:
                    survivors.append(p)
            self.projectiles = survivors

            if hit:
                self.stats["asteroids_destroyed"] += 1
            elif keep:
                remaining.append(a)

        self.asteroids = remaining

    def _apply_input(self):
        cfg = self.config
        player = self.player

        if self.input.forward:
            player.velocity.x = math.cos(player.rotation) * cfg.speed
            player.velocity.y = math.sin(player.rotation) * cfg.speed
        else:
            player.velocity.x *= cfg.friction
            player.velocity.y *= cfg.friction

        if self.input.rotate_right:
            player.rotation += cfg.rotation_speed
        elif self.input.rotate_left:
            player.rotation -= cfg.rotation_speed

    def fire(self) -> Optional[Projectile]:
        """Launch one projectile from the ship's nose"""
        if not self.running or self.player is None:
            return None

        cfg = self.config
        player = self.player
        dx = math.cos(player.rotation)
        dy = math.sin(player.rotation)

        projectile = Projectile(
            position=Vector2(
                player.position.x + dx * cfg.projectile_offset,
                player.position.y + dy * cfg.projectile_offset,
            ),
            velocity=Vector2(dx * cfg.projectile_speed, dy * cfg.projectile_speed),
            radius=cfg.projectile_radius,
        )
        self.projectiles.append(projectile)
        self.stats["projectiles_fired"] += 1
        return projectile

    def handle_input(self, action: Action, pressed: bool):
        """Apply one key event; FIRE acts only on press"""
        if action is Action.FIRE:
            if pressed:
                self.fire()
            return
        self.input.set(action, pressed)

    def _game_over(self):
        if not self.running:
            return
        self.state = GameState.GAME_OVER
        self.stop()

        if self.verbose > 0:
            print(f"[GameSession] Game over after {self.stats['frames']} frames, "
                  f"{self.stats['asteroids_destroyed']} asteroids destroyed")

        for handler in self._game_over_handlers:
            handler(self)
