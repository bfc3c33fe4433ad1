"""
AsteroidsEnv - the asteroid game as a Gymnasium environment
-----------------------------------------------------------
- Headless GameSession on a manual clock (one step = one frame)
- Spawner keeps its wall-clock period in simulated seconds
- Vector observation: ship state + top-K nearest asteroids
- MultiDiscrete action space: [thrust(2), rotate(3), fire(2)]
- Episode terminates on game over, truncates at max_steps

Quick test:
    python -m game.asteroids.asteroids_env
"""

from __future__ import annotations

import math
import time
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .controls import Action
from .scheduler import ManualScheduler
from .session import GameConfig, GameSession, GameState
from .surface import NullSurface
from .utils import clamp, seed_everything


class AsteroidsEnv(gym.Env):
    """Survive the asteroid field; shooting rocks is rewarded"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_asteroids: int = 5,
        spawn_interval: float = 3.0,  # seconds
        r_survive: float = 0.01,
        r_destroy: float = 1.0,
        r_shot: float = 0.01,
        r_death: float = 5.0,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        self.config = GameConfig(width=width, height=height, spawn_interval=spawn_interval)
        self.max_steps = max_steps
        self.k_asteroids = k_asteroids

        self.r_survive = r_survive
        self.r_destroy = r_destroy
        self.r_shot = r_shot
        self.r_death = r_death

        # Action space:
        # thrust: 0 off, 1 on
        # rotate: 0 none, 1 left, 2 right
        # fire: 0/1, fires on the 0 -> 1 edge only
        self.action_space = spaces.MultiDiscrete([2, 3, 2])

        # Observation space (vector)
        # Ship: pos(2) vel(2) heading cos/sin(2)
        # Each asteroid: rel pos(2) radius(1) vel(2)
        obs_dim = 2 + 2 + 2 + (self.k_asteroids * 5)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None

        self.session: GameSession = None  # type: ignore
        self.scheduler: ManualScheduler = None  # type: ignore
        self._step_count = 0
        self._fire_held = False

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        if self.session is not None:
            self.session.stop()

        self._step_count = 0
        self._fire_held = False

        surface = NullSurface()
        if self.render_mode == "human":
            surface = self._get_window().game_surface

        self.scheduler = ManualScheduler()
        self.session = GameSession(config=self.config, surface=surface, scheduler=self.scheduler)
        if self._window is not None:
            self._window.attach(self.session)
        self.session.start()

        return self._get_obs(), self._get_info()

    def step(self, action):
        thrust, rotate, fire = int(action[0]), int(action[1]), int(action[2])
        before = dict(self.session.stats)

        self._apply_action(thrust, rotate, fire)

        # Exactly one frame task fires per step
        self.scheduler.advance(self.config.frame_interval)

        terminated = self.session.state is GameState.GAME_OVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        reward = self._compute_reward(before, terminated)

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def _apply_action(self, thrust: int, rotate: int, fire: int):
        session = self.session
        session.handle_input(Action.FORWARD, thrust == 1)
        session.handle_input(Action.ROTATE_LEFT, rotate == 1)
        session.handle_input(Action.ROTATE_RIGHT, rotate == 2)

        pressed = fire == 1
        if pressed and not self._fire_held:
            session.handle_input(Action.FIRE, True)
        self._fire_held = pressed

    def _compute_reward(self, before: Dict[str, int], terminated: bool) -> float:
        stats = self.session.stats
        destroyed = stats["asteroids_destroyed"] - before["asteroids_destroyed"]
        shots = stats["projectiles_fired"] - before["projectiles_fired"]

        reward = self.r_survive
        reward += self.r_destroy * destroyed
        reward -= self.r_shot * shots
        if terminated:
            reward -= self.r_death
        return float(reward)

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        player = self.session.player
        px, py = player.position.x, player.position.y

        obs_parts = [
            clamp(px / cfg.width * 2 - 1, -1, 1),
            clamp(py / cfg.height * 2 - 1, -1, 1),
            clamp(player.velocity.x / cfg.speed, -1, 1),
            clamp(player.velocity.y / cfg.speed, -1, 1),
            math.cos(player.rotation),
            math.sin(player.rotation),
        ]

        asteroids_sorted = sorted(
            self.session.asteroids,
            key=lambda a: (a.position.x - px) ** 2 + (a.position.y - py) ** 2
        )
        for i in range(self.k_asteroids):
            if i < len(asteroids_sorted):
                a = asteroids_sorted[i]
                obs_parts += [
                    clamp((a.position.x - px) / cfg.width, -1, 1),
                    clamp((a.position.y - py) / cfg.height, -1, 1),
                    clamp(a.radius / cfg.asteroid_max_radius, 0, 1),
                    clamp(a.velocity.x / cfg.asteroid_speed, -1, 1),
                    clamp(a.velocity.y / cfg.asteroid_speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        stats = self.session.stats
        return {
            "game_over": self.session.state is GameState.GAME_OVER,
            "num_asteroids": len(self.session.asteroids),
            "num_projectiles": len(self.session.projectiles),
            "asteroids_spawned": self.session.spawner.spawned,
            "asteroids_destroyed": stats["asteroids_destroyed"],
            "projectiles_fired": stats["projectiles_fired"],
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def _get_window(self):
        if self._window is None:
            # Imported lazily so headless use never opens a display
            from .window import AsteroidsWindow
            self._window = AsteroidsWindow(self.config, title="AsteroidsEnv - Arcade", autostart=False)
        return self._window

    def render(self):
        if self.render_mode is None:
            return None

        window = self._get_window()
        window.dispatch_events()
        window.on_draw()
        window.flip()
        return None

    def close(self):
        if self.session is not None:
            self.session.stop()
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42):
    """Run a random-policy episode and print its return"""
    env = AsteroidsEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to exit early.")

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(1 / env.metadata["render_fps"])

    print(f"Random episode return: {total:.2f} "
          f"({info['step']} steps, {info['asteroids_destroyed']} asteroids destroyed)")

    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
