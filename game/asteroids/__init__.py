"""2D Game module - Asteroids arcade game and Gymnasium environment"""

from .session import GameConfig, GameSession, GameState
from .asteroids_env import AsteroidsEnv, run_random_episode

__all__ = ['GameConfig', 'GameSession', 'GameState', 'AsteroidsEnv', 'run_random_episode']
