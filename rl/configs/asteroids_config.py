"""
Configuration for the asteroids environment and baseline evaluation
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # set to "human" to watch
    "width": 800,
    "height": 600,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_asteroids": 5,
    "spawn_interval": 3.0,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "r_survive": 0.01,   # Per frame alive
    "r_destroy": 1.0,    # Per asteroid shot down
    "r_shot": 0.01,      # Per projectile fired (discourage spamming)
    "r_death": 5.0,      # Collision with an asteroid
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
    "policies": ["random", "turret"],
    "turret_fire_angle": 0.1,  # radians off-target still counted as aligned
}
