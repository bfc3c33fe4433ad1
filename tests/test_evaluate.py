import math

import numpy as np
import pytest

from game.asteroids import AsteroidsEnv
from game.asteroids.entities import Asteroid, Vector2
from rl.configs.asteroids_config import EVAL_CONFIG
from rl.evaluate import POLICIES, evaluate_policy, turret_policy


def test_unknown_policy():
    with pytest.raises(ValueError):
        evaluate_policy(policy="genius", n_episodes=1)


def test_turret_idles_without_targets():
    env = AsteroidsEnv()
    obs, _ = env.reset(seed=0)
    assert list(turret_policy(env, obs)) == [0, 0, 0]
    env.close()


def test_turret_turns_toward_target():
    env = AsteroidsEnv()
    obs, _ = env.reset(seed=0)
    # Straight below the ship (y grows downward): turn right
    env.session.asteroids.append(
        Asteroid(position=Vector2(400, 550), velocity=Vector2(0, -1), radius=20)
    )
    action = turret_policy(env, obs)
    assert action[1] == 2
    assert action[2] == 0

    env.session.player.rotation = math.pi / 2
    action = turret_policy(env, obs)
    assert action[1] == 0
    assert action[2] == 1
    env.close()


def test_policies_return_valid_actions():
    env = AsteroidsEnv()
    obs, _ = env.reset(seed=0)
    env.action_space.seed(0)
    for act in POLICIES.values():
        assert env.action_space.contains(np.asarray(act(env, obs), dtype=np.int64))
    env.close()


def test_cli_policy_choices_match_implemented_policies():
    assert set(EVAL_CONFIG["policies"]) == set(POLICIES)
