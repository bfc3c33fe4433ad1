"""
Evaluation script for scripted baseline policies on the asteroids environment
"""

import argparse
import math
import time
from typing import Optional

import numpy as np

from game.asteroids import AsteroidsEnv
from rl.configs.asteroids_config import ENV_CONFIG, REWARD_CONFIG, EVAL_CONFIG


def random_policy(env: AsteroidsEnv, obs: np.ndarray) -> np.ndarray:
    return env.action_space.sample()


def turret_policy(env: AsteroidsEnv, obs: np.ndarray) -> np.ndarray:
    """
    Stay put, turn toward the nearest asteroid and fire once aligned.

    Reads the session directly rather than the normalized observation so
    the aim uses true screen angles.
    """
    session = env.session
    player = session.player
    if not session.asteroids:
        return np.array([0, 0, 0], dtype=np.int64)

    target = min(
        session.asteroids,
        key=lambda a: (a.position.x - player.position.x) ** 2 + (a.position.y - player.position.y) ** 2
    )
    bearing = math.atan2(target.position.y - player.position.y, target.position.x - player.position.x)
    # Signed angle from heading to target, wrapped to [-pi, pi)
    diff = (bearing - player.rotation + math.pi) % (2 * math.pi) - math.pi

    threshold = EVAL_CONFIG["turret_fire_angle"]
    if abs(diff) <= threshold:
        rotate = 0
    else:
        rotate = 2 if diff > 0 else 1

    # Alternate fire so every aligned step pair produces a fresh press
    fire = 1 if abs(diff) <= threshold and env._step_count % 2 == 0 else 0
    return np.array([0, rotate, fire], dtype=np.int64)


POLICIES = {
    "random": random_policy,
    "turret": turret_policy,
}


def evaluate_policy(
    policy: str = "random",
    n_episodes: int = 10,
    render: bool = False,
    seed: Optional[int] = None,
):
    """
    Evaluate a scripted policy

    Args:
        policy: Policy name ('random' or 'turret')
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Random seed for evaluation
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    act = POLICIES[policy]

    render_mode = "human" if render else None
    env = AsteroidsEnv(render_mode=render_mode, **ENV_CONFIG, **REWARD_CONFIG)

    episode_rewards = []
    episode_lengths = []
    episode_destroyed = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)
        env.action_space.seed(seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = act(env, obs)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

            if render:
                time.sleep(1 / env.metadata["render_fps"])

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_destroyed.append(info["asteroids_destroyed"])

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Length = {steps}, "
              f"Destroyed = {info['asteroids_destroyed']}")

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_length = np.mean(episode_lengths)
    mean_destroyed = np.mean(episode_destroyed)

    print("\n" + "="*50)
    print(f"Evaluation Results: {policy} ({n_episodes} episodes)")
    print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Episode Length: {mean_length:.1f}")
    print(f"Mean Asteroids Destroyed: {mean_destroyed:.2f}")
    print("="*50)

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "mean_destroyed": mean_destroyed,
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate scripted asteroids policies")
    parser.add_argument(
        "--policy",
        type=str,
        default="turret",
        choices=EVAL_CONFIG["policies"],
        help="Policy to evaluate (default: turret)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help=f"Number of evaluation episodes (default: {EVAL_CONFIG['n_episodes']})",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Watch the episodes in a window",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help=f"Random seed (default: {EVAL_CONFIG['seed']})",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate the random policy for comparison",
    )

    args = parser.parse_args()

    results = evaluate_policy(
        policy=args.policy,
        n_episodes=args.n_episodes,
        render=args.render,
        seed=args.seed,
    )

    if args.compare_random and args.policy != "random":
        print("\n")
        random_results = evaluate_policy(
            policy="random",
            n_episodes=args.n_episodes,
            seed=args.seed,
        )
        print(f"\nImprovement over random: "
              f"{results['mean_reward'] - random_results['mean_reward']:.2f}")


if __name__ == "__main__":
    main()
