# experiments/sanity_rollout.py
"""
Sanity rollouts for RunnerEnv:
- Runs RANDOM and/or JUMP-HEURISTIC policies over a list of episodes
- Appends one CSV row per episode for notebook analysis

Usage examples (from repo root):
  # Both policies, 20 episodes each, frame_skip=4:
  python -m experiments.sanity_rollout --policies both

  # Only the heuristic, 5 episodes, fewer steps:
  python -m experiments.sanity_rollout --policies heuristic --episodes 5 --steps 600
"""

from __future__ import annotations
import argparse
import csv
import logging
from pathlib import Path
from typing import List, Tuple, Optional

import numpy as np

from src.env.runner_env import RunnerEnv


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int, jump_prob: float = 0.1):
    rng = np.random.default_rng(action_seed)
    def act(_obs: np.ndarray) -> int:
        return int(rng.random() < jump_prob)
    return act

def jump_heuristic_policy_init():
    """
    Very small rule: jump when grounded and the near probe (+120)
    shows a gap or a bump.
    """
    def act(obs: np.ndarray) -> int:
        on_ground = obs[2] > 0.5
        gap_near, bump_near = obs[4], obs[5]
        danger = (gap_near >= 1.0) or (bump_near > 0.0)
        return 1 if (on_ground and danger) else 0
    return act


# ------------------------ Rollout core ------------------------

def write_episode_row(csv_path: Path, header: List[str], row: List):
    exists = csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(header)
        w.writerow(row)

def run_one_episode(policy_name: str, episode: int, frame_skip: int,
                    steps_limit: int) -> Tuple[int, float, float, int, bool, bool, Optional[str]]:
    """
    Returns: (ep_len, ret_sum, distance, coins, terminated, truncated, death_cause)
    """
    env = RunnerEnv(frame_skip=frame_skip)
    if policy_name == "random":
        policy = random_policy_init(10_000 + episode)
    elif policy_name == "heuristic":
        policy = jump_heuristic_policy_init()
    else:
        raise ValueError(f"Unknown policy {policy_name!r}")

    ret_sum = 0.0
    ep_len = 0
    term = trunc = False
    info = {}
    try:
        obs, info = env.reset()
        # The world is frozen until the first jump
        obs, r, term, trunc, info = env.step(1)
        ret_sum += r
        ep_len += 1
        for _ in range(steps_limit - 1):
            if term or trunc:
                break
            obs, r, term, trunc, info = env.step(policy(obs))
            ret_sum += float(r)
            ep_len += 1
    finally:
        env.close()

    return (ep_len, ret_sum, float(info.get("distance", 0.0)), int(info.get("coins", 0)),
            bool(term), bool(trunc), info.get("death_cause"))


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"])
    ap.add_argument("--episodes", type=int, default=20)
    ap.add_argument("--frame-skip", type=int, default=4,
                    help="Sim ticks per decision step")
    ap.add_argument("--steps", type=int, default=10_000,
                    help="Hard cap on decision steps (env may truncate earlier)")
    ap.add_argument("--out-dir", type=str, default="experiments/runs")
    args = ap.parse_args()
    logging.basicConfig(level=logging.WARNING)

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    episodes_csv = out_dir / "episodes.csv"
    header = [
        "policy_name", "episode", "frame_skip",
        "episode_len_decisions", "return_sum", "distance_m", "coins",
        "terminated", "truncated", "death_cause",
    ]

    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]
    print(f"Running policies={to_run} for {args.episodes} episodes (frame_skip={args.frame_skip})")

    for policy_name in to_run:
        distances = []
        for ep in range(args.episodes):
            ep_len, ret_sum, dist, coins, terminated, truncated, cause = run_one_episode(
                policy_name, ep, args.frame_skip, args.steps)
            distances.append(dist)
            write_episode_row(episodes_csv, header, [
                policy_name, ep, args.frame_skip,
                ep_len, f"{ret_sum:.1f}", f"{dist:.1f}", coins,
                int(terminated), int(truncated), (cause or ""),
            ])
            print(f"[{policy_name}] ep={ep}  len={ep_len}  dist={dist:.1f}  coins={coins}  "
                  f"ret={ret_sum:.1f}  term={terminated} trunc={truncated}  cause={cause}")
        print(f"[{policy_name}] mean distance {np.mean(distances):.1f} m "
              f"(max {np.max(distances):.1f})")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()
