#!/usr/bin/env python3
"""
Analyze a seed: check that its stream is reproducible, compare weighted sampling
frequencies against the weights, and compare the running mean against numpy.
"""
import argparse
import sys
from pathlib import Path

import numpy as np

# Add the project root to Python path
sys.path.append(str(Path(__file__).parent))

from apputils.domain.arc4 import ARC4Generator
from apputils.domain.sampling import weighted_random_elements
from apputils.domain.stats import RunningMean
from apputils.domain.types import DEFAULT_DROP, RNGConfig
from apputils.utils.rng import SeededRNG

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def check_determinism(config: RNGConfig, draws: int, repeats: int) -> bool:
    """Re-seed `repeats` times and compare full-range signed 64-bit draws."""
    baseline_rng = ARC4Generator(config.seed, config.drop)
    baseline = [baseline_rng.uniform_int(INT64_MIN, INT64_MAX, inclusive=True) for _ in range(draws)]

    print(f"First draws for seed {config.seed}:")
    for value in baseline[:5]:
        print(f"   {value}")

    for attempt in range(repeats):
        rng = ARC4Generator(config.seed, config.drop)
        values = [rng.uniform_int(INT64_MIN, INT64_MAX, inclusive=True) for _ in range(draws)]
        if values != baseline:
            print(f"❌ Repeat {attempt + 1} diverged from the baseline")
            return False

    print(f"✅ {repeats} repeats reproduced {draws} draws exactly")
    return True


def analyze_weights(config: RNGConfig, weights: list[int], draws: int):
    """Compare empirical selection frequencies with the weights."""
    rng = SeededRNG.from_config(config)
    indices = list(range(len(weights)))

    picks = weighted_random_elements(rng, indices, lambda index: weights[index], draws)
    if picks is None:
        print("❌ Nothing can be drawn (no elements or all weights are zero)")
        return

    counts = np.bincount(np.asarray(picks, dtype=np.int64), minlength=len(weights))
    expected = np.asarray(weights, dtype=np.float64) / sum(weights)
    observed = counts / draws

    print(f"Weighted sampling over {draws} draws:")
    print(f"   {'index':>5} {'weight':>7} {'expected':>9} {'observed':>9}")
    for index, weight in enumerate(weights):
        print(f"   {index:>5} {weight:>7} {expected[index]:>9.4f} {observed[index]:>9.4f}")

    worst = float(np.max(np.abs(observed - expected)))
    print(f"   Largest deviation: {worst:.4f}")


def analyze_running_mean(config: RNGConfig, draws: int):
    """Fold uniform samples into a running mean and compare with numpy."""
    rng = SeededRNG.from_config(config)
    samples = rng.random_array(draws)

    running = RunningMean()
    running.extend(samples)
    direct = float(samples.mean())

    print(f"Running mean over {draws} samples: {running.value:.6f}")
    print(f"Direct mean:                      {direct:.6f}")
    print(f"Difference:                       {abs(running.value - direct):.2e}")


def main():
    parser = argparse.ArgumentParser(description="Analyze a seeded ARC4 stream")
    parser.add_argument("--seed", type=int, default=9281, help="Unsigned 64-bit seed")
    parser.add_argument("--drop", type=int, default=DEFAULT_DROP, help="Keystream bytes to discard")
    parser.add_argument("--weights", type=int, nargs="+", default=[1, 3], help="Element weights")
    parser.add_argument("--draws", type=int, default=100_000, help="Number of weighted draws")
    parser.add_argument("--repeats", type=int, default=5, help="Re-seeding repeats for the determinism check")

    args = parser.parse_args()
    if args.draws <= 0:
        parser.error(f"--draws must be positive, got {args.draws}")
    if args.repeats < 1:
        parser.error(f"--repeats must be at least 1, got {args.repeats}")

    try:
        config = RNGConfig(seed=args.seed, drop=args.drop)

        print("🎲 Seeded ARC4 stream analysis")
        print("=" * 50)

        if not check_determinism(config, draws=10, repeats=args.repeats):
            return 1
        print()

        analyze_weights(config, args.weights, args.draws)
        print()

        analyze_running_mean(config, min(args.draws, 10_000))
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
