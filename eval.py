#!/usr/bin/env python3
"""
Evaluate the rule-chain player.

Usage:
    python eval.py                     # Matches + exhaustive oracle check
    python eval.py --games 1000 --tremble 0.2
    python eval.py --skip-exhaustive   # Matches only
"""

import sys
import json
import argparse
from dataclasses import asdict
from pathlib import Path

from tqdm.auto import tqdm

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictac import (
    EvalConfig,
    eval_vs_random,
    eval_vs_minimax,
    eval_oracle_agreement_all_states,
    eval_symmetry_consistency,
)


def main():
    parser = argparse.ArgumentParser(description="Evaluate TicTacToe rule chain")
    parser.add_argument("--games", type=int, default=200, help="Number of games per opponent")
    parser.add_argument("--tremble", type=float, default=0.0, help="Slip probability (0 = formidable)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--minimax-first", action="store_true",
                        help="Minimax opponent always plays its first optimal move")
    parser.add_argument("--skip-exhaustive", action="store_true", help="Skip all-states checks")
    parser.add_argument("--run-name", type=str, default="eval_run", help="Run name for saving")
    parser.add_argument("--save-dir", type=str, default="runs", help="Save directory")
    parser.add_argument("--no-progress", action="store_true", help="Hide progress bars")

    args = parser.parse_args()

    config = EvalConfig(
        seed=args.seed,
        games=args.games,
        tremble=args.tremble,
        minimax_random=not args.minimax_first,
        progress=not args.no_progress,
        save_dir=args.save_dir,
        run_name=args.run_name,
    )

    run_dir = Path(config.save_dir) / config.run_name
    run_dir.mkdir(parents=True, exist_ok=True)
    with open(run_dir / "config.json", "w") as f:
        json.dump(asdict(config), f, indent=2)

    results = {}

    print("\n=== Matches ===")
    print(f"\nvs Random ({config.games} games)...")
    r = eval_vs_random(config)
    tqdm.write(f"  Wins:   {r['rules_w']:.2%}")
    tqdm.write(f"  Draws:  {r['rules_d']:.2%}")
    tqdm.write(f"  Losses: {r['rules_l']:.2%}")
    results["vs_random"] = r

    print(f"\nvs Minimax ({config.games} games)...")
    m = eval_vs_minimax(config)
    tqdm.write(f"  Wins:   {m['rules_w']:.2%}")
    tqdm.write(f"  Draws:  {m['rules_d']:.2%}")
    tqdm.write(f"  Losses: {m['rules_l']:.2%}")
    results["vs_minimax"] = m

    if not args.skip_exhaustive:
        print("\n=== Exhaustive checks ===")
        print("\nOracle agreement (all states)...")
        oa = eval_oracle_agreement_all_states(progress=config.progress)
        tqdm.write(f"  States:        {oa['oracle_n_states']}")
        tqdm.write(f"  Agreement:     {oa['oracle_agreement']:.2%}")
        for rule_name, count in sorted(oa["oracle_disagreements_by_rule"].items()):
            tqdm.write(f"  Off by {rule_name}: {count}")
        for ex in oa["_examples"][:3]:
            tqdm.write(f"  e.g. {ex['board']} ({ex['turn']}) {ex['rule']} -> {ex['suboptimal']}")
        results["oracle"] = {k: v for k, v in oa.items() if not k.startswith("_")}
        results["oracle_examples"] = oa["_examples"]

        print("\nSymmetry consistency (all states)...")
        sc = eval_symmetry_consistency(progress=config.progress)
        tqdm.write(f"  States:  {sc['symmetry_n_states']}")
        tqdm.write(f"  Broken:  {sc['symmetry_broken']}")
        results["symmetry"] = sc

    with open(run_dir / "results.json", "w") as f:
        json.dump(results, f, indent=2)

    print(f"\n✓ Results saved to {run_dir}")


if __name__ == "__main__":
    main()
