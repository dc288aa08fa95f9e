"""
Evaluation functions.

Tests rule-chain strength against random and minimax opponents, measures
agreement with the minimax oracle on all legal states, and checks that the
rules treat symmetric positions alike.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
from tqdm.auto import tqdm, trange

from .board import Board, Coordinate, Mark
from .minimax import iter_all_legal_nonterminal_states, minimax_value_and_moves
from .players import ComputerPlayer, FormidableComputer, Player, RandomPlayer, TremblingComputer
from .referee import Referee, run_match
from .strategy import explain_moves
from .symmetries import apply_symmetry_board, apply_symmetry_coord


@dataclass
class EvalConfig:
    """Evaluation configuration."""

    # Random seed
    seed: int = 0

    # Games per opponent
    games: int = 200

    # Rule-chain player's slip probability (0 = formidable)
    tremble: float = 0.0

    # Opponent samples among all optimal moves instead of the first one
    minimax_random: bool = True

    # Progress bars
    progress: bool = True

    # Paths
    save_dir: str = "runs"
    run_name: str = "eval_run"


class MinimaxPlayer(Player):
    """Perfect opponent backed by the exact solver."""

    def __init__(
        self,
        name: str = "Minimax",
        mark: str = "M",
        randomize: bool = True,
        rng: Optional[np.random.Generator] = None,
    ):
        super().__init__(name, mark)
        self.randomize = randomize
        self.rng = rng if rng is not None else np.random.default_rng()

    def ask_for_move(self, board: Board, turn: Mark) -> Coordinate:
        _, best = minimax_value_and_moves(board, turn)
        if self.randomize:
            return best[int(self.rng.integers(len(best)))]
        return best[0]


def make_rule_player(config: EvalConfig, rng: np.random.Generator) -> ComputerPlayer:
    """The rule-chain player under evaluation."""
    if config.tremble > 0:
        return TremblingComputer("Rules", "R", tremble=config.tremble, rng=rng)
    return FormidableComputer("Rules", "R", rng=rng)


def _play_series(
    config: EvalConfig,
    opponent_player: Player,
    rng: np.random.Generator,
    desc: str,
) -> Dict[str, float]:
    """Alternate sides for config.games matches and tally from the rules' side."""
    rules_player = make_rule_player(config, rng)
    referee = Referee()
    wins = draws = losses = 0

    for g in trange(config.games, desc=desc, disable=not config.progress, leave=False):
        rules_side = Mark.P1 if g % 2 == 0 else Mark.P2
        other_side = Mark.P2 if rules_side is Mark.P1 else Mark.P1
        result = run_match(referee, {rules_side: rules_player, other_side: opponent_player})

        winner = result.outcome.winner
        if winner is None:
            draws += 1
        elif winner is rules_side:
            wins += 1
        else:
            losses += 1

    total = wins + draws + losses
    return {
        "games": total,
        "rules_w": wins / total,
        "rules_d": draws / total,
        "rules_l": losses / total,
    }


def eval_vs_random(config: EvalConfig) -> Dict[str, float]:
    """
    Evaluate the rule chain vs a uniformly random opponent.

    Returns:
        Dict with 'games', 'rules_w', 'rules_d', 'rules_l'
    """
    rng = np.random.default_rng(config.seed)
    return _play_series(config, RandomPlayer(rng=rng), rng, "vs random")


def eval_vs_minimax(config: EvalConfig) -> Dict[str, float]:
    """
    Evaluate the rule chain vs the minimax oracle.

    A perfect player can't be beaten, so anything other than all draws
    (for a formidable computer) shows up as 'rules_l'.
    """
    rng = np.random.default_rng(config.seed + 1)
    opponent_player = MinimaxPlayer(randomize=config.minimax_random, rng=rng)
    return _play_series(config, opponent_player, rng, "vs minimax")


def eval_oracle_agreement_all_states(progress: bool = True) -> Dict[str, object]:
    """
    Compare the rule chain's first candidate list with minimax on every
    legal non-terminal state.

    A state agrees when every top-priority move is minimax-optimal.

    Returns:
        Dict with counts, the agreement rate, per-rule disagreement counts and
        up to 10 example disagreements (prefixed with '_').
    """
    states = list(iter_all_legal_nonterminal_states())
    n = len(states)
    agree = 0
    by_rule: Counter = Counter()
    fired: Counter = Counter()
    examples = []

    for board, turn in tqdm(states, desc="oracle agreement", disable=not progress, leave=False):
        rule_name, moves = explain_moves(board, turn)[0]
        fired[rule_name] += 1
        _, optimal = minimax_value_and_moves(board, turn)
        bad = [m for m in moves if m not in optimal]
        if bad:
            by_rule[rule_name] += 1
            if len(examples) < 10:
                examples.append({
                    "board": str(board).replace("\n", "|"),
                    "turn": turn.name,
                    "rule": rule_name,
                    "suboptimal": bad,
                    "optimal": optimal,
                })
        else:
            agree += 1

    return {
        "oracle_n_states": n,
        "oracle_agreement": agree / n,
        "oracle_disagreements": n - agree,
        "oracle_disagreements_by_rule": dict(by_rule),
        "rule_fired_counts": dict(fired),
        "_examples": examples,
    }


def _first_moves(board: Board, turn: Mark) -> Tuple[str, frozenset]:
    rule_name, moves = explain_moves(board, turn)[0]
    return rule_name, frozenset(moves)


def eval_symmetry_consistency(progress: bool = True) -> Dict[str, object]:
    """
    Check that rotating or reflecting a position rotates or reflects the
    rules' answer the same way.

    Returns:
        Dict with the number of states checked and the number that break
        symmetry under at least one transform.
    """
    states = list(iter_all_legal_nonterminal_states())
    broken = 0

    for board, turn in tqdm(states, desc="symmetry", disable=not progress, leave=False):
        rule_name, moves = _first_moves(board, turn)
        for k in range(1, 8):
            expected = frozenset(apply_symmetry_coord(m, k) for m in moves)
            got_rule, got = _first_moves(apply_symmetry_board(board, k), turn)
            if got_rule != rule_name or got != expected:
                broken += 1
                break

    return {
        "symmetry_n_states": len(states),
        "symmetry_broken": broken,
    }
