#!/usr/bin/env python3
"""Replay a list of answers with one guesser and report how it did.

Usage:
    python replay.py                                # Naive on data/answers.txt
    python replay.py --guesser Entropy --verbose    # per-round log lines
    python replay.py --guesser MaxProb --max-guesses 6 --csv out.csv
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
import time
from collections import defaultdict
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from dictionary import Dictionary, load_answers, load_dictionary
from guesser import GameConfig, Guesser
from wordle import MAX_GUESSES, WORD_LENGTH, Wordle

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Result containers
# ------------------------------------------------------------------

@dataclass
class GameResult:
    guesser: str
    answer: str
    rounds: int | None   # None: not solved within the round limit

    @property
    def solved(self) -> bool:
        return self.rounds is not None


def summarize(games: list[GameResult]) -> dict[str, dict[str, Any]]:
    """Aggregate per-guesser stats; round stats cover solved games only."""
    by_guesser: dict[str, list[GameResult]] = defaultdict(list)
    for g in games:
        by_guesser[g.guesser].append(g)

    summaries = {}
    for name, results in by_guesser.items():
        n = len(results)
        rounds = sorted(r.rounds for r in results if r.rounds is not None)
        k = len(rounds)
        if k:
            mean = sum(rounds) / k
            median = rounds[k // 2] if k % 2 == 1 else (
                rounds[k // 2 - 1] + rounds[k // 2]) / 2
        else:
            mean = median = None
        summaries[name] = {
            "name": name,
            "games_played": n,
            "games_solved": k,
            "solve_rate": round(k / n, 4) if n else 0,
            "mean_rounds": round(mean, 3) if mean is not None else None,
            "median_rounds": median,
            "max_rounds": rounds[-1] if rounds else None,
        }
    return summaries


@dataclass
class ReplayResults:
    games: list[GameResult] = field(default_factory=list)

    def ranking(self) -> list[dict[str, Any]]:
        """Per-guesser summaries, best solve rate first, then fewest rounds."""
        return sorted(
            summarize(self.games).values(),
            key=lambda s: (
                -s["solve_rate"],
                s["mean_rounds"] if s["mean_rounds"] is not None else float("inf"),
                s["name"],
            ),
        )

    def to_csv(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["guesser", "answer", "rounds", "solved"])
            for g in self.games:
                writer.writerow([
                    g.guesser, g.answer, "" if g.rounds is None else g.rounds, int(g.solved)
                ])

    def to_json(self, path: str | Path, config: dict[str, Any] | None = None) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "config": config or {},
            "summary": self.ranking(),
            "games": [asdict(g) for g in self.games],
        }
        p.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def print_summary(self) -> None:
        print(f"\n{'Guesser':<25} {'Games':>6} {'Solved':>7} {'Rate':>6} "
              f"{'Mean':>6} {'Median':>7} {'Max':>5}")
        print("-" * 72)
        for s in self.ranking():
            mean = f"{s['mean_rounds']:.2f}" if s["mean_rounds"] is not None else "-"
            median = f"{s['median_rounds']:.1f}" if s["median_rounds"] is not None else "-"
            mx = s["max_rounds"] if s["max_rounds"] is not None else "-"
            print(f"{s['name']:<25} {s['games_played']:>6} {s['games_solved']:>6}  "
                  f"{100 * s['solve_rate']:>5.1f}% {mean:>6} {median:>7} {mx:>5}")
        print()

    def plot_histograms(self, path: str | Path) -> None:
        """Save one rounds-to-solve histogram per guesser."""
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        by_guesser: dict[str, list[int]] = defaultdict(list)
        for g in self.games:
            if g.rounds is not None:
                by_guesser[g.guesser].append(g.rounds)

        names = sorted({g.guesser for g in self.games})
        if not names:
            return

        cols = min(len(names), 4)
        rows = (len(names) + cols - 1) // cols
        fig, axes = plt.subplots(rows, cols, figsize=(5 * cols, 4 * rows), squeeze=False)
        max_rounds = max((r for rs in by_guesser.values() for r in rs), default=1)
        bins = list(range(1, max_rounds + 2))

        for idx, name in enumerate(names):
            ax = axes[idx // cols][idx % cols]
            ax.hist(by_guesser[name], bins=bins, edgecolor="black", align="left")
            ax.set_title(name, fontsize=10)
            ax.set_xlabel("Rounds")
            ax.set_ylabel("Solved games")

        # Hide unused axes
        for idx in range(len(names), rows * cols):
            axes[idx // cols][idx % cols].set_visible(False)

        fig.suptitle("Rounds-to-solve distribution by guesser")
        fig.tight_layout()
        dest = Path(path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(dest, dpi=150)
        plt.close(fig)
        print(f"Histogram saved to {dest}")


# ------------------------------------------------------------------
# Replay
# ------------------------------------------------------------------

def make_config(dictionary: Dictionary, max_guesses: int = MAX_GUESSES) -> GameConfig:
    return GameConfig(
        word_length=WORD_LENGTH,
        vocabulary=tuple(dictionary.words),
        mode=dictionary.mode,
        probabilities=dict(dictionary.probs),
        max_guesses=max_guesses,
    )


def run_replay(
    guesser_cls: type[Guesser],
    answers: list[str],
    dictionary: Dictionary,
    max_guesses: int = MAX_GUESSES,
) -> list[GameResult]:
    """Play every answer with a fresh guesser and engine per game."""
    config = make_config(dictionary, max_guesses)
    results: list[GameResult] = []
    for answer in answers:
        guesser = guesser_cls()
        wordle = Wordle(dictionary.word_set, max_guesses=max_guesses)
        guesser.begin_game(config)
        rounds = wordle.play(answer, guesser)
        guesser.end_game(answer, rounds)
        logger.info("%s: %s %s", guesser.name, answer,
                    f"solved in {rounds}" if rounds is not None else "not solved")
        results.append(GameResult(guesser=guesser.name, answer=answer, rounds=rounds))
    return results


# ------------------------------------------------------------------
# CLI
# ------------------------------------------------------------------

def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--words", type=str, default=None,
                        help="Path to dictionary (default: data/dictionary.txt)")
    parser.add_argument("--answers", type=str, default=None,
                        help="Path to answer list (default: data/answers.txt)")
    parser.add_argument("--max-guesses", type=int, default=MAX_GUESSES,
                        help=f"Rounds per game (default: {MAX_GUESSES})")
    parser.add_argument("--mode", choices=["uniform", "frequency"], default="uniform",
                        help="Probability mode (default: uniform)")
    parser.add_argument("--num-games", type=int, default=None,
                        help="Only replay the first N answers")
    parser.add_argument("--csv", type=str, default=None, help="Save results CSV path")
    parser.add_argument("--json", type=str, default=None, help="Save results JSON path")
    parser.add_argument("--plot", type=str, default=None, help="Save histogram path")
    parser.add_argument("--verbose", action="store_true", help="Log every round")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def load_inputs(args: argparse.Namespace) -> tuple[Dictionary, list[str]]:
    dictionary = load_dictionary(path=args.words, mode=args.mode)
    answers = load_answers(args.answers)
    if args.num_games is not None:
        answers = answers[:args.num_games]
    print(f"Dictionary: {len(dictionary)} words (mode: {dictionary.mode}) | "
          f"Answers: {len(answers)} | Max guesses: {args.max_guesses}")
    return dictionary, answers


def write_outputs(results: ReplayResults, args: argparse.Namespace) -> None:
    if args.csv:
        results.to_csv(args.csv)
        print(f"CSV saved to {args.csv}")
    if args.json:
        results.to_json(args.json, config={
            "max_guesses": args.max_guesses,
            "mode": args.mode,
            "num_games": len({g.answer for g in results.games}),
        })
        print(f"JSON saved to {args.json}")
    if args.plot:
        results.plot_histograms(args.plot)


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay Wordle answers with one guesser")
    parser.add_argument("--guesser", type=str, default="Naive",
                        help="Guesser name (default: Naive)")
    add_common_arguments(parser)
    args = parser.parse_args()
    setup_logging(args.verbose)

    from guessers import find_guesser

    try:
        cls = find_guesser(args.guesser)
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)

    dictionary, answers = load_inputs(args)

    t0 = time.time()
    results = ReplayResults(run_replay(cls, answers, dictionary, args.max_guesses))
    elapsed = time.time() - t0

    results.print_summary()
    print(f"Elapsed: {elapsed:.1f}s")
    write_outputs(results, args)


if __name__ == "__main__":
    main()
