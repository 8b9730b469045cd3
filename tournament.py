#!/usr/bin/env python3
"""Run every discovered guesser on the same answers and rank them.

Each guesser runs in its own worker process; games share nothing but the
read-only dictionary.

Usage:
    python tournament.py                          # all guessers, 32 rounds
    python tournament.py --max-guesses 6          # classic round limit
    python tournament.py --workers 2 --csv results/tournament.csv
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from concurrent.futures import ProcessPoolExecutor, as_completed

from dictionary import Dictionary
from guesser import Guesser
from replay import (
    ReplayResults,
    add_common_arguments,
    load_inputs,
    run_replay,
    setup_logging,
    write_outputs,
)
from wordle import MAX_GUESSES

logger = logging.getLogger(__name__)


def run_tournament(
    guesser_classes: list[type[Guesser]],
    answers: list[str],
    dictionary: Dictionary,
    max_guesses: int = MAX_GUESSES,
    max_workers: int | None = None,
) -> ReplayResults:
    """Replay *answers* with every guesser in parallel worker processes.

    A guesser whose worker raises is reported on stderr and left out of
    the results.
    """
    results = ReplayResults()
    if not guesser_classes:
        print("No guessers found.", file=sys.stderr)
        return results

    if max_workers is None:
        max_workers = min(len(guesser_classes), os.cpu_count() or 4, 4)

    print(f"Running {len(guesser_classes)} guessers on {len(answers)} answers "
          f"(workers: {max_workers}) ...", flush=True)

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(run_replay, cls, answers, dictionary, max_guesses): cls().name
            for cls in guesser_classes
        }
        for fut in as_completed(futures):
            name = futures[fut]
            try:
                game_results = fut.result()
            except Exception as exc:
                logger.debug("guesser %s failed", name, exc_info=True)
                print(f"  {name:<25} FAILED: {exc}", file=sys.stderr)
                continue
            results.games.extend(game_results)
            solved = sum(1 for g in game_results if g.solved)
            print(f"  {name:<25} done: {solved}/{len(game_results)} solved")

    # Completion order varies between runs
    results.games.sort(key=lambda g: g.guesser)
    return results


def main() -> None:
    parser = argparse.ArgumentParser(description="Wordle guesser tournament")
    add_common_arguments(parser)
    parser.add_argument("--workers", type=int, default=None,
                        help="Max parallel workers (default: auto)")
    args = parser.parse_args()
    setup_logging(args.verbose)

    from guessers import discover_guessers

    dictionary, answers = load_inputs(args)

    t0 = time.time()
    results = run_tournament(
        discover_guessers(),
        answers,
        dictionary,
        max_guesses=args.max_guesses,
        max_workers=args.workers,
    )
    elapsed = time.time() - t0

    results.print_summary()
    print(f"Elapsed: {elapsed:.1f}s")
    write_outputs(results, args)


if __name__ == "__main__":
    main()
