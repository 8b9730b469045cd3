"""Entropy guesser: maximise expected information gain per guess.

For every word in the guess pool the remaining candidates are split by
the feedback they would produce; the word whose split has the highest
probability-weighted Shannon entropy is played.
"""

from __future__ import annotations

import random
from typing import Sequence

import numpy as np

from guesser import Guesser, GameConfig
from wordle import Correctness, Guess, filter_candidates

# Performance caps
_MAX_GUESS_POOL = 200       # max guesses to evaluate
_MAX_EVAL_CANDIDATES = 500  # max candidates to compute feedback against

_DIGIT = {Correctness.WRONG: 0, Correctness.MISPLACED: 1, Correctness.CORRECT: 2}


def encode_mask(mask: Sequence[Correctness]) -> int:
    """Encode a feedback mask as a single base-3 integer."""
    val = 0
    for i, c in enumerate(mask):
        val += _DIGIT[c] * (3 ** i)
    return val


def partition_entropy(guess: str, candidates: Sequence[str], weights: np.ndarray) -> float:
    """Entropy (bits) of the feedback partition *guess* induces on *candidates*."""
    codes = np.fromiter(
        (encode_mask(Correctness.compute(c, guess)) for c in candidates),
        dtype=np.int64,
        count=len(candidates),
    )
    _, inverse = np.unique(codes, return_inverse=True)
    mass = np.bincount(inverse.ravel(), weights=weights)
    p = mass[mass > 0] / mass.sum()
    return float(-(p * np.log2(p)).sum())


class EntropyGuesser(Guesser):
    """Select the candidate that maximises entropy of the feedback partition."""

    def __init__(self, seed: int = 42):
        self._seed = seed
        self._vocab: list[str] = []
        self._probs: dict[str, float] = {}
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return "Entropy"

    def begin_game(self, config: GameConfig) -> None:
        self._vocab = list(config.vocabulary)
        self._probs = config.probabilities
        self._rng = random.Random(self._seed)

    def guess(self, history: Sequence[Guess]) -> str:
        if not self._vocab:
            raise RuntimeError("call begin_game() first")
        candidates = filter_candidates(self._vocab, history)

        if not candidates:
            return self._vocab[0]
        if len(candidates) <= 2:
            return candidates[0]

        # Build guess pool (capped for performance)
        if len(candidates) <= _MAX_GUESS_POOL:
            guess_pool = candidates
        else:
            guess_pool = self._rng.sample(candidates, _MAX_GUESS_POOL)

        # Subsample candidates for entropy evaluation if too many
        if len(candidates) <= _MAX_EVAL_CANDIDATES:
            eval_candidates = candidates
        else:
            eval_candidates = self._rng.sample(candidates, _MAX_EVAL_CANDIDATES)

        weights = np.array(
            [self._probs.get(c, 1.0) for c in eval_candidates], dtype=np.float64
        )
        scores = np.array(
            [partition_entropy(g, eval_candidates, weights) for g in guess_pool]
        )
        # argmax keeps the earliest pool word on ties
        return guess_pool[int(np.argmax(scores))]
