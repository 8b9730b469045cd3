"""Max-probability guesser: always guess the most probable remaining candidate."""

from __future__ import annotations

from typing import Sequence

from guesser import Guesser, GameConfig
from wordle import Guess, filter_candidates


class MaxProbGuesser(Guesser):
    """Always guess the most probable remaining candidate.

    Under ``uniform`` mode this picks alphabetically first (all equal).
    Under ``frequency`` mode it picks the word with highest probability.
    """

    def __init__(self):
        self._candidates: list[str] = []

    @property
    def name(self) -> str:
        return "MaxProb"

    def begin_game(self, config: GameConfig) -> None:
        probs = config.probabilities
        # Descending probability, then alphabetically for ties
        self._candidates = sorted(
            config.vocabulary, key=lambda w: (-probs.get(w, 0), w)
        )

    def guess(self, history: Sequence[Guess]) -> str:
        if not self._candidates:
            raise RuntimeError("call begin_game() first")
        candidates = filter_candidates(self._candidates, history)
        if not candidates:
            return self._candidates[0]
        # Already sorted by probability
        return candidates[0]
