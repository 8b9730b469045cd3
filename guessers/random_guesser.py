"""Random guesser: pick uniformly at random from remaining candidates."""

from __future__ import annotations

import random
from typing import Sequence

from guesser import Guesser, GameConfig
from wordle import Guess, filter_candidates


class RandomGuesser(Guesser):
    """Guess a random word from the set of remaining candidates."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)
        self._vocab: list[str] = []
        self._candidates: list[str] = []

    @property
    def name(self) -> str:
        return "Random"

    def begin_game(self, config: GameConfig) -> None:
        self._vocab = list(config.vocabulary)
        self._candidates = list(self._vocab)

    def guess(self, history: Sequence[Guess]) -> str:
        if not self._vocab:
            raise RuntimeError("call begin_game() first")
        # Only the newest record can shrink the set further
        if history:
            self._candidates = filter_candidates(self._candidates, history[-1:])
        if not self._candidates:
            # Answer outside the vocabulary; keep playing a valid word
            return self._vocab[0]
        return self._rng.choice(self._candidates)
