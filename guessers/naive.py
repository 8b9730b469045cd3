"""Naive guesser: play the same opening word every round (baseline)."""

from __future__ import annotations

from typing import Sequence

from guesser import Guesser
from wordle import Guess


class NaiveGuesser(Guesser):
    """Always guess *word*, ignoring feedback.

    Solves in one round when the answer is *word* and never otherwise.
    """

    def __init__(self, word: str = "crane"):
        self._word = word

    @property
    def name(self) -> str:
        return "Naive"

    def guess(self, history: Sequence[Guess]) -> str:
        return self._word
