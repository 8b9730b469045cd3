"""Abstract base class for Wordle guessers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from wordle import Guess


@dataclass(frozen=True)
class GameConfig:
    """All information a guesser receives at the start of each game.

    Attributes
    ----------
    word_length : int
        Number of letters in each word.
    vocabulary : tuple[str, ...]
        Every word the guesser may play (immutable). Answers are drawn
        from this set.
    mode : str
        Probability mode: ``"uniform"`` or ``"frequency"``.
    probabilities : dict[str, float]
        Mapping of word -> probability (sums to 1).
    max_guesses : int
        Rounds allowed per game.
    """

    word_length: int
    vocabulary: tuple[str, ...]
    mode: str
    probabilities: dict[str, float]
    max_guesses: int


class Guesser(ABC):
    """Interface that every guesser must implement.

    The engine only ever calls :meth:`guess`. The batch runners call
    :meth:`begin_game` before and :meth:`end_game` after each game.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable guesser name (used in reports)."""
        ...

    def begin_game(self, config: GameConfig) -> None:
        """Called at the start of each game.

        The default implementation does nothing.
        """

    @abstractmethod
    def guess(self, history: Sequence[Guess]) -> str:
        """Return the next word given the guesses scored so far.

        *history* is empty on the first round and must not be modified.
        """
        ...

    def end_game(self, answer: str, rounds: int | None) -> None:
        """Called at the end of each game (*rounds* is None if unsolved).

        The default implementation does nothing.
        """
