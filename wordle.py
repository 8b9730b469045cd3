"""Wordle game engine: feedback scoring and the round loop."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from guesser import Guesser

logger = logging.getLogger(__name__)

WORD_LENGTH = 5
MAX_GUESSES = 32


class Correctness(enum.Enum):
    """Outcome for a single letter of a guess."""

    CORRECT = "C"    # green: right letter, right position
    MISPLACED = "M"  # yellow: letter elsewhere in the answer
    WRONG = "W"      # gray: no unconsumed match left

    @staticmethod
    def compute(answer: str, guess: str) -> tuple[Correctness, ...]:
        """Return the feedback mask for *guess* against *answer*.

        Exact matches are settled first. Each remaining guess letter then
        claims the leftmost unconsumed answer position holding the same
        letter, so a letter is never credited more often than it occurs
        in the answer and earlier guess positions win ties.

        Raises
        ------
        ValueError
            If either word is not exactly ``WORD_LENGTH`` letters long.
        """
        if len(answer) != WORD_LENGTH:
            raise ValueError(
                f"answer length ({len(answer)}) != word length ({WORD_LENGTH})"
            )
        if len(guess) != WORD_LENGTH:
            raise ValueError(
                f"guess length ({len(guess)}) != word length ({WORD_LENGTH})"
            )

        mask = [Correctness.WRONG] * WORD_LENGTH
        used = [False] * WORD_LENGTH

        # Pass 1: greens
        for i, (a, g) in enumerate(zip(answer, guess)):
            if a == g:
                mask[i] = Correctness.CORRECT
                used[i] = True

        # Pass 2: yellows
        for i, g in enumerate(guess):
            if mask[i] is Correctness.CORRECT:
                continue
            for j, (a, g_) in enumerate(zip(answer, guess)):
                if a == g and a != g_ and not used[j]:
                    mask[i] = Correctness.MISPLACED
                    used[j] = True
                    break

        return tuple(mask)


@dataclass(frozen=True)
class Guess:
    """A scored guess: the word played and the feedback it received."""

    word: str
    mask: tuple[Correctness, ...]

    def matches(self, word: str) -> bool:
        """True if *word* could still be the answer after this guess."""
        return Correctness.compute(word, self.word) == self.mask

    def pattern(self) -> str:
        """Compact ``C``/``M``/``W`` string of the mask (for reports)."""
        return "".join(c.value for c in self.mask)


def filter_candidates(candidates: Iterable[str], history: Sequence[Guess]) -> list[str]:
    """Keep only candidates consistent with every guess in *history*."""
    return [w for w in candidates if all(g.matches(w) for g in history)]


class Wordle:
    """Plays games against a fixed set of valid guess words.

    Parameters
    ----------
    dictionary : Iterable[str] or None
        Words a guesser may play (besides the winning one). None uses the
        bundled word list, loaded once per process.
    max_guesses : int
        Rounds before a game counts as not solved.
    """

    def __init__(
        self,
        dictionary: Iterable[str] | None = None,
        max_guesses: int = MAX_GUESSES,
    ) -> None:
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be >= 1, got {max_guesses}")
        if dictionary is None:
            from dictionary import default_dictionary
            self._dictionary = default_dictionary().word_set
        else:
            self._dictionary = frozenset(dictionary)
        self._max_guesses = max_guesses

    def play(self, answer: str, guesser: Guesser) -> int | None:
        """Play one game; return the winning round, or None if exhausted.

        A guess equal to *answer* ends the game at once and is not scored
        or added to the history. Any other guess must be in the
        dictionary.

        Raises
        ------
        ValueError
            If the guesser plays a word outside the dictionary.
        """
        history: list[Guess] = []
        for round_no in range(1, self._max_guesses + 1):
            word = guesser.guess(tuple(history))
            if word == answer:
                logger.debug("round %d: %s solved", round_no, word)
                return round_no
            if word not in self._dictionary:
                raise ValueError(f"{word!r} is not in the dictionary")
            guess = Guess(word=word, mask=Correctness.compute(answer, word))
            history.append(guess)
            logger.debug("round %d: %s %s", round_no, word, guess.pattern())

        logger.debug("%r not solved after %d rounds", answer, self._max_guesses)
        return None

    def __contains__(self, word: str) -> bool:
        return word in self._dictionary

    @property
    def max_guesses(self) -> int:
        return self._max_guesses
