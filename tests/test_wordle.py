import pytest

from guesser import Guesser
from wordle import MAX_GUESSES, Correctness, Guess, Wordle


class ScriptedGuesser(Guesser):
    """Plays "right" once *k* guesses are in the history, "wrong" before."""

    def __init__(self, k=None):
        self.k = k
        self.seen: list[tuple[Guess, ...]] = []

    @property
    def name(self) -> str:
        return "Scripted"

    def guess(self, history):
        self.seen.append(tuple(history))
        if self.k is not None and len(history) == self.k:
            return "right"
        return "wrong"


@pytest.fixture
def wordle():
    return Wordle(["right", "wrong", "crane"])


def test_genius(wordle):
    g = ScriptedGuesser(k=0)
    assert wordle.play("right", g) == 1
    assert g.seen == [()]


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 6, MAX_GUESSES - 1])
def test_solved_on_round_k(wordle, k):
    g = ScriptedGuesser(k=k)
    assert wordle.play("right", g) == k + 1
    assert len(g.seen) == k + 1
    # Round n sees exactly n - 1 records, oldest first
    for n, history in enumerate(g.seen, 1):
        assert len(history) == n - 1
        assert all(rec.word == "wrong" for rec in history)


def test_oops_exhausts_after_max_guesses(wordle):
    g = ScriptedGuesser()
    assert wordle.play("right", g) is None
    assert len(g.seen) == MAX_GUESSES
    assert len(g.seen[-1]) == MAX_GUESSES - 1


def test_history_records_are_scored(wordle):
    g = ScriptedGuesser(k=1)
    wordle.play("right", g)
    (record,) = g.seen[1]
    assert record == Guess("wrong", Correctness.compute("right", "wrong"))
    assert record.pattern() == "WMWWM"


def test_winning_guess_need_not_be_in_dictionary():
    w = Wordle(["crane"])
    g = ScriptedGuesser(k=1)
    # "wrong" is not valid, so it must fail before the win is reached
    with pytest.raises(ValueError, match="not in the dictionary"):
        w.play("right", g)
    assert Wordle(["crane"]).play("right", ScriptedGuesser(k=0)) == 1


def test_invalid_guess_is_fatal(wordle):
    class Gibberish(ScriptedGuesser):
        def guess(self, history):
            super().guess(history)
            return "zzzzz"

    g = Gibberish()
    with pytest.raises(ValueError, match="zzzzz"):
        wordle.play("right", g)
    assert len(g.seen) == 1


def test_wrong_length_answer_is_fatal(wordle):
    with pytest.raises(ValueError, match="length"):
        wordle.play("rights", ScriptedGuesser())


def test_custom_round_limit():
    w = Wordle(["right", "wrong"], max_guesses=6)
    assert w.max_guesses == 6
    g = ScriptedGuesser()
    assert w.play("right", g) is None
    assert len(g.seen) == 6
    assert w.play("right", ScriptedGuesser(k=5)) == 6


def test_round_limit_must_be_positive():
    with pytest.raises(ValueError):
        Wordle(["right"], max_guesses=0)


def test_default_dictionary_is_bundled_list():
    w = Wordle()
    assert "right" in w and "wrong" in w
    assert w.play("right", ScriptedGuesser(k=2)) == 3


def test_history_is_read_only(wordle):
    class Mutator(ScriptedGuesser):
        def guess(self, history):
            assert isinstance(history, tuple)
            return super().guess(history)

    assert wordle.play("right", Mutator(k=3)) == 4
