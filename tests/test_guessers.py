import numpy as np
import pytest

from dictionary import Dictionary
from guessers import discover_guessers, find_guesser
from guessers.entropy import EntropyGuesser, encode_mask, partition_entropy
from guessers.max_prob import MaxProbGuesser
from guessers.naive import NaiveGuesser
from guessers.random_guesser import RandomGuesser
from replay import make_config
from wordle import Correctness, Wordle

VOCAB = sorted([
    "crane", "slate", "trace", "crate", "plate", "grace", "brave",
    "shore", "stone", "store", "sheet", "steel", "eager", "robin",
    "noise", "right", "wrong", "light", "might", "night",
])


@pytest.fixture
def small_dictionary():
    p = 1.0 / len(VOCAB)
    return Dictionary(words=VOCAB, probs={w: p for w in VOCAB}, mode="uniform")


def test_discover_finds_builtin_guessers():
    names = {cls().name for cls in discover_guessers()}
    assert names == {"Naive", "Random", "MaxProb", "Entropy"}


def test_find_guesser_is_case_insensitive():
    assert find_guesser("maxprob") is MaxProbGuesser
    with pytest.raises(RuntimeError, match="not found"):
        find_guesser("oracle")


def test_naive_always_plays_same_word(small_dictionary):
    w = Wordle(small_dictionary.words)
    assert w.play("crane", NaiveGuesser()) == 1
    assert w.play("slate", NaiveGuesser()) is None
    assert NaiveGuesser("slate").guess(()) == "slate"


@pytest.mark.parametrize("factory", [
    lambda: RandomGuesser(seed=7),
    MaxProbGuesser,
    EntropyGuesser,
])
@pytest.mark.parametrize("answer", VOCAB)
def test_filtering_guessers_solve_every_answer(factory, answer, small_dictionary):
    guesser = factory()
    guesser.begin_game(make_config(small_dictionary))
    rounds = Wordle(small_dictionary.words).play(answer, guesser)
    # Every miss removes at least the missed word from the candidates
    assert rounds is not None and rounds <= len(VOCAB)


def test_max_prob_prefers_probable_words():
    probs = {"crane": 0.2, "slate": 0.7, "trace": 0.1}
    d = Dictionary(words=sorted(probs), probs=probs, mode="frequency")
    g = MaxProbGuesser()
    g.begin_game(make_config(d))
    assert g.guess(()) == "slate"


def test_guessers_fall_back_when_answer_unknown(small_dictionary):
    # "zesty" is outside the vocabulary, so candidates run out
    for guesser in (RandomGuesser(seed=1), MaxProbGuesser(), EntropyGuesser()):
        guesser.begin_game(make_config(small_dictionary, max_guesses=6))
        w = Wordle(small_dictionary.words, max_guesses=6)
        assert w.play("zesty", guesser) is None


def test_encode_mask_is_base_three():
    C, M, W = Correctness.CORRECT, Correctness.MISPLACED, Correctness.WRONG
    assert encode_mask((W, W, W, W, W)) == 0
    assert encode_mask((C, C, C, C, C)) == 242
    assert encode_mask((M, W, W, W, C)) == 1 + 2 * 81


def test_partition_entropy():
    words = ["right", "light", "might", "night"]
    weights = np.ones(len(words))
    # Each candidate gives a different mask: two bits
    assert partition_entropy("lamin", words, weights) == pytest.approx(2.0)
    # Nothing shared: one bucket, no information
    assert partition_entropy("zesty", words, weights) == pytest.approx(0.0)


@pytest.mark.parametrize("factory", [RandomGuesser, MaxProbGuesser, EntropyGuesser])
def test_guess_before_begin_game(factory):
    with pytest.raises(RuntimeError, match="begin_game"):
        factory().guess(())
