"""Word-list loading.

The dictionary file is whitespace separated, one entry per line, either
a bare ``word`` (count 1) or a ``word count`` pair. Two probability
modes are built from the counts:

  - ``uniform``:  every word has equal probability  p = 1/N
  - ``frequency``: probability proportional to a sigmoid of log-count
"""

from __future__ import annotations

import functools
import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path

from wordle import WORD_LENGTH

logger = logging.getLogger(__name__)

_DIR = Path(__file__).resolve().parent
DATA_DIR = _DIR / "data"
DICTIONARY_PATH = DATA_DIR / "dictionary.txt"
ANSWERS_PATH = DATA_DIR / "answers.txt"

_WORD_RE = re.compile(rf"^[a-z]{{{WORD_LENGTH}}}$")


@dataclass
class Dictionary:
    """A word list with associated probabilities."""
    words: list[str]
    probs: dict[str, float]   # word -> probability (sums to 1)
    mode: str                 # "uniform" or "frequency"

    @functools.cached_property
    def word_set(self) -> frozenset[str]:
        return frozenset(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self.word_set

    def __len__(self) -> int:
        return len(self.words)


# ------------------------------------------------------------------
# Sigmoid weighting (for frequency mode)
# ------------------------------------------------------------------

def _sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    ex = math.exp(x)
    return ex / (1.0 + ex)


def _sigmoid_weights(
    raw_counts: dict[str, int],
    steepness: float = 1.5,
) -> dict[str, float]:
    """Map raw counts to [0,1] via sigmoid on log-count, then normalize."""
    if not raw_counts:
        return {}
    log_counts = {w: math.log(c + 1) for w, c in raw_counts.items()}
    mu = sum(log_counts.values()) / len(log_counts)
    weights = {w: _sigmoid(steepness * (lc - mu)) for w, lc in log_counts.items()}
    total = sum(weights.values())
    return {w: v / total for w, v in weights.items()}


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def _read_counts(path: Path) -> dict[str, int]:
    """Parse ``word`` or ``word count`` lines, keeping the first occurrence."""
    counts: dict[str, int] = {}
    skipped = 0
    for lineno, raw in enumerate(path.read_text(encoding="utf-8").splitlines(), 1):
        parts = raw.split()
        if not parts or parts[0].startswith("#"):
            continue
        w = parts[0].lower()
        if not _WORD_RE.match(w):
            skipped += 1
            continue
        if w in counts:
            continue
        if len(parts) > 1:
            try:
                c = int(parts[1])
            except ValueError:
                raise ValueError(
                    f"{path}:{lineno}: count {parts[1]!r} is not an integer"
                ) from None
            if c <= 0:
                skipped += 1
                continue
        else:
            c = 1
        counts[w] = c
    if skipped:
        logger.info("skipped %d malformed entries in %s", skipped, path)
    return counts


def load_dictionary(
    path: str | Path | None = None,
    mode: str = "uniform",
) -> Dictionary:
    """Load the valid-word list and build a probability distribution.

    Parameters
    ----------
    path : str, Path or None
        Word list to read. None uses the bundled ``data/dictionary.txt``.
    mode : ``"uniform"`` or ``"frequency"``
        ``uniform``: equal probability for every word.
        ``frequency``: sigmoid-smoothed count weighting.

    Returns
    -------
    Dictionary
    """
    if mode not in ("uniform", "frequency"):
        raise ValueError(f"mode must be 'uniform' or 'frequency', got {mode!r}")

    src = Path(path) if path is not None else DICTIONARY_PATH
    if not src.exists():
        raise FileNotFoundError(f"Word list not found: {src}")

    counts = _read_counts(src)
    if not counts:
        raise ValueError(f"No {WORD_LENGTH}-letter words found in {src}")
    words = sorted(counts)

    if mode == "uniform":
        p = 1.0 / len(words)
        probs = {w: p for w in words}
    else:
        probs = _sigmoid_weights(counts)

    logger.debug("loaded %d words from %s (mode: %s)", len(words), src, mode)
    return Dictionary(words=words, probs=probs, mode=mode)


@functools.lru_cache(maxsize=None)
def default_dictionary(mode: str = "uniform") -> Dictionary:
    """The bundled dictionary, loaded once per process and shared."""
    return load_dictionary(mode=mode)


def load_answers(path: str | Path | None = None) -> list[str]:
    """Load the answers to replay, in file order.

    Blank lines and ``#`` comments are ignored. Entries are lowercased, as
    in :func:`load_dictionary`, and must then be ``WORD_LENGTH`` letters.
    """
    src = Path(path) if path is not None else ANSWERS_PATH
    if not src.exists():
        raise FileNotFoundError(f"Answer list not found: {src}")

    answers: list[str] = []
    for lineno, raw in enumerate(src.read_text(encoding="utf-8").splitlines(), 1):
        for w in raw.split("#", 1)[0].lower().split():
            if not _WORD_RE.match(w):
                raise ValueError(f"{src}:{lineno}: {w!r} is not a valid answer")
            answers.append(w)
    return answers
