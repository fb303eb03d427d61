from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Tuple

logger = logging.getLogger(__name__)

WORD_LENGTH = 5


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def normalize_words(lines: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    """
    Trim, uppercase, keep A-Z tokens of exactly N letters, and drop
    duplicates while preserving first-seen order.
    """
    seen, out = set(), []
    for raw in lines:
        w = raw.strip().upper()
        if len(w) != N or not (w.isascii() and w.isalpha()) or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


class WordList:
    """
    Immutable, deduplicated word list.

    Iterates in load order (the solver's result order follows it) and answers
    membership in O(1).
    """

    __slots__ = ("_words", "_index")

    def __init__(self, words: Iterable[str], N: int = WORD_LENGTH):
        self._words: Tuple[str, ...] = tuple(normalize_words(words, N))
        self._index: FrozenSet[str] = frozenset(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, i: int) -> str:
        return self._words[i]

    def __repr__(self) -> str:
        return f"WordList({len(self._words)} words)"

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words


def load_word_list(path: Path | str, N: int = WORD_LENGTH) -> WordList:
    """
    Load and normalize a one-word-per-line file.

    Raises:
      FileNotFoundError : the file is missing
      ValueError        : the file holds no usable N-letter words
    """
    lines = read_lines(path)
    words = WordList(lines, N)
    if not len(words):
        raise ValueError(f"word list {path} contains 0 valid {N}-letter words")
    logger.info("Loaded %d words from %s (%d lines)", len(words), path, len(lines))
    return words
