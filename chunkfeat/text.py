"""Text statistics shared by the chunk model and the feature encoders."""

from __future__ import annotations

import re
from dataclasses import dataclass

_EDGE_PUNCT_RE = re.compile(r"^\W+|\W+$")

# Closing quotes/brackets allowed after a sentence terminator: `end."` / `end.)`
_SENTENCE_END_RE = re.compile(r"[.!?]+[\"'\)\]”’]*$")


class Text:
    """Normalised text of a chunk or of the document title.

    Only counts and the token set are kept; the raw string is available as
    ``value`` for debugging.
    """

    __slots__ = ("value", "tokens", "words", "sentences")

    def __init__(self, value: str = "") -> None:
        self.value = " ".join(value.split())
        raw = self.value.split()
        self.tokens: list[str] = []
        sentences = 0
        for word in raw:
            token = _EDGE_PUNCT_RE.sub("", word).lower()
            if not token:
                continue
            self.tokens.append(token)
            if _SENTENCE_END_RE.search(word):
                sentences += 1
        self.words = len(self.tokens)
        # Unterminated text still forms one sentence
        if self.words and not sentences:
            sentences = 1
        self.sentences = sentences

    def similarity(self, other: Text) -> float:
        """Share of distinct tokens common to both texts, relative to the larger set."""
        mine = set(self.tokens)
        theirs = set(other.tokens)
        if not mine or not theirs:
            return 0.0
        return len(mine & theirs) / max(len(mine), len(theirs))

    def __len__(self) -> int:
        return self.words

    def __repr__(self) -> str:
        return f"Text(words={self.words}, sentences={self.sentences}, value={self.value[:40]!r})"


@dataclass
class TextStat:
    """Word/sentence totals over ``count`` occurrences."""

    words: int = 0
    sentences: int = 0
    count: int = 0

    def add(self, text: Text) -> None:
        self.words += text.words
        self.sentences += text.sentences
        self.count += 1

    @property
    def words_per_occurrence(self) -> float:
        return self.words / self.count if self.count else 0.0

    @property
    def sentences_per_occurrence(self) -> float:
        return self.sentences / self.count if self.count else 0.0
