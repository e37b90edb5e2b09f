"""CSS class vocabularies that hint at article content (good) or page chrome (poor).

Matching is whole-word and case-insensitive: ``nav`` matches ``nav`` and
``main-nav`` but not ``navbar`` or ``canvas``.

Vocabularies can be replaced from a YAML file::

    good:
      - article
      - story
    poor:
      - sidebar
      - nav
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml

from chunkfeat import settings

logger = logging.getLogger(__name__)


class VocabularyError(ValueError):
    """Raised when a vocabulary file cannot be used."""


class WordMatcher:
    """Immutable whole-word matcher compiled once from *words*."""

    __slots__ = ("_pattern", "_words")

    def __init__(self, words: tuple[str, ...] | list[str] | frozenset[str]) -> None:
        cleaned = frozenset(w.strip().lower() for w in words if w and w.strip())
        if not cleaned:
            raise VocabularyError("vocabulary must contain at least one word")
        # Longest first so a word never shadows a longer alternative
        alternatives = "|".join(
            re.escape(w) for w in sorted(cleaned, key=lambda w: (-len(w), w))
        )
        object.__setattr__(self, "_words", cleaned)
        object.__setattr__(
            self, "_pattern", re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE),
        )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def words(self) -> frozenset[str]:
        return self._words

    def matches(self, token: str) -> bool:
        """True if *token* contains one of the vocabulary words as a whole word."""
        return bool(token) and self._pattern.search(token) is not None

    def any(self, tokens: list[str] | tuple[str, ...]) -> bool:
        return any(self.matches(t) for t in tokens)

    def __repr__(self) -> str:
        return f"WordMatcher({len(self._words)} words)"


GOOD_QUALITY_CLASSES = WordMatcher(settings.GOOD_QUALITY_WORDS)
POOR_QUALITY_CLASSES = WordMatcher(settings.POOR_QUALITY_WORDS)


def load_vocabulary(path: str | Path) -> tuple[WordMatcher, WordMatcher]:
    """Load ``good`` / ``poor`` word lists from YAML at *path*.

    A missing key keeps the built-in vocabulary for that side.
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise VocabularyError(f"cannot read vocabulary file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise VocabularyError(f"vocabulary file {path} must contain a mapping")

    matchers: list[WordMatcher] = []
    for key, default in (("good", GOOD_QUALITY_CLASSES), ("poor", POOR_QUALITY_CLASSES)):
        words = data.get(key)
        if words is None:
            matchers.append(default)
            continue
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise VocabularyError(f"{key!r} in {path} must be a list of strings")
        matchers.append(WordMatcher(words))
        logger.debug("Loaded %d %s-quality class words from %s", len(words), key, path)
    return matchers[0], matchers[1]
