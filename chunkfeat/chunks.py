"""Chunk model: the text-bearing unit the feature encoders work on.

Chunks are produced by an external segmenter.  The segmenter decides *which*
DOM nodes become chunks; :meth:`Chunk.from_element` only reads the attributes
the encoders need off the chosen BeautifulSoup node.

Usage::

    from bs4 import BeautifulSoup
    from chunkfeat.chunks import Chunk, link_chunks

    soup = BeautifulSoup(html, "lxml")
    chunks = link_chunks([Chunk.from_element(p) for p in soup.find_all("p")])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any

from bs4 import BeautifulSoup, Tag

from chunkfeat import settings
from chunkfeat.text import Text


class Ancestor(IntFlag):
    """Bitmask of the containers a chunk sits inside."""

    NONE = 0
    ARTICLE = 1
    ASIDE = 2
    BLOCKQUOTE = 4
    LIST = 8


_ANCESTOR_TAGS: tuple[tuple[frozenset[str], Ancestor], ...] = (
    (settings.ARTICLE_TAGS, Ancestor.ARTICLE),
    (settings.ASIDE_TAGS, Ancestor.ASIDE),
    (settings.BLOCKQUOTE_TAGS, Ancestor.BLOCKQUOTE),
    (settings.LIST_TAGS, Ancestor.LIST),
)


@dataclass(eq=False)
class Chunk:
    """A text-bearing unit derived from one DOM node.

    Chunks compare and hash by identity: two chunks with the same text are
    still different positions in the document.
    """

    tag: str
    text: Text = field(default_factory=Text)
    parent_tag: str | None = None
    link_text: int = 0
    classes: list[str] = field(default_factory=list)
    ancestors: Ancestor = Ancestor.NONE
    sibling_types: list[str] = field(default_factory=list)
    block: Any = None
    # Navigation only
    prev: Chunk | None = field(default=None, repr=False)
    next: Chunk | None = field(default=None, repr=False)

    def same_block(self, other: Chunk) -> bool:
        """True if *other* shares this chunk's block (by identity)."""
        return other.block is self.block

    @classmethod
    def from_element(cls, tag: Tag, *, block: Any = None) -> Chunk:
        """Build a chunk from a bs4 *tag* picked by the segmenter.

        *block* defaults to the tag's parent element.
        """
        parent = tag.parent
        if isinstance(parent, BeautifulSoup):
            parent = None

        raw_classes = tag.get("class") or []
        if isinstance(raw_classes, str):
            raw_classes = raw_classes.split()

        siblings: list[str] = []
        if parent is not None:
            siblings = [
                child.name
                for child in parent.children
                if isinstance(child, Tag) and child is not tag
            ]

        if tag.name == "a":
            link_text = Text(tag.get_text(separator=" ")).words
        else:
            link_text = sum(
                Text(a.get_text(separator=" ")).words for a in tag.find_all("a")
            )

        ancestors = Ancestor.NONE
        for node in tag.parents:
            if not isinstance(node, Tag) or isinstance(node, BeautifulSoup):
                continue
            for names, flag in _ANCESTOR_TAGS:
                if node.name in names:
                    ancestors |= flag

        return cls(
            tag=tag.name,
            text=Text(tag.get_text(separator=" ")),
            parent_tag=parent.name if parent is not None else None,
            link_text=link_text,
            classes=[str(c) for c in raw_classes],
            ancestors=ancestors,
            sibling_types=siblings,
            block=parent if block is None else block,
        )


def link_chunks(chunks: list[Chunk]) -> list[Chunk]:
    """Wire ``prev``/``next`` of *chunks* in list (document) order."""
    for i, chunk in enumerate(chunks):
        chunk.prev = chunks[i - 1] if i > 0 else None
        chunk.next = chunks[i + 1] if i + 1 < len(chunks) else None
    return chunks
