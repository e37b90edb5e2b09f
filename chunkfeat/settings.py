"""Static configuration for chunkfeat.

Vector layouts here are part of the trained classifier's input contract:
changing a capacity, a one-hot offset or a vocabulary word changes what the
model sees.  Vocabularies can be overridden at runtime with
:func:`chunkfeat.features.vocabulary.load_vocabulary`.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Vector capacities
# ---------------------------------------------------------------------------
CHUNK_FEATURE_CAP = 36
BOOST_FEATURE_CAP = 10

# Written in place of a neighbour score when there is no neighbour.
# 0.0 is a valid score, so it can't be used.
NO_NEIGHBOR_SCORE = -10.0

# ---------------------------------------------------------------------------
# One-hot tables (tag name -> offset inside the field)
# ---------------------------------------------------------------------------
ELEMENT_TYPES: dict[str, int] = {
    "p": 0,
    "a": 1,
    "div": 2,
    "h1": 3,  # h1-h6 share the heading slot
    "h2": 3,
    "h3": 3,
    "h4": 3,
    "h5": 3,
    "h6": 3,
}

PARENT_TYPES: dict[str, int] = {
    "p": 0,
    "span": 1,
    "div": 2,
    "li": 3,
}

# Sibling element types counted individually
SIBLING_TYPES: tuple[str, ...] = ("a", "p", "img")

# Headline-like tags compared against the document title
TITLE_TAGS: frozenset[str] = frozenset({"h1", "h2", "h3"})

# ---------------------------------------------------------------------------
# Ancestor context (tag names only)
# ---------------------------------------------------------------------------
ARTICLE_TAGS: frozenset[str] = frozenset({"article", "main"})
ASIDE_TAGS: frozenset[str] = frozenset({"aside"})
BLOCKQUOTE_TAGS: frozenset[str] = frozenset({"blockquote"})
LIST_TAGS: frozenset[str] = frozenset({"ul", "ol", "dl"})

# ---------------------------------------------------------------------------
# CSS class vocabularies
# ---------------------------------------------------------------------------
GOOD_QUALITY_WORDS: tuple[str, ...] = (
    "article",
    "catchline",
    "chapter",
    "content",
    "head",
    "intro",
    "introduction",
    "leadin",
    "main",
    "post",
    "story",
    "summary",
    "title",
)

POOR_QUALITY_WORDS: tuple[str, ...] = (
    "author",
    "blog",
    "byline",
    "caption",
    "col",
    "comment",
    "description",
    "email",
    "excerpt",
    "image",
    "info",
    "menu",
    "metadata",
    "nav",
    "photo",
    "small",
    "teaser",
    "widget",
)
