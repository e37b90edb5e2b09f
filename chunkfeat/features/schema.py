"""Vector layouts of the chunk and boost feature families.

Each field covers a fixed run of slots; the encoders write the fields in
this order and check that every field consumes exactly ``width`` slots, so a
slot means the same thing for every chunk.
"""

from __future__ import annotations

from typing import NamedTuple

from chunkfeat import settings


class SchemaError(RuntimeError):
    """Raised when an encoder step consumes a different number of slots than its field."""


class FeatureField(NamedTuple):
    name: str
    slots: tuple[str, ...]

    @property
    def width(self) -> int:
        return len(self.slots)


def _one_hot(table: dict[str, int]) -> tuple[str, ...]:
    # First tag per offset names the slot: h1..h6 collapse to "heading"
    names: dict[int, str] = {}
    for tag, offset in table.items():
        names.setdefault(offset, "heading" if tag.startswith("h") else tag)
    return tuple(names[i] for i in sorted(names))


CHUNK_SCHEMA: tuple[FeatureField, ...] = (
    FeatureField("element_type", _one_hot(settings.ELEMENT_TYPES)),
    FeatureField("parent_type", _one_hot(settings.PARENT_TYPES)),
    FeatureField("sibling_types", (
        "count", "a", "p", "img", "a_ratio", "p_ratio", "img_ratio",
    )),
    FeatureField("ancestors", ("article", "aside", "blockquote", "list")),
    FeatureField("text_stat", ("words", "sentences", "link_text")),
    FeatureField("text_stat_siblings", (
        "prev_same_block", "prev_words", "prev_sentences",
        "next_same_block", "next_words", "next_sentences",
    )),
    FeatureField("class_stat", ("found", "words_avg", "sentences_avg")),
    FeatureField("cluster_stat", (
        "words", "sentences", "count", "words_avg", "sentences_avg",
    )),
)

BOOST_SCHEMA: tuple[FeatureField, ...] = (
    FeatureField("chunk", (
        "link_text", "words", "sentences", "good_class", "poor_class",
    )),
    FeatureField("cluster", ("score", "chunk_score", "prev_score", "next_score")),
    FeatureField("title_similarity", ("similarity",)),
)


def schema_width(schema: tuple[FeatureField, ...]) -> int:
    return sum(f.width for f in schema)


def slot_names(schema: tuple[FeatureField, ...]) -> list[str]:
    """Flat ``field.slot`` names, one per vector position."""
    return [f"{f.name}.{slot}" for f in schema for slot in f.slots]


def field_offset(schema: tuple[FeatureField, ...], name: str) -> int:
    """Index of the first slot of field *name*."""
    offset = 0
    for f in schema:
        if f.name == name:
            return offset
        offset += f.width
    raise KeyError(name)


if schema_width(CHUNK_SCHEMA) != settings.CHUNK_FEATURE_CAP:  # pragma: no cover
    raise SchemaError("chunk schema does not match CHUNK_FEATURE_CAP")
if schema_width(BOOST_SCHEMA) != settings.BOOST_FEATURE_CAP:  # pragma: no cover
    raise SchemaError("boost schema does not match BOOST_FEATURE_CAP")
