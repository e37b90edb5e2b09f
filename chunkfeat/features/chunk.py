"""Chunk-level feature encoder (36 slots per chunk).

Fields, in vector order (see :data:`chunkfeat.features.schema.CHUNK_SCHEMA`):

  element_type        one-hot p / a / div / heading
  parent_type         one-hot p / span / div / li of the parent element
  sibling_types       sibling count, a/p/img counts and their ratios
  ancestors           inside article / aside / blockquote / list
  text_stat           words, sentences, link-text words
  text_stat_siblings  same-block flag, words, sentences of prev and next chunk
  class_stat          best same-class averages
  cluster_stat        totals and averages of the chunk's cluster
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from chunkfeat import settings
from chunkfeat.chunks import Ancestor
from chunkfeat.features.schema import CHUNK_SCHEMA, FeatureField, SchemaError
from chunkfeat.features.writer import FeatureVector, FeatureWriter, chunk_vector

if TYPE_CHECKING:
    from chunkfeat.chunks import Chunk
    from chunkfeat.text import TextStat

_WIDTHS: dict[str, int] = {f.name: f.width for f in CHUNK_SCHEMA}


def _words_ratio(stat: TextStat) -> int:
    """Whole words per occurrence, used only to rank classes."""
    return stat.words // stat.count if stat.count else 0


class ChunkFeatureWriter(FeatureWriter):
    """Fills chunk feature vectors, one field at a time."""

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def encode(
        self,
        chunk: Chunk,
        classes: Mapping[str, TextStat],
        clusters: Mapping[Chunk, TextStat],
        vector: FeatureVector | None = None,
    ) -> FeatureVector:
        """Encode *chunk* into *vector* (a new zero vector by default).

        *classes* maps CSS class names to their document-wide statistics,
        *clusters* maps chunks to the statistics of their cluster.
        """
        if vector is None:
            vector = chunk_vector()
        self.assign(vector)
        steps: dict[str, tuple[Callable[..., None], tuple[Any, ...]]] = {
            "element_type": (self.write_element_type, (chunk,)),
            "parent_type": (self.write_parent_type, (chunk,)),
            "sibling_types": (self.write_sibling_types, (chunk,)),
            "ancestors": (self.write_ancestors, (chunk,)),
            "text_stat": (self.write_text_stat, (chunk,)),
            "text_stat_siblings": (self.write_text_stat_siblings, (chunk,)),
            "class_stat": (self.write_class_stat, (chunk, classes)),
            "cluster_stat": (self.write_cluster_stat, (chunk, clusters)),
        }
        for field in CHUNK_SCHEMA:
            step, args = steps[field.name]
            self._run(field, step, *args)
        return vector

    def _run(self, field: FeatureField, step: Callable[..., None], *args: Any) -> None:
        start = self.pos
        step(*args)
        if self.pos - start != field.width:
            raise SchemaError(
                f"field {field.name!r} wrote {self.pos - start} slots, expected {field.width}",
            )

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def write_element_type(self, chunk: Chunk) -> None:
        offset = settings.ELEMENT_TYPES.get(chunk.tag)
        if offset is not None:
            self.write_at(True, offset)
        self.skip(_WIDTHS["element_type"])

    def write_parent_type(self, chunk: Chunk) -> None:
        if chunk.parent_tag is not None:
            offset = settings.PARENT_TYPES.get(chunk.parent_tag)
            if offset is not None:
                self.write_at(True, offset)
        self.skip(_WIDTHS["parent_type"])

    def write_sibling_types(self, chunk: Chunk) -> None:
        count = len(chunk.sibling_types)
        types = dict.fromkeys(settings.SIBLING_TYPES, 0)
        for sibling in chunk.sibling_types:
            if sibling in types:
                types[sibling] += 1
        self.write(count)
        for name in settings.SIBLING_TYPES:
            self.write(types[name])
        if count > 0:
            for name in settings.SIBLING_TYPES:
                self.write(types[name] / count)
        else:
            self.skip(len(settings.SIBLING_TYPES))

    def write_ancestors(self, chunk: Chunk) -> None:
        self.write(bool(chunk.ancestors & Ancestor.ARTICLE))
        self.write(bool(chunk.ancestors & Ancestor.ASIDE))
        self.write(bool(chunk.ancestors & Ancestor.BLOCKQUOTE))
        self.write(bool(chunk.ancestors & Ancestor.LIST))

    def write_text_stat(self, chunk: Chunk) -> None:
        self.write(chunk.text.words)
        self.write(chunk.text.sentences)
        self.write(chunk.link_text)

    def write_text_stat_siblings(self, chunk: Chunk) -> None:
        for neighbor in (chunk.prev, chunk.next):
            if neighbor is not None:
                self.write(chunk.same_block(neighbor))
                self.write(neighbor.text.words)
                self.write(neighbor.text.sentences)
            else:
                self.skip(3)

    def write_class_stat(self, chunk: Chunk, classes: Mapping[str, TextStat]) -> None:
        best: TextStat | None = None
        for name in chunk.classes:
            stat = classes.get(name)
            if stat is None:
                continue
            # Truncated ratios, strict comparison: the first class wins ties
            if best is None or _words_ratio(stat) > _words_ratio(best):
                best = stat
        if best is not None:
            self.write(True)
            self.write(best.words_per_occurrence)
            self.write(best.sentences_per_occurrence)
        else:
            self.write(False)
            self.skip(2)

    def write_cluster_stat(self, chunk: Chunk, clusters: Mapping[Chunk, TextStat]) -> None:
        stat = clusters.get(chunk)
        if stat is None:
            self.skip(_WIDTHS["cluster_stat"])
            return
        self.write(stat.words)
        self.write(stat.sentences)
        self.write(stat.count)
        self.write(stat.words_per_occurrence)
        self.write(stat.sentences_per_occurrence)
