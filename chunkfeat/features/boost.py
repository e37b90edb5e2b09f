"""Boost feature encoder (10 slots per clustered chunk).

Combines a chunk's own text volume and class hints with the scores the first
classifier pass assigned to its cluster and cluster neighbours.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chunkfeat import settings
from chunkfeat.features.schema import BOOST_SCHEMA, SchemaError
from chunkfeat.features.vocabulary import GOOD_QUALITY_CLASSES, POOR_QUALITY_CLASSES
from chunkfeat.features.writer import FeatureVector, FeatureWriter, boost_vector

if TYPE_CHECKING:
    from chunkfeat.chunks import Chunk
    from chunkfeat.cluster import Cluster
    from chunkfeat.features.vocabulary import WordMatcher
    from chunkfeat.text import Text

logger = logging.getLogger(__name__)


class BoostFeatureWriter(FeatureWriter):
    """Fills boost feature vectors.

    The good/poor matchers are shared read-only, so one pair can serve any
    number of writers.
    """

    def __init__(
        self,
        good: WordMatcher | None = None,
        poor: WordMatcher | None = None,
    ) -> None:
        super().__init__()
        self.good = good or GOOD_QUALITY_CLASSES
        self.poor = poor or POOR_QUALITY_CLASSES

    def encode(
        self,
        chunk: Chunk,
        cluster: Cluster,
        title: Text | None,
        vector: FeatureVector | None = None,
    ) -> FeatureVector:
        if vector is None:
            vector = boost_vector()
        self.assign(vector)
        self.write_chunk(chunk)
        self.write_cluster(chunk, cluster)
        self.write_title_similarity(chunk, title)
        if not self.complete:
            raise SchemaError(
                f"boost encoding stopped at slot {self.pos} of {len(vector)}; "
                f"layout is {[f.name for f in BOOST_SCHEMA]}",
            )
        return vector

    def write_chunk(self, chunk: Chunk) -> None:
        self.write(chunk.link_text)
        self.write(chunk.text.words)
        self.write(chunk.text.sentences)
        self.write(self.good.any(chunk.classes))
        self.write(self.poor.any(chunk.classes))

    def write_cluster(self, chunk: Chunk, cluster: Cluster) -> None:
        i = cluster.index(chunk)
        self.write(cluster.score())
        if i is None:
            logger.debug("Chunk <%s> not found in its cluster of %d", chunk.tag, len(cluster))
            self.skip(1)
            self.write(settings.NO_NEIGHBOR_SCORE)
            self.write(settings.NO_NEIGHBOR_SCORE)
            return
        self.write(cluster.scores[i])
        if i > 0:
            self.write(cluster.scores[i - 1])
        else:
            self.write(settings.NO_NEIGHBOR_SCORE)
        # The last two positions both get the sentinel
        if i < len(cluster.scores) - 2:
            self.write(cluster.scores[i + 1])
        else:
            self.write(settings.NO_NEIGHBOR_SCORE)

    def write_title_similarity(self, chunk: Chunk, title: Text | None) -> None:
        if title is not None and chunk.tag in settings.TITLE_TAGS:
            self.write(chunk.text.similarity(title))
        else:
            self.skip(1)
