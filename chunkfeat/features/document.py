"""Encode every chunk of a document into both feature families.

Usage::

    from chunkfeat import Cluster, Text, encode_document

    features = encode_document(chunks, clusters, Text(title), max_workers=4)
    rows = features.matrix()
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from chunkfeat.features.boost import BoostFeatureWriter
from chunkfeat.features.chunk import ChunkFeatureWriter
from chunkfeat.items import ChunkFeatures, DocumentFeatures
from chunkfeat.stats import class_stats, cluster_stats

if TYPE_CHECKING:
    from chunkfeat.chunks import Chunk
    from chunkfeat.cluster import Cluster
    from chunkfeat.features.vocabulary import WordMatcher
    from chunkfeat.text import Text, TextStat

logger = logging.getLogger(__name__)


def _owning_clusters(clusters: list[Cluster]) -> dict[Chunk, Cluster]:
    owners: dict[Chunk, Cluster] = {}
    for cluster in clusters:
        for chunk in cluster.chunks:
            # cluster_stats already warns about repeated membership
            owners.setdefault(chunk, cluster)
    return owners


def encode_document(
    chunks: list[Chunk],
    clusters: list[Cluster],
    title: Text | None = None,
    *,
    max_workers: int = 1,
    good: WordMatcher | None = None,
    poor: WordMatcher | None = None,
) -> DocumentFeatures:
    """Encode *chunks* (document order) against *clusters* and *title*.

    Chunks that belong to no cluster get a chunk vector only.  With
    ``max_workers > 1`` chunks are encoded on a thread pool; each task uses its
    own writers, and results keep document order either way.

    Raises:
        ValueError: If *max_workers* is below 1.
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1; got {max_workers}")

    classes: dict[str, TextStat] = class_stats(chunks)
    per_cluster: dict[Chunk, TextStat] = cluster_stats(clusters)
    owners = _owning_clusters(clusters)

    def _encode_one(idx: int, chunk: Chunk) -> ChunkFeatures:
        chunk_vec = ChunkFeatureWriter().encode(chunk, classes, per_cluster)
        boost_vec = None
        cluster = owners.get(chunk)
        if cluster is not None:
            boost_vec = BoostFeatureWriter(good, poor).encode(chunk, cluster, title)
        return ChunkFeatures(index=idx, tag=chunk.tag, chunk=chunk_vec, boost=boost_vec)

    if max_workers == 1 or len(chunks) < 2:
        rows = [_encode_one(i, c) for i, c in enumerate(chunks)]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            rows = list(pool.map(_encode_one, range(len(chunks)), chunks))

    logger.debug(
        "Encoded %d chunks (%d clustered) across %d clusters",
        len(rows),
        sum(1 for r in rows if r.boost is not None),
        len(clusters),
    )
    return DocumentFeatures(
        title=title.value if title is not None else "",
        chunks=rows,
    )
