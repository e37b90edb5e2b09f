"""Document-wide lookup maps consumed by the chunk feature encoder.

Both maps are built once per document and treated as read-only snapshots
while vectors are encoded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chunkfeat.text import TextStat

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chunkfeat.chunks import Chunk
    from chunkfeat.cluster import Cluster

logger = logging.getLogger(__name__)


def class_stats(chunks: Iterable[Chunk]) -> dict[str, TextStat]:
    """Aggregate text statistics per CSS class name.

    A chunk listing the same class twice is counted once for it.
    """
    stats: dict[str, TextStat] = {}
    for chunk in chunks:
        for name in dict.fromkeys(chunk.classes):
            stats.setdefault(name, TextStat()).add(chunk.text)
    logger.debug("Collected statistics for %d CSS classes", len(stats))
    return stats


def cluster_stats(clusters: Iterable[Cluster]) -> dict[Chunk, TextStat]:
    """Map every clustered chunk to the text statistics of its whole cluster.

    A chunk listed in several clusters keeps the first cluster's statistics.
    """
    stats: dict[Chunk, TextStat] = {}
    for cluster in clusters:
        stat = TextStat()
        for chunk in cluster.chunks:
            stat.add(chunk.text)
        for chunk in cluster.chunks:
            if chunk in stats:
                logger.warning(
                    "Chunk <%s> listed in more than one cluster; keeping the first",
                    chunk.tag,
                )
                continue
            stats[chunk] = stat
    return stats
