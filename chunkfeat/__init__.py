"""chunkfeat - feature vectors for classifying article content in HTML pages.

Turns segmented text chunks and their clusters into the fixed-layout vectors
a trained content classifier expects: 36 slots per chunk and 10 "boost" slots
per clustered chunk.

Quick usage::

    from bs4 import BeautifulSoup
    from chunkfeat import Chunk, Cluster, Text, encode_document, link_chunks

    soup = BeautifulSoup(html, "lxml")
    chunks = link_chunks([Chunk.from_element(el) for el in soup.select("h1, p")])
    clusters = [Cluster(chunks=chunks, scores=[0.0] * len(chunks))]
    features = encode_document(chunks, clusters, Text(soup.title.get_text()))
    rows = features.matrix()
"""

from chunkfeat.chunks import Ancestor, Chunk, link_chunks
from chunkfeat.cluster import Cluster, ClusterError
from chunkfeat.features import (
    BoostFeatureWriter,
    ChunkFeatureWriter,
    PartialFeatureError,
    encode_document,
    load_vocabulary,
)
from chunkfeat.items import ChunkFeatures, DocumentFeatures
from chunkfeat.stats import class_stats, cluster_stats
from chunkfeat.text import Text, TextStat

__version__ = "0.1.0"
__all__ = [
    "Ancestor",
    "BoostFeatureWriter",
    "Chunk",
    "ChunkFeatureWriter",
    "ChunkFeatures",
    "Cluster",
    "ClusterError",
    "DocumentFeatures",
    "PartialFeatureError",
    "Text",
    "TextStat",
    "class_stats",
    "cluster_stats",
    "encode_document",
    "link_chunks",
    "load_vocabulary",
]
