"""Cluster model: adjacent chunks scored together as one candidate region."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chunkfeat.chunks import Chunk


class ClusterError(ValueError):
    """Raised when a cluster's chunks and scores are not aligned."""


@dataclass
class Cluster:
    """Ordered chunks plus one score per chunk, in the same order.

    Position lookup is a linear identity search; clusters are expected to
    hold a handful to a few dozen chunks.
    """

    chunks: list[Chunk]
    scores: list[float]

    def __post_init__(self) -> None:
        if not self.chunks:
            raise ClusterError("cluster must contain at least one chunk")
        if len(self.chunks) != len(self.scores):
            raise ClusterError(
                f"{len(self.chunks)} chunks but {len(self.scores)} scores",
            )
        if len({id(c) for c in self.chunks}) != len(self.chunks):
            raise ClusterError("chunk listed more than once in cluster")

    def __len__(self) -> int:
        return len(self.chunks)

    def score(self) -> float:
        """Aggregate score: mean of the per-chunk scores."""
        return sum(self.scores) / len(self.scores)

    def index(self, chunk: Chunk) -> int | None:
        """Position of *chunk* in this cluster, or None if it isn't a member."""
        for i, member in enumerate(self.chunks):
            if member is chunk:
                return i
        return None

    def append(self, chunk: Chunk, score: float) -> None:
        if self.index(chunk) is not None:
            raise ClusterError("chunk listed more than once in cluster")
        self.chunks.append(chunk)
        self.scores.append(score)
