"""Cursor-based writer over a fixed-capacity feature vector."""

from __future__ import annotations

from chunkfeat.settings import BOOST_FEATURE_CAP, CHUNK_FEATURE_CAP

# A feature vector is a plain list of floats with a fixed length
FeatureVector = list[float]


class PartialFeatureError(RuntimeError):
    """Raised when a writer is re-bound before its vector was fully written.

    This is a bug in the caller's encoding sequence, never a data problem.
    """

    def __init__(self, position: int, capacity: int) -> None:
        super().__init__(
            f"partially filled feature: cursor at {position} of {capacity}",
        )
        self.position = position
        self.capacity = capacity


def chunk_vector() -> FeatureVector:
    return [0.0] * CHUNK_FEATURE_CAP


def boost_vector() -> FeatureVector:
    return [0.0] * BOOST_FEATURE_CAP


class FeatureWriter:
    """Writes observations into one bound vector at a time.

    Slots that are skipped keep their zero default.  One writer per thread:
    the cursor is not synchronised.
    """

    def __init__(self) -> None:
        self.vector: FeatureVector | None = None
        self.pos = 0

    @property
    def complete(self) -> bool:
        return self.vector is not None and self.pos == len(self.vector)

    def assign(self, vector: FeatureVector) -> None:
        """Bind *vector* and reset the cursor."""
        if self.vector is not None and self.pos != len(self.vector):
            raise PartialFeatureError(self.pos, len(self.vector))
        self.vector = vector
        self.pos = 0

    def _store(self, value: float | int | bool, index: int) -> None:
        if self.vector is None:
            raise RuntimeError("no feature vector assigned")
        if not 0 <= index < len(self.vector):
            raise IndexError(
                f"feature slot {index} out of range for capacity {len(self.vector)}",
            )
        self.vector[index] = float(value)

    def write(self, value: float | int | bool) -> None:
        """Write *value* at the cursor and advance by one."""
        self._store(value, self.pos)
        self.pos += 1

    def write_at(self, value: float | int | bool, offset: int) -> None:
        """Write *value* at ``cursor + offset`` without moving the cursor."""
        self._store(value, self.pos + offset)

    def skip(self, n: int) -> None:
        self.pos += n
