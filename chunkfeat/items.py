"""Pydantic output schema for encoded documents."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chunkfeat.settings import BOOST_FEATURE_CAP, CHUNK_FEATURE_CAP


class ChunkFeatures(BaseModel):
    """Both vector families for one chunk, at its document position."""

    index: int
    tag: str
    chunk: list[float]
    boost: list[float] | None = None  # None for chunks outside every cluster

    @field_validator("chunk")
    @classmethod
    def check_chunk_length(cls, v: list[float]) -> list[float]:
        if len(v) != CHUNK_FEATURE_CAP:
            raise ValueError(f"chunk vector must have {CHUNK_FEATURE_CAP} slots, got {len(v)}")
        return v

    @field_validator("boost")
    @classmethod
    def check_boost_length(cls, v: list[float] | None) -> list[float] | None:
        if v is not None and len(v) != BOOST_FEATURE_CAP:
            raise ValueError(f"boost vector must have {BOOST_FEATURE_CAP} slots, got {len(v)}")
        return v


class DocumentFeatures(BaseModel):
    """Feature vectors of every chunk of one document, in document order."""

    title: str = ""
    chunks: list[ChunkFeatures] = Field(default_factory=list)

    def matrix(self) -> list[list[float]]:
        """Chunk vectors as rows."""
        return [c.chunk for c in self.chunks]

    def boost_matrix(self) -> list[list[float]]:
        """Boost vectors of clustered chunks as rows."""
        return [c.boost for c in self.chunks if c.boost is not None]
