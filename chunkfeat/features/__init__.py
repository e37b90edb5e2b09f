"""Feature sub-package: fixed-layout vectors for the content classifier."""

from .boost import BoostFeatureWriter
from .chunk import ChunkFeatureWriter
from .document import encode_document
from .schema import BOOST_SCHEMA, CHUNK_SCHEMA, SchemaError, slot_names
from .vocabulary import (
    GOOD_QUALITY_CLASSES,
    POOR_QUALITY_CLASSES,
    VocabularyError,
    WordMatcher,
    load_vocabulary,
)
from .writer import FeatureWriter, PartialFeatureError, boost_vector, chunk_vector

__all__ = [
    "BOOST_SCHEMA",
    "CHUNK_SCHEMA",
    "GOOD_QUALITY_CLASSES",
    "POOR_QUALITY_CLASSES",
    "BoostFeatureWriter",
    "ChunkFeatureWriter",
    "FeatureWriter",
    "PartialFeatureError",
    "SchemaError",
    "VocabularyError",
    "WordMatcher",
    "boost_vector",
    "chunk_vector",
    "encode_document",
    "load_vocabulary",
    "slot_names",
]
