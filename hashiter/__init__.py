from hashiter.core.builder import DoubleHashBuilder
from hashiter.core.config import HasherConfig
from hashiter.core.domain import NumericDomain, Width, U32, U64, U128
from hashiter.core.exception import ConfigurationError, HashIterError
from hashiter.core.hasher import DoubleHasher
from hashiter.core.hashes import Hashes, point
from hashiter.core.types_ import BuildHashIterHasher, HashFunction, HashIterHasher
from hashiter.infra.xxhash_builder import XxHash

__all__ = [
    "BuildHashIterHasher",
    "ConfigurationError",
    "DoubleHashBuilder",
    "DoubleHasher",
    "HashFunction",
    "HashIterError",
    "HashIterHasher",
    "HasherConfig",
    "Hashes",
    "NumericDomain",
    "U32",
    "U64",
    "U128",
    "Width",
    "XxHash",
    "point",
]
