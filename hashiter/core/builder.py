import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Callable, Self

from hashiter.core.config import DEFAULT_K, DEFAULT_SEED1, DEFAULT_SEED2, HasherConfig
from hashiter.core.domain import Width
from hashiter.core.exception import ConfigurationError
from hashiter.core.hasher import DoubleHasher

if TYPE_CHECKING:
    from hashiter.bootstrap.config.settings import HashIterSettings

logger = logging.getLogger("hashiter.core.builder")


@dataclass(frozen=True, slots=True)
class DoubleHashBuilder:
    """
    Value-returning builder for DoubleHasher.

    The width is chosen when the builder is created and cannot be changed
    afterwards. Every with_*() call returns a new builder, leaving the
    original untouched, so a partially configured builder can be reused as
    a template:

        base = DoubleHashBuilder(Width.U32).with_n(1 << 20)
        a = base.with_seed1(1).build()
        b = base.with_seed1(2).build()

    Validation happens once, in build(). Unset values take their defaults:
    seeds 12345 / 67890, n = width maximum, xxHash base hashes.
    """

    width: Width = Width.U64
    seed1: int = DEFAULT_SEED1
    seed2: int = DEFAULT_SEED2
    n: int | None = None
    k: int = DEFAULT_K
    hash_builder1: Callable[[Any, int], int] | None = None
    hash_builder2: Callable[[Any, int], int] | None = None

    def __post_init__(self):
        try:
            width = Width.parse(self.width)
        except ValueError as e:
            raise ConfigurationError(f"Unsupported width: {self.width!r}") from e
        object.__setattr__(self, "width", width)

    def with_seed1(self, seed1: int) -> Self:
        return replace(self, seed1=seed1)

    def with_seed2(self, seed2: int) -> Self:
        return replace(self, seed2=seed2)

    def with_n(self, n: int) -> Self:
        return replace(self, n=n)

    def with_k(self, k: int) -> Self:
        return replace(self, k=k)

    def with_hash_builders(
        self,
        hash_builder1: Callable[[Any, int], int],
        hash_builder2: Callable[[Any, int], int],
    ) -> Self:
        return replace(self, hash_builder1=hash_builder1, hash_builder2=hash_builder2)

    def build(self) -> DoubleHasher:
        """Validates the accumulated settings and returns the hasher."""
        config = HasherConfig.create(
            width=self.width,
            seed1=self.seed1,
            seed2=self.seed2,
            n=self.n,
            k=self.k,
            hash_builder1=self.hash_builder1,
            hash_builder2=self.hash_builder2,
        )
        hasher = DoubleHasher(config)
        logger.debug("Built %r", hasher)
        return hasher

    def build_hash_iter_hasher(self) -> DoubleHasher:
        return self.build()

    @classmethod
    def from_settings(cls, settings: "HashIterSettings") -> Self:
        """Returns a builder preloaded from settings (env / YAML)."""
        builder = cls(settings.width).with_seed1(settings.seed1).with_seed2(settings.seed2).with_k(settings.k)
        if settings.n is not None:
            builder = builder.with_n(settings.n)
        return builder
