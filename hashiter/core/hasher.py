from typing import Any, Callable, Self

from hashiter.core.config import HasherConfig
from hashiter.core.domain import Width
from hashiter.core.hashes import Hashes


class DoubleHasher:
    """
    Enhanced double hashing hasher.

    For each key it computes the two base hashes once and returns a Hashes
    iterator over the derived hash points. A DoubleHasher is immutable and
    can serve any number of keys, from any number of threads; the iterators
    it returns are not shared and must each be consumed by a single thread.
    """

    __slots__ = ("_config",)

    def __init__(self, config: HasherConfig | None = None) -> None:
        self._config = HasherConfig.create() if config is None else config

    @classmethod
    def with_hash_builders(
        cls,
        hash_builder1: Callable[[Any, int], int],
        hash_builder2: Callable[[Any, int], int],
        n: int | None = None,
        *,
        width: Width | str | int = Width.U64,
        **kwargs,
    ) -> Self:
        """Constructs a hasher around a caller-supplied pair of base hashes."""
        config = HasherConfig.create(
            width=width,
            n=n,
            hash_builder1=hash_builder1,
            hash_builder2=hash_builder2,
            **kwargs,
        )
        return cls(config)

    @property
    def config(self) -> HasherConfig:
        return self._config

    @property
    def width(self) -> Width:
        return self._config.width

    @property
    def n(self) -> int:
        return self._config.n

    def base_hashes(self, key: Any) -> tuple[int, int]:
        """Returns (h1, h2) for the key, truncated to the configured width."""
        config = self._config
        domain = config.width.domain
        hash1 = config.hash_builder1(key, config.seed1)
        hash2 = config.hash_builder2(key, config.seed2)
        return domain.wrap(hash1), domain.wrap(hash2)

    def hash_iter(self, key: Any, k: int | None = None) -> Hashes:
        """
        Returns a lazy iterator over k hash points of key, each in [0, n).

        When k is omitted the configured default count is used.
        """
        if k is None:
            k = self._config.k
        if k < 0:
            raise ValueError(f"Number of hash points must be >= 0, got {k}")

        hash1, hash2 = self.base_hashes(key)
        return Hashes(hash1, hash2, self._config.n, k, self._config.width.domain)

    def __repr__(self) -> str:
        c = self._config
        return f"DoubleHasher(width={c.width.name}, n={c.n}, k={c.k}, seeds=({c.seed1}, {c.seed2}))"
