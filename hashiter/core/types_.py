from typing import Any, Iterator, Protocol, runtime_checkable


@runtime_checkable
class HashFunction(Protocol):
    """Deterministic base hash: the same key and seed always give the same integer."""

    def __call__(self, key: Any, seed: int) -> int:
        ...


class HashIterHasher(Protocol):
    def hash_iter(self, key: Any, k: int | None = None) -> Iterator[int]:
        ...


class BuildHashIterHasher(Protocol):
    def build_hash_iter_hasher(self) -> HashIterHasher:
        ...
