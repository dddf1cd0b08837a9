from typing import Any, Callable

import xxhash

from hashiter.core.domain import Width, U32, U64
from hashiter.infra.msgpack_serializer import KeySerializer


_ALGORITHMS: dict[Width, Callable[..., int]] = {
    Width.U32: xxhash.xxh32_intdigest,
    Width.U64: xxhash.xxh3_64_intdigest,
    Width.U128: xxhash.xxh3_128_intdigest,
}


class XxHash:
    """
    Default base hash: xxHash with the output width matching the domain.

    - u32  → XXH32 (32-bit seed)
    - u64  → XXH3 64-bit (64-bit seed)
    - u128 → XXH3 128-bit (64-bit seed)

    Two instances called with distinct seeds give two independent-looking
    values for the same key, which is all double hashing needs.
    """

    __slots__ = ("_width", "_fn")

    def __init__(self, width: Width = Width.U64) -> None:
        self._width = width
        self._fn = _ALGORITHMS[width]

    @property
    def width(self) -> Width:
        return self._width

    def seed_for(self, seed: int) -> int:
        """Fits an arbitrary seed into the algorithm's seed width."""
        if self._width is Width.U32:
            return U32.wrap(seed)
        seed = seed & Width.U128.domain.mask
        return U64.wrap(seed ^ (seed >> 64))

    def __call__(self, key: Any, seed: int) -> int:
        return self._fn(KeySerializer.serialize(key), seed=self.seed_for(seed))

    def __eq__(self, other) -> bool:
        return isinstance(other, XxHash) and self._width is other._width

    def __hash__(self) -> int:
        return hash(("xxhash", self._width))

    def __repr__(self) -> str:
        return f"XxHash({self._width.name})"
