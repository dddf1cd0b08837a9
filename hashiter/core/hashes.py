from typing import Self

from hashiter.core.domain import NumericDomain, U64
from hashiter.core.exception import ConfigurationError


def point(hash1: int, hash2: int, i: int, n: int) -> int:
    """
    Returns the i-th enhanced double hashing point by direct evaluation:

        h(i) = h1 + i * h2 + (i^3 - i) / 6  (mod n)

    (i^3 - i) = (i - 1) * i * (i + 1) is a product of three consecutive
    integers, hence always divisible by 6.
    """
    return (hash1 + i * hash2 + (i ** 3 - i) // 6) % n


class Hashes:
    """
    Iterator over k hash points derived from two base hashes.

    Implements enhanced double hashing as described by Dillinger & Manolios,
    "Bloom Filters in Probabilistic Verification" (section 5.1):

        x, y := h1 MOD n, h2 MOD n
        f[0] := x
        for i := 1 .. k-1
            x := (x + y) MOD n
            y := (y + i) MOD n
            f[i] := x

    This is forward differencing of the cubic h(i): x holds the point, y its
    first difference (h2 + i(i-1)/2), and d the second difference (i). The
    third difference is the constant 1. Every accumulator stays in [0, n),
    so each step is a constant number of overflow-safe modular additions and
    the output matches point() exactly for any n.

    The iterator is single-pass: once exhausted it stays exhausted. Hashing
    the same key again requires a fresh instance.
    """

    __slots__ = ("_domain", "_n", "_k", "_cnt", "_x", "_y", "_d", "_one")

    def __init__(
        self,
        hash1: int,
        hash2: int,
        n: int,
        k: int,
        domain: NumericDomain = U64,
    ) -> None:
        if not 0 < n <= domain.MAX:
            raise ConfigurationError(f"Invalid modulus n={n} for {domain!r}")
        if k < 0:
            raise ValueError(f"Number of hash points must be >= 0, got {k}")

        self._domain = domain
        self._n = n
        self._k = k
        self._cnt = 0

        self._x = domain.reduce(domain.wrap(hash1), n)
        self._y = domain.reduce(domain.wrap(hash2), n)
        self._d = 0
        self._one = domain.reduce(1, n)

    @property
    def n(self) -> int:
        return self._n

    @property
    def remaining(self) -> int:
        return self._k - self._cnt

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> int:
        if self._cnt >= self._k:
            raise StopIteration

        if self._cnt > 0:
            add_mod, n = self._domain.add_mod, self._n
            self._d = add_mod(self._d, self._one, n)
            self._x = add_mod(self._x, self._y, n)
            self._y = add_mod(self._y, self._d, n)

        self._cnt += 1
        return self._x

    def __length_hint__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        return f"Hashes(n={self._n}, k={self._k}, produced={self._cnt}, domain={self._domain!r})"
