from dataclasses import dataclass
from enum import Enum
from typing import Self


@dataclass(frozen=True, slots=True)
class NumericDomain:
    """
    NumericDomain defines a fixed-width unsigned integer space used for hash outputs.

    This type provides:
    - truncation of arbitrary Python integers into the width (two's complement)
    - wrapping arithmetic modulo 2^bits
    - reduction into [0, n) for an exclusive upper bound n
    - overflow-safe modular addition for values already reduced into [0, n)

    NumericDomain does not know anything about keys or hash functions.
    It only models the arithmetic properties of the width.
    """

    bits: int

    @property
    def MAX(self) -> int:
        """Largest representable value, 2^bits - 1."""
        return (1 << self.bits) - 1

    @property
    def mask(self) -> int:
        return self.MAX

    def contains(self, x: int) -> bool:
        return 0 <= x <= self.MAX

    def wrap(self, x: int) -> int:
        """
        Truncates x to the width.

        Negative integers map to their two's complement representation,
        so wrap(-1) == MAX.
        """
        return x & self.mask

    def wrapping_add(self, a: int, b: int) -> int:
        """Performs addition modulo 2^bits."""
        return (a + b) & self.mask

    def wrapping_mul(self, a: int, b: int) -> int:
        """Performs multiplication modulo 2^bits."""
        return (a * b) & self.mask

    @staticmethod
    def reduce(x: int, n: int) -> int:
        """Returns x mod n, a value in [0, n)."""
        return x % n

    @staticmethod
    def add_mod(a: int, b: int, n: int) -> int:
        """
        Returns (a + b) mod n for a, b in [0, n).

        The sum a + b is never formed when it would reach n, so with
        n <= MAX no intermediate value leaves the width.
        """
        if a >= n - b:
            return a - (n - b)
        return a + b

    def __repr__(self) -> str:
        return f"NumericDomain(u{self.bits})"


U32 = NumericDomain(32)
U64 = NumericDomain(64)
U128 = NumericDomain(128)


class Width(Enum):
    U32 = 32
    U64 = 64
    U128 = 128

    @property
    def domain(self) -> NumericDomain:
        return _DOMAINS[self]

    @classmethod
    def parse(cls, v: "Width | str | int") -> Self:
        """Accepts a Width, a name ("U64"), or a bit count (64 or "64")."""
        if isinstance(v, cls):
            return v
        if isinstance(v, str):
            v = v.strip()
            if v.isdigit():
                return cls(int(v))
            try:
                return cls[v.upper()]
            except KeyError:
                raise ValueError(f"{v!r} is not a valid {cls.__name__}") from None
        return cls(v)


_DOMAINS = {
    Width.U32: U32,
    Width.U64: U64,
    Width.U128: U128,
}
