import logging
from typing import Annotated, Any, Callable, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from hashiter.core.domain import Width
from hashiter.core.exception import ConfigurationError
from hashiter.infra.xxhash_builder import XxHash

logger = logging.getLogger("hashiter.core.config")

# Any seeds work; these only need to differ so the two base hashes differ.
DEFAULT_SEED1 = 12345
DEFAULT_SEED2 = 67890
DEFAULT_K = 1


class HasherConfig(BaseModel):
    """
    Immutable, validated configuration of a double hasher.

    A HasherConfig is only ever produced by create(), which validates it
    once. It holds no per-key state and may be shared between threads.
    """

    model_config = ConfigDict(frozen=True)

    width: Annotated[
        Width,
        Field(description="Width of the unsigned integers produced (u32, u64 or u128).")
    ]

    seed1: Annotated[
        int,
        Field(description="Seed handed to the first base hash, truncated to the width.", ge=0)
    ]

    seed2: Annotated[
        int,
        Field(description="Seed handed to the second base hash, truncated to the width.", ge=0)
    ]

    n: Annotated[
        int,
        Field(
            description=(
                "Exclusive upper bound of every hash point: values lie in [0, n).\n"
                "Defaults to the width maximum (2^bits - 1), so 2^bits - 1 itself\n"
                "is never produced."
            ),
            gt=0,
        )
    ]

    k: Annotated[
        int,
        Field(description="Number of hash points produced when hash_iter() is given no count.", ge=0)
    ]

    hash_builder1: Annotated[
        Callable[[Any, int], int],
        Field(description="First base hash, called as hash_builder1(key, seed1).")
    ]

    hash_builder2: Annotated[
        Callable[[Any, int], int],
        Field(description="Second base hash, called as hash_builder2(key, seed2).")
    ]

    @field_validator("width", mode="before")
    @classmethod
    def parse_width(cls, v):
        return Width.parse(v)

    @model_validator(mode="after")
    def check_fits_width(self) -> Self:
        domain = self.width.domain
        if self.n > domain.MAX:
            raise ValueError(f"modulus n={self.n} does not fit in {domain!r}")
        for name in ("seed1", "seed2"):
            if not domain.contains(getattr(self, name)):
                raise ValueError(f"{name} does not fit in {domain!r}")
        return self

    @classmethod
    def create(
        cls,
        *,
        width: Width | str | int = Width.U64,
        seed1: int = DEFAULT_SEED1,
        seed2: int = DEFAULT_SEED2,
        n: int | None = None,
        k: int = DEFAULT_K,
        hash_builder1: Callable[[Any, int], int] | None = None,
        hash_builder2: Callable[[Any, int], int] | None = None,
    ) -> Self:
        """
        Validates and returns a configuration, applying defaults.

        Seeds are truncated to the width; n defaults to the width maximum;
        missing hash builders default to xxHash of the matching width.
        Raises ConfigurationError on any invalid value (n <= 0 in particular).
        """
        try:
            width = Width.parse(width)
        except ValueError as e:
            raise ConfigurationError(f"Unsupported width: {width!r}") from e

        domain = width.domain
        default_hash = XxHash(width)

        try:
            config = cls(
                width=width,
                seed1=domain.wrap(seed1),
                seed2=domain.wrap(seed2),
                n=domain.MAX if n is None else n,
                k=k,
                hash_builder1=default_hash if hash_builder1 is None else hash_builder1,
                hash_builder2=default_hash if hash_builder2 is None else hash_builder2,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid hasher configuration: {e}") from e

        logger.debug(
            "Hasher configured: width=%s n=%d k=%d seeds=(%d, %d) hashes=(%r, %r)",
            config.width.name, config.n, config.k, config.seed1, config.seed2,
            config.hash_builder1, config.hash_builder2,
        )
        return config
