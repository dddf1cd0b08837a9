from pathlib import Path
from typing import Annotated, Self

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from hashiter.core.config import DEFAULT_K, DEFAULT_SEED1, DEFAULT_SEED2
from hashiter.core.domain import Width


class HashIterSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HASHITER_", extra="ignore")

    width: Annotated[
        Width,
        Field(
            description=(
                "Width of the produced hash values.\n"
                "Selects both the integer domain and the default base hash:\n"
                "  U32  → XXH32\n"
                "  U64  → XXH3 64-bit (default)\n"
                "  U128 → XXH3 128-bit\n\n"
                "Names (U64) and bit counts (64) are both accepted."
            ),
            default=Width.U64
        )
    ]

    seed1: Annotated[
        int,
        Field(
            description=(
                "Seed of the first base hash.\n"
                "Changing it changes every produced sequence. Truncated to the width."
            ),
            default=DEFAULT_SEED1
        )
    ]

    seed2: Annotated[
        int,
        Field(
            description=(
                "Seed of the second base hash.\n"
                "Must differ from seed1 when the default base hash is used, otherwise\n"
                "h1 == h2 and the sequence degenerates. Truncated to the width."
            ),
            default=DEFAULT_SEED2
        )
    ]

    n: Annotated[
        int | None,
        Field(
            description=(
                "Exclusive upper bound of the produced values: every value lies in [0, n).\n"
                "Typically the table size or the number of bits of a Bloom filter.\n"
                "Must be > 0 and fit in the width. Defaults to the width maximum."
            ),
            default=None
        )
    ]

    k: Annotated[
        int,
        Field(
            description="Number of hash points generated per key when no count is given.",
            default=DEFAULT_K
        )
    ]

    @field_validator("width", mode="before")
    @classmethod
    def parse_width(cls, v):
        return Width.parse(v)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, env_settings

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """
        Loads settings from a YAML file.

        Environment variables still take precedence over the file.
        """
        file_values = YamlConfigSettingsSource(cls, yaml_file=path)()
        env_values = cls().model_dump(exclude_unset=True)
        return cls(**{**file_values, **env_values})
