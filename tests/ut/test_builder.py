import pytest
from pydantic import ValidationError

from hashiter.core.builder import DoubleHashBuilder
from hashiter.core.config import DEFAULT_SEED1, DEFAULT_SEED2, HasherConfig
from hashiter.core.domain import Width, U32, U64
from hashiter.core.exception import ConfigurationError
from hashiter.core.hasher import DoubleHasher
from hashiter.infra.xxhash_builder import XxHash


def constant(value: int):
    def hash_fn(key, seed):
        return value
    return hash_fn


@pytest.mark.ut
def test_defaults():
    config = DoubleHashBuilder().build().config
    assert config.width is Width.U64
    assert (config.seed1, config.seed2) == (DEFAULT_SEED1, DEFAULT_SEED2) == (12345, 67890)
    assert config.n == U64.MAX
    assert config.hash_builder1 == XxHash(Width.U64)
    assert config.hash_builder2 == XxHash(Width.U64)


@pytest.mark.ut
def test_default_n_follows_width():
    assert DoubleHashBuilder(Width.U32).build().n == U32.MAX
    assert DoubleHashBuilder("U128").build().width is Width.U128


@pytest.mark.ut
def test_overrides():
    hasher = (
        DoubleHashBuilder(Width.U32)
        .with_seed1(1)
        .with_seed2(2)
        .with_n(1024)
        .with_k(7)
        .build()
    )
    config = hasher.config
    assert (config.seed1, config.seed2, config.n, config.k) == (1, 2, 1024, 7)
    assert config.hash_builder1 == XxHash(Width.U32)


@pytest.mark.ut
def test_builder_returns_new_values():
    base = DoubleHashBuilder().with_n(100)
    a = base.with_seed1(1)
    b = base.with_seed1(2)

    assert base.seed1 == DEFAULT_SEED1
    assert a.seed1 == 1 and b.seed1 == 2
    assert a.n == b.n == 100


@pytest.mark.ut
def test_builder_is_frozen():
    builder = DoubleHashBuilder()
    with pytest.raises(AttributeError):
        builder.seed1 = 1  # type: ignore[misc]


@pytest.mark.ut
def test_seeds_truncated_to_width():
    config = DoubleHashBuilder(Width.U32).with_seed1(2**32 + 3).with_seed2(-1).build().config
    assert config.seed1 == 3
    assert config.seed2 == U32.MAX


@pytest.mark.ut
def test_custom_hash_builders():
    hasher = DoubleHashBuilder().with_hash_builders(constant(10), constant(3)).with_n(1000).build()
    assert list(hasher.hash_iter("anything", 4)) == [10, 13, 17, 23]


@pytest.mark.ut
def test_zero_modulus_fails_at_build():
    builder = DoubleHashBuilder().with_n(0)
    with pytest.raises(ConfigurationError):
        builder.build()


@pytest.mark.ut
@pytest.mark.parametrize("n", [-5, 2**32])
def test_modulus_must_fit_width(n):
    with pytest.raises(ConfigurationError):
        DoubleHashBuilder(Width.U32).with_n(n).build()


@pytest.mark.ut
def test_negative_default_count():
    with pytest.raises(ConfigurationError):
        DoubleHashBuilder().with_k(-1).build()


@pytest.mark.ut
def test_non_callable_hash_builder():
    with pytest.raises(ConfigurationError):
        DoubleHashBuilder().with_hash_builders(42, constant(1)).build()


@pytest.mark.ut
def test_unsupported_width():
    with pytest.raises(ConfigurationError):
        DoubleHashBuilder("U7")


@pytest.mark.ut
def test_build_hash_iter_hasher():
    hasher = DoubleHashBuilder().build_hash_iter_hasher()
    assert isinstance(hasher, DoubleHasher)


@pytest.mark.ut
def test_config_is_immutable():
    config = HasherConfig.create()
    with pytest.raises(ValidationError):
        config.n = 10  # type: ignore[misc]


@pytest.mark.ut
def test_config_create_wraps_validation_error():
    with pytest.raises(ConfigurationError) as exc:
        HasherConfig.create(n=0)
    assert exc.value.__cause__ is not None
