import random

import pytest

from hashiter.core.domain import NumericDomain, Width, U32, U64, U128


DOMAINS = [U32, U64, U128]


@pytest.mark.ut
@pytest.mark.parametrize("domain, bits", [(U32, 32), (U64, 64), (U128, 128)])
def test_max_matches_width(domain, bits):
    assert domain.MAX == 2**bits - 1
    assert domain.contains(domain.MAX)
    assert not domain.contains(domain.MAX + 1)
    assert not domain.contains(-1)


@pytest.mark.ut
def test_wrap_negative_is_twos_complement():
    assert U32.wrap(-1) == U32.MAX
    assert U64.wrap(-2) == U64.MAX - 1


@pytest.mark.ut
def test_wrap_truncates_high_bits():
    assert U32.wrap(2**32 + 7) == 7
    assert U64.wrap(2**64) == 0


@pytest.mark.ut
@pytest.mark.parametrize("domain", DOMAINS)
def test_wrapping_add_with_wrap(domain):
    assert domain.wrapping_add(domain.MAX - 3, 10) == 6  # wrap-around expected


@pytest.mark.ut
def test_wrapping_add_without_wrap():
    assert U64.wrapping_add(10, 5) == 15


@pytest.mark.ut
@pytest.mark.parametrize("domain", DOMAINS)
def test_wrapping_mul(domain):
    assert domain.wrapping_mul(domain.MAX, domain.MAX) == 1
    assert domain.wrapping_mul(3, 4) == 12


@pytest.mark.ut
def test_reduce_is_exclusive_upper_bound():
    assert U64.reduce(10, 10) == 0
    assert U64.reduce(9, 10) == 9
    assert U64.reduce(U64.MAX, U64.MAX) == 0


@pytest.mark.ut
@pytest.mark.parametrize("domain", DOMAINS)
def test_add_mod_at_upper_edge(domain):
    n = domain.MAX
    assert domain.add_mod(n - 1, n - 1, n) == n - 2
    assert domain.add_mod(n - 1, 1, n) == 0
    assert domain.add_mod(0, 0, n) == 0


@pytest.mark.ut
@pytest.mark.parametrize("domain", DOMAINS)
def test_add_mod_matches_exact_sum(domain):
    rnd = random.Random(42)
    for n in (1, 2, 7, 1_000_000_007, domain.MAX // 3, domain.MAX):
        for _ in range(200):
            a, b = rnd.randrange(n), rnd.randrange(n)
            assert domain.add_mod(a, b, n) == (a + b) % n


@pytest.mark.ut
@pytest.mark.parametrize("value", [Width.U64, "U64", "u64", "64", 64])
def test_width_parse(value):
    assert Width.parse(value) is Width.U64


@pytest.mark.ut
@pytest.mark.parametrize("value", ["U7", "16", 48])
def test_width_parse_rejects_unknown(value):
    with pytest.raises(ValueError):
        Width.parse(value)


@pytest.mark.ut
def test_width_domain():
    assert Width.U32.domain is U32
    assert Width.U128.domain == NumericDomain(128)
