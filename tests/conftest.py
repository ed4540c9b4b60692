import pytest

from foldkit import compare_by, count_divisors


@pytest.fixture
def divisor_less():
    """Less-than predicate ordering ints by how many divisors they have."""
    return compare_by(count_divisors)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("FOLDKIT_STRICT_ZIP", raising=False)
    monkeypatch.delenv("FOLDKIT_LOG_LEVEL", raising=False)
