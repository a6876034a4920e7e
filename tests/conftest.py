import pytest

from pico_variant.config import SelectorConfig
from pico_variant.hashing import Fnv1a32Hasher
from pico_variant.model import Experiment, Variant
from pico_variant.randomness import SequenceRandomProvider, ThreadLocalRandomProvider
from pico_variant.selector import VariantSelector, set_default_selector


class FixedHasher:
    """Hasher stub that ignores the key and returns a fixed value."""

    name = "fixed"

    def __init__(self, value: int):
        self.value = value

    def hash(self, key: str) -> int:
        return self.value


@pytest.fixture
def half_split():
    """Create an experiment with two 50/50 variants."""
    return Experiment("half_split", [Variant("A", 50), Variant("B", 50)])


@pytest.fixture
def three_way():
    """Create an experiment with a 25/25/50 split."""
    return Experiment("three_way").add_variant("A", 25).add_variant("B", 25).add_variant("C", 50)


@pytest.fixture
def empty_experiment():
    """Create an experiment with no variants."""
    return Experiment("empty")


@pytest.fixture
def seeded_selector():
    """Create a selector with a reproducible random source."""
    return VariantSelector(
        random_provider=ThreadLocalRandomProvider(seed=1234),
        hasher=Fnv1a32Hasher(),
        config=SelectorConfig(seed=1234),
    )


@pytest.fixture
def make_roll_selector():
    """Build selectors whose random rolls come from a fixed sequence."""
    def _make(*rolls, strict_total=False):
        return VariantSelector(
            random_provider=SequenceRandomProvider(rolls),
            hasher=Fnv1a32Hasher(),
            config=SelectorConfig(strict_total=strict_total),
        )
    return _make


@pytest.fixture
def make_hash_selector():
    """Build selectors whose consistent rolls come from a fixed hash value."""
    def _make(value):
        return VariantSelector(
            random_provider=SequenceRandomProvider([0]),
            hasher=FixedHasher(value),
            config=SelectorConfig(),
        )
    return _make


@pytest.fixture
def reset_default_selector():
    """Restore the process-wide selector after the test."""
    set_default_selector(None)
    yield
    set_default_selector(None)
