import threading

import pytest

from pico_variant.exceptions import InvalidArgumentError
from pico_variant.randomness import MAX_ROLL, SequenceRandomProvider, ThreadLocalRandomProvider


class TestThreadLocalRandomProvider:
    def test_values_within_range(self):
        provider = ThreadLocalRandomProvider()
        for _ in range(1000):
            value = provider.next_int()
            assert 0 <= value < MAX_ROLL

    def test_generates_different_values(self):
        provider = ThreadLocalRandomProvider()
        values = {provider.next_int() for _ in range(100)}
        assert len(values) > 1

    def test_same_seed_same_sequence(self):
        a = ThreadLocalRandomProvider(seed=42)
        b = ThreadLocalRandomProvider(seed=42)
        assert [a.next_int() for _ in range(10)] == [b.next_int() for _ in range(10)]

    def test_different_seed_different_sequence(self):
        a = ThreadLocalRandomProvider(seed=1)
        b = ThreadLocalRandomProvider(seed=2)
        assert [a.next_int() for _ in range(10)] != [b.next_int() for _ in range(10)]

    def test_reseed_restarts_calling_thread(self):
        provider = ThreadLocalRandomProvider(seed=7)
        first = [provider.next_int() for _ in range(5)]
        provider.reseed(7)
        assert [provider.next_int() for _ in range(5)] == first

    def test_each_thread_owns_a_generator(self):
        provider = ThreadLocalRandomProvider(seed=99)
        generators = {}
        barrier = threading.Barrier(8)

        def worker(idx):
            barrier.wait()
            provider.next_int()
            generators[idx] = provider._local.generator

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({id(g) for g in generators.values()}) == 8

    def test_concurrent_draws_do_not_cluster(self):
        provider = ThreadLocalRandomProvider()
        results = {}
        barrier = threading.Barrier(16)

        def worker(idx):
            barrier.wait()
            results[idx] = [provider.next_int() for _ in range(200)]

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 16
        all_values = [v for values in results.values() for v in values]
        assert all(0 <= v < MAX_ROLL for v in all_values)
        # Each thread draws from its own independently seeded stream.
        assert len({tuple(values) for values in results.values()}) == 16
        assert len({values[0] for values in results.values()}) > 1


class TestSequenceRandomProvider:
    def test_cycles_over_values(self):
        provider = SequenceRandomProvider([3, 1, 4])
        assert [provider.next_int() for _ in range(7)] == [3, 1, 4, 3, 1, 4, 3]

    def test_accepts_generator(self):
        provider = SequenceRandomProvider(i for i in range(2))
        assert provider.values == [0, 1]

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError):
            SequenceRandomProvider([])

    @pytest.mark.parametrize("value", [-1, 1.5, "3", True])
    def test_bad_values_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            SequenceRandomProvider([1, value])
