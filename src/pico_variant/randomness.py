"""Randomness providers for random variant selection.

``ThreadLocalRandomProvider`` gives every calling thread its own
``random.Random`` instance.  Per-thread generators are seeded from a single
shared seed source; the shared source is only touched (under a lock) the
first time a thread draws, so the hot path is lock-free and concurrent
threads never share generator state.
"""

import itertools
import random
import threading
from typing import Iterable, Optional

from .exceptions import InvalidArgumentError
from .logging import get_logger

logger = get_logger(__name__)

MAX_ROLL = 2**31 - 1
"""int: Exclusive upper bound of the rolls returned by ``next_int``."""


class ThreadLocalRandomProvider:
    """Thread-safe roll source with one lazily seeded generator per thread.

    Args:
        seed: Seed of the shared seed source.  With a seed, the sequence of
            per-thread seeds is reproducible; without one it is seeded from
            the operating system.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed_lock = threading.Lock()
        self._seed_source = random.Random(seed)
        self._local = threading.local()

    def _thread_generator(self) -> random.Random:
        generator = getattr(self._local, "generator", None)
        if generator is None:
            with self._seed_lock:
                thread_seed = self._seed_source.getrandbits(32)
            generator = random.Random(thread_seed)
            self._local.generator = generator
            logger.debug(
                "Seeded random generator for thread %s", threading.current_thread().name
            )
        return generator

    def next_int(self) -> int:
        return self._thread_generator().randrange(MAX_ROLL)

    def reseed(self, seed: Optional[int] = None) -> None:
        """Reset the shared seed source.

        The calling thread drops its generator and will be reseeded on its
        next draw.  Other threads keep the generator they already own.
        """
        with self._seed_lock:
            self._seed_source.seed(seed)
        self._local.generator = None


class SequenceRandomProvider:
    """Deterministic roll source that cycles over a fixed list of values.

    Meant as a drop-in substitute for tests and simulations.  Not
    thread-safe.
    """

    def __init__(self, values: Iterable[int]):
        rolls = list(values)
        if not rolls:
            raise InvalidArgumentError("SequenceRandomProvider needs at least one value.")
        for roll in rolls:
            if isinstance(roll, bool) or not isinstance(roll, int) or roll < 0:
                raise InvalidArgumentError(f"Rolls must be non-negative integers, got {roll!r}.")
        self.values = rolls
        self._cycle = itertools.cycle(rolls)

    def next_int(self) -> int:
        return next(self._cycle)
