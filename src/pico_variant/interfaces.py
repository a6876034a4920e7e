"""Protocol interfaces for the pluggable parts of variant selection.

Both collaborators of ``VariantSelector`` are expressed as
``typing.Protocol`` classes so that any conforming implementation can be
injected, e.g. a fixed sequence of rolls in tests.
"""

from typing import Protocol


class RandomProvider(Protocol):
    """Source of rolls for random selection.

    ``ThreadLocalRandomProvider`` is the built-in implementation.
    Implementations used from several threads must be safe to call
    concurrently without external locking.
    """

    def next_int(self) -> int:
        """Return a non-negative integer roll.

        Returns:
            An int in ``[0, 2**31 - 1)``.
        """
        ...


class StableHasher(Protocol):
    """Fixed, non-randomized string hash used for consistent selection.

    The same key must hash to the same value across calls, processes and
    interpreter restarts, so the builtin ``hash()`` is not acceptable.
    """

    name: str

    def hash(self, key: str) -> int:
        """Hash the UTF-8 bytes of *key*.

        Args:
            key: The stable identifier (user id, device id, ...).

        Returns:
            The hash value as a Python int.
        """
        ...
