"""Weighted variant selection.

Both selection modes share one cumulative walk (``select_by_roll``) and
differ only in where the roll comes from:

* ``choose_random_variant`` draws it from a ``RandomProvider``;
* ``choose_consistent_variant`` derives it from a ``StableHasher`` applied
  to a stable key, so the same key always lands on the same variant.

The roll is normalized modulo the total weight and the variants are walked
in experiment order.  The first variant whose cumulative weight is ``>=``
the normalized roll wins, so a roll exactly on a boundary resolves to the
variant that ends there.
"""

import threading
from typing import Iterable, Optional

from pico_ioc import component

from .config import MAX_WEIGHT, SelectorConfig
from .exceptions import InvalidArgumentError, InvalidOperationError
from .hashing import get_hasher
from .interfaces import RandomProvider, StableHasher
from .logging import get_logger
from .model import Experiment, Variant
from .randomness import ThreadLocalRandomProvider

logger = get_logger(__name__)

INVALID_EXPERIMENT_MESSAGE = "Invalid experiment configuration. Make sure that the experiment has at least 1 variant."


def select_by_roll(variants: Iterable[Variant], roll: int, total_weight: int) -> Variant:
    """Walk the cumulative weights and return the variant hit by *roll*.

    Args:
        variants: Variants in experiment order.
        roll: Any non-negative integer; normalized modulo *total_weight*.
        total_weight: Sum of the variant weights.

    Returns:
        The first variant whose cumulative weight is ``>=`` the normalized roll.

    Raises:
        InvalidOperationError: If *total_weight* is not positive, or if the
            walk ends without a match.
    """
    if total_weight <= 0:
        raise InvalidOperationError("Invalid experiment configuration: no valid total weight.")

    normalized_roll = roll % total_weight
    cumulative = 0
    for variant in variants:
        cumulative += variant.weight
        if normalized_roll <= cumulative:
            return variant

    # Unreachable while total_weight matches the variants walked.
    raise InvalidOperationError("Invalid experiment configuration.")


@component(scope="singleton")
class VariantSelector:
    """Chooses variants from experiments, randomly or consistently per key.

    The selector holds no per-experiment state and can be shared by all
    threads.  Randomness is thread-safe when the injected provider is (the
    default ``ThreadLocalRandomProvider`` is).

    Example:
        >>> selector = container.get(VariantSelector)
        >>> experiment = Experiment("banner").add_variant("blue", 25).add_variant("red", 75)
        >>> selector.choose_consistent_variant(experiment, "user-42") in experiment
        True
    """

    def __init__(self, random_provider: RandomProvider, hasher: StableHasher, config: SelectorConfig):
        self.random_provider = random_provider
        self.hasher = hasher
        self.config = config

    def _checked_total_weight(self, experiment: Experiment) -> int:
        if not experiment.is_valid():
            logger.debug("Experiment '%s' has no variants", experiment.name)
            raise InvalidOperationError(INVALID_EXPERIMENT_MESSAGE)

        total = experiment.total_weight
        if self.config.strict_total and total != MAX_WEIGHT:
            logger.debug("Experiment '%s' weights sum to %d, expected %d", experiment.name, total, MAX_WEIGHT)
            raise InvalidOperationError(
                f"Invalid experiment configuration: variant weights must sum to {MAX_WEIGHT}, got {total}."
            )
        return total

    def choose_random_variant(self, experiment: Experiment) -> Variant:
        """Choose a variant at random, honouring the configured weights.

        Over many calls, a variant is chosen with probability close to
        ``weight / total_weight``.

        Args:
            experiment: The experiment to choose from.

        Returns:
            One of the experiment's variants.

        Raises:
            InvalidOperationError: If the experiment has no variants or no
                usable total weight.
        """
        total = self._checked_total_weight(experiment)
        roll = self.random_provider.next_int()
        variant = select_by_roll(experiment.variants, roll, total)
        logger.debug("Experiment '%s': random roll %d chose '%s'", experiment.name, roll, variant.name)
        return variant

    def choose_consistent_variant(self, experiment: Experiment, key: str) -> Variant:
        """Choose a variant deterministically for a stable key.

        The same experiment configuration (weights and order) and the same
        key always yield the same variant, across calls and restarts.

        Args:
            experiment: The experiment to choose from.
            key: Stable identifier such as a user id.

        Returns:
            One of the experiment's variants.

        Raises:
            InvalidArgumentError: If *key* is None, empty or whitespace.
            InvalidOperationError: If the experiment has no variants or no
                usable total weight.
        """
        if not isinstance(key, str) or not key.strip():
            raise InvalidArgumentError("Key cannot be None, empty or whitespace.")

        total = self._checked_total_weight(experiment)
        roll = abs(self.hasher.hash(key))
        variant = select_by_roll(experiment.variants, roll, total)
        logger.debug(
            "Experiment '%s': %s roll %d for key chose '%s'", experiment.name, self.hasher.name, roll, variant.name
        )
        return variant


_default_lock = threading.Lock()
_default_selector: Optional[VariantSelector] = None


def create_selector(config: Optional[SelectorConfig] = None) -> VariantSelector:
    """Build a selector outside of a container from a ``SelectorConfig``."""
    config = config or SelectorConfig()
    return VariantSelector(
        random_provider=ThreadLocalRandomProvider(config.seed),
        hasher=get_hasher(config.hash_algorithm),
        config=config,
    )


def get_default_selector() -> VariantSelector:
    """Return the process-wide selector, building it on first use.

    The default selector is configured from ``PICO_VARIANT_*`` environment
    variables.  It lives for the whole process and needs no teardown.
    """
    global _default_selector
    if _default_selector is None:
        with _default_lock:
            if _default_selector is None:
                _default_selector = create_selector(SelectorConfig.from_env())
    return _default_selector


def set_default_selector(selector: Optional[VariantSelector]) -> None:
    """Replace the process-wide selector; ``None`` rebuilds it on next use."""
    global _default_selector
    with _default_lock:
        _default_selector = selector
