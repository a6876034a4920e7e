from .config import SelectorConfig, MIN_WEIGHT, MAX_WEIGHT
from .model import Variant, Experiment
from .interfaces import RandomProvider, StableHasher
from .randomness import ThreadLocalRandomProvider, SequenceRandomProvider
from .hashing import Fnv1a32Hasher, Fnv1a64Hasher, Sha256Hasher, get_hasher
from .selector import VariantSelector, select_by_roll, create_selector, get_default_selector, set_default_selector
from .factory import SelectionInfrastructureFactory
from .validation import ExperimentValidator, ValidationReport, ValidationIssue, Severity
from .logging import configure_logging, get_logger
from .exceptions import (
    VariantError,
    InvalidArgumentError,
    WeightOutOfRangeError,
    InvalidOperationError,
    IndexOutOfRangeError,
)

__all__ = [
    "SelectorConfig",
    "MIN_WEIGHT",
    "MAX_WEIGHT",
    "Variant",
    "Experiment",
    "RandomProvider",
    "StableHasher",
    "ThreadLocalRandomProvider",
    "SequenceRandomProvider",
    "Fnv1a32Hasher",
    "Fnv1a64Hasher",
    "Sha256Hasher",
    "get_hasher",
    "VariantSelector",
    "select_by_roll",
    "create_selector",
    "get_default_selector",
    "set_default_selector",
    "SelectionInfrastructureFactory",
    "ExperimentValidator",
    "ValidationReport",
    "ValidationIssue",
    "Severity",
    "configure_logging",
    "get_logger",
    "VariantError",
    "InvalidArgumentError",
    "WeightOutOfRangeError",
    "InvalidOperationError",
    "IndexOutOfRangeError"
]
