"""Data model for experiments: named, weighted variants.

``Variant`` validates its own fields on every assignment.  ``Experiment``
is an ordered, unchecked container of variants: adding or removing never
checks the aggregate, so an experiment can be built up step by step and
may transiently hold zero variants or an odd total weight.  Selection is
the checkpoint where the aggregate is validated.

Experiments carry no locking.  Mutating one from a thread while another
thread selects from it must be guarded by the caller.
"""

from typing import TYPE_CHECKING, Any, Iterable, Iterator, List, Optional, Union

from .config import MAX_WEIGHT, MIN_WEIGHT
from .exceptions import IndexOutOfRangeError, InvalidArgumentError, WeightOutOfRangeError

if TYPE_CHECKING:
    from .selector import VariantSelector


def _require_name(value: Any, owner: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{owner} name cannot be empty or whitespace.")
    return value


class Variant:
    """One named, weighted outcome of an experiment.

    Args:
        name: Non-empty, non-whitespace name.
        weight: Integer weight in ``[0, 100]``.

    Raises:
        InvalidArgumentError: If the name is blank or the weight is not an int.
        WeightOutOfRangeError: If the weight is outside ``[0, 100]``.
    """

    __slots__ = ("_name", "_weight")

    def __init__(self, name: str, weight: int):
        self.name = name
        self.weight = weight

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _require_name(value, "Variant")

    @property
    def weight(self) -> int:
        return self._weight

    @weight.setter
    def weight(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"Weight must be an integer, got {type(value).__name__}.")
        if value < MIN_WEIGHT or value > MAX_WEIGHT:
            raise WeightOutOfRangeError(value, MIN_WEIGHT, MAX_WEIGHT)
        self._weight = value

    def __repr__(self) -> str:
        return f"Variant(name={self._name!r}, weight={self._weight})"


class Experiment:
    """A named, ordered collection of variants to select from.

    Example:
        >>> experiment = Experiment("checkout").add_variant("control", 50).add_variant("new_flow", 50)
        >>> experiment.get_variant("control").weight
        50
    """

    def __init__(self, name: str, variants: Optional[Iterable[Variant]] = None):
        self.name = name
        self._variants: List[Variant] = []
        if variants is not None:
            self.variants = variants

    @classmethod
    def of(cls, name: str, *variants: Variant) -> "Experiment":
        return cls(name, variants)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _require_name(value, "Experiment")

    @property
    def variants(self) -> List[Variant]:
        """The live, ordered list of variants."""
        return self._variants

    @variants.setter
    def variants(self, value: Iterable[Variant]) -> None:
        if value is None:
            raise InvalidArgumentError("Variants cannot be None.")
        items = list(value)
        for item in items:
            if not isinstance(item, Variant):
                raise InvalidArgumentError(f"Expected a Variant, got {type(item).__name__}.")
        self._variants = items

    @property
    def total_weight(self) -> int:
        return sum(v.weight for v in self._variants)

    def add_variant(self, variant: Union[Variant, str], weight: Optional[int] = None) -> "Experiment":
        """Append a variant and return the experiment for chaining.

        Accepts either a ``Variant`` instance or a name plus weight.  No
        duplicate or total-weight check is made here.

        Args:
            variant: A ``Variant``, or the name of a new one.
            weight: Weight of the new variant when *variant* is a name.

        Returns:
            This experiment.
        """
        if isinstance(variant, Variant):
            if weight is not None:
                raise InvalidArgumentError("Weight cannot be given together with a Variant instance.")
            self._variants.append(variant)
        else:
            if weight is None:
                raise InvalidArgumentError("Weight is required when adding a variant by name.")
            self._variants.append(Variant(variant, weight))
        return self

    def get_variant(self, key: Union[str, int]) -> Optional[Variant]:
        """Look a variant up by name or by position.

        A name lookup returns the first match, or ``None`` when absent.  A
        position lookup raises ``IndexOutOfRangeError`` when the index is
        negative or past the end.
        """
        if isinstance(key, int) and not isinstance(key, bool):
            if key < 0 or key >= len(self._variants):
                raise IndexOutOfRangeError(key, len(self._variants))
            return self._variants[key]

        for v in self._variants:
            if v.name == key:
                return v
        return None

    def remove_variant(self, name: str) -> bool:
        for i, v in enumerate(self._variants):
            if v.name == name:
                del self._variants[i]
                return True
        return False

    def is_valid(self) -> bool:
        return len(self._variants) >= 1

    def choose_random_variant(self, selector: Optional["VariantSelector"] = None) -> Variant:
        from .selector import get_default_selector
        return (selector or get_default_selector()).choose_random_variant(self)

    def choose_consistent_variant(self, key: str, selector: Optional["VariantSelector"] = None) -> Variant:
        from .selector import get_default_selector
        return (selector or get_default_selector()).choose_consistent_variant(self, key)

    def __len__(self) -> int:
        return len(self._variants)

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._variants)

    def __contains__(self, item: object) -> bool:
        return any(v is item for v in self._variants)

    def __repr__(self) -> str:
        return f"Experiment(name={self._name!r}, variants={self._variants!r})"
