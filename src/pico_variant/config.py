import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import InvalidArgumentError

MIN_WEIGHT = 0
MAX_WEIGHT = 100

DEFAULT_HASH_ALGORITHM = "fnv1a_32"

ENV_SEED = "PICO_VARIANT_SEED"
ENV_HASH = "PICO_VARIANT_HASH"
ENV_STRICT_TOTAL = "PICO_VARIANT_STRICT_TOTAL"

_TRUTHY = ("1", "true", "yes", "on")

@dataclass
class SelectorConfig:
    seed: Optional[int] = None
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    strict_total: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SelectorConfig":
        env = os.environ if environ is None else environ

        seed = None
        raw_seed = env.get(ENV_SEED, "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise InvalidArgumentError(f"{ENV_SEED} must be an integer, got '{raw_seed}'.") from None

        hash_algorithm = env.get(ENV_HASH, "").strip() or DEFAULT_HASH_ALGORITHM
        strict_total = env.get(ENV_STRICT_TOTAL, "false").strip().lower() in _TRUTHY

        return cls(seed=seed, hash_algorithm=hash_algorithm, strict_total=strict_total)
