from pico_ioc import factory, provides
from .config import SelectorConfig
from .hashing import get_hasher
from .interfaces import RandomProvider, StableHasher
from .randomness import ThreadLocalRandomProvider
from .validation import ExperimentValidator

@factory
class SelectionInfrastructureFactory:
    @provides(SelectorConfig, scope="singleton")
    def provide_selector_config(self) -> SelectorConfig:
        return SelectorConfig.from_env()

    @provides(RandomProvider, scope="singleton")
    def provide_random_provider(self, config: SelectorConfig) -> RandomProvider:
        return ThreadLocalRandomProvider(config.seed)

    @provides(StableHasher, scope="singleton")
    def provide_stable_hasher(self, config: SelectorConfig) -> StableHasher:
        return get_hasher(config.hash_algorithm)

    @provides(ExperimentValidator, scope="singleton")
    def provide_validator(self) -> ExperimentValidator:
        return ExperimentValidator()
