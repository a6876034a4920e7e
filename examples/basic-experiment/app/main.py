import logging
from collections import Counter

from pico_variant import Experiment, ExperimentValidator, VariantSelector, configure_logging
from pico_variant.bootstrap import init


def main():
    configure_logging(level=logging.INFO)

    container = init(modules=[])
    selector = container.get(VariantSelector)
    validator = container.get(ExperimentValidator)

    experiment = (
        Experiment("checkout_redesign")
        .add_variant("control", 25)
        .add_variant("compact", 25)
        .add_variant("one_page", 50)
    )

    report = validator.validate(experiment, strict_total=selector.config.strict_total)
    for issue in report.issues:
        print(f"[{issue.severity.value}] {issue.message}")

    # Same user, same variant, on every run
    for user_id in ("user-1", "user-2", "user-3"):
        print(f"{user_id} -> {selector.choose_consistent_variant(experiment, user_id).name}")

    draws = Counter(selector.choose_random_variant(experiment).name for _ in range(10_000))
    for name, count in draws.most_common():
        print(f"{name}: {count / 10_000:.1%}")


if __name__ == "__main__":
    main()
