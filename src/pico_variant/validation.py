from collections import Counter
from dataclasses import dataclass, field
from typing import List
from enum import Enum
from .config import MAX_WEIGHT
from .model import Experiment

class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"

@dataclass
class ValidationIssue:
    field: str
    message: str
    severity: Severity

@dataclass
class ValidationReport:
    valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(i.severity == Severity.ERROR for i in self.issues)

class ExperimentValidator:
    def validate(self, experiment: Experiment, strict_total: bool = False) -> ValidationReport:
        issues = []

        if not experiment.is_valid():
            issues.append(ValidationIssue("variants", "Experiment has no variants", Severity.ERROR))
            return ValidationReport(valid=False, issues=issues)

        total = experiment.total_weight
        if total == 0:
            issues.append(ValidationIssue("variants", "Total weight of the variants is zero", Severity.ERROR))
        elif total != MAX_WEIGHT:
            severity = Severity.ERROR if strict_total else Severity.WARNING
            issues.append(ValidationIssue("variants", f"Variant weights sum to {total}, not {MAX_WEIGHT}", severity))

        duplicates = sorted(name for name, count in Counter(v.name for v in experiment).items() if count > 1)
        if duplicates:
            issues.append(ValidationIssue(
                "variants", f"Duplicate variant names (first match wins): {', '.join(duplicates)}", Severity.WARNING
            ))

        zero_weight = [v.name for v in experiment if v.weight == 0]
        if zero_weight and total > 0:
            issues.append(ValidationIssue(
                "variants", f"Zero-weight variants are almost never chosen: {', '.join(zero_weight)}", Severity.WARNING
            ))

        return ValidationReport(valid=not any(i.severity == Severity.ERROR for i in issues), issues=issues)
