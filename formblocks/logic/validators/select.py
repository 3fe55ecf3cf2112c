"""
Select Validator

Single selects take one option value; multi selects take a list of them.
Values are compared exactly against the declared option values.
"""

from typing import Any

from formblocks.blocks.models import SelectConfig
from formblocks.config.constants import EXPECTED_LIST_MESSAGE, EXPECTED_STRING_MESSAGE
from formblocks.logic.list_format import format_disjunction
from formblocks.logic.validators.base import (
    BaseValidator,
    Check,
    IssueCode,
    ValidationResult,
    format_issue,
    run_checks,
)


class SelectValidator(BaseValidator):
    """Validates membership in a select field's options."""

    def __init__(self, config: SelectConfig, optional: bool = False):
        super().__init__(optional)
        self.multiple = config.multiple
        self.values = frozenset(option.value for option in config.options)
        labels = [f"`{option.label}`" for option in config.options]
        self.membership = Check(
            predicate=lambda value: isinstance(value, str) and value in self.values,
            message=f"Must be one of {format_disjunction(labels)}.",
            code=IssueCode.MEMBERSHIP,
        )

    def is_absent(self, candidate: Any) -> bool:
        if self.multiple and isinstance(candidate, (list, tuple)) and not candidate:
            return True
        return candidate is None

    def _validate_present(self, value: Any) -> ValidationResult:
        if not self.multiple:
            if not isinstance(value, str):
                return ValidationResult.failure([format_issue(EXPECTED_STRING_MESSAGE)])
            issues = run_checks(value, [self.membership])
            if issues:
                return ValidationResult.failure(issues)
            return ValidationResult.success(value)

        if not isinstance(value, (list, tuple)):
            return ValidationResult.failure([format_issue(EXPECTED_LIST_MESSAGE)])

        issues = []
        for index, item in enumerate(value):
            issues.extend(run_checks(item, [self.membership], path=[index]))
        if issues:
            return ValidationResult.failure(issues)
        return ValidationResult.success(list(value))


def compile_select(config: SelectConfig, allow_nullish: bool = False) -> SelectValidator:
    return SelectValidator(config, optional=allow_nullish or config.optional)
