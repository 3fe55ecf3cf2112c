"""Checkbox Validator"""

from typing import Any

from formblocks.blocks.models import CheckboxConfig
from formblocks.config.constants import EXPECTED_BOOLEAN_MESSAGE
from formblocks.logic.validators.base import (
    BaseValidator,
    Issue,
    IssueCode,
    ValidationResult,
    format_issue,
)


class CheckboxValidator(BaseValidator):
    """Validates a checkbox value. A required checkbox must be ticked."""

    def __init__(self, config: CheckboxConfig, optional: bool = False):
        super().__init__(optional)
        self.must_be_checked = config.required or not config.optional

    def _validate_present(self, value: Any) -> ValidationResult:
        if not isinstance(value, bool):
            return ValidationResult.failure([format_issue(EXPECTED_BOOLEAN_MESSAGE)])

        if self.must_be_checked and not value:
            return ValidationResult.failure([
                Issue(message=self.required_message, code=IssueCode.REQUIRED)
            ])

        return ValidationResult.success(value)


def compile_checkbox(config: CheckboxConfig, allow_nullish: bool = False) -> CheckboxValidator:
    return CheckboxValidator(config, optional=allow_nullish or config.optional)
