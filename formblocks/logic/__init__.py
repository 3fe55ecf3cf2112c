"""Validation logic: block validators, form validation, and message formatting."""

from formblocks.logic.list_format import join_list, format_disjunction
from formblocks.logic.validators import (
    compile_block_validator,
    BaseValidator,
    BlockValidationError,
    Issue,
    IssueCode,
    ValidationResult,
)
from formblocks.logic.form_validation import FormValidationResult, validate_form

__all__ = [
    "join_list",
    "format_disjunction",
    "compile_block_validator",
    "BaseValidator",
    "BlockValidationError",
    "Issue",
    "IssueCode",
    "ValidationResult",
    "FormValidationResult",
    "validate_form",
]
