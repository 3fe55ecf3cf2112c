"""
formblocks

Compiles declarative form block definitions into validators that check and
normalize submitted field values.
"""

from formblocks.blocks import BlockType, FIELD_BLOCK_TYPES, PRESENTATIONAL_BLOCK_TYPES, parse_block
from formblocks.logic import (
    compile_block_validator,
    validate_form,
    BlockValidationError,
    Issue,
    IssueCode,
    ValidationResult,
    FormValidationResult,
)

__version__ = "1.0.0"

__all__ = [
    "BlockType",
    "FIELD_BLOCK_TYPES",
    "PRESENTATIONAL_BLOCK_TYPES",
    "parse_block",
    "compile_block_validator",
    "validate_form",
    "BlockValidationError",
    "Issue",
    "IssueCode",
    "ValidationResult",
    "FormValidationResult",
]
