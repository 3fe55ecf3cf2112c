"""
Block Validators

Compiles a block definition into a validator for its value. Each field
block type has its own validator; presentational blocks and unknown type
tags have none.
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel

from formblocks.blocks.models import (
    CheckboxBlock,
    EmailBlock,
    FileBlock,
    PhoneBlock,
    SelectBlock,
    TextBlock,
    UrlBlock,
    parse_block,
)
from formblocks.logic.validators.base import (
    BaseValidator,
    BlockValidationError,
    Check,
    Issue,
    IssueCode,
    ValidationResult,
)
from formblocks.logic.validators.checkbox import CheckboxValidator, compile_checkbox
from formblocks.logic.validators.email import EmailValidator, compile_email
from formblocks.logic.validators.file import FileValidator, compile_file
from formblocks.logic.validators.phone import PhoneValidator, compile_phone
from formblocks.logic.validators.select import SelectValidator, compile_select
from formblocks.logic.validators.text import TextValidator, compile_text
from formblocks.logic.validators.url import UrlValidator, compile_url

logger = logging.getLogger(__name__)


def compile_block_validator(
    block: Union[Mapping[str, Any], BaseModel],
    allow_nullish: bool = False,
    default_country: Optional[str] = None,
) -> Optional[BaseValidator]:
    """
    Build the validator for a block's value.

    Args:
        block: Block model, or raw block data
        allow_nullish: Accept absent values regardless of the block's own
            `optional` setting (drafts, partial submissions)
        default_country: Country used for phone numbers entered without a
            country code, e.g. "AU"

    Returns:
        A validator, or None for presentational blocks and unknown types

    Raises:
        pydantic.ValidationError: if a known block type carries a malformed config
    """
    block = parse_block(block)
    if block is None:
        return None

    if isinstance(block, CheckboxBlock):
        validator = compile_checkbox(block.config, allow_nullish)
    elif isinstance(block, SelectBlock):
        validator = compile_select(block.config, allow_nullish)
    elif isinstance(block, TextBlock):
        validator = compile_text(block.config, allow_nullish)
    elif isinstance(block, FileBlock):
        validator = compile_file(block.config, allow_nullish)
    elif isinstance(block, EmailBlock):
        validator = compile_email(block.config, allow_nullish)
    elif isinstance(block, UrlBlock):
        validator = compile_url(block.config, allow_nullish)
    elif isinstance(block, PhoneBlock):
        validator = compile_phone(block.config, allow_nullish, default_country)
    else:
        return None

    logger.debug(
        f"Compiled {type(validator).__name__} for block {block.key!r} "
        f"(optional={validator.optional})"
    )
    return validator


__all__ = [
    "compile_block_validator",
    "BaseValidator",
    "BlockValidationError",
    "Check",
    "Issue",
    "IssueCode",
    "ValidationResult",
    "CheckboxValidator",
    "SelectValidator",
    "TextValidator",
    "FileValidator",
    "EmailValidator",
    "UrlValidator",
    "PhoneValidator",
]
