"""
Form Validation

Validates every field block of a form against submitted values in one pass,
keeping normalized values and per-field errors keyed by block key.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel

from formblocks.blocks.models import parse_block
from formblocks.logic.validators import Issue, compile_block_validator

logger = logging.getLogger(__name__)


class FormValidationResult(BaseModel):
    """Outcome of validating a whole form."""

    ok: bool
    values: Dict[str, Any] = {}
    """Normalized values of the fields that passed (block key -> value)"""
    errors: Dict[str, List[Issue]] = {}
    """Issues of the fields that failed (block key -> issues)"""


def validate_form(
    blocks: Iterable[Union[Mapping[str, Any], BaseModel]],
    values: Optional[Mapping[Any, Any]] = None,
    allow_nullish: bool = False,
    default_country: Optional[str] = None,
    verbose: bool = False,
) -> FormValidationResult:
    """
    Validate submitted values for every field block of a form.

    A block whose key is missing from `values` is validated against its own
    stored value. Presentational blocks and unknown block types are skipped.

    Args:
        blocks: Block models or raw block data, in form order
        values: Submitted values keyed by block key
        allow_nullish: Treat every field as optional (draft submissions)
        default_country: Country for phone numbers without a country code
        verbose: Log each field outcome

    Returns:
        FormValidationResult
    """
    values = values or {}
    normalized = {}
    errors = {}

    for raw in blocks:
        block = parse_block(raw)
        if block is None:
            continue

        validator = compile_block_validator(block, allow_nullish, default_country)
        if validator is None:
            continue

        key = str(block.key)
        if block.key in values:
            candidate = values[block.key]
        elif key in values:
            candidate = values[key]
        else:
            candidate = block.value

        result = validator.validate(candidate)
        if result.ok:
            normalized[key] = result.value
        else:
            errors[key] = result.issues
            if verbose:
                logger.info(f"VALIDATE | {key} failed: {[i.message for i in result.issues]}")

    if verbose:
        logger.info(f"VALIDATE | {len(normalized)} valid, {len(errors)} invalid")

    return FormValidationResult(ok=not errors, values=normalized, errors=errors)
