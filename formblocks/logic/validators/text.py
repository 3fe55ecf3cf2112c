"""Text Validator"""

import re

from formblocks.blocks.models import TextConfig
from formblocks.logic.validators.base import Check, StringFieldValidator


class TextValidator(StringFieldValidator):
    """Validates free-text fields with optional length and pattern constraints."""

    def __init__(self, config: TextConfig, optional: bool = False):
        self.pattern = config.pattern
        self.max_length = config.max_length
        self.min_length = config.min_length
        if self.min_length is None and not optional:
            self.min_length = 1

        checks = []
        if self.pattern is not None:
            regex = re.compile(self.pattern.value)
            checks.append(Check(
                predicate=lambda value: regex.search(value) is not None,
                message=self.pattern.message,
            ))
        if self.min_length is not None:
            checks.append(Check(
                predicate=lambda value: len(value) >= self.min_length,
                message=f"Must contain at least {self.min_length} character(s)",
            ))
        if self.max_length is not None:
            checks.append(Check(
                predicate=lambda value: len(value) <= self.max_length,
                message=f"Must contain at most {self.max_length} character(s)",
            ))

        super().__init__(optional, checks)


def compile_text(config: TextConfig, allow_nullish: bool = False) -> TextValidator:
    return TextValidator(config, optional=allow_nullish or config.optional)
