"""
File Validator

Validates a list of file descriptors. A descriptor is either a mapping with
"type" (MIME) and "size" (bytes) keys, as stored for uploaded files, or an
object exposing .type/.size (or .content_type/.size for upload objects).
Any other metadata is carried through untouched.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from formblocks.blocks.models import FileConfig
from formblocks.config.constants import (
    AT_LEAST_ONE_FILE_MESSAGE,
    EXPECTED_FILE_LIST_MESSAGE,
    INVALID_FILE_MESSAGE,
    SINGLE_FILE_MESSAGE,
)
from formblocks.logic.list_format import format_disjunction
from formblocks.logic.validators.base import (
    BaseValidator,
    Check,
    Issue,
    IssueCode,
    ValidationResult,
    format_issue,
    run_checks,
)


def describe_file(item: Any) -> Optional[Tuple[str, float]]:
    """Return (mime_type, size) for a file descriptor, or None if malformed."""
    if isinstance(item, Mapping):
        mime_type = item.get("type")
        size = item.get("size")
    else:
        mime_type = getattr(item, "type", None) or getattr(item, "content_type", None)
        size = getattr(item, "size", None)

    if not isinstance(mime_type, str):
        return None
    if isinstance(size, bool) or not isinstance(size, (int, float)) or size < 0:
        return None
    return mime_type, size


class FileValidator(BaseValidator):
    """Validates uploaded files against type, size and count limits."""

    required_message = AT_LEAST_ONE_FILE_MESSAGE

    def __init__(self, config: FileConfig, optional: bool = False):
        super().__init__(optional)
        self.multiple = config.multiple
        self.max_size = config.max_size
        self.allowed_types = config.allowed_types

        self.item_checks = []
        if self.allowed_types is not None:
            quoted = [f"`{mime_type}`" for mime_type in self.allowed_types]
            self.item_checks.append(Check(
                predicate=lambda info: info[0] in self.allowed_types,
                message=f"File type must be {format_disjunction(quoted)}.",
                code=IssueCode.MEMBERSHIP,
            ))
        if self.max_size is not None:
            self.item_checks.append(Check(
                predicate=lambda info: info[1] <= self.max_size,
                message=f"File size must not exceed {self.max_size} bytes",
            ))

    def is_absent(self, candidate: Any) -> bool:
        if isinstance(candidate, (list, tuple)) and not candidate:
            return True
        return candidate is None

    def _validate_present(self, value: Any) -> ValidationResult:
        if not isinstance(value, (list, tuple)):
            return ValidationResult.failure([format_issue(EXPECTED_FILE_LIST_MESSAGE)])

        issues: List[Issue] = []
        if not self.multiple and len(value) > 1:
            issues.append(Issue(message=SINGLE_FILE_MESSAGE, code=IssueCode.CONSTRAINT))

        for index, item in enumerate(value):
            info = describe_file(item)
            if info is None:
                issues.append(Issue(
                    message=INVALID_FILE_MESSAGE, code=IssueCode.FORMAT, path=[index]
                ))
                continue
            issues.extend(run_checks(info, self.item_checks, path=[index]))

        if issues:
            return ValidationResult.failure(issues)
        return ValidationResult.success(list(value))


def compile_file(config: FileConfig, allow_nullish: bool = False) -> FileValidator:
    return FileValidator(config, optional=allow_nullish or config.optional)
