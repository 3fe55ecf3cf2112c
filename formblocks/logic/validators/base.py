"""
Base Validator

Abstract base class for all block validators, plus the issue and result
types they report with.

Every validator applies the same optionality policy: absent input passes as
None when the field is optional and fails with a "required" issue otherwise.
Remaining checks are (predicate, message) pairs evaluated in order. Issues
accumulate, except that a fatal issue stops the checks after it.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, List, NamedTuple, Optional, Sequence

from pydantic import BaseModel

from formblocks.config.constants import EXPECTED_STRING_MESSAGE, REQUIRED_MESSAGE


class IssueCode(str, Enum):
    FORMAT = "format"          # wrong base type, malformed email/url
    CONSTRAINT = "constraint"  # length, pattern, size, count out of bounds
    MEMBERSHIP = "membership"  # not among allowed options/domains/countries
    REQUIRED = "required"      # absent or empty where a value is required
    PARSE = "parse"            # phone number could not be parsed


class Issue(BaseModel):
    """A single validation failure."""

    message: str
    code: IssueCode
    path: List[int] = []
    """Index of the offending item for list-valued fields"""
    fatal: bool = False


class ValidationResult(BaseModel):
    """Outcome of validating one candidate value."""

    ok: bool
    value: Any = None
    """Normalized value when ok, None otherwise"""
    issues: List[Issue] = []

    @property
    def message(self) -> Optional[str]:
        """First issue message, or None if valid."""
        return self.issues[0].message if self.issues else None

    @classmethod
    def success(cls, value: Any) -> "ValidationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, issues: List[Issue]) -> "ValidationResult":
        return cls(ok=False, issues=issues)


class BlockValidationError(ValueError):
    """Raised by BaseValidator.parse() when a value does not validate."""

    def __init__(self, issues: List[Issue]):
        self.issues = issues
        super().__init__("; ".join(issue.message for issue in issues))


class Check(NamedTuple):
    """A predicate over a present value and the issue reported when it fails."""

    predicate: Callable[[Any], bool]
    message: str
    code: IssueCode = IssueCode.CONSTRAINT
    fatal: bool = False


def run_checks(value: Any, checks: Sequence[Check], path: Optional[List[int]] = None) -> List[Issue]:
    """Evaluate checks in order, collecting issues until a fatal one."""
    issues = []
    for check in checks:
        if check.predicate(value):
            continue
        issues.append(
            Issue(message=check.message, code=check.code, path=path or [], fatal=check.fatal)
        )
        if check.fatal:
            break
    return issues


def format_issue(message: str) -> Issue:
    """Fatal base-type mismatch."""
    return Issue(message=message, code=IssueCode.FORMAT, fatal=True)


class BaseValidator(ABC):
    """
    Abstract base class for block validators.

    Subclasses implement _validate_present(), which only ever sees values
    that are not absent.
    """

    required_message = REQUIRED_MESSAGE

    def __init__(self, optional: bool = False):
        self.optional = optional

    def validate(self, candidate: Any) -> ValidationResult:
        """
        Validate and normalize a candidate value.

        Returns:
            ValidationResult with the normalized value, or the issues found
        """
        if self.is_absent(candidate):
            if self.optional:
                return ValidationResult.success(None)
            return ValidationResult.failure([
                Issue(message=self.required_message, code=IssueCode.REQUIRED, fatal=True)
            ])
        return self._validate_present(candidate)

    def parse(self, candidate: Any) -> Any:
        """Return the normalized value or raise BlockValidationError."""
        result = self.validate(candidate)
        if not result.ok:
            raise BlockValidationError(result.issues)
        return result.value

    def is_valid(self, candidate: Any) -> bool:
        return self.validate(candidate).ok

    def is_absent(self, candidate: Any) -> bool:
        return candidate is None

    @abstractmethod
    def _validate_present(self, value: Any) -> ValidationResult:
        pass


class StringFieldValidator(BaseValidator):
    """
    Base for string-shaped fields (text, email, url, phone).

    Input is trimmed; a blank string counts as absent. Subclasses either
    provide `checks` or override _validate_string().
    """

    def __init__(self, optional: bool = False, checks: Optional[List[Check]] = None):
        super().__init__(optional)
        self.checks = checks or []

    def is_absent(self, candidate: Any) -> bool:
        return candidate is None or (isinstance(candidate, str) and not candidate.strip())

    def _validate_present(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return ValidationResult.failure([format_issue(EXPECTED_STRING_MESSAGE)])
        return self._validate_string(value.strip())

    def _validate_string(self, value: str) -> ValidationResult:
        issues = run_checks(value, self.checks)
        if issues:
            return ValidationResult.failure(issues)
        return ValidationResult.success(value)
