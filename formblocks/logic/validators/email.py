"""Email Validator"""

from email_validator import EmailNotValidError, validate_email

from formblocks.blocks.models import EmailConfig
from formblocks.config.constants import INVALID_EMAIL_MESSAGE
from formblocks.logic.validators.base import Check, IssueCode, StringFieldValidator
from formblocks.logic.validators.domains import allowed_domains_check, email_host


def is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class EmailValidator(StringFieldValidator):
    """Validates email addresses, optionally restricted to allowed domains."""

    def __init__(self, config: EmailConfig, optional: bool = False):
        self.allowed_domains = config.allowed_domains

        checks = [Check(is_email, INVALID_EMAIL_MESSAGE, IssueCode.FORMAT)]
        if self.allowed_domains is not None:
            checks.append(allowed_domains_check(self.allowed_domains, email_host))

        super().__init__(optional, checks)


def compile_email(config: EmailConfig, allow_nullish: bool = False) -> EmailValidator:
    return EmailValidator(config, optional=allow_nullish or config.optional)
