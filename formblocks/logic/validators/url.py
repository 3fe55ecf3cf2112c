"""Url Validator"""

from pydantic import AnyUrl, TypeAdapter, ValidationError

from formblocks.blocks.models import UrlConfig
from formblocks.config.constants import INVALID_URL_MESSAGE
from formblocks.logic.validators.base import Check, IssueCode, StringFieldValidator
from formblocks.logic.validators.domains import allowed_domains_check, url_host

_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_url(value: str) -> bool:
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


class UrlValidator(StringFieldValidator):
    """Validates URLs, optionally restricted to allowed host domains."""

    def __init__(self, config: UrlConfig, optional: bool = False):
        self.allowed_domains = config.allowed_domains

        checks = [Check(is_url, INVALID_URL_MESSAGE, IssueCode.FORMAT)]
        if self.allowed_domains is not None:
            checks.append(allowed_domains_check(self.allowed_domains, url_host))

        super().__init__(optional, checks)


def compile_url(config: UrlConfig, allow_nullish: bool = False) -> UrlValidator:
    return UrlValidator(config, optional=allow_nullish or config.optional)
