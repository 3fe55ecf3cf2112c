"""
Phone Validator

Parses phone numbers with the phonenumbers library and normalizes them to
E.164. A number entered without a country code is read against the default
country, when one is given.
"""

import logging
from typing import List, Optional

import phonenumbers
from phonenumbers import CountryCodeSource

from formblocks.blocks.models import PhoneConfig
from formblocks.config.constants import INVALID_PHONE_MESSAGE
from formblocks.logic.list_format import format_disjunction
from formblocks.logic.validators.base import (
    Issue,
    IssueCode,
    StringFieldValidator,
    ValidationResult,
)

logger = logging.getLogger(__name__)

# Region returned for numbers that belong to no single country
UNKNOWN_REGION = "ZZ"


def supported_country(country: Optional[str]) -> Optional[str]:
    """Upper-cased country code if the phone library knows it, else None."""
    if not country:
        return None
    country = country.upper()
    if country not in phonenumbers.SUPPORTED_REGIONS:
        logger.debug(f"Ignoring unsupported default country: {country}")
        return None
    return country


def allowed_countries_message(countries: List[str]) -> str:
    entries = [
        f"{country} (+{phonenumbers.country_code_for_region(country)})"
        for country in countries
    ]
    return f"Phone number must be from {format_disjunction(entries)}."


class PhoneValidator(StringFieldValidator):
    """Validates phone numbers, optionally restricted to allowed countries."""

    def __init__(
        self,
        config: PhoneConfig,
        optional: bool = False,
        default_country: Optional[str] = None,
    ):
        super().__init__(optional)
        self.default_country = supported_country(default_country)
        self.allowed_countries = config.allowed_countries
        if self.allowed_countries is not None:
            self.country_message = allowed_countries_message(self.allowed_countries)

    def _validate_string(self, value: str) -> ValidationResult:
        try:
            number = phonenumbers.parse(value, self.default_country, keep_raw_input=True)
        except phonenumbers.NumberParseException as e:
            logger.debug(f"Phone parse failed for {value!r}: {e}")
            return self._invalid()

        if not phonenumbers.is_possible_number(number):
            return self._invalid()

        if self.allowed_countries is not None:
            country = self.resolve_country(number)
            if country not in self.allowed_countries:
                return ValidationResult.failure([
                    Issue(message=self.country_message, code=IssueCode.MEMBERSHIP, fatal=True)
                ])

        return ValidationResult.success(
            phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.E164)
        )

    def resolve_country(self, number: phonenumbers.PhoneNumber) -> Optional[str]:
        """
        Country of the parsed number.

        When the number maps to no single region, the default country applies
        only if parsing supplied it. A number that declared its own calling
        code resolves to the allowed country sharing that code, if any.
        """
        region = phonenumbers.region_code_for_number(number)
        if region and region != UNKNOWN_REGION:
            return region
        if number.country_code_source == CountryCodeSource.FROM_DEFAULT_COUNTRY:
            return self.default_country
        for country in self.allowed_countries or []:
            if phonenumbers.country_code_for_region(country) == number.country_code:
                return country
        return None

    @staticmethod
    def _invalid() -> ValidationResult:
        return ValidationResult.failure([
            Issue(message=INVALID_PHONE_MESSAGE, code=IssueCode.PARSE, fatal=True)
        ])


def compile_phone(
    config: PhoneConfig,
    allow_nullish: bool = False,
    default_country: Optional[str] = None,
) -> PhoneValidator:
    return PhoneValidator(
        config,
        optional=allow_nullish or config.optional,
        default_country=default_country,
    )
