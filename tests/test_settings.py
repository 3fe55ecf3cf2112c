"""Tests for environment-derived settings."""

from formblocks.config.settings import VERBOSE, country_from_locale


def test_posix_locale():
    assert country_from_locale("en_AU.UTF-8") == "AU"


def test_bcp47_locale():
    assert country_from_locale("en-US") == "US"


def test_locale_with_modifier():
    assert country_from_locale("de_DE@euro") == "DE"


def test_lowercase_region():
    assert country_from_locale("en_gb") == "GB"


def test_no_region():
    assert country_from_locale("C") is None
    assert country_from_locale("en") is None


def test_missing_locale():
    assert country_from_locale(None) is None
    assert country_from_locale("") is None


def test_verbose_is_flag():
    assert isinstance(VERBOSE, bool)
