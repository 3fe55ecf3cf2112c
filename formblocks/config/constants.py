"""
Shared constants used across the validators.

Centralizes error messages so wording stays identical between block types.
"""

# Optionality
REQUIRED_MESSAGE = "This field is required"

# Base type mismatches
EXPECTED_STRING_MESSAGE = "Expected a string"
EXPECTED_BOOLEAN_MESSAGE = "Expected a boolean"
EXPECTED_LIST_MESSAGE = "Expected a list"
EXPECTED_FILE_LIST_MESSAGE = "Expected a list of files"
INVALID_FILE_MESSAGE = "Invalid file"
INVALID_EMAIL_MESSAGE = "Invalid email"
INVALID_URL_MESSAGE = "Invalid url"
INVALID_PHONE_MESSAGE = "Invalid phone number"

# File list bounds
SINGLE_FILE_MESSAGE = "Only one file is allowed"
AT_LEAST_ONE_FILE_MESSAGE = "At least one file is required"

# Error message conjunction
DISJUNCTION = "or"
