"""
Backend Configuration

API settings for the validation service.
"""

import os

# API Settings
API_TITLE = "Form Block Validation Service"
API_DESCRIPTION = "Validates and normalizes form submissions against form block definitions"
API_VERSION = "1.0.0"

# Backend
BACKEND_HOST = os.getenv("BACKEND_HOST", "0.0.0.0")
BACKEND_PORT = int(os.getenv("BACKEND_PORT", "10821"))
