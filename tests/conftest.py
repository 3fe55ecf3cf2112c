"""Test fixtures for the block validators."""

import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def pdf_file():
    """A small uploaded PDF descriptor."""
    return {"name": "resume.pdf", "type": "application/pdf", "size": 512}


@pytest.fixture
def sample_form():
    """A form mixing presentational and field blocks."""
    return [
        {
            "key": "intro",
            "type": "heading_one",
            "content": [{"content": "Apply now"}],
        },
        {
            "key": "name",
            "type": "text",
            "config": {
                "label": "Full name",
                "minLength": 2,
                "maxLength": 50,
            },
        },
        {"key": "rule", "type": "divider"},
        {
            "key": "email",
            "type": "email",
            "config": {
                "label": "Work email",
                "allowedDomains": [{"domain": "explorate.co", "exact": False}],
            },
        },
        {
            "key": "phone",
            "type": "phone",
            "config": {
                "label": "Mobile",
                "optional": True,
                "allowedCountries": ["AU"],
            },
        },
        {
            "key": "terms",
            "type": "checkbox",
            "config": {"label": "I agree to the terms"},
        },
    ]
