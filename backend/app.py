"""
Backend API Service

FastAPI application that validates form submissions against form block
definitions. Block definitions arrive with each request; nothing is stored.
"""

import logging
import sys
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from backend.config import (
    API_TITLE, API_DESCRIPTION, API_VERSION,
    BACKEND_HOST, BACKEND_PORT,
)
from backend.models import (
    BlockValidationRequest, BlockValidationResponse,
    FormValidationRequest, FormValidationResponse,
    BlockTypesResponse, HealthResponse,
)
from formblocks.blocks.types import FIELD_BLOCK_TYPES, PRESENTATIONAL_BLOCK_TYPES
from formblocks.config.settings import DEFAULT_PHONE_COUNTRY, LOG_LEVEL, VERBOSE
from formblocks.logic.form_validation import validate_form
from formblocks.logic.validators import compile_block_validator

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _invalid_definition(e: ValidationError) -> HTTPException:
    logger.warning(f"Rejected malformed block definition: {e.error_count()} error(s)")
    return HTTPException(
        status_code=422,
        detail=e.errors(include_url=False, include_context=False),
    )


# =========================================================================
# Health & Info Endpoints
# =========================================================================


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Check service health."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        default_phone_country=DEFAULT_PHONE_COUNTRY,
    )


@app.get("/block-types", response_model=BlockTypesResponse)
async def list_block_types():
    """List the block type tags the service understands."""
    return BlockTypesResponse(
        field=[block_type.value for block_type in FIELD_BLOCK_TYPES],
        presentational=[block_type.value for block_type in PRESENTATIONAL_BLOCK_TYPES],
    )


# =========================================================================
# Validation Endpoints
# =========================================================================


@app.post("/validate/block", response_model=BlockValidationResponse)
async def validate_block(request: BlockValidationRequest):
    """Validate a single value against a single block."""
    try:
        validator = compile_block_validator(
            request.block,
            allow_nullish=request.allow_nullish,
            default_country=DEFAULT_PHONE_COUNTRY,
        )
    except ValidationError as e:
        raise _invalid_definition(e)

    if validator is None:
        return BlockValidationResponse(has_validator=False, ok=True)

    result = validator.validate(request.value)
    if VERBOSE:
        logger.info(f"VALIDATE | block={request.block.get('key')!r} ok={result.ok}")

    return BlockValidationResponse(
        has_validator=True,
        ok=result.ok,
        value=result.value,
        issues=result.issues,
    )


@app.post("/validate/form", response_model=FormValidationResponse)
async def validate_form_submission(request: FormValidationRequest):
    """Validate a whole form submission."""
    try:
        result = validate_form(
            request.blocks,
            request.values,
            allow_nullish=request.allow_nullish,
            default_country=DEFAULT_PHONE_COUNTRY,
            verbose=VERBOSE,
        )
    except ValidationError as e:
        raise _invalid_definition(e)

    return FormValidationResponse(ok=result.ok, values=result.values, errors=result.errors)


# =========================================================================
# Run
# =========================================================================

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting backend on port {BACKEND_PORT}")
    uvicorn.run(app, host=BACKEND_HOST, port=BACKEND_PORT)
