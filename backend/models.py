"""
Pydantic API Models

Request/response models for the backend API.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List

from formblocks.logic.validators import Issue


class BlockValidationRequest(BaseModel):
    """Request to validate one value against one block."""
    block: Dict[str, Any] = Field(..., description="Block definition")
    value: Any = Field(None, description="Candidate value; null or omitted means absent")
    allow_nullish: bool = Field(False, description="Treat the field as optional")


class BlockValidationResponse(BaseModel):
    """Outcome of validating one value."""
    has_validator: bool
    ok: bool
    value: Any = None
    issues: List[Issue] = []


class FormValidationRequest(BaseModel):
    """Request to validate a whole form submission."""
    blocks: List[Dict[str, Any]] = Field(..., description="Block definitions in form order")
    values: Dict[str, Any] = Field(default_factory=dict, description="Submitted values by block key")
    allow_nullish: bool = Field(False, description="Treat every field as optional (drafts)")


class FormValidationResponse(BaseModel):
    """Outcome of validating a whole form submission."""
    ok: bool
    values: Dict[str, Any] = {}
    errors: Dict[str, List[Issue]] = {}


class BlockTypesResponse(BaseModel):
    """Known block type tags."""
    field: List[str]
    presentational: List[str]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
    default_phone_country: Optional[str] = None
