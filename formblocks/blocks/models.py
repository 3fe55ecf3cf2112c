"""
Block Models

Pydantic models for form block definitions. Each block variant carries its
own config model, and the union of variants is discriminated by `type`.

Config keys are accepted in snake_case or camelCase ("minLength",
"allowedDomains", ...) so payloads from the form builder load unchanged.
"""

import logging
import re
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

import phonenumbers
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from formblocks.blocks.types import BlockType, resolve_block_type

logger = logging.getLogger(__name__)


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Field Configs
# =============================================================================


class FieldConfig(_Model):
    """Settings shared by every field block."""

    label: str
    description: Optional[str] = None
    optional: bool = False


class CheckboxConfig(FieldConfig):
    # Must be ticked whenever a value is given, even if the field is optional
    required: bool = False


class SelectOption(_Model):
    label: str
    value: str


class SelectConfig(FieldConfig):
    options: List[SelectOption]
    multiple: bool = False


class TextPattern(_Model):
    value: str
    message: str

    @field_validator("value")
    @classmethod
    def check_regex(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid pattern: {e}") from e
        return value


class TextConfig(FieldConfig):
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    pattern: Optional[TextPattern] = None

    @model_validator(mode="after")
    def check_bounds(self):
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError(
                f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            )
        return self


class FileConfig(FieldConfig):
    max_size: Optional[int] = Field(None, ge=0, description="Maximum size in bytes")
    allowed_types: Optional[List[str]] = Field(None, description="Allowed MIME types")
    multiple: bool = False


class AllowedDomain(_Model):
    domain: str
    exact: bool = False


class EmailConfig(FieldConfig):
    allowed_domains: Optional[List[AllowedDomain]] = None


class UrlConfig(FieldConfig):
    allowed_domains: Optional[List[AllowedDomain]] = None


class PhoneConfig(FieldConfig):
    allowed_countries: Optional[List[str]] = None

    @field_validator("allowed_countries")
    @classmethod
    def check_countries(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return None
        countries = [code.upper() for code in value]
        unknown = [code for code in countries if code not in phonenumbers.SUPPORTED_REGIONS]
        if unknown:
            raise ValueError(f"Unsupported country codes: {unknown}")
        return countries


# =============================================================================
# Presentational Content
# =============================================================================


class TextModelRef(_Model):
    """Reference from a text run to a model attribute (merge field)."""

    id: int
    name: str
    attribute: str


class RichText(_Model):
    content: str
    url: Optional[str] = None
    model: Optional[TextModelRef] = None


# =============================================================================
# Blocks
# =============================================================================


class _Block(_Model):
    key: Union[str, int] = Field(validation_alias=AliasChoices("key", "id"))


class CheckboxBlock(_Block):
    type: Literal["checkbox"] = "checkbox"
    config: CheckboxConfig
    value: Optional[bool] = None


class SelectBlock(_Block):
    type: Literal["single_select"] = "single_select"
    config: SelectConfig
    value: Union[str, List[str], None] = None


class TextBlock(_Block):
    type: Literal["text"] = "text"
    config: TextConfig
    value: Optional[str] = None


class FileBlock(_Block):
    type: Literal["file"] = "file"
    config: FileConfig
    value: Optional[List[Any]] = None


class EmailBlock(_Block):
    type: Literal["email"] = "email"
    config: EmailConfig
    value: Optional[str] = None


class UrlBlock(_Block):
    type: Literal["url"] = "url"
    config: UrlConfig
    value: Optional[str] = None


class PhoneBlock(_Block):
    type: Literal["phone"] = "phone"
    config: PhoneConfig
    value: Optional[str] = None


class HeadingBlock(_Block):
    type: Literal["heading_one", "heading_two", "heading_three"]
    content: List[RichText] = []


class ParagraphBlock(_Block):
    type: Literal["paragraph"] = "paragraph"
    content: List[RichText] = []


class DividerBlock(_Block):
    type: Literal["divider"] = "divider"


FieldBlock = Union[
    CheckboxBlock,
    SelectBlock,
    TextBlock,
    FileBlock,
    EmailBlock,
    UrlBlock,
    PhoneBlock,
]

Block = Annotated[
    Union[
        CheckboxBlock,
        SelectBlock,
        TextBlock,
        FileBlock,
        EmailBlock,
        UrlBlock,
        PhoneBlock,
        HeadingBlock,
        ParagraphBlock,
        DividerBlock,
    ],
    Field(discriminator="type"),
]

_BLOCK_ADAPTER = TypeAdapter(Block)


def parse_block(data: Union[Mapping[str, Any], BaseModel]) -> Optional[Block]:
    """
    Build a Block model from raw block data.

    Accepts legacy "_field" type tags, and the legacy layout where the
    config (or presentational content) sits under a key named after the
    type tag instead of under "config".

    Returns None when the type tag is unknown. Raises pydantic's
    ValidationError when a known block is malformed.
    """
    if isinstance(data, _Block):
        return data

    payload: Dict[str, Any] = dict(data)
    raw_tag = payload.get("type")
    block_type = resolve_block_type(raw_tag)
    if block_type is None:
        logger.debug(f"Unknown block type: {raw_tag!r}")
        return None

    if isinstance(raw_tag, str) and raw_tag in payload:
        target = "content" if block_type in (
            BlockType.HEADING_ONE,
            BlockType.HEADING_TWO,
            BlockType.HEADING_THREE,
            BlockType.PARAGRAPH,
        ) else "config"
        payload.setdefault(target, payload.pop(raw_tag))

    payload["type"] = block_type.value
    return _BLOCK_ADAPTER.validate_python(payload)
