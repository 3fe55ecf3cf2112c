"""Block type registry and block definition models."""

from formblocks.blocks.types import (
    BlockType,
    FIELD_BLOCK_TYPES,
    PRESENTATIONAL_BLOCK_TYPES,
    resolve_block_type,
    is_field_block_type,
)
from formblocks.blocks.models import (
    Block,
    FieldBlock,
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
    CheckboxConfig,
    SelectConfig,
    SelectOption,
    TextConfig,
    TextPattern,
    FileConfig,
    EmailConfig,
    UrlConfig,
    PhoneConfig,
    AllowedDomain,
    RichText,
    parse_block,
)

__all__ = [
    "BlockType",
    "FIELD_BLOCK_TYPES",
    "PRESENTATIONAL_BLOCK_TYPES",
    "resolve_block_type",
    "is_field_block_type",
    "Block",
    "FieldBlock",
    "CheckboxBlock",
    "SelectBlock",
    "TextBlock",
    "FileBlock",
    "EmailBlock",
    "UrlBlock",
    "PhoneBlock",
    "HeadingBlock",
    "ParagraphBlock",
    "DividerBlock",
    "CheckboxConfig",
    "SelectConfig",
    "SelectOption",
    "TextConfig",
    "TextPattern",
    "FileConfig",
    "EmailConfig",
    "UrlConfig",
    "PhoneConfig",
    "AllowedDomain",
    "RichText",
    "parse_block",
]
