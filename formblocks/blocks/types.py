"""
Block Types

The fixed set of form block type tags, split into field blocks (collect a
value) and presentational blocks (headings, dividers, paragraphs).
"""

from enum import Enum
from typing import Any, Optional


class BlockType(str, Enum):
    """Type tag carried by every block."""

    # Field blocks
    CHECKBOX = "checkbox"
    SINGLE_SELECT = "single_select"
    TEXT = "text"
    FILE = "file"
    EMAIL = "email"
    URL = "url"
    PHONE = "phone"

    # Presentational blocks
    HEADING_ONE = "heading_one"
    HEADING_TWO = "heading_two"
    HEADING_THREE = "heading_three"
    DIVIDER = "divider"
    PARAGRAPH = "paragraph"


FIELD_BLOCK_TYPES = (
    BlockType.CHECKBOX,
    BlockType.SINGLE_SELECT,
    BlockType.TEXT,
    BlockType.FILE,
    BlockType.EMAIL,
    BlockType.URL,
    BlockType.PHONE,
)

PRESENTATIONAL_BLOCK_TYPES = (
    BlockType.HEADING_ONE,
    BlockType.HEADING_TWO,
    BlockType.HEADING_THREE,
    BlockType.DIVIDER,
    BlockType.PARAGRAPH,
)

# Older form definitions suffix field tags with "_field"
LEGACY_BLOCK_TYPE_ALIASES = {
    f"{block_type.value}_field": block_type for block_type in FIELD_BLOCK_TYPES
}


def resolve_block_type(tag: Any) -> Optional[BlockType]:
    """Map a raw type tag (current or legacy) to a BlockType. None if unknown."""
    if isinstance(tag, BlockType):
        return tag
    if not isinstance(tag, str):
        return None
    if tag in LEGACY_BLOCK_TYPE_ALIASES:
        return LEGACY_BLOCK_TYPE_ALIASES[tag]
    try:
        return BlockType(tag)
    except ValueError:
        return None


def is_field_block_type(tag: Any) -> bool:
    """True if the tag names a block that collects a value."""
    return resolve_block_type(tag) in FIELD_BLOCK_TYPES
