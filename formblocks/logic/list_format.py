"""
List Formatting

Joins already-formatted items into an English phrase for error messages.
"""

from typing import Iterable

from formblocks.config.constants import DISJUNCTION


def join_list(items: Iterable[str], conjunction: str = DISJUNCTION) -> str:
    """
    Join items with commas and a final conjunction.

    >>> join_list(["a", "b", "c"])
    'a, b, or c'
    >>> join_list(["a", "b"], "and")
    'a and b'
    """
    items = list(items)
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} {conjunction} {items[1]}"
    return f"{', '.join(items[:-1])}, {conjunction} {items[-1]}"


def format_disjunction(items: Iterable[str]) -> str:
    """'a, b, or c'"""
    return join_list(items, DISJUNCTION)
