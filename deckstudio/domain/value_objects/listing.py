"""
Listing scopes and page results for presentation queries.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, TypeVar

T = TypeVar("T")


class ListScope(str, Enum):
    """
    Which presentations a listing covers.

    OWNER lists the requester's presentations (every presentation when no
    owner is known). PUBLIC lists public presentations. BY_OWNER lists the
    public presentations of one owner.
    """

    OWNER = "owner"
    PUBLIC = "public"
    BY_OWNER = "by_owner"


def has_more_by_page_fullness(item_count: int, page_size: int) -> bool:
    """A full page is taken to mean another page exists."""
    return item_count == page_size


def has_more_by_total(skip: int, page_size: int, total: int) -> bool:
    return skip + page_size < total


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    has_more: bool = False
    page: int = 0
    page_size: int = 10
