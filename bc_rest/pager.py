"""Pagination over paged collections with a bounded retry budget.

Two conventions are in use:

- legacy v2 lists are bare arrays; a page is followed by another when it is
  full (``len(items) == limit``), so a collection whose size is an exact
  multiple of the limit costs one extra, empty request;
- v3 envelopes carry ``meta.pagination`` and the walk continues while
  ``current_page < total_pages``.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Sequence, TypeVar

import httpx

from bc_rest.exceptions import BigCommerceError, MaxRetriesError
from bc_rest.models.common import Pagination

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Page size used by the legacy v2 list endpoints
LEGACY_PAGE_LIMIT = 250


@dataclass
class PageResult(Generic[T]):
    """One fetched page and whether another page follows."""

    items: List[T] = field(default_factory=list)
    has_more: bool = False


def count_has_more(items: Sequence, limit: int = LEGACY_PAGE_LIMIT) -> bool:
    """Count-based detection for legacy lists."""
    return len(items) == limit


def meta_has_more(pagination: Pagination) -> bool:
    """Meta-based detection for v3 envelopes."""
    return pagination.current_page < pagination.total_pages


def paginate(fetch_page: Callable[[int], PageResult[T]], max_retries: int) -> List[T]:
    """Fetch every page starting at 1 and return all items in order.

    A failed page (any :class:`BigCommerceError` or unwrapped
    :class:`httpx.TransportError`) is retried until ``max_retries``
    consecutive failures have been exceeded; the counter resets after each
    successful page. On exhaustion :class:`MaxRetriesError` is raised with the
    items collected so far, chained from the last failure.

    Args:
        fetch_page: Callable returning the :class:`PageResult` for a page number
        max_retries: Consecutive failures tolerated before giving up

    Returns:
        All items across pages
    """
    items: List[T] = []
    page = 1
    retries = 0

    while True:
        try:
            result = fetch_page(page)
        except MaxRetriesError:
            raise
        except (BigCommerceError, httpx.TransportError) as e:
            retries += 1
            if retries > max_retries:
                logger.error(f"Max retries reached on page {page}: {e}")
                raise MaxRetriesError(items=items) from e
            logger.warning(f"Page {page} failed ({e}), retry {retries}/{max_retries}")
            continue

        retries = 0
        items.extend(result.items)
        if not result.has_more:
            return items
        page += 1
