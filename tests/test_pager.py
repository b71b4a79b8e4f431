"""Tests for the pagination loop and its retry budget."""

import httpx
import pytest

from bc_rest.exceptions import ApiError, MaxRetriesError, NoContentError, TransportError
from bc_rest.models.common import Pagination
from bc_rest.pager import (
    LEGACY_PAGE_LIMIT,
    PageResult,
    count_has_more,
    meta_has_more,
    paginate,
)


def count_based_fetcher(page_sizes, calls):
    """Serve pages of the given sizes with legacy count-based detection."""

    def fetch(page):
        calls.append(page)
        size = page_sizes[page - 1] if page <= len(page_sizes) else 0
        items = [f"p{page}-{i}" for i in range(size)]
        return PageResult(items, count_has_more(items, LEGACY_PAGE_LIMIT))

    return fetch


class TestCountBasedPagination:
    """Tests for legacy full-page detection."""

    @pytest.mark.parametrize(
        "page_sizes",
        [[0], [1], [249], [250, 1], [250, 250, 17]],
    )
    def test_returns_every_item(self, page_sizes):
        """Test all items are returned when the last page is short."""
        calls = []

        items = paginate(count_based_fetcher(page_sizes, calls), max_retries=3)

        assert len(items) == sum(page_sizes)
        assert calls == list(range(1, len(page_sizes) + 1))

    def test_exact_multiple_costs_one_extra_request(self):
        """Test a full last page triggers one more, empty request."""
        calls = []

        items = paginate(count_based_fetcher([250, 250], calls), max_retries=3)

        assert len(items) == 500
        assert calls == [1, 2, 3]

    def test_items_keep_page_order(self):
        """Test items are accumulated in page order."""
        items = paginate(count_based_fetcher([250, 2], []), max_retries=0)

        assert items[0] == "p1-0"
        assert items[-1] == "p2-1"


class TestMetaBasedPagination:
    """Tests for v3 current/total page detection."""

    def test_three_pages_three_requests(self):
        """Test total_pages=3 issues exactly three requests."""
        calls = []

        def fetch(page):
            calls.append(page)
            pagination = Pagination(current_page=page, total_pages=3)
            return PageResult([page], meta_has_more(pagination))

        items = paginate(fetch, max_retries=3)

        assert items == [1, 2, 3]
        assert calls == [1, 2, 3]

    def test_empty_collection(self):
        """Test zero total pages stops after the first request."""
        assert not meta_has_more(Pagination(current_page=1, total_pages=0))


class TestRetryBudget:
    """Tests for retry exhaustion and partial results."""

    def test_always_failing_fetch_raises_max_retries(self):
        """Test a fetch that always fails gives up after max_retries + 1 attempts."""
        calls = []

        def fetch(page):
            calls.append(page)
            raise TransportError("connection reset")

        with pytest.raises(MaxRetriesError) as exc_info:
            paginate(fetch, max_retries=2)

        assert len(calls) == 3
        assert exc_info.value.items == []
        assert isinstance(exc_info.value.__cause__, TransportError)
        assert str(exc_info.value) == "max retries reached"

    def test_partial_items_returned_with_failure(self):
        """Test items gathered before the failures are kept on the error."""

        def fetch(page):
            if page == 1:
                return PageResult(["a", "b"], True)
            raise ApiError("Internal Server Error", status_code=500)

        with pytest.raises(MaxRetriesError) as exc_info:
            paginate(fetch, max_retries=1)

        assert exc_info.value.items == ["a", "b"]

    def test_failed_page_is_retried(self):
        """Test a transient failure retries the same page."""
        calls = []

        def fetch(page):
            calls.append(page)
            if len(calls) == 2:
                raise TransportError("timeout")
            return PageResult([page], page < 2)

        items = paginate(fetch, max_retries=1)

        assert items == [1, 2]
        assert calls == [1, 2, 2]

    def test_counter_resets_after_success(self):
        """Test the budget counts consecutive failures only."""
        failures = {2: 1, 3: 1}
        calls = []

        def fetch(page):
            calls.append(page)
            if failures.get(page):
                failures[page] -= 1
                raise TransportError("flaky")
            return PageResult([page], page < 3)

        items = paginate(fetch, max_retries=1)

        assert items == [1, 2, 3]
        assert calls == [1, 2, 2, 3, 3]

    def test_no_content_counts_as_failure(self):
        """Test a 204 page is a failure, not an empty page."""

        def fetch(page):
            raise NoContentError()

        with pytest.raises(MaxRetriesError) as exc_info:
            paginate(fetch, max_retries=0)

        assert isinstance(exc_info.value.__cause__, NoContentError)

    def test_unexpected_errors_propagate(self):
        """Test non-API exceptions are not consumed by the retry loop."""

        def fetch(page):
            raise KeyError("bug")

        with pytest.raises(KeyError):
            paginate(fetch, max_retries=5)

    def test_raw_transport_error_is_retried(self):
        """Test an unwrapped httpx transport failure counts against the budget."""
        calls = []

        def fetch(page):
            calls.append(page)
            if len(calls) == 1:
                raise httpx.ConnectError("refused")
            return PageResult([page], False)

        assert paginate(fetch, max_retries=1) == [1]
        assert calls == [1, 1]

    def test_raw_transport_error_exhausts(self):
        """Test repeated httpx transport failures end in MaxRetriesError."""

        def fetch(page):
            raise httpx.ReadTimeout("slow")

        with pytest.raises(MaxRetriesError) as exc_info:
            paginate(fetch, max_retries=0)

        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
