"""
Pagination utilities.

Computes page boundaries, navigation targets and page-button ranges from a
current page, a result count and a page size. Everything is derived once at
construction; a PageCalculator never changes after it is built.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from pydantic import BaseModel

from config import config

logger = logging.getLogger(__name__)


class PaginationError(ValueError):
    """Base exception for pagination errors."""
    pass


class InvalidArgumentError(PaginationError):
    """Exception for rejected calculator inputs."""
    pass


class PageOutOfRangeError(PaginationError):
    """Exception for a current page beyond the last page."""
    pass


class ArithmeticOverflowError(PaginationError):
    """Exception for offsets or counts past the representable range."""
    pass


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _checked(value: int, what: str) -> int:
    """Return value, raising ArithmeticOverflowError if it leaves the configured range."""
    if value > config.MAX_INTEGER:
        logger.warning(f"Pagination overflow computing {what}: {value} > {config.MAX_INTEGER}")
        raise ArithmeticOverflowError(
            f"{what} ({value}) exceeds the maximum of {config.MAX_INTEGER}"
        )
    return value


class PageInfo(BaseModel):
    """Serializable snapshot of a PageCalculator for templates and JSON responses."""

    current_page: int
    page_size: int
    button_count: int
    page_count: int
    first: int
    last: int
    previous: int
    next: int
    has_previous: bool
    has_next: bool
    skip: int
    take: int
    current_count: int
    total_count: int
    between_pages: Dict[int, str]
    all_pages: Dict[int, str]


class PageCalculator:
    """
    Immutable pagination metadata for one page of a result set.

    Navigation targets are page numbers, or -1 when the target is not
    available (e.g. ``previous`` on the first page).
    """

    def __init__(
        self,
        current_page: Optional[int],
        results_count: int,
        page_size: Optional[int] = None,
        button_count: Optional[int] = None,
        strict: Optional[bool] = None,
    ):
        """
        Validate inputs and compute the page metadata.

        Args:
            current_page: Requested page (1-indexed); None means the first page
            results_count: Total number of items being paginated
            page_size: Number of items per page (defaults to config.DEFAULT_PAGE_SIZE)
            button_count: Number of page buttons in between_pages
                (defaults to config.DEFAULT_BUTTON_COUNT)
            strict: Raise when current_page is past the last page; when False
                the page is clamped to the last page (defaults to config.STRICT_PAGE_RANGE)

        Raises:
            InvalidArgumentError: If any input is not a valid integer for its role
            PageOutOfRangeError: If current_page exceeds the page count in strict mode
            ArithmeticOverflowError: If an offset or count exceeds config.MAX_INTEGER
        """
        if page_size is None:
            page_size = config.DEFAULT_PAGE_SIZE
        if button_count is None:
            button_count = config.DEFAULT_BUTTON_COUNT
        if strict is None:
            strict = config.STRICT_PAGE_RANGE

        for name, value in (
            ("results_count", results_count),
            ("page_size", page_size),
            ("button_count", button_count),
        ):
            if not _is_int(value):
                raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
        if current_page is not None and not _is_int(current_page):
            raise InvalidArgumentError(f"current_page must be an integer, got {current_page!r}")

        if current_page is not None and current_page <= 0:
            raise InvalidArgumentError(f"current_page must be positive, got {current_page}")
        if results_count < 0:
            raise InvalidArgumentError(f"results_count must not be negative, got {results_count}")
        if page_size <= 0:
            raise InvalidArgumentError(f"page_size must be positive, got {page_size}")
        if button_count < 1:
            raise InvalidArgumentError(f"button_count must be at least 1, got {button_count}")

        self._results_count = _checked(results_count, "results_count")
        self._page_size = _checked(page_size, "page_size")
        self._button_count = button_count
        current_page = current_page or 1

        # Exact ceiling division
        self._page_count = -(-results_count // page_size) if results_count > 0 else 0

        # Range check before overflow check so lenient mode clamps oversized pages
        if self._page_count > 0 and current_page > self._page_count:
            if strict:
                raise PageOutOfRangeError(
                    f"The current page '{current_page}' is greater than "
                    f"the page count '{self._page_count}'"
                )
            logger.warning(
                f"Clamping current page {current_page} to last page {self._page_count}"
            )
            current_page = self._page_count

        self._current_page = _checked(current_page, "current_page")

        self._page_start = max(0, _checked((self._current_page - 1) * page_size, "page_start"))
        self._page_end = _checked(self._page_start + page_size, "page_end")

        self._between_pages = self._build_between_pages()
        self._all_pages = self._build_all_pages()

        logger.debug(
            f"Computed pagination: page={self._current_page} of {self._page_count}, "
            f"results={results_count}, page_size={page_size}"
        )

    @classmethod
    def empty(cls) -> "PageCalculator":
        """A calculator for an empty result set: first page, nothing to page through."""
        return cls(1, 0)

    # Inputs

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def button_count(self) -> int:
        return self._button_count

    # Counts and offsets

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def page_start(self) -> int:
        """Zero-based offset of the first item on the current page."""
        return self._page_start

    @property
    def skip(self) -> int:
        return self._page_start

    @property
    def take(self) -> int:
        return self._page_size

    @property
    def current_count(self) -> int:
        """Number of items shown up to and including the current page."""
        return min(self._page_end, self._results_count)

    @property
    def total_count(self) -> int:
        return self._results_count

    # Navigation

    @property
    def first(self) -> int:
        return 1

    @property
    def last(self) -> int:
        return self._page_count

    @property
    def previous(self) -> int:
        if self._page_count > 1 and self._page_start > 0:
            return self._current_page - 1
        return config.NOT_AVAILABLE

    @property
    def next(self) -> int:
        if self._page_count > 1 and self._page_end < self._results_count:
            return self._current_page + 1
        return config.NOT_AVAILABLE

    def get_previous(self, n: int) -> int:
        """
        Page number n pages before the current one.

        Args:
            n: Number of pages to jump back; any positive size is accepted
                since a returned page always lies within 1..page_count

        Returns:
            The target page, or -1 if it would fall before the first page
        """
        if not _is_int(n) or n <= 0:
            raise InvalidArgumentError(f"Jump size must be a positive integer, got {n!r}")
        if self._page_count > 1 and self._page_start > 0 and self._current_page - n > 0:
            return self._current_page - n
        return config.NOT_AVAILABLE

    def get_next(self, n: int) -> int:
        """
        Page number n pages after the current one.

        Args:
            n: Number of pages to jump forward; any positive size is accepted
                since a returned page always lies within 1..page_count

        Returns:
            The target page, or -1 if it would pass the last page
        """
        if not _is_int(n) or n <= 0:
            raise InvalidArgumentError(f"Jump size must be a positive integer, got {n!r}")
        if self._page_count > 1 and self._page_count >= self._current_page + n:
            return self._current_page + n
        return config.NOT_AVAILABLE

    @property
    def previous_ten(self) -> int:
        return self.get_previous(10)

    @property
    def previous_twenty(self) -> int:
        return self.get_previous(20)

    @property
    def previous_thirty(self) -> int:
        return self.get_previous(30)

    @property
    def previous_forty(self) -> int:
        return self.get_previous(40)

    @property
    def previous_fifty(self) -> int:
        return self.get_previous(50)

    @property
    def previous_hundred(self) -> int:
        return self.get_previous(100)

    @property
    def next_ten(self) -> int:
        return self.get_next(10)

    @property
    def next_twenty(self) -> int:
        return self.get_next(20)

    @property
    def next_thirty(self) -> int:
        return self.get_next(30)

    @property
    def next_forty(self) -> int:
        return self.get_next(40)

    @property
    def next_fifty(self) -> int:
        return self.get_next(50)

    @property
    def next_hundred(self) -> int:
        return self.get_next(100)

    # Page buttons

    @property
    def between_pages(self) -> Dict[int, str]:
        """Window of at most button_count pages around the current page."""
        return dict(self._between_pages)

    @property
    def all_pages(self) -> Dict[int, str]:
        """Every page number, in order, tagged "active" at the current page."""
        return dict(self._all_pages)

    def _tag(self, page: int) -> str:
        return config.ACTIVE_CLASS if page == self._current_page else ""

    def _build_between_pages(self) -> Dict[int, str]:
        if self._page_count <= 1 or self._button_count < 1:
            return {}

        mod = self._button_count // 2
        if self._button_count % 2:
            start = self._current_page - mod
        else:
            # Even windows show one more page after the current page than before it
            start = self._current_page - mod + 1
        end = self._current_page + mod

        if start <= 0:
            start = 1
            end = min(self._button_count, self._page_count)

        if end >= self._page_count and start != 1:
            start = self._page_count - self._button_count + 1
            end = self._page_count

        # Window wider than the page range
        start = max(start, 1)
        end = min(end, self._page_count)

        return {page: self._tag(page) for page in range(start, end + 1)}

    def _build_all_pages(self) -> Dict[int, str]:
        if self._page_count <= 1:
            return {}
        return {page: self._tag(page) for page in range(1, self._page_count + 1)}

    # Consumers

    def slice(self, items: Sequence) -> Sequence:
        """Return the items on the current page of a sliceable sequence."""
        return items[self.skip:self.skip + self.take]

    def to_page_info(self) -> PageInfo:
        """
        Get pagination info for templates and API responses.

        Returns:
            PageInfo model with every read-only field
        """
        return PageInfo(
            current_page=self._current_page,
            page_size=self._page_size,
            button_count=self._button_count,
            page_count=self._page_count,
            first=self.first,
            last=self.last,
            previous=self.previous,
            next=self.next,
            has_previous=self.previous != config.NOT_AVAILABLE,
            has_next=self.next != config.NOT_AVAILABLE,
            skip=self.skip,
            take=self.take,
            current_count=self.current_count,
            total_count=self.total_count,
            between_pages=self.between_pages,
            all_pages=self.all_pages,
        )

    def _key(self):
        return (self._current_page, self._results_count, self._page_size, self._button_count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PageCalculator):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"PageCalculator(current_page={self._current_page}, "
            f"results_count={self._results_count}, page_size={self._page_size}, "
            f"button_count={self._button_count})"
        )


def create(
    current_page: Optional[int],
    results_count: int,
    page_size: Optional[int] = None,
    button_count: Optional[int] = None,
    strict: Optional[bool] = None,
) -> PageCalculator:
    """
    Build a PageCalculator.

    Args:
        current_page: Requested page (1-indexed); None means the first page
        results_count: Total number of items
        page_size: Items per page
        button_count: Buttons in the between_pages window
        strict: Whether a page past the last page raises or is clamped

    Returns:
        A fully computed PageCalculator
    """
    return PageCalculator(current_page, results_count, page_size, button_count, strict)
