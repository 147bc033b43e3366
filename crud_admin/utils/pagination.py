"""Page window calculation for paginated list views.

Follows the jw-paginate algorithm: the current page sits in the middle of
a window of at most ``max_pages`` links, sliding to the edges near the
first and last pages.
"""

import math

from pydantic import BaseModel, ConfigDict


class Pagination(BaseModel):
    """Page window for a list view."""

    model_config = ConfigDict(frozen=True)

    total_items: int
    current_page: int
    page_size: int
    total_pages: int
    start_page: int
    end_page: int
    # zero-based slice bounds of the current page, end inclusive
    start_index: int
    end_index: int
    pages: list[int]

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


def paginate(total_items: int, current_page: int = 1, page_size: int = 10, max_pages: int = 10) -> Pagination:
    """Calculate the page window for ``current_page``.

    An empty collection still has one (empty) page. Out-of-range pages are
    clamped to the first or last page.

    Args:
        total_items: Number of records in the collection
        current_page: 1-based page requested by the user
        page_size: Records per page
        max_pages: Maximum number of page links in the window

    Returns:
        Pagination window

    Raises:
        ValueError: If page_size or max_pages is below 1, or total_items is negative
    """
    if page_size < 1 or max_pages < 1:
        raise ValueError("page_size and max_pages must be at least 1")
    if total_items < 0:
        raise ValueError("total_items must not be negative")

    total_pages = max(1, math.ceil(total_items / page_size))
    current_page = min(max(current_page, 1), total_pages)

    if total_pages <= max_pages:
        start_page, end_page = 1, total_pages
    else:
        before = max_pages // 2
        after = math.ceil(max_pages / 2) - 1
        if current_page <= before:
            start_page, end_page = 1, max_pages
        elif current_page + after >= total_pages:
            start_page, end_page = total_pages - max_pages + 1, total_pages
        else:
            start_page, end_page = current_page - before, current_page + after

    start_index = (current_page - 1) * page_size
    end_index = min(start_index + page_size - 1, total_items - 1)

    return Pagination(
        total_items=total_items,
        current_page=current_page,
        page_size=page_size,
        total_pages=total_pages,
        start_page=start_page,
        end_page=end_page,
        start_index=start_index,
        end_index=end_index,
        pages=list(range(start_page, end_page + 1)),
    )
