import logging
import math
from collections import namedtuple

from catalog.models.movie import Movie

logger = logging.getLogger(__name__)

PageRequest = namedtuple("PageRequest", ["page", "size"])


def page_request(page=None, size=None, default_size=20, max_size=2000):
    """Normalize a zero-based page index and a page size.

    Missing or negative pages become 0, missing or non-positive sizes fall
    back to ``default_size`` and anything above ``max_size`` is capped.
    """
    page = max(page or 0, 0)
    if size is None or size < 1:
        size = default_size
    return PageRequest(page, min(size, max_size))


class Page:
    """One window of a result set plus the total across all windows."""

    def __init__(self, items, total, page, size):
        self.items = items
        self.total = total
        self.page = page
        self.size = size

    @property
    def total_pages(self):
        return math.ceil(self.total / self.size) if self.size > 0 else 0

    @property
    def has_next(self):
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self):
        return self.page > 0

    def __repr__(self):
        return f"<Page {self.page}/{self.total_pages} size={self.size} total={self.total}>"


def paginate(query, window, order_by):
    """Run ``query`` for one window. ``order_by`` must be a total order so windows never overlap."""
    total = query.order_by(None).count()
    offset = window.page * window.size
    if offset >= total:
        # past the last row; the offset may not even fit the engine's integer type
        return Page([], total, window.page, window.size)
    items = (
        query.order_by(*order_by)
        .limit(window.size)
        .offset(offset)
        .all()
    )
    return Page(items, total, window.page, window.size)


def find_movies(window, predicates=()):
    """AND together every active predicate and return the requested page of movies, by id."""
    query = Movie.query.filter(*predicates)
    page = paginate(query, window, order_by=(Movie.id.asc(),))
    logger.debug("movies page=%d size=%d filters=%d -> %d of %d",
                 page.page, page.size, len(predicates), len(page.items), page.total)
    return page
