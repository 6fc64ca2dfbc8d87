"""
Optional movie filters.

Each builder returns a SQLAlchemy boolean clause for a supplied value and
``None`` for an absent one; ``None`` means "no constraint" and is dropped
by :func:`active_filters` before the query is composed.
"""
from catalog.models.movie import Movie


def released_after(release_date):
    """``movie.release_date > release_date`` (exclusive bound)."""
    if release_date is None:
        return None
    return Movie.release_date > release_date


def updated_since(timestamp):
    """``movie.updated_at > timestamp`` (exclusive bound)."""
    if timestamp is None:
        return None
    return Movie.updated_at > timestamp


def active_filters(*predicates):
    return [p for p in predicates if p is not None]
