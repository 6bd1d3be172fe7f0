"""Shared building blocks for stationwx record collections."""

from .queryable_collection import QueryableCollection

__all__ = [
    'QueryableCollection',
]
