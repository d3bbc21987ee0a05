# library/models/__init__.py
from .base import Base, TimestampMixin
from .book import Book

__all__ = [
    'Base',
    'TimestampMixin',
    'Book'
]
