# library/repositories/__init__.py
from .base import CrudRepository
from .book import BookRepository
from .paging import Direction, Order, Page, Pageable, Sort

__all__ = [
    'CrudRepository',
    'BookRepository',
    'Direction',
    'Order',
    'Page',
    'Pageable',
    'Sort'
]
