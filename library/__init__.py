# library/__init__.py
from .database import Database
from .models import Base, Book
from .repositories import BookRepository, CrudRepository

__all__ = [
    'Database',
    'Base',
    'Book',
    'BookRepository',
    'CrudRepository'
]
