# library/repositories/book.py
from library.models import Book
from .base import CrudRepository

class BookRepository(CrudRepository[Book, int]):
    """Repository for Book entities, keyed by integer id.

    Adds nothing to the inherited CrudRepository operations.
    """
