# library/api/schemas/__init__.py
from .book import BookBase, BookCreate, BookUpdate, Book, BookList

__all__ = ['BookBase', 'BookCreate', 'BookUpdate', 'Book', 'BookList']
