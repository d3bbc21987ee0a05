# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from library.database import Database
from library.models import Book
from library.repositories import BookRepository

@pytest.fixture
def database():
    """Create an in-memory test database with the schema in place"""
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

@pytest.fixture
def book_repo(db_session):
    """Fixture to create a BookRepository instance"""
    return BookRepository(db_session)

@pytest.fixture
def sample_book(db_session):
    """Create a sample book for testing."""
    book = Book(
        title="The Hobbit",
        author="J.R.R. Tolkien",
        publisher="George Allen & Unwin",
        genre="Fantasy"
    )
    db_session.add(book)
    db_session.flush()
    return book

@pytest.fixture
def multiple_books(db_session):
    """Create 25 books for paging and sorting tests."""
    books = []
    for i in range(1, 26):
        book = Book(
            title=f"Test Book {i:02d}",
            author=f"Test Author {i % 5}",
            genre="Fantasy" if i % 2 else "Science Fiction"
        )
        db_session.add(book)
        books.append(book)
    db_session.flush()
    return books
