# library/api/dependencies.py
from typing import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from library.database import Database
from library.repositories import BookRepository

def get_database(request: Request) -> Database:
    return request.app.state.database

def get_db(database: Database = Depends(get_database)) -> Iterator[Session]:
    """Get a database session.

    This is a FastAPI dependency that opens one transactional session per
    request. The session is committed when the request succeeds, rolled
    back when it raises, and closed either way.

    Yields:
        Session: A SQLAlchemy session
    """
    with database.get_db() as session:
        yield session

def get_book_repository(db: Session = Depends(get_db)) -> BookRepository:
    return BookRepository(db)
