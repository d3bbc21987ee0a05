# library/api/routes/books.py

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from library.api.dependencies import get_book_repository
from library.api.schemas.book import Book, BookCreate, BookList, BookUpdate
from library.exceptions import EntityNotFoundError, InvalidSortPropertyError
from library.models import Book as BookModel
from library.repositories import BookRepository, Direction, Pageable, Sort

router = APIRouter(prefix="/books", tags=["books"])

@router.get("", response_model=BookList)
def get_books(
    sort: str = Query("id", description="Sort field (id, title, author, publisher, genre, created_at)"),
    order: str = Query("asc", description="Sort order (asc or desc)"),
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(20, ge=1, le=100, description="Items per page"),
    repo: BookRepository = Depends(get_book_repository)
):
    """
    Get a paginated list of books.

    Args:
        sort: Field to sort by
        order: Sort order (asc or desc)
        page: Page number (1-based)
        size: Number of items per page
        repo: Book repository

    Returns:
        BookList containing one page of books
    """
    # Validate sort order
    try:
        direction = Direction.from_string(order)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    pageable = Pageable(page - 1, size, Sort.by(sort, direction=direction))
    try:
        result = repo.find_all_paged(pageable)
    except InvalidSortPropertyError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return BookList(
        items=[Book.model_validate(book) for book in result],
        total=result.total_elements,
        page=page,
        size=size,
        pages=result.total_pages
    )

@router.get("/count")
def count_books(repo: BookRepository = Depends(get_book_repository)):
    return {"count": repo.count()}

@router.get("/{book_id}", response_model=Book)
def get_book(book_id: int, repo: BookRepository = Depends(get_book_repository)):
    """
    Get a book by its id.

    Raises:
        HTTPException: If the book is not found
    """
    try:
        return Book.model_validate(repo.get_by_id(book_id))
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail=f"Book with id {book_id} not found")

@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(book: BookCreate, repo: BookRepository = Depends(get_book_repository)):
    saved = repo.save(BookModel(**book.model_dump()))
    return Book.model_validate(saved)

@router.put("/{book_id}", response_model=Book)
def update_book(book_id: int, changes: BookUpdate, repo: BookRepository = Depends(get_book_repository)):
    """
    Update the given fields of a book. Fields left out of the body keep
    their current value.

    Raises:
        HTTPException: If the book is not found
    """
    book = repo.find_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail=f"Book with id {book_id} not found")

    updates = changes.model_dump(exclude_unset=True)
    for required in ("title", "author"):
        if required in updates and updates[required] is None:
            raise HTTPException(status_code=400, detail=f"Field '{required}' must not be null")

    for field, value in updates.items():
        setattr(book, field, value)
    return Book.model_validate(repo.save(book))

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, repo: BookRepository = Depends(get_book_repository)):
    if not repo.exists_by_id(book_id):
        raise HTTPException(status_code=404, detail=f"Book with id {book_id} not found")
    repo.delete_by_id(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
