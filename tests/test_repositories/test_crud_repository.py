# tests/test_repositories/test_crud_repository.py
import pytest
from library.exceptions import EntityNotFoundError, InvalidSortPropertyError
from library.models import Book
from library.repositories import BookRepository, CrudRepository, Pageable, Sort

def test_unbound_repository_needs_a_model(db_session):
    with pytest.raises(TypeError):
        CrudRepository(db_session)

def test_model_can_be_passed_explicitly(db_session, sample_book):
    repo = CrudRepository(db_session, Book)
    assert repo.find_by_id(sample_book.id) is sample_book

def test_save_updates_existing_book(book_repo, sample_book):
    sample_book.genre = "Classic"
    saved = book_repo.save(sample_book)
    assert saved is sample_book
    assert book_repo.count() == 1
    assert book_repo.find_by_id(sample_book.id).genre == "Classic"

def test_save_merges_detached_book(book_repo, db_session, sample_book):
    db_session.commit()
    db_session.expunge(sample_book)

    detached = Book(id=sample_book.id, title="The Hobbit", author="Tolkien")
    merged = book_repo.save(detached)
    assert merged is not detached
    assert merged.id == sample_book.id
    assert book_repo.count() == 1
    assert book_repo.find_by_id(sample_book.id).author == "Tolkien"

def test_save_with_unused_id_inserts(book_repo):
    saved = book_repo.save(Book(id=42, title="Ulysses", author="James Joyce"))
    assert saved.id == 42
    assert book_repo.exists_by_id(42)

def test_save_all(book_repo):
    saved = book_repo.save_all([
        Book(title="Emma", author="Jane Austen"),
        Book(title="Persuasion", author="Jane Austen"),
    ])
    assert len(saved) == 2
    assert all(book.id is not None for book in saved)
    assert book_repo.count() == 2

def test_get_by_id(book_repo, sample_book):
    assert book_repo.get_by_id(sample_book.id) is sample_book

def test_get_by_nonexistent_id_raises(book_repo):
    with pytest.raises(EntityNotFoundError) as exc_info:
        book_repo.get_by_id(999)
    assert exc_info.value.model is Book
    assert exc_info.value.id == 999

def test_exists_by_id(book_repo, sample_book):
    assert book_repo.exists_by_id(sample_book.id) is True

def test_none_arguments_are_rejected(book_repo):
    with pytest.raises(ValueError):
        book_repo.find_by_id(None)
    with pytest.raises(ValueError):
        book_repo.exists_by_id(None)
    with pytest.raises(ValueError):
        book_repo.save(None)
    with pytest.raises(ValueError):
        book_repo.delete_by_id(None)
    with pytest.raises(ValueError):
        book_repo.find_all_by_id(None)
    with pytest.raises(ValueError):
        book_repo.save_all(None)
    with pytest.raises(ValueError):
        book_repo.delete_all_by_id(None)
    with pytest.raises(ValueError):
        book_repo.delete(None)
    with pytest.raises(ValueError):
        book_repo.get_by_id(None)

def test_find_all(book_repo, multiple_books):
    assert len(book_repo.find_all()) == 25

def test_find_all_sorted(book_repo, multiple_books):
    books = book_repo.find_all(Sort.by("title", direction="desc"))
    titles = [book.title for book in books]
    assert titles == sorted(titles, reverse=True)
    assert titles[0] == "Test Book 25"

def test_find_all_sorted_by_several_properties(book_repo, multiple_books):
    books = book_repo.find_all(Sort.by("author").and_(Sort.by("title", direction="desc")))
    keys = [(book.author, book.title) for book in books]
    expected = sorted(sorted(keys, key=lambda k: k[1], reverse=True), key=lambda k: k[0])
    assert keys == expected

def test_find_all_with_invalid_sort_property(book_repo, multiple_books):
    with pytest.raises(InvalidSortPropertyError) as exc_info:
        book_repo.find_all(Sort.by("isbn"))
    assert isinstance(exc_info.value, ValueError)
    assert "isbn" in str(exc_info.value)

def test_find_all_by_id_skips_missing(book_repo, multiple_books):
    ids = [multiple_books[0].id, multiple_books[3].id, 999]
    books = book_repo.find_all_by_id(ids)
    assert {book.id for book in books} == {multiple_books[0].id, multiple_books[3].id}
    assert book_repo.find_all_by_id([]) == []

def test_find_all_paged_first_page(book_repo, multiple_books):
    page = book_repo.find_all_paged(Pageable(0, 10))
    assert len(page) == 10
    assert page.total_elements == 25
    assert page.total_pages == 3
    assert page.is_first and page.has_next
    assert not page.has_previous
    assert [book.id for book in page] == [book.id for book in multiple_books[:10]]

def test_find_all_paged_last_page(book_repo, multiple_books):
    page = book_repo.find_all_paged(Pageable(2, 10))
    assert page.number_of_elements == 5
    assert page.is_last
    assert page.has_previous
    assert page.next_pageable() is None

def test_find_all_paged_beyond_last_page(book_repo, multiple_books):
    page = book_repo.find_all_paged(Pageable(5, 10))
    assert page.content == []
    assert page.total_elements == 25

def test_find_all_paged_sorted(book_repo, multiple_books):
    page = book_repo.find_all_paged(Pageable(0, 5, Sort.by("title", direction="desc")))
    assert [book.title for book in page] == [f"Test Book {i}" for i in range(25, 20, -1)]

def test_find_all_paged_empty(book_repo):
    page = book_repo.find_all_paged(Pageable(0, 10))
    assert page.total_elements == 0
    assert page.total_pages == 0
    assert page.is_first and page.is_last

def test_count(book_repo, multiple_books):
    assert book_repo.count() == 25

def test_delete_by_id(book_repo, sample_book):
    book_repo.delete_by_id(sample_book.id)
    assert book_repo.find_by_id(sample_book.id) is None
    assert book_repo.count() == 0

def test_delete_by_nonexistent_id_is_ignored(book_repo, sample_book):
    book_repo.delete_by_id(999)
    assert book_repo.count() == 1

def test_delete(book_repo, sample_book):
    book_repo.delete(sample_book)
    assert book_repo.exists_by_id(sample_book.id) is False

def test_delete_unsaved_book_is_ignored(book_repo, sample_book):
    book_repo.delete(Book(title="Unsaved", author="Nobody"))
    assert book_repo.count() == 1

def test_delete_all_by_id(book_repo, multiple_books):
    book_repo.delete_all_by_id([book.id for book in multiple_books[:5]])
    assert book_repo.count() == 20

def test_delete_given_books(book_repo, multiple_books):
    book_repo.delete_all(multiple_books[:3])
    assert book_repo.count() == 22

def test_delete_all(book_repo, multiple_books):
    book_repo.delete_all()
    assert book_repo.count() == 0

def test_delete_all_in_batch(book_repo, multiple_books):
    assert book_repo.delete_all_in_batch() == 25
    assert book_repo.count() == 0

def test_repository_does_not_commit(book_repo, db_session):
    book_repo.save(Book(title="Emma", author="Jane Austen"))
    db_session.rollback()
    assert BookRepository(db_session).count() == 0
