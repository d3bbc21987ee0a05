# library/cli/commands/book.py
from typing import Optional

import click

from library.database import Database
from library.exceptions import EntityNotFoundError, InvalidSortPropertyError
from library.models import Book
from library.repositories import BookRepository, Pageable, Sort

def _print_book(book_obj: Book) -> None:
    click.echo(click.style(f"[{book_obj.id}] ", fg='cyan') + click.style(book_obj.title, bold=True))
    click.echo(f"  Author: {book_obj.author}")
    if book_obj.publisher:
        click.echo(f"  Publisher: {book_obj.publisher}")
    if book_obj.genre:
        click.echo(f"  Genre: {book_obj.genre}")

def _fail(ctx: click.Context, message: str) -> None:
    click.echo(click.style(message, fg='red'), err=True)
    ctx.exit(1)

@click.group()
def book():
    """Book related commands"""
    pass

@book.command()
@click.argument('title')
@click.option('--author', required=True, help='Author of the book')
@click.option('--publisher', default=None, help='Publisher of the book')
@click.option('--genre', default=None, help='Genre of the book')
@click.pass_obj
def add(database: Database, title: str, author: str, publisher: Optional[str], genre: Optional[str]):
    """Add a book

    Example:
        library book add "The Hobbit" --author "J.R.R. Tolkien" --genre Fantasy
    """
    with database.get_db() as session:
        saved = BookRepository(session).save(
            Book(title=title, author=author, publisher=publisher, genre=genre)
        )
        click.echo("Successfully created book:")
        _print_book(saved)

@book.command()
@click.argument('book_id', type=int)
@click.pass_context
def show(ctx: click.Context, book_id: int):
    """Show a single book"""
    with ctx.obj.get_db() as session:
        book_obj = BookRepository(session).find_by_id(book_id)
        if book_obj is None:
            _fail(ctx, f"Book {book_id} not found")
        _print_book(book_obj)

@book.command(name='list')
@click.option('--page', default=1, type=click.IntRange(min=1), help='Page number (1-based)')
@click.option('--size', default=20, type=click.IntRange(1, 100), help='Books per page')
@click.option('--sort', 'sort_field', default='id', help='Field to sort by')
@click.option('--order', type=click.Choice(['asc', 'desc'], case_sensitive=False), default='asc',
              help='Sort order')
@click.pass_context
def list_books(ctx: click.Context, page: int, size: int, sort_field: str, order: str):
    """List books one page at a time"""
    pageable = Pageable(page - 1, size, Sort.by(sort_field, direction=order))
    with ctx.obj.get_db() as session:
        try:
            result = BookRepository(session).find_all_paged(pageable)
        except InvalidSortPropertyError as e:
            _fail(ctx, str(e))

        for book_obj in result:
            _print_book(book_obj)
        click.echo(click.style(
            f"\nPage {result.number + 1} of {max(result.total_pages, 1)} "
            f"({result.total_elements} books)", fg='blue'
        ))

@book.command()
@click.argument('book_id', type=int)
@click.option('--title', default=None, help='New title')
@click.option('--author', default=None, help='New author')
@click.option('--publisher', default=None, help='New publisher')
@click.option('--genre', default=None, help='New genre')
@click.pass_context
def update(ctx: click.Context, book_id: int, title: Optional[str], author: Optional[str],
           publisher: Optional[str], genre: Optional[str]):
    """Update fields of an existing book"""
    changes = {
        'title': title,
        'author': author,
        'publisher': publisher,
        'genre': genre,
    }
    with ctx.obj.get_db() as session:
        repo = BookRepository(session)
        try:
            book_obj = repo.get_by_id(book_id)
        except EntityNotFoundError as e:
            _fail(ctx, str(e))

        for field, value in changes.items():
            if value is not None:
                setattr(book_obj, field, value)
        book_obj = repo.save(book_obj)
        click.echo("Successfully updated book:")
        _print_book(book_obj)

@book.command()
@click.argument('book_id', type=int)
@click.pass_context
def delete(ctx: click.Context, book_id: int):
    """Delete a book"""
    with ctx.obj.get_db() as session:
        repo = BookRepository(session)
        if not repo.exists_by_id(book_id):
            _fail(ctx, f"Book {book_id} not found")
        repo.delete_by_id(book_id)
    click.echo(f"Deleted book {book_id}")

@book.command()
@click.pass_obj
def count(database: Database):
    """Print the number of books"""
    with database.get_db() as session:
        click.echo(BookRepository(session).count())
