# library/cli/main.py
import logging
from typing import Optional

import click

from library.database import Database
from .commands.book import book
from .commands.db import db

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='Database connection string (defaults to DATABASE_URL or sqlite:///library.db)')
@click.option('--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx: click.Context, database_url: Optional[str], verbose: bool):
    """Library book management CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    ctx.obj = Database(database_url)
    ctx.call_on_close(ctx.obj.dispose)

cli.add_command(db)
cli.add_command(book)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
