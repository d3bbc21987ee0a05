# library/cli/commands/db.py
import click

from library.database import Database

@click.group()
def db():
    """Database schema commands"""
    pass

@db.command()
@click.pass_obj
def init(database: Database):
    """Create all tables"""
    database.init_db()
    click.echo("Database initialized")

@db.command()
@click.confirmation_option(prompt='This deletes every book. Continue?')
@click.pass_obj
def drop(database: Database):
    """Drop all tables"""
    database.drop_db()
    click.echo("Database dropped")
