# cli/commands/db.py
import click
from ..utils import get_database

@click.command()
@click.pass_context
def initdb(ctx):
    """Create all database tables"""
    db = get_database(ctx)
    db.init_db()
    click.echo(click.style("Database initialized", fg='green'))
