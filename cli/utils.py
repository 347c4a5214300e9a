# cli/utils.py
import click
from core.sa.database import Database

def get_database(ctx: click.Context) -> Database:
    """Database for the connection string given to the CLI group."""
    return Database((ctx.obj or {}).get('database_url'))
