# cli/main.py
import click
from core import config
from .commands.db import initdb
from .commands.user import user
from .commands.search import search
from .commands.stats import stats, analytics

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None, help='Database connection string (defaults to DATABASE_URL or sqlite:///booktracker.db)')
@click.option('--log-level', default=config.LOG_LEVEL, help='Logging level')
@click.pass_context
def cli(ctx, database_url, log_level):
    """BookTracker CLI"""
    config.configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj['database_url'] = database_url

cli.add_command(initdb)
cli.add_command(user)
cli.add_command(search)
cli.add_command(stats)
cli.add_command(analytics)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
