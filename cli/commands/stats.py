# cli/commands/stats.py
import json
import click
from core.sa.repositories.book import BookRepository
from core.sa.repositories.user import UserRepository
from core.services.stats import reading_stats, reading_analytics
from ..utils import get_database

def _print_aggregate(ctx, email, aggregate, newest_first=True):
    """Run an aggregate over the user's books and print it as JSON."""
    with get_database(ctx).session_scope() as session:
        found = UserRepository(session).get_by_email(email)
        if not found:
            click.echo(click.style(f"No user with email {email}", fg='red'), err=True)
            raise click.Abort()
        books = BookRepository(session).list_books(found.id, newest_first=newest_first)
        click.echo(json.dumps(aggregate(books), indent=2, default=str))

@click.command()
@click.option('--email', required=True, help='Email of the user')
@click.pass_context
def stats(ctx, email):
    """Print reading statistics for a user as JSON"""
    _print_aggregate(ctx, email, reading_stats)

@click.command()
@click.option('--email', required=True, help='Email of the user')
@click.pass_context
def analytics(ctx, email):
    """Print reading analytics for a user as JSON"""
    _print_aggregate(ctx, email, reading_analytics, newest_first=False)
