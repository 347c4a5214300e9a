# cli/commands/user.py
from datetime import timedelta
import click
from core.sa.repositories.user import UserRepository
from ..utils import get_database

@click.group()
def user():
    """User and token management commands"""
    pass

@user.command()
@click.option('--email', required=True, help='Email reported by the identity provider')
@click.option('--name', default=None, help='Display name shown on shared books')
@click.option('--image', default=None, help='Avatar URL')
@click.pass_context
def create(ctx, email, name, image):
    """Create a user"""
    with get_database(ctx).session_scope() as session:
        try:
            new_user = UserRepository(session).create_user(email=email, name=name, image=image)
        except ValueError as e:
            click.echo(click.style(str(e), fg='red'), err=True)
            raise click.Abort()
        click.echo(click.style(f"Created user {new_user.email} (ID: {new_user.id})", fg='green'))

@user.command()
@click.option('--email', required=True, help='Email of an existing user')
@click.option('--days', default=None, type=int, help='Token lifetime in days (default: no expiry)')
@click.pass_context
def token(ctx, email, days):
    """Issue a bearer token for a user"""
    with get_database(ctx).session_scope() as session:
        repo = UserRepository(session)
        existing = repo.get_by_email(email)
        if not existing:
            click.echo(click.style(f"No user with email {email}", fg='red'), err=True)
            raise click.Abort()
        ttl = timedelta(days=days) if days else None
        auth_session = repo.create_auth_session(existing.id, ttl=ttl)
        click.echo(auth_session.token)
