# cli/commands/search.py
import time
import click
from core.services.catalog import CatalogClient, CatalogError
from core.utils.rate_limit import SearchCooldown

@click.command()
@click.argument('queries', nargs=-1, required=True)
@click.option('--wait/--no-wait', default=True, help='Wait out the search cooldown instead of skipping queries')
def search(queries, wait):
    """Search the book catalog for one or more QUERIES"""
    client = CatalogClient()
    cooldown = SearchCooldown()

    try:
        for query in queries:
            if not cooldown.acquire():
                if not wait:
                    click.echo(click.style(f"Skipping {query!r}: searching too fast, please wait a moment", fg='yellow'))
                    continue
                delay = cooldown.retry_after()
                click.echo(f"\nSearch limit reached, waiting {delay:.1f} seconds...")
                time.sleep(delay)
                cooldown.acquire()

            click.echo(click.style(f"\nResults for {query!r}", fg='blue'))
            try:
                result = client.search(query)
            except CatalogError:
                click.echo(click.style("Books cannot be fetched now, please try again.", fg='red'), err=True)
                continue

            if not result.items:
                click.echo("No books found")
            for item in result.items:
                info = item.volume_info
                authors = ", ".join(info.authors or []) or "Unknown Author"
                click.echo(f"{item.id}  {info.title or 'Untitled'}  {authors}")
    finally:
        client.close()
