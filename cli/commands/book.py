import click
from core.sa.database import Database
from core.sa.repositories.book import BookRepository
from core.storage import BlobStore
from core.utils.image import download_image
from cli.utils import ProgressTracker, resolve_user

@click.group()
def book():
    """Book related commands"""
    pass

@book.command()
@click.argument('email')
@click.option('--limit', default=None, type=int, help='Limit number of covers to fetch')
@click.option('--verbose/--no-verbose', default=False, help='Show detailed progress')
def cache_covers(email: str, limit: int, verbose: bool):
    """Download remote covers of EMAIL's books into local storage

    Books that already have a stored cover are left alone.

    Example:
        elise-reads book cache-covers elise@example.com --limit 10
    """
    tracker = ProgressTracker(verbose)

    with Database().get_db() as session:
        owner = resolve_user(session, email)
        repo = BookRepository(session)
        storage = BlobStore(session)
        books = repo.get_books_missing_cover_cache(owner.id, limit=limit)

        if not books:
            click.echo(click.style("\nNo covers to fetch", fg='yellow'))
            return

        with click.progressbar(
            books,
            label=click.style('Fetching covers', fg='blue'),
            item_show_func=lambda b: click.style(b.title, fg='cyan') if b and verbose else None,
            show_percent=True,
            width=50
        ) as bar:
            for b in bar:
                tracker.increment_processed()
                content = download_image(b.cover_url)
                if content is None:
                    tracker.add_skipped(b.title, str(b.id), "Download failed")
                    continue
                try:
                    stored = storage.store_image(owner.id, content, max_size=800)
                except ValueError as e:
                    tracker.add_skipped(b.title, str(b.id), str(e), color='red')
                    continue
                repo.update_book(owner.id, b.id, cover_storage_id=stored.id)
                tracker.increment_imported()

    tracker.print_results('covers')
