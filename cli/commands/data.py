import click
from core.sa.database import Database
from core.sa.repositories.ownership import OwnershipRepository
from cli.utils import resolve_user

@click.group()
def data():
    """Data ownership commands"""
    pass

def _print_report(report: dict, verbose: bool):
    for kind in ('books', 'artworks', 'series', 'files'):
        click.echo(click.style(f"{kind.capitalize()}: ", fg='blue') +
                  click.style(str(report[f'total_{kind}']), fg='cyan') +
                  click.style(" total, ", fg='blue') +
                  click.style(str(report[f'orphaned_{kind}']), fg='yellow') +
                  click.style(" owned by someone else", fg='blue'))
    if verbose:
        for book in report['orphaned_book_ids']:
            click.echo(f"  - [{book['id']}] {book['title']} (user {book['old_user_id']})")

@data.command()
@click.argument('email')
@click.option('--verbose/--no-verbose', default=False, help='List the orphaned books')
def orphans(email: str, verbose: bool):
    """Report books, artworks, art series and stored files not owned by EMAIL"""
    with Database().get_db() as session:
        owner = resolve_user(session, email)
        report = OwnershipRepository(session).check_orphaned(owner.id)
        _print_report(report, verbose)

@data.command()
@click.argument('email')
@click.option('--dry-run', is_flag=True, help='Show what would be claimed without making changes')
def claim(email: str, dry_run: bool):
    """Reassign every book, artwork, art series and stored file to EMAIL

    Useful after the site owner's account has been recreated.
    """
    with Database().get_db() as session:
        owner = resolve_user(session, email)
        repo = OwnershipRepository(session)
        if dry_run:
            _print_report(repo.check_orphaned(owner.id), verbose=True)
            return
        counts = repo.claim_orphaned(owner.id)
        click.echo(click.style(
            f"Claimed {counts['books_updated']} books, {counts['artworks_updated']} artworks, "
            f"{counts['series_updated']} series and {counts['files_updated']} files for {owner.email}",
            fg='green'
        ))
