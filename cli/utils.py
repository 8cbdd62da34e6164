import click
from typing import List, Dict
from sqlalchemy.orm import Session
from core.sa.models import User
from core.sa.repositories.user import UserRepository

class ProgressTracker:
    """Tracks progress and manages skipped items during batch operations"""

    def __init__(self, verbose: bool = False):
        self.processed = 0
        self.imported = 0
        self.skipped: List[Dict[str, str]] = []
        self.verbose = verbose

    def add_skipped(self, name: str, id: str, reason: str, color: str = 'yellow'):
        """Add a skipped item to the tracking"""
        self.skipped.append({
            'name': name,
            'id': id,
            'reason': reason,
            'color': color
        })

    def increment_processed(self):
        self.processed += 1

    def increment_imported(self):
        self.imported += 1

    def print_results(self, item_type: str = 'items'):
        """Print the results of the operation"""
        click.echo("\n" + click.style("Results:", fg='blue'))
        click.echo(click.style("Processed: ", fg='blue') +
                  click.style(str(self.processed), fg='cyan') +
                  click.style(f" {item_type}", fg='blue'))
        click.echo(click.style("Stored: ", fg='blue') +
                  click.style(str(self.imported), fg='green') +
                  click.style(f" {item_type}", fg='blue'))

        if self.skipped and self.verbose:
            click.echo("\n" + click.style("Skipped items:", fg='yellow'))
            for skip_info in self.skipped:
                click.echo("\n" + click.style(f"Name: {skip_info['name']}", fg=skip_info['color']))
                click.echo(click.style(f"ID: {skip_info['id']}", fg=skip_info['color']))
                click.echo(click.style(f"Reason: {skip_info['reason']}", fg=skip_info['color']))
        elif self.skipped:
            click.echo(click.style(f"\nSkipped {len(self.skipped)} items. ", fg='yellow') +
                      click.style("Use --verbose to see details.", fg='blue'))

def resolve_user(session: Session, email: str) -> User:
    """Look up a user by email or stop the command"""
    user = UserRepository(session).get_by_email(email)
    if user is None:
        raise click.ClickException(f"No user with email {email}")
    return user
