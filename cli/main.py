# cli/main.py
import click
from core.config import configure_logging
from .commands.db import db
from .commands.user import user
from .commands.data import data
from .commands.book import book
from .commands.goal import goal

@click.group()
def cli():
    """Elise Reads admin CLI"""
    configure_logging()

cli.add_command(db)
cli.add_command(user)
cli.add_command(data)
cli.add_command(book)
cli.add_command(goal)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
