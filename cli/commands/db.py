import click
from core.sa.database import Database
from core.sa.repositories.auth import SessionRepository

@click.group()
def db():
    """Database commands"""
    pass

@db.command()
def init():
    """Create all tables that do not exist yet"""
    database = Database()
    database.init_db()
    click.echo(click.style(f"Database initialised at {database.connection_string}", fg='green'))

@db.command()
def purge_sessions():
    """Delete expired sign-in sessions

    Run this periodically, for example from cron:
        elise-reads db purge-sessions
    """
    with Database().get_db() as session:
        removed = SessionRepository(session).purge_expired()
    click.echo(click.style(f"Removed {removed} expired sessions", fg='green'))
