import click
from core.sa.database import Database
from core.sa.repositories.user import UserRepository

@click.group()
def user():
    """User account commands"""
    pass

@user.command()
@click.argument('email')
@click.option('--name', default=None, help='Display name; also creates the profile')
@click.password_option()
def create(email: str, name: str, password: str):
    """Create a user account

    Example:
        elise-reads user create elise@example.com --name Elise
    """
    with Database().get_db() as session:
        repo = UserRepository(session)
        try:
            new_user = repo.create_user(email, password, name=name)
        except ValueError as e:
            raise click.ClickException(str(e))
        if name:
            repo.create_profile(new_user.id, name=name)
        click.echo(click.style(f"Created user {new_user.email} (ID: {new_user.id})", fg='green'))
