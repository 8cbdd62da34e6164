import click
from core.sa.database import Database
from core.sa.repositories.goal import ReadingGoalRepository
from cli.utils import resolve_user

@click.group()
def goal():
    """Reading goal commands"""
    pass

@goal.command()
@click.argument('email')
@click.option('--year', default=None, type=int, help='Year to report, defaults to the current year')
def progress(email: str, year: int):
    """Show EMAIL's reading goal progress"""
    with Database().get_db() as session:
        owner = resolve_user(session, email)
        result = ReadingGoalRepository(session).get_goal_progress(owner.id, year=year)

    goal_row = result['goal']
    click.echo(click.style(f"\nReading goal {result['year']}", fg='blue'))
    if goal_row is None:
        click.echo(click.style("No goal set", fg='yellow'))

    books_line = click.style("Books: ", fg='blue') + click.style(str(result['books_read']), fg='cyan')
    if goal_row:
        books_line += f" / {goal_row.target_books} ({result['book_progress']}%)"
    click.echo(books_line)

    pages_line = click.style("Pages: ", fg='blue') + click.style(str(result['pages_read']), fg='cyan')
    if goal_row and goal_row.target_pages:
        pages_line += f" / {goal_row.target_pages} ({result['page_progress']}%)"
    click.echo(pages_line)
