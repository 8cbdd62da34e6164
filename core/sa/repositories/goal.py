# core/sa/repositories/goal.py
from datetime import datetime, UTC
from typing import Optional, List, Dict, Any
from sqlalchemy import desc
from sqlalchemy.orm import Session
from ..models import Book, BookStatus, ReadingGoal


def clamped_percentage(done: int, target: Optional[int]) -> int:
    """Percentage of target reached, rounded half up and capped at 100.

    A missing or zero target counts as no progress.
    """
    if not target or target <= 0:
        return 0
    return min(100, int(done * 100 / target + 0.5))

def current_year() -> int:
    return datetime.now(UTC).year

class ReadingGoalRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_goal(self, user_id: int, year: int) -> Optional[ReadingGoal]:
        return (
            self.session.query(ReadingGoal)
            .filter(ReadingGoal.user_id == user_id, ReadingGoal.year == year)
            .one_or_none()
        )

    def get_current_goal(self, user_id: int) -> Optional[ReadingGoal]:
        return self.get_goal(user_id, current_year())

    def get_all_goals(self, user_id: int) -> List[ReadingGoal]:
        return (
            self.session.query(ReadingGoal)
            .filter(ReadingGoal.user_id == user_id)
            .order_by(desc(ReadingGoal.year))
            .all()
        )

    def set_goal(self, user_id: int, year: int, target_books: int, target_pages: Optional[int] = None) -> ReadingGoal:
        """Create the user's goal for a year, or replace its targets if it exists"""
        goal = self.get_goal(user_id, year)
        if goal:
            goal.target_books = target_books
            goal.target_pages = target_pages
        else:
            goal = ReadingGoal(
                user_id=user_id,
                year=year,
                target_books=target_books,
                target_pages=target_pages,
            )
            self.session.add(goal)
        self.session.commit()
        return goal

    def delete_goal(self, user_id: int, goal_id: int) -> bool:
        result = (
            self.session.query(ReadingGoal)
            .filter(ReadingGoal.id == goal_id, ReadingGoal.user_id == user_id)
            .delete()
        )
        self.session.commit()
        return result > 0

    def books_finished_in_year(self, user_id: int, year: int) -> List[Book]:
        start = datetime(year, 1, 1, tzinfo=UTC)
        end = datetime(year + 1, 1, 1, tzinfo=UTC)
        return (
            self.session.query(Book)
            .filter(
                Book.user_id == user_id,
                Book.status == BookStatus.READ.value,
                Book.finished_at.isnot(None),
                Book.finished_at >= start,
                Book.finished_at < end,
            )
            .all()
        )

    def get_goal_progress(self, user_id: int, year: Optional[int] = None) -> Dict[str, Any]:
        """Progress towards the user's goal for a year (default: current year).

        Returns:
            Dictionary with the goal (or None), books and pages read in the
            year, and book/page progress percentages
        """
        year = year or current_year()
        goal = self.get_goal(user_id, year)
        books = self.books_finished_in_year(user_id, year)
        books_read = len(books)
        pages_read = sum(b.page_count or 0 for b in books)

        return {
            "goal": goal,
            "year": year,
            "books_read": books_read,
            "pages_read": pages_read,
            "book_progress": clamped_percentage(books_read, goal.target_books) if goal else 0,
            "page_progress": clamped_percentage(pages_read, goal.target_pages) if goal else 0,
        }
