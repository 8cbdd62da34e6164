# tests/test_sa/test_models.py

import pytest
from sqlalchemy.exc import IntegrityError
from core.sa.models import Book, ReadingGoal, UserProfile, BookSuggestion

def test_book_status_constraint(db_session, sample_user):
    db_session.add(Book(user_id=sample_user.id, title="T", author="A", status="lost"))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

def test_book_defaults(db_session, sample_user):
    book = Book(user_id=sample_user.id, title="T", author="A", status="read")
    db_session.add(book)
    db_session.commit()
    assert book.is_favorite is False
    assert book.created_at is not None

def test_suggestion_status_constraint(db_session):
    db_session.add(BookSuggestion(title="T", author="A", suggested_by="Me", status="maybe"))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

def test_one_goal_per_user_and_year(db_session, sample_user):
    db_session.add(ReadingGoal(user_id=sample_user.id, year=2025, target_books=5))
    db_session.commit()
    db_session.add(ReadingGoal(user_id=sample_user.id, year=2025, target_books=6))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

def test_one_profile_per_user(db_session, sample_user):
    db_session.add(UserProfile(user_id=sample_user.id, name="A"))
    db_session.commit()
    db_session.add(UserProfile(user_id=sample_user.id, name="B"))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

def test_profile_theme_constraint(db_session, sample_user):
    db_session.add(UserProfile(user_id=sample_user.id, name="A", theme="neon"))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()
