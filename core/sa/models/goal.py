# core/sa/models/goal.py
from typing import Optional
from sqlalchemy import Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, CreatedAtMixin

class ReadingGoal(Base, CreatedAtMixin):
    __tablename__ = 'reading_goal'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    target_books: Mapped[int] = mapped_column(Integer, nullable=False)
    target_pages: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    user = relationship('User', back_populates='reading_goals')

    __table_args__ = (
        UniqueConstraint('user_id', 'year', name='uix_reading_goal_user_year'),
    )
