# api/routes/goals.py

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.repositories.goal import ReadingGoalRepository
from api.dependencies import get_current_user_id, get_optional_user_id
from api.schemas.goal import Goal, GoalSet, GoalProgress

router = APIRouter(prefix="/goals", tags=["goals"])

@router.get("", response_model=List[Goal])
def get_all_goals(user_id: Optional[int] = Depends(get_optional_user_id), db: Session = Depends(get_db)):
    if user_id is None:
        return []
    return ReadingGoalRepository(db).get_all_goals(user_id)

@router.get("/current", response_model=Optional[Goal])
def get_current_goal(user_id: Optional[int] = Depends(get_optional_user_id), db: Session = Depends(get_db)):
    if user_id is None:
        return None
    return ReadingGoalRepository(db).get_current_goal(user_id)

@router.get("/progress", response_model=Optional[GoalProgress])
def get_goal_progress(
    year: Optional[int] = Query(None, ge=1900, le=9999, description="Year, defaults to the current year"),
    user_id: Optional[int] = Depends(get_optional_user_id),
    db: Session = Depends(get_db)
):
    """
    Books and pages finished in the year against the caller's goal.
    Percentages are capped at 100.
    """
    if user_id is None:
        return None
    return ReadingGoalRepository(db).get_goal_progress(user_id, year=year)

@router.put("", response_model=Goal)
def set_goal(goal: GoalSet, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """Create or replace the caller's goal for a year."""
    return ReadingGoalRepository(db).set_goal(user_id, goal.year, goal.target_books, goal.target_pages)

@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_goal(goal_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    if not ReadingGoalRepository(db).delete_goal(user_id, goal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
