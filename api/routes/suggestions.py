# api/routes/suggestions.py

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.repositories.suggestion import SuggestionRepository
from api.dependencies import get_site_owner_id
from api.schemas.book import Book
from api.schemas.suggestion import Suggestion, SuggestionCreate, DuplicateCheck

router = APIRouter(prefix="/suggestions", tags=["suggestions"])

SUGGESTION_NOT_FOUND = "Suggestion not found"

@router.get("", response_model=List[Suggestion])
def get_all(user_id: int = Depends(get_site_owner_id), db: Session = Depends(get_db)):
    return SuggestionRepository(db).get_all()

@router.get("/pending", response_model=List[Suggestion])
def get_pending(user_id: int = Depends(get_site_owner_id), db: Session = Depends(get_db)):
    return SuggestionRepository(db).get_pending()

@router.get("/check", response_model=DuplicateCheck)
def check_duplicate(
    title: str = Query(..., min_length=1, description="Book title"),
    author: str = Query(..., min_length=1, description="Book author"),
    db: Session = Depends(get_db)
):
    """
    Check whether a book is already read, being read, on the wishlist or
    already suggested. Title and author are compared ignoring case and
    surrounding whitespace.
    """
    return SuggestionRepository(db).check_duplicate(title, author)

@router.post("", response_model=Suggestion, status_code=status.HTTP_201_CREATED)
def submit(suggestion: SuggestionCreate, db: Session = Depends(get_db)):
    """Suggest a book. Open to anonymous visitors."""
    fields = suggestion.model_dump(exclude={"title", "author", "suggested_by"})
    try:
        return SuggestionRepository(db).submit(
            suggestion.title, suggestion.author, suggestion.suggested_by, **fields
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.post("/{suggestion_id}/approve", response_model=Suggestion)
def approve(suggestion_id: int, user_id: int = Depends(get_site_owner_id), db: Session = Depends(get_db)):
    suggestion = SuggestionRepository(db).approve(suggestion_id)
    if suggestion is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SUGGESTION_NOT_FOUND)
    return suggestion

@router.post("/{suggestion_id}/reject", response_model=Suggestion)
def reject(suggestion_id: int, user_id: int = Depends(get_site_owner_id), db: Session = Depends(get_db)):
    suggestion = SuggestionRepository(db).reject(suggestion_id)
    if suggestion is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SUGGESTION_NOT_FOUND)
    return suggestion

@router.delete("/{suggestion_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove(suggestion_id: int, user_id: int = Depends(get_site_owner_id), db: Session = Depends(get_db)):
    if not SuggestionRepository(db).remove(suggestion_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SUGGESTION_NOT_FOUND)

@router.post("/{suggestion_id}/add-to-books", response_model=Book, status_code=status.HTTP_201_CREATED)
def add_to_books(suggestion_id: int, user_id: int = Depends(get_site_owner_id), db: Session = Depends(get_db)):
    """Put the suggested book on the caller's wishlist and approve the suggestion."""
    book = SuggestionRepository(db).add_to_books(user_id, suggestion_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SUGGESTION_NOT_FOUND)
    return book
