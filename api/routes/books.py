# api/routes/books.py

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.models import BookStatus
from core.sa.repositories.book import BookRepository, DuplicateBookError
from core.storage import BlobStore
from api.dependencies import get_current_user_id, get_blob_store
from api.schemas.book import Book, BookCreate, BookUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])

BOOK_NOT_FOUND = "Book not found"

@router.get("", response_model=List[Book])
def get_my_books(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """The caller's books, newest first."""
    return BookRepository(db).get_my_books(user_id)

@router.get("/favorites", response_model=List[Book])
def get_favorites(db: Session = Depends(get_db)):
    return BookRepository(db).get_favorites()

@router.get("/read", response_model=List[Book])
def get_read_books(db: Session = Depends(get_db)):
    """Books marked as read, for the public home page."""
    return BookRepository(db).get_read_books()

@router.get("/wishlist", response_model=List[Book])
def get_wishlist(db: Session = Depends(get_db)):
    """Books on the wishlist, for the public wishlist page."""
    return BookRepository(db).get_wishlist()

@router.get("/status/{book_status}", response_model=List[Book])
def get_by_status(
    book_status: BookStatus,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return BookRepository(db).get_by_status(user_id, book_status)

@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def add_book(
    book: BookCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Add a book to the caller's lists.

    A book with the same title and author (ignoring case and surrounding
    whitespace) is rejected: with a plain message when it is already in the
    requested list, or with DUPLICATE:<id>:<status> (409) when it sits in
    another list so the client can offer to move it.
    """
    repo = BookRepository(db)
    fields = book.model_dump(exclude={"title", "author", "status"})
    try:
        return repo.add_book(user_id, book.title, book.author, book.status, **fields)
    except DuplicateBookError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.patch("/{book_id}", response_model=Book)
def update_book(
    book_id: int,
    updates: BookUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        book = BookRepository(db).update_book(user_id, book_id, **updates.model_dump(exclude_none=True))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)
    return book

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_book(
    book_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    storage: BlobStore = Depends(get_blob_store)
):
    if not BookRepository(db).remove_book(user_id, book_id, storage=storage):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)

@router.post("/{book_id}/favorite", response_model=Book)
def toggle_favorite(
    book_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    book = BookRepository(db).toggle_favorite(user_id, book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)
    return book
