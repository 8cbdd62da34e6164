# tests/conftest.py
import sys
import pytest
from io import BytesIO
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from PIL import Image
from sqlalchemy.orm import Session
from core.sa.database import Database
from core.sa.models import Base, Book, Artwork, ArtSeries
from core.sa.repositories.user import UserRepository
from core.storage import BlobStore

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_elise.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(connection_string=f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.engine.dispose()

@pytest.fixture(autouse=True)
def cleanup_db(database):
    """Empty every table before each test"""
    with database.get_db() as session:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
    yield

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def storage_dir(tmp_path):
    return str(tmp_path / "storage")

@pytest.fixture
def storage(db_session, storage_dir):
    return BlobStore(db_session, base_dir=storage_dir)

@pytest.fixture
def png_bytes():
    """A small PNG image"""
    output = BytesIO()
    Image.new('RGBA', (40, 30), (200, 30, 30, 255)).save(output, format='PNG')
    return output.getvalue()

@pytest.fixture
def sample_user(db_session):
    """Create a sample user for testing."""
    return UserRepository(db_session).create_user("elise@example.com", "correct horse", name="Elise")

@pytest.fixture
def other_user(db_session):
    return UserRepository(db_session).create_user("visitor@example.com", "battery staple", name="Visitor")

@pytest.fixture
def make_book(db_session):
    """Factory for books inserted directly, bypassing duplicate checks"""
    def _make(user, title="Test Book", author="Test Author", status="wishlist", **fields):
        book = Book(
            user_id=user.id,
            title=title,
            author=author,
            status=status,
            is_favorite=fields.pop("is_favorite", False),
            **fields
        )
        db_session.add(book)
        db_session.commit()
        return book
    return _make

@pytest.fixture
def sample_series(db_session, sample_user):
    series = ArtSeries(user_id=sample_user.id, title="Sea Creatures", is_complete=False)
    db_session.add(series)
    db_session.commit()
    return series

@pytest.fixture
def make_artwork(db_session):
    def _make(user, title="Test Artwork", is_published=True, **fields):
        artwork = Artwork(
            user_id=user.id,
            title=title,
            image_url=fields.pop("image_url", "https://example.com/art.jpg"),
            is_published=is_published,
            likes=fields.pop("likes", 0),
            **fields
        )
        db_session.add(artwork)
        db_session.commit()
        return artwork
    return _make
