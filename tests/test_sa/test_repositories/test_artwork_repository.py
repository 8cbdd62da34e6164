# tests/test_sa/test_repositories/test_artwork_repository.py

import pytest
from core.sa.models import Artwork, StoredFile
from core.sa.repositories.artwork import ArtworkRepository

@pytest.fixture
def artwork_repo(db_session):
    return ArtworkRepository(db_session)

def test_create_artwork(artwork_repo, sample_user, sample_series):
    artwork = artwork_repo.create_artwork(
        sample_user.id,
        "Octopus",
        "/storage/abc",
        True,
        tags=["ink", "sea"],
        series_id=sample_series.id,
    )
    assert artwork.id is not None
    assert artwork.likes == 0
    assert artwork.tags == ["ink", "sea"]
    assert artwork.series_id == sample_series.id

def test_create_artwork_in_foreign_series(artwork_repo, other_user, sample_series):
    with pytest.raises(ValueError, match="Series not found"):
        artwork_repo.create_artwork(other_user.id, "Crab", "/x.jpg", True, series_id=sample_series.id)

def test_get_published_with_limit(artwork_repo, sample_user, make_artwork):
    make_artwork(sample_user, title="One")
    make_artwork(sample_user, title="Draft", is_published=False)
    make_artwork(sample_user, title="Two")
    make_artwork(sample_user, title="Three")

    published = artwork_repo.get_published()
    assert [a.title for a in published] == ["Three", "Two", "One"]
    assert [a.title for a in artwork_repo.get_published(limit=2)] == ["Three", "Two"]

def test_get_my_artworks(artwork_repo, sample_user, other_user, make_artwork):
    make_artwork(sample_user, title="Mine", is_published=False)
    make_artwork(other_user, title="Theirs")
    assert [a.title for a in artwork_repo.get_my_artworks(sample_user.id)] == ["Mine"]

def test_get_by_series_visibility(artwork_repo, sample_user, other_user, sample_series, make_artwork):
    make_artwork(sample_user, title="Published", series_id=sample_series.id)
    make_artwork(sample_user, title="Draft", is_published=False, series_id=sample_series.id)
    make_artwork(sample_user, title="Elsewhere")

    assert [a.title for a in artwork_repo.get_by_series(sample_series.id)] == ["Published"]
    assert [a.title for a in artwork_repo.get_by_series(sample_series.id, user_id=other_user.id)] == ["Published"]
    owner_view = artwork_repo.get_by_series(sample_series.id, user_id=sample_user.id)
    assert {a.title for a in owner_view} == {"Published", "Draft"}

def test_get_by_id_hides_foreign_drafts(artwork_repo, sample_user, other_user, make_artwork):
    draft = make_artwork(sample_user, title="Draft", is_published=False)
    assert artwork_repo.get_by_id(draft.id) is None
    assert artwork_repo.get_by_id(draft.id, user_id=other_user.id) is None
    assert artwork_repo.get_by_id(draft.id, user_id=sample_user.id).id == draft.id
    assert artwork_repo.get_by_id(999) is None

def test_update_artwork(artwork_repo, sample_user, other_user, make_artwork):
    artwork = make_artwork(sample_user, is_published=False)
    updated = artwork_repo.update_artwork(sample_user.id, artwork.id, is_published=True, medium="Watercolour")
    assert updated.is_published is True
    assert updated.medium == "Watercolour"
    assert artwork_repo.update_artwork(other_user.id, artwork.id, title="Stolen") is None

def test_remove_artwork_deletes_stored_image(artwork_repo, sample_user, make_artwork, storage, png_bytes, db_session):
    stored = storage.store_image(sample_user.id, png_bytes)
    artwork = make_artwork(sample_user, storage_id=stored.id, image_url=storage.url_for(stored.id))
    assert storage.path(stored.id).exists()

    assert artwork_repo.remove_artwork(sample_user.id, artwork.id, storage=storage) is True
    assert db_session.get(Artwork, artwork.id) is None
    assert db_session.get(StoredFile, stored.id) is None
    assert not storage.path(stored.id).exists()

def test_remove_artwork_without_stored_image(artwork_repo, sample_user, make_artwork, storage, db_session):
    artwork = make_artwork(sample_user)
    assert artwork_repo.remove_artwork(sample_user.id, artwork.id, storage=storage) is True
    assert db_session.get(Artwork, artwork.id) is None

def test_remove_artwork_not_owner(artwork_repo, sample_user, other_user, make_artwork):
    artwork = make_artwork(sample_user)
    assert artwork_repo.remove_artwork(other_user.id, artwork.id) is False

def test_like(artwork_repo, sample_user, make_artwork):
    artwork = make_artwork(sample_user, likes=None)
    assert artwork_repo.like(artwork.id).likes == 1
    assert artwork_repo.like(artwork.id).likes == 2
    assert artwork_repo.like(999) is None

def test_series(artwork_repo, sample_user, other_user):
    series = artwork_repo.create_series(sample_user.id, "Birds", description="Feathered")
    assert series.is_complete is False
    assert [s.title for s in artwork_repo.get_my_series(sample_user.id)] == ["Birds"]
    assert artwork_repo.get_my_series(other_user.id) == []

def test_create_artwork_with_foreign_file(artwork_repo, sample_user, other_user, storage, png_bytes):
    stored = storage.store_image(sample_user.id, png_bytes)
    with pytest.raises(ValueError, match="File not found"):
        artwork_repo.create_artwork(
            other_user.id, "Decoy", storage.url_for(stored.id), True, storage_id=stored.id
        )
    assert artwork_repo.get_my_artworks(other_user.id) == []

def test_create_artwork_with_own_file(artwork_repo, sample_user, storage, png_bytes):
    stored = storage.store_image(sample_user.id, png_bytes)
    artwork = artwork_repo.create_artwork(
        sample_user.id, "Mine", storage.url_for(stored.id), True, storage_id=stored.id
    )
    assert artwork.storage_id == stored.id

def test_remove_artwork_keeps_foreign_blob(artwork_repo, sample_user, other_user, make_artwork, storage, png_bytes):
    stored = storage.store_image(sample_user.id, png_bytes)
    artwork = make_artwork(other_user, storage_id=stored.id)

    assert artwork_repo.remove_artwork(other_user.id, artwork.id, storage=storage) is True
    assert storage.get(stored.id) is not None
