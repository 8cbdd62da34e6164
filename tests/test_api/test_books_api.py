# tests/test_api/test_books_api.py

def add(client, headers, title="Dune", author="Frank Herbert", status="reading", **fields):
    return client.post("/books", headers=headers, json={"title": title, "author": author, "status": status, **fields})

def test_add_book(client, auth_headers):
    response = add(client, auth_headers, page_count=412, genre="Sci-Fi", isbn="9780441013593")
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Dune"
    assert data["status"] == "reading"
    assert data["is_favorite"] is False
    assert data["started_at"] is not None
    assert data["finished_at"] is None
    assert data["isbn"] == "9780441013593"

def test_add_book_requires_auth(client):
    assert add(client, {}).status_code == 401

def test_add_book_validation(client, auth_headers):
    assert add(client, auth_headers, status="abandoned").status_code == 422
    assert add(client, auth_headers, page_count=-1).status_code == 422
    assert add(client, auth_headers, title="").status_code == 422

def test_add_duplicate_same_status(client, auth_headers):
    add(client, auth_headers, status="wishlist")
    response = add(client, auth_headers, title=" dune ", status="wishlist")
    assert response.status_code == 400
    assert response.json()["detail"] == "This book is already on your wishlist!"

def test_add_duplicate_other_status(client, auth_headers):
    book_id = add(client, auth_headers, status="wishlist").json()["id"]
    response = add(client, auth_headers, status="read")
    assert response.status_code == 409
    assert response.json()["detail"] == f"DUPLICATE:{book_id}:wishlist"

def test_my_books_are_private(client, auth_headers, other_headers):
    add(client, auth_headers, title="Mine")
    add(client, other_headers, title="Theirs")

    assert [b["title"] for b in client.get("/books", headers=auth_headers).json()] == ["Mine"]
    assert [b["title"] for b in client.get("/books/status/reading", headers=other_headers).json()] == ["Theirs"]

def test_public_lists(client, auth_headers):
    add(client, auth_headers, title="Done", status="read", is_favorite=True)
    add(client, auth_headers, title="Later", status="wishlist")

    assert [b["title"] for b in client.get("/books/read").json()] == ["Done"]
    assert [b["title"] for b in client.get("/books/wishlist").json()] == ["Later"]
    assert [b["title"] for b in client.get("/books/favorites").json()] == ["Done"]

def test_get_by_invalid_status(client, auth_headers):
    assert client.get("/books/status/lost", headers=auth_headers).status_code == 422

def test_update_book_to_read(client, auth_headers):
    book_id = add(client, auth_headers).json()["id"]
    response = client.patch(f"/books/{book_id}", headers=auth_headers, json={"status": "read", "rating": 4.5})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "read"
    assert data["rating"] == 4.5
    assert data["finished_at"] is not None

def test_update_other_users_book(client, auth_headers, other_headers):
    book_id = add(client, auth_headers).json()["id"]
    response = client.patch(f"/books/{book_id}", headers=other_headers, json={"status": "read"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Book not found"

def test_toggle_favorite(client, auth_headers):
    book_id = add(client, auth_headers).json()["id"]
    assert client.post(f"/books/{book_id}/favorite", headers=auth_headers).json()["is_favorite"] is True
    assert client.post(f"/books/{book_id}/favorite", headers=auth_headers).json()["is_favorite"] is False
    assert client.post("/books/999/favorite", headers=auth_headers).status_code == 404

def test_remove_book(client, auth_headers, other_headers):
    book_id = add(client, auth_headers).json()["id"]
    assert client.delete(f"/books/{book_id}", headers=other_headers).status_code == 404
    assert client.delete(f"/books/{book_id}", headers=auth_headers).status_code == 204
    assert client.delete(f"/books/{book_id}", headers=auth_headers).status_code == 404
    assert client.get("/books", headers=auth_headers).json() == []

def test_book_cannot_use_foreign_cover(client, auth_headers, other_headers, png_bytes):
    upload = client.post(
        "/storage", headers=auth_headers, files={"file": ("cover.png", png_bytes, "image/png")}
    ).json()

    response = add(client, other_headers, cover_storage_id=upload["storage_id"])
    assert response.status_code == 400
    assert response.json()["detail"] == "File not found"

    book_id = add(client, other_headers).json()["id"]
    response = client.patch(f"/books/{book_id}", headers=other_headers, json={"cover_storage_id": upload["storage_id"]})
    assert response.status_code == 400
    assert response.json()["detail"] == "File not found"

    client.delete(f"/books/{book_id}", headers=other_headers)
    assert client.get(upload["url"]).status_code == 200

def test_book_with_own_cover_removes_it(client, auth_headers, png_bytes):
    upload = client.post(
        "/storage", headers=auth_headers, files={"file": ("cover.png", png_bytes, "image/png")}
    ).json()
    book_id = add(client, auth_headers, cover_storage_id=upload["storage_id"]).json()["id"]

    assert client.delete(f"/books/{book_id}", headers=auth_headers).status_code == 204
    assert client.get(upload["url"]).status_code == 404
