# tests/test_api/test_suggestions_api.py

def suggest(client, title="Matilda", author="Roald Dahl", **fields):
    payload = {"title": title, "author": author, "suggested_by": "Grandma", **fields}
    return client.post("/suggestions", json=payload)

def test_submit_is_anonymous(client):
    response = suggest(client, reason="You'll love it", suggested_by_email="grandma@example.com")
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "pending"
    assert data["reviewed_at"] is None

def test_submit_invalid_email(client):
    assert suggest(client, suggested_by_email="nope").status_code == 422

def test_submit_existing_book(client, auth_headers):
    client.post("/books", headers=auth_headers, json={"title": "Matilda", "author": "Roald Dahl", "status": "read"})
    response = suggest(client, title="matilda ")
    assert response.status_code == 400
    assert response.json()["detail"] == "I've already read this book!"

def test_submit_twice(client):
    suggest(client)
    response = suggest(client, author="ROALD DAHL")
    assert response.status_code == 400
    assert response.json()["detail"] == "This book has already been suggested!"

def test_check_duplicate(client, auth_headers):
    assert client.get("/suggestions/check", params={"title": "Matilda", "author": "Roald Dahl"}).json() == {
        "exists": False, "location": None, "book": None, "suggestion": None,
    }

    client.post("/books", headers=auth_headers, json={"title": "Matilda", "author": "Roald Dahl", "status": "wishlist"})
    data = client.get("/suggestions/check", params={"title": " MATILDA", "author": "roald dahl"}).json()
    assert data["exists"] is True
    assert data["location"] == "already on wishlist"
    assert data["book"]["title"] == "Matilda"

def test_check_requires_title_and_author(client):
    assert client.get("/suggestions/check", params={"title": "Matilda"}).status_code == 422

def test_listing_requires_auth(client, auth_headers):
    suggest(client)
    assert client.get("/suggestions").status_code == 401
    assert len(client.get("/suggestions", headers=auth_headers).json()) == 1
    assert len(client.get("/suggestions/pending", headers=auth_headers).json()) == 1

def test_approve_reject(client, auth_headers):
    suggestion_id = suggest(client).json()["id"]
    response = client.post(f"/suggestions/{suggestion_id}/reject", headers=auth_headers)
    assert response.json()["status"] == "rejected"
    assert response.json()["reviewed_at"] is not None
    assert client.get("/suggestions/pending", headers=auth_headers).json() == []

    assert client.post(f"/suggestions/{suggestion_id}/approve", headers=auth_headers).json()["status"] == "approved"
    assert client.post("/suggestions/999/approve", headers=auth_headers).status_code == 404

def test_add_to_books(client, auth_headers):
    suggestion_id = suggest(client, genre="Children").json()["id"]
    response = client.post(f"/suggestions/{suggestion_id}/add-to-books", headers=auth_headers)
    assert response.status_code == 201
    book = response.json()
    assert book["status"] == "wishlist"
    assert book["gifted_by"] == "Grandma"
    assert book["genre"] == "Children"

    assert [b["id"] for b in client.get("/books", headers=auth_headers).json()] == [book["id"]]
    assert client.get("/suggestions", headers=auth_headers).json()[0]["status"] == "approved"

def test_remove(client, auth_headers):
    suggestion_id = suggest(client).json()["id"]
    assert client.delete(f"/suggestions/{suggestion_id}", headers=auth_headers).status_code == 204
    assert client.delete(f"/suggestions/{suggestion_id}", headers=auth_headers).status_code == 404

def test_moderation_restricted_to_site_owner(client, monkeypatch, auth_headers, other_headers):
    monkeypatch.setenv("SITE_OWNER_EMAILS", "elise@example.com")
    suggestion_id = suggest(client).json()["id"]

    assert client.get("/suggestions", headers=other_headers).status_code == 403
    assert client.post(f"/suggestions/{suggestion_id}/approve", headers=other_headers).status_code == 403
    assert client.delete(f"/suggestions/{suggestion_id}", headers=other_headers).status_code == 403

    assert client.post(f"/suggestions/{suggestion_id}/reject", headers=auth_headers).json()["status"] == "rejected"

def test_moderation_open_without_site_owners(client, monkeypatch, other_headers):
    monkeypatch.delenv("SITE_OWNER_EMAILS", raising=False)
    suggest(client)
    assert len(client.get("/suggestions/pending", headers=other_headers).json()) == 1
