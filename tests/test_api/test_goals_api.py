# tests/test_api/test_goals_api.py

from core.sa.repositories.goal import current_year

def test_anonymous_goals(client):
    assert client.get("/goals").json() == []
    assert client.get("/goals/current").json() is None
    assert client.get("/goals/progress").json() is None

def test_set_goal_upserts(client, auth_headers):
    year = current_year()
    first = client.put("/goals", headers=auth_headers, json={"year": year, "target_books": 10})
    assert first.status_code == 200
    second = client.put("/goals", headers=auth_headers, json={"year": year, "target_books": 2, "target_pages": 500})
    assert second.json()["id"] == first.json()["id"]

    goals = client.get("/goals", headers=auth_headers).json()
    assert len(goals) == 1
    assert client.get("/goals/current", headers=auth_headers).json()["target_books"] == 2

def test_set_goal_validation(client, auth_headers):
    assert client.put("/goals", headers=auth_headers, json={"year": 2025, "target_books": 0}).status_code == 422

def test_progress_counts_books_finished_this_year(client, auth_headers):
    year = current_year()
    client.put("/goals", headers=auth_headers, json={"year": year, "target_books": 2, "target_pages": 1000})
    for title, pages in [("A", 300), ("B", 400), ("C", 500)]:
        client.post("/books", headers=auth_headers,
                    json={"title": title, "author": "X", "status": "read", "page_count": pages})
    client.post("/books", headers=auth_headers, json={"title": "D", "author": "X", "status": "reading"})

    progress = client.get("/goals/progress", headers=auth_headers).json()
    assert progress["year"] == year
    assert progress["books_read"] == 3
    assert progress["pages_read"] == 1200
    assert progress["book_progress"] == 100
    assert progress["page_progress"] == 100

    last_year = client.get(f"/goals/progress?year={year - 1}", headers=auth_headers).json()
    assert last_year["goal"] is None
    assert last_year["books_read"] == 0
    assert last_year["book_progress"] == 0

def test_delete_goal(client, auth_headers, other_headers):
    goal_id = client.put("/goals", headers=auth_headers, json={"year": 2025, "target_books": 5}).json()["id"]
    assert client.delete(f"/goals/{goal_id}", headers=other_headers).status_code == 404
    assert client.delete(f"/goals/{goal_id}", headers=auth_headers).status_code == 204
    assert client.get("/goals", headers=auth_headers).json() == []
