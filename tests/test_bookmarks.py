"""Bookmark API tests."""

FIRST_BOOKMARK = {"title": "first Bookmark", "link": "https://example.com/x"}


def create_bookmark(client, headers, **overrides):
    response = client.post("/bookmarks", headers=headers, json={**FIRST_BOOKMARK, **overrides})
    assert response.status_code == 201
    return response.json()


def test_list_bookmarks_empty(client, auth_headers):
    """Test a new user has no bookmarks."""
    response = client.get("/bookmarks", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_create_bookmark(client, auth_headers):
    """Test creating a bookmark."""
    response = client.post("/bookmarks", headers=auth_headers, json=FIRST_BOOKMARK)
    assert response.status_code == 201
    data = response.json()
    assert isinstance(data["id"], int)
    assert data["title"] == "first Bookmark"
    assert data["link"] == "https://example.com/x"
    assert data["description"] is None
    assert data["userId"] == auth_headers.user_id

    response = client.get("/bookmarks", headers=auth_headers)
    assert response.status_code == 200
    assert len(response.json()) == 1


def test_create_bookmark_with_description(client, auth_headers):
    data = create_bookmark(client, auth_headers, description="Worth a read")
    assert data["description"] == "Worth a read"


def test_create_bookmark_missing_title(client, auth_headers):
    response = client.post(
        "/bookmarks", headers=auth_headers, json={"link": "https://example.com"}
    )
    assert response.status_code == 400


def test_create_bookmark_missing_link(client, auth_headers):
    response = client.post("/bookmarks", headers=auth_headers, json={"title": "No link"})
    assert response.status_code == 400


def test_create_bookmark_blank_title(client, auth_headers):
    response = client.post(
        "/bookmarks", headers=auth_headers, json={"title": "   ", "link": "https://example.com"}
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "title"


def test_create_bookmark_malformed_link(client, auth_headers):
    response = client.post(
        "/bookmarks", headers=auth_headers, json={"title": "Bad", "link": "not a url"}
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "link"


def test_create_bookmark_rejects_non_http_link(client, auth_headers):
    response = client.post(
        "/bookmarks", headers=auth_headers, json={"title": "FTP", "link": "ftp://example.com/f"}
    )
    assert response.status_code == 400


def test_list_bookmarks_in_creation_order(client, auth_headers):
    for title in ("one", "two", "three"):
        create_bookmark(client, auth_headers, title=title)

    response = client.get("/bookmarks", headers=auth_headers)
    assert [b["title"] for b in response.json()] == ["one", "two", "three"]


def test_get_bookmark(client, auth_headers):
    """Test getting a specific bookmark."""
    bookmark = create_bookmark(client, auth_headers)

    response = client.get(f"/bookmarks/{bookmark['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == bookmark["id"]


def test_get_missing_bookmark(client, auth_headers):
    response = client.get("/bookmarks/99999", headers=auth_headers)
    assert response.status_code == 404


def test_other_users_bookmark_is_not_found(client, auth_headers, other_auth_headers):
    """Test another user's bookmark looks exactly like a missing one."""
    bookmark = create_bookmark(client, auth_headers)

    foreign = client.get(f"/bookmarks/{bookmark['id']}", headers=other_auth_headers)
    missing = client.get("/bookmarks/99999", headers=other_auth_headers)
    assert foreign.status_code == 404
    assert foreign.json() == missing.json()

    assert client.get("/bookmarks", headers=other_auth_headers).json() == []


def test_edit_bookmark(client, auth_headers):
    """Test updating title and description."""
    bookmark = create_bookmark(client, auth_headers)
    update = {
        "title": "FastAPI SQLAlchemy CRUD",
        "description": "Building a CRUD API with FastAPI and a relational database.",
    }

    response = client.patch(f"/bookmarks/{bookmark['id']}", headers=auth_headers, json=update)
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == update["title"]
    assert data["description"] == update["description"]
    assert data["link"] == FIRST_BOOKMARK["link"]


def test_edit_bookmark_clear_description(client, auth_headers):
    bookmark = create_bookmark(client, auth_headers, description="temporary")

    response = client.patch(
        f"/bookmarks/{bookmark['id']}", headers=auth_headers, json={"description": None}
    )
    assert response.status_code == 200
    assert response.json()["description"] is None


def test_edit_bookmark_cannot_clear_title(client, auth_headers):
    bookmark = create_bookmark(client, auth_headers)

    response = client.patch(
        f"/bookmarks/{bookmark['id']}", headers=auth_headers, json={"title": None}
    )
    assert response.status_code == 400


def test_edit_bookmark_bad_link(client, auth_headers):
    bookmark = create_bookmark(client, auth_headers)

    response = client.patch(
        f"/bookmarks/{bookmark['id']}", headers=auth_headers, json={"link": "example"}
    )
    assert response.status_code == 400


def test_edit_other_users_bookmark(client, auth_headers, other_auth_headers):
    bookmark = create_bookmark(client, auth_headers)

    response = client.patch(
        f"/bookmarks/{bookmark['id']}", headers=other_auth_headers, json={"title": "Mine now"}
    )
    assert response.status_code == 404

    response = client.get(f"/bookmarks/{bookmark['id']}", headers=auth_headers)
    assert response.json()["title"] == FIRST_BOOKMARK["title"]


def test_delete_bookmark(client, auth_headers):
    """Test deleting a bookmark."""
    bookmark = create_bookmark(client, auth_headers)

    response = client.delete(f"/bookmarks/{bookmark['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert response.content == b""

    response = client.get("/bookmarks", headers=auth_headers)
    assert response.json() == []

    response = client.get(f"/bookmarks/{bookmark['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_bookmark_twice(client, auth_headers):
    bookmark = create_bookmark(client, auth_headers)
    client.delete(f"/bookmarks/{bookmark['id']}", headers=auth_headers)

    response = client.delete(f"/bookmarks/{bookmark['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_other_users_bookmark(client, auth_headers, other_auth_headers):
    bookmark = create_bookmark(client, auth_headers)

    response = client.delete(f"/bookmarks/{bookmark['id']}", headers=other_auth_headers)
    assert response.status_code == 404
    assert len(client.get("/bookmarks", headers=auth_headers).json()) == 1


def test_bookmark_id_must_be_integer(client, auth_headers):
    response = client.get("/bookmarks/abc", headers=auth_headers)
    assert response.status_code == 400


def test_bookmark_id_out_of_range(client, auth_headers):
    """Test ids beyond the integer column range are rejected, not passed to the database."""
    huge_id = "99999999999999999999"
    assert client.get(f"/bookmarks/{huge_id}", headers=auth_headers).status_code == 400
    assert client.delete(f"/bookmarks/{huge_id}", headers=auth_headers).status_code == 400
    response = client.patch(f"/bookmarks/{huge_id}", headers=auth_headers, json={"title": "x"})
    assert response.status_code == 400
    assert client.get("/bookmarks/0", headers=auth_headers).status_code == 400


def test_unauthorized_access(client):
    """Test that bookmark endpoints require authentication."""
    assert client.get("/bookmarks").status_code == 401
    assert client.post("/bookmarks", json=FIRST_BOOKMARK).status_code == 401
    assert client.get("/bookmarks/1").status_code == 401
    assert client.patch("/bookmarks/1", json={"title": "x"}).status_code == 401
    assert client.delete("/bookmarks/1").status_code == 401
