from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import books as books_router
from api.routes import create_book as create_book_router
from api.routes import new_route as new_route_router
from services.book_catalog import BookCatalog


@pytest.fixture
def catalog(session_factory):
    catalog = BookCatalog(session_factory)
    with patch.object(new_route_router, "catalog", catalog), patch.object(
        create_book_router, "catalog", catalog
    ), patch.object(books_router, "catalog", catalog):
        yield catalog


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(books_router.router, prefix="/books")
    app.include_router(create_book_router.router, prefix="/newbook")
    app.include_router(new_route_router.router, prefix="/newroute")
    return TestClient(app)


def test_new_endpoint_empty(catalog, client):
    resp = client.get("/newroute/new-endpoint")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": []}


def test_create_then_list_titles_and_authors(catalog, client, seeded):
    resp = client.post(
        "/newbook",
        json={
            "author_family_name": "Doe",
            "author_first_name": "Jane",
            "genre_name": "Fiction",
            "title": "My Book",
        },
    )
    assert resp.status_code == 201
    created = resp.json()["data"]
    assert created["title"] == "My Book"
    assert created["summary"] == "Demo Summary to be updated later"
    assert created["isbn"] == "ISBN2022"
    assert created["genre"] == [seeded["fiction"].id]

    resp = client.get("/newroute/new-endpoint")
    data = resp.json()["data"]
    assert len(data) == 1
    assert data[0]["title"] == "My Book"
    assert data[0]["author"]["name"] == "Doe, Jane"
    assert "summary" not in data[0]

    assert client.get("/books/count").json()["data"] == {"count": 1}


def test_create_unknown_author_is_404(catalog, client, seeded):
    resp = client.post(
        "/newbook",
        json={
            "author_family_name": "Nobody",
            "author_first_name": "Ann",
            "genre_name": "Fiction",
            "title": "Lost",
        },
    )
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Author or genre not found"}
    assert client.get("/books/count").json()["data"]["count"] == 0


def test_list_books_with_fields_and_sort(catalog, client, seeded):
    for title in ["Beta", "Alpha", "Gamma"]:
        catalog.save_book_of_existing_author_and_genre("Doe", "Jane", "Fiction", title)

    resp = client.get("/books", params={"fields": "title,author", "sort": "-title"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [b["title"] for b in data] == ["Gamma", "Beta", "Alpha"]
    assert data[0]["author"]["first_name"] == "Jane"

    resp = client.get("/books/count", params={"title": "Beta"})
    assert resp.json()["data"]["count"] == 1


def test_parse_sort():
    assert books_router.parse_sort(None) is None
    assert books_router.parse_sort("title,-isbn") == {"title": 1, "isbn": -1}
    assert books_router.parse_sort(" , ") is None


@patch.object(new_route_router, "catalog")
def test_new_endpoint_storage_error_is_500(mock_catalog, client):
    mock_catalog.get_books_with_authors.side_effect = RuntimeError("connection refused")

    resp = client.get("/newroute/new-endpoint")

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "connection refused"}


@patch.object(new_route_router, "catalog", new_callable=MagicMock)
def test_new_endpoint_error_without_message(mock_catalog, client):
    mock_catalog.get_books_with_authors.side_effect = RuntimeError()

    resp = client.get("/newroute/new-endpoint")

    assert resp.status_code == 500
    assert resp.json()["message"] == "Unknown error occurred"


def test_app_root_and_health():
    from api.main import app

    client = TestClient(app)
    assert client.get("/").text == "Welcome to the Library API!"
    assert client.get("/health").json() == {"status": "healthy"}


def test_list_books_blank_and_mixed_fields(catalog, client, seeded):
    catalog.save_book_of_existing_author_and_genre("Doe", "Jane", "Fiction", "Only")

    resp = client.get("/books", params={"fields": ""})
    assert resp.status_code == 200
    book = resp.json()["data"][0]
    assert book["summary"] == "Demo Summary to be updated later"
    assert book["genre"] == [seeded["fiction"].id]

    resp = client.get("/books", params={"fields": "title,-summary"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False
