# tests/test_api/test_search_api.py

import pytest
import requests
from unittest.mock import Mock, patch
from core.services.catalog import CatalogClient, get_catalog_client

@pytest.fixture
def http_session():
    return Mock()

@pytest.fixture
def catalog(client, http_session):
    """Route /search through a catalog client backed by a mocked HTTP session."""
    catalog_client = CatalogClient(api_url="https://catalog.test/volumes", api_key="", session=http_session)
    client.app.dependency_overrides[get_catalog_client] = lambda: catalog_client
    return catalog_client

def ok_response(payload):
    response = Mock()
    response.json.return_value = payload
    return response

def test_search_requires_authentication(client, catalog):
    assert client.get("/search?q=dune").status_code == 401

def test_search_without_query(client, auth_headers, catalog, http_session):
    response = client.get("/search", headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Query parameter is required"}
    http_session.get.assert_not_called()

def test_search_with_empty_query(client, auth_headers, catalog):
    assert client.get("/search?q=", headers=auth_headers).status_code == 400

def test_search(client, auth_headers, catalog, http_session):
    http_session.get.return_value = ok_response({
        "items": [
            {
                "id": "vol_1",
                "volumeInfo": {
                    "title": "Dune",
                    "authors": ["Frank Herbert"],
                    "imageLinks": {"thumbnail": "http://books.google.com/thumb"}
                },
                "saleInfo": {"country": "US"}
            },
            {"id": "vol_2"}
        ]
    })
    response = client.get("/search?q=dune", headers=auth_headers)
    assert response.status_code == 200
    items = response.json()["items"]
    assert items[0]["volumeInfo"]["title"] == "Dune"
    assert items[0]["volumeInfo"]["imageLinks"]["thumbnail"] == "https://books.google.com/thumb"
    assert items[0]["saleInfo"] == {"country": "US"}
    assert items[1] == {"id": "vol_2", "volumeInfo": {"imageLinks": {}}}

def test_search_no_results(client, auth_headers, catalog, http_session):
    http_session.get.return_value = ok_response({"totalItems": 0})
    response = client.get("/search?q=zzzz", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"items": []}

def test_search_upstream_failure(client, auth_headers, catalog, http_session):
    http_session.get.side_effect = requests.Timeout("timed out")
    response = client.get("/search?q=dune", headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {"error": "Books cannot be fetched now, please try again."}

def test_search_passes_null_fields_through(client, auth_headers, catalog, http_session):
    http_session.get.return_value = ok_response({
        "items": [
            {
                "id": "vol_1",
                "volumeInfo": {"title": "Dune", "description": None, "imageLinks": None},
                "accessInfo": None
            }
        ]
    })
    item = client.get("/search?q=dune", headers=auth_headers).json()["items"][0]
    assert item["accessInfo"] is None
    assert item["volumeInfo"] == {"title": "Dune", "description": None, "imageLinks": {}}

@patch('core.services.catalog.requests.Session')
def test_search_closes_http_session(mock_session_class, client, auth_headers):
    """Test that the catalog session opened for a request is closed afterwards."""
    http_session = mock_session_class.return_value
    http_session.get.return_value = ok_response({"items": []})

    for _ in range(3):
        assert client.get("/search?q=dune", headers=auth_headers).status_code == 200

    assert mock_session_class.call_count == 3
    assert http_session.close.call_count == 3

@patch('core.services.catalog.requests.Session')
def test_search_closes_http_session_on_failure(mock_session_class, client, auth_headers):
    http_session = mock_session_class.return_value
    http_session.get.side_effect = requests.ConnectionError("refused")

    assert client.get("/search?q=dune", headers=auth_headers).status_code == 500
    http_session.close.assert_called_once()
