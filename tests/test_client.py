"""
Tests for the requests-based API client.

A fake session stands in for ``requests.Session`` and returns real
``requests.Response`` objects, so status handling goes through
``raise_for_status`` exactly as it would over the network.
"""

import json

import requests

from newsroom_api.client import NewsroomClient


def make_response(status_code, body=None, url="http://api.test"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def make_client(*responses):
    session = FakeSession(*responses)
    return NewsroomClient(base_url="http://api.test/", session=session), session


class TestSuccess:

    def test_list_articles(self):
        articles = [{"id": 1, "title": "T", "content": "C", "journalistId": 1, "categoryId": 1}]
        client, session = make_client(make_response(200, articles))
        data, error = client.list_articles()
        assert error is None
        assert data == articles
        assert session.calls[0]["method"] == "GET"
        assert session.calls[0]["url"] == "http://api.test/articles"

    def test_create_journalist_sends_body(self):
        created = {"id": 1, "name": "A", "email": "a@x.com"}
        client, session = make_client(make_response(201, created))
        data, error = client.create_journalist({"name": "A", "email": "a@x.com"})
        assert (data, error) == (created, None)
        assert session.calls[0]["method"] == "POST"
        assert session.calls[0]["json"] == {"name": "A", "email": "a@x.com"}
        assert session.calls[0]["timeout"] == 15

    def test_update_category(self):
        client, session = make_client(make_response(200, {"id": 2, "name": "World"}))
        data, error = client.update_category(2, {"name": "World"})
        assert data == {"id": 2, "name": "World"}
        assert session.calls[0]["method"] == "PUT"
        assert session.calls[0]["url"] == "http://api.test/categories/2"

    def test_delete_article_with_empty_body(self):
        client, session = make_client(make_response(204))
        assert client.delete_article(1) == (True, None)
        assert session.calls[0]["method"] == "DELETE"

    def test_relationship_endpoints(self):
        client, session = make_client(make_response(200, [{"id": 1}]), make_response(200, [{"id": 2}]))
        assert client.articles_by_journalist(1) == ([{"id": 1}], None)
        assert client.articles_by_category(3) == ([{"id": 2}], None)
        assert session.calls[0]["url"] == "http://api.test/journalists/1/articles"
        assert session.calls[1]["url"] == "http://api.test/categories/3/articles"


class TestErrors:

    def test_not_found_message_is_surfaced(self):
        client, _ = make_client(make_response(404, {"message": "Article not found"}))
        data, error = client.get_article(9)
        assert data is None
        assert error == {"status_code": 404, "message": "Article not found"}

    def test_validation_error(self):
        client, _ = make_client(make_response(400, {"message": "Missing required fields"}))
        data, error = client.create_category({})
        assert data is None
        assert error["status_code"] == 400
        assert error["message"] == "Missing required fields"

    def test_empty_relationship_returns_empty_list(self):
        client, _ = make_client(make_response(404, {"message": "No articles found for this category"}))
        data, error = client.articles_by_category(1)
        assert data == []
        assert error["status_code"] == 404

    def test_failed_delete(self):
        client, _ = make_client(make_response(404, {"message": "Journalist not found"}))
        success, error = client.delete_journalist(4)
        assert success is False
        assert error["message"] == "Journalist not found"

    def test_network_error(self):
        client, _ = make_client(requests.ConnectionError("connection refused"))
        data, error = client.list_journalists()
        assert data == []
        assert error == {"status_code": None, "message": "connection refused"}

    def test_error_without_json_body(self):
        client, _ = make_client(make_response(500))
        data, error = client.list_categories()
        assert data == []
        assert error["status_code"] == 500
        assert error["message"]
