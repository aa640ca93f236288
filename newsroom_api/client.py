"""Newsroom API client.

This module defines a small client wrapper around the Newsroom REST
API.  It uses the ``requests`` library internally and exposes one
method per operation:

* ``list_articles`` / ``get_article`` / ``create_article`` /
  ``update_article`` / ``delete_article`` and the same five for
  journalists and categories.
* :meth:`NewsroomClient.articles_by_journalist` and
  :meth:`NewsroomClient.articles_by_category` for the relationship
  endpoints.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.  The client never raises for
HTTP or network errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Optional[Dict[str, Any]]


class NewsroomClient:
    """Client for interacting with the Newsroom API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including any prefix, e.g.
                ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Error]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/articles``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for an empty response such as a 204.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Error]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _delete(self, path: str) -> Tuple[bool, Error]:
        _, error = self._request("DELETE", path)
        return error is None, error

    # ------------------------------------------------------------------
    # Articles
    # ------------------------------------------------------------------
    def list_articles(self) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list("/articles")

    def get_article(self, article_id: Any) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("GET", f"/articles/{article_id}")

    def create_article(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        """Create an article.

        Args:
            payload: ``title``, ``content``, ``journalistId`` and
                ``categoryId``.
        """
        return self._request("POST", "/articles", json_body=payload)

    def update_article(self, article_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("PUT", f"/articles/{article_id}", json_body=payload)

    def delete_article(self, article_id: Any) -> Tuple[bool, Error]:
        return self._delete(f"/articles/{article_id}")

    # ------------------------------------------------------------------
    # Journalists
    # ------------------------------------------------------------------
    def list_journalists(self) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list("/journalists")

    def get_journalist(self, journalist_id: Any) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("GET", f"/journalists/{journalist_id}")

    def create_journalist(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("POST", "/journalists", json_body=payload)

    def update_journalist(self, journalist_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("PUT", f"/journalists/{journalist_id}", json_body=payload)

    def delete_journalist(self, journalist_id: Any) -> Tuple[bool, Error]:
        return self._delete(f"/journalists/{journalist_id}")

    def articles_by_journalist(self, journalist_id: Any) -> Tuple[List[Dict[str, Any]], Error]:
        """Retrieve the articles written by a journalist.

        A journalist without articles is reported as a 404 error.
        """
        return self._list(f"/journalists/{journalist_id}/articles")

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------
    def list_categories(self) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list("/categories")

    def get_category(self, category_id: Any) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("GET", f"/categories/{category_id}")

    def create_category(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("POST", "/categories", json_body=payload)

    def update_category(self, category_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("PUT", f"/categories/{category_id}", json_body=payload)

    def delete_category(self, category_id: Any) -> Tuple[bool, Error]:
        return self._delete(f"/categories/{category_id}")

    def articles_by_category(self, category_id: Any) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list(f"/categories/{category_id}/articles")
