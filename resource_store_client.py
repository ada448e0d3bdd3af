"""Resource Store API client.

This module defines a thin client wrapper around the Resource Store
HTTP API.  The client uses the ``requests`` library internally and
exposes one method per endpoint:

* :meth:`health` – service status.
* :meth:`list_users`, :meth:`get_user`, :meth:`create_user`,
  :meth:`replace_user`, :meth:`update_user`, :meth:`delete_user`.
* :meth:`list_posts`, :meth:`get_post`, :meth:`create_post`,
  :meth:`replace_post`, :meth:`update_post`, :meth:`delete_post`.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for the
list methods) and ``error`` is a dictionary with keys ``status_code``
and ``message``.  The message is the ``error`` field of the service's
JSON error body when there is one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Result = Tuple[Optional[Any], Optional[Error]]


class ResourceStoreClient:
    """Client for the Resource Store API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/users``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for an empty body.
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
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, resource: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/api/{resource}")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _get(self, resource: str, entity_id: Any) -> Result:
        return self._request("GET", f"/api/{resource}/{entity_id}")

    def _create(self, resource: str, payload: Dict[str, Any]) -> Result:
        return self._request("POST", f"/api/{resource}", json_body=payload)

    def _replace(self, resource: str, entity_id: Any, payload: Dict[str, Any]) -> Result:
        return self._request("PUT", f"/api/{resource}/{entity_id}", json_body=payload)

    def _update(self, resource: str, entity_id: Any, changes: Dict[str, Any]) -> Result:
        return self._request("PATCH", f"/api/{resource}/{entity_id}", json_body=changes)

    def _delete(self, resource: str, entity_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/api/{resource}/{entity_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Service
    # ------------------------------------------------------------------
    def health(self) -> Result:
        """Return the service's health payload."""
        return self._request("GET", "/health")

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users in creation order."""
        return self._list("users")

    def get_user(self, user_id: Any) -> Result:
        return self._get("users", user_id)

    def create_user(self, name: str, email: str) -> Result:
        """Create a user; the service assigns the id."""
        return self._create("users", {"name": name, "email": email})

    def replace_user(self, user_id: Any, name: str, email: str) -> Result:
        return self._replace("users", user_id, {"name": name, "email": email})

    def update_user(self, user_id: Any, **changes: Any) -> Result:
        """Change only the given fields of a user."""
        return self._update("users", user_id, changes)

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        return self._delete("users", user_id)

    # ------------------------------------------------------------------
    # Post operations
    # ------------------------------------------------------------------
    def list_posts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all posts in creation order."""
        return self._list("posts")

    def get_post(self, post_id: Any) -> Result:
        return self._get("posts", post_id)

    def create_post(self, title: str, body: str, user_id: Optional[int] = None) -> Result:
        """Create a post.

        Args:
            title: Post title.
            body: Post text.
            user_id: Author id; the service defaults it to ``1`` when omitted.
        """
        payload: Dict[str, Any] = {"title": title, "body": body}
        if user_id is not None:
            payload["userId"] = user_id
        return self._create("posts", payload)

    def replace_post(self, post_id: Any, title: str, body: str, user_id: Optional[int] = None) -> Result:
        """Replace a post.  Without ``user_id`` the post keeps its author."""
        payload: Dict[str, Any] = {"title": title, "body": body}
        if user_id is not None:
            payload["userId"] = user_id
        return self._replace("posts", post_id, payload)

    def update_post(self, post_id: Any, **changes: Any) -> Result:
        return self._update("posts", post_id, changes)

    def delete_post(self, post_id: Any) -> Tuple[bool, Optional[Error]]:
        return self._delete("posts", post_id)
