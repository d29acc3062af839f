"""Mock database API client.

This module defines a small client for applications that depend on
the mock database service, for example to check on startup that the
"database" is reachable.  It uses the ``requests`` library
internally.

The client exposes one method per endpoint:

* :meth:`health` – the health record.
* :meth:`ping` – ``True`` if the service reports itself healthy.
* :meth:`list_users` / :meth:`get_user` – user records.
* :meth:`list_products` / :meth:`get_product` – product records.
* :meth:`info` – the database information record.

Methods never raise on HTTP or connection errors.  They return a
tuple ``(data, error)`` where ``error`` is ``None`` on success and a
dictionary with ``status_code`` and ``message`` otherwise.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class MockDatabaseClient:
    """Client for the mock database HTTP API."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 5,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3306``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, path: str) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform a GET request against the service.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success.  On failure ``data`` is ``None`` and
            ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.request(method="GET", url=url, timeout=self.timeout)
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
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request(path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Health and info
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("/health")

    def ping(self) -> bool:
        """Return ``True`` if the service answers and reports ``healthy``."""
        data, error = self.health()
        if error or not isinstance(data, dict):
            return False
        return data.get("status") == "healthy"

    def info(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("/info")

    # ------------------------------------------------------------------
    # Users and products
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/users")

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(f"/users/{user_id}")

    def list_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/products")

    def get_product(self, product_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(f"/products/{product_id}")
