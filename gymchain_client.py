"""GymChain API client.

A thin wrapper around the GymChain REST API built on ``requests``.  It
exposes one method per endpoint:

* :meth:`list_users`, :meth:`get_user`, :meth:`create_user`,
  :meth:`update_user`, :meth:`delete_user`, :meth:`set_user_active`
* :meth:`list_workouts`, :meth:`get_workout`, :meth:`create_workout`,
  :meth:`update_workout`, :meth:`delete_workout`

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a
dictionary with ``status_code`` (``None`` for transport errors) and a
human-readable ``message`` taken from the response's ``detail`` when
available.

Authenticate by passing ``api_key='<token>'``; it is sent as
``Authorization: Bearer <token>``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


@dataclass
class ApiEndpoint:
    """An API operation: HTTP method plus a path template like ``/users/{id}``."""

    path: str
    method: str

    def format(self, record_id: Any = None) -> str:
        if record_id is None:
            return self.path
        return self.path.replace("{id}", str(record_id))


class GymChainAPI:
    """Client for the GymChain users and workouts API."""

    ENDPOINTS: Dict[str, ApiEndpoint] = {
        "list_users": ApiEndpoint("/users", "GET"),
        "create_user": ApiEndpoint("/users", "POST"),
        "get_user": ApiEndpoint("/users/{id}", "GET"),
        "update_user": ApiEndpoint("/users/{id}", "PUT"),
        "delete_user": ApiEndpoint("/users/{id}", "DELETE"),
        "set_user_active": ApiEndpoint("/users/{id}/active", "PUT"),
        "list_workouts": ApiEndpoint("/workouts", "GET"),
        "create_workout": ApiEndpoint("/workouts", "POST"),
        "get_workout": ApiEndpoint("/workouts/{id}", "GET"),
        "update_workout": ApiEndpoint("/workouts/{id}", "PUT"),
        "delete_workout": ApiEndpoint("/workouts/{id}", "DELETE"),
    }

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including any prefix, e.g.
                ``https://gym.example.com/api``.
            api_key: Optional bearer token.
            session: Optional requests session; one is created if omitted.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            json_body: JSON body to send (for POST/PUT).
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses such as 204.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None and exc.response.content:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _call(
        self, name: str, record_id: Any = None, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        ep = self.ENDPOINTS[name]
        return self._request(ep.method, ep.format(record_id), json_body=json_body)

    def _call_list(self, name: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._call(name)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def _call_no_content(self, name: str, record_id: Any, json_body: Any | None = None) -> Tuple[bool, Optional[Error]]:
        _, error = self._call(name, record_id, json_body)
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._call_list("list_users")

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("get_user", user_id)

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a user.  ``payload`` needs ``name``, ``email`` and ``password``."""
        return self._call("create_user", json_body=payload)

    def update_user(self, user_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("update_user", user_id, payload)

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        return self._call_no_content("delete_user", user_id)

    def set_user_active(self, user_id: Any, active: bool) -> Tuple[bool, Optional[Error]]:
        """Activate or deactivate a user.  Inactive users cannot log workouts."""
        return self._call_no_content("set_user_active", user_id, bool(active))

    # ------------------------------------------------------------------
    # Workout operations
    # ------------------------------------------------------------------
    def list_workouts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._call_list("list_workouts")

    def get_workout(self, workout_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("get_workout", workout_id)

    def create_workout(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log a workout, e.g. ``{"user": {"id": 1}, "workout_date": "2024-03-18", "duration_minutes": 45}``."""
        return self._call("create_workout", json_body=payload)

    def update_workout(self, workout_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("update_workout", workout_id, payload)

    def delete_workout(self, workout_id: Any) -> Tuple[bool, Optional[Error]]:
        return self._call_no_content("delete_workout", workout_id)
