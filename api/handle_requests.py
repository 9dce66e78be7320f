"""
HTTP request handler applying the SpaceTraders envelope and error conventions.
One request per call: no retries, no rate limiting, no pagination.
"""

import logging
from typing import Any, Callable, TypeVar

import requests

from api.errors import ParseError, ServiceError, UnknownError
from data.models.common import ApiResponse, Meta

T = TypeVar("T")

# Error code the server returns for tokens issued before the last universe reset
TOKEN_RESET_MISMATCH = 4113


class RequestHandler:
    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def close(self) -> None:
        self.session.close()

    def auth_headers(self, agent_key: str | None) -> dict:
        if not agent_key:
            return {}
        return {"Authorization": f"Bearer {agent_key}"}

    def get_json(
        self,
        path: str,
        agent_key: str | None,
        decode: Callable[[Any], T],
        params: dict | None = None,
    ) -> ApiResponse[T]:
        """
        JSON GET helper.
        path: path relative to base_url (no leading slash)
        decode: builds the typed payload from the envelope's 'data' value
        """
        resp = self._send("GET", path, headers=self.auth_headers(agent_key), params=params)
        return self._handle_response(resp, decode)

    def post_json(
        self,
        path: str,
        agent_key: str | None,
        decode: Callable[[Any], T],
        json: dict | None = None,
    ) -> ApiResponse[T]:
        """
        JSON POST helper. Without a body the request still declares Content-Length: 0,
        which the API requires for bodiless POSTs.
        """
        headers = self.auth_headers(agent_key)
        if json is None:
            headers["Content-Length"] = "0"
            resp = self._send("POST", path, headers=headers)
        else:
            resp = self._send("POST", path, headers=headers, json=json)
        return self._handle_response(resp, decode)

    def _send(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}/{path}"
        logging.debug(f">> {method} {url}")
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logging.debug(f"Transport failure for {method} {url}: {e}")
            raise UnknownError(str(e)) from e
        logging.debug(f"<< {resp.status_code} {method} {url}")
        return resp

    def _handle_response(self, resp: requests.Response, decode: Callable[[Any], T]) -> ApiResponse[T]:
        if 200 <= resp.status_code < 300:
            try:
                payload = resp.json()
            except ValueError as e:
                raise ParseError(f"Response body is not JSON: {e}") from e
            if not isinstance(payload, dict) or "data" not in payload:
                raise ParseError("Response body has no 'data' field")
            try:
                data = decode(payload["data"])
                meta = Meta.from_dict(payload["meta"]) if payload.get("meta") else None
            except (KeyError, TypeError, ValueError) as e:
                raise ParseError(f"Unexpected response schema: {e!r}") from e
            return ApiResponse(data=data, meta=meta)

        try:
            err = resp.json()["error"]
            error = ServiceError(
                status=resp.status_code,
                code=err["code"],
                message=err["message"],
                data=err.get("data"),
            )
        except (ValueError, KeyError, TypeError) as e:
            raise ParseError(f"HTTP {resp.status_code} with unexpected error body: {resp.text[:200]}") from e
        logging.warning(f"API error {error.status} [{error.code}]: {error.message}")
        if error.code == TOKEN_RESET_MISMATCH:
            logging.warning("The cached token predates the last server reset; register a new agent.")
        raise error


def page_params(page: int | None, limit: int | None) -> dict | None:
    """Query params for a single page of a list endpoint; None when the server defaults apply."""
    params: dict = {}
    if page is not None:
        params["page"] = page
    if limit is not None:
        params["limit"] = limit
    return params or None
