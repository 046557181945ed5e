"""Shared httpx plumbing for the admin API adapters.

Turns every failure mode of a call (unreachable host, timeout, non-2xx
status, unreadable body) into a single ApiError with a readable message.
"""

import json
import logging
from typing import Any

import httpx

from admin_console.domain.exceptions import ApiError, ApiErrorKind

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong. Please try again."
TRANSPORT_ERROR_MESSAGE = "Could not reach the server. Check your connection and try again."
MALFORMED_RESPONSE_MESSAGE = "The server returned an unreadable response."


class BaseApiClient:
    """Infrastructure adapter base — one configured connection to the admin API.

    An injected ``httpx.AsyncClient`` is reused across calls; otherwise a
    client is created for each call and closed afterwards.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_token: str = "",
        session_cookie: str = "",
        session_cookie_name: str = "next-auth.session-token",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
        default_error_message: str = DEFAULT_ERROR_MESSAGE,
        transport_error_message: str = TRANSPORT_ERROR_MESSAGE,
        malformed_response_message: str = MALFORMED_RESPONSE_MESSAGE,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_token = api_token
        self._session_cookie = session_cookie
        self._session_cookie_name = session_cookie_name
        self._timeout = timeout
        self._http_client = http_client
        self._default_error_message = default_error_message
        self._transport_error_message = transport_error_message
        self._malformed_response_message = malformed_response_message

    def _connection_options(self) -> dict[str, Any]:
        """Keyword arguments needed to build a sibling client on the same connection."""
        return {
            "api_token": self._api_token,
            "session_cookie": self._session_cookie,
            "session_cookie_name": self._session_cookie_name,
            "timeout": self._timeout,
            "http_client": self._http_client,
            "default_error_message": self._default_error_message,
            "transport_error_message": self._transport_error_message,
            "malformed_response_message": self._malformed_response_message,
        }

    def _api_url(self, path: str) -> str:
        return f"{self._base_url}/api/{path.strip('/')}"

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        if self._session_cookie:
            headers["Cookie"] = f"{self._session_cookie_name}={self._session_cookie}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send one request and raise ApiError unless it returned 2xx."""
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.request(
                    method, url, headers=self._get_headers(), **kwargs
                )
            except httpx.TimeoutException as exc:
                logger.warning("%s %s timed out: %s", method, url, exc)
                raise ApiError(ApiErrorKind.TRANSPORT, self._transport_error_message) from exc
            except httpx.DecodingError as exc:
                logger.warning("%s %s sent an undecodable body: %s", method, url, exc)
                raise ApiError(ApiErrorKind.MALFORMED, self._malformed_response_message) from exc
            except httpx.RequestError as exc:
                logger.warning("%s %s failed: %s", method, url, exc)
                raise ApiError(ApiErrorKind.TRANSPORT, self._transport_error_message) from exc

            if not response.is_success:
                self._raise_api_error(response)
            return response

        finally:
            if should_close:
                await client.aclose()

    def _parse_json(self, response: httpx.Response, *, allow_empty: bool = False) -> Any:
        """Decode a response body, treating undecodable JSON as a malformed response."""
        if allow_empty and not response.content.strip():
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning(
                "Unreadable response from %s: %s", response.request.url, exc
            )
            raise ApiError(
                ApiErrorKind.MALFORMED,
                self._malformed_response_message,
                status_code=response.status_code,
            ) from exc

    def _raise_api_error(self, response: httpx.Response) -> None:
        """Raise ApiError from a non-2xx response, keeping the server's message if any."""
        message = self._default_error_message
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict):
            candidate = data.get("message") or data.get("error")
            if isinstance(candidate, dict):
                candidate = candidate.get("message")
            if isinstance(candidate, str) and candidate.strip():
                message = candidate.strip()

        logger.warning(
            "%s %s returned %d: %s",
            response.request.method,
            response.request.url,
            response.status_code,
            message,
        )
        raise ApiError(
            ApiErrorKind.SERVER,
            message,
            status_code=response.status_code,
        )
