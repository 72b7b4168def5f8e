"""Flickr REST session using httpx for blocking HTTP calls."""

import logging
from typing import Any, Mapping

import httpx

from flickr_lite.models import ApiError, ApiResult, ErrorKind

logger = logging.getLogger(__name__)

# Flickr REST API endpoint
REST_ENDPOINT = "https://api.flickr.com/services/rest/"

# Response format requested from the REST endpoint
RESPONSE_FORMAT = "json"


class FlickrAPIError(Exception):
    """Base exception for Flickr API errors."""

    kind = ErrorKind.REMOTE

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def to_error(self) -> ApiError:
        return ApiError(kind=self.kind, message=self.message, code=self.code)


class TransportError(FlickrAPIError):
    """Exception raised when the HTTP exchange itself fails."""

    kind = ErrorKind.TRANSPORT


class DecodeError(FlickrAPIError):
    """Exception raised when the response body can't be deserialized."""

    kind = ErrorKind.DECODE


class Session:
    """A communication session with Flickr for one set of credentials.

    The API key is enough for public data. The secret key is kept for
    callers that need it but is never used to sign requests.
    """

    def __init__(
        self,
        api_key: str,
        secret_key: str | None = None,
        *,
        base_url: str = REST_ENDPOINT,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Flickr session.

        Args:
            api_key: Flickr API key
            secret_key: Flickr secret key (optional)
            base_url: REST endpoint to call
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.secret_key = secret_key
        self.base_url = base_url
        self.timeout = timeout
        self.last_error: ApiError | None = None
        self._client: httpx.Client | None = None

    def __enter__(self) -> "Session":
        """Context manager entry, sharing one client between calls."""
        self._client = httpx.Client(timeout=self.timeout)
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        if self._client:
            self._client.close()
        self._client = None

    @property
    def error_code(self) -> int | None:
        """Error code of the most recent failed call."""
        return self.last_error.code if self.last_error else None

    @property
    def error_message(self) -> str | None:
        """Error message of the most recent failed call."""
        return self.last_error.message if self.last_error else None

    def request(
        self,
        method: str,
        params: Mapping[str, Any] | None = None,
        *,
        expect: str | None = None,
    ) -> ApiResult:
        """Call a remote Flickr method.

        Args:
            method: Flickr method name, e.g. "flickr.people.getInfo"
            params: Additional method parameters. Values of None are dropped,
                and api_key, method and format are always overwritten.
            expect: Dotted path of a node the response must contain, e.g.
                "user.nsid". A response without it counts as a decode failure.

        Returns:
            A successful ApiResult holding the decoded response, or a failed
            one whose error is also stored in last_error
        """
        if not method:
            raise ValueError("Method name cannot be empty")

        query = {
            str(key): str(value)
            for key, value in (params or {}).items()
            if value is not None
        }
        query.update(
            api_key=self.api_key,
            method=method,
            format=RESPONSE_FORMAT,
            nojsoncallback="1",
        )

        try:
            logger.debug(f"Calling {method} with {sorted(query)}")
            response = self._get(query)
            result = self._parse_json_response(response, method)
            self._check_status(result, method)
            if expect:
                self._check_shape(result, expect, method)
        except FlickrAPIError as e:
            self.last_error = e.to_error()
            logger.warning(f"Call to {method} failed: {self.last_error}")
            return ApiResult(success=False, error=self.last_error)

        return ApiResult(success=True, data=result)

    def _get(self, query: dict[str, str]) -> httpx.Response:
        """Issue one GET to the REST endpoint."""
        try:
            if self._client is not None:
                return self._client.get(self.base_url, params=query)
            with httpx.Client(timeout=self.timeout) as client:
                return client.get(self.base_url, params=query)
        except httpx.HTTPError as e:
            raise TransportError(f"Network error: {e}") from e

    def _parse_json_response(
        self, response: httpx.Response, method: str
    ) -> dict[str, Any]:
        """Parse JSON response, handling non-JSON responses gracefully.

        Args:
            response: The httpx Response object
            method: Flickr method that was called

        Returns:
            Parsed JSON as a dictionary

        Raises:
            TransportError: If response is 5xx with non-JSON body
            DecodeError: If response has invalid JSON for non-5xx status
        """
        try:
            result = response.json()
        except ValueError:
            # Non-JSON response (e.g., HTML error page during outages)
            if response.status_code >= 500:
                raise TransportError(
                    f"Server error {response.status_code}: {response.text[:200]}"
                )
            raise DecodeError(
                f"Invalid API response while calling {method}: {response.text[:200]}"
            )

        if not isinstance(result, dict):
            raise DecodeError(f"Unexpected API response while calling {method}")
        return result

    def _check_status(self, result: dict[str, Any], method: str) -> None:
        """Raise FlickrAPIError unless the response carries stat "ok"."""
        if result.get("stat") == "ok":
            return

        code = result.get("code")
        try:
            code = int(code) if code is not None else None
        except (TypeError, ValueError):
            code = None
        message = result.get("message") or f"{method} returned stat {result.get('stat')!r}"
        raise FlickrAPIError(str(message), code=code)

    def _check_shape(self, result: dict[str, Any], expect: str, method: str) -> None:
        """Raise DecodeError unless the dotted path expect resolves to a value."""
        node: Any = result
        for key in expect.split("."):
            if not isinstance(node, dict) or node.get(key) is None:
                raise DecodeError(f"Response to {method} has no {expect!r} node")
            node = node[key]
