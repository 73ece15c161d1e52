"""Client for the Yelp Fusion search and business endpoints."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

import requests

from .config import Settings, get_settings
from .errors import BusinessNotFoundError, DecodeError, MissingRequiredError, RemoteError, TransportError
from .models import BusinessDetail, SearchResult
from .options import Parameters, SearchOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")

ROOT_URL = "https://api.yelp.com/"
BUSINESS_AREA = "/v3/businesses"
SEARCH_AREA = "/v3/businesses/search"
REQUEST_TIMEOUT = 10
# The business endpoint reports unknown ids as 400; it used to send 404.
_NOT_FOUND_STATUSES = frozenset({400, 404})
_FALLBACK_STATUS = 500


def build_url(area: str, business_id: str = "", params: Optional[Mapping[str, str]] = None) -> str:
    """Assemble an absolute API URL from an endpoint path, optional id and query parameters."""
    scheme, netloc, _, _, _ = urlsplit(ROOT_URL)
    path = area
    if business_id:
        path += "/" + quote(business_id, safe="")
    query = urlencode(params) if params else ""
    return urlunsplit((scheme, netloc, path, query, ""))


class Client:
    """Performs searches and business lookups against the Yelp Fusion API.

    ``session`` is any object with a ``requests.Session``-compatible ``get``; a new
    ``requests.Session`` is created when omitted. The client keeps no state besides
    the key and the session, so it is as thread-safe as the session it wraps.
    """

    def __init__(
        self,
        api_key: str,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.api_key = api_key
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, session: Optional[requests.Session] = None) -> "Client":
        settings = settings or get_settings()
        return cls(settings.api_key, session=session, timeout=settings.request_timeout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timeout={self.timeout!r})"

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the session if this client created it; caller-supplied sessions are left open."""
        if self._owns_session:
            self.session.close()

    def search(self, term: str, location: str) -> SearchResult:
        """Simple search by term and free-text location. The term may be empty."""
        if not location:
            raise MissingRequiredError("location must be specified")
        params = {"term": term, "location": location}
        return self._request(SEARCH_AREA, "", params, SearchResult.from_dict)

    def search_with_options(self, options: SearchOptions) -> SearchResult:
        """Full search; parameter validation errors from ``options`` propagate unchanged."""
        params = options.get_parameters()
        return self._request(SEARCH_AREA, "", params, SearchResult.from_dict)

    def get_business(self, business_id: str) -> BusinessDetail:
        if not business_id:
            raise MissingRequiredError("business id must be specified")
        try:
            return self._request(BUSINESS_AREA, business_id, None, BusinessDetail.from_dict)
        except RemoteError as exc:
            if exc.status_code in _NOT_FOUND_STATUSES:
                raise BusinessNotFoundError("business not found", status_code=exc.status_code) from exc
            raise

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}", "Accept": "application/json"}

    def _request(
        self,
        area: str,
        business_id: str,
        params: Optional[Parameters],
        decode: Callable[[Mapping[str, Any]], T],
    ) -> T:
        url = build_url(area, business_id, params)
        logger.debug("GET %s", url)

        try:
            response = self.session.get(url, headers=self._headers(), timeout=self.timeout, stream=True)
        except requests.RequestException as exc:
            status_code = getattr(exc.response, "status_code", None) or _FALLBACK_STATUS
            logger.debug("Yelp request to %s failed: %s", area, exc)
            raise TransportError(str(exc), status_code=status_code) from exc

        try:
            return self._handle_response(response, decode)
        finally:
            response.close()

    def _handle_response(self, response: requests.Response, decode: Callable[[Mapping[str, Any]], T]) -> T:
        status_code = response.status_code
        try:
            # Reading the whole body drains the stream before the connection is released.
            response.content
        except requests.RequestException as exc:
            raise TransportError(str(exc), status_code=status_code) from exc

        if status_code != 200:
            logger.debug("Yelp API returned status=%s reason=%s", status_code, response.reason)
            raise RemoteError(status_code, reason=response.reason or "", body=response.text)

        try:
            payload = response.json()
            return decode(payload)
        except (ValueError, TypeError, KeyError) as exc:
            raise DecodeError(f"could not decode Yelp response: {exc}", status_code=status_code) from exc
