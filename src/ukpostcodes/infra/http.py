from __future__ import annotations

import logging
from typing import Any, Sequence, TypeVar

import httpx

from ukpostcodes.core.envelope import decode, parse_envelope
from ukpostcodes.core.errors import TransportError, UpstreamError

log = logging.getLogger(__name__)

API_URL = "https://api.postcodes.io"
DEFAULT_USER_AGENT = "ukpostcodes/0.1.0"

T = TypeVar("T")


class HttpClient:
    """
    One request per call against postcodes.io.

    Holds only fixed configuration and the httpx connection pool; query
    parameters and bodies are passed in per call, so one instance can be
    shared between threads.
    """

    def __init__(
        self,
        *,
        base_url: str = API_URL,
        timeout_seconds: float | None = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": user_agent,
            },
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def execute(
        self,
        method: str,
        path: str,
        *,
        params: Sequence[tuple[str, str]] = (),
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> bytes:
        """
        Send one request and return the raw body of a 200 response.

        Raises:
            TransportError: the request never got a usable answer (connect, TLS,
                timeout, redirect loop, undecodable content encoding)
            UpstreamError: non-200 answer carrying an error envelope
            DecodeError: non-200 answer whose body is not an error envelope
        """
        url = self.url(path)
        log.debug("%s %s params=%s", method, url, params)
        extra: dict[str, Any] = {} if timeout is None else {"timeout": timeout}
        try:
            r = self._client.request(method, url, params=list(params), content=body, **extra)
        except httpx.HTTPError as e:
            log.warning("HTTP error: %s %s: %s", method, url, e)
            raise TransportError(str(e) or e.__class__.__name__, status=500) from e

        if r.status_code != 200:
            log.warning("Upstream returned %s for %s %s", r.status_code, method, url)
            envelope = parse_envelope(r.content)
            raise UpstreamError(
                envelope.error or r.reason_phrase,
                status=envelope.status or r.status_code,
            )

        return r.content

    def fetch(
        self,
        method: str,
        path: str,
        shape: type[T] | Any,
        *,
        params: Sequence[tuple[str, str]] = (),
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> T:
        raw = self.execute(method, path, params=params, body=body, timeout=timeout)
        return decode(raw, shape)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
