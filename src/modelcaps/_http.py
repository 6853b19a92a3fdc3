"""HTTP client wrapper around httpx."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from modelcaps.errors import NetworkError, RequestTimeoutError, error_from_status_code


@dataclass(frozen=True)
class HttpResponse:
    """Parsed HTTP response."""

    status_code: int
    body: dict[str, Any]
    headers: dict[str, str]
    raw_text: str = ""


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into modelcaps exceptions."""

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers or {},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """Send a POST request and return the parsed response.

        Raises a modelcaps error on non-2xx status or transport failure.
        """
        try:
            resp = self._client.post(path, json=json, headers=extra_headers or {})
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc), cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc), cause=exc) from exc

        raw_text = resp.text
        body = _parse_body(resp)

        if resp.status_code >= 300:
            error = body.get("error")
            if isinstance(error, dict):
                msg = error.get("message", raw_text)
            elif isinstance(error, str):
                msg = error
            else:
                msg = raw_text or f"HTTP {resp.status_code}"
            raise error_from_status_code(resp.status_code, msg, raw=body)

        return HttpResponse(
            status_code=resp.status_code,
            body=body,
            headers=dict(resp.headers),
            raw_text=raw_text,
        )

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _parse_body(resp: httpx.Response) -> dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
