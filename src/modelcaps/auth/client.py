"""Client for the sign-in code endpoint."""
from __future__ import annotations

import logging

import httpx

from modelcaps._http import HttpClient
from modelcaps.errors import SignInError

logger = logging.getLogger(__name__)

SIGN_IN_CODES_PATH = "/accounts/sign_in_codes"


class SignInClient:
    """Issues short-lived sign-in codes for the current account."""

    def __init__(
        self,
        api_host: str,
        auth_token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Authorization": f"Bearer {auth_token}"} if auth_token else {}
        self.api_host = api_host
        self._http = HttpClient(
            base_url=api_host, headers=headers, timeout=timeout, transport=transport
        )

    def create_sign_in_code(self) -> str:
        """Request a new sign-in code.

        Raises :class:`SignInError` (or a subclass) if the request fails or
        the response carries no code.
        """
        logger.debug("Requesting sign-in code from %s", self.api_host)
        resp = self._http.post(SIGN_IN_CODES_PATH)
        code = resp.body.get("pin") or resp.body.get("code")
        if code is None and not resp.body:
            # the endpoint may answer with the bare code as text
            code = resp.raw_text.strip().strip('"')
        if not code or not isinstance(code, str):
            raise SignInError("Sign-in code response did not include a code")
        return code

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> SignInClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
