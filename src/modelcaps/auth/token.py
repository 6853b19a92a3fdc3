"""Sign-in tokens and the web-app URLs that carry them."""
from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass

AUTH_PATH_PREFIX = "/auth/"


def app_host_for(api_host: str) -> str:
    """Derive the web-app host from an API host (first ``api.`` -> ``app.``)."""
    return api_host.replace("api.", "app.", 1)


@dataclass(frozen=True)
class SignInToken:
    """Short-lived sign-in code plus where the web app should land."""

    pin: str
    redirect_to: str

    def to_json(self) -> str:
        return json.dumps(
            {"pin": self.pin, "redirectTo": self.redirect_to}, separators=(",", ":")
        )

    def encode(self) -> str:
        """URL-safe base64 of the compact JSON form, padded."""
        return base64.urlsafe_b64encode(self.to_json().encode("utf-8")).decode("ascii")

    @classmethod
    def decode(cls, encoded: str) -> SignInToken:
        """Inverse of :meth:`encode`; missing padding is tolerated.

        Raises :class:`ValueError` if *encoded* is not a sign-in token.
        """
        padded = encoded + "=" * (-len(encoded) % 4)
        try:
            data = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
        except (binascii.Error, UnicodeError, json.JSONDecodeError) as exc:
            raise ValueError(f"Not a valid sign-in token: {encoded!r}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Not a valid sign-in token: {encoded!r}")
        pin = data.get("pin")
        redirect_to = data.get("redirectTo", "")
        if not isinstance(pin, str) or not isinstance(redirect_to, str):
            raise ValueError(f"Not a valid sign-in token: {encoded!r}")
        return cls(pin=pin, redirect_to=redirect_to)


def build_authenticated_url(api_host: str, sign_in_code: str, path: str) -> str:
    """URL that signs the browser in with *sign_in_code* and lands on *path*."""
    token = SignInToken(pin=sign_in_code, redirect_to=path)
    return f"{app_host_for(api_host)}{AUTH_PATH_PREFIX}{token.encode()}"


def build_cloud_url(api_host: str, path: str) -> str:
    """Plain web-app URL for *path*, no sign-in."""
    return f"{app_host_for(api_host)}{path}"
