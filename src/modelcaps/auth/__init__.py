"""Browser sign-in helpers."""
from __future__ import annotations

from modelcaps.auth.browser import open_authenticated_url, open_cloud_url
from modelcaps.auth.client import SIGN_IN_CODES_PATH, SignInClient
from modelcaps.auth.token import (
    AUTH_PATH_PREFIX,
    SignInToken,
    app_host_for,
    build_authenticated_url,
    build_cloud_url,
)

__all__ = [
    "AUTH_PATH_PREFIX",
    "SIGN_IN_CODES_PATH",
    "SignInClient",
    "SignInToken",
    "app_host_for",
    "build_authenticated_url",
    "build_cloud_url",
    "open_authenticated_url",
    "open_cloud_url",
]
