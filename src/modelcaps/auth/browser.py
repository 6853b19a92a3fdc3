"""Open web-app pages in the user's browser."""
from __future__ import annotations

import logging
from typing import Callable

import click

from modelcaps.auth.client import SignInClient
from modelcaps.auth.token import build_authenticated_url, build_cloud_url

logger = logging.getLogger(__name__)

Launcher = Callable[[str], int]


def _launch(url: str, launcher: Launcher) -> bool:
    try:
        status = launcher(url)
    except OSError as exc:
        logger.info("Browser launch raised %s", exc)
        click.echo(f"Failed to open URL automatically: {exc}")
        click.echo("Please open the URL manually in your browser.")
        return False
    if status:
        logger.info("Browser launcher exited with status %s", status)
        click.echo(f"Failed to open URL automatically: launcher exited with status {status}")
        click.echo("Please open the URL manually in your browser.")
        return False
    return True


def _announce(msg: str, url: str) -> None:
    click.echo(
        f"{click.style(msg, fg='bright_green')}\n\n"
        f"If it doesn't open automatically, use this URL:\n{url}"
    )


def open_authenticated_url(
    msg: str,
    path: str,
    *,
    client: SignInClient,
    launcher: Launcher = click.launch,
) -> str:
    """Sign the browser in and send it to *path*.

    Errors creating the sign-in code propagate; a browser that fails to
    launch only produces a notice. Returns the URL.
    """
    sign_in_code = client.create_sign_in_code()
    url = build_authenticated_url(client.api_host, sign_in_code, path)
    _announce(msg, url)
    _launch(url, launcher)
    return url


def open_cloud_url(
    msg: str,
    path: str,
    *,
    api_host: str,
    launcher: Launcher = click.launch,
) -> str:
    """Open *path* on the web app without signing in. Returns the URL."""
    url = build_cloud_url(api_host, path)
    _announce(msg, url)
    _launch(url, launcher)
    return url
